# app/api/routes_basic.py
from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/")
def root():
    return {"message": "ETA backend is running"}


@router.get("/health")
def health(request: Request):
    """
    Liveness. También avisa si falta la key de Google (el endpoint /get-eta
    sigue respondiendo, pero con error).
    """
    settings = request.app.state.settings
    return {
        "status": "ok",
        "google_maps_api_key": bool(settings.google_maps_api_key),
    }
