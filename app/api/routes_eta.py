# app/api/routes_eta.py

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.errors import UnexpectedError
from app.models import ErrorResponse, EtaResponse
from app.services.directions_client import DirectionsClient
from app.services.eta_service import EtaOutcome, resolve_eta

router = APIRouter(tags=["eta"])

# Todos los errores salen como 400, igual que la función original
ERROR_STATUS_CODE = 400

ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_directions_client(request: Request) -> DirectionsClient:
    return request.app.state.directions_client


@router.api_route(
    "/get-eta",
    methods=ANY_METHOD,
    response_model=EtaResponse,
    responses={ERROR_STATUS_CODE: {"model": ErrorResponse}},
)
async def get_eta(
    request: Request,
    client: DirectionsClient = Depends(get_directions_client),
):
    """
    Recibe {origin: {lat, lng}, destination: {lat, lng}} y regresa
    {distance, duration} del primer tramo que da Google Directions.
    """
    try:
        payload = await request.json()
    except ValueError as e:
        outcome = EtaOutcome(error=UnexpectedError.from_exception(e))
    else:
        outcome = await resolve_eta(payload, client)

    if not outcome.ok:
        body = ErrorResponse(error=outcome.error.message)
        return JSONResponse(status_code=ERROR_STATUS_CODE, content=body.model_dump())

    return JSONResponse(content=outcome.eta.model_dump())
