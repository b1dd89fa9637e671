# app/main.py
import logging
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes_basic import router as basic_router
from app.api.routes_eta import router as eta_router
from app.config import Settings
from app.services.directions_client import DirectionsClient


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Arma la app. La configuración se lee una sola vez aquí y el cliente de
    Directions queda fijo en app.state para todos los requests.
    """
    settings = settings or Settings.from_env()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not settings.google_maps_api_key:
        logging.getLogger(__name__).warning(
            "GOOGLE_MAPS_API_KEY is not set; /get-eta will answer with an error"
        )

    app = FastAPI(
        title="ETA Backend",
        version="0.1.0",
    )

    # CORS totalmente abierto
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.directions_client = DirectionsClient.from_settings(settings, transport=transport)

    # Routers
    app.include_router(basic_router)
    app.include_router(eta_router)

    return app


app = create_app()
