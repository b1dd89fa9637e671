# app/services/directions_client.py

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from app.config import Settings
from app.errors import MalformedUpstreamResponse, UpstreamError
from app.models import (
    DirectionsLeg,
    DirectionsResponse,
    DirectionsRoute,
    EtaResponse,
    LatLng,
)

logger = logging.getLogger(__name__)


class DirectionsClient:
    """
    Adaptador para la Directions API de Google.
    Arma la URL, hace un solo GET (sin reintentos) y regresa el JSON crudo.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str,
        language: str,
        timeout_s: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.language = language
        self.timeout_s = timeout_s
        self._transport = transport  # para tests (httpx.MockTransport)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "DirectionsClient":
        return cls(
            api_key=settings.google_maps_api_key,
            base_url=settings.directions_api_url,
            language=settings.language,
            timeout_s=settings.timeout_s,
            transport=transport,
        )

    def build_params(self, origin: LatLng, destination: LatLng) -> Dict[str, str]:
        return {
            "origin": origin.as_param(),
            "destination": destination.as_param(),
            "key": self.api_key or "",
            "language": self.language,
        }

    async def fetch_directions(self, origin: LatLng, destination: LatLng) -> Any:
        params = self.build_params(origin, destination)

        # Nunca loggear la key
        logger.info(
            "Directions request origin=%s destination=%s language=%s",
            params["origin"],
            params["destination"],
            params["language"],
        )

        async with httpx.AsyncClient(
            timeout=self.timeout_s,
            transport=self._transport,
        ) as client:
            resp = await client.get(self.base_url, params=params)

        return resp.json()


def _validate(model, data: Any, where: str):
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        loc = ".".join([where] + [str(part) for part in first["loc"]])
        raise MalformedUpstreamResponse(
            f"Malformed Directions API response at {loc}: {first['msg']}"
        ) from e


def extract_first_leg(data: Any) -> EtaResponse:
    """
    Valida el status del proveedor y toma routes[0].legs[0].
    Lanza UpstreamError si el status no es "OK" y MalformedUpstreamResponse
    si la forma de la respuesta no trae ruta/tramo.
    Las rutas y tramos alternativos no se revisan.
    """
    status = data.get("status") if isinstance(data, dict) else None
    if status != "OK":
        raise UpstreamError(status)

    parsed = _validate(DirectionsResponse, data, "response")
    if not parsed.routes:
        raise MalformedUpstreamResponse("Directions API response has no routes.")

    route = _validate(DirectionsRoute, parsed.routes[0], "routes.0")
    if not route.legs:
        raise MalformedUpstreamResponse("Directions API route has no legs.")

    leg = _validate(DirectionsLeg, route.legs[0], "routes.0.legs.0")
    return EtaResponse(distance=leg.distance.text, duration=leg.duration.text)
