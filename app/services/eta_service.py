# app/services/eta_service.py

import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from app.errors import (
    ConfigurationError,
    EtaError,
    UnexpectedError,
    ValidationError,
)
from app.models import EtaResponse, LatLng
from app.services.directions_client import DirectionsClient, extract_first_leg

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EtaOutcome:
    """
    Resultado etiquetado del lookup: o trae `eta` o trae `error`, nunca ambos.
    """
    eta: Optional[EtaResponse] = None
    error: Optional[EtaError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _is_present(value: Any) -> bool:
    # Un objeto (aunque esté vacío) cuenta como presente
    if isinstance(value, (dict, list)):
        return True
    return bool(value)


def _as_coord(value: Any) -> LatLng:
    # Permisivo: si no es objeto, lat/lng quedan en None
    if isinstance(value, dict):
        return LatLng(lat=value.get("lat"), lng=value.get("lng"))
    return LatLng()


async def lookup_eta(payload: Any, client: DirectionsClient) -> EtaResponse:
    """
    Valida el payload, llama a Directions una vez y regresa distancia/duración
    del primer tramo de la primera ruta. Lanza EtaError en cualquier fallo.
    """
    # Un body `null` no se puede desestructurar; falla antes que la key
    if payload is None:
        raise ValidationError("Request body must be a JSON object, got null.")

    if not client.api_key:
        raise ConfigurationError("Google Maps API key is not set.")

    body = payload if isinstance(payload, dict) else {}
    origin = body.get("origin")
    destination = body.get("destination")

    if not _is_present(origin) or not _is_present(destination):
        raise ValidationError("Origin or destination is missing.")

    try:
        data = await client.fetch_directions(_as_coord(origin), _as_coord(destination))
    except (httpx.HTTPError, ValueError) as e:
        # red caída o cuerpo que no es JSON
        raise UnexpectedError.from_exception(e) from e

    return extract_first_leg(data)


async def resolve_eta(payload: Any, client: DirectionsClient) -> EtaOutcome:
    try:
        eta = await lookup_eta(payload, client)
    except EtaError as e:
        logger.warning("ETA lookup failed (%s): %s", e.kind, e.message)
        return EtaOutcome(error=e)
    except Exception as e:
        logger.exception("Unexpected error during ETA lookup")
        return EtaOutcome(error=UnexpectedError.from_exception(e))

    return EtaOutcome(eta=eta)
