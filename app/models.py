# app/models.py
from pydantic import BaseModel
from typing import Any, List


class LatLng(BaseModel):
    # Sin validación numérica: se reenvía tal cual al proveedor
    lat: Any = None
    lng: Any = None

    def as_param(self) -> str:
        return f"{self.lat},{self.lng}"


# --------- RESPONSE DEL ENDPOINT ---------

class EtaResponse(BaseModel):
    distance: str
    duration: str


class ErrorResponse(BaseModel):
    error: str


# --------- RESPUESTA DE GOOGLE DIRECTIONS ---------
# Solo se valida lo que se usa: routes[0].legs[0]

class TextValue(BaseModel):
    text: str


class DirectionsLeg(BaseModel):
    distance: TextValue
    duration: TextValue


class DirectionsRoute(BaseModel):
    legs: List[Any] = []


class DirectionsResponse(BaseModel):
    status: str
    routes: List[Any] = []
