# app/errors.py

from typing import Optional


class EtaError(Exception):
    """
    Error base del lookup de ETA. Todas las variantes terminan en la misma
    respuesta {"error": message}; solo cambia el mensaje.
    """
    kind = "unexpected"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(EtaError):
    kind = "configuration"


class ValidationError(EtaError):
    kind = "validation"


class UpstreamError(EtaError):
    kind = "upstream"

    def __init__(self, status: Optional[str]):
        super().__init__(f"Directions API failed with status: {status}")
        self.status = status


class MalformedUpstreamResponse(EtaError):
    kind = "malformed_upstream"


class UnexpectedError(EtaError):
    kind = "unexpected"

    @classmethod
    def from_exception(cls, exc: BaseException) -> "UnexpectedError":
        # Algunos errores de httpx traen mensaje vacío
        message = str(exc) or exc.__class__.__name__
        err = cls(message)
        err.__cause__ = exc
        return err
