# app/config.py

import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel

DEFAULT_DIRECTIONS_API_URL = "https://maps.googleapis.com/maps/api/directions/json"
DEFAULT_LANGUAGE = "ar"


class Settings(BaseModel):
    """
    Configuración del proceso. Se lee una sola vez al arrancar y no se
    modifica mientras se atienden requests.
    """
    model_config = {"frozen": True}

    google_maps_api_key: Optional[str] = None
    directions_api_url: str = DEFAULT_DIRECTIONS_API_URL
    language: str = DEFAULT_LANGUAGE
    timeout_s: Optional[float] = None  # None = sin timeout
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv(find_dotenv(usecwd=True))

        raw_timeout = os.getenv("DIRECTIONS_TIMEOUT")
        timeout_s = float(raw_timeout) if raw_timeout else None

        return cls(
            google_maps_api_key=os.getenv("GOOGLE_MAPS_API_KEY") or None,
            directions_api_url=os.getenv("DIRECTIONS_API_URL", DEFAULT_DIRECTIONS_API_URL),
            language=os.getenv("DIRECTIONS_LANGUAGE", DEFAULT_LANGUAGE),
            timeout_s=timeout_s,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
