import json
from typing import Any, Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app

TEST_KEY = "test-key"

OK_RESPONSE = {
    "status": "OK",
    "routes": [
        {
            "legs": [
                {
                    "distance": {"text": "5 km", "value": 5000},
                    "duration": {"text": "10 mins", "value": 600},
                }
            ]
        }
    ],
}

VALID_BODY = {
    "origin": {"lat": 24.7136, "lng": 46.6753},
    "destination": {"lat": 24.7743, "lng": 46.7386},
}


class FakeDirections:
    """
    Proveedor falso: registra cada request y responde con lo que se le
    configure (dict -> JSON, o un callable que recibe el request).
    """

    def __init__(self, response: Any = OK_RESPONSE):
        self.response = response
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if callable(self.response):
            return self.response(request)
        return httpx.Response(200, content=json.dumps(self.response).encode())

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_directions() -> FakeDirections:
    return FakeDirections()


@pytest.fixture
def make_client(fake_directions) -> Callable[..., TestClient]:
    def _make(api_key: Any = TEST_KEY, **overrides) -> TestClient:
        settings = Settings(google_maps_api_key=api_key, **overrides)
        app = create_app(settings, transport=fake_directions.transport)
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
