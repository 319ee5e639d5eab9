# ABOUTME: Shared test fixtures for the city weather test suite.
# ABOUTME: Provides canned Open-Meteo payloads and a mock-transport app client factory.

import json
from collections.abc import Callable

import httpx
import pytest
from starlette.testclient import TestClient

from cityweather.config import Settings
from cityweather.deps import WeatherDeps
from cityweather.web import create_app

PARIS_GEOCODE = {"results": [{"latitude": 48.8566, "longitude": 2.3522}]}
PARIS_FORECAST = {"hourly": {"time": [1700000000], "temperature_2m": [12.3]}}


@pytest.fixture
def paris_geocode() -> dict:
    return PARIS_GEOCODE


@pytest.fixture
def paris_forecast() -> str:
    return json.dumps(PARIS_FORECAST)


@pytest.fixture
def make_client() -> Callable[..., TestClient]:
    """Build a TestClient whose outbound calls go to a mock Open-Meteo handler.

    Requests to the geocoding host get `geocode`; everything else gets `forecast`.
    Either may be a callable raising an httpx error to simulate a transport failure.
    """

    def factory(geocode=PARIS_GEOCODE, forecast=json.dumps(PARIS_FORECAST), settings: Settings | None = None):
        settings = settings or Settings()
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            body = geocode if request.url.host == httpx.URL(settings.geocoding_url).host else forecast
            if callable(body):
                return body(request)
            if isinstance(body, str):
                return httpx.Response(200, text=body)
            return httpx.Response(200, json=body)

        deps = WeatherDeps(http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)), settings=settings)
        client = TestClient(create_app(deps))
        client.upstream_calls = calls
        return client

    return factory
