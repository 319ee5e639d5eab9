# ABOUTME: Dependency container for the weather routes using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient and Settings used to call the Open-Meteo APIs.

import httpx
from pydantic import BaseModel, ConfigDict, Field

from cityweather.config import Settings


class WeatherDeps(BaseModel):
    """Dependencies shared by every request handled by the app."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    settings: Settings = Field(default_factory=Settings)


def create_http_client() -> httpx.AsyncClient:
    """Create a plain httpx client; lookups are single-attempt with the default timeout."""
    return httpx.AsyncClient()
