# ABOUTME: Runtime settings for the city weather server.
# ABOUTME: Reads CITYWEATHER_* variables from the environment (and a .env file) into a Settings model.

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
# Geocoding result language; date labels stay English regardless.
GEOCODING_LANGUAGE = "ru"

DEFAULT_VIEWS_DIR = Path(__file__).parent / "views"


class Settings(BaseModel):
    """Server bind address, upstream endpoints, and view location."""

    host: str = "localhost"
    port: int = 8080
    geocoding_url: str = GEOCODING_URL
    forecast_url: str = FORECAST_URL
    geocoding_language: str = GEOCODING_LANGUAGE
    views_dir: Path = DEFAULT_VIEWS_DIR
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build Settings from CITYWEATHER_* environment variables, falling back to defaults."""
    load_dotenv()

    overrides = {}
    for field in Settings.model_fields:
        value = os.environ.get(f"CITYWEATHER_{field.upper()}")
        if value:
            overrides[field] = value
    return Settings(**overrides)
