# ABOUTME: Service layer for Open-Meteo API calls and forecast formatting.
# ABOUTME: Handles geocoding, hourly forecast retrieval, and conversion into display rows.

import logging
from datetime import datetime

import httpx
from pydantic import ValidationError

from cityweather.config import FORECAST_URL, GEOCODING_LANGUAGE, GEOCODING_URL
from cityweather.deps import WeatherDeps
from cityweather.errors import DecodeError, ForecastFormatError, NetworkError, NotFoundError
from cityweather.models import Coordinate, DisplayForecast, GeoResponse, RawForecastSeries, WeatherDisplay

logger = logging.getLogger(__name__)

DATE_FORMAT = "%a %H:%M"
# Shown for hours the model has no reading for.
MISSING_TEMPERATURE = "n/a"


async def geocode(
    client: httpx.AsyncClient,
    city_name: str,
    *,
    url: str = GEOCODING_URL,
    language: str = GEOCODING_LANGUAGE,
) -> Coordinate:
    """Geocode a city name to the coordinates of its first Open-Meteo match."""
    params = {"name": city_name, "count": 1, "language": language, "format": "json"}
    logger.debug("Geocoding %r", city_name)
    try:
        resp = await client.get(url, params=params)
        resp.raise_for_status()
    except httpx.HTTPError as e:
        raise NetworkError(f"error making request to geocoding API: {e}") from e

    try:
        data = GeoResponse.model_validate_json(resp.content)
    except ValidationError as e:
        raise DecodeError(f"error decoding geocoding response: {e}") from e

    if not data.results:
        raise NotFoundError(f"no results found for {city_name!r}")
    return data.results[0]


async def get_forecast(
    client: httpx.AsyncClient,
    coordinate: Coordinate,
    *,
    url: str = FORECAST_URL,
) -> str:
    """Fetch the raw hourly temperature forecast for a coordinate.

    The body is returned undecoded; extract_weather_data validates its shape.
    """
    params = {
        "latitude": f"{coordinate.latitude:.6f}",
        "longitude": f"{coordinate.longitude:.6f}",
        "hourly": "temperature_2m",
        "timeformat": "unixtime",
    }
    logger.debug("Fetching forecast for %s,%s", params["latitude"], params["longitude"])
    try:
        resp = await client.get(url, params=params)
        resp.raise_for_status()
    except httpx.HTTPError as e:
        raise NetworkError(f"error making request to weather API: {e}") from e
    return resp.text


def extract_weather_data(city: str, raw_weather: str) -> WeatherDisplay:
    """Turn a raw forecast body into one display row per hour, in order.

    Timestamps are shown in the server's local time as weekday plus 24-hour clock
    (e.g. "Tue 22:13"); temperatures get one decimal and a Celsius suffix.
    Hours without a reading show MISSING_TEMPERATURE. Raises ForecastFormatError for
    invalid JSON, missing fields, unequal series, or unrepresentable timestamps.
    """
    try:
        series = RawForecastSeries.model_validate_json(raw_weather)
    except ValidationError as e:
        raise ForecastFormatError(f"error decoding weather response: {e}") from e

    try:
        forecasts = [
            DisplayForecast(
                date=datetime.fromtimestamp(t).strftime(DATE_FORMAT),
                temperature=MISSING_TEMPERATURE if temp is None else f"{temp:.1f}°C",
            )
            for t, temp in zip(series.hourly.time, series.hourly.temperature_2m)
        ]
    except (OverflowError, OSError, ValueError) as e:
        # Timestamps outside the platform's representable range.
        raise ForecastFormatError(f"error decoding weather response: {e}") from e
    return WeatherDisplay(city=city, forecasts=forecasts)


async def lookup_weather(deps: WeatherDeps, city: str) -> WeatherDisplay:
    """Geocode the city, fetch its forecast, and format it for display."""
    settings = deps.settings
    coordinate = await geocode(
        deps.http_client,
        city,
        url=settings.geocoding_url,
        language=settings.geocoding_language,
    )
    raw = await get_forecast(deps.http_client, coordinate, url=settings.forecast_url)
    return extract_weather_data(city, raw)
