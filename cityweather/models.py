# ABOUTME: Pydantic BaseModels for geocoding results, raw forecasts, and display rows.
# ABOUTME: Defines structured types for Open-Meteo API data and the weather page render model.

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class Coordinate(BaseModel):
    """Latitude/longitude pair in degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class GeoResponse(BaseModel):
    """Response body of the Open-Meteo geocoding endpoint."""

    results: list[Coordinate] = []

    @field_validator("results", mode="before")
    @classmethod
    def _null_results(cls, value):
        # The API omits the key or sends null when nothing matches.
        return [] if value is None else value


class HourlySeries(BaseModel):
    """Column-oriented hourly temperatures with Unix timestamps."""

    time: list[int]
    temperature_2m: list[float | None]

    @model_validator(mode="after")
    def _same_length(self):
        if len(self.time) != len(self.temperature_2m):
            raise ValueError(
                f"hourly series length mismatch: {len(self.time)} timestamps, "
                f"{len(self.temperature_2m)} temperatures"
            )
        return self


class RawForecastSeries(BaseModel):
    """Parsed response from the Open-Meteo forecast endpoint."""

    latitude: float | None = None
    longitude: float | None = None
    timezone: str | None = None
    hourly: HourlySeries


class DisplayForecast(BaseModel):
    """One rendered forecast row."""

    date: str
    temperature: str


class WeatherDisplay(BaseModel):
    """Render model for the weather results page."""

    city: str
    forecasts: list[DisplayForecast] = []
