# ABOUTME: Exception hierarchy for weather lookups.
# ABOUTME: Service functions raise these; the web layer maps them to HTTP responses.


class WeatherError(Exception):
    """Base class for every failure while looking up a city's weather."""


class NetworkError(WeatherError):
    """An outbound HTTP call could not complete."""


class DecodeError(WeatherError):
    """An upstream response body was malformed or inconsistent."""


class NotFoundError(WeatherError):
    """Geocoding returned no match for the city."""


class FileError(WeatherError):
    """A view template or static page could not be read."""


class ForecastFormatError(DecodeError):
    """The forecast body could not be turned into display rows.

    Unlike the other lookup failures, its message is shown to the caller.
    """
