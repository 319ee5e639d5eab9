# ABOUTME: ASGI web entry point for the city weather lookup pages.
# ABOUTME: Creates a Starlette app serving the landing page and the /weather results template.

import logging
from contextlib import asynccontextmanager

from jinja2 import TemplateError
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, PlainTextResponse, Response
from starlette.routing import Route
from starlette.templating import Jinja2Templates

from cityweather.config import load_settings
from cityweather.deps import WeatherDeps, create_http_client
from cityweather.errors import FileError, ForecastFormatError, WeatherError
from cityweather.weather_service import lookup_weather

logger = logging.getLogger(__name__)

INDEX_PAGE = "index.html"
WEATHER_PAGE = "weather.html"

FILE_ERROR_MESSAGE = "failed to open file"
LOOKUP_ERROR_MESSAGE = "internal server error"


def _error(message: str, status_code: int = 500) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status_code)


async def home(request: Request) -> Response:
    """Serve the static landing page, read from disk on every request."""
    path = request.app.state.deps.settings.views_dir / INDEX_PAGE
    try:
        content = path.read_bytes()
    except OSError:
        logger.exception("Could not read %s", path)
        return _error(FILE_ERROR_MESSAGE)
    return HTMLResponse(content)


async def weather(request: Request) -> Response:
    """Look up the forecast for the submitted city and render the results page."""
    if request.method == "POST":
        form = await request.form()
        # Form body first, then the query string.
        city = form.get("city") or request.query_params.get("city", "")
    else:
        city = request.query_params.get("city", "")

    deps: WeatherDeps = request.app.state.deps
    try:
        display = await lookup_weather(deps, city)
    except ForecastFormatError as e:
        logger.error("Could not format forecast for %r: %s", city, e)
        return _error(str(e))
    except WeatherError as e:
        logger.warning("Weather lookup failed for %r: %s", city, e)
        return _error(LOOKUP_ERROR_MESSAGE)

    try:
        return render_weather_page(request, display.model_dump())
    except FileError:
        logger.exception("Could not render %s", WEATHER_PAGE)
        return _error(FILE_ERROR_MESSAGE)


def render_weather_page(request: Request, context: dict) -> Response:
    """Render the results template, raising FileError if it cannot be loaded."""
    templates: Jinja2Templates = request.app.state.templates
    try:
        return templates.TemplateResponse(request, WEATHER_PAGE, context)
    except (TemplateError, OSError) as e:
        raise FileError(f"could not load {WEATHER_PAGE}: {e}") from e


def create_app(deps: WeatherDeps | None = None) -> Starlette:
    """Build the Starlette app; without explicit deps, settings come from the environment."""
    if deps is None:
        deps = WeatherDeps(http_client=create_http_client(), settings=load_settings())

    @asynccontextmanager
    async def lifespan(app: Starlette):
        yield
        await deps.http_client.aclose()

    app = Starlette(
        routes=[
            Route("/", home, methods=["GET"]),
            Route("/weather", weather, methods=["GET", "POST"]),
        ],
        lifespan=lifespan,
    )
    app.state.deps = deps
    app.state.templates = Jinja2Templates(directory=deps.settings.views_dir)
    return app


app = create_app()
