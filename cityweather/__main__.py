# ABOUTME: Process entry point that serves the city weather app with uvicorn.
# ABOUTME: Configures logging and binds to the host and port from the environment.

import logging

import uvicorn

from cityweather.config import load_settings


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # uvicorn exits non-zero when the address cannot be bound.
    uvicorn.run("cityweather.web:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
