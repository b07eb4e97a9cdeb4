"""Process entry point for the mood tracker."""

import logging

import uvicorn

from mood_tracker.app_logging import configure_logging
from mood_tracker.config import Settings


def main() -> None:
    """Run the HTTP server with settings from the environment."""
    settings = Settings()
    configure_logging(settings.log_level)
    logging.getLogger(__name__).info("Starting mood service")
    uvicorn.run(
        "mood_tracker.api.asgi:app",
        host=settings.http_host,
        port=settings.http_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
