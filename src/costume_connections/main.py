"""Command-line entrypoint serving the site with uvicorn."""

import logging

import uvicorn

from costume_connections.api.app import create_app
from costume_connections.app_logging import configure_logging
from costume_connections.config import Settings
from costume_connections.containers import build_container

logger = logging.getLogger(__name__)


def main() -> None:
    """Build the app from the environment and serve it."""
    settings = Settings()
    configure_logging()
    app = create_app(build_container(settings))
    logger.info("Listening on http://localhost:%s", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
