"""Main entry point for the flashcards API."""
import logging

import uvicorn

from dailycards.app import create_app
from dailycards.config import ensure_directories, settings
from dailycards.logging_config import setup_logging
from dailycards.monitoring import start_monitoring

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the API server."""
    # Ensure all required directories exist
    ensure_directories()

    setup_logging("Starting dailycards v0.1.0 ...")

    if settings.monitoring.enabled:
        start_monitoring(settings.monitoring.port)
        logger.info("Metrics exposed on port %d", settings.monitoring.port)

    app = create_app()
    logger.info(
        "Daily Language Card server running on http://%s:%d",
        settings.server.host, settings.server.port,
    )
    try:
        uvicorn.run(app, host=settings.server.host, port=settings.server.port, log_config=None)
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")


if __name__ == "__main__":
    main()
