"""Main entry point for the Lodge Rates API."""

import sys

import uvicorn

from lodge_rates.api import create_app
from lodge_rates.config import configure_logging, get_logger, settings

logger = get_logger(__name__)


def run() -> int:
    """Serve the API until interrupted.

    Returns:
        Exit code
    """
    configure_logging()
    logger.info(
        "Starting Lodge Rates API",
        environment=settings.environment,
        host=settings.server.host,
        port=settings.server.port,
    )

    try:
        app = create_app(settings)
    except Exception as e:
        logger.error(
            "Failed to create application",
            error=str(e),
            exc_info=True,
        )
        return 1

    uvicorn.run(
        app,
        host=settings.server.host,
        port=settings.server.port,
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(run())
