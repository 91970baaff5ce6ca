"""Server entry point.

Usage:
    python -m app.run
"""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from app.core.logging import setup_logging

logger = logging.getLogger("app.run")


def main() -> None:
    """Load configuration and serve the API, exiting on startup faults."""
    setup_logging()

    try:
        from app.core.config import settings
        from app.main import app
    except ValidationError as e:
        logger.critical("Invalid or missing configuration: %s", e)
        sys.exit(1)

    logger.info("Starting %s on %s:%s", settings.APP_NAME, settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level="info")


if __name__ == "__main__":
    main()
