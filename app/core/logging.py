"""Logging configuration."""

import logging
import os
from typing import Optional

# Third-party loggers that log every outbound request at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "openai")


def setup_logging(level: Optional[str] = None) -> None:
    """Configure application logging.

    Args:
        level: Log level name. Defaults to the LOG_LEVEL env var, then INFO.
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
