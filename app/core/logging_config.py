"""
Logging setup.

Configures the root logger once at application start-up.
"""

import logging
import sys

from app.core.config import settings


def configure_logging(level: str | None = None) -> None:
    """Attach a stdout handler to the root logger at ``LOG_LEVEL``."""
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    logging.basicConfig(level=log_level, handlers=[handler])

    if not settings.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
