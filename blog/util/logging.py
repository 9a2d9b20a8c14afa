"""Standard library logging for third-party libraries.

Application code logs through logfire; uvicorn, SQLAlchemy, asyncpg and alembic
use ``logging`` and are configured here.
"""

import logging
import sys

from blog.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Loggers that are too chatty at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "asyncpg", "uvicorn.access")


def level_for(settings: Settings) -> int:
    """Root log level for an environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger.

    Args:
        settings: Application settings
    """
    level = level_for(settings)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    # SQL echo is controlled by the engine's ``echo`` flag, not the root level
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )
    logging.getLogger("blog").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
