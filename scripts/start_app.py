#!/usr/bin/env python3
"""Serve the blog API with uvicorn.

Logging and Logfire are configured here, before the app factory runs, so
configuration errors raised by ``create_app`` are reported too.
"""

import sys

import logfire
import uvicorn

from blog.config import Settings
from blog.util.logging import setup_logging
from blog.util.observability import configure_logfire

APP_FACTORY = "blog.interface.api.app:create_app"


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    reload = settings.environment == "development" and settings.debug
    logfire.info(
        "Starting blog API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
        reload=reload,
    )

    try:
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host=settings.host,
            port=settings.port,
            reload=reload,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Blog API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
