#!/usr/bin/env python3
"""Start the Lingo API under uvicorn.

Logging and Logfire are configured here, before the app module is
imported, so startup failures are reported too.
"""

import sys

import logfire
import uvicorn

from lingo.config import Settings
from lingo.util.logging import setup_logging
from lingo.util.observability import configure_logfire


def main() -> int:
    """Configure observability and serve the app until shutdown."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting Lingo API",
        port=settings.port,
        environment=settings.environment,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            "lingo.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            reload=settings.environment == "development",
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
