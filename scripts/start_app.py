#!/usr/bin/env python3
"""Run the EAD comments API under uvicorn.

Logfire is configured before the app module is imported so that failures
while building the app are reported too.
"""

import sys

import logfire
import uvicorn

from ead.config import Settings
from ead.util.logging import log_level
from ead.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    logfire.info(
        "Starting EAD comments API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            "ead.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level=log_level(settings),
        )
    except Exception as e:
        logfire.error(
            "EAD comments API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
