#!/usr/bin/env python3
"""Run the API under uvicorn.

Logging and Logfire are configured before the app module is imported so that
import-time failures are reported too.
"""

import sys

import logfire
import uvicorn

from tyrantcam.config import Settings
from tyrantcam.util.logging import setup_logging
from tyrantcam.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting TyrantCam API",
        port=settings.port,
        environment=settings.environment,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            "tyrantcam.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            # X-Forwarded-For is only honoured behind a trusted proxy
            proxy_headers=settings.voting.trust_forwarded_for,
        )
    except Exception as e:
        logfire.exception("TyrantCam API failed to start", error_type=type(e).__name__)
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
