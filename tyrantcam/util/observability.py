"""Logfire setup and instrumentation.

Services log straight through logfire:

    logfire.info("Vote cast", tyrant_id=str(tyrant_id))

    with logfire.span("vote_service.cast_vote", tyrant_id=str(tyrant_id)):
        ...

Visitor identity never leaves the process in full: fingerprints are logged as
a short prefix, and attribute names that could carry secrets or raw digests
are scrubbed before export.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from tyrantcam.config import Settings

SERVICE_NAME = "tyrantcam-backend"
SERVICE_VERSION = "0.1.0"

# Attribute names redacted on top of logfire's defaults (password, token, ...)
SCRUBBED_ATTRIBUTES = ["fingerprint_hash", "admin_token", "client_ip", "x_forwarded_for"]


def _should_send(settings: Settings) -> bool:
    """Explicit setting wins; otherwise send only when a token is configured."""
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once per process.

    Set OBSERVABILITY__LOGFIRE_TOKEN to export to Logfire cloud, and
    OBSERVABILITY__SEND_TO_LOGFIRE=false to keep a token but stay local.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send_to_logfire,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUBBED_ATTRIBUTES),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        git_sha=settings.git_sha,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request without recording who made it.

    Headers and client addresses are excluded from span attributes; the
    address is the raw material of the vote fingerprint.

    Args:
        app: FastAPI application instance
    """

    def _request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements, including the vote ledger savepoints.

    Args:
        engine: Async engine created by the persistence provider
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,
    )
    logfire.info("SQLAlchemy instrumented")
