"""FastAPI application factory and the module-level app served by uvicorn."""

from typing import Optional

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tyrantcam.config import Settings, check_production_settings
from tyrantcam.interface.api.routes import admin, health, submissions, tyrants, votes
from tyrantcam.util.di.container import create_container, setup_di
from tyrantcam.util.observability import instrument_fastapi

ROUTERS = (health.router, tyrants.router, votes.router, submissions.router, admin.router)


def create_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """Assemble the API.

    Logfire has to be configured before this is called; scripts/start_app.py
    and the test conftest both do so.

    Args:
        container: Prebuilt container, e.g. one with in-memory persistence.
            The production container is created when omitted.

    Raises:
        ConfigurationError: If production runs with development secrets
    """
    settings = Settings()
    check_production_settings(settings)

    app_instance = FastAPI(
        title="TyrantCam API",
        description="Public accountability board with shame votes and a moderated report queue",
        version="0.1.0",
    )
    instrument_fastapi(app_instance)

    # Credentials are needed for the admin cookie, so origins must be explicit
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    for router in ROUTERS:
        app_instance.include_router(router)

    return app_instance


app = create_app()
