"""Main application entrypoint for the event image upload service."""

from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from eventtix.api.middleware import HTTPErrorLoggingMiddleware
from eventtix.api.v1 import routes_health
from eventtix.api.v1.routes_upload import router as upload_router
from eventtix.core.config import Settings, settings
from eventtix.core.logging import setup_logging
from eventtix.uploads.service import UploadService


def create_app(
    app_settings: Optional[Settings] = None,
    upload_service: Optional[UploadService] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        app_settings: Settings to build the app from. Defaults to the
            process-wide settings.
        upload_service: Pre-built upload service. Defaults to one
            constructed from ``app_settings``.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app_settings = app_settings or settings

    # Initialize logging first
    setup_logging(app_settings)

    app = FastAPI(
        title=app_settings.SERVICE_NAME,
        version=app_settings.SERVICE_VERSION,
    )

    # Creates the upload directory before it is mounted
    service = upload_service or UploadService(app_settings)
    app.state.settings = app_settings
    app.state.upload_service = service

    app.add_middleware(HTTPErrorLoggingMiddleware)

    app.include_router(routes_health.router, tags=["health"])
    app.include_router(upload_router)

    if app_settings.SERVE_UPLOADS:
        # Served from where the service builds its URLs
        app.mount(
            service.settings.url_prefix,
            StaticFiles(directory=str(service.settings.upload_dir)),
            name="uploads",
        )

    return app


# Export app instance for ASGI servers
app = create_app()
