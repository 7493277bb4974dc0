"""Health check endpoint for the upload service."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health_check(request: Request) -> dict:
    """Health check endpoint.

    Returns:
        dict: Health status response with status, service, and version fields
    """
    app_settings = request.app.state.settings
    return {
        "status": "ok",
        "service": app_settings.SERVICE_NAME,
        "version": app_settings.SERVICE_VERSION,
    }
