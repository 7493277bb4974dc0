"""Upload API routes."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Request, Response, UploadFile

from eventtix.models.upload import UploadResult
from eventtix.uploads.exceptions import UploadErrorKind
from eventtix.uploads.service import UploadPayload, UploadService

router = APIRouter(prefix="/api/v1", tags=["upload"])
logger = logging.getLogger(__name__)

ERROR_STATUS_MAP = {
    UploadErrorKind.INVALID_TYPE.value: 400,
    UploadErrorKind.TOO_LARGE.value: 400,
    UploadErrorKind.NOT_FOUND.value: 404,
    UploadErrorKind.IO_ERROR.value: 500,
}


def get_upload_service(request: Request) -> UploadService:
    """Return the upload service attached to the application."""
    return request.app.state.upload_service


def _status_for(result: UploadResult) -> int:
    if result.success:
        return 200
    return ERROR_STATUS_MAP.get(result.error_code, 500)


@router.post("/events/{event_id}/upload-image", response_model=UploadResult)
async def upload_event_image(
    event_id: str,
    response: Response,
    image: Optional[UploadFile] = File(None),
    service: UploadService = Depends(get_upload_service),
) -> UploadResult:
    """Upload an image for an event."""
    if image is None:
        logger.warning(f"Upload for event {event_id} has no image field")
        raise HTTPException(status_code=400, detail="No image file provided")

    image.file.seek(0, 2)  # Seek to end
    size_bytes = image.file.tell()
    image.file.seek(0)  # Reset to beginning

    payload = UploadPayload(
        file_name=image.filename or "",
        content_type=image.content_type or "application/octet-stream",
        size_bytes=size_bytes,
        stream=image.file,
    )
    result = await service.store(payload, owner_id=event_id)

    response.status_code = _status_for(result)
    return result


@router.delete("/uploads/{filename}", response_model=UploadResult)
async def delete_upload(
    filename: str,
    response: Response,
    service: UploadService = Depends(get_upload_service),
) -> UploadResult:
    """Delete a stored upload by its generated filename."""
    result = await service.delete(filename)
    response.status_code = _status_for(result)
    return result
