"""
Upload service for event images.

Validates an incoming image against the configured MIME types and size
limit, stores it under a random UUID-based name in a single flat directory,
and deletes stored files by that name. Every operation returns an
``UploadResult``; validation and filesystem failures are reported in the
result rather than raised.
"""

import io
import logging
import re
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Callable, Optional

from eventtix.core.config import Settings
from eventtix.models.upload import UploadResult
from eventtix.storage.base import StorageBackend
from eventtix.storage.local import LocalStorageBackend
from eventtix.uploads.exceptions import (
    UploadError,
    UploadErrorKind,
    UploadStorageError,
    UploadValidationError,
)
from eventtix.uploads.signatures import SIGNATURE_PROBE_BYTES, matches_signature

logger = logging.getLogger(__name__)

INVALID_TYPE_MESSAGE = "Invalid file type. Only JPEG, PNG, and WebP images are allowed."
TOO_LARGE_MESSAGE = "File size too large. Maximum size is {max_mb}MB."
UPLOAD_FAILED_MESSAGE = "Failed to upload file. Please try again."
DELETE_FAILED_MESSAGE = "Failed to delete file. Please try again."

SAFE_EXTENSION_RE = re.compile(r"\.[A-Za-z0-9]{1,10}")


@dataclass
class UploadPayload:
    """An uploaded file as received from the client."""

    file_name: str
    content_type: str
    size_bytes: int
    stream: BinaryIO

    @classmethod
    def from_bytes(cls, file_name: str, content_type: str, data: bytes) -> "UploadPayload":
        return cls(
            file_name=file_name,
            content_type=content_type,
            size_bytes=len(data),
            stream=io.BytesIO(data),
        )


def _safe_extension(file_name: str) -> str:
    """Extension of the client file name, or "" when it is not plain alphanumeric."""
    suffix = Path(file_name).suffix
    if SAFE_EXTENSION_RE.fullmatch(suffix):
        return suffix
    return ""


def _is_plain_filename(filename: str) -> bool:
    """True when *filename* names an entry directly inside the upload dir."""
    if not filename or filename in (".", ".."):
        return False
    return "/" not in filename and "\\" not in filename and "\x00" not in filename


class UploadService:
    """Stores and deletes event images in a flat upload directory."""

    def __init__(
        self,
        settings: Settings,
        backend: Optional[StorageBackend] = None,
        id_factory: Callable[[], uuid.UUID] = uuid.uuid4,
    ):
        """Initialize the service and create the upload directory.

        Args:
            settings: Application settings
            backend: Storage backend. Defaults to a local backend rooted at
                ``settings.upload_dir``.
            id_factory: Generator for stored file identifiers
        """
        self.settings = settings
        self.backend = backend or LocalStorageBackend(settings.upload_dir)
        self._id_factory = id_factory

        # Directory creation failures are not handled here
        self.backend.ensure_ready()

    async def store(self, payload: UploadPayload, owner_id: str) -> UploadResult:
        """Validate and persist an uploaded image.

        Args:
            payload: Uploaded file
            owner_id: Identifier of the owning event. Logged only; it does not
                affect where the file is stored.

        Returns:
            UploadResult with the stored filename and public URL on success
        """
        try:
            self._validate(payload)

            stored_filename = f"{self._id_factory()}{_safe_extension(payload.file_name)}"
            try:
                await self.backend.write_file(stored_filename, payload.stream)
            except OSError as e:
                logger.error(
                    f"Error uploading file: {e}",
                    extra={"owner_id": owner_id, "stored_filename": stored_filename},
                    exc_info=True,
                )
                raise UploadStorageError(
                    UploadErrorKind.IO_ERROR, UPLOAD_FAILED_MESSAGE, cause=e
                ) from e

        except UploadError as e:
            return UploadResult.from_error(e)

        logger.info(
            f"Upload completed: filename={stored_filename}, owner_id={owner_id}, "
            f"backend={self.backend.get_backend_name()}, size={payload.size_bytes}",
            extra={"owner_id": owner_id, "stored_filename": stored_filename},
        )

        return UploadResult(
            success=True,
            filename=stored_filename,
            url=self.public_url(stored_filename),
        )

    async def delete(self, filename: str) -> UploadResult:
        """Delete a previously stored file.

        Deleting a file that does not exist is reported as a failure with
        ``error_code="not_found"``.
        """
        try:
            if not _is_plain_filename(filename):
                logger.warning(f"Rejected delete of invalid filename: {filename!r}")
                raise UploadStorageError(UploadErrorKind.NOT_FOUND, DELETE_FAILED_MESSAGE)

            try:
                await self.backend.delete_file(filename)
            except FileNotFoundError as e:
                logger.warning(f"Error deleting file: {filename} does not exist")
                raise UploadStorageError(
                    UploadErrorKind.NOT_FOUND, DELETE_FAILED_MESSAGE, cause=e
                ) from e
            except OSError as e:
                logger.error(f"Error deleting file {filename}: {e}", exc_info=True)
                raise UploadStorageError(
                    UploadErrorKind.IO_ERROR, DELETE_FAILED_MESSAGE, cause=e
                ) from e

        except UploadError as e:
            return UploadResult.from_error(e)

        logger.info(f"Deleted file: {filename}")
        return UploadResult(success=True, filename=filename)

    def public_url(self, filename: str) -> str:
        """Public-relative URL under which a stored file is served."""
        return f"{self.settings.url_prefix}/{filename}"

    def _validate(self, payload: UploadPayload) -> None:
        """Check declared type, size and (optionally) magic bytes.

        Raises:
            UploadValidationError: If the payload is rejected
            UploadStorageError: If the stream cannot be read for the
                signature check
        """
        content_type = (payload.content_type or "").lower()
        if content_type not in self.settings.allowed_mime_types:
            logger.info(f"Rejected upload with content type {payload.content_type!r}")
            raise UploadValidationError(UploadErrorKind.INVALID_TYPE, INVALID_TYPE_MESSAGE)

        if payload.size_bytes > self.settings.max_upload_bytes:
            logger.info(f"Rejected upload of {payload.size_bytes} bytes")
            raise UploadValidationError(
                UploadErrorKind.TOO_LARGE,
                TOO_LARGE_MESSAGE.format(max_mb=self.settings.MAX_UPLOAD_MB),
            )

        if self.settings.UPLOAD_VERIFY_SIGNATURE:
            try:
                head = payload.stream.read(SIGNATURE_PROBE_BYTES)
                payload.stream.seek(0)
            except OSError as e:
                logger.error(f"Error reading upload payload: {e}", exc_info=True)
                raise UploadStorageError(
                    UploadErrorKind.IO_ERROR, UPLOAD_FAILED_MESSAGE, cause=e
                ) from e

            if not matches_signature(content_type, head):
                logger.warning(
                    f"Upload content does not match declared type {payload.content_type!r}"
                )
                raise UploadValidationError(UploadErrorKind.INVALID_TYPE, INVALID_TYPE_MESSAGE)
