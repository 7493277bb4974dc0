"""Upload data models."""

from typing import Optional

from pydantic import BaseModel

from eventtix.uploads.exceptions import UploadError


class UploadResult(BaseModel):
    """Uniform result of store and delete operations."""

    success: bool
    filename: Optional[str] = None
    url: Optional[str] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @classmethod
    def from_error(cls, exc: UploadError) -> "UploadResult":
        """Render an upload exception as a failed result."""
        return cls(success=False, error=exc.message, error_code=exc.kind.value)
