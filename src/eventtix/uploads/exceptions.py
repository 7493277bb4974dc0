"""Custom exceptions for the upload service."""

from enum import Enum


class UploadErrorKind(str, Enum):
    """Machine-readable failure kinds reported in ``UploadResult.error_code``."""

    INVALID_TYPE = "invalid_type"
    TOO_LARGE = "too_large"
    NOT_FOUND = "not_found"
    IO_ERROR = "io_error"


class UploadError(Exception):
    """Base exception for upload operations."""

    def __init__(self, kind: UploadErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


class UploadValidationError(UploadError):
    """Exception raised when a payload is rejected before any I/O."""

    pass


class UploadStorageError(UploadError):
    """Exception raised when a filesystem operation fails."""

    def __init__(self, kind: UploadErrorKind, message: str, cause: OSError | None = None):
        super().__init__(kind, message)
        self.cause = cause
