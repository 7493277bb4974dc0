"""Abstract storage backend interface."""

from abc import ABC, abstractmethod
from typing import BinaryIO


class StorageBackend(ABC):
    """Abstract base class for storage backends."""

    @abstractmethod
    def ensure_ready(self) -> None:
        """Prepare the backend for writes. Must be idempotent."""
        pass

    @abstractmethod
    def get_target_path(self, filename: str) -> str:
        """Generate target storage path.

        Args:
            filename: Stored (generated) file name

        Returns:
            Target path for the file
        """
        pass

    @abstractmethod
    async def write_file(self, filename: str, file_data: BinaryIO) -> str:
        """Persist the full content of a stream.

        Args:
            filename: Stored (generated) file name
            file_data: File content stream

        Returns:
            Final storage path

        Raises:
            OSError: If reading the stream or writing the file fails
        """
        pass

    @abstractmethod
    async def delete_file(self, filename: str) -> None:
        """Remove a stored file.

        Raises:
            FileNotFoundError: If no file with that name exists
            OSError: If the file cannot be removed
        """
        pass

    @abstractmethod
    def get_backend_name(self) -> str:
        """Return backend identifier."""
        pass
