"""Local filesystem storage backend."""

import asyncio
import logging
from pathlib import Path
from typing import BinaryIO

from eventtix.storage.base import StorageBackend

logger = logging.getLogger(__name__)

CHUNK_SIZE = 65536  # 64KB chunks


class LocalStorageBackend(StorageBackend):
    """Stores every file in one flat directory on the local filesystem."""

    def __init__(self, base_path: Path):
        self.base_path = Path(base_path)

    def ensure_ready(self) -> None:
        """Create the upload directory (with parents) if it does not exist."""
        if not self.base_path.exists():
            self.base_path.mkdir(parents=True, exist_ok=True)
            logger.info(f"Created upload directory: {self.base_path}")

    def get_target_path(self, filename: str) -> str:
        return str(self.base_path / filename)

    async def write_file(self, filename: str, file_data: BinaryIO) -> str:
        """Write the stream to ``<base_path>/<filename>`` in a worker thread."""
        target_path = Path(self.get_target_path(filename))
        await asyncio.to_thread(self._write, target_path, file_data)
        return str(target_path)

    async def delete_file(self, filename: str) -> None:
        await asyncio.to_thread((self.base_path / filename).unlink)

    def get_backend_name(self) -> str:
        return "local"

    @staticmethod
    def _write(target_path: Path, file_data: BinaryIO) -> None:
        try:
            with open(target_path, "wb") as f:
                while chunk := file_data.read(CHUNK_SIZE):
                    f.write(chunk)
        except OSError:
            # Don't leave a truncated file behind
            target_path.unlink(missing_ok=True)
            raise
