"""Configuration management for the event image upload service."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    ENV: str = "local"
    SERVICE_NAME: str = "eventtix-uploads"
    SERVICE_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"

    # Storage Configuration
    UPLOAD_PATH: str = "uploads"  # Relative to the process working directory
    UPLOAD_URL_PREFIX: str = "/uploads"
    SERVE_UPLOADS: bool = True

    # Upload Constraints
    MAX_UPLOAD_MB: int = 5
    ALLOWED_UPLOAD_MIME_TYPES: str = "image/jpeg,image/jpg,image/png,image/webp"
    UPLOAD_VERIFY_SIGNATURE: bool = False  # Declared MIME type is trusted unless enabled

    @property
    def upload_dir(self) -> Path:
        """Resolve UPLOAD_PATH against the current working directory."""
        path = Path(self.UPLOAD_PATH)
        if path.is_absolute():
            return path
        return Path.cwd() / path

    @property
    def allowed_mime_types(self) -> list[str]:
        """Parse ALLOWED_UPLOAD_MIME_TYPES into a list."""
        return [
            mt.strip().lower()
            for mt in self.ALLOWED_UPLOAD_MIME_TYPES.split(",")
            if mt.strip()
        ]

    @property
    def max_upload_bytes(self) -> int:
        """Convert MAX_UPLOAD_MB to bytes."""
        return self.MAX_UPLOAD_MB * 1024 * 1024

    @property
    def url_prefix(self) -> str:
        """URL prefix without a trailing slash."""
        return "/" + self.UPLOAD_URL_PREFIX.strip("/")


@lru_cache
def get_settings() -> Settings:
    """Return the process settings instance."""
    return Settings()


# Singleton settings instance
settings = get_settings()
