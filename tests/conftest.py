"""Pytest configuration and shared fixtures."""

import os
import tempfile

# Keep the module-level app from creating ./uploads in the working directory
os.environ.setdefault("UPLOAD_PATH", tempfile.mkdtemp(prefix="eventtix-uploads-"))

import pytest
from fastapi.testclient import TestClient

from eventtix.core.config import Settings
from eventtix.main import create_app
from eventtix.uploads.service import UploadService


@pytest.fixture
def upload_dir(tmp_path):
    """Upload directory inside the test's temporary path."""
    return tmp_path / "uploads"


@pytest.fixture
def upload_settings(upload_dir):
    """Settings pointing at a fresh upload directory."""
    return Settings(UPLOAD_PATH=str(upload_dir))


@pytest.fixture
def upload_service(upload_settings):
    """Upload service writing to the temporary upload directory."""
    return UploadService(upload_settings)


@pytest.fixture
def client(upload_settings, upload_service):
    """Test client for an app wired to the temporary upload directory."""
    app = create_app(upload_settings, upload_service=upload_service)
    return TestClient(app)
