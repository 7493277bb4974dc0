"""Tests for the upload API routes."""

import io
from unittest.mock import AsyncMock, patch

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00"


def test_upload_valid_image(client, upload_dir):
    """Test uploading a valid image."""
    files = {"image": ("a.png", io.BytesIO(PNG_BYTES), "image/png")}

    response = client.post("/api/v1/events/event-123/upload-image", files=files)

    assert response.status_code == 200
    json_data = response.json()
    assert json_data["success"] is True
    assert json_data["filename"].endswith(".png")
    assert json_data["url"] == f"/uploads/{json_data['filename']}"
    assert (upload_dir / json_data["filename"]).read_bytes() == PNG_BYTES


def test_uploaded_image_is_served(client):
    """Test that the returned url serves the stored bytes."""
    files = {"image": ("a.png", io.BytesIO(PNG_BYTES), "image/png")}
    url = client.post("/api/v1/events/event-123/upload-image", files=files).json()["url"]

    response = client.get(url)

    assert response.status_code == 200
    assert response.content == PNG_BYTES


def test_upload_missing_image(client):
    """Test upload without an image field."""
    response = client.post("/api/v1/events/event-123/upload-image", data={"other": "x"})

    assert response.status_code == 400
    assert response.json()["detail"] == "No image file provided"


def test_upload_invalid_mime_type(client, upload_dir):
    """Test upload with a disallowed MIME type."""
    files = {"image": ("notes.txt", io.BytesIO(b"hello"), "text/plain")}

    response = client.post("/api/v1/events/event-123/upload-image", files=files)

    assert response.status_code == 400
    json_data = response.json()
    assert json_data["success"] is False
    assert "Invalid file type" in json_data["error"]
    assert json_data["error_code"] == "invalid_type"
    assert list(upload_dir.iterdir()) == []


def test_upload_oversized_file(client, upload_dir):
    """Test upload with a file exceeding the size limit."""
    file_content = b"x" * (6 * 1024 * 1024)
    files = {"image": ("large.png", io.BytesIO(file_content), "image/png")}

    response = client.post("/api/v1/events/event-123/upload-image", files=files)

    assert response.status_code == 400
    json_data = response.json()
    assert "5MB" in json_data["error"]
    assert json_data["error_code"] == "too_large"
    assert list(upload_dir.iterdir()) == []


def test_upload_storage_failure(client, upload_service):
    """Test that a write failure becomes a 500 with a generic message."""
    files = {"image": ("a.png", io.BytesIO(PNG_BYTES), "image/png")}

    with patch.object(
        upload_service.backend, "write_file", AsyncMock(side_effect=OSError("disk full"))
    ):
        response = client.post("/api/v1/events/event-123/upload-image", files=files)

    assert response.status_code == 500
    json_data = response.json()
    assert json_data["error"] == "Failed to upload file. Please try again."
    assert json_data["error_code"] == "io_error"


def test_delete_upload(client, upload_dir):
    """Test deleting a stored upload."""
    files = {"image": ("a.png", io.BytesIO(PNG_BYTES), "image/png")}
    filename = client.post("/api/v1/events/event-123/upload-image", files=files).json()["filename"]

    response = client.delete(f"/api/v1/uploads/{filename}")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "filename": filename,
        "url": None,
        "error": None,
        "error_code": None,
    }
    assert not (upload_dir / filename).exists()


def test_delete_missing_upload(client):
    """Test deleting a file that does not exist."""
    response = client.delete("/api/v1/uploads/missing.png")

    assert response.status_code == 404
    json_data = response.json()
    assert json_data["success"] is False
    assert json_data["error"] == "Failed to delete file. Please try again."
    assert json_data["error_code"] == "not_found"
