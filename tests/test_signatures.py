"""Tests for image signature matching."""

import pytest

from eventtix.uploads.signatures import matches_signature


@pytest.mark.parametrize(
    "content_type,head",
    [
        ("image/png", b"\x89PNG\r\n\x1a\n\x00\x00\x00\x0d"),
        ("image/jpeg", b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01"),
        ("image/jpg", b"\xff\xd8\xff\xdb\x00\x43"),
        ("image/webp", b"RIFF\x24\x00\x00\x00WEBP"),
        ("IMAGE/PNG", b"\x89PNG\r\n\x1a\n"),
    ],
)
def test_matching_signatures(content_type, head):
    assert matches_signature(content_type, head)


@pytest.mark.parametrize(
    "content_type,head",
    [
        ("image/png", b"\xff\xd8\xff\xe0"),
        ("image/jpeg", b"\x89PNG\r\n\x1a\n"),
        ("image/webp", b"RIFF\x24\x00\x00\x00WAVE"),
        ("image/webp", b"RIFF"),
        ("image/gif", b"GIF89a"),
        ("image/png", b""),
    ],
)
def test_mismatched_signatures(content_type, head):
    assert not matches_signature(content_type, head)
