"""
Magic-byte signatures for the accepted image formats.

Only used when UPLOAD_VERIFY_SIGNATURE is enabled. Otherwise the declared
content type of an upload is trusted as is.
"""

from typing import Callable, Dict

# Number of leading bytes needed to recognise every supported format
SIGNATURE_PROBE_BYTES = 12


def _is_jpeg(head: bytes) -> bool:
    return head.startswith(b"\xff\xd8\xff")


def _is_png(head: bytes) -> bool:
    return head.startswith(b"\x89PNG\r\n\x1a\n")


def _is_webp(head: bytes) -> bool:
    return len(head) >= 12 and head[:4] == b"RIFF" and head[8:12] == b"WEBP"


MIME_SIGNATURE_MAP: Dict[str, Callable[[bytes], bool]] = {
    "image/jpeg": _is_jpeg,
    "image/jpg": _is_jpeg,
    "image/png": _is_png,
    "image/webp": _is_webp,
}


def matches_signature(content_type: str, head: bytes) -> bool:
    """Check that *head* starts with the signature of *content_type*.

    Unknown content types never match.
    """
    checker = MIME_SIGNATURE_MAP.get(content_type.lower())
    if checker is None:
        return False
    return checker(head)
