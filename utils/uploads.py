"""
Upload guard — size checks and base64 encoding for image/video inputs.
"""

from __future__ import annotations

import base64
import logging

import config
from models.schemas import Upload

log = logging.getLogger(__name__)

BYTES_PER_MB = 1024 * 1024


class UploadTooLargeError(ValueError):
    """Raised when a file exceeds the configured size cap."""

    def __init__(self, filename: str, size: int, max_mb: int):
        self.filename = filename
        self.size = size
        self.max_mb = max_mb
        super().__init__(f"File is too large. Max size: {max_mb}MB.")


def max_bytes(max_mb: int) -> int:
    return max_mb * BYTES_PER_MB


def check_size(filename: str, size: int, max_mb: int) -> None:
    """Reject files strictly larger than ``max_mb`` megabytes."""
    if size > max_bytes(max_mb):
        log.warning("Rejected %s: %d bytes exceeds %dMB", filename, size, max_mb)
        raise UploadTooLargeError(filename, size, max_mb)


def read_image(filename: str, mime_type: str, data: bytes, max_mb: int | None = None) -> Upload:
    """Size-check an image and encode it for inline transmission."""
    max_mb = config.MAX_IMAGE_SIZE_MB if max_mb is None else max_mb
    check_size(filename, len(data), max_mb)
    return Upload(
        filename=filename,
        mime_type=mime_type or "application/octet-stream",
        size=len(data),
        base64_data=base64.b64encode(data).decode("utf-8"),
    )


def read_video(filename: str, size: int, mime_type: str = "", max_mb: int | None = None) -> Upload:
    """Size-check a video; only its metadata is kept."""
    max_mb = config.MAX_VIDEO_SIZE_MB if max_mb is None else max_mb
    check_size(filename, size, max_mb)
    return Upload(filename=filename, mime_type=mime_type, size=size)
