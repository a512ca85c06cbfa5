"""
Image Describer controller — uploads an image and requests alt text for it.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import config
from features.common import FeatureController
from models.schemas import ActionType, ImageAnalysisResult, Upload
from services.image import generate_image_description
from utils.uploads import UploadTooLargeError, check_size, read_image

log = logging.getLogger(__name__)

SUBMIT_PHRASES = (
    ActionType.SUBMIT_IMAGE.value.replace("_", " ").lower(),  # "submit image"
    "analyze image",
    "describe image",
)


class ImageAnalyzerController(FeatureController[ImageAnalysisResult]):
    name = "image"

    def __init__(
        self,
        describe: Callable[[str, str], ImageAnalysisResult] = generate_image_description,
        max_size_mb: int | None = None,
    ):
        super().__init__()
        self._describe = describe
        self.max_size_mb = config.MAX_IMAGE_SIZE_MB if max_size_mb is None else max_size_mb
        self.upload: Upload | None = None

    @property
    def can_submit(self) -> bool:
        return self.upload is not None and not self.is_loading

    def check_file_size(self, filename: str, size: int) -> bool:
        """Size-check an image before its content is read."""
        try:
            check_size(filename, size, self.max_size_mb)
        except UploadTooLargeError:
            self._reject()
            return False
        return True

    def select_file(self, filename: str, mime_type: str, data: bytes) -> bool:
        """Accept an image if it fits the size cap. Returns False on rejection."""
        try:
            upload = read_image(filename, mime_type, data, max_mb=self.max_size_mb)
        except UploadTooLargeError:
            self._reject()
            return False
        self.upload = upload
        self.result = None
        self.error = None
        log.info("Selected image %s (%d bytes)", filename, upload.size)
        return True

    def _reject(self) -> None:
        self.error = f"Image too large. Max size: {self.max_size_mb}MB. Please select a smaller image."
        self.upload = None

    def submit(self) -> ImageAnalysisResult | None:
        upload = self.upload
        if upload is None or not upload.base64_data:
            self.error = "Please select an image first."
            return None
        return self._run(lambda: self._describe(upload.base64_data, upload.mime_type))

    def handle_voice_command(self, transcript: str) -> None:
        lower = transcript.lower()
        if any(phrase in lower for phrase in SUBMIT_PHRASES):
            self.submit()

    def state(self) -> dict[str, Any]:
        return {
            **super().state(),
            "file": {"name": self.upload.filename, "size": self.upload.size} if self.upload else None,
        }
