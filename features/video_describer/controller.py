"""
Video Describer controller — text prompt (plus an optional file name) in,
summary, keywords and key scenes out. Video content is never uploaded.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import config
from features.common import FeatureController
from features.voice.parser import strip_generic_prefix
from models.schemas import ActionType, Upload, VideoDescriberResult
from services.video import describe_video_content
from utils.uploads import UploadTooLargeError, read_video

log = logging.getLogger(__name__)

SET_INPUT_PHRASE = ActionType.SET_INPUT.value.replace("_", " ").lower()  # "set input"
SUBMIT_PROMPT_PHRASE = ActionType.SUBMIT_VIDEO_PROMPT.value.replace("_", " ").lower()

INPUT_PREFIXES = ("set prompt to", "set input to", "input prompt", SET_INPUT_PHRASE)
SUBMIT_PHRASES = (SUBMIT_PROMPT_PHRASE, "describe video", "summarize video")
PROMPT_PREFIXES = ("describe video ", "summarize video ")


class VideoDescriberController(FeatureController[VideoDescriberResult]):
    name = "video"

    def __init__(
        self,
        describe: Callable[[str], VideoDescriberResult] = describe_video_content,
        max_size_mb: int | None = None,
    ):
        super().__init__()
        self._describe = describe
        self.max_size_mb = config.MAX_VIDEO_SIZE_MB if max_size_mb is None else max_size_mb
        self.upload: Upload | None = None
        self.prompt = ""

    @property
    def can_submit(self) -> bool:
        return bool(self.prompt.strip()) and not self.is_loading

    def select_file(self, filename: str, size: int, mime_type: str = "") -> bool:
        """Record a video's metadata if it fits the size cap."""
        try:
            upload = read_video(filename, size, mime_type, max_mb=self.max_size_mb)
        except UploadTooLargeError:
            self.error = f"Video file is too large. Max size: {self.max_size_mb}MB."
            self.upload = None
            return False
        self.upload = upload
        if not self.prompt:
            self.prompt = (
                f'Describe potential content or generate ideas for a video titled "{filename}".'
            )
        self.error = None
        return True

    def set_prompt(self, prompt: str) -> None:
        self.prompt = prompt

    def full_prompt(self) -> str:
        if self.upload:
            return f'For a video titled "{self.upload.filename}", consider the following: {self.prompt}'
        return self.prompt

    def submit(self) -> VideoDescriberResult | None:
        if not self.prompt.strip():
            self.error = "Please enter a description or topic for the video content."
            return None
        prompt = self.full_prompt()
        return self._run(lambda: self._describe(prompt))

    def handle_voice_command(self, transcript: str) -> None:
        lower = transcript.lower()

        for prefix in INPUT_PREFIXES:
            if lower.startswith(prefix):
                self.set_prompt(transcript[len(prefix):].strip())
                return

        if any(phrase in lower for phrase in SUBMIT_PHRASES):
            prompt = self.prompt
            for prefix in PROMPT_PREFIXES:
                if lower.startswith(prefix) and len(lower) > len(prefix):
                    prompt = transcript[len(prefix):].strip()
                    break
            self.set_prompt(prompt)
            if not prompt.strip():
                self.error = "Please provide a prompt for the video via text or voice."
                return
            self.submit()
            return

        dictated = strip_generic_prefix(transcript)
        self.set_prompt(transcript if dictated is None else dictated)

    def state(self) -> dict[str, Any]:
        return {
            **super().state(),
            "prompt": self.prompt,
            "file": {"name": self.upload.filename, "size": self.upload.size} if self.upload else None,
        }
