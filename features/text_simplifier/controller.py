"""
Text Simplifier controller — rewrites complex text in plain language.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from features.common import FeatureController
from features.voice.parser import strip_generic_prefix
from models.schemas import ActionType, TextSimplificationResult
from services.text import simplify_text

log = logging.getLogger(__name__)

SET_INPUT_PHRASE = ActionType.SET_INPUT.value.replace("_", " ").lower()  # "set input"
SUBMIT_TEXT_PHRASE = ActionType.SUBMIT_TEXT.value.replace("_", " ").lower()  # "submit text"

# Longest first: "set input to" must win over "set input"
INPUT_PREFIXES = ("simplify this text", "set input to", "input text", SET_INPUT_PHRASE)
SUBMIT_PHRASES = ("simplify text", SUBMIT_TEXT_PHRASE, "simplify this")
SIMPLIFY_PREFIX = "simplify text "


class TextSimplifierController(FeatureController[TextSimplificationResult]):
    name = "text"

    def __init__(self, simplify: Callable[[str], TextSimplificationResult] = simplify_text):
        super().__init__()
        self._simplify = simplify
        self.text = ""

    @property
    def can_submit(self) -> bool:
        return bool(self.text.strip()) and not self.is_loading

    def set_text(self, text: str) -> None:
        self.text = text

    def submit(self) -> TextSimplificationResult | None:
        if not self.text.strip():
            self.error = "Please enter some text to simplify."
            return None
        text = self.text
        return self._run(lambda: self._simplify(text))

    def handle_voice_command(self, transcript: str) -> None:
        lower = transcript.lower()

        for prefix in INPUT_PREFIXES:
            if lower.startswith(prefix):
                self.set_text(transcript[len(prefix):].strip())
                return

        if any(phrase in lower for phrase in SUBMIT_PHRASES):
            if lower.startswith(SIMPLIFY_PREFIX) and len(lower) > len(SIMPLIFY_PREFIX):
                self.set_text(transcript[len(SIMPLIFY_PREFIX):].strip())
            self.submit()
            return

        dictated = strip_generic_prefix(transcript)
        # Plain dictation: the utterance itself is the text
        self.set_text(transcript if dictated is None else dictated)

    def state(self) -> dict[str, Any]:
        return {**super().state(), "text": self.text}
