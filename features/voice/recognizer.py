"""
Voice input — owns a speech recognizer with an explicit lifecycle.

The recognizer itself is an injected capability (in production the browser's
speech recognition, bridged by the front end). A recognizer runs one
listen-then-stop session at a time and reports a single final transcript.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

import config

log = logging.getLogger(__name__)


class VoiceInputError(RuntimeError):
    """Voice input is unavailable or could not be started."""


class SpeechRecognizer(Protocol):
    """Structural type for a single-shot speech recognition session."""

    continuous: bool
    lang: str
    interim_results: bool
    max_alternatives: int

    on_result: Callable[[str], None] | None
    on_error: Callable[[str], None] | None
    on_end: Callable[[], None] | None

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def abort(self) -> None: ...


RecognizerFactory = Callable[[], SpeechRecognizer]


class VoiceInput:
    """Create/start/stop/dispose wrapper around one recognizer instance."""

    def __init__(self, factory: RecognizerFactory | None, on_result: Callable[[str], object]):
        self._factory = factory
        self._on_result = on_result
        self._recognizer: SpeechRecognizer | None = None
        self.is_listening = False
        self.last_error: str | None = None

    @property
    def supported(self) -> bool:
        return self._factory is not None

    def create(self) -> SpeechRecognizer:
        """Build the recognizer on first use and wire its callbacks."""
        if self._recognizer is not None:
            return self._recognizer
        if self._factory is None:
            raise VoiceInputError("Sorry, your browser doesn't support voice input.")

        recognizer = self._factory()
        recognizer.continuous = False
        recognizer.lang = config.VOICE_LANG
        recognizer.interim_results = False
        recognizer.max_alternatives = 1
        recognizer.on_result = self._handle_result
        recognizer.on_error = self._handle_error
        recognizer.on_end = self._handle_end
        self._recognizer = recognizer
        return recognizer

    def start(self) -> None:
        recognizer = self.create()
        try:
            recognizer.start()
        except Exception as e:
            self.is_listening = False
            log.error("Could not start speech recognition: %s", e)
            raise VoiceInputError(
                "Could not start voice input. Please check microphone permissions."
            ) from e
        self.is_listening = True
        self.last_error = None

    def stop(self) -> None:
        if self._recognizer is not None and self.is_listening:
            self._recognizer.stop()

    def toggle(self) -> bool:
        """Start when idle, stop when listening. Returns the new listening state."""
        if self.is_listening:
            self.stop()
        else:
            self.start()
        return self.is_listening

    def dispose(self) -> None:
        """Abort any session and release the recognizer."""
        recognizer, self._recognizer = self._recognizer, None
        if recognizer is None:
            return
        if self.is_listening:
            recognizer.abort()
        recognizer.on_result = None
        recognizer.on_error = None
        recognizer.on_end = None
        self.is_listening = False

    # ── Recognizer callbacks ──────────────────────────────────────────

    def _handle_result(self, transcript: str) -> None:
        self.is_listening = False
        transcript = transcript.strip()
        log.info("Voice transcript: %s", transcript)
        self._on_result(transcript)

    def _handle_error(self, error: str) -> None:
        log.error("Speech recognition error: %s", error)
        self.last_error = error
        self.is_listening = False

    def _handle_end(self) -> None:
        self.is_listening = False
