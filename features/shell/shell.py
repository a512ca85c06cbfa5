"""
Shell — routes voice commands and tracks which feature is active.

One Shell per UI session. It holds the single pending transcript (the last
utterance not yet consumed by the active feature) and hands it to the active
controller exactly once.
"""

from __future__ import annotations

import logging
from typing import Any

import config
from features.color_contrast import ColorContrastController
from features.common import FeatureController
from features.image_describer import ImageAnalyzerController
from features.text_simplifier import TextSimplifierController
from features.video_describer import VideoDescriberController
from features.voice.parser import NavigationInterpreter, parse_voice_command
from features.voice.recognizer import RecognizerFactory, VoiceInput
from models.schemas import FEATURE_LABELS, ActionType, Feature, VoiceCommandAction
from services.intent import interpret_navigation_intent

log = logging.getLogger(__name__)

THEMES = ("light", "dark")


class Shell:
    """Active feature, pending transcript and per-feature controllers."""

    def __init__(
        self,
        controllers: dict[Feature, FeatureController] | None = None,
        interpret: NavigationInterpreter = interpret_navigation_intent,
        recognizer_factory: RecognizerFactory | None = None,
        theme: str | None = None,
    ):
        self.controllers: dict[Feature, FeatureController] = {
            Feature.IMAGE_ANALYZER: ImageAnalyzerController(),
            Feature.COLOR_CONTRAST_CHECKER: ColorContrastController(),
            Feature.TEXT_SIMPLIFIER: TextSimplifierController(),
            Feature.VIDEO_DESCRIBER: VideoDescriberController(),
        }
        if controllers:
            self.controllers.update(controllers)
        self._interpret = interpret
        self.active_feature = Feature.IMAGE_ANALYZER
        self.pending_transcript: str | None = None
        self.theme = theme if theme in THEMES else config.DEFAULT_THEME
        self.voice = VoiceInput(recognizer_factory, on_result=self.handle_voice_result)

    @property
    def navigation_labels(self) -> list[str]:
        return list(FEATURE_LABELS.values())

    @property
    def active_controller(self) -> FeatureController:
        return self.controllers[self.active_feature]

    def controller(self, feature: Feature) -> FeatureController:
        return self.controllers[feature]

    def select_feature(self, feature: Feature) -> None:
        if feature != self.active_feature:
            log.info("Switching feature: %s -> %s", self.active_feature.value, feature.value)
        self.active_feature = feature

    def toggle_theme(self) -> str:
        self.theme = "dark" if self.theme == "light" else "light"
        return self.theme

    # ── Voice commands ────────────────────────────────────────────────

    def handle_voice_result(self, transcript: str) -> VoiceCommandAction:
        """Parse an utterance, then switch feature or hand it to the active one."""
        log.info("Voice transcript: %s", transcript)
        try:
            action = parse_voice_command(
                transcript, self.active_feature, self.navigation_labels, interpret=self._interpret,
            )
        except Exception as e:
            log.error("Error processing voice command: %s", e, exc_info=True)
            self.pending_transcript = None
            return VoiceCommandAction(ActionType.UNKNOWN, transcript)

        if action.type == ActionType.SWITCH_FEATURE and isinstance(action.payload, Feature):
            self.select_feature(action.payload)
            self.pending_transcript = None
        elif action.type == ActionType.UNKNOWN:
            log.warning("Unknown voice command: %s", transcript)
            self.pending_transcript = None
        else:
            if action.type.is_submit:
                log.info("Voice submit for %s", self.active_feature.value)
            self.pending_transcript = transcript
            self.deliver_pending()
        return action

    def deliver_pending(self) -> bool:
        """Forward the pending transcript to the active controller, once.

        The transcript is cleared before the controller sees it, so calling
        this again without a new utterance does nothing.
        """
        transcript, self.pending_transcript = self.pending_transcript, None
        if not transcript:
            return False
        self.active_controller.handle_voice_command(transcript)
        return True

    # ── Voice input lifecycle ─────────────────────────────────────────

    def start_listening(self) -> None:
        self.voice.start()

    def stop_listening(self) -> None:
        self.voice.stop()

    def toggle_listening(self) -> bool:
        return self.voice.toggle()

    def dispose(self) -> None:
        self.voice.dispose()

    def state(self) -> dict[str, Any]:
        return {
            "activeFeature": self.active_feature.value,
            "navigation": [
                {"feature": f.value, "label": label, "active": f == self.active_feature}
                for f, label in FEATURE_LABELS.items()
            ],
            "theme": self.theme,
            "pendingTranscript": self.pending_transcript,
            "isListening": self.voice.is_listening,
            "features": {f.value: c.state() for f, c in self.controllers.items()},
        }
