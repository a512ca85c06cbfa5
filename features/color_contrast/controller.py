"""
Color Contrast controller — foreground/background inputs and the WCAG check.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable

from features.color_contrast.colors import is_valid_hex_color, resolve_color
from features.common import FeatureController
from models.schemas import ActionType, ColorContrastAnalysis
from services.contrast import analyze_color_contrast

log = logging.getLogger(__name__)

SUBMIT_PHRASES = (
    ActionType.SUBMIT_COLORS.value.replace("_", " ").lower(),  # "submit colors"
    "check contrast",
    "analyze colors",
)
FOREGROUND_PREFIXES = ("set foreground", "foreground")
BACKGROUND_PREFIXES = ("set background", "background")
PAIR_SEPARATOR_RE = re.compile(r"\s+(?:on|with|and)\s+")

FIELD_ERROR = "Invalid HEX color (e.g., #RRGGBB or #RGB)"
VOICE_PARSE_ERROR = (
    "Could not parse colors from voice command. "
    "Please use HEX codes or simple color names like 'black', 'white'."
)


class ColorContrastController(FeatureController[ColorContrastAnalysis]):
    name = "contrast"

    def __init__(
        self,
        analyze: Callable[[str, str], ColorContrastAnalysis] = analyze_color_contrast,
        foreground: str = "#000000",
        background: str = "#FFFFFF",
    ):
        super().__init__()
        self._analyze = analyze
        self.foreground = foreground
        self.background = background
        self.foreground_error = ""
        self.background_error = ""

    @property
    def can_submit(self) -> bool:
        return (
            not self.is_loading
            and not self.foreground_error
            and not self.background_error
            and is_valid_hex_color(self.foreground)
            and is_valid_hex_color(self.background)
        )

    def set_foreground(self, value: str) -> None:
        self.foreground = value.upper()
        self.foreground_error = _field_error(self.foreground)

    def set_background(self, value: str) -> None:
        self.background = value.upper()
        self.background_error = _field_error(self.background)

    def submit(self) -> ColorContrastAnalysis | None:
        self.error = None
        if not is_valid_hex_color(self.foreground):
            self.foreground_error = "Invalid foreground HEX color."
            return None
        if not is_valid_hex_color(self.background):
            self.background_error = "Invalid background HEX color."
            return None
        self.foreground_error = ""
        self.background_error = ""

        foreground, background = self.foreground, self.background
        return self._run(lambda: self._analyze(foreground, background))

    def handle_voice_command(self, transcript: str) -> None:
        lower = transcript.lower()
        if any(phrase in lower for phrase in SUBMIT_PHRASES):
            self._voice_submit(lower)
        elif lower.startswith(FOREGROUND_PREFIXES):
            self._voice_set(lower, FOREGROUND_PREFIXES, self.set_foreground)
        elif lower.startswith(BACKGROUND_PREFIXES):
            self._voice_set(lower, BACKGROUND_PREFIXES, self.set_background)

    def _voice_submit(self, lower: str) -> None:
        parts = PAIR_SEPARATOR_RE.split(lower)
        if len(parts) != 2:
            self.submit()
            return

        foreground = resolve_color(parts[0], noise=SUBMIT_PHRASES)
        background = resolve_color(parts[1], noise=SUBMIT_PHRASES)
        if not foreground or not background:
            self.error = VOICE_PARSE_ERROR
            return
        self.set_foreground(foreground)
        self.set_background(background)
        self.submit()

    def _voice_set(self, lower: str, prefixes: tuple[str, ...], setter: Callable[[str], None]) -> None:
        # Longest prefix first so "set foreground" wins over "foreground"
        prefix = next(p for p in sorted(prefixes, key=len, reverse=True) if lower.startswith(p))
        color = resolve_color(lower[len(prefix):])
        if color is None:
            self.error = VOICE_PARSE_ERROR
            return
        setter(color)

    def state(self) -> dict[str, Any]:
        return {
            **super().state(),
            "foreground": self.foreground,
            "background": self.background,
            "foregroundError": self.foreground_error,
            "backgroundError": self.background_error,
        }


def _field_error(value: str) -> str:
    if value and not is_valid_hex_color(value):
        return FIELD_ERROR
    return ""
