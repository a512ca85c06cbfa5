"""
Data models shared by the voice layer, the feature controllers and the API.

Feature results are pydantic models because they are parsed straight from
the model's JSON reply and returned as-is by the API; their wire names are
camelCase.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Feature(str, Enum):
    IMAGE_ANALYZER = "Image Analyzer"
    COLOR_CONTRAST_CHECKER = "Color Contrast Checker"
    TEXT_SIMPLIFIER = "Text Simplifier"
    VIDEO_DESCRIBER = "Video Describer"


# Navigation labels as shown in the sidebar, in display order
FEATURE_LABELS: dict[Feature, str] = {
    Feature.IMAGE_ANALYZER: "Image Describer",
    Feature.COLOR_CONTRAST_CHECKER: "Color Contrast",
    Feature.TEXT_SIMPLIFIER: "Text Simplifier",
    Feature.VIDEO_DESCRIBER: "Video Describer",
}

LABEL_TO_FEATURE: dict[str, Feature] = {label: f for f, label in FEATURE_LABELS.items()}


class ActionType(str, Enum):
    SUBMIT_IMAGE = "SUBMIT_IMAGE"
    SUBMIT_COLORS = "SUBMIT_COLORS"
    SUBMIT_TEXT = "SUBMIT_TEXT"
    SUBMIT_VIDEO_PROMPT = "SUBMIT_VIDEO_PROMPT"
    SET_INPUT = "SET_INPUT"
    SWITCH_FEATURE = "SWITCH_FEATURE"
    UNKNOWN = "UNKNOWN"

    @property
    def is_submit(self) -> bool:
        return self.value.startswith("SUBMIT_")


@dataclass
class VoiceCommandAction:
    """Parsed intent of one utterance."""
    type: ActionType
    payload: Feature | str | None = None


@dataclass
class Upload:
    """A file accepted by the upload guard."""
    filename: str
    mime_type: str
    size: int
    base64_data: str | None = None  # None for videos, whose content is never sent


# ── Feature results ───────────────────────────────────────────────────

class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ImageAnalysisResult(_WireModel):
    description: str
    tags: list[str] = Field(default_factory=list)


class ContrastSuggestion(_WireModel):
    foreground_color: str = Field(alias="foregroundColor")
    background_color: str = Field(alias="backgroundColor")
    notes: str = ""


class ColorContrastAnalysis(_WireModel):
    is_accessible: bool = Field(alias="isAccessible")
    ratio: float | None = None
    wcag_aa_small_text: bool = Field(False, alias="wcagAaSmallText")
    wcag_aa_large_text: bool = Field(False, alias="wcagAaLargeText")
    wcag_aaa_small_text: bool = Field(False, alias="wcagAaaSmallText")
    wcag_aaa_large_text: bool = Field(False, alias="wcagAaaLargeText")
    suggestions: list[ContrastSuggestion] = Field(default_factory=list)
    feedback: str = ""


class TextSimplificationResult(_WireModel):
    original_text: str = Field(alias="originalText")
    simplified_text: str = Field(alias="simplifiedText")
    reading_level_improvement: str | None = Field(None, alias="readingLevelImprovement")


class VideoScene(_WireModel):
    timestamp: str | None = None
    description: str


class VideoDescriberResult(_WireModel):
    summary: str
    potential_keywords: list[str] = Field(default_factory=list, alias="potentialKeywords")
    scenes: list[VideoScene] = Field(default_factory=list)
