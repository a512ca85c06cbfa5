"""Shared test fixtures — no network, no real OpenAI client."""

from __future__ import annotations

from typing import Callable
from unittest.mock import MagicMock

import pytest

from features.color_contrast import ColorContrastController
from features.image_describer import ImageAnalyzerController
from features.shell import Shell
from features.text_simplifier import TextSimplifierController
from features.video_describer import VideoDescriberController
from models.schemas import (
    ColorContrastAnalysis,
    Feature,
    ImageAnalysisResult,
    TextSimplificationResult,
    VideoDescriberResult,
)


class FakeRecognizer:
    """Stands in for browser speech recognition."""

    def __init__(self) -> None:
        self.continuous = True
        self.lang = ""
        self.interim_results = True
        self.max_alternatives = 5
        self.on_result: Callable[[str], None] | None = None
        self.on_error: Callable[[str], None] | None = None
        self.on_end: Callable[[], None] | None = None
        self.started = 0
        self.stopped = 0
        self.aborted = 0
        self.fail_start = False

    def start(self) -> None:
        if self.fail_start:
            raise RuntimeError("not-allowed")
        self.started += 1

    def stop(self) -> None:
        self.stopped += 1
        if self.on_end:
            self.on_end()

    def abort(self) -> None:
        self.aborted += 1

    def say(self, transcript: str) -> None:
        assert self.on_result is not None
        self.on_result(transcript)


def contrast_result(**overrides) -> ColorContrastAnalysis:
    data = {
        "isAccessible": True,
        "ratio": 21.0,
        "wcagAaSmallText": True,
        "wcagAaLargeText": True,
        "wcagAaaSmallText": True,
        "wcagAaaLargeText": True,
        "suggestions": [],
        "feedback": "Maximum contrast.",
    }
    data.update(overrides)
    return ColorContrastAnalysis.model_validate(data)


@pytest.fixture
def fake_recognizer() -> FakeRecognizer:
    return FakeRecognizer()


@pytest.fixture
def describe_image() -> MagicMock:
    return MagicMock(return_value=ImageAnalysisResult(description="A cat.", tags=["cat"]))


@pytest.fixture
def analyze_contrast() -> MagicMock:
    return MagicMock(return_value=contrast_result())


@pytest.fixture
def simplify() -> MagicMock:
    return MagicMock(
        side_effect=lambda text: TextSimplificationResult(
            original_text=text, simplified_text="Easy words.", reading_level_improvement="Grade 8",
        )
    )


@pytest.fixture
def describe_video() -> MagicMock:
    return MagicMock(return_value=VideoDescriberResult(summary="A cooking video."))


@pytest.fixture
def no_navigation() -> MagicMock:
    return MagicMock(return_value=None)


@pytest.fixture
def shell(
    describe_image: MagicMock,
    analyze_contrast: MagicMock,
    simplify: MagicMock,
    describe_video: MagicMock,
    no_navigation: MagicMock,
    fake_recognizer: FakeRecognizer,
) -> Shell:
    return Shell(
        controllers={
            Feature.IMAGE_ANALYZER: ImageAnalyzerController(describe=describe_image),
            Feature.COLOR_CONTRAST_CHECKER: ColorContrastController(analyze=analyze_contrast),
            Feature.TEXT_SIMPLIFIER: TextSimplifierController(simplify=simplify),
            Feature.VIDEO_DESCRIBER: VideoDescriberController(describe=describe_video),
        },
        interpret=no_navigation,
        recognizer_factory=lambda: fake_recognizer,
    )
