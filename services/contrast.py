"""
Service: Color Contrast — WCAG contrast assessment for a foreground/background pair.
"""

from __future__ import annotations

import logging

from openai import OpenAIError
from pydantic import ValidationError

from models.schemas import ColorContrastAnalysis
from services.errors import AnalysisError
from utils.llm import chat, parse_json_from_markdown

log = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a web accessibility auditor specialising in WCAG 2.x color contrast. "
    "You MUST respond with valid JSON."
)


def build_prompt(foreground: str, background: str) -> str:
    return (
        f"Analyze the color contrast between foreground color {foreground} and background "
        f"color {background} for web accessibility.\n"
        "Provide:\n"
        "1. The contrast ratio.\n"
        "2. Compliance with WCAG AA and AAA for normal and large text "
        "(true/false for each of the 4 combinations).\n"
        "3. If not accessible, suggest 1-2 alternative color pairs (foreground & background) "
        "that are accessible (WCAG AA for normal text) and maintain a similar color feel if possible.\n"
        "4. A brief feedback summary.\n"
        'Respond in JSON format with keys: "isAccessible" (boolean, overall for AA normal text), '
        '"ratio" (number), "wcagAaSmallText" (boolean), "wcagAaLargeText" (boolean), '
        '"wcagAaaSmallText" (boolean), "wcagAaaLargeText" (boolean), "suggestions" '
        '(array of objects with "foregroundColor", "backgroundColor", "notes"), '
        'and "feedback" (string).'
    )


def analyze_color_contrast(foreground: str, background: str) -> ColorContrastAnalysis:
    """
    Ask the model to assess a color pair against the four WCAG thresholds.

    Returns:
        ColorContrastAnalysis; an unparsable reply becomes the feedback text with
        every compliance flag false.
    """
    log.info("Analyzing contrast %s on %s", foreground, background)
    try:
        raw = chat(system=SYSTEM_PROMPT, user=build_prompt(foreground, background), json_mode=True)
    except OpenAIError as e:
        log.error("Error analyzing color contrast: %s", e)
        raise AnalysisError(
            "Failed to analyze color contrast. "
            "Please ensure your API key is correctly configured."
        ) from e

    data = parse_json_from_markdown(raw)
    if isinstance(data, dict) and "isAccessible" in data:
        try:
            return ColorContrastAnalysis.model_validate(data)
        except ValidationError as e:
            log.error("Contrast analysis has unexpected shape: %s", e)

    return ColorContrastAnalysis(
        feedback=raw or "Could not get analysis from AI.",
        is_accessible=False,
        wcag_aa_small_text=False,
        wcag_aa_large_text=False,
        wcag_aaa_small_text=False,
        wcag_aaa_large_text=False,
        suggestions=[],
    )
