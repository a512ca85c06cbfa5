"""
Service: Text Simplification — rewrites text at a Grade 8 reading level.
"""

from __future__ import annotations

import logging

from openai import OpenAIError
from pydantic import ValidationError

from models.schemas import TextSimplificationResult
from services.errors import AnalysisError
from utils.llm import chat, parse_json_from_markdown

log = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a plain-language editor helping readers with cognitive disabilities "
    "or reading difficulties. You MUST respond with valid JSON."
)


def build_prompt(text: str) -> str:
    return (
        "Simplify the following text for better readability, targeting a general audience "
        "(around Grade 8 reading level).\n"
        "Maintain the core meaning. Provide the simplified text. Also, briefly mention the kind "
        'of improvement (e.g., "Simplified complex sentences and vocabulary").\n'
        'Respond in JSON format with keys: "originalText", "simplifiedText", and '
        '"readingLevelImprovement" (string).\n'
        f'Original Text: "{text}"'
    )


def simplify_text(text: str) -> TextSimplificationResult:
    """Simplify ``text``; the result always echoes the caller's original text."""
    log.info("Simplifying %d chars of text", len(text))
    try:
        raw = chat(system=SYSTEM_PROMPT, user=build_prompt(text), json_mode=True)
    except OpenAIError as e:
        log.error("Error simplifying text: %s", e)
        raise AnalysisError(
            "Failed to simplify text. Please ensure your API key is correctly configured."
        ) from e

    data = parse_json_from_markdown(raw)
    if isinstance(data, dict) and data.get("simplifiedText"):
        try:
            return TextSimplificationResult.model_validate({**data, "originalText": text})
        except ValidationError as e:
            log.error("Simplification has unexpected shape: %s", e)

    return TextSimplificationResult(
        original_text=text,
        simplified_text=raw or "Could not simplify text.",
        reading_level_improvement="N/A",
    )
