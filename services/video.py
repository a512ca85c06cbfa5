"""
Service: Video Description — summary, keywords and hypothetical key scenes
for a video described in text. Video content itself is never sent.
"""

from __future__ import annotations

import logging

from openai import OpenAIError
from pydantic import ValidationError

from models.schemas import VideoDescriberResult
from services.errors import AnalysisError
from utils.llm import chat, parse_json_from_markdown

log = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You help content creators produce accessible descriptions and captions for video. "
    "You MUST respond with valid JSON."
)


def build_prompt(prompt_about_video: str) -> str:
    return (
        f'Based on the following description or topic for a video: "{prompt_about_video}", '
        "generate:\n"
        "1. A concise overall summary of the potential video content.\n"
        "2. Up to 5 potential keywords.\n"
        "3. A list of 2-3 hypothetical key scenes with brief descriptions "
        '(e.g., {"timestamp": "0:30", "description": "Character A discovers a map."}).\n'
        'Respond in JSON format with keys: "summary" (string), "potentialKeywords" '
        '(array of strings), and "scenes" (array of objects with optional "timestamp" '
        'and "description").'
    )


def describe_video_content(prompt_about_video: str) -> VideoDescriberResult:
    log.info("Describing video content from a %d char prompt", len(prompt_about_video))
    try:
        raw = chat(system=SYSTEM_PROMPT, user=build_prompt(prompt_about_video), json_mode=True)
    except OpenAIError as e:
        log.error("Error describing video content: %s", e)
        raise AnalysisError(
            "Failed to describe video content. "
            "Please ensure your API key is correctly configured."
        ) from e

    data = parse_json_from_markdown(raw)
    if isinstance(data, dict) and data.get("summary"):
        try:
            return VideoDescriberResult.model_validate(data)
        except ValidationError as e:
            log.error("Video description has unexpected shape: %s", e)

    return VideoDescriberResult(
        summary=raw or "Could not generate video description.",
        potential_keywords=[],
        scenes=[],
    )
