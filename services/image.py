"""
Service: Image Description — alt text and tags for an uploaded image.
"""

from __future__ import annotations

import logging

from openai import OpenAIError
from pydantic import ValidationError

from models.schemas import ImageAnalysisResult
from services.errors import AnalysisError
from utils.llm import chat, image_part, parse_json_from_markdown

log = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a web accessibility specialist who writes alt text for images. "
    "You MUST respond with valid JSON."
)

USER_PROMPT = (
    "Describe this image for web accessibility (alt text). Focus on conveying the meaning "
    "and context. If there's text, include it. Be concise yet informative. Also, provide "
    "up to 5 relevant tags for the image. Respond in JSON format with keys \"description\" "
    "and \"tags\" (an array of strings). Example: "
    '{"description": "A black cat sitting on a red couch.", '
    '"tags": ["cat", "animal", "pet", "couch", "indoor"]}'
)


def generate_image_description(base64_image: str, mime_type: str) -> ImageAnalysisResult:
    """
    Ask the model for alt text describing an inline base64 image.

    Returns:
        ImageAnalysisResult; when the reply is not the expected JSON the raw
        reply becomes the description and tags are empty.
    """
    log.info("Requesting image description (%s, %d base64 chars)", mime_type, len(base64_image))
    try:
        raw = chat(
            system=SYSTEM_PROMPT,
            user=USER_PROMPT,
            json_mode=True,
            images=[image_part(base64_image, mime_type)],
        )
    except OpenAIError as e:
        log.error("Error generating image description: %s", e)
        raise AnalysisError(
            "Failed to generate image description. "
            "Please ensure your API key is correctly configured."
        ) from e

    data = parse_json_from_markdown(raw)
    if isinstance(data, dict) and data.get("description"):
        try:
            return ImageAnalysisResult.model_validate(data)
        except ValidationError as e:
            log.error("Image description has unexpected shape: %s", e)

    return ImageAnalysisResult(description=raw or "Could not get description from AI.", tags=[])
