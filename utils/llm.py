"""
OpenAI LLM helpers — shared across all analysis services.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from openai import OpenAI

import config

log = logging.getLogger(__name__)

_client: OpenAI | None = None

_FENCE_RE = re.compile(r"^```(\w*)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)


def get_client() -> OpenAI:
    global _client
    if _client is None:
        _client = OpenAI(api_key=config.OPENAI_API_KEY, max_retries=config.OPENAI_MAX_RETRIES)
    return _client


def has_api_key() -> bool:
    return bool(config.OPENAI_API_KEY)


def image_part(base64_data: str, mime_type: str) -> dict:
    """Build an inline image content part from base64 data."""
    return {
        "type": "image_url",
        "image_url": {"url": f"data:{mime_type};base64,{base64_data}"},
    }


def chat(
    system: str,
    user: str,
    model: str | None = None,
    json_mode: bool = False,
    images: list[dict] | None = None,
    temperature: float | None = None,
    max_tokens: int | None = None,
) -> str:
    """Send a chat completion request and return the assistant message.

    ``images`` are content parts from :func:`image_part`; when given, they are
    sent ahead of the text in the user message.

    No retries: a failed request raises straight to the caller.
    """
    client = get_client()
    if images:
        user_content: Any = [*images, {"type": "text", "text": user}]
    else:
        user_content = user

    kwargs: dict = {
        "model": model or config.OPENAI_MODEL,
        "messages": [
            {"role": "system", "content": system},
            {"role": "user", "content": user_content},
        ],
        "temperature": config.LLM_TEMPERATURE if temperature is None else temperature,
        "max_tokens": max_tokens or config.LLM_MAX_TOKENS,
    }
    if json_mode:
        kwargs["response_format"] = {"type": "json_object"}

    resp = client.chat.completions.create(**kwargs)
    return resp.choices[0].message.content or ""


def parse_json_from_markdown(raw: str) -> Any | None:
    """Parse a JSON reply that may be wrapped in a ```json fence.

    Returns None when neither the unwrapped nor the raw text is valid JSON.
    """
    text = raw.strip()
    match = _FENCE_RE.match(text)
    if match and match.group(2):
        text = match.group(2).strip()
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        log.error("Failed to parse LLM JSON response: %s", raw[:500])
        return None
