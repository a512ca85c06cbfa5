"""
Service: Voice Intent — asks the model which navigation target or feature
action a transcript refers to.

Navigation interpretation is a best-effort hint: it never raises, and a
missing credential or any failure simply means "no match".
"""

from __future__ import annotations

import logging

from openai import OpenAIError

from models.schemas import LABEL_TO_FEATURE, Feature
from services.errors import AnalysisError
from utils.llm import chat, has_api_key

log = logging.getLogger(__name__)

UNKNOWN = "UNKNOWN"

SYSTEM_PROMPT = (
    "You route voice commands in an accessibility app. "
    "Answer with a single label and nothing else."
)


def interpret_navigation_intent(transcript: str, feature_labels: list[str]) -> Feature | None:
    """Return the feature the user asked to navigate to, or None."""
    if not has_api_key():
        log.warning("OPENAI_API_KEY not available for navigation intent; skipping remote call")
        return None

    prompt = (
        f'Given the user transcript "{transcript}", which of the following navigation targets '
        "are they most likely trying to select?\n"
        f"Targets: {', '.join(feature_labels)}.\n"
        f'Respond with ONLY the exact target name from the list, or "{UNKNOWN}" if it\'s not '
        "a clear match for any target."
    )
    try:
        answer = chat(system=SYSTEM_PROMPT, user=prompt, temperature=0.0, max_tokens=20).strip()
    except Exception as e:
        log.warning("Navigation intent interpretation failed: %s", e)
        return None

    answer = answer.strip("\"'. ")
    if answer not in feature_labels:
        return None
    feature = LABEL_TO_FEATURE.get(answer)
    if feature:
        log.info("Navigation intent: %r -> %s", transcript, feature.value)
    return feature


def interpret_voice_command(transcript: str, current_feature: str, available_actions: list[str]) -> str:
    """
    Ask which of ``available_actions`` the user meant on ``current_feature``.

    Returns:
        One of ``available_actions`` or ``"UNKNOWN"``.

    Raises:
        AnalysisError: the remote call failed.
    """
    prompt = (
        f'User is on the "{current_feature}" feature of an accessibility app and said: '
        f'"{transcript}".\n'
        f"The available actions for this feature are: {', '.join(available_actions)}.\n"
        "Which action are they most likely trying to perform? Respond with ONLY the action "
        f'name (e.g., "{available_actions[0] if available_actions else UNKNOWN}") or "{UNKNOWN}".'
    )
    try:
        answer = chat(system=SYSTEM_PROMPT, user=prompt, temperature=0.0, max_tokens=20)
    except OpenAIError as e:
        log.error("Error interpreting voice command: %s", e)
        raise AnalysisError(
            "Failed to interpret voice command using AI. "
            "Please ensure API key is valid and network is stable."
        ) from e

    answer = answer.strip().strip("\"'. ")
    return answer if answer in available_actions else UNKNOWN
