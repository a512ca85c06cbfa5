"""
Voice command parser — turns a transcript into a VoiceCommandAction.

Order of evaluation (first match wins):
  1. remote navigation interpretation (best effort)
  2. the active feature's keyword rules
  3. generic input prefixes
  4. optional remote action interpretation (VOICE_ACTION_FALLBACK)
  5. UNKNOWN

Matching is literal substring / prefix tests on the lowercased transcript.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

import config
from models.schemas import ActionType, Feature, VoiceCommandAction
from services.intent import UNKNOWN, interpret_navigation_intent, interpret_voice_command

log = logging.getLogger(__name__)

NavigationInterpreter = Callable[[str, list[str]], "Feature | None"]
ActionInterpreter = Callable[[str, str, list[str]], str]


@dataclass(frozen=True)
class FeatureRules:
    """Keyword table for one feature."""
    submit_action: ActionType
    submit_phrases: tuple[str, ...]
    input_prefixes: tuple[str, ...] = ()
    # Colors are parsed by the controller, so the payload keeps the whole utterance
    strip_input_prefix: bool = True


FEATURE_RULES: dict[Feature, FeatureRules] = {
    Feature.IMAGE_ANALYZER: FeatureRules(
        submit_action=ActionType.SUBMIT_IMAGE,
        submit_phrases=("analyze image", "describe image", "submit image"),
    ),
    Feature.COLOR_CONTRAST_CHECKER: FeatureRules(
        submit_action=ActionType.SUBMIT_COLORS,
        submit_phrases=("check contrast", "analyze colors", "submit colors"),
        input_prefixes=("set foreground", "set background", "foreground", "background"),
        strip_input_prefix=False,
    ),
    Feature.TEXT_SIMPLIFIER: FeatureRules(
        submit_action=ActionType.SUBMIT_TEXT,
        submit_phrases=("simplify text", "submit text"),
        input_prefixes=("input text", "set input to", "simplify this text"),
    ),
    Feature.VIDEO_DESCRIBER: FeatureRules(
        submit_action=ActionType.SUBMIT_VIDEO_PROMPT,
        submit_phrases=("describe video", "summarize video", "submit video prompt"),
        input_prefixes=("input prompt", "set prompt to"),
    ),
}

GENERIC_INPUT_PREFIXES = ("input", "set text to", "type")


def strip_generic_prefix(transcript: str) -> str | None:
    """Dictated value after a generic input prefix, or None when none matches.

    Longest prefix first, and only on a word boundary (so "typewriter" is not "type").
    """
    lower = transcript.lower()
    for prefix in sorted(GENERIC_INPUT_PREFIXES, key=len, reverse=True):
        if lower == prefix or lower.startswith(prefix + " "):
            return strip_prefix(transcript, prefix)
    return None


def strip_prefix(transcript: str, prefix: str) -> str:
    """Remainder of ``transcript`` after a case-insensitive ``prefix``."""
    return transcript[len(prefix):].strip()


def match_feature_rules(transcript: str, feature: Feature) -> VoiceCommandAction | None:
    """Apply the active feature's keyword table."""
    rules = FEATURE_RULES.get(feature)
    if rules is None:
        return None
    lower = transcript.lower()

    if any(phrase in lower for phrase in rules.submit_phrases):
        return VoiceCommandAction(rules.submit_action, transcript)

    for prefix in rules.input_prefixes:
        if lower.startswith(prefix):
            payload = strip_prefix(transcript, prefix) if rules.strip_input_prefix else transcript
            return VoiceCommandAction(ActionType.SET_INPUT, payload)
    return None


def match_generic_input(transcript: str) -> VoiceCommandAction | None:
    lower = transcript.lower()
    if lower.startswith(GENERIC_INPUT_PREFIXES):
        return VoiceCommandAction(ActionType.SET_INPUT, transcript)
    return None


def available_actions(feature: Feature) -> list[str]:
    """Action names the remote interpreter may choose from on ``feature``."""
    rules = FEATURE_RULES[feature]
    actions = [rules.submit_action.value]
    if rules.input_prefixes:
        actions.append(ActionType.SET_INPUT.value)
    return actions


def parse_voice_command(
    transcript: str,
    current_feature: Feature,
    feature_labels: list[str],
    *,
    interpret: NavigationInterpreter = interpret_navigation_intent,
    interpret_action: ActionInterpreter = interpret_voice_command,
    action_fallback: bool | None = None,
) -> VoiceCommandAction:
    """Decide what one utterance asks for."""
    transcript = transcript.strip()
    lower = transcript.lower()

    # 1. Remote navigation
    try:
        target = interpret(lower, feature_labels)
    except Exception as e:
        log.error("Navigation intent parsing failed: %s", e)
        target = None
    if target:
        return VoiceCommandAction(ActionType.SWITCH_FEATURE, target)

    # 2 + 3. Keyword rules
    action = match_feature_rules(transcript, current_feature) or match_generic_input(transcript)
    if action:
        return action

    # 4. Remote action interpretation
    if config.VOICE_ACTION_FALLBACK if action_fallback is None else action_fallback:
        try:
            name = interpret_action(lower, current_feature.value, available_actions(current_feature))
        except Exception as e:
            log.warning("Voice action interpretation failed: %s", e)
            name = UNKNOWN
        if name != UNKNOWN:
            return VoiceCommandAction(ActionType(name), transcript)

    return VoiceCommandAction(ActionType.UNKNOWN, transcript)
