"""
Voice feature — transcript parsing and speech recognizer lifecycle.

Public API:
    from features.voice import parse_voice_command, VoiceInput, VoiceInputError
"""

from features.voice.parser import FEATURE_RULES, parse_voice_command
from features.voice.recognizer import SpeechRecognizer, VoiceInput, VoiceInputError

__all__ = ["FEATURE_RULES", "SpeechRecognizer", "VoiceInput", "VoiceInputError", "parse_voice_command"]
