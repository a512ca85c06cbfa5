"""
Configuration — loads settings from environment / .env file.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

# OpenAI
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4.1")
# Remote failures surface to the user immediately; the SDK must not retry on its own
OPENAI_MAX_RETRIES = int(os.getenv("OPENAI_MAX_RETRIES", "0"))

LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.3"))
LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "2048"))

# Uploads
MAX_IMAGE_SIZE_MB = int(os.getenv("MAX_IMAGE_SIZE_MB", "4"))
MAX_VIDEO_SIZE_MB = int(os.getenv("MAX_VIDEO_SIZE_MB", "10"))  # only the name is ever used

# Voice
VOICE_LANG = os.getenv("VOICE_LANG", "en-US")
# Ask the model for a feature action when no keyword rule matched
VOICE_ACTION_FALLBACK = os.getenv("VOICE_ACTION_FALLBACK", "").lower() in {"1", "true", "yes"}

# UI
DEFAULT_THEME = os.getenv("DEFAULT_THEME", "light")

# Sessions
# Least recently used sessions are dropped past this count
MAX_SESSIONS = int(os.getenv("MAX_SESSIONS", "1000"))
