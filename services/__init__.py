"""
Remote analysis services — one module per feature, plus voice intent
interpretation. Each builds a prompt, calls the LLM and parses its JSON reply.

Public API:
    from services import (
        generate_image_description, analyze_color_contrast,
        simplify_text, describe_video_content,
        interpret_navigation_intent, interpret_voice_command,
        AnalysisError,
    )
"""

from services.errors import AnalysisError
from services.contrast import analyze_color_contrast
from services.image import generate_image_description
from services.intent import interpret_navigation_intent, interpret_voice_command
from services.text import simplify_text
from services.video import describe_video_content

__all__ = [
    "AnalysisError",
    "analyze_color_contrast",
    "describe_video_content",
    "generate_image_description",
    "interpret_navigation_intent",
    "interpret_voice_command",
    "simplify_text",
]
