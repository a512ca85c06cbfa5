"""
Text Simplifier feature — plain-language rewrites of complex text.
"""

from features.text_simplifier.controller import TextSimplifierController

__all__ = ["TextSimplifierController"]
