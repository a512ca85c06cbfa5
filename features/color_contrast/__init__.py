"""
Color Contrast feature — WCAG contrast checks for a color pair.
"""

from features.color_contrast.colors import NAMED_COLORS, is_valid_hex_color, resolve_color
from features.color_contrast.controller import ColorContrastController

__all__ = ["ColorContrastController", "NAMED_COLORS", "is_valid_hex_color", "resolve_color"]
