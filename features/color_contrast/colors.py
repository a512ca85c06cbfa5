"""
Color parsing helpers — HEX validation and spoken color resolution.
"""

from __future__ import annotations

import re

HEX_COLOR_RE = re.compile(r"^#([0-9A-F]{3}){1,2}$", re.IGNORECASE)
SPOKEN_HEX_RE = re.compile(r"#([0-9a-f]{3,6})\b", re.IGNORECASE)

NAMED_COLORS = {
    "black": "#000000",
    "white": "#FFFFFF",
    "red": "#FF0000",
    "green": "#00FF00",
    "blue": "#0000FF",
}

# Words that may precede a color in an utterance ("set foreground to red")
_FILLER = {"to", "is", "of", "the", "color", "colour", "foreground", "background"}


def is_valid_hex_color(color: str) -> bool:
    """True for #RGB or #RRGGBB, any case."""
    return bool(HEX_COLOR_RE.match(color))


def resolve_color(phrase: str, noise: tuple[str, ...] = ()) -> str | None:
    """
    Resolve a spoken color to an uppercase HEX string.

    ``noise`` phrases (e.g. the trigger words of the command) are removed
    before looking the remainder up in NAMED_COLORS. Returns None when the
    phrase holds neither a valid HEX literal nor a known color name.
    """
    text = phrase.lower()
    match = SPOKEN_HEX_RE.search(text)
    if match:
        candidate = f"#{match.group(1)}".upper()
        return candidate if is_valid_hex_color(candidate) else None

    for n in noise:
        text = text.replace(n, " ")
    words = [w for w in text.split() if w not in _FILLER]
    if not words:
        return None
    return NAMED_COLORS.get(" ".join(words)) or NAMED_COLORS.get(words[-1])
