"""Parser for CSS color literals.

Accepted forms:
    #fff  fff  #ffffff  #ffffff80      (3, 6 or 8 hex digits, ``#`` optional)
    rgb(0, 128, 255)  rgba(0, 128, 255, 0.5)
    hsl(210, 50%, 40%)  hsla(210, 50%, 40%, 0.5)
    red  grey  gray  transparent ...   (small named-color table)

Anything else parses to ``None``: callers read that as "cannot validate",
never as "unsafe".
"""

from __future__ import annotations

import re
from types import MappingProxyType

from stylegate.color.model import ColorValue
from stylegate.color.space import hsl_to_rgb

__all__ = ["NAMED_COLORS", "parse_color"]

NAMED_COLORS = MappingProxyType({
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 128, 0),
    "blue": (0, 0, 255),
    "yellow": (255, 255, 0),
    "cyan": (0, 255, 255),
    "magenta": (255, 0, 255),
    "gray": (128, 128, 128),
    "grey": (128, 128, 128),
    "darkgray": (169, 169, 169),
    "darkgrey": (169, 169, 169),
    "lightgray": (211, 211, 211),
    "lightgrey": (211, 211, 211),
    "orange": (255, 165, 0),
    "purple": (128, 0, 128),
    "pink": (255, 192, 203),
    "brown": (165, 42, 42),
    "navy": (0, 0, 128),
    "teal": (0, 128, 128),
    "olive": (128, 128, 0),
    "maroon": (128, 0, 0),
    "lime": (0, 255, 0),
    "aqua": (0, 255, 255),
    "silver": (192, 192, 192),
})

_HEX_RE = re.compile(r"^#?(?P<digits>[0-9a-f]{3}|[0-9a-f]{6}|[0-9a-f]{8})$")

_ALPHA = r"(?:\s*,\s*(?P<alpha>\d*\.?\d+%?))?"

_RGB_RE = re.compile(
    r"^rgba?\(\s*(?P<r>\d{1,3})\s*,\s*(?P<g>\d{1,3})\s*,\s*(?P<b>\d{1,3})"
    + _ALPHA
    + r"\s*\)$"
)

_HSL_RE = re.compile(
    r"^hsla?\(\s*(?P<h>-?\d*\.?\d+)(?:deg)?\s*,\s*(?P<s>\d*\.?\d+)%\s*,\s*(?P<l>\d*\.?\d+)%"
    + _ALPHA
    + r"\s*\)$"
)


def _parse_alpha(raw: str | None) -> float | None:
    if raw is None:
        return None
    if raw.endswith("%"):
        value = float(raw[:-1]) / 100
    else:
        value = float(raw)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"Alpha out of range: {raw}")
    return value


def _parse_hex(digits: str) -> ColorValue:
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    alpha = None
    if len(digits) == 8:
        alpha = int(digits[6:8], 16) / 255
    return ColorValue(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
        alpha=alpha,
    )


def parse_color(literal: str) -> ColorValue | None:
    """Parse a CSS color literal, returning None when it is not understood."""
    if not isinstance(literal, str):
        return None
    text = literal.strip().lower()
    if not text:
        return None

    if text == "transparent":
        return ColorValue(0, 0, 0, alpha=0.0)
    if text in NAMED_COLORS:
        r, g, b = NAMED_COLORS[text]
        return ColorValue(r, g, b)

    match = _HEX_RE.match(text)
    if match:
        return _parse_hex(match.group("digits"))

    try:
        match = _RGB_RE.match(text)
        if match:
            return ColorValue(
                r=int(match.group("r")),
                g=int(match.group("g")),
                b=int(match.group("b")),
                alpha=_parse_alpha(match.group("alpha")),
            )

        match = _HSL_RE.match(text)
        if match:
            saturation = float(match.group("s")) / 100
            lightness = float(match.group("l")) / 100
            if saturation > 1.0 or lightness > 1.0:
                return None
            color = hsl_to_rgb(float(match.group("h")), saturation, lightness)
            alpha = _parse_alpha(match.group("alpha"))
            if alpha is None:
                return color
            return ColorValue(color.r, color.g, color.b, alpha=alpha)
    except ValueError:
        # Out-of-range channel or alpha.
        return None

    return None
