"""Typed CSS values.

:func:`parse_value` turns a raw declaration value into a small tagged value
that the validator and the accessibility rules both match on:

    Keyword("bold")                      plain identifiers
    Color("#fff", ColorValue(...))       hex literals, or any color in a *color property
    Length("1.5rem", 1.5, "rem")         <number><unit?>
    Function("calc(...)", "calc", ...)   name(args), balanced or not
    Composite("10px 5%", (...))          whitespace-separated at top level
    Unparsed("1.2.3px")                  everything else
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from stylegate.color import ColorValue, parse_color

__all__ = [
    "CSS_WIDE_KEYWORDS",
    "Color",
    "Composite",
    "CssValue",
    "Function",
    "Keyword",
    "Length",
    "Unparsed",
    "parse_value",
    "split_top_level",
]

CSS_WIDE_KEYWORDS = frozenset({"inherit", "initial", "unset", "none", "auto"})

_NUMBER_RE = re.compile(
    r"^(?P<number>[+-]?(?:\d+\.?\d*|\.\d+))(?P<unit>[a-z%]*)$", re.IGNORECASE
)
_LOOSE_NUMBER_RE = re.compile(r"^[+-]?\.?\d")
_FUNCTION_RE = re.compile(
    r"^(?P<name>-?[a-z_][a-z0-9_-]*)\s*\((?P<args>.*)$", re.IGNORECASE | re.DOTALL
)
_KEYWORD_RE = re.compile(r"^-?[a-z_][a-z0-9_-]*$", re.IGNORECASE)

# Multipliers to CSS pixels; em/rem/% assume a 16px base font size.
_PX_PER_UNIT = {
    "px": 1.0,
    "pt": 1.333,
    "em": 16.0,
    "rem": 16.0,
    "%": 0.16,
}


@dataclass(frozen=True)
class Keyword:
    text: str

    @property
    def lowered(self) -> str:
        return self.text.lower()


@dataclass(frozen=True)
class Color:
    text: str
    color: ColorValue


@dataclass(frozen=True)
class Length:
    """A number with an optional unit. ``unit`` is lowercased, ``""`` when absent."""

    text: str
    number: float
    unit: str

    def to_px(self) -> float | None:
        """Convert to CSS pixels, or None when the unit has no fixed pixel size."""
        if self.unit == "":
            return 0.0 if self.number == 0 else None
        factor = _PX_PER_UNIT.get(self.unit)
        if factor is None:
            return None
        return self.number * factor


@dataclass(frozen=True)
class Function:
    text: str
    name: str
    args: str
    balanced: bool


@dataclass(frozen=True)
class Composite:
    text: str
    parts: tuple[CssValue, ...]


@dataclass(frozen=True)
class Unparsed:
    text: str

    @property
    def looks_numeric(self) -> bool:
        """True for tokens that start like a number but are malformed (``1.2.3px``)."""
        return bool(_LOOSE_NUMBER_RE.match(self.text))


CssValue = Keyword | Color | Length | Function | Composite | Unparsed


def split_top_level(text: str) -> list[str]:
    """Split *text* on whitespace that is outside parentheses and quotes."""
    tokens: list[str] = []
    current: list[str] = []
    depth = 0
    quote = ""
    for ch in text:
        if quote:
            current.append(ch)
            if ch == quote:
                quote = ""
            continue
        if ch in "\"'":
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(depth - 1, 0)
        elif ch.isspace() and depth == 0:
            if current:
                tokens.append("".join(current))
                current = []
            continue
        current.append(ch)
    if current:
        tokens.append("".join(current))
    return tokens


def _parse_token(token: str) -> CssValue:
    match = _NUMBER_RE.match(token)
    if match:
        return Length(
            text=token,
            number=float(match.group("number")),
            unit=match.group("unit").lower(),
        )

    match = _FUNCTION_RE.match(token)
    if match:
        args = match.group("args")
        if args.endswith(")"):
            args = args[:-1]
        return Function(
            text=token,
            name=match.group("name"),
            args=args.strip(),
            balanced=token.count("(") == token.count(")"),
        )

    if token.startswith("#"):
        color = parse_color(token)
        if color is not None:
            return Color(text=token, color=color)
        return Unparsed(text=token)

    if _KEYWORD_RE.match(token):
        return Keyword(text=token)

    return Unparsed(text=token)


def parse_value(property_name: str, raw: str) -> CssValue:
    """Parse the raw value of *property_name* into a typed CSS value.

    For color properties the whole value is first tried as a single color
    literal, so ``rgb(0, 0, 0)`` and ``red`` come back as :class:`Color`.
    """
    text = raw.strip()
    if "color" in property_name.lower():
        color = parse_color(text)
        if color is not None:
            return Color(text=text, color=color)

    tokens = split_top_level(text)
    if len(tokens) > 1:
        return Composite(text=text, parts=tuple(_parse_token(t) for t in tokens))
    return _parse_token(text)
