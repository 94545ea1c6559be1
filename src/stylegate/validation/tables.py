"""Whitelist tables for the property validator.

These tables decide what untrusted CSS can reach a page. They are frozen
module constants.
"""

from __future__ import annotations

from types import MappingProxyType

ALLOWED_PROPERTIES = frozenset({
    # Typography
    "font-family",
    "font-size",
    "font-weight",
    "font-style",
    "line-height",
    "text-align",
    "text-decoration",
    "text-transform",
    "letter-spacing",
    "word-spacing",
    # Color
    "color",
    "background",
    "background-color",
    "border-color",
    "outline-color",
    # Box model
    "width",
    "height",
    "min-width",
    "min-height",
    "max-width",
    "max-height",
    "margin",
    "margin-top",
    "margin-right",
    "margin-bottom",
    "margin-left",
    "padding",
    "padding-top",
    "padding-right",
    "padding-bottom",
    "padding-left",
    # Border
    "border",
    "border-width",
    "border-style",
    "border-radius",
    "border-top",
    "border-right",
    "border-bottom",
    "border-left",
    # Position and display
    "display",
    "position",
    "top",
    "right",
    "bottom",
    "left",
    "z-index",
    "float",
    "clear",
    "overflow",
    "overflow-x",
    "overflow-y",
    # Flexbox
    "flex",
    "flex-direction",
    "flex-wrap",
    "justify-content",
    "align-items",
    "align-content",
    "gap",
    # Grid
    "grid-template-columns",
    "grid-template-rows",
    "grid-gap",
    "grid-column",
    "grid-row",
    # Visual effects
    "opacity",
    "box-shadow",
    "text-shadow",
    "transform",
    "transition",
    "animation",
    # Misc
    "cursor",
    "visibility",
    "list-style",
    "list-style-type",
    "vertical-align",
})

ALLOWED_UNITS = frozenset({
    "px", "em", "rem", "%", "vh", "vw", "vmin", "vmax", "ch", "ex",
    "pt", "cm", "mm", "in", "pc",
    "deg", "rad", "turn",
    "s", "ms",
    "fr",
})

# Compared case-insensitively; ``translateX`` is stored as ``translatex``.
ALLOWED_FUNCTIONS = frozenset({
    "rgb",
    "rgba",
    "hsl",
    "hsla",
    "calc",
    "var",
    "linear-gradient",
    "radial-gradient",
    "scale",
    "rotate",
    "translate",
    "translatex",
    "translatey",
    "skew",
})

ALLOWED_KEYWORDS = MappingProxyType({
    "display": frozenset({"block", "inline", "inline-block", "flex", "grid", "none"}),
    "position": frozenset({"static", "relative", "absolute", "fixed", "sticky"}),
    "text-align": frozenset({"left", "right", "center", "justify"}),
    "font-weight": frozenset({"normal", "bold", "bolder", "lighter"}),
    "font-style": frozenset({"normal", "italic", "oblique"}),
    "border-style": frozenset({"none", "solid", "dashed", "dotted", "double"}),
    "cursor": frozenset({"auto", "pointer", "default", "text", "move", "not-allowed"}),
})

DANGEROUS_PATTERNS = (
    "javascript:",
    "expression(",
    "behavior:",
    "@import",
    "-moz-binding",
    "vbscript:",
    "data:text/html",
)

# Property names rejected as dangerous on sight, whatever their value.
DANGEROUS_PROPERTIES = frozenset({"behavior"})

# Ceiling on |number| in a length, to bound rendering cost.
MAX_NUMERIC_VALUE = 10000
