from stylegate.stylesheet.parser import parse_declarations, parse_stylesheet, strip_important
from stylegate.stylesheet.model import Stylesheet, StyleRule, Selector
from stylegate.stylesheet.values import (
    CSS_WIDE_KEYWORDS,
    Color,
    Composite,
    CssValue,
    Function,
    Keyword,
    Length,
    Unparsed,
    parse_value,
)

__all__ = [
    "CSS_WIDE_KEYWORDS",
    "Color",
    "Composite",
    "CssValue",
    "Function",
    "Keyword",
    "Length",
    "Selector",
    "StyleRule",
    "Stylesheet",
    "Unparsed",
    "parse_declarations",
    "parse_stylesheet",
    "parse_value",
    "strip_important",
]
