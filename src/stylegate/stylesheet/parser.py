"""Hand-written parser for flat CSS stylesheets and declaration blocks.

Syntax example:
    a:hover, a:focus { color: #0645ad; text-decoration: underline; }
    .button { padding: 8px 16px !important; }

This is not a CSS grammar: comments are stripped, rule blocks
are matched flatly, and the braces of at-rule wrappers such as ``@media``
are skipped over so the rule blocks inside them are still seen.
"""

from __future__ import annotations

import re

from stylegate.stylesheet.model import Selector, StyleRule, Stylesheet

__all__ = ["parse_declarations", "parse_stylesheet", "strip_important"]

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

# Matches a complete rule: selector { declarations }
_RULE_RE = re.compile(
    r"""
    (?P<selector>[^{}]+)     # everything before the opening brace
    \{                       # opening brace
    (?P<body>[^{}]*)         # property declarations
    \}                       # closing brace
    """,
    re.VERBOSE,
)

_IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)


def strip_important(value: str) -> tuple[str, bool]:
    """Split a trailing ``!important`` flag off a declaration value."""
    stripped = _IMPORTANT_RE.sub("", value)
    return stripped.strip(), stripped != value


def _split_declarations(body: str) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for chunk in body.split(";"):
        name, sep, value = chunk.partition(":")
        name = name.strip().lower()
        value = value.strip()
        if not sep or not name or not value:
            continue
        pairs.append((name, value))
    return pairs


def parse_declarations(body: str) -> dict[str, str]:
    """Parse a declaration block (``color: red; width: 10px``) into a property map.

    Values are returned as written, ``!important`` included; later
    declarations of the same property win.
    """
    body = _COMMENT_RE.sub("", body)
    body = body.strip()
    if body.startswith("{") and body.endswith("}"):
        body = body[1:-1]
    return dict(_split_declarations(body))


def _parse_rule(selector: str, body: str) -> StyleRule:
    declarations: dict[str, str] = {}
    important: set[str] = set()
    for name, raw in _split_declarations(body):
        value, flagged = strip_important(raw)
        declarations[name] = value
        if flagged:
            important.add(name)
    return StyleRule(
        selector=Selector(text=" ".join(selector.split())),
        declarations=declarations,
        important=frozenset(important),
    )


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse raw stylesheet text into a Stylesheet object.

    Returns a Stylesheet containing all parsed rules in source order.
    """
    clean = _COMMENT_RE.sub("", source)
    rules: list[StyleRule] = []
    for match in _RULE_RE.finditer(clean):
        selector = match.group("selector").strip()
        # Statements such as ``@import ...;`` end up in front of the next
        # selector; keep only what follows the last one.
        selector = selector.rsplit(";", 1)[-1].strip()
        if not selector or selector.startswith("@"):
            continue
        rule = _parse_rule(selector, match.group("body"))
        if rule.declarations:  # skip rules with no valid declarations
            rules.append(rule)
    return Stylesheet(rules=rules)
