"""Stylesheet model: Selector, StyleRule, and Stylesheet dataclasses."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

# An ``a`` element compound: start of selector or after a combinator, and
# followed by end, combinator, pseudo-class, class, attribute or id.
_ANCHOR_RE = re.compile(r"(?:^|[\s>+~,])a(?=$|[\s>+~,:.\[#])", re.IGNORECASE)

_GLOBAL_SELECTORS = frozenset({"*", "html", "body", ":root"})


@dataclass(frozen=True)
class Selector:
    """The raw selector text of a rule block, with the few predicates rules need."""

    text: str

    @property
    def targets_focus(self) -> bool:
        return ":focus" in self.text.lower()

    @property
    def targets_link(self) -> bool:
        lowered = self.text.lower()
        return bool(_ANCHOR_RE.search(lowered)) or "link" in lowered

    @property
    def is_global(self) -> bool:
        parts = [part.strip().lower() for part in self.text.split(",")]
        return any(part in _GLOBAL_SELECTORS for part in parts)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class StyleRule:
    """A single rule pairing a selector with property declarations.

    ``declarations`` holds values with any ``!important`` flag stripped; the
    flagged property names are kept in ``important``.
    """

    selector: Selector
    declarations: dict[str, str]
    important: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class Stylesheet:
    """A collection of style rules parsed from raw CSS text."""

    rules: list[StyleRule]

    @property
    def important_count(self) -> int:
        return sum(len(rule.important) for rule in self.rules)
