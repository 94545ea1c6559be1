"""Rule context: caller-supplied facts the property map cannot express."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping

from stylegate.errors import ContextError

# Keys accepted by ``from_dict``, mapped to field names. The aliases are the
# names older callers send.
_KEY_ALIASES = {
    "is_interactive": "is_interactive",
    "interactive": "is_interactive",
    "default_background": "default_background",
    "default_background_color": "default_background",
    "background": "default_background",
    "background_color": "default_background",
    "default_foreground": "default_foreground",
    "default_text_color": "default_foreground",
    "color": "default_foreground",
    "tag": "tag",
    "selector": "selector",
}

_STRING_FIELDS = ("default_background", "default_foreground", "tag", "selector")


@dataclass(frozen=True)
class RuleContext:
    """Facts about where a declaration set will be applied.

    The engine never infers these; a missing value simply disables the
    checks that need it.

    Attributes:
        is_interactive: The styled element receives keyboard focus (links,
            buttons, form controls).
        default_background: Background color the styles will sit on when
            the declarations do not set one.
        default_foreground: Text color in effect when the declarations do
            not set one.
        tag: Element tag name, e.g. ``"a"``.
        selector: Selector the declarations belong to, e.g. ``"a:focus"``.
    """

    is_interactive: bool = False
    default_background: str | None = None
    default_foreground: str | None = None
    tag: str | None = None
    selector: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.is_interactive, bool):
            raise ContextError(
                f"is_interactive must be a bool, got {type(self.is_interactive).__name__}",
                field="is_interactive",
            )
        for name in _STRING_FIELDS:
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ContextError(
                    f"{name} must be a string, got {type(value).__name__}",
                    field=name,
                )

    def with_selector(self, selector: str | None) -> RuleContext:
        return replace(self, selector=selector)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> RuleContext:
        """Build a context from a JSON-style mapping. Unknown keys are ignored."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ContextError(f"context must be an object, got {type(data).__name__}")
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            field_name = _KEY_ALIASES.get(key)
            if field_name is None or value is None:
                continue
            if key == field_name:
                kwargs[field_name] = value
            else:
                kwargs.setdefault(field_name, value)
        return cls(**kwargs)
