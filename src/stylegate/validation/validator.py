"""CSS property validator: the security gate in front of every style write.

Two failure modes:

* a dangerous pattern anywhere in the batch rejects the whole batch and
  nothing is returned;
* a property outside the whitelist, or a malformed value, drops only that
  property; the rest of the batch is still validated.

Values that no rule can judge are accepted with a warning.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping

from stylegate.errors import SchemaRejection, SecurityRejection
from stylegate.model.result import Rejection, RejectionKind, ValidationResult
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
from stylegate.validation.tables import (
    ALLOWED_FUNCTIONS,
    ALLOWED_KEYWORDS,
    ALLOWED_PROPERTIES,
    ALLOWED_UNITS,
    DANGEROUS_PATTERNS,
    DANGEROUS_PROPERTIES,
    MAX_NUMERIC_VALUE,
)

__all__ = [
    "check_value",
    "find_dangerous_patterns",
    "sanitize_property_name",
    "sanitize_value",
    "to_inline_style",
    "validate",
    "validate_or_raise",
]

logger = logging.getLogger(__name__)

_URL_RE = re.compile(r"url\s*\(", re.IGNORECASE)
_NAME_STRIP_RE = re.compile(r"[^a-z0-9-]")
_WHITESPACE_RE = re.compile(r"\s+")

# Characters that could break out of a style="" attribute.
_ATTRIBUTE_BREAKOUT = str.maketrans("", "", "\"'<>")


# ---------------------------------------------------------------------------
# Sanitizing
# ---------------------------------------------------------------------------


def sanitize_property_name(name: str) -> str:
    """Lowercase and drop everything outside ``[a-z0-9-]``."""
    return _NAME_STRIP_RE.sub("", name.strip().lower())


def sanitize_value(value: str) -> str:
    """Trim, remove NUL bytes and collapse whitespace runs to one space."""
    value = value.replace("\0", "")
    return _WHITESPACE_RE.sub(" ", value).strip()


def _as_text(value: Any) -> str | None:
    """Accept strings and plain numbers from JSON; anything else is unusable."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


# ---------------------------------------------------------------------------
# Dangerous-pattern gate
# ---------------------------------------------------------------------------


def find_dangerous_patterns(declarations: Mapping[Any, Any]) -> list[Rejection]:
    """Scan every name and value for script-injection vectors.

    Returns one security rejection per hit; an empty list means the batch
    may proceed to per-property validation.
    """
    rejections: list[Rejection] = []
    for prop, raw in declarations.items():
        name = sanitize_property_name(str(prop))
        if name in DANGEROUS_PROPERTIES:
            rejections.append(
                Rejection(
                    code="dangerous_pattern",
                    message=f"Dangerous pattern detected: {name}:",
                    kind=RejectionKind.SECURITY,
                    property=name,
                )
            )
        text = _as_text(raw)
        if text is None:
            continue
        if "\0" in text:
            rejections.append(
                Rejection(
                    code="dangerous_pattern",
                    message=f"Null byte in value for {name}",
                    kind=RejectionKind.SECURITY,
                    property=name,
                )
            )
        # Sanitizing removes NUL bytes, so scan the sanitized value too.
        candidates = (text.lower(), sanitize_value(text).lower())
        for pattern in DANGEROUS_PATTERNS:
            if any(pattern in candidate for candidate in candidates):
                rejections.append(
                    Rejection(
                        code="dangerous_pattern",
                        message=f"Dangerous pattern detected: {pattern}",
                        kind=RejectionKind.SECURITY,
                        property=name,
                    )
                )
    return rejections


# ---------------------------------------------------------------------------
# Value rules
# ---------------------------------------------------------------------------


def _check_length(prop: str, value: Length) -> Rejection | None:
    if abs(value.number) > MAX_NUMERIC_VALUE:
        return Rejection(
            code="value_too_large",
            message=f"Numeric value exceeds maximum allowed ({MAX_NUMERIC_VALUE}) for {prop}: {value.text}",
            property=prop,
        )
    if value.unit and value.unit not in ALLOWED_UNITS:
        return Rejection(
            code="invalid_unit",
            message=f"Invalid CSS unit '{value.unit}' for {prop}: {value.text}",
            property=prop,
        )
    return None


def _check_function(prop: str, value: Function) -> Rejection | None:
    if value.name.lower() not in ALLOWED_FUNCTIONS:
        return Rejection(
            code="invalid_function",
            message=f"CSS function not allowed for {prop}: {value.name}",
            property=prop,
        )
    if not value.balanced:
        return Rejection(
            code="malformed_function",
            message=f"Malformed CSS function for {prop} (mismatched parentheses): {value.text}",
            property=prop,
        )
    return None


def check_value(prop: str, value: CssValue, warnings: list[str]) -> Rejection | None:
    """Validate one typed value of an allowed property. First match wins.

    Appends to *warnings* when the value is accepted without being
    understood. Returns the rejection, or None when the value is accepted.
    """
    text = value.text
    if not text:
        return Rejection(code="empty_value", message=f"Empty value for property: {prop}", property=prop)

    if _URL_RE.search(text):
        return Rejection(
            code="url_not_allowed",
            message=f"URL values are not allowed for security reasons ({prop})",
            property=prop,
        )

    if "color" in prop:
        if isinstance(value, Color) or text.lower() in CSS_WIDE_KEYWORDS:
            return None
        return Rejection(code="invalid_color", message=f"Invalid color value for {prop}: {text}", property=prop)

    if isinstance(value, Length):
        return _check_length(prop, value)
    if isinstance(value, Unparsed) and value.looks_numeric:
        return Rejection(code="invalid_number", message=f"Malformed number for {prop}: {text}", property=prop)

    allowed = ALLOWED_KEYWORDS.get(prop)
    if allowed is not None:
        keyword = text.lower()
        if keyword in allowed or keyword in CSS_WIDE_KEYWORDS:
            return None
        return Rejection(
            code="invalid_keyword",
            message=f'Invalid keyword "{text}" for property {prop}',
            property=prop,
        )

    if isinstance(value, Function):
        return _check_function(prop, value)

    if isinstance(value, Keyword) and value.lowered in CSS_WIDE_KEYWORDS:
        return None

    # A hex literal inside a shorthand such as ``border: 1px solid #ccc``.
    if isinstance(value, Color):
        return None

    if isinstance(value, Composite):
        for part in value.parts:
            rejection = check_value(prop, part, warnings)
            if rejection is not None:
                return rejection
        return None

    warnings.append(f"Could not fully validate {prop}: {text}")
    return None


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def validate(declarations: Mapping[Any, Any], strict: bool = False) -> ValidationResult:
    """Validate a flat property -> value map.

    With *strict*, any warning fails the result as well.
    """
    security = find_dangerous_patterns(declarations)
    if security:
        logger.warning(
            "Rejected CSS batch of %d declaration(s): %s",
            len(declarations),
            ", ".join(r.message for r in security),
        )
        return ValidationResult(rejections=tuple(security))

    validated: dict[str, str] = {}
    warnings: list[str] = []
    rejections: list[Rejection] = []

    for prop, raw in declarations.items():
        name = sanitize_property_name(str(prop))
        if name not in ALLOWED_PROPERTIES:
            rejections.append(
                Rejection(code="property_not_allowed", message=f"Property not allowed: {prop}", property=name)
            )
            continue

        text = _as_text(raw)
        if text is None:
            rejections.append(
                Rejection(
                    code="invalid_value",
                    message=f"Value for {name} must be a string, got {type(raw).__name__}",
                    property=name,
                )
            )
            continue

        value = sanitize_value(text)
        rejection = check_value(name, parse_value(name, value), warnings)
        if rejection is not None:
            rejections.append(rejection)
            continue
        validated[name] = value

    if strict and warnings:
        rejections.append(
            Rejection(
                code="strict_warnings",
                message=f"Strict validation failed: {len(warnings)} warning(s) treated as errors",
                kind=RejectionKind.STRICT,
            )
        )

    logger.debug(
        "Validated %d/%d declaration(s), %d rejection(s), %d warning(s)",
        len(validated),
        len(declarations),
        len(rejections),
        len(warnings),
    )
    return ValidationResult(
        validated=validated,
        warnings=tuple(warnings),
        rejections=tuple(rejections),
    )


def validate_or_raise(declarations: Mapping[Any, Any], strict: bool = False) -> ValidationResult:
    """Run validation; raises :class:`SecurityRejection` or :class:`SchemaRejection` on failure.

    Returns the result (validated map and warnings) when it passes.
    """
    result = validate(declarations, strict=strict)
    if result.security_rejected:
        raise SecurityRejection(result)
    if not result.ok:
        raise SchemaRejection(result)
    return result


def to_inline_style(declarations: Mapping[Any, Any]) -> str:
    """Render declarations as a ``style`` attribute value.

    Each property is re-validated on its own and silently dropped if it
    fails. Quotes and angle brackets are stripped from what survives.
    Names that sanitize to the same property collapse to the last
    accepted value, as in :func:`validate`.
    """
    styles: dict[str, str] = {}
    for prop, value in declarations.items():
        result = validate({prop: value})
        if not result.ok:
            continue
        for name, safe_value in result.validated.items():
            safe_value = safe_value.translate(_ATTRIBUTE_BREAKOUT).strip()
            if safe_value:
                styles[name] = safe_value
            else:
                styles.pop(name, None)
    return "; ".join(f"{name}: {value}" for name, value in styles.items())
