"""Error hierarchy for stylegate.

The core never raises on malformed CSS; it returns structured results.
These exceptions cover the two places where raising is the contract:
``validate_or_raise`` and caller mistakes in building a rule context.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stylegate.model.result import ValidationResult


class StyleGateError(Exception):
    """Base error for all stylegate errors."""


class CSSValidationError(StyleGateError):
    """A declaration batch failed validation."""

    def __init__(self, result: ValidationResult) -> None:
        self.result = result
        detail = "; ".join(result.errors) or "no details"
        super().__init__(f"CSS validation failed: {detail}")

    @property
    def errors(self) -> tuple[str, ...]:
        return self.result.errors

    @property
    def warnings(self) -> tuple[str, ...]:
        return self.result.warnings


class SecurityRejection(CSSValidationError):
    """A dangerous pattern was found; the whole batch was rejected."""


class SchemaRejection(CSSValidationError):
    """One or more declarations were malformed or not allowed."""


class ContextError(StyleGateError, ValueError):
    """A rule context was built with missing or wrongly typed fields."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
