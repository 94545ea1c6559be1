"""Validation result model for the property validator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class RejectionKind(StrEnum):
    SECURITY = "security"
    SCHEMA = "schema"
    STRICT = "strict"


@dataclass(frozen=True)
class Rejection:
    """Why a declaration (or the whole batch) was refused.

    Attributes:
        code: Stable machine-readable reason, e.g. ``"invalid_unit"``.
        message: Human-readable description.
        kind: Security rejections fail the batch; schema ones drop a property.
        property: The offending property, when one is to blame.
    """

    code: str
    message: str
    kind: RejectionKind = RejectionKind.SCHEMA
    property: str | None = None


@dataclass(frozen=True)
class ValidationResult:
    """The outcome of validating a property map.

    ``validated`` holds the surviving declarations. It is empty after a
    security rejection and holds the partial subset after schema
    rejections, even though ``ok`` is then False.
    """

    validated: dict[str, str] = field(default_factory=dict)
    warnings: tuple[str, ...] = ()
    rejections: tuple[Rejection, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.rejections

    @property
    def errors(self) -> tuple[str, ...]:
        return tuple(r.message for r in self.rejections)

    @property
    def error_codes(self) -> tuple[str, ...]:
        return tuple(r.code for r in self.rejections)

    @property
    def security_rejected(self) -> bool:
        return any(r.kind is RejectionKind.SECURITY for r in self.rejections)

    def to_dict(self) -> dict[str, Any]:
        if self.ok:
            return {"validated": dict(self.validated), "warnings": list(self.warnings)}
        return {
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "error_codes": list(self.error_codes),
        }
