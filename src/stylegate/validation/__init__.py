from stylegate.validation.validator import (
    check_value,
    find_dangerous_patterns,
    sanitize_property_name,
    sanitize_value,
    to_inline_style,
    validate,
    validate_or_raise,
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
