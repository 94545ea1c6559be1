"""WCAG 2.x relative luminance and contrast ratio."""

from __future__ import annotations

from stylegate.color.model import ColorValue
from stylegate.color.space import hsl_to_rgb, rgb_to_hsl

__all__ = ["contrast_ratio", "relative_luminance", "suggest_color_fix"]

# Lightness step used when searching for a passing foreground.
_LIGHTNESS_STEP = 0.02


def _linear_channel(value: int) -> float:
    c = value / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorValue) -> float:
    """Perceptual brightness in [0, 1] of a gamma-corrected sRGB color."""
    return (
        0.2126 * _linear_channel(color.r)
        + 0.7152 * _linear_channel(color.g)
        + 0.0722 * _linear_channel(color.b)
    )


def contrast_ratio(a: ColorValue, b: ColorValue) -> float:
    """WCAG contrast ratio between two colors, in [1, 21]. Symmetric."""
    l1 = relative_luminance(a)
    l2 = relative_luminance(b)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def suggest_color_fix(
    foreground: ColorValue, background: ColorValue, required: float
) -> str:
    """Suggest a foreground that reaches *required* contrast against *background*.

    The foreground keeps its hue and saturation; only lightness moves, away
    from the background's luminance.
    """
    hue, saturation, lightness = rgb_to_hsl(foreground)
    darken = relative_luminance(foreground) <= relative_luminance(background)
    step = -_LIGHTNESS_STEP if darken else _LIGHTNESS_STEP

    candidate_lightness = lightness
    while 0.0 <= candidate_lightness + step <= 1.0:
        candidate_lightness += step
        candidate = hsl_to_rgb(hue, saturation, candidate_lightness)
        if contrast_ratio(candidate, background) >= required:
            direction = "darker" if darken else "lighter"
            return (
                f"Try a {direction} foreground such as {candidate.hex} "
                f"({contrast_ratio(candidate, background):.2f}:1)."
            )

    if darken:
        return "Try using a darker foreground color or lighter background."
    return "Try using a lighter foreground color or darker background."
