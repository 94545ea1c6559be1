"""RGB <-> HSL conversion on top of :mod:`colorsys`."""

from __future__ import annotations

import colorsys

from stylegate.color.model import ColorValue

__all__ = ["hsl_to_rgb", "rgb_to_hsl"]


def rgb_to_hsl(color: ColorValue) -> tuple[float, float, float]:
    """Return ``(hue, saturation, lightness)`` with hue in [0, 360) and s/l in [0, 1]."""
    hue, lightness, saturation = colorsys.rgb_to_hls(
        color.r / 255, color.g / 255, color.b / 255
    )
    return ((hue * 360) % 360, saturation, lightness)


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> ColorValue:
    """Build a ColorValue from hue in degrees (any range) and s/l in [0, 1]."""
    saturation = min(max(saturation, 0.0), 1.0)
    lightness = min(max(lightness, 0.0), 1.0)
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360, lightness, saturation)
    return ColorValue(round(r * 255), round(g * 255), round(b * 255))
