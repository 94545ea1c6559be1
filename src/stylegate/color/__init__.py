from stylegate.color.contrast import contrast_ratio, relative_luminance, suggest_color_fix
from stylegate.color.model import ColorValue
from stylegate.color.parser import NAMED_COLORS, parse_color
from stylegate.color.space import hsl_to_rgb, rgb_to_hsl

# ``parse`` is the short name used throughout the package.
parse = parse_color

__all__ = [
    "ColorValue",
    "NAMED_COLORS",
    "contrast_ratio",
    "hsl_to_rgb",
    "parse",
    "parse_color",
    "relative_luminance",
    "rgb_to_hsl",
    "suggest_color_fix",
]
