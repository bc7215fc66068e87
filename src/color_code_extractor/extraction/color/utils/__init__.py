"""
utils package.
=============

Does: Provide the colorspace math shared across extraction modules
      (hex/RGB/HSL conversions, brightness, hue wrapping).
"""

from .color_math import (
    HSL,
    RGB,
    brightness,
    expand_short_hex,
    hex_to_rgb,
    hsl_to_rgb,
    is_light,
    normalize_hue_degrees,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_up,
)

__all__ = [
    "RGB",
    "HSL",
    "round_half_up",
    "expand_short_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "brightness",
    "is_light",
    "normalize_hue_degrees",
]

__docformat__ = "google"
