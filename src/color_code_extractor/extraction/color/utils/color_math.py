"""
color_math.py
=============

Does: Pure colorspace conversions used throughout extraction: hex <-> RGB,
      RGB <-> HSL (integer degrees/percent), weighted brightness and hue
      normalization.
Used By: Normalize pipeline, canonical color type, harmony generator, display cards.
Returns: Tuples of ints, uppercase '#RRGGBB' strings, floats. No side effects.
"""

from __future__ import annotations

import logging
import math
import re

from webcolors import hex_to_rgb as _wc_hex_to_rgb
from webcolors import rgb_to_hex as _wc_rgb_to_hex

from color_code_extractor.extraction.color.constants import (
    BRIGHTNESS_THRESHOLD,
    LUMA_WEIGHTS,
    MAX_CHANNEL,
    MAX_HUE,
    MAX_PERCENT,
)

# Public surface
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

logger = logging.getLogger(__name__)

# ── Types ─────────────────────────────────────────────────────────────────────
RGB = tuple[int, int, int]
HSL = tuple[int, int, int]

_HEX_DIGITS_RE = re.compile(r"[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}")


# =============================================================================
# 1) ROUNDING & VALIDATION
# =============================================================================

def round_half_up(x: float) -> int:
    """Does: Round to nearest int with .5 going up (builtin round() is banker's)."""
    return int(math.floor(x + 0.5))


def _validate_rgb(rgb: RGB) -> None:
    if not all(isinstance(v, int) and 0 <= v <= MAX_CHANNEL for v in rgb):
        raise ValueError(f"RGB out of bounds: {rgb}")


def _validate_hsl(h: int, s: int, l: int) -> None:
    if not (0 <= h <= MAX_HUE and 0 <= s <= MAX_PERCENT and 0 <= l <= MAX_PERCENT):
        raise ValueError(f"HSL out of bounds: {(h, s, l)}")


# =============================================================================
# 2) HEX <-> RGB
# =============================================================================

def expand_short_hex(hex3: str) -> str:
    """Does: Duplicate each digit of a 3-digit hex ('f0a' -> 'ff00aa'); 6 digits pass through."""
    if not _HEX_DIGITS_RE.fullmatch(hex3):
        raise ValueError(f"Expected 3 or 6 hex digits, got {hex3!r}")
    if len(hex3) == 3:
        return "".join(c * 2 for c in hex3)
    return hex3


def _strip_hex_prefix(value: str) -> str:
    if value.startswith("#"):
        return value[1:]
    if value.startswith("0x"):
        return value[2:]
    return value


def hex_to_rgb(value: str) -> RGB:
    """Does: Parse '#RRGGBB', 'RRGGBB', '0xRGB' (3 or 6 digits) into (r, g, b)."""
    digits = expand_short_hex(_strip_hex_prefix(value))
    rgb = _wc_hex_to_rgb(f"#{digits}")
    return rgb.red, rgb.green, rgb.blue


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Does: Format channels as zero-padded uppercase '#RRGGBB'. Raises ValueError outside 0–255."""
    _validate_rgb((r, g, b))
    return _wc_rgb_to_hex((r, g, b)).upper()


# =============================================================================
# 3) RGB <-> HSL
# =============================================================================

def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """
    Does: Convert RGB to HSL with h in degrees and s/l in percent, each rounded
    half-up to the nearest integer. Achromatic input (max == min) gives h = s = 0.
    """
    _validate_rgb((r, g, b))
    rf, gf, bf = r / 255, g / 255, b / 255
    hi = max(rf, gf, bf)
    lo = min(rf, gf, bf)
    l = (hi + lo) / 2

    if hi == lo:
        h = s = 0.0
    else:
        d = hi - lo
        s = d / (2 - hi - lo) if l > 0.5 else d / (hi + lo)
        # Channel priority r > g > b when two channels share the max
        if hi == rf:
            h = ((gf - bf) / d + (6 if gf < bf else 0)) / 6
        elif hi == gf:
            h = ((bf - rf) / d + 2) / 6
        else:
            h = ((rf - gf) / d + 4) / 6

    return round_half_up(h * 360), round_half_up(s * 100), round_half_up(l * 100)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: int, s: int, l: int) -> RGB:
    """
    Does: Convert HSL (0–360, 0–100, 0–100) to integer RGB with the standard
    piecewise hue function; s == 0 yields a grey of lightness l.
    """
    _validate_hsl(h, s, l)
    hf, sf, lf = h / 360, s / 100, l / 100

    if sf == 0:
        r = g = b = lf
    else:
        q = lf * (1 + sf) if lf < 0.5 else lf + sf - lf * sf
        p = 2 * lf - q
        r = _hue_to_channel(p, q, hf + 1 / 3)
        g = _hue_to_channel(p, q, hf)
        b = _hue_to_channel(p, q, hf - 1 / 3)

    return round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255)


# =============================================================================
# 4) BRIGHTNESS & HUE
# =============================================================================

def brightness(r: int, g: int, b: int) -> float:
    """Does: Weighted luminance 0.299r + 0.587g + 0.114b (0–255)."""
    wr, wg, wb = LUMA_WEIGHTS
    return (r * wr + g * wg + b * wb) / 1000


def is_light(r: int, g: int, b: int, threshold: float = BRIGHTNESS_THRESHOLD) -> bool:
    """Does: True when the color needs a dark label (brightness strictly above threshold)."""
    return brightness(r, g, b) > threshold


def normalize_hue_degrees(h: int) -> int:
    """Does: Wrap any hue (negative included) into [0, 360)."""
    # Python's % already returns a non-negative result for a positive modulus.
    return h % 360
