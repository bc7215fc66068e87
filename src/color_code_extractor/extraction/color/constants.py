# constants.py
# ============

"""
constants.
=========

Does: Define global, immutable color-domain constants for scanning, validation
      and harmony generation (pattern sources, channel limits, hue offsets).
Used By: PatternScanner, normalize pipeline, harmony generator, display cards.
Returns: Pure data structures only (no side effects).
"""

from __future__ import annotations

# ── 1) Lexical patterns ──────────────────────────────────────────────────────
# Keyed by FormatTag value; scan order is the declaration order of FormatTag.
# Numeric groups are capped at 3 digits and anchored on word boundaries so a
# 4-digit run is never split into a group plus leftover.
HEX_PATTERN = r"(?:#|0x)([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})\b"
RGB_PATTERN = r"rgb\s*\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)"
RGBA_PATTERN = r"rgba\s*\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*([\d.]+)\s*\)"
HSL_PATTERN = r"hsl\s*\(\s*(\d{1,3})\s*,\s*(\d{1,3})%\s*,\s*(\d{1,3})%\s*\)"
HSLA_PATTERN = r"hsla\s*\(\s*(\d{1,3})\s*,\s*(\d{1,3})%\s*,\s*(\d{1,3})%\s*,\s*([\d.]+)\s*\)"
# Bare triplets: aggressive on purpose, prose like "3, 4, 5" matches too.
BARE_RGB_PATTERN = r"\b(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\b"
BARE_HSL_PATTERN = r"\b(\d{1,3})\s*,\s*(\d{1,3})%\s*,\s*(\d{1,3})%\b"

PATTERN_SOURCES: dict[str, str] = {
    "hex": HEX_PATTERN,
    "rgb": RGB_PATTERN,
    "rgba": RGBA_PATTERN,
    "hsl": HSL_PATTERN,
    "hsla": HSLA_PATTERN,
    "bareRgb": BARE_RGB_PATTERN,
    "bareHsl": BARE_HSL_PATTERN,
}

# Function names match case-insensitively; the "0x" hex prefix does not.
CASE_INSENSITIVE_TAGS = frozenset({"rgb", "rgba", "hsl", "hsla"})

# Number of capture groups per pattern
GROUP_ARITY: dict[str, int] = {
    "hex": 1,
    "rgb": 3,
    "rgba": 4,
    "hsl": 3,
    "hsla": 4,
    "bareRgb": 3,
    "bareHsl": 3,
}


# ── 2) Numeric limits ────────────────────────────────────────────────────────
MAX_CHANNEL = 255
MAX_HUE = 360
MAX_PERCENT = 100


# ── 3) Display ───────────────────────────────────────────────────────────────
# Weighted luminance coefficients (per mille)
LUMA_WEIGHTS = (299, 587, 114)
BRIGHTNESS_THRESHOLD = 128
DARK_LABEL = "#000000"
LIGHT_LABEL = "#FFFFFF"


# ── 4) Harmonies ─────────────────────────────────────────────────────────────
# Hue offsets in degrees; same saturation/lightness as the source color.
HUE_OFFSETS: dict[str, tuple[int, ...]] = {
    "complementary": (180,),
    "analogous": (-30, 30),
    "triadic": (120, 240),
    "tetradic": (90, 180, 270),
}
# Lightness offsets in percent; clamped to [0, 100], never wrapped.
MONOCHROMATIC_STEPS: tuple[int, ...] = (20, -20)

HARMONY_NAMES: tuple[str, ...] = (
    "complementary",
    "analogous",
    "triadic",
    "tetradic",
    "monochromatic",
)
