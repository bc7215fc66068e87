"""
color.
=====

Does: Aggregate core color-domain definitions (constants & value types) shared
      across scanning, validation, resolution, harmonies and display.
Used By: scan, logic, harmony, display, orchestrator.
Returns: Pure data structures only (no side effects).
"""

# ── Constants ────────────────────────────────────────────────────────────────
from .constants import (
    BRIGHTNESS_THRESHOLD,
    HARMONY_NAMES,
    HUE_OFFSETS,
    MONOCHROMATIC_STEPS,
    PATTERN_SOURCES,
)

# ── Types ────────────────────────────────────────────────────────────────────
from .types import (
    CandidateMatch,
    CanonicalColor,
    FormatTag,
    HarmonySet,
    HarmonySwatch,
    ResolvedSpan,
)

__all__ = [
    # constants
    "BRIGHTNESS_THRESHOLD",
    "HARMONY_NAMES",
    "HUE_OFFSETS",
    "MONOCHROMATIC_STEPS",
    "PATTERN_SOURCES",
    # types
    "FormatTag",
    "CandidateMatch",
    "CanonicalColor",
    "HarmonySwatch",
    "ResolvedSpan",
    "HarmonySet",
]
