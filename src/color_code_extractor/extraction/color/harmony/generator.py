"""
generator.py
============

Does: Derive the five harmony groups (complementary, analogous, triadic,
      tetradic, monochromatic) of a color by fixed hue rotations and
      lightness steps.
Used By: ColorExtractionService.harmonies, CLI demo (--harmonies).
Returns: HarmonySet of HarmonySwatch values (canonical hex + source h/s/l).
"""

from __future__ import annotations

import logging
from functools import lru_cache

from color_code_extractor.extraction.color.constants import (
    HUE_OFFSETS,
    MAX_PERCENT,
    MONOCHROMATIC_STEPS,
)
from color_code_extractor.extraction.color.types import (
    CanonicalColor,
    HarmonySet,
    HarmonySwatch,
)
from color_code_extractor.extraction.color.utils import normalize_hue_degrees

logger = logging.getLogger(__name__)

__all__ = ["generate_harmonies", "harmonies_for", "clamp_percent"]


def clamp_percent(value: int) -> int:
    return max(0, min(MAX_PERCENT, value))


def _rotate(h: int, s: int, l: int, offsets: tuple[int, ...]) -> tuple[HarmonySwatch, ...]:
    return tuple(HarmonySwatch.build(normalize_hue_degrees(h + off), s, l) for off in offsets)


def generate_harmonies(h: int, s: int, l: int) -> HarmonySet:
    """
    Build the harmony set of (h, s, l).

    Any integer hue is accepted and wrapped into [0, 360) first (-30 and 330
    give the same set). Hue-shifted groups keep s and l. Monochromatic keeps
    h and s and moves l by +20 then -20, clamped to [0, 100]. s and l must
    already be in 0–100 (ValueError otherwise).
    """
    h = normalize_hue_degrees(h)
    return HarmonySet(
        source=(h, s, l),
        complementary=_rotate(h, s, l, HUE_OFFSETS["complementary"]),
        analogous=_rotate(h, s, l, HUE_OFFSETS["analogous"]),
        triadic=_rotate(h, s, l, HUE_OFFSETS["triadic"]),
        tetradic=_rotate(h, s, l, HUE_OFFSETS["tetradic"]),
        monochromatic=tuple(
            HarmonySwatch.build(h, s, clamp_percent(l + step)) for step in MONOCHROMATIC_STEPS
        ),
    )


@lru_cache(maxsize=256)
def harmonies_for(color: CanonicalColor) -> HarmonySet:
    """Does: Harmony set of a canonical color (via its rounded HSL), cached per color."""
    h, s, l = color.hsl
    logger.debug("Generating harmonies for %s (hsl=%s)", color.hex, (h, s, l))
    return generate_harmonies(h, s, l)
