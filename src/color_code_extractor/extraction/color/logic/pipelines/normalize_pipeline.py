"""
normalize_pipeline.py.
=====================

Does: Validate candidate matches per format (numeric range checks) and map
      survivors to a CanonicalColor.
Returns: CanonicalColor or None for one candidate; (candidate, color) pairs
         for a batch, rejected candidates dropped.
Used By: ColorExtractionService, resolver tests, CLI demo.
"""

from __future__ import annotations

import logging
from typing import Iterable

from color_code_extractor.extraction.color.constants import (
    MAX_CHANNEL,
    MAX_HUE,
    MAX_PERCENT,
)
from color_code_extractor.extraction.color.types import (
    CandidateMatch,
    CanonicalColor,
    FormatTag,
)
from color_code_extractor.extraction.color.utils import (
    expand_short_hex,
    hsl_to_rgb,
    rgb_to_hex,
)

logger = logging.getLogger(__name__)

ValidatedCandidate = tuple[CandidateMatch, CanonicalColor]

__all__ = [
    "ValidatedCandidate",
    "normalize_candidate",
    "validate_candidates",
]


def _normalize_hex(candidate: CandidateMatch) -> CanonicalColor:
    return CanonicalColor("#" + expand_short_hex(candidate.groups[0]).upper())


def _normalize_rgb(candidate: CandidateMatch, debug: bool) -> CanonicalColor | None:
    r, g, b = candidate.channels
    if r > MAX_CHANNEL or g > MAX_CHANNEL or b > MAX_CHANNEL:
        if debug and logger.isEnabledFor(logging.DEBUG):
            logger.debug("[REJECT] %r: channel above %d", candidate.raw, MAX_CHANNEL)
        return None
    return CanonicalColor(rgb_to_hex(r, g, b))


def _normalize_hsl(candidate: CandidateMatch, debug: bool) -> CanonicalColor | None:
    h, s, l = candidate.channels
    if h > MAX_HUE or s > MAX_PERCENT or l > MAX_PERCENT:
        if debug and logger.isEnabledFor(logging.DEBUG):
            logger.debug("[REJECT] %r: hsl out of range", candidate.raw)
        return None
    return CanonicalColor(rgb_to_hex(*hsl_to_rgb(h, s, l)))


def normalize_candidate(candidate: CandidateMatch, debug: bool = False) -> CanonicalColor | None:
    """
    Map one candidate to its canonical color, or None when its numbers are
    out of range. Alpha (rgba/hsla) is ignored for identity.

    Rejection is the common case for bare triplets found in prose, so it
    returns None instead of raising.
    """
    if candidate.tag is FormatTag.HEX:
        return _normalize_hex(candidate)
    if candidate.tag.is_rgb_family:
        return _normalize_rgb(candidate, debug)
    if candidate.tag.is_hsl_family:
        return _normalize_hsl(candidate, debug)
    return None


def validate_candidates(
    candidates: Iterable[CandidateMatch],
    debug: bool = False,
) -> list[ValidatedCandidate]:
    """Does: Keep (candidate, color) for every candidate that normalizes; order preserved."""
    validated: list[ValidatedCandidate] = []
    for cand in candidates:
        color = normalize_candidate(cand, debug=debug)
        if color is not None:
            validated.append((cand, color))
    if debug and logger.isEnabledFor(logging.DEBUG):
        logger.debug("[VALIDATED] %d candidate(s) kept", len(validated))
    return validated
