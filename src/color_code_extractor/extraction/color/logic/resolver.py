"""
resolver.py
===========

Does: Turn validated, possibly overlapping candidates into the two outputs the
      presentation layer needs: non-overlapping highlight spans and the list
      of distinct colors.
Used By: ColorExtractionService.
"""

from __future__ import annotations

import logging
from typing import Iterable

from color_code_extractor.extraction.color.types import (
    CandidateMatch,
    CanonicalColor,
    ResolvedSpan,
)

logger = logging.getLogger(__name__)

__all__ = ["text_order", "resolve_spans", "collect_unique_colors"]


def _sort_key(pair: tuple[CandidateMatch, CanonicalColor]) -> tuple[int, int]:
    cand = pair[0]
    return cand.start, cand.tag.scan_rank


def text_order(
    validated: Iterable[tuple[CandidateMatch, CanonicalColor]],
) -> list[tuple[CandidateMatch, CanonicalColor]]:
    """Does: Sort by start offset, ties broken by pattern-scan order."""
    return sorted(validated, key=_sort_key)


def resolve_spans(
    validated: Iterable[tuple[CandidateMatch, CanonicalColor]],
    debug: bool = False,
) -> list[ResolvedSpan]:
    """
    Greedy left-to-right sweep: a candidate is kept iff it starts at or after
    the end of the last kept one. No merging and no longest-match preference,
    so among overlapping hits the earliest start wins, then the earliest
    pattern in scan order.
    """
    spans: list[ResolvedSpan] = []
    last_end = 0
    for cand, color in text_order(validated):
        if cand.start >= last_end:
            spans.append(
                ResolvedSpan(start=cand.start, end=cand.end, raw=cand.raw, color=color, tag=cand.tag)
            )
            last_end = cand.end
        elif debug and logger.isEnabledFor(logging.DEBUG):
            logger.debug("[OVERLAP] drop %s %r at %d", cand.tag.value, cand.raw, cand.start)
    return spans


def collect_unique_colors(
    validated: Iterable[tuple[CandidateMatch, CanonicalColor]],
) -> list[CanonicalColor]:
    """
    Distinct colors by hex, first occurrence kept, span conflicts ignored.

    Order is the order of `validated`, which for scan output is pattern order
    (hex, rgb, rgba, hsl, hsla, bareRgb, bareHsl) and then position. A color
    that only appears as rgb therefore lists after every hex color, even one
    further along in the text.
    """
    seen: set[CanonicalColor] = set()
    unique: list[CanonicalColor] = []
    for _, color in validated:
        if color not in seen:
            seen.add(color)
            unique.append(color)
    return unique
