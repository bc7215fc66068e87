"""
patterns.py
===========

Does: Compile the seven color-code patterns and scan raw text with each of
      them independently, yielding CandidateMatch objects with offsets, raw
      substring and captured groups.
Used By: Orchestrator (ColorExtractionService), tests, CLI demo.
Returns: Lists/iterators of CandidateMatch in pattern-scan order, each pattern
         left to right. Overlaps across patterns are kept for the resolver.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Iterator

from color_code_extractor.extraction.color.constants import (
    CASE_INSENSITIVE_TAGS,
    GROUP_ARITY,
    PATTERN_SOURCES,
)
from color_code_extractor.extraction.color.types import CandidateMatch, FormatTag

__all__ = [
    "ColorPattern",
    "COLOR_PATTERNS",
    "compile_pattern",
    "scan_pattern",
    "scan_text",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColorPattern:
    """One compiled lexical pattern and the number of groups it captures."""

    tag: FormatTag
    regex: re.Pattern[str]
    arity: int


def compile_pattern(tag: FormatTag) -> ColorPattern:
    """Does: Compile the pattern for `tag`; ASCII-only digits and word boundaries."""
    flags = re.ASCII
    if tag.value in CASE_INSENSITIVE_TAGS:
        flags |= re.IGNORECASE
    regex = re.compile(PATTERN_SOURCES[tag.value], flags)
    arity = GROUP_ARITY[tag.value]
    if regex.groups != arity:
        raise ValueError(f"Pattern {tag.value!r} captures {regex.groups} groups, expected {arity}")
    return ColorPattern(tag=tag, regex=regex, arity=arity)


# Fixed, ordered pattern set (hex, rgb, rgba, hsl, hsla, bareRgb, bareHsl)
COLOR_PATTERNS: tuple[ColorPattern, ...] = tuple(compile_pattern(tag) for tag in FormatTag)


def scan_pattern(text: str, pattern: ColorPattern) -> Iterator[CandidateMatch]:
    """Does: Yield non-overlapping matches of one pattern, left to right."""
    for m in pattern.regex.finditer(text):
        yield CandidateMatch(
            start=m.start(),
            end=m.end(),
            raw=m.group(0),
            tag=pattern.tag,
            groups=tuple(m.groups()),
        )


def scan_text(
    text: str,
    patterns: Iterable[ColorPattern] = COLOR_PATTERNS,
    debug: bool = False,
) -> list[CandidateMatch]:
    """
    Run every pattern over `text` and concatenate the hits.

    Output order is pattern order first, then position, which is what the
    resolver relies on for its tie-break.
    """
    candidates: list[CandidateMatch] = []
    for pattern in patterns:
        hits = list(scan_pattern(text, pattern))
        if debug and logger.isEnabledFor(logging.DEBUG):
            logger.debug("[SCAN] %-7s → %d hit(s) %s", pattern.tag.value, len(hits), [h.raw for h in hits])
        candidates.extend(hits)
    return candidates
