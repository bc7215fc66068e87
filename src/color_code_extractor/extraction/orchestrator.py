# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: High-level orchestration of color-code extraction: scan text with every
      pattern, validate candidates, then build (a) non-overlapping highlight
      spans and (b) the distinct colors in palette order (pattern order, then
      position).
Returns:
  - extract_colors(text) -> ExtractionResult(spans, colors)
  - ColorExtractionService.highlight(text) -> HTML string
  - ColorExtractionService.cards(text) -> list[ColorCard]
  - ColorExtractionService.harmonies(color) -> HarmonySet
Used by: the CLI demo and any presentation layer (one call per text change).
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from color_code_extractor.extraction.color.display import (
    ColorCard,
    describe_color,
    get_display_settings,
    render_highlight_html,
)
from color_code_extractor.extraction.color.harmony import harmonies_for
from color_code_extractor.extraction.color.logic import (
    collect_unique_colors,
    resolve_spans,
    validate_candidates,
)
from color_code_extractor.extraction.color.scan import COLOR_PATTERNS, ColorPattern, scan_text
from color_code_extractor.extraction.color.types import (
    CanonicalColor,
    HarmonySet,
    ResolvedSpan,
)
from color_code_extractor.extraction.color.utils import hex_to_rgb, rgb_to_hex
from color_code_extractor.extraction.general.utils import trace_colors, trace_counts

logger = logging.getLogger(__name__)

__all__ = [
    "ExtractionResult",
    "ColorExtractionService",
    "extract_colors",
]


# =============================================================================
# Result type
# =============================================================================


@dataclass(frozen=True)
class ExtractionResult:
    """Both outputs of one extraction call. Spans and colors are independent."""

    spans: tuple[ResolvedSpan, ...]
    colors: tuple[CanonicalColor, ...]

    @property
    def hexes(self) -> list[str]:
        return [c.hex for c in self.colors]

    @property
    def count_label(self) -> str:
        n = len(self.colors)
        return f"{n} color" if n == 1 else f"{n} colors"

    def to_dict(self) -> dict[str, Any]:
        return {
            "spans": [
                {
                    "start": s.start,
                    "end": s.end,
                    "raw": s.raw,
                    "hex": s.hex,
                    "format": s.tag.value,
                }
                for s in self.spans
            ],
            "colors": self.hexes,
        }


# =============================================================================
# Helpers
# =============================================================================


def _require_text(text: object) -> str:
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")
    return text


# =============================================================================
# Service
# =============================================================================


class ColorExtractionService:
    """
    Stateless facade over scan → validate → resolve/dedupe.

    Display settings are read per call through the mtime-cached loader,
    unless a fixed mapping is passed in. Nothing is kept between calls.
    """

    def __init__(
        self,
        patterns: Sequence[ColorPattern] = COLOR_PATTERNS,
        settings: Mapping[str, Any] | None = None,
        debug: bool = False,
    ) -> None:
        self.patterns = tuple(patterns)
        self._settings = dict(settings) if settings is not None else None
        self.debug = debug

    @property
    def settings(self) -> dict[str, Any]:
        if self._settings is not None:
            return dict(self._settings)
        return get_display_settings()

    def extract(self, text: str) -> ExtractionResult:
        text = _require_text(text)
        candidates = scan_text(text, self.patterns, debug=self.debug)
        validated = validate_candidates(candidates, debug=self.debug)
        spans = resolve_spans(validated, debug=self.debug)
        colors = collect_unique_colors(validated)

        if self.debug and logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "[EXTRACT] %d candidate(s), %d valid, %d span(s), %d color(s)",
                len(candidates),
                len(validated),
                len(spans),
                len(colors),
            )
        trace_counts("scan", **{p.tag.value: sum(c.tag is p.tag for c in candidates) for p in self.patterns})
        trace_counts("validate", kept=len(validated), rejected=len(candidates) - len(validated))
        trace_counts("resolve", spans=len(spans), overlapped=len(validated) - len(spans))
        trace_colors("extraction", "colors", (c.hex for c in colors))
        return ExtractionResult(spans=tuple(spans), colors=tuple(colors))

    def highlight(self, text: str, result: ExtractionResult | None = None) -> str:
        """Does: Marked-up HTML of `text` (reuses `result` when given)."""
        text = _require_text(text)
        spans = (result or self.extract(text)).spans
        return render_highlight_html(text, spans, self.settings)

    def cards(self, text: str, result: ExtractionResult | None = None) -> list[ColorCard]:
        """Does: One ColorCard per distinct color, in palette order."""
        colors = (result or self.extract(text)).colors
        settings = self.settings
        return [describe_color(c, settings) for c in colors]

    def harmonies(self, color: CanonicalColor | str) -> HarmonySet:
        """Does: Harmony set of a color (CanonicalColor or hex string such as "#F00"), on demand."""
        if isinstance(color, str):
            color = CanonicalColor(rgb_to_hex(*hex_to_rgb(color)))
        harmony_set = harmonies_for(color)
        trace_colors("harmony", f"{color.hex} complementary", (sw.hex for sw in harmony_set.complementary))
        return harmony_set


# =============================================================================
# Public API
# =============================================================================


def extract_colors(text: str, debug: bool = False) -> ExtractionResult:
    """
    Extract color codes from `text`.

    Returns spans for inline highlighting (sorted, non-overlapping) and the
    distinct canonical colors in palette order (pattern order, then position).
    Raises TypeError when `text` is not a str.
    """
    return ColorExtractionService(debug=debug).extract(text)
