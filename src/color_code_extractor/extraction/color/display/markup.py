"""
markup.py
=========

Does: Rebuild input text as HTML with each resolved span wrapped in a styled
      <span> (background = the color, text = contrasting label color).
Used By: ColorExtractionService.highlight, CLI demo (--html).
"""

from __future__ import annotations

import html
from typing import Any, Mapping, Sequence

from color_code_extractor.extraction.color.display.cards import label_color
from color_code_extractor.extraction.color.display.settings import DEFAULT_DISPLAY_SETTINGS
from color_code_extractor.extraction.color.types import ResolvedSpan

__all__ = ["render_span", "render_highlight_html"]


def _escape(text: str) -> str:
    # Text-node escaping: & < > only, quotes stay as typed.
    return html.escape(text, quote=False)


def render_span(span: ResolvedSpan, settings: Mapping[str, Any] | None = None) -> str:
    cfg = settings or DEFAULT_DISPLAY_SETTINGS
    css = cfg["highlight_class"]
    fg = label_color(span.color.rgb, cfg)
    return (
        f'<span class="{css} {css}-{span.tag.value}" '
        f'style="background-color: {span.hex}; color: {fg};" '
        f'data-color="{span.hex}">{_escape(span.raw)}</span>'
    )


def render_highlight_html(
    text: str,
    spans: Sequence[ResolvedSpan],
    settings: Mapping[str, Any] | None = None,
) -> str:
    """
    Interleave escaped plain text with rendered spans.

    `spans` must be the resolver output (sorted, non-overlapping). Text that
    is empty or whitespace only is returned escaped, without markup.
    """
    if not text.strip():
        return _escape(text)

    parts: list[str] = []
    last = 0
    for span in spans:
        parts.append(_escape(text[last:span.start]))
        parts.append(render_span(span, settings))
        last = span.end
    parts.append(_escape(text[last:]))
    return "".join(parts)
