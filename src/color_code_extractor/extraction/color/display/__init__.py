"""
display
=======

Does: Presentation metadata for detected colors: color cards (format strings,
      label color), highlight HTML, and the display settings behind them.
"""

from __future__ import annotations

from .cards import ColorCard, describe_color, format_strings, label_color
from .markup import render_highlight_html, render_span
from .settings import (
    DEFAULT_DISPLAY_SETTINGS,
    get_display_settings,
    validate_display_settings,
)

__all__ = [
    "ColorCard",
    "describe_color",
    "format_strings",
    "label_color",
    "render_highlight_html",
    "render_span",
    "DEFAULT_DISPLAY_SETTINGS",
    "get_display_settings",
    "validate_display_settings",
]

__docformat__ = "google"
