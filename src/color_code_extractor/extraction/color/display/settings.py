"""
settings.py.

Does: Load and validate presentation settings (label colors, brightness
threshold, alpha shown in rgba/hsla strings, highlight CSS class) from
<data>/display_settings.json.
"""

from __future__ import annotations

import re
from typing import Any

from color_code_extractor.extraction.color.constants import (
    BRIGHTNESS_THRESHOLD,
    DARK_LABEL,
    LIGHT_LABEL,
)
from color_code_extractor.extraction.general.utils import load_config

__all__ = ["DEFAULT_DISPLAY_SETTINGS", "validate_display_settings", "get_display_settings"]

DEFAULT_DISPLAY_SETTINGS: dict[str, Any] = {
    "brightness_threshold": BRIGHTNESS_THRESHOLD,
    "dark_label": DARK_LABEL,
    "light_label": LIGHT_LABEL,
    "format_alpha": 1,
    "highlight_class": "color-highlight",
}

_LABEL_RE = re.compile(r"#[0-9A-Fa-f]{6}")


def validate_display_settings(data: dict[str, Any]) -> dict[str, Any]:
    """Merge over defaults and check types; raises ValueError/TypeError on bad values."""
    unknown = set(data) - set(DEFAULT_DISPLAY_SETTINGS)
    if unknown:
        raise ValueError(f"unknown display settings: {sorted(unknown)}")

    merged = {**DEFAULT_DISPLAY_SETTINGS, **data}
    threshold = merged["brightness_threshold"]
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise TypeError("brightness_threshold must be a number")
    for key in ("dark_label", "light_label"):
        if not isinstance(merged[key], str) or not _LABEL_RE.fullmatch(merged[key]):
            raise ValueError(f"{key} must be a '#RRGGBB' string, got {merged[key]!r}")
        merged[key] = merged[key].upper()
    alpha = merged["format_alpha"]
    if isinstance(alpha, bool) or not isinstance(alpha, (int, float)) or not 0 <= alpha <= 1:
        raise ValueError("format_alpha must be a number in [0, 1]")
    if not isinstance(merged["highlight_class"], str) or not merged["highlight_class"].strip():
        raise ValueError("highlight_class must be a non-empty string")
    return merged


def get_display_settings() -> dict[str, Any]:
    """Does: Read display_settings.json from the data dir, validated and merged over defaults."""
    return load_config("display_settings", validator=validate_display_settings)
