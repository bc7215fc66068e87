"""
cards.py
========

Does: Build the presentation metadata of one canonical color: RGB/HSL values,
      brightness, the contrasting label color and five copyable format strings.
Used By: ColorExtractionService.cards, highlight markup, CLI demo.
Returns: ColorCard (frozen) / label color strings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from color_code_extractor.extraction.color.display.settings import DEFAULT_DISPLAY_SETTINGS
from color_code_extractor.extraction.color.types import CanonicalColor
from color_code_extractor.extraction.color.utils import HSL, RGB, brightness, is_light

__all__ = ["ColorCard", "label_color", "format_strings", "describe_color"]


@dataclass(frozen=True)
class ColorCard:
    color: CanonicalColor
    rgb: RGB
    hsl: HSL
    brightness: float
    label_color: str
    formats: dict[str, str] = field(default_factory=dict)

    @property
    def hex(self) -> str:
        return self.color.hex

    def to_dict(self) -> dict[str, Any]:
        return {
            "hex": self.hex,
            "rgb": list(self.rgb),
            "hsl": list(self.hsl),
            "brightness": self.brightness,
            "label_color": self.label_color,
            "formats": dict(self.formats),
        }


def label_color(rgb: RGB, settings: Mapping[str, Any] | None = None) -> str:
    """Does: Dark label on light colors (brightness > threshold), light label otherwise."""
    cfg = settings or DEFAULT_DISPLAY_SETTINGS
    if is_light(*rgb, threshold=cfg["brightness_threshold"]):
        return cfg["dark_label"]
    return cfg["light_label"]


def format_strings(
    color: CanonicalColor,
    rgb: RGB,
    hsl: HSL,
    alpha: float = 1,
) -> dict[str, str]:
    """Does: hex / rgb / hsl / rgba / hsla strings, in that order."""
    r, g, b = rgb
    h, s, l = hsl
    a = f"{alpha:g}"
    return {
        "hex": color.hex,
        "rgb": f"rgb({r}, {g}, {b})",
        "hsl": f"hsl({h}, {s}%, {l}%)",
        "rgba": f"rgba({r}, {g}, {b}, {a})",
        "hsla": f"hsla({h}, {s}%, {l}%, {a})",
    }


def describe_color(
    color: CanonicalColor,
    settings: Mapping[str, Any] | None = None,
) -> ColorCard:
    """Does: Assemble the ColorCard for `color` using display settings (defaults if None)."""
    cfg = settings or DEFAULT_DISPLAY_SETTINGS
    rgb = color.rgb
    hsl = color.hsl
    return ColorCard(
        color=color,
        rgb=rgb,
        hsl=hsl,
        brightness=brightness(*rgb),
        label_color=label_color(rgb, cfg),
        formats=format_strings(color, rgb, hsl, alpha=cfg["format_alpha"]),
    )
