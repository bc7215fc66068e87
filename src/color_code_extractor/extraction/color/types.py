"""
types.py.

Does: Define the value types that flow through the extraction pipeline:
      format tags, candidate matches, canonical colors, resolved spans and
      harmony sets.
Used by: scan, logic (normalize/resolve), harmony, display and the orchestrator.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from color_code_extractor.extraction.color.constants import HARMONY_NAMES
from color_code_extractor.extraction.color.utils.color_math import (
    HSL,
    RGB,
    hex_to_rgb,
    hsl_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
)

__all__ = [
    "FormatTag",
    "CandidateMatch",
    "CanonicalColor",
    "HarmonySwatch",
    "ResolvedSpan",
    "HarmonySet",
]
__docformat__ = "google"

_CANONICAL_HEX_RE = re.compile(r"#[0-9A-F]{6}")


class FormatTag(str, Enum):
    """Lexical format of a match. Declaration order is the scan order."""

    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    BARE_RGB = "bareRgb"
    BARE_HSL = "bareHsl"

    @property
    def scan_rank(self) -> int:
        """Position in the fixed scan order (lower wins ties)."""
        return _SCAN_ORDER.index(self)

    @property
    def is_rgb_family(self) -> bool:
        return self in (FormatTag.RGB, FormatTag.RGBA, FormatTag.BARE_RGB)

    @property
    def is_hsl_family(self) -> bool:
        return self in (FormatTag.HSL, FormatTag.HSLA, FormatTag.BARE_HSL)

    @property
    def has_alpha(self) -> bool:
        return self in (FormatTag.RGBA, FormatTag.HSLA)

    def __str__(self) -> str:
        return self.value


_SCAN_ORDER: tuple[FormatTag, ...] = tuple(FormatTag)


@dataclass(frozen=True)
class CandidateMatch:
    """Unvalidated lexical hit. `groups` holds the raw captured strings."""

    start: int
    end: int
    raw: str
    tag: FormatTag
    groups: tuple[str, ...]

    @property
    def channels(self) -> tuple[int, int, int]:
        """Does: Parse the three numeric groups (rgb or h/s/l) as ints."""
        if self.tag is FormatTag.HEX:
            raise ValueError("hex matches carry no numeric channels")
        a, b, c = (int(g) for g in self.groups[:3])
        return a, b, c

    @property
    def alpha(self) -> float | None:
        """Alpha of rgba/hsla matches; None when absent or not a number (e.g. '1.2.3')."""
        if not self.tag.has_alpha or len(self.groups) < 4:
            return None
        try:
            return float(self.groups[3])
        except ValueError:
            return None


@dataclass(frozen=True, eq=False)
class CanonicalColor:
    """
    A color identity: '#' plus 6 uppercase hex digits.

    Equality and hashing use the hex string only, so subclasses carrying
    extra metadata still dedupe against plain colors.
    """

    hex: str

    def __post_init__(self) -> None:
        if not isinstance(self.hex, str) or not _CANONICAL_HEX_RE.fullmatch(self.hex):
            raise ValueError(f"Not a canonical hex color: {self.hex!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CanonicalColor):
            return NotImplemented
        return self.hex == other.hex

    def __hash__(self) -> int:
        return hash(self.hex)

    def __str__(self) -> str:
        return self.hex

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> CanonicalColor:
        return cls(rgb_to_hex(r, g, b))

    @classmethod
    def from_hsl(cls, h: int, s: int, l: int) -> CanonicalColor:
        return cls(rgb_to_hex(*hsl_to_rgb(h, s, l)))

    @property
    def rgb(self) -> RGB:
        return hex_to_rgb(self.hex)

    @property
    def hsl(self) -> HSL:
        return rgb_to_hsl(*self.rgb)


@dataclass(frozen=True, eq=False)
class HarmonySwatch(CanonicalColor):
    """Harmony member: the canonical color plus the exact (h, s, l) it was built from."""

    hsl_triple: HSL = (0, 0, 0)

    @classmethod
    def build(cls, h: int, s: int, l: int) -> HarmonySwatch:
        return cls(rgb_to_hex(*hsl_to_rgb(h, s, l)), (h, s, l))

    @property
    def hue(self) -> int:
        return self.hsl_triple[0]

    @property
    def saturation(self) -> int:
        return self.hsl_triple[1]

    @property
    def lightness(self) -> int:
        return self.hsl_triple[2]


@dataclass(frozen=True)
class ResolvedSpan:
    """A validated match that survived conflict resolution."""

    start: int
    end: int
    raw: str
    color: CanonicalColor
    tag: FormatTag

    @property
    def hex(self) -> str:
        return self.color.hex


@dataclass(frozen=True)
class HarmonySet:
    """Five named harmony groups derived from one source (h, s, l)."""

    source: HSL
    complementary: tuple[HarmonySwatch, ...]
    analogous: tuple[HarmonySwatch, ...]
    triadic: tuple[HarmonySwatch, ...]
    tetradic: tuple[HarmonySwatch, ...]
    monochromatic: tuple[HarmonySwatch, ...]

    def items(self) -> Iterator[tuple[str, tuple[HarmonySwatch, ...]]]:
        """Does: Yield (name, swatches) in rendering order."""
        for name in HARMONY_NAMES:
            yield name, getattr(self, name)

    def as_hex_dict(self) -> dict[str, list[str]]:
        return {name: [sw.hex for sw in swatches] for name, swatches in self.items()}
