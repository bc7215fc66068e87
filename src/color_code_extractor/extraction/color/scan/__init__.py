"""
scan
====

Does: Lexical scanning of raw text for color codes (hex, rgb/rgba, hsl/hsla,
      bare triplets).
Returns: CandidateMatch sequences; validation happens downstream.
"""

from __future__ import annotations

from .patterns import (
    COLOR_PATTERNS,
    ColorPattern,
    compile_pattern,
    scan_pattern,
    scan_text,
)

__all__ = [
    "COLOR_PATTERNS",
    "ColorPattern",
    "compile_pattern",
    "scan_pattern",
    "scan_text",
]

__docformat__ = "google"
