"""
color_code_extractor
====================

Does: Root package initializer for the color-code extractor.
Returns: Re-exports the main entry points (extract_colors, ColorExtractionService,
         generate_harmonies, describe_color) for `from color_code_extractor import ...`.
Used by: The CLI demo and any presentation layer embedding the extractor.
"""

from color_code_extractor.extraction.color.display import describe_color
from color_code_extractor.extraction.color.harmony import generate_harmonies
from color_code_extractor.extraction.color.types import CanonicalColor, FormatTag
from color_code_extractor.extraction.orchestrator import (
    ColorExtractionService,
    ExtractionResult,
    extract_colors,
)

__all__: list[str] = [
    "extract_colors",
    "ColorExtractionService",
    "ExtractionResult",
    "CanonicalColor",
    "FormatTag",
    "generate_harmonies",
    "describe_color",
]
__docformat__ = "google"
