# color_code_extractor/extraction/__init__.py

"""
extraction.
==========

Does: Group the color-code extraction stack: `color` (domain logic) and
      `general` (config + tracing), with `orchestrator` as the entry point.
"""
from __future__ import annotations

__all__: list[str] = []
__docformat__ = "google"
