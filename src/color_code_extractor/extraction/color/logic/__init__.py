"""
logic
=====

Namespace for pipelines/ (validation + normalization) and the span resolver.

Public API:
- pipelines: normalize_candidate, validate_candidates
- resolver : resolve_spans, collect_unique_colors, text_order
"""

from __future__ import annotations

from .pipelines.normalize_pipeline import (
    normalize_candidate,
    validate_candidates,
)
from .resolver import (
    collect_unique_colors,
    resolve_spans,
    text_order,
)

__all__ = [
    # pipelines
    "normalize_candidate",
    "validate_candidates",
    # resolver
    "resolve_spans",
    "collect_unique_colors",
    "text_order",
]

__docformat__ = "google"
