"""
pipelines
=========

Does: Candidate validation and normalization to canonical colors.
Returns: Public API for candidate → CanonicalColor.
Used By: the orchestrator and the CLI demo.
"""

from __future__ import annotations

from .normalize_pipeline import (
    ValidatedCandidate,
    normalize_candidate,
    validate_candidates,
)

__all__ = [
    "ValidatedCandidate",
    "normalize_candidate",
    "validate_candidates",
]

__docformat__ = "google"
