"""
harmony
=======

Does: Color-harmony suggestions for a single canonical color.
"""

from __future__ import annotations

from .generator import clamp_percent, generate_harmonies, harmonies_for

__all__ = ["generate_harmonies", "harmonies_for", "clamp_percent"]

__docformat__ = "google"
