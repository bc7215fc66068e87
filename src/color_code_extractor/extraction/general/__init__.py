"""
general.
=======

Does: Domain-agnostic helpers (config loading, debug tracing) shared by the
      color extraction modules.
"""

__all__: list[str] = []
__docformat__ = "google"
