# color_code_extractor/extraction/general/utils/__init__.py
"""

Does: Provide settings loading and per-stage debug tracing for the extraction stack.
Returns: Public API via load_config/clear_config_cache and debug/trace_counts/trace_colors.
Used by: Display settings, the orchestrator, the CLI demo and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    data_dir,
    load_config,
    temp_data_dir,
)
from .log import (
    STAGE_TOPICS,
    debug,
    reload_topics,
    topic_enabled,
    trace_colors,
    trace_counts,
)

__all__ = [
    # Settings loading
    "load_config",
    "clear_config_cache",
    "data_dir",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Stage tracing
    "STAGE_TOPICS",
    "debug",
    "reload_topics",
    "topic_enabled",
    "trace_counts",
    "trace_colors",
]
