"""
log.py.

Does: Stage tracer for extraction runs. COLOR_CODE_DEBUG_TOPICS selects the
      stages to print (comma-separated names, or 'all'): scan, validate,
      resolve, harmony, extraction.
Returns: One stderr line per event, `[time] [topic][LEVEL] message`.
"""

import os
import sys
from collections.abc import Iterable
from datetime import datetime
from typing import TextIO

__all__ = ["STAGE_TOPICS", "debug", "reload_topics", "topic_enabled", "trace_counts", "trace_colors"]

ENV_VAR = "COLOR_CODE_DEBUG_TOPICS"
STAGE_TOPICS = ("scan", "validate", "resolve", "harmony", "extraction")


def _parse_topics(raw: str) -> frozenset[str]:
    names = {t.strip().lower() for t in raw.split(",") if t.strip()}
    if "all" in names:
        return frozenset(STAGE_TOPICS) | names
    return frozenset(names)


_ENABLED = _parse_topics(os.getenv(ENV_VAR, ""))


def reload_topics() -> None:
    """Does: Re-read COLOR_CODE_DEBUG_TOPICS (tests flip it with monkeypatch)."""
    global _ENABLED
    _ENABLED = _parse_topics(os.getenv(ENV_VAR, ""))


def topic_enabled(topic: str) -> bool:
    key = topic.lower().strip()
    return key in _ENABLED or "all" in _ENABLED


def debug(
    msg: str,
    topic: str = "extraction",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
    force: bool = False,
) -> None:
    """Does: Print `msg` under `topic` when that topic is enabled (or `force` is set)."""
    if not (force or topic_enabled(topic)):
        return
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream or sys.stderr)


def trace_counts(topic: str, **counts: int) -> None:
    """Does: Print stage counters as `key=value` pairs, e.g. `hex=2 rgb=0`."""
    if topic_enabled(topic):
        debug(" ".join(f"{k}={v}" for k, v in counts.items()), topic=topic)


def trace_colors(topic: str, label: str, hexes: Iterable[str]) -> None:
    """Does: Print a labelled list of canonical hex colors."""
    if topic_enabled(topic):
        listed = list(hexes)
        debug(f"{label} ({len(listed)}): {' '.join(listed) or '-'}", topic=topic)
