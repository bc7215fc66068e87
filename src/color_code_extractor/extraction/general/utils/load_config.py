# src/color_code_extractor/extraction/general/utils/load_config.py

"""Read validated JSON settings objects from the data directory.

The directory is COLOR_CODE_DATA_DIR when set, else the packaged
`color_code_extractor/data/`. Each validated dict is cached until the
file's mtime changes, so callers may re-read settings on every request.

Used by display settings (display_settings.json) and tests.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

__all__ = [
    "ENV_DATA_DIR",
    "PACKAGE_DATA_DIR",
    "Validator",
    "data_dir",
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

ENV_DATA_DIR = "COLOR_CODE_DATA_DIR"
# <pkg>/extraction/general/utils/load_config.py -> <pkg>/data
PACKAGE_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

Validator = Callable[[dict[str, Any]], dict[str, Any]]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when the configured data directory does not exist."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested settings file is missing or outside the data dir."""


class ConfigParseError(ValueError):
    """Raise when the file is not valid JSON or its validator rejects it."""


class ConfigTypeError(TypeError):
    """Raise when the JSON document is not an object."""


# ── Cache ────────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.Lock()
# (path, mtime_ns, validator) -> validated settings
_CONFIG_CACHE: dict[tuple[Path, int, Validator | None], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Forget every cached settings dict."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()


def data_dir() -> Path:
    """Does: Resolve the active data directory (env override, else packaged data/)."""
    override = os.environ.get(ENV_DATA_DIR)
    path = Path(os.path.expanduser(override)).resolve() if override else PACKAGE_DATA_DIR
    if not path.is_dir():
        raise DataDirNotFound(f"Data directory not found: {path}")
    return path


def _settings_path(name: str | os.PathLike[str], base_dir: Path) -> Path:
    file_name = os.fspath(name)
    if not file_name.endswith(".json"):
        file_name += ".json"
    path = (base_dir / file_name).resolve()
    if base_dir not in path.parents:
        raise ConfigFileNotFound(f"Refusing to read outside the data dir: {path}")
    if not path.is_file():
        raise ConfigFileNotFound(f"Settings file not found: {path}")
    return path


def _read_object(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path.name}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")
    return data


def load_config(
    name: str | os.PathLike[str],
    *,
    validator: Validator | None = None,
    base_dir: Path | None = None,
) -> dict[str, Any]:
    """
    Load `<data>/<name>.json` as a dict, run `validator` over it, and return
    a copy of the (cached) result.

    Raises:
        DataDirNotFound: no usable data directory.
        ConfigFileNotFound: missing file, or a name escaping the data dir.
        ConfigTypeError: the document is not a JSON object.
        ConfigParseError: bad JSON, or the validator raised ValueError/TypeError.
    """
    base = Path(base_dir).resolve() if base_dir is not None else data_dir()
    path = _settings_path(name, base)
    key = (path, path.stat().st_mtime_ns, validator)

    with _CACHE_LOCK:
        cached = _CONFIG_CACHE.get(key)
    if cached is not None:
        return dict(cached)

    data = _read_object(path)
    if validator is not None:
        try:
            data = validator(data)
        except (ValueError, TypeError) as e:
            raise ConfigParseError(f"{path.name}: {e}") from e

    with _CACHE_LOCK:
        # Older mtimes of the same file can never be hit again
        for stale in [k for k in _CONFIG_CACHE if k[0] == path]:
            del _CONFIG_CACHE[stale]
        _CONFIG_CACHE[key] = data
    log.debug("Loaded settings %s (mtime_ns=%d)", path.name, key[1])
    return dict(data)


@contextmanager
def temp_data_dir(path: str | os.PathLike[str]) -> Iterator[Path]:
    """Point COLOR_CODE_DATA_DIR at `path` for the block, then restore it."""
    old = os.environ.get(ENV_DATA_DIR)
    os.environ[ENV_DATA_DIR] = os.fspath(path)
    clear_config_cache()
    try:
        yield Path(path)
    finally:
        if old is None:
            os.environ.pop(ENV_DATA_DIR, None)
        else:
            os.environ[ENV_DATA_DIR] = old
        clear_config_cache()
