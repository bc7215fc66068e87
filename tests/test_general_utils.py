# tests/test_general_utils.py
"""General utils: validated settings loading (mtime cache, env dir) and stage tracing."""

from __future__ import annotations

import json
import os
from importlib import import_module

import pytest

# Module objects (the package re-exports a *function* named load_config)
LC = import_module("color_code_extractor.extraction.general.utils.load_config")
LOG = import_module("color_code_extractor.extraction.general.utils.log")

ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
DataDirNotFound = LC.DataDirNotFound
load_config = LC.load_config
clear_config_cache = LC.clear_config_cache


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point the loader at it via COLOR_CODE_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("COLOR_CODE_DATA_DIR", str(data))
    clear_config_cache()
    return data


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics and settings cache between tests."""
    monkeypatch.delenv("COLOR_CODE_DEBUG_TOPICS", raising=False)
    clear_config_cache()
    LOG.reload_topics()
    yield
    clear_config_cache()
    LOG.reload_topics()


def _write(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")


def _touch_later(path):
    st = path.stat()
    os.utime(path, ns=(st.st_atime_ns, st.st_mtime_ns + 1_000_000_000))


# ---------- load_config tests ----------
def test_validator_runs_and_result_is_cached_until_mtime_changes(tmp_data_dir):
    p = tmp_data_dir / "display_settings.json"
    _write(p, {"brightness_threshold": 100})
    calls = []

    def validator(d: dict) -> dict:
        calls.append(d)
        return {**d, "checked": True}

    out1 = load_config("display_settings", validator=validator)
    assert out1 == {"brightness_threshold": 100, "checked": True}

    # same mtime: served from cache, validator not re-run
    st = p.stat()
    _write(p, {"brightness_threshold": 200})
    os.utime(p, ns=(st.st_atime_ns, st.st_mtime_ns))
    assert load_config("display_settings", validator=validator) == out1
    assert len(calls) == 1

    _touch_later(p)
    out3 = load_config("display_settings", validator=validator)
    assert out3["brightness_threshold"] == 200
    assert len(calls) == 2


def test_returned_dict_is_a_copy(tmp_data_dir):
    _write(tmp_data_dir / "s.json", {"a": 1})
    first = load_config("s")
    first["a"] = 99
    assert load_config("s") == {"a": 1}


def test_validator_failure_is_parse_error(tmp_data_dir):
    _write(tmp_data_dir / "bad.json", {"x": 1})

    def validator(d: dict) -> dict:
        raise ValueError("nope")

    with pytest.raises(ConfigParseError, match="nope"):
        load_config("bad", validator=validator)


def test_non_object_json_is_type_error(tmp_data_dir):
    _write(tmp_data_dir / "list.json", ["#000000"])
    with pytest.raises(ConfigTypeError):
        load_config("list")


def test_invalid_json(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")


def test_missing_file(tmp_data_dir):
    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist")


def test_refuses_escape_from_data_dir(tmp_data_dir):
    _write(tmp_data_dir.parent / "secret.json", {"x": 1})
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret")


def test_explicit_base_dir_wins_over_env(tmp_data_dir, tmp_path):
    other = tmp_path / "other"
    other.mkdir()
    _write(other / "s.json", {"from": "other"})
    _write(tmp_data_dir / "s.json", {"from": "env"})
    assert load_config("s", base_dir=other) == {"from": "other"}
    assert load_config("s.json") == {"from": "env"}


def test_env_dir_that_does_not_exist(tmp_path, monkeypatch):
    monkeypatch.setenv("COLOR_CODE_DATA_DIR", str(tmp_path / "nope"))
    with pytest.raises(DataDirNotFound):
        LC.data_dir()


def test_packaged_data_dir_is_default(monkeypatch):
    monkeypatch.delenv("COLOR_CODE_DATA_DIR", raising=False)
    assert LC.data_dir() == LC.PACKAGE_DATA_DIR
    assert load_config("display_settings")["brightness_threshold"] == 128


def test_temp_data_dir_restores_env(tmp_path, monkeypatch):
    monkeypatch.delenv("COLOR_CODE_DATA_DIR", raising=False)
    _write(tmp_path / "t.json", {"v": 1})
    with LC.temp_data_dir(tmp_path) as d:
        assert d == tmp_path
        assert load_config("t") == {"v": 1}
    assert "COLOR_CODE_DATA_DIR" not in os.environ
    with pytest.raises(ConfigFileNotFound):
        load_config("t")


# ---------- stage tracing tests ----------
def test_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv("COLOR_CODE_DEBUG_TOPICS", "resolve")
    LOG.reload_topics()

    LOG.debug("on resolve", topic="resolve")
    LOG.debug("should be silent", topic="scan")

    err = capsys.readouterr().err
    assert "[resolve][DEBUG] on resolve" in err
    assert "should be silent" not in err


def test_all_enables_every_stage(monkeypatch):
    monkeypatch.setenv("COLOR_CODE_DEBUG_TOPICS", "all")
    LOG.reload_topics()
    assert all(LOG.topic_enabled(t) for t in LOG.STAGE_TOPICS)


def test_silent_without_env_unless_forced(capsys):
    LOG.debug("quiet")
    LOG.debug("loud", force=True, level="info")
    err = capsys.readouterr().err
    assert "quiet" not in err
    assert "[extraction][INFO] loud" in err
    assert LOG.topic_enabled("extraction") is False


def test_trace_counts_and_colors(monkeypatch, capsys):
    monkeypatch.setenv("COLOR_CODE_DEBUG_TOPICS", "scan, extraction")
    LOG.reload_topics()

    LOG.trace_counts("scan", hex=2, rgb=0)
    LOG.trace_colors("extraction", "colors", ["#FF0000", "#00FF00"])
    LOG.trace_colors("extraction", "colors", [])
    LOG.trace_counts("resolve", spans=1)

    err = capsys.readouterr().err
    assert "[scan][DEBUG] hex=2 rgb=0" in err
    assert "colors (2): #FF0000 #00FF00" in err
    assert "colors (0): -" in err
    assert "[resolve]" not in err
