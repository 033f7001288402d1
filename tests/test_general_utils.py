# tests/test_general_utils.py
"""End-to-end tests for general utils (load_config, log) with cache/env overrides."""

from __future__ import annotations

import json
import os
from importlib import import_module

import pytest

# module objects (the package re-exports the function under the same name)
LC = import_module("plasma_color_finder.utils.load_config")
LOG = import_module("plasma_color_finder.utils.log")

ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
load_config = LC.load_config
clear_config_cache = LC.clear_config_cache


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point loader via DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("DATA_DIR", str(data))
    clear_config_cache()
    return data


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics and config cache between tests."""
    monkeypatch.delenv("COLOR_FINDER_DEBUG_TOPICS", raising=False)
    monkeypatch.delenv("COLOR_FINDER_DATA_DIR", raising=False)
    clear_config_cache()
    LOG.reload_topics()
    yield
    clear_config_cache()
    LOG.reload_topics()


# ---------- load_config tests ----------
def test_load_config_palette_reloads_when_mtime_changes(tmp_data_dir):
    p = tmp_data_dir / "palette.json"
    p.write_text(json.dumps({"Red": {"500": "#FF0000"}}), encoding="utf-8")
    assert load_config("palette") == {"Red": {"500": "#FF0000"}}

    p.write_text(json.dumps({"Blue": {"500": "#0000FF"}}), encoding="utf-8")
    stat = p.stat()
    os.utime(p, (stat.st_atime, stat.st_mtime + 5))
    assert load_config("palette.json") == {"Blue": {"500": "#0000FF"}}


def test_load_config_cache_hit_returns_independent_copies(tmp_data_dir):
    (tmp_data_dir / "palette.json").write_text(
        json.dumps({"Red": {"500": "#FF0000"}}), encoding="utf-8"
    )
    first = load_config("palette")
    first["Red"]["500"] = "#000000"
    assert load_config("palette") == {"Red": {"500": "#FF0000"}}


def test_load_config_settings_validator_runs_on_every_load(tmp_data_dir):
    (tmp_data_dir / "settings.json").write_text(
        json.dumps({"default_mode": "rgb"}), encoding="utf-8"
    )
    calls = []

    def validator(d: dict) -> dict:
        calls.append(dict(d))
        return {**d, "recommend_count": 5}

    assert load_config("settings", validator) == {"default_mode": "rgb", "recommend_count": 5}
    assert load_config("settings", validator) == {"default_mode": "rgb", "recommend_count": 5}
    assert calls == [{"default_mode": "rgb"}, {"default_mode": "rgb"}]


def test_load_config_non_object_and_missing_file(tmp_data_dir):
    (tmp_data_dir / "palette.json").write_text(json.dumps(["#FF0000"]), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("palette")

    with pytest.raises(ConfigFileNotFound):
        load_config("palette-additional")


def test_load_config_validator_type_error_passes_through(tmp_data_dir):
    (tmp_data_dir / "palette.json").write_text(json.dumps({"Red": 5}), encoding="utf-8")

    def strict(_d: dict) -> dict:
        raise ConfigTypeError("family 'Red': expected shade mapping")

    with pytest.raises(ConfigTypeError):
        load_config("palette", strict)


def test_load_config_validator_failure_wrapped(tmp_data_dir):
    (tmp_data_dir / "settings.json").write_text("{}", encoding="utf-8")

    def boom(_d: dict) -> dict:
        raise ValueError("nope")

    with pytest.raises(ConfigParseError, match="settings.json: nope"):
        load_config("settings", boom)


def test_load_config_invalid_json(tmp_data_dir):
    (tmp_data_dir / "settings.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("settings")


def test_load_config_refuses_escape_from_data_dir(tmp_data_dir):
    outside = tmp_data_dir.parent / "secret.json"
    outside.write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret")


def test_load_config_explicit_base_dir_beats_env(tmp_path, tmp_data_dir):
    (tmp_path / "palette.json").write_text(json.dumps({"A": {}}), encoding="utf-8")
    (tmp_data_dir / "palette.json").write_text(json.dumps({"B": {}}), encoding="utf-8")
    assert load_config("palette", base_dir=tmp_path) == {"A": {}}
    assert load_config("palette") == {"B": {}}


def test_find_data_dir_second_env_var(tmp_path, monkeypatch):
    monkeypatch.delenv("DATA_DIR", raising=False)
    monkeypatch.setenv("COLOR_FINDER_DATA_DIR", str(tmp_path))
    assert LC.find_data_dir() == tmp_path.resolve()


def test_find_data_dir_discovers_package_data(monkeypatch):
    monkeypatch.delenv("DATA_DIR", raising=False)
    found = LC.find_data_dir()
    assert (found / "palette.json").is_file()
    assert (found / "palette-additional.json").is_file()
    assert (found / "settings.json").is_file()


# ---------- log.debug tests ----------
def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv("COLOR_FINDER_DEBUG_TOPICS", "matching")
    LOG.reload_topics()

    LOG.debug("hello on matching", topic="matching")
    LOG.debug("should be silent", topic="other")

    captured = capsys.readouterr()
    assert "hello on matching" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv("COLOR_FINDER_DEBUG_TOPICS", "all")
    LOG.reload_topics()

    LOG.debug("m1", topic="foo")
    LOG.debug("m2", topic="bar", level="info")

    captured = capsys.readouterr()
    assert "m1" in captured.err and "[bar][INFO] m2" in captured.err


def test_log_debug_silent_without_topics(capsys):
    LOG.debug("nothing to see")
    assert capsys.readouterr().err == ""
    assert LOG.topic_enabled("matching") is False
