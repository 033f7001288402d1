# tests/test_palette.py

from __future__ import annotations

import json

import pytest

from plasma_color_finder.color.types import Color
from plasma_color_finder.palette import index as IDX
from plasma_color_finder.palette import loader as L
from plasma_color_finder.utils.load_config import ConfigTypeError, clear_config_cache

"""
palette tests
=============

Does: Validate flattening order, silent dropping of malformed entries, and
      loading of the bundled / overridden palette files.
"""


@pytest.fixture(autouse=True)
def _fresh_caches():
    clear_config_cache()
    L.get_palette_entries.cache_clear()
    yield
    clear_config_cache()
    L.get_palette_entries.cache_clear()


# ──────────────────────────────────────────────────────────────────────────────
# flatten_palette
# ──────────────────────────────────────────────────────────────────────────────
def test_flatten_palette_family_then_shade_order():
    palette = {
        "Red": {"500": "#FF0000", "100": "#FFCCCC"},
        "Blue": {"500": "#0000FF"},
    }
    out = IDX.flatten_palette(palette)
    assert [e.key for e in out] == [("Red", "500"), ("Red", "100"), ("Blue", "500")]
    assert out[0].hex == "#FF0000" and out[0].rgb == Color(255, 0, 0)


def test_flatten_palette_drops_malformed_entries_silently():
    palette = {
        "Odd": {"a": "#12", "b": "nothex", "c": 123, "d": "#0f0", "e": ""},
        "Empty": {},
    }
    out = IDX.flatten_palette(palette)
    assert [e.key for e in out] == [("Odd", "d")]
    assert out[0].rgb == Color(0, 255, 0)


def test_flatten_palette_empty():
    assert IDX.flatten_palette({}) == []


# ──────────────────────────────────────────────────────────────────────────────
# Bundled palettes
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("source", ["general", "additional"])
def test_bundled_palettes_load_and_flatten(source):
    definition = L.load_palette_definition(source)
    entries = L.get_palette_entries(source)
    assert entries and isinstance(entries, tuple)
    assert len(entries) == sum(len(shades) for shades in definition.values())
    keys = [e.key for e in entries]
    assert len(keys) == len(set(keys))


def test_general_palette_contains_brand_red():
    entries = {e.key: e for e in L.get_palette_entries("general")}
    assert entries[("Red", "500")].hex == "#FF293E"


def test_get_palette_entries_is_cached():
    assert L.get_palette_entries("general") is L.get_palette_entries("general")


def test_unknown_palette_source_raises():
    with pytest.raises(ValueError):
        L.load_palette_definition("neon")


# ──────────────────────────────────────────────────────────────────────────────
# Overridden data directory
# ──────────────────────────────────────────────────────────────────────────────
def test_palette_from_env_data_dir(tmp_path, monkeypatch):
    (tmp_path / "palette.json").write_text(
        json.dumps({"Only": {"1": "#123456", "bad": "#xyz"}}), encoding="utf-8"
    )
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    entries = L.get_palette_entries("general")
    assert [e.key for e in entries] == [("Only", "1")]


def test_palette_with_wrong_shape_raises_type_error(tmp_path, monkeypatch):
    (tmp_path / "palette-additional.json").write_text(
        json.dumps({"Family": ["#000000"]}), encoding="utf-8"
    )
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    with pytest.raises(ConfigTypeError):
        L.load_palette_definition("additional")
