# tests/test_color_vocab.py

from __future__ import annotations

import importlib

import pytest

"""
vocab & suggest tests
=====================

Does: Validate the embedded CSS named-color table, the computed-style
      resolver, and the fuzzy "did you mean" helper.
"""

V = importlib.import_module("plasma_color_finder.color.vocab")
S = importlib.import_module("plasma_color_finder.color.suggest")


# ──────────────────────────────────────────────────────────────────────────────
# Named color table
# ──────────────────────────────────────────────────────────────────────────────
def test_css_table_is_the_standard_named_set():
    names = V.get_css_color_names()
    assert len(names) >= 147
    assert {"magenta", "rebeccapurple", "aliceblue", "grey", "gray"} <= names
    assert all(n == n.lower() for n in names)


def test_css_name_to_hex_case_and_whitespace_insensitive():
    assert V.css_name_to_hex("Magenta") == "#ff00ff"
    assert V.css_name_to_hex("  AliceBlue ") == "#f0f8ff"
    assert V.css_name_to_hex("unknownish") is None
    assert V.css_name_to_hex("") is None


@pytest.mark.parametrize("kw", ["transparent", "currentColor", "inherit"])
def test_keywords_without_a_color_do_not_resolve(kw):
    assert V.resolve_color_name(kw) is None


def test_resolve_color_name_emits_computed_style_string():
    assert V.resolve_color_name("magenta") == "rgb(255, 0, 255)"
    assert V.resolve_color_name("rebeccapurple") == "rgb(102, 51, 153)"


# ──────────────────────────────────────────────────────────────────────────────
# Suggestions
# ──────────────────────────────────────────────────────────────────────────────
def test_normalize_name_drops_separators():
    assert S.normalize_name(" Rebecca Purple ") == "rebeccapurple"
    assert S.normalize_name("light_sea-green") == "lightseagreen"


def test_suggest_color_names_typo_best_first():
    out = S.suggest_color_names("magneta")
    assert out and out[0] == "magenta"
    assert len(out) <= S.DEFAULT_LIMIT


def test_suggest_color_names_spaced_name():
    assert S.suggest_color_names("rebecca purple")[0] == "rebeccapurple"


@pytest.mark.parametrize("text", ["", "   ", "#12345z", "rgb(1,2)"])
def test_suggest_color_names_skips_non_names(text):
    assert S.suggest_color_names(text) == []


def test_suggest_color_names_respects_cutoff_and_limit(monkeypatch):
    monkeypatch.setattr(S, "get_css_color_names", lambda: frozenset({"red", "green", "navy"}))
    assert S.suggest_color_names("zzzzzzzz", score_cutoff=90) == []
    assert S.suggest_color_names("gren", limit=0) == []
    assert S.suggest_color_names("gren", limit=1) == ["green"]
