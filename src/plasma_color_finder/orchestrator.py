# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: High-level query flow used by a presentation layer: parse the user's
      color text, pick the palette and distance mode (settings defaults), rank
      the palette and shape a JSON-friendly result.
Returns:
  - find_palette_matches(text, ...) -> {
        "input": str,
        "color": {"r","g","b","a","hex"} | None,
        "palette": "general" | "additional",
        "mode": "rgb" | "oklch",
        "matches": [ {family, shade, hex, distance, label}, ... ],
        "error": str | None,
        "suggestions": [str, ...],
    }
  - load_settings() -> {"default_palette", "default_mode", "recommend_count"}
Used by: The CLI demo and UI front-ends.
"""

import logging
from typing import Any

from plasma_color_finder.color.parse import parse_color, rgb_to_hex
from plasma_color_finder.color.suggest import suggest_color_names
from plasma_color_finder.color.types import DISTANCE_MODES, Color, RankedMatch
from plasma_color_finder.palette.loader import PALETTE_SOURCES, get_palette_entries
from plasma_color_finder.ranking.nearest import DEFAULT_K, find_nearest, format_distance
from plasma_color_finder.utils.load_config import ConfigTypeError, load_config
from plasma_color_finder.utils.log import debug

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = (
    "Enter a valid hex, rgba(r, g, b, a), or CSS color name (e.g. magenta)."
)

DEFAULT_SETTINGS: dict[str, Any] = {
    "default_palette": "general",
    "default_mode": "rgb",
    "recommend_count": DEFAULT_K,
}

__all__ = [
    "INVALID_INPUT_MESSAGE",
    "DEFAULT_SETTINGS",
    "load_settings",
    "color_to_dict",
    "match_to_dict",
    "find_palette_matches",
]


# =============================================================================
# Settings
# =============================================================================

def _validate_settings(data: dict[str, Any]) -> dict[str, Any]:
    merged = {**DEFAULT_SETTINGS, **data}
    if merged["default_palette"] not in PALETTE_SOURCES:
        raise ValueError(f"default_palette must be one of {PALETTE_SOURCES}")
    if merged["default_mode"] not in DISTANCE_MODES:
        raise ValueError(f"default_mode must be one of {DISTANCE_MODES}")
    count = merged["recommend_count"]
    if isinstance(count, bool) or not isinstance(count, int):
        raise ConfigTypeError(f"recommend_count must be an int, got {type(count).__name__}")
    return merged


def load_settings() -> dict[str, Any]:
    """Read data/settings.json merged over the built-in defaults."""
    return load_config("settings", _validate_settings)


# =============================================================================
# Result shaping
# =============================================================================

def color_to_dict(color: Color) -> dict[str, Any]:
    return {"r": color.r, "g": color.g, "b": color.b, "a": color.a, "hex": rgb_to_hex(color)}


def match_to_dict(match: RankedMatch, mode: str) -> dict[str, Any]:
    entry = match.entry
    return {
        "family": entry.family,
        "shade": entry.shade,
        "hex": entry.hex,
        "distance": match.distance,
        "label": f"{entry.family} {entry.shade} · Δ ≈ {format_distance(match.distance, mode)}",  # type: ignore[arg-type]
    }


# =============================================================================
# Query
# =============================================================================

def find_palette_matches(
    text: str,
    *,
    palette: str | None = None,
    mode: str | None = None,
    top_k: int | None = None,
) -> dict[str, Any]:
    """Parse `text` and rank the selected palette against it.

    Unparseable input is reported through "error"/"suggestions", never raised.
    Unknown palette or mode names raise ValueError.
    """
    settings = load_settings()
    palette = palette or settings["default_palette"]
    mode = mode or settings["default_mode"]
    k = settings["recommend_count"] if top_k is None else top_k

    if palette not in PALETTE_SOURCES:
        raise ValueError(f"Unknown palette source {palette!r}")
    if mode not in DISTANCE_MODES:
        raise ValueError(f"Unknown distance mode {mode!r}")

    result: dict[str, Any] = {
        "input": text,
        "color": None,
        "palette": palette,
        "mode": mode,
        "matches": [],
        "error": None,
        "suggestions": [],
    }

    color = parse_color(text)
    if color is None:
        if (text or "").strip():
            result["error"] = INVALID_INPUT_MESSAGE
            result["suggestions"] = suggest_color_names(text)
        debug(f"no color for {text!r}; suggestions={result['suggestions']}", topic="query")
        return result

    matches = find_nearest(get_palette_entries(palette), color, k, mode)  # type: ignore[arg-type]
    result["color"] = color_to_dict(color)
    result["matches"] = [match_to_dict(m, mode) for m in matches]
    debug(
        f"{text!r} → {rgb_to_hex(color)} [{palette}/{mode}] "
        f"{[(m.entry.family, m.entry.shade) for m in matches]}",
        topic="query",
    )
    return result
