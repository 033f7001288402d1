"""
color.
=====

Does: Aggregate the color-domain building blocks: canonical types, the input
      parser, the CSS named-color table, OKLCH conversion and name suggestions.
Used By: palette index, ranking, orchestrator and the CLI demo.
Returns: Pure functions and frozen value types; no side effects beyond lazy caching.
"""

# ── Types ────────────────────────────────────────────────────────────────────
from .types import (
    DISTANCE_MODES,
    Color,
    DistanceMode,
    Oklch,
    PaletteEntry,
    RankedMatch,
)

# ── Parsing ──────────────────────────────────────────────────────────────────
from .parse import (
    parse_color,
    parse_computed_rgb,
    parse_css_color_name,
    parse_hex,
    parse_rgba,
    rgb_to_hex,
)

# ── Vocabulary & conversion ──────────────────────────────────────────────────
from .vocab import css_name_to_hex, get_css_color_names, resolve_color_name
from .convert import hex_to_perceptual, to_oklab, to_perceptual
from .suggest import suggest_color_names

__all__ = [
    # types
    "Color",
    "Oklch",
    "PaletteEntry",
    "RankedMatch",
    "DistanceMode",
    "DISTANCE_MODES",
    # parsing
    "parse_color",
    "parse_hex",
    "parse_rgba",
    "parse_computed_rgb",
    "parse_css_color_name",
    "rgb_to_hex",
    # vocab
    "get_css_color_names",
    "css_name_to_hex",
    "resolve_color_name",
    # conversion
    "to_oklab",
    "to_perceptual",
    "hex_to_perceptual",
    # suggestions
    "suggest_color_names",
]
