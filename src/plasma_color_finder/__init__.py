"""
plasma_color_finder
===================

Does: Root package for the palette color finder: parse any color text, then
      rank a curated palette by RGB or OKLCH distance.
Returns: Re-exports the three engine entry points (`parse_color`,
         `flatten_palette`, `find_nearest`) and the data types they exchange.
Used by: UI front-ends, the `pcf-demo` CLI and tests.
"""

from plasma_color_finder.color.parse import parse_color
from plasma_color_finder.color.types import Color, DistanceMode, PaletteEntry, RankedMatch
from plasma_color_finder.palette.index import flatten_palette
from plasma_color_finder.ranking.nearest import find_nearest

__all__: list[str] = [
    "parse_color",
    "flatten_palette",
    "find_nearest",
    "Color",
    "PaletteEntry",
    "RankedMatch",
    "DistanceMode",
]
__docformat__ = "google"
