"""
index.py

Does: Flatten a nested {family: {shade: hex}} palette definition into an
      ordered list of `PaletteEntry` (family order, then shade order).
Returns: list[PaletteEntry]; entries whose hex does not parse are dropped.
Used by: palette.loader and any caller holding its own palette mapping.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from plasma_color_finder.color.parse import parse_hex
from plasma_color_finder.color.types import PaletteEntry

__all__ = ["PaletteDefinition", "flatten_palette"]

log = logging.getLogger(__name__)

PaletteDefinition = Mapping[str, Mapping[str, str]]


def flatten_palette(palette: PaletteDefinition) -> list[PaletteEntry]:
    entries: list[PaletteEntry] = []
    for family, shades in palette.items():
        for shade, hex_text in shades.items():
            rgb = parse_hex(hex_text) if isinstance(hex_text, str) else None
            if rgb is None:
                log.debug("Dropping palette entry %s/%s: bad hex %r", family, shade, hex_text)
                continue
            entries.append(PaletteEntry(family=family, shade=shade, hex=hex_text.strip(), rgb=rgb))
    return entries
