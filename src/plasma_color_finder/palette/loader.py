"""
loader.py

Does: Load the two bundled palette definitions ("general", "additional") from
      the data directory, validate their shape and cache the flattened entries.
Returns: Palette mappings and immutable tuples of PaletteEntry.
Used by: The query orchestrator and the CLI demo.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Literal, get_args

from plasma_color_finder.color.types import PaletteEntry
from plasma_color_finder.palette.index import PaletteDefinition, flatten_palette
from plasma_color_finder.utils.load_config import ConfigTypeError, load_config

__all__ = [
    "PaletteSource",
    "PALETTE_SOURCES",
    "PALETTE_FILES",
    "validate_palette",
    "load_palette_definition",
    "get_palette_entries",
]

log = logging.getLogger(__name__)

PaletteSource = Literal["general", "additional"]
PALETTE_SOURCES: tuple[str, ...] = get_args(PaletteSource)

PALETTE_FILES: dict[str, str] = {
    "general": "palette",
    "additional": "palette-additional",
}


def validate_palette(data: dict[str, Any]) -> dict[str, Any]:
    """Check the two-level family → shade → string shape (order preserved)."""
    for family, shades in data.items():
        if not isinstance(shades, dict):
            raise ConfigTypeError(
                f"family {family!r}: expected shade mapping, got {type(shades).__name__}"
            )
        for shade, value in shades.items():
            if not isinstance(value, str):
                raise ConfigTypeError(
                    f"{family}/{shade}: expected hex string, got {type(value).__name__}"
                )
    return data


def _file_for(source: str) -> str:
    try:
        return PALETTE_FILES[source]
    except KeyError:
        raise ValueError(
            f"Unknown palette source {source!r}; expected one of {', '.join(PALETTE_SOURCES)}"
        ) from None


def load_palette_definition(source: PaletteSource = "general") -> PaletteDefinition:
    """Read and validate the nested palette mapping for `source`."""
    return load_config(_file_for(source), validate_palette)


@lru_cache(maxsize=None)
def get_palette_entries(source: PaletteSource = "general") -> tuple[PaletteEntry, ...]:
    """Flattened entries for `source`; built once per process."""
    entries = tuple(flatten_palette(load_palette_definition(source)))
    log.debug("Palette %r flattened: %d entries", source, len(entries))
    return entries
