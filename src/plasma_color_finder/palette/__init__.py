"""
palette package.
===============

Does: Provide the palette index (flattening) and the bundled palette loaders.
"""

from .index import PaletteDefinition, flatten_palette
from .loader import (
    PALETTE_FILES,
    PALETTE_SOURCES,
    PaletteSource,
    get_palette_entries,
    load_palette_definition,
    validate_palette,
)

__all__ = [
    "PaletteDefinition",
    "flatten_palette",
    "PaletteSource",
    "PALETTE_SOURCES",
    "PALETTE_FILES",
    "validate_palette",
    "load_palette_definition",
    "get_palette_entries",
]

__docformat__ = "google"
