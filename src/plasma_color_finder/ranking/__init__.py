"""
ranking package.
===============

Does: Expose the distance metrics and the nearest-neighbor ranker.
"""

from .nearest import (
    DEFAULT_K,
    color_distance,
    find_nearest,
    format_distance,
    oklch_distance,
    rgb_distance,
)

__all__ = [
    "DEFAULT_K",
    "rgb_distance",
    "oklch_distance",
    "color_distance",
    "find_nearest",
    "format_distance",
]

__docformat__ = "google"
