"""
nearest.py
==========

Does: Score every palette entry against a query color under one of the two
      distance modes and return the k closest, best first.
Returns: list[RankedMatch] of length min(k, len(entries)).
Used By: The query orchestrator, the CLI demo, and any caller with its own entries.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence

from plasma_color_finder.color.convert import hex_to_perceptual, to_perceptual
from plasma_color_finder.color.types import (
    DISTANCE_MODES,
    Color,
    DistanceMode,
    Oklch,
    PaletteEntry,
    RankedMatch,
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

logger = logging.getLogger(__name__)

DEFAULT_K = 5


# =============================================================================
# 1) METRICS
# =============================================================================

def rgb_distance(c1: Color, c2: Color) -> float:
    """Does: Euclidean distance over raw 0–255 r, g, b (alpha ignored)."""
    return math.sqrt((c1.r - c2.r) ** 2 + (c1.g - c2.g) ** 2 + (c1.b - c2.b) ** 2)


def _hue_chroma_delta(p1: Oklch, p2: Oklch) -> float:
    # chord between the two hue angles on the chroma circle; 0 if either is grey
    if p1.h is None or p2.h is None or not p1.c or not p2.c:
        return 0.0
    dh = math.radians((p2.h - p1.h) / 2.0)
    return 2.0 * math.sqrt(p1.c * p2.c) * math.sin(dh)


def _perceptual_distance(p1: Oklch, p2: Oklch) -> float:
    return math.sqrt((p1.l - p2.l) ** 2 + (p1.c - p2.c) ** 2 + _hue_chroma_delta(p1, p2) ** 2)


def oklch_distance(c1: Color, c2: Color) -> float:
    """Does: Euclidean distance in OKLCH (ΔL, ΔC, ΔH) between two colors."""
    return _perceptual_distance(to_perceptual(c1), to_perceptual(c2))


_METRICS: dict[str, Callable[[Color, Color], float]] = {
    "rgb": rgb_distance,
    "oklch": oklch_distance,
}


def _check_mode(mode: str) -> None:
    if mode not in DISTANCE_MODES:
        raise ValueError(f"Unknown distance mode {mode!r}; expected one of {', '.join(DISTANCE_MODES)}")


def color_distance(c1: Color, c2: Color, mode: DistanceMode = "rgb") -> float:
    """Does: Dispatch to the metric for `mode`. Raises ValueError for unknown modes."""
    _check_mode(mode)
    return _METRICS[mode](c1, c2)


# =============================================================================
# 2) RANKING
# =============================================================================

def _score_entries(
    entries: Sequence[PaletteEntry], target: Color, mode: DistanceMode
) -> list[RankedMatch]:
    if mode == "rgb":
        return [RankedMatch(entry, rgb_distance(entry.rgb, target)) for entry in entries]

    target_p = to_perceptual(target)
    scored: list[RankedMatch] = []
    for entry in entries:
        entry_p = hex_to_perceptual(entry.hex)
        if entry_p is None:
            logger.debug("No perceptual form for %s/%s (%r)", entry.family, entry.shade, entry.hex)
            scored.append(RankedMatch(entry, math.inf))
        else:
            scored.append(RankedMatch(entry, _perceptual_distance(target_p, entry_p)))
    return scored


def find_nearest(
    entries: Sequence[PaletteEntry],
    target: Color,
    k: int = DEFAULT_K,
    mode: DistanceMode = "rgb",
) -> list[RankedMatch]:
    """
    Does: Rank `entries` by distance to `target` and keep the first k.
          Ties keep the input order (stable sort, no secondary key).
    Returns: list[RankedMatch] sorted ascending; [] when entries is empty or k <= 0.
    Raises: ValueError for an unknown mode.
    """
    _check_mode(mode)
    if not entries or k <= 0:
        return []
    scored = _score_entries(entries, target, mode)
    scored.sort(key=lambda m: m.distance)
    return scored[:k]


def format_distance(distance: float, mode: DistanceMode = "rgb") -> str:
    """Does: Display form of a distance: whole number for rgb, 3 decimals for oklch."""
    if math.isinf(distance):
        return "∞"
    if mode == "oklch":
        return f"{distance:.3f}"
    return str(math.floor(distance + 0.5))
