# plasma_color_finder/color/types.py
from __future__ import annotations

"""
types.py.

Does: Define the value types shared by the parser, converter, palette index
and ranker (canonical RGBA color, palette entries, ranked matches, OKLCH
coordinates and the closed set of distance modes).
"""

import math
from dataclasses import dataclass
from typing import Literal, get_args

DistanceMode = Literal["rgb", "oklch"]
DISTANCE_MODES: tuple[str, ...] = get_args(DistanceMode)


def round_half_up(value: float) -> int:
    """Round like the browser does (0.5 goes up), not like Python's round()."""
    return int(math.floor(value + 0.5))


def clamp_channel(value: float) -> int:
    return min(255, max(0, round_half_up(value)))


def clamp_alpha(value: float) -> float:
    return min(1.0, max(0.0, float(value)))


@dataclass(frozen=True)
class Color:
    """Canonical sRGB color: integer channels in [0, 255], alpha in [0, 1].

    Out-of-range or fractional inputs are clamped/rounded on construction,
    so every instance satisfies the invariant.
    """

    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", clamp_channel(self.r))
        object.__setattr__(self, "g", clamp_channel(self.g))
        object.__setattr__(self, "b", clamp_channel(self.b))
        object.__setattr__(self, "a", clamp_alpha(self.a))

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class Oklch:
    """OKLCH coordinates; `h` is None when the color has no chroma."""

    l: float  # noqa: E741
    c: float
    h: float | None


@dataclass(frozen=True)
class PaletteEntry:
    family: str
    shade: str
    hex: str
    rgb: Color

    @property
    def key(self) -> tuple[str, str]:
        return (self.family, self.shade)


@dataclass(frozen=True)
class RankedMatch:
    entry: PaletteEntry
    distance: float


__all__ = [
    "DistanceMode",
    "DISTANCE_MODES",
    "Color",
    "Oklch",
    "PaletteEntry",
    "RankedMatch",
    "round_half_up",
    "clamp_channel",
    "clamp_alpha",
]
