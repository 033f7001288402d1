"""
convert.py
==========

Does: sRGB → linear sRGB → OKLab → OKLCH, with the matrix constants used by
      common perceptual-color libraries so distances agree with palette tools.
Used By: ranking.nearest (oklch mode).
Returns: `Oklch` coordinates (hue None for achromatic colors).
"""

from __future__ import annotations

import math
from functools import lru_cache

from plasma_color_finder.color.parse import parse_hex
from plasma_color_finder.color.types import Color, Oklch

__all__ = [
    "srgb_to_linear",
    "linear_srgb_to_oklab",
    "oklab_to_oklch",
    "to_oklab",
    "to_perceptual",
    "hex_to_perceptual",
]

Lab = tuple[float, float, float]

# linear sRGB → LMS
_M1 = (
    (0.41222147079999993, 0.5363325363, 0.0514459929),
    (0.2119034981999999, 0.6806995450999999, 0.1073969566),
    (0.08830246189999998, 0.2817188376, 0.6299787005000002),
)
# cube-rooted LMS → OKLab
_M2 = (
    (0.2104542553, 0.793617785, -0.0040720468),
    (1.9779984951, -2.428592205, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.808675766),
)


def srgb_to_linear(c: float) -> float:
    """Gamma-expand one sRGB channel given in [0, 1]."""
    a = abs(c)
    if a <= 0.04045:
        return c / 12.92
    return math.copysign(((a + 0.055) / 1.055) ** 2.4, c)


def _dot(row: tuple[float, float, float], v: tuple[float, float, float]) -> float:
    return row[0] * v[0] + row[1] * v[1] + row[2] * v[2]


def linear_srgb_to_oklab(r: float, g: float, b: float) -> Lab:
    lms = tuple(math.cbrt(_dot(row, (r, g, b))) for row in _M1)
    return (_dot(_M2[0], lms), _dot(_M2[1], lms), _dot(_M2[2], lms))


def oklab_to_oklch(lab: Lab) -> Oklch:
    l, a, b = lab  # noqa: E741
    c = math.sqrt(a * a + b * b)
    h = math.degrees(math.atan2(b, a)) % 360.0 if c else None
    return Oklch(l, c, h)


def to_oklab(color: Color) -> Lab:
    """Does: Convert a canonical Color (0–255 channels, alpha ignored) to OKLab."""
    r, g, b = (srgb_to_linear(v / 255) for v in color.rgb)
    l, a, b_ = linear_srgb_to_oklab(r, g, b)  # noqa: E741
    if color.r == color.g == color.b:
        # greys carry no hue; drop floating-point residue
        a = b_ = 0.0
    return (l, a, b_)


def to_perceptual(color: Color) -> Oklch:
    """Does: Map a canonical Color into OKLCH (lightness, chroma, hue in degrees)."""
    return oklab_to_oklch(to_oklab(color))


@lru_cache(maxsize=4096)
def hex_to_perceptual(hex_text: str) -> Oklch | None:
    """Does: Parse a palette hex and convert it; None when the hex is unusable."""
    color = parse_hex(hex_text)
    return to_perceptual(color) if color is not None else None
