"""
parse.py
========

Does: Turn free-form color text (hex, rgb()/rgba(), CSS color name) into a
      canonical `Color`, plus the reverse hex formatter.
Used By: palette.index (hex path), the ranker's oklch mode, the orchestrator.
Returns: `Color` or None. Unparseable input is a normal outcome, never an
         exception.
"""

from __future__ import annotations

import logging
import re

from plasma_color_finder.color.types import Color, clamp_channel
from plasma_color_finder.color.vocab import resolve_color_name

__all__ = [
    "parse_color",
    "parse_hex",
    "parse_rgba",
    "parse_computed_rgb",
    "parse_css_color_name",
    "rgb_to_hex",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── Patterns ─────────────────────────────────────────────────────────────────
_HEX_RE = re.compile(r"^[0-9a-f]{3,8}$", re.IGNORECASE)
_FUNC_PREFIX_RE = re.compile(r"^rgba?\s*\(", re.IGNORECASE)

# User input: integer channels (sign allowed, clamped later), optional float alpha
_RGBA_RE = re.compile(
    r"^rgba?\s*\(\s*([+-]?\d+)\s*,\s*([+-]?\d+)\s*,\s*([+-]?\d+)\s*"
    r"(?:,\s*([\d.]+)\s*)?\)\s*$",
    re.IGNORECASE,
)

# Computed style strings: fractional channels, comma or space/slash separated
_COMPUTED_COMMA_RE = re.compile(
    r"^rgba?\s*\(\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)\s*"
    r"(?:[,/]\s*([\d.]+)\s*)?\)\s*$",
    re.IGNORECASE,
)
_COMPUTED_SPACE_RE = re.compile(
    r"^rgba?\s*\(\s*([\d.]+)\s+([\d.]+)\s+([\d.]+)\s*"
    r"(?:/\s*([\d.]+)\s*)?\)\s*$",
    re.IGNORECASE,
)


# =============================================================================
# 1) HEX
# =============================================================================

def parse_hex(text: str) -> Color | None:
    """
    Does: Parse #RGB, #RRGGBB or #RRGGBBAA (leading '#' optional, any case).
    Returns: Color (alpha = last byte / 255 for the 8-digit form) or None.
    """
    cleaned = (text or "").strip()
    if cleaned.startswith("#"):
        cleaned = cleaned[1:].strip()
    if not _HEX_RE.match(cleaned):
        return None

    if len(cleaned) == 3:
        r, g, b = (int(ch * 2, 16) for ch in cleaned)
        return Color(r, g, b)
    if len(cleaned) == 6:
        return Color(int(cleaned[0:2], 16), int(cleaned[2:4], 16), int(cleaned[4:6], 16))
    if len(cleaned) == 8:
        return Color(
            int(cleaned[0:2], 16),
            int(cleaned[2:4], 16),
            int(cleaned[4:6], 16),
            int(cleaned[6:8], 16) / 255,
        )
    return None


# =============================================================================
# 2) rgb() / rgba()
# =============================================================================

def _parse_alpha(raw: str | None) -> float | None:
    if raw is None:
        return 1.0
    try:
        return float(raw)
    except ValueError:
        return None


def parse_rgba(text: str) -> Color | None:
    """
    Does: Parse rgb(r, g, b) / rgba(r, g, b, a) with comma-separated integers.
    Returns: Color with channels clamped to [0, 255] (alpha defaults to 1), or None.
    """
    m = _RGBA_RE.match((text or "").strip())
    if not m:
        return None
    alpha = _parse_alpha(m.group(4))
    if alpha is None:
        return None
    r, g, b = (int(v) for v in m.group(1, 2, 3))
    return Color(r, g, b, alpha)


def parse_computed_rgb(text: str) -> Color | None:
    """
    Does: Decode the rgb()/rgba() string produced by a name-resolution step.
          Accepts comma syntax `rgb(r, g, b[, a])` and space syntax
          `rgb(r g b[ / a])`; fractional channels are rounded half-up.
    Returns: Color or None.
    """
    cleaned = (text or "").strip()
    for pattern in (_COMPUTED_COMMA_RE, _COMPUTED_SPACE_RE):
        m = pattern.match(cleaned)
        if not m:
            continue
        try:
            r, g, b = (float(v) for v in m.group(1, 2, 3))
        except ValueError:
            return None
        alpha = _parse_alpha(m.group(4))
        if alpha is None:
            return None
        return Color(clamp_channel(r), clamp_channel(g), clamp_channel(b), alpha)
    return None


# =============================================================================
# 3) CSS NAMES
# =============================================================================

def parse_css_color_name(name: str) -> Color | None:
    """Does: Resolve a CSS color name (e.g. 'magenta', 'rebeccapurple') to a Color."""
    computed = resolve_color_name(name)
    if computed is None:
        return None
    return parse_computed_rgb(computed)


# =============================================================================
# 4) DISPATCH
# =============================================================================

def parse_color(text: str) -> Color | None:
    """
    Does: Parse any supported color string, dispatching on its lexical shape:
          '#…' → hex, 'rgb(' / 'rgba(' → functional syntax, else CSS name.
    Returns: Color, or None for empty/whitespace input and anything unparseable.
    """
    trimmed = (text or "").strip()
    if not trimmed:
        return None
    if trimmed.startswith("#"):
        color = parse_hex(trimmed)
    elif _FUNC_PREFIX_RE.match(trimmed):
        color = parse_rgba(trimmed)
    else:
        color = parse_css_color_name(trimmed)
    if color is None:
        logger.debug("Unparseable color input: %r", trimmed)
    return color


def rgb_to_hex(color: Color) -> str:
    """Does: Format a color as lowercase '#rrggbb' (alpha dropped)."""
    return "#{:02x}{:02x}{:02x}".format(
        clamp_channel(color.r), clamp_channel(color.g), clamp_channel(color.b)
    )
