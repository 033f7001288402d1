"""
vocab
=====

Does: Embed the standard CSS named-color table (webcolors CSS3 list plus the
      Level 4 'rebeccapurple') and resolve a name the way a browser's computed
      style would, i.e. to an "rgb(r, g, b)" string.
Used By: color.parse (named-color path) and color.suggest.
Returns: Frozen name set, a name→hex mapping and the resolver; no side effects
         beyond lazy caching.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import FrozenSet, Mapping

import webcolors

log = logging.getLogger(__name__)

# Level 4 names missing from older CSS3 tables.
CSS4_EXTRA_NAMES_TO_HEX: Mapping[str, str] = MappingProxyType({"rebeccapurple": "#663399"})

# Keywords a browser accepts but which carry no usable color.
UNRESOLVABLE_KEYWORDS: FrozenSet[str] = frozenset(
    {"transparent", "currentcolor", "inherit", "initial", "unset", "revert", "none"}
)


@lru_cache(maxsize=1)
def _names_to_hex() -> Mapping[str, str]:
    """Does: Build {lowercase css name: '#rrggbb'} once (lazy)."""
    table = {
        name.lower(): webcolors.name_to_hex(name, spec=webcolors.CSS3)
        for name in webcolors.names(spec=webcolors.CSS3)
    }
    for name, hx in CSS4_EXTRA_NAMES_TO_HEX.items():
        table.setdefault(name, hx)
    log.debug("CSS named-color table loaded: %d names", len(table))
    return MappingProxyType(table)


def get_css_color_names() -> FrozenSet[str]:
    """Does: Return every CSS color name known to the resolver."""
    return frozenset(_names_to_hex())


def css_name_to_hex(name: str) -> str | None:
    """Does: Look a CSS color name up (case-insensitive, trimmed).
    Returns: '#rrggbb' or None for unknown names.
    """
    key = (name or "").strip().lower()
    if not key or key in UNRESOLVABLE_KEYWORDS:
        return None
    return _names_to_hex().get(key)


def resolve_color_name(name: str) -> str | None:
    """
    Does: Resolve a CSS color name to its computed-style string.
    Returns: "rgb(r, g, b)" (browser computed format) or None when the name
             is unknown or resolves to no color.
    """
    hx = css_name_to_hex(name)
    if hx is None:
        log.debug("Unresolved color name: %r", name)
        return None
    rgb = webcolors.hex_to_rgb(hx)
    return f"rgb({rgb.red}, {rgb.green}, {rgb.blue})"


__all__ = [
    "CSS4_EXTRA_NAMES_TO_HEX",
    "UNRESOLVABLE_KEYWORDS",
    "get_css_color_names",
    "css_name_to_hex",
    "resolve_color_name",
]
