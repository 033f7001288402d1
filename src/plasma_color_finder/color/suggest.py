"""
suggest.py

Does: Offer "did you mean" CSS color names for input that did not resolve.
Returns: Ranked list of close names (best first), possibly empty.
Used by: The query orchestrator when a non-empty input fails to parse.
"""

from __future__ import annotations

import logging
import re

from rapidfuzz import fuzz, process

from plasma_color_finder.color.vocab import get_css_color_names

__all__ = ["suggest_color_names", "normalize_name"]

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
DEFAULT_LIMIT = 3
DEFAULT_SCORE_CUTOFF = 75

_SEPARATORS_RE = re.compile(r"[\s_\-]+")


def normalize_name(text: str) -> str:
    """
    Does: Lowercase and drop spaces/underscores/hyphens ('Rebecca Purple' → 'rebeccapurple').
    Returns: Normalized string (may be empty).
    """
    return _SEPARATORS_RE.sub("", (text or "").strip().lower())


def suggest_color_names(
    text: str,
    limit: int = DEFAULT_LIMIT,
    score_cutoff: float = DEFAULT_SCORE_CUTOFF,
) -> list[str]:
    """
    Does: Fuzzy-match `text` against the CSS color names.
    Returns: Up to `limit` names scoring at least `score_cutoff` (0–100).
    """
    query = normalize_name(text)
    if not query or limit <= 0:
        return []
    # hex/functional input is not a misspelt name
    if query.startswith("#") or query.startswith("rgb"):
        return []

    choices = sorted(get_css_color_names())
    hits = process.extract(
        query, choices, scorer=fuzz.WRatio, limit=limit, score_cutoff=score_cutoff
    )
    ranked = sorted(hits, key=lambda hit: (-hit[1], hit[0]))
    log.debug("Suggestions for %r: %s", text, ranked)
    return [name for name, _score, _idx in ranked]
