"""Words that bind to a neighbour, so no standalone fragment may start or end on them."""

from __future__ import annotations

from collections.abc import Collection

# Endings: articles, conjunctions, possessives and prepositions that
# promise a following word.
FORBIDDEN_ENDERS: frozenset[str] = frozenset({
    "but", "and", "or", "the", "a", "an",
    "its", "it's", "their", "your", "my",
    "of", "as", "are", "is", "be", "with", "using",
    "that", "who", "to", "because", "at", "in",
    "no", "yes", "yeah", "yay",
})

# Starters: words that lean on a preceding clause.
FORBIDDEN_STARTERS: frozenset[str] = frozenset({
    "and", "or", "of", "the", "it", "because", "in",
    "that", "these", "those",
    "is", "are", "was", "were", "but",
    "yes", "no", "yeah", "yay",
})


def excluded_by_bindings(
    first: str,
    last: str,
    starters: Collection[str] = FORBIDDEN_STARTERS,
    enders: Collection[str] = FORBIDDEN_ENDERS,
    min_token_length: int = 2,
) -> bool:
    """Return True if a fragment bounded by ``first``/``last`` is a window artifact.

    Tokens shorter than ``min_token_length`` are rejected outright; glyph
    tokenizers pass 1 so single glyphs survive.
    """
    if len(first) < min_token_length or len(last) < min_token_length:
        return True
    if last in enders:
        return True
    return first in starters
