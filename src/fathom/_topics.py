"""Persistent topics: fragments that recur at a steady, document-wide spacing."""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING

from ._config import LOWEST_INTENT_CUTOFF
from ._hash import fragment_key
from ._logging import get_logger
from ._types import Topic

if TYPE_CHECKING:
    from ._accumulator import FragmentAccumulator

logger = get_logger(__name__)

# A recurrence closer than this is local repetition, not a theme
MIN_AVG_GAP: float = 3.0
# Recurrence further apart than this many legs is accidental
MAX_AVG_GAP_LEGS: int = 4


def occurrence_gaps(occurrences: list[int]) -> list[int]:
    """Distances between successive occurrences; the first is measured from 0."""
    gaps: list[int] = []
    last = 0
    for location in occurrences:
        gaps.append(location - last)
        last = location
    return gaps


def persistent_topics(
    accumulator: FragmentAccumulator,
    leg_window: int,
    *,
    min_intent: float = LOWEST_INTENT_CUTOFF,
) -> list[Topic]:
    """Scan the occurrence ledger for steadily recurring fragments.

    A fragment survives if its intentionality reaches ``min_intent``, it never
    repeats within one sentence, and its mean gap lies strictly between
    ``MIN_AVG_GAP`` and ``MAX_AVG_GAP_LEGS * leg_window`` sentences.
    Topics are returned tightest recurrence first.
    """
    max_gap = MAX_AVG_GAP_LEGS * leg_window
    topics: list[Topic] = []

    for n in range(1, accumulator.max_clusters):
        for fragment, occurrences in accumulator.ledger(n).items():
            intent = accumulator.intentionality(n, fragment)
            if intent < min_intent:
                continue

            gaps = occurrence_gaps(occurrences)
            # Bursts: the same fragment twice in one sentence
            if min(gaps) == 0:
                continue

            avg_gap = sum(gaps) / len(occurrences)
            if not (MIN_AVG_GAP < avg_gap < max_gap):
                continue

            topics.append(Topic(
                fragment=fragment,
                n=n,
                score=intent,
                avg_gap=avg_gap,
                occurrences=len(occurrences),
                key=fragment_key(fragment),
            ))

    topics.sort(key=lambda t: (t.avg_gap, t.fragment))
    for t in topics:
        logger.debug("Theme/topic %r (avg gap %.1f, intent %.3f)", t.fragment, t.avg_gap, t.score)
    return topics


def topics_by_length(topics: list[Topic]) -> dict[int, dict[str, float]]:
    """Group topics by fragment length: ``{n: {fragment: score}}``."""
    grouped: dict[int, dict[str, float]] = defaultdict(dict)
    for t in topics:
        grouped[t.n][t.fragment] = t.score
    return dict(grouped)
