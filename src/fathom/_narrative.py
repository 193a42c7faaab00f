"""Narrative legs and adaptive event selection over ranked sentences."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._logging import get_logger
from ._types import LegSummary

if TYPE_CHECKING:
    from ._config import SamplingPolicy
    from ._types import Sentence

logger = get_logger(__name__)


def positional_weight(index: int, total: int) -> float:
    """Boost sentences near the start and end of a story.

    Early sentences are scored before much evidence exists, so the rank is
    scaled by ``1 + ((midway - index) / midway) ** 2``.
    """
    midway = total // 2
    if midway == 0:
        return 1.0
    return 1.0 + (midway - index) * (midway - index) / (midway * midway)


def leg_bounds(n_sentences: int, leg_window: int) -> list[tuple[int, int]]:
    """Half-open ``(start, end)`` ranges of each leg; the last may be short."""
    return [
        (start, min(start + leg_window, n_sentences))
        for start in range(0, n_sentences, leg_window)
    ]


def leg_averages(ranks: list[float], leg_window: int) -> list[float]:
    """Average rank per leg.

    Full legs divide by ``leg_window``; a short final leg divides by its own
    length, so a short tail is not under-counted. Empty legs never occur.
    """
    averages: list[float] = []
    for start, end in leg_bounds(len(ranks), leg_window):
        steps = end - start
        if steps == 0:
            continue
        averages.append(sum(ranks[start:end]) / steps)
    return averages


def scale_free_trust(average: float, max_average: float) -> float:
    """Leg importance relative to the busiest leg, in [0, 1]."""
    if max_average <= 0.0:
        return 0.0
    return average / max_average


def _top_by_rank(leg: list[Sentence], budget: int) -> list[Sentence]:
    # Highest rank first; ties go to the earlier sentence
    ranked = sorted(leg, key=lambda s: (-s.rank, s.index))
    chosen = ranked[:budget]
    chosen.sort(key=lambda s: s.index)
    return chosen


def select_events(
    sentences: list[Sentence],
    leg_window: int,
    policy: SamplingPolicy,
) -> tuple[list[Sentence], list[LegSummary]]:
    """Pick the most intentional sentences of each leg, in document order.

    Pass 1 averages each leg's ranks and finds the busiest leg. Pass 2 asks
    the sampling policy for a per-leg budget from the leg's scale-free trust
    and keeps that many top-ranked sentences.
    """
    if not sentences:
        return [], []

    averages = leg_averages([s.rank for s in sentences], leg_window)
    max_average = max(averages)

    events: list[Sentence] = []
    legs: list[LegSummary] = []

    for leg, (start, end) in enumerate(leg_bounds(len(sentences), leg_window)):
        members = sentences[start:end]
        if not members:
            continue

        trust = scale_free_trust(averages[leg], max_average)
        budget = policy.budget(leg_window, trust)
        logger.debug(
            "Leg %d: trust=%.3f budget=%d (of %d sentences)",
            leg, trust, budget, len(members),
        )

        chosen = _top_by_rank(members, budget) if budget > 0 else []
        for s in chosen:
            logger.debug("EVENT[leg %d selects %d]: %s", leg, s.index, s.text)
        events.extend(chosen)

        legs.append(LegSummary(
            leg=leg,
            start_idx=members[0].index,
            end_idx=members[-1].index,
            average_rank=averages[leg],
            trust=trust,
            budget=budget,
            selected=[s.index for s in chosen],
        ))

    return events, legs
