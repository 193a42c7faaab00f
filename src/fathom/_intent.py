"""Intentionality: significance of a fragment from frequency, work and document scale."""

from __future__ import annotations

import math

from ._config import LEG_WINDOW, MIN_OCCURRENCES, MIN_WORK


def intentionality(
    occurrences: float,
    work: float,
    total_sentences: int,
    leg_window: int = LEG_WINDOW,
) -> float:
    """Score a fragment seen ``occurrences`` times in a document of ``total_sentences``.

    The rate ``lambda = occurrences / leg_window`` rewards repetition, while
    the logistic term ``1 / (1 + exp(lambda - legs))`` suppresses fragments
    repeated more often than the document has legs. ``work`` favours long,
    specific fragments over short filler.

    Returns exactly 0 below the occurrence floor or the work floor.
    """
    if occurrences < MIN_OCCURRENCES:
        return 0.0
    if work < MIN_WORK:
        return 0.0

    legs = total_sentences / leg_window
    lam = occurrences / leg_window
    exponent = lam - legs
    # exp() overflows past ~709; the score is 0 to double precision long before
    if exponent > 700.0:
        return 0.0
    return lam * work / (1.0 + math.exp(exponent))
