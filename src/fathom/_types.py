"""Data structures for fathom."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Sentence:
    text: str
    rank: float     # summed intentionality, scaled once by position
    index: int      # position in the document


@dataclass(slots=True, frozen=True)
class Topic:
    fragment: str
    n: int              # fragment length in tokens
    score: float        # intentionality at end of document
    avg_gap: float      # mean sentence distance between occurrences
    occurrences: int
    key: str            # stable handle, "key_<fnv64a>"


@dataclass(slots=True, frozen=True)
class LegSummary:
    leg: int
    start_idx: int
    end_idx: int        # inclusive
    average_rank: float
    trust: float        # average_rank / max leg average, in [0, 1]
    budget: int         # sentences the policy allowed for this leg
    selected: list[int] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class NarrativeAnalysis:
    sentences: list[Sentence]
    events: list[Sentence]
    topics: list[Topic]
    legs: list[LegSummary]
    n_sentences: int
    kept: int
    event_topics: dict[int, list[str]] = field(default_factory=dict)

    @property
    def density(self) -> float:
        """Fraction of sentences kept as notable events."""
        if self.n_sentences == 0:
            return 0.0
        return self.kept / self.n_sentences

    @property
    def leg_trust(self) -> list[float]:
        return [leg.trust for leg in self.legs]
