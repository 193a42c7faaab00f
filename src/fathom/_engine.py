"""NarrativeEngine: intentional fragments, notable events and persistent topics."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._accumulator import FragmentAccumulator
from ._config import EngineConfig
from ._logging import get_logger
from ._matcher import TopicMatcher
from ._narrative import positional_weight, select_events
from ._sentence import split_sentences
from ._tokenizer import make_tokenizer
from ._topics import persistent_topics
from ._types import NarrativeAnalysis, Sentence

if TYPE_CHECKING:
    from ._types import Topic

logger = get_logger(__name__)


class NarrativeEngine:
    """Main analysis engine. Holds configuration and exposes the public API.

    The engine itself is stateless between calls: each document gets its own
    ``FragmentAccumulator``.
    """

    __slots__ = ("_config", "_tokenizer")

    def __init__(self, config: EngineConfig | None = None) -> None:
        self._config = config if config is not None else EngineConfig()
        self._tokenizer = make_tokenizer(self._config)

    @property
    def config(self) -> EngineConfig:
        return self._config

    # -- Public API --

    def split(self, text: str | list[str]) -> list[str]:
        """Split sentinel-marked text into sentences."""
        return split_sentences(text, self._config.effective_sentinel)

    def accumulator(self, total_sentences: int) -> FragmentAccumulator:
        """A fresh accumulator for a document of ``total_sentences``."""
        cfg = self._config
        return FragmentAccumulator(
            self._tokenizer,
            total_sentences,
            max_clusters=cfg.max_clusters,
            leg_window=cfg.leg_window,
            starters=cfg.forbidden_starters,
            enders=cfg.forbidden_enders,
        )

    def rank(self, text: str | list[str]) -> tuple[list[Sentence], FragmentAccumulator]:
        """First pass: score every sentence and fill the occurrence ledger.

        Ranks are summed intentionality, scaled once by position when
        ``positional_weighting`` is on.
        """
        texts = self.split(text)
        total = len(texts)
        acc = self.accumulator(total)

        raw = [acc.rank_sentence(s, i) for i, s in enumerate(texts)]

        weighting = self._config.positional_weighting
        sentences = [
            Sentence(
                text=s,
                rank=raw[i] * positional_weight(i, total) if weighting else raw[i],
                index=i,
            )
            for i, s in enumerate(texts)
        ]
        return sentences, acc

    def analyze(self, text: str | list[str]) -> NarrativeAnalysis:
        """Run the full pipeline on one document.

        Args:
            text: Sentinel-marked text or a pre-split list of sentences.
        """
        cfg = self._config
        sentences, acc = self.rank(text)
        n = len(sentences)

        if n == 0:
            return NarrativeAnalysis(
                sentences=[], events=[], topics=[], legs=[],
                n_sentences=0, kept=0,
            )

        logger.info(
            "Analyzing %d sentences in %.2f legs of %d",
            n, n / cfg.leg_window, cfg.leg_window,
        )

        events, legs = select_events(sentences, cfg.leg_window, cfg.policy)
        topics = persistent_topics(acc, cfg.leg_window)
        event_topics = self._event_topics(events, topics)

        logger.info(
            "Notable events = %d of total %d (density %.1f%%), %d persistent topics",
            len(events), n, 100.0 * len(events) / n, len(topics),
        )

        return NarrativeAnalysis(
            sentences=sentences,
            events=events,
            topics=topics,
            legs=legs,
            n_sentences=n,
            kept=len(events),
            event_topics=event_topics,
        )

    def topics(self, text: str | list[str]) -> list[Topic]:
        """Persistent topics only, skipping event selection."""
        _, acc = self.rank(text)
        return persistent_topics(acc, self._config.leg_window)

    def fractionate(self, text: str | list[str]) -> dict[int, dict[str, int]]:
        """Occurrence count of every recorded fragment, keyed by length."""
        _, acc = self.rank(text)
        return {n: acc.counts(n) for n in range(1, acc.max_clusters)}

    def normalize(self, sentence: str) -> list[str]:
        """Tokens of a sentence exactly as the accumulator sees them."""
        return self._tokenizer.tokens(sentence)

    # -- Internal methods --

    def _event_topics(
        self, events: list[Sentence], topics: list[Topic]
    ) -> dict[int, list[str]]:
        """Which persistent topics each selected event contains."""
        if not events or not topics:
            return {}
        matcher = TopicMatcher(t.fragment for t in topics)
        result: dict[int, list[str]] = {}
        for event in events:
            found = matcher.fragments_in(self._tokenizer.tokens(event.text))
            if found:
                result[event.index] = found
        return result
