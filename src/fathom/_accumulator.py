"""Rolling n-gram accumulator: short-term counts and the long-term occurrence ledger."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import TYPE_CHECKING

from ._bindings import excluded_by_bindings
from ._config import LEG_WINDOW, MAXCLUSTERS
from ._intent import intentionality

if TYPE_CHECKING:
    from collections.abc import Collection

    from ._tokenizer import Tokenizer


class FragmentAccumulator:
    """Owns all fragment state for one document.

    Round-robin buffers are kept across sentence boundaries, so a fragment
    may straddle two sentences; it is attributed to the sentence holding its
    last token.
    """

    __slots__ = (
        "_tokenizer", "_max_clusters", "_leg_window", "_starters", "_enders",
        "_total_sentences", "_buffers", "_counts", "_ledger", "_by_sentence",
    )

    def __init__(
        self,
        tokenizer: Tokenizer,
        total_sentences: int,
        *,
        max_clusters: int = MAXCLUSTERS,
        leg_window: int = LEG_WINDOW,
        starters: Collection[str] = frozenset(),
        enders: Collection[str] = frozenset(),
    ) -> None:
        self._tokenizer = tokenizer
        self._max_clusters = max_clusters
        self._leg_window = leg_window
        self._starters = starters
        self._enders = enders
        self._total_sentences = total_sentences
        self.reset()

    def reset(self) -> None:
        """Forget everything; required before reuse on an unrelated document."""
        # Index 0 is unused so that index n holds n-grams
        self._buffers: list[deque[str]] = [
            deque(maxlen=n) for n in range(self._max_clusters)
        ]
        self._counts: list[dict[str, int]] = [
            defaultdict(int) for _ in range(self._max_clusters)
        ]
        self._ledger: list[dict[str, list[int]]] = [
            defaultdict(list) for _ in range(self._max_clusters)
        ]
        self._by_sentence: list[dict[int, list[str]]] = [
            defaultdict(list) for _ in range(self._max_clusters)
        ]

    # -- Accounting --

    def advance(self, token: str, sentence_index: int) -> float:
        """Push one token through every window; return the intentionality it adds."""
        tokenizer = self._tokenizer
        min_len = tokenizer.min_token_length
        rank = 0.0

        for n in range(2, self._max_clusters):
            buf = self._buffers[n]
            buf.append(token)  # maxlen drops the oldest
            if len(buf) < n:
                continue
            if excluded_by_bindings(
                buf[0], buf[-1], self._starters, self._enders, min_len,
            ):
                continue
            rank += self._record(n, " ".join(buf), sentence_index)

        if len(token) >= min_len:
            rank += self._record(1, token, sentence_index)

        return rank

    def rank_sentence(self, sentence: str, sentence_index: int) -> float:
        """Tokenize a sentence and sum the intentionality of every token."""
        total = 0.0
        for token in self._tokenizer.tokens(sentence):
            total += self.advance(token, sentence_index)
        return total

    def _record(self, n: int, key: str, sentence_index: int) -> float:
        self._counts[n][key] += 1
        self._ledger[n][key].append(sentence_index)
        self._by_sentence[n][sentence_index].append(key)
        return self.intentionality(n, key)

    # -- Queries --

    def intentionality(self, n: int, fragment: str) -> float:
        """Current intentionality of ``fragment`` given its count so far."""
        occurrences = self._counts[n].get(fragment, 0)
        if occurrences == 0:
            return 0.0
        return intentionality(
            occurrences,
            self._tokenizer.work(fragment),
            self._total_sentences,
            self._leg_window,
        )

    def count(self, n: int, fragment: str) -> int:
        return self._counts[n].get(fragment, 0)

    def occurrences(self, n: int, fragment: str) -> list[int]:
        """Sentence indices where ``fragment`` was recorded, in document order."""
        return list(self._ledger[n].get(fragment, ()))

    def ledger(self, n: int) -> dict[str, list[int]]:
        return dict(self._ledger[n])

    def counts(self, n: int) -> dict[str, int]:
        return dict(self._counts[n])

    def fragments_in(self, sentence_index: int, n: int) -> list[str]:
        """Fragments of length ``n`` recorded while reading a sentence."""
        return list(self._by_sentence[n].get(sentence_index, ()))

    @property
    def max_clusters(self) -> int:
        return self._max_clusters

    @property
    def total_sentences(self) -> int:
        return self._total_sentences
