"""Aho-Corasick scan for known topic fragments in normalized sentence text."""

from __future__ import annotations

from typing import TYPE_CHECKING

import ahocorasick

if TYPE_CHECKING:
    from collections.abc import Iterable


class TopicMatcher:
    """Finds whole-token occurrences of fragments in space-joined token text."""

    __slots__ = ("_ac", "_fragments")

    def __init__(self, fragments: Iterable[str]) -> None:
        self._fragments: list[str] = []
        self._ac = ahocorasick.Automaton()
        for fragment in dict.fromkeys(fragments):
            self._ac.add_word(fragment, len(self._fragments))
            self._fragments.append(fragment)
        if self._fragments:
            self._ac.make_automaton()

    def __len__(self) -> int:
        return len(self._fragments)

    def scan(self, text: str) -> list[tuple[int, int, str]]:
        """Return leftmost-longest, non-overlapping ``(start, end, fragment)`` matches.

        ``text`` must be tokens joined by single spaces; a match counts only
        if it starts and ends on token boundaries.
        """
        if not self._fragments:
            return []

        raw_matches: list[tuple[int, int, int]] = []  # (start, end, idx)
        for end_inclusive, idx in self._ac.iter(text):
            end = end_inclusive + 1
            start = end - len(self._fragments[idx])
            if start > 0 and text[start - 1] != " ":
                continue
            if end < len(text) and text[end] != " ":
                continue
            raw_matches.append((start, end, idx))

        # Sort by start position, then by length descending (longest first)
        raw_matches.sort(key=lambda m: (m[0], -(m[1] - m[0])))

        matches: list[tuple[int, int, str]] = []
        last_end = -1
        for start, end, idx in raw_matches:
            if start >= last_end:
                matches.append((start, end, self._fragments[idx]))
                last_end = end

        return matches

    def fragments_in(self, tokens: list[str]) -> list[str]:
        """Distinct fragments found in a token list, in order of first match."""
        found = [m[2] for m in self.scan(" ".join(tokens))]
        return list(dict.fromkeys(found))
