"""Tokenization strategies: whitespace words or logographic glyphs."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Union

import Stemmer

from ._errors import FathomConfigError

if TYPE_CHECKING:
    from ._config import EngineConfig

# Punctuation cannot sit inside a fragment
_WORD_JUNK_RE = re.compile(r"[/()\[\]{}?!,.;:\"“”]")
_GLYPH_BREAK_RE = re.compile(r"[。，、；：！？（）《》—,.;:!?()\s]")


class WordTokenizer:
    """Lowercased whitespace-delimited words; work is character length."""

    __slots__ = ("_stemmer",)

    min_token_length = 2

    def __init__(self, stem_language: str | None = None) -> None:
        self._stemmer = None
        if stem_language is not None:
            try:
                self._stemmer = Stemmer.Stemmer(stem_language)
            except KeyError as exc:
                raise FathomConfigError(
                    f"No Snowball stemmer for language {stem_language!r}"
                ) from exc

    def tokens(self, sentence: str) -> list[str]:
        out: list[str] = []
        for raw in sentence.split():
            word = _WORD_JUNK_RE.sub("", raw).strip().lower()
            if not word:
                continue
            if self._stemmer is not None:
                word = self._stemmer.stemWord(word)
            out.append(word)
        return out

    def work(self, fragment: str) -> float:
        return float(len(fragment))


class GlyphTokenizer:
    """One token per glyph; work is half the summed stroke count."""

    __slots__ = ("_strokes",)

    # Every glyph is a single character, so the length rule cannot apply
    min_token_length = 1

    def __init__(self, strokes: dict[str, int]) -> None:
        self._strokes = strokes

    def tokens(self, sentence: str) -> list[str]:
        out: list[str] = []
        for piece in _GLYPH_BREAK_RE.split(sentence):
            out.extend(piece)
        return out

    def work(self, fragment: str) -> float:
        strokes = self._strokes
        return sum(strokes.get(glyph, 0) for glyph in fragment) / 2


Tokenizer = Union[WordTokenizer, GlyphTokenizer]


def make_tokenizer(config: EngineConfig) -> Tokenizer:
    if config.mode == "glyph":
        return GlyphTokenizer(config.strokes)
    if config.mode == "word":
        return WordTokenizer(config.stem_language)
    raise FathomConfigError(f"Unsupported tokenization mode {config.mode!r}")
