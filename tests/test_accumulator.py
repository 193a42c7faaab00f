"""Tests for the rolling fragment accumulator."""

import pytest

from fathom import FORBIDDEN_ENDERS, FORBIDDEN_STARTERS, intentionality
from fathom._accumulator import FragmentAccumulator
from fathom._tokenizer import GlyphTokenizer, WordTokenizer

STORY = (
    "The keeper climbed the stairs of the old lighthouse at dusk. "
    "He was tired and the lamp was dark because the oil had run out. "
    "Below him the harbor lights came on one by one, and the boats returned. "
    "Nobody in the village knew that the keeper was afraid of the dark. "
    "That night the storm arrived early and the keeper stayed awake."
)


def _english(total=100, **kwargs):
    return FragmentAccumulator(
        WordTokenizer(), total,
        starters=FORBIDDEN_STARTERS, enders=FORBIDDEN_ENDERS, **kwargs,
    )


def _unbound(total=100, **kwargs):
    return FragmentAccumulator(WordTokenizer(), total, **kwargs)


def test_binding_exclusion():
    acc = _english()
    acc.rank_sentence("the quick fox", 0)
    assert acc.count(3, "the quick fox") == 0
    assert acc.occurrences(3, "the quick fox") == []
    assert acc.count(2, "the quick") == 0
    assert acc.count(2, "quick fox") == 1


def test_no_partial_fragments():
    acc = _unbound()
    acc.rank_sentence("quick brown fox", 0)
    assert acc.count(3, "quick brown fox") == 1
    for n in range(4, acc.max_clusters):
        assert acc.ledger(n) == {}


def test_fragments_span_sentences():
    acc = _unbound()
    acc.rank_sentence("alpha beta", 0)
    acc.rank_sentence("gamma delta", 1)
    assert acc.occurrences(2, "beta gamma") == [1]
    assert acc.occurrences(3, "alpha beta gamma") == [1]


def test_short_unigram_not_recorded():
    acc = _english()
    acc.rank_sentence("a big dog", 0)
    assert acc.count(1, "a") == 0
    assert acc.count(2, "a big") == 0
    assert acc.count(2, "big dog") == 1
    assert acc.count(1, "big") == 1


def test_unigram_ignores_bindings():
    acc = _english()
    acc.rank_sentence("the fox", 0)
    assert acc.count(1, "the") == 1


def test_no_fragment_ends_in_forbidden_word():
    acc = _english()
    for i, sentence in enumerate(STORY.split(". ")):
        acc.rank_sentence(sentence, i)
    for n in range(2, acc.max_clusters):
        for fragment in acc.ledger(n):
            words = fragment.split()
            assert words[-1] not in FORBIDDEN_ENDERS
            assert words[0] not in FORBIDDEN_STARTERS


def test_ledger_in_document_order():
    acc = _unbound()
    for i, sentence in enumerate(STORY.split(". ") * 3):
        acc.rank_sentence(sentence, i)
    for n in range(1, acc.max_clusters):
        for occurrences in acc.ledger(n).values():
            assert occurrences == sorted(occurrences)


def test_advance_returns_intentionality():
    acc = _unbound(total=100)
    assert acc.advance("serendipity", 0) == 0.0
    assert acc.advance("serendipity", 1) == 0.0
    third = acc.advance("serendipity", 2)
    assert third == pytest.approx(intentionality(3, 11.0, 100, 100))


def test_rank_sentence_sums_advances():
    acc = _unbound(total=10)
    ranks = [acc.rank_sentence("lighthouse keeper", i) for i in range(5)]
    assert ranks[0] == 0.0
    assert ranks[1] == 0.0
    assert ranks[4] > ranks[2] > 0.0


def test_fragments_in_sentence():
    acc = _unbound()
    acc.rank_sentence("quick brown fox", 0)
    assert acc.fragments_in(0, 2) == ["quick brown", "brown fox"]
    assert acc.fragments_in(0, 1) == ["quick", "brown", "fox"]
    assert acc.fragments_in(1, 2) == []


def test_reset():
    acc = _unbound()
    acc.rank_sentence("quick brown fox", 0)
    acc.reset()
    assert acc.count(1, "quick") == 0
    acc.rank_sentence("slow green turtle", 0)
    assert acc.count(2, "fox slow") == 0


def test_max_clusters_bounds_length():
    acc = _unbound(max_clusters=3)
    acc.rank_sentence("one two three four", 0)
    assert acc.count(2, "one two") == 1
    assert acc.ledger(1)
    assert acc.max_clusters == 3


def test_glyph_fragments():
    acc = FragmentAccumulator(GlyphTokenizer({"我": 7, "们": 5, "他": 5}), 10)
    acc.rank_sentence("我们他", 0)
    assert acc.count(1, "我") == 1
    assert acc.count(2, "我 们") == 1
    assert acc.count(3, "我 们 他") == 1
