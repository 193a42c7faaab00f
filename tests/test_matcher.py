"""Tests for the Aho-Corasick topic matcher."""

from fathom._matcher import TopicMatcher


def test_leftmost_longest():
    matcher = TopicMatcher(["quick fox", "the quick fox", "fox"])
    matches = matcher.scan("the quick fox ran")
    assert matches == [(0, 13, "the quick fox")]


def test_non_overlapping_sequence():
    matcher = TopicMatcher(["lighthouse keeper", "keeper", "storm"])
    matches = matcher.scan("lighthouse keeper saw the storm")
    assert [m[2] for m in matches] == ["lighthouse keeper", "storm"]


def test_token_boundaries():
    matcher = TopicMatcher(["fox"])
    assert matcher.scan("foxes outfox the fox") == [(17, 20, "fox")]


def test_empty_matcher():
    matcher = TopicMatcher([])
    assert len(matcher) == 0
    assert matcher.scan("anything at all") == []


def test_duplicates_collapse():
    matcher = TopicMatcher(["storm", "storm"])
    assert len(matcher) == 1


def test_fragments_in_distinct_in_order():
    matcher = TopicMatcher(["storm", "harbor"])
    found = matcher.fragments_in(["storm", "over", "harbor", "storm"])
    assert found == ["storm", "harbor"]


def test_glyph_fragments():
    matcher = TopicMatcher(["学 习"])
    assert matcher.fragments_in(["我", "们", "学", "习"]) == ["学 习"]
