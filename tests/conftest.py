"""Shared fixtures for fathom tests."""

import pytest

import fathom


@pytest.fixture(scope="session")
def engine():
    """Default English word engine."""
    return fathom.load()


@pytest.fixture(scope="session")
def unbound_engine():
    """Word engine without binding exclusions, so any phrase is recordable."""
    return fathom.load(forbidden_starters=[], forbidden_enders=[])


@pytest.fixture
def phrase_document():
    """Build a document of unique one-word fillers with a phrase at given positions."""
    def build(n_sentences, positions, phrase="the quick fox"):
        positions = set(positions)
        return [
            phrase if i in positions else f"w{i:04d}"
            for i in range(n_sentences)
        ]
    return build
