"""Tests for engine configuration and the load() factory."""

import pytest

import fathom
from fathom import (
    FORBIDDEN_ENDERS,
    FORBIDDEN_STARTERS,
    AdaptiveSqrt,
    EngineConfig,
    FathomConfigError,
    FathomError,
    FixedCapThreshold,
)
from fathom._config import policy_from_dict


def test_defaults():
    cfg = EngineConfig()
    assert cfg.leg_window == 100
    assert cfg.max_clusters == 7
    assert isinstance(cfg.policy, AdaptiveSqrt)
    assert cfg.effective_sentinel == "#"
    assert cfg.forbidden_starters == FORBIDDEN_STARTERS
    assert cfg.forbidden_enders == FORBIDDEN_ENDERS
    assert cfg.positional_weighting is True


def test_glyph_defaults():
    cfg = EngineConfig(mode="glyph")
    assert cfg.effective_sentinel == "。"
    assert cfg.forbidden_starters == frozenset()
    assert cfg.forbidden_enders == frozenset()


@pytest.mark.parametrize("leg_window", [0, -5, 2.5, True])
def test_bad_leg_window(leg_window):
    with pytest.raises(FathomConfigError, match="leg_window"):
        EngineConfig(leg_window=leg_window)


@pytest.mark.parametrize("max_clusters", [1, True, 7.0])
def test_bad_max_clusters(max_clusters):
    with pytest.raises(FathomConfigError, match="max_clusters"):
        EngineConfig(max_clusters=max_clusters)


def test_bad_mode():
    with pytest.raises(FathomConfigError, match="mode"):
        EngineConfig(mode="syllable")


def test_bad_sentinel():
    with pytest.raises(FathomConfigError, match="sentinel"):
        EngineConfig(sentinel="##")


def test_stemming_needs_word_mode():
    with pytest.raises(FathomConfigError, match="stemming"):
        EngineConfig(mode="glyph", stem_language="english")


def test_bad_policy_object():
    with pytest.raises(FathomConfigError, match="policy"):
        EngineConfig(policy="adaptive")


@pytest.mark.parametrize("kwargs", [
    {"cap": 0},
    {"cap": 2.5},
    {"cap": True},
    {"threshold": 1.5},
    {"threshold": -0.1},
    {"threshold": "0.8"},
])
def test_bad_fixed_cap(kwargs):
    with pytest.raises(FathomConfigError):
        FixedCapThreshold(**kwargs)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        EngineConfig(leg_window=0)
    assert issubclass(FathomConfigError, FathomError)


def test_policy_from_dict():
    assert isinstance(policy_from_dict({"kind": "adaptive_sqrt"}), AdaptiveSqrt)
    policy = policy_from_dict({"kind": "fixed_cap", "cap": 2, "threshold": 0.5})
    assert policy == FixedCapThreshold(cap=2, threshold=0.5)


def test_policy_from_dict_errors():
    with pytest.raises(FathomConfigError, match="Unknown sampling policy"):
        policy_from_dict({"kind": "random"})
    with pytest.raises(FathomConfigError, match="fixed_cap"):
        policy_from_dict({"kind": "fixed_cap", "budget": 4})
    with pytest.raises(FathomConfigError, match="no parameters"):
        policy_from_dict({"kind": "adaptive_sqrt", "cap": 1})


def test_from_dict():
    cfg = EngineConfig.from_dict({
        "leg_window": 10,
        "policy": {"kind": "fixed_cap", "cap": 1},
        "forbidden_starters": ["so"],
    })
    assert cfg.leg_window == 10
    assert cfg.policy == FixedCapThreshold(cap=1)
    assert cfg.forbidden_starters == frozenset({"so"})
    assert cfg.forbidden_enders == FORBIDDEN_ENDERS


def test_from_dict_unknown_key():
    with pytest.raises(FathomConfigError, match="Unknown configuration keys"):
        EngineConfig.from_dict({"leg_size": 10})


def test_load_overrides():
    engine = fathom.load(leg_window=10, policy={"kind": "fixed_cap", "cap": 2})
    assert engine.config.leg_window == 10
    assert engine.config.policy == FixedCapThreshold(cap=2)


def test_load_merges_into_config():
    base = EngineConfig(leg_window=20)
    engine = fathom.load(base, max_clusters=4)
    assert engine.config.leg_window == 20
    assert engine.config.max_clusters == 4


def test_load_bad_override():
    with pytest.raises(FathomConfigError):
        fathom.load(leg_window=-1)


def test_engine_class_exported():
    assert isinstance(fathom.load(), fathom.NarrativeEngine)


def test_fractional_cap_rejected_at_load():
    """A fractional cap fails before any document is read."""
    with pytest.raises(FathomConfigError, match="cap"):
        fathom.load(policy={"kind": "fixed_cap", "cap": 2.5, "threshold": 0.0})


def test_boolean_leg_window_rejected_at_load():
    with pytest.raises(FathomConfigError, match="leg_window"):
        fathom.load(leg_window=True)
