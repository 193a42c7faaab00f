"""Engine configuration: intrinsic scales, sampling policies, language knobs."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Union

from ._bindings import FORBIDDEN_ENDERS, FORBIDDEN_STARTERS
from ._errors import FathomConfigError

# Intrinsic scales of a narrative
LEG_WINDOW: int = 100           # sentences per leg
MAXCLUSTERS: int = 7            # fragments of 1..MAXCLUSTERS-1 tokens
MIN_OCCURRENCES: int = 3        # anti-noise floor for intentionality
MIN_WORK: float = 5.0           # shortest fragment worth scoring
LOWEST_INTENT_CUTOFF: float = 0.3
DEFAULT_TRUST_THRESHOLD: float = 0.8
DEFAULT_DETAIL_PER_LEG: int = 3

WORD_SENTINEL = "#"
GLYPH_SENTINEL = "。"  # ideographic full stop

MODES = ("word", "glyph")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(slots=True, frozen=True)
class AdaptiveSqrt:
    """Budget grows like sqrt(leg_window * trust) for every leg."""

    def budget(self, leg_window: int, trust: float) -> int:
        if trust <= 0.0:
            return 0
        return int(0.5 + math.sqrt(leg_window * trust))


@dataclass(slots=True, frozen=True)
class FixedCapThreshold:
    """A fixed number of samples, only for legs whose trust exceeds a threshold."""

    cap: int = DEFAULT_DETAIL_PER_LEG
    threshold: float = DEFAULT_TRUST_THRESHOLD

    def __post_init__(self) -> None:
        if not _is_int(self.cap) or self.cap < 1:
            raise FathomConfigError(f"cap must be an integer >= 1, got {self.cap!r}")
        if (
            not isinstance(self.threshold, (int, float))
            or isinstance(self.threshold, bool)
            or not (0.0 <= self.threshold <= 1.0)
        ):
            raise FathomConfigError(
                f"threshold must be a number in [0.0, 1.0], got {self.threshold!r}"
            )

    def budget(self, leg_window: int, trust: float) -> int:
        return self.cap if trust > self.threshold else 0


SamplingPolicy = Union[AdaptiveSqrt, FixedCapThreshold]


def policy_from_dict(data: dict[str, Any]) -> SamplingPolicy:
    """Build a sampling policy from ``{"kind": ..., **params}``."""
    kind = data.get("kind", "adaptive_sqrt")
    params = {k: v for k, v in data.items() if k != "kind"}
    if kind == "adaptive_sqrt":
        if params:
            raise FathomConfigError(
                f"adaptive_sqrt takes no parameters, got {sorted(params)}"
            )
        return AdaptiveSqrt()
    if kind == "fixed_cap":
        try:
            return FixedCapThreshold(**params)
        except TypeError as exc:
            raise FathomConfigError(f"Bad fixed_cap parameters: {exc}") from exc
    raise FathomConfigError(f"Unknown sampling policy {kind!r}")


@dataclass(slots=True, frozen=True)
class EngineConfig:
    """Fixed for the duration of a run; validated on construction."""

    leg_window: int = LEG_WINDOW
    max_clusters: int = MAXCLUSTERS
    policy: SamplingPolicy = field(default_factory=AdaptiveSqrt)
    mode: str = "word"
    sentinel: str | None = None
    forbidden_starters: frozenset[str] | None = None
    forbidden_enders: frozenset[str] | None = None
    strokes: dict[str, int] = field(default_factory=dict)
    stem_language: str | None = None
    positional_weighting: bool = True

    def __post_init__(self) -> None:
        if not _is_int(self.leg_window) or self.leg_window <= 0:
            raise FathomConfigError(
                f"leg_window must be a positive integer, got {self.leg_window!r}"
            )
        if not _is_int(self.max_clusters) or self.max_clusters <= 1:
            raise FathomConfigError(
                f"max_clusters must be an integer > 1, got {self.max_clusters!r}"
            )
        if self.mode not in MODES:
            raise FathomConfigError(
                f"Unsupported tokenization mode {self.mode!r}, expected one of {MODES}"
            )
        if not isinstance(self.policy, (AdaptiveSqrt, FixedCapThreshold)):
            raise FathomConfigError(f"Unknown sampling policy {self.policy!r}")
        if self.sentinel is not None and len(self.sentinel) != 1:
            raise FathomConfigError(
                f"sentinel must be a single character, got {self.sentinel!r}"
            )
        if self.stem_language is not None and self.mode != "word":
            raise FathomConfigError("stemming applies to word mode only")
        # English bindings for words; glyph scripts bind differently
        if self.forbidden_starters is None:
            starters = FORBIDDEN_STARTERS if self.mode == "word" else frozenset()
        else:
            starters = frozenset(self.forbidden_starters)
        if self.forbidden_enders is None:
            enders = FORBIDDEN_ENDERS if self.mode == "word" else frozenset()
        else:
            enders = frozenset(self.forbidden_enders)
        object.__setattr__(self, "forbidden_starters", starters)
        object.__setattr__(self, "forbidden_enders", enders)

    @property
    def effective_sentinel(self) -> str:
        if self.sentinel is not None:
            return self.sentinel
        return GLYPH_SENTINEL if self.mode == "glyph" else WORD_SENTINEL

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EngineConfig:
        """Build a config from plain data (e.g. parsed JSON)."""
        data = dict(data)
        policy = data.pop("policy", None)
        if isinstance(policy, dict):
            data["policy"] = policy_from_dict(policy)
        elif policy is not None:
            data["policy"] = policy
        for key in ("forbidden_starters", "forbidden_enders"):
            if data.get(key) is not None:
                data[key] = frozenset(data[key])
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise FathomConfigError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**data)
