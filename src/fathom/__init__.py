"""Fathom: intentional fragments, notable events and persistent topics in narrative text."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ._bindings import FORBIDDEN_ENDERS, FORBIDDEN_STARTERS, excluded_by_bindings
from ._config import (
    LEG_WINDOW,
    MAXCLUSTERS,
    AdaptiveSqrt,
    EngineConfig,
    FixedCapThreshold,
)
from ._errors import (
    FathomChecksumError,
    FathomConfigError,
    FathomError,
    FathomVersionError,
)
from ._hash import fragment_key, key_name
from ._intent import intentionality
from ._logging import configure_logging
from ._sentence import mark_sentence_ends, split_sentences
from ._topics import topics_by_length
from ._types import LegSummary, NarrativeAnalysis, Sentence, Topic

if TYPE_CHECKING:
    from pathlib import Path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "AdaptiveSqrt",
    "EngineConfig",
    "FathomChecksumError",
    "FathomConfigError",
    "FathomError",
    "FathomVersionError",
    "FixedCapThreshold",
    "FORBIDDEN_ENDERS",
    "FORBIDDEN_STARTERS",
    "LEG_WINDOW",
    "LegSummary",
    "MAXCLUSTERS",
    "NarrativeAnalysis",
    "NarrativeEngine",
    "Sentence",
    "Topic",
    "configure_logging",
    "excluded_by_bindings",
    "fragment_key",
    "intentionality",
    "key_name",
    "mark_sentence_ends",
    "split_sentences",
    "topics_by_length",
]


def load(
    config: EngineConfig | None = None,
    data_dir: Path | str | None = None,
    **overrides: Any,
) -> "NarrativeEngine":
    """Return a ready-to-use NarrativeEngine.

    Args:
        config: Base configuration. Defaults to ``EngineConfig()``.
        data_dir: Optional language pack directory; its binding sets and
            stroke table replace those of ``config``.
        **overrides: Individual ``EngineConfig`` fields to replace.
    """
    from dataclasses import fields, replace

    from ._engine import NarrativeEngine

    if config is None:
        config = EngineConfig.from_dict(overrides) if overrides else EngineConfig()
    elif overrides:
        merged = {f.name: getattr(config, f.name) for f in fields(config)}
        merged.update(overrides)
        config = EngineConfig.from_dict(merged)

    if data_dir is not None:
        from ._loader import load_language_pack

        pack = load_language_pack(data_dir)
        pack_fields: dict[str, Any] = {
            "forbidden_starters": pack["forbidden_starters"],
            "forbidden_enders": pack["forbidden_enders"],
        }
        if pack["strokes"]:
            pack_fields["strokes"] = pack["strokes"]
        config = replace(config, **pack_fields)

    return NarrativeEngine(config)


# Deferred import so NarrativeEngine is available as fathom.NarrativeEngine
# without circular import issues at module load time.
def __getattr__(name: str):
    if name == "NarrativeEngine":
        from ._engine import NarrativeEngine
        return NarrativeEngine
    raise AttributeError(f"module 'fathom' has no attribute {name!r}")
