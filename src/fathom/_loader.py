"""Language pack loading, manifest validation, and SHA-256 checksum verification."""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

import msgpack

from ._errors import FathomChecksumError, FathomError, FathomVersionError
from ._logging import get_logger

logger = get_logger(__name__)

_EXPECTED_VERSION = "1.0"

_REQUIRED_FILES = ("bindings.bin",)
_OPTIONAL_FILES = ("strokes.bin",)


def _sha256(path: Path) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()


def _read_manifest(data_dir: Path) -> dict[str, Any]:
    manifest_path = data_dir / "manifest.json"
    if not manifest_path.exists():
        raise FathomError(f"manifest.json not found in {data_dir}")
    with open(manifest_path) as f:
        return json.load(f)


def _verify(filename: str, data_dir: Path, checksums: dict[str, str]) -> None:
    filepath = data_dir / filename
    expected = checksums.get(filename)
    if expected is None:
        raise FathomError(f"No checksum in manifest for {filename}")
    actual = _sha256(filepath)
    if actual != expected:
        raise FathomChecksumError(
            f"Checksum mismatch for {filename}: "
            f"expected {expected[:16]}..., got {actual[:16]}..."
        )


def _validate_manifest(manifest: dict[str, Any], data_dir: Path) -> list[str]:
    """Check version and checksums; return the data files present."""
    version = manifest.get("version")
    if version != _EXPECTED_VERSION:
        raise FathomVersionError(
            f"Expected pack version {_EXPECTED_VERSION!r}, got {version!r}"
        )
    checksums = manifest.get("files", {})
    present: list[str] = []
    for filename in _REQUIRED_FILES:
        if not (data_dir / filename).exists():
            raise FathomError(f"Missing data file: {data_dir / filename}")
        _verify(filename, data_dir, checksums)
        present.append(filename)
    for filename in _OPTIONAL_FILES:
        if (data_dir / filename).exists():
            _verify(filename, data_dir, checksums)
            present.append(filename)
    return present


def _load_msgpack(path: Path, **kwargs: Any) -> Any:
    with open(path, "rb") as f:
        return msgpack.unpackb(f.read(), raw=False, **kwargs)


def load_language_pack(data_dir: Path | str) -> dict[str, Any]:
    """Load and validate a language pack directory.

    Returns ``{"language", "forbidden_starters", "forbidden_enders", "strokes"}``;
    ``strokes`` is empty when the pack ships no ``strokes.bin``.
    """
    data_dir = Path(data_dir)
    manifest = _read_manifest(data_dir)
    present = _validate_manifest(manifest, data_dir)

    bindings = _load_msgpack(data_dir / "bindings.bin")
    starters = frozenset(bindings.get("starters", ()))
    enders = frozenset(bindings.get("enders", ()))

    strokes: dict[str, int] = {}
    if "strokes.bin" in present:
        raw = _load_msgpack(data_dir / "strokes.bin")
        strokes = {str(glyph): int(count) for glyph, count in raw.items()}

    logger.info(
        "Loaded language pack %s: %d starters, %d enders, %d glyph strokes",
        manifest.get("language", data_dir.name), len(starters), len(enders), len(strokes),
    )
    return {
        "language": manifest.get("language"),
        "forbidden_starters": starters,
        "forbidden_enders": enders,
        "strokes": strokes,
    }


def read_stroke_table(path: Path | str, limit: int = 13000) -> dict[str, int]:
    """Read a plain-text stroke table with lines ``<glyph> <frequency> <strokes>``.

    Reading stops at the first line with zero strokes or after ``limit`` glyphs.
    """
    strokes: dict[str, int] = {}
    with open(path, encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            parts = line.split()
            if not parts:
                continue
            if len(parts) != 3:
                raise FathomError(f"{path}:{lineno}: expected 3 fields, got {len(parts)}")
            glyph, _frequency, count = parts
            try:
                n = int(count)
            except ValueError as exc:
                raise FathomError(f"{path}:{lineno}: bad stroke count {count!r}") from exc
            if n == 0 or len(strokes) >= limit:
                break
            strokes[glyph] = n
    return strokes
