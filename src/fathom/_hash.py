"""FNV-1a 64-bit hashing and key naming for downstream graph handles."""

from __future__ import annotations

import re

FNV1A_OFFSET: int = 14695981039346656037
FNV1A_PRIME: int = 1099511628211
_MASK64: int = 0xFFFFFFFFFFFFFFFF

_MAX_KEY_CHARS = 40
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")


def fnv1a_u64(s: str) -> int:
    """Compute FNV-1a 64-bit hash of a string (UTF-8 bytes)."""
    h = FNV1A_OFFSET
    for byte in s.encode("utf-8"):
        h ^= byte
        h = (h * FNV1A_PRIME) & _MASK64
    return h


def fragment_key(s: str) -> str:
    """Stable opaque handle for a fragment or sentence."""
    return f"key_{fnv1a_u64(s)}"


def key_name(s: str, n: int = 0) -> str:
    """Readable lowercase key: first 40 chars, non-alphanumerics as '-'."""
    s = s.strip()[:_MAX_KEY_CHARS]
    s = "".join(c if c.isprintable() else "x" for c in s)
    key = _NON_ALNUM_RE.sub("-", s)
    if n > 0:
        key = f"{key}_{n}"
    return key.lower()
