"""Sentinel-based sentence splitter."""

from __future__ import annotations

import re

# A run of end punctuation closes a sentence only before whitespace or the
# end of text, and never after a common abbreviation.
_ENDS_RE = re.compile(
    r"(?<!\bMr)(?<!\bMrs)(?<!\bDr)(?<!\bMs)(?<!\bSt)(?<!\bJr)(?<!\bSr)"
    r"(?<!\bProf)(?<!\bGen)(?<!\bSgt)(?<!\bCpl)(?<!\bPvt)(?<!\bRev)"
    r"(?<!\bInc)(?<!\bLtd)(?<!\bCorp)(?<!\bvs)(?<!\betc)"
    r"[.!?]+"
    r"(?=\s|$)"
)
_SPACE_RE = re.compile(r"\s+")


def mark_sentence_ends(text: str, sentinel: str = "#") -> str:
    """Insert ``sentinel`` after each run of sentence-ending punctuation.

    Decimal points and abbreviations such as "Mr." are left alone.

    Whitespace is collapsed to single spaces. Text that is already marked
    should not be passed through again.
    """
    marked = _ENDS_RE.sub(lambda m: m.group() + sentinel, text)
    return _SPACE_RE.sub(" ", marked).strip()


def split_sentences(text: str | list[str], sentinel: str = "#") -> list[str]:
    """Split marked text into trimmed, non-empty sentences.

    A pre-split list is re-split element by element, so feeding the output
    back in is a no-op.
    """
    parts = text if isinstance(text, list) else [text]

    sentences: list[str] = []
    for part in parts:
        for piece in part.split(sentinel):
            s = piece.strip()
            if s:
                sentences.append(s)

    return sentences
