"""Case folding and prefix enumeration."""

from __future__ import annotations

from typing import Iterator


def fold(text: str) -> str:
    """Case-fold *text* one character at a time.

    Whole-string folding is context sensitive for a few scripts (Greek
    capital sigma becomes a final sigma at the end of a word), which would
    make ``fold(word[:k])`` disagree with ``fold(word)``.  Folding per
    character keeps ``fold(a + b) == fold(a) + fold(b)``.  ``casefold`` maps
    ``ß`` to ``ss`` and ``ς`` to ``σ``, so upper- and lower-cased queries
    land on the same key.
    """
    if text.isascii():
        return text.lower()
    return "".join(ch.casefold() for ch in text)


def prefixes_of(word: str) -> Iterator[str]:
    """Yield the folded prefix keys of *word*, shortest first."""
    folded = ""
    for ch in word:
        folded += fold(ch)
        yield folded
