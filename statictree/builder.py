"""Index construction: prefix enumeration, match discovery and merging.

Every prefix of every word becomes a key, and each key is mapped to the
words whose folded form starts with it.  Two matchers produce the same
output:

  * ``brute``  -- scan the whole word list for every prefix, O(P x N).
  * ``bisect`` -- sort the folded words once and cut the contiguous range
    sharing the prefix with two binary searches, O(P x log N).

Building can be spread over a thread pool.  Workers take disjoint slices of
the word list, so the same prefix may come back from several workers; the
partial results are combined with :func:`merge_deduplicate`.
"""

from __future__ import annotations

import logging
from bisect import bisect_left, bisect_right
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Sequence

from statictree.constants import (
    DEFAULT_STRATEGY,
    DEFAULT_WORKERS,
    STRATEGIES,
    STRATEGY_BISECT,
)
from statictree.errors import ResourceExhausted
from statictree.folding import fold, prefixes_of

logger = logging.getLogger("statictree.build")


class BruteForceMatcher:
    """Finds matches by testing every word against the prefix."""

    __slots__ = ("words", "folded")

    def __init__(self, words: Sequence[str]):
        self.words = list(words)
        self.folded = [fold(w) for w in self.words]

    def matches(self, prefix: str) -> list[str]:
        return [w for w, f in zip(self.words, self.folded) if f.startswith(prefix)]


class BisectMatcher:
    """Finds matches as a slice of the words sorted by folded form."""

    __slots__ = ("words", "folded")

    def __init__(self, words: Sequence[str]):
        ordered = sorted((fold(w), w) for w in words)
        self.folded = [f for f, _w in ordered]
        self.words = [w for _f, w in ordered]

    def matches(self, prefix: str) -> list[str]:
        n = len(prefix)
        lo = bisect_left(self.folded, prefix)
        # Truncation preserves sort order, so the words sharing the prefix
        # end where the truncated form first exceeds it.
        hi = bisect_right(self.folded, prefix, lo=lo, key=lambda f: f[:n])
        return self.words[lo:hi]


def make_matcher(strategy: str, words: Sequence[str]) -> BruteForceMatcher | BisectMatcher:
    if strategy not in STRATEGIES:
        raise ValueError(
            f"unknown strategy {strategy!r}; expected one of {', '.join(STRATEGIES)}"
        )
    if strategy == STRATEGY_BISECT:
        return BisectMatcher(words)
    return BruteForceMatcher(words)


def merge_deduplicate(first: Iterable[str], second: Iterable[str]) -> list[str]:
    """Union of two word sequences, first occurrence wins, no repeats."""
    seen: set[str] = set()
    merged: list[str] = []
    for seq in (first, second):
        for word in seq:
            if word not in seen:
                seen.add(word)
                merged.append(word)
    return merged


def unique_words(words: Iterable[str]) -> list[str]:
    """Distinct input words in ascending (case-sensitive) order.

    Raises ``TypeError`` for anything that is not a ``str``.
    """
    distinct: set[str] = set()
    for word in words:
        if not isinstance(word, str):
            raise TypeError(f"words must be strings, got {type(word).__name__}")
        distinct.add(word)
    return sorted(distinct)


def count_prefixes(words: Iterable[str]) -> int:
    """Number of distinct folded prefixes across *words*."""
    keys: set[str] = set()
    for word in words:
        keys.update(prefixes_of(word))
    return len(keys)


def _match_slice(
    matcher: BruteForceMatcher | BisectMatcher,
    words: Sequence[str],
    max_references: int | None,
) -> dict[str, list[str]]:
    """Match every prefix of the given slice of words."""
    partial: dict[str, list[str]] = {}
    references = 0
    for word in words:
        for key in prefixes_of(word):
            if key in partial:
                # Already matched against the full list in this slice.
                continue
            found = matcher.matches(key)
            references += len(found)
            if max_references is not None and references > max_references:
                raise ResourceExhausted("max_references", max_references, references)
            partial[key] = found
    return partial


def _split(words: Sequence[str], parts: int) -> list[Sequence[str]]:
    size = -(-len(words) // parts)
    return [words[i:i + size] for i in range(0, len(words), size)]


def build_entries(
    words: Iterable[str],
    *,
    strategy: str = DEFAULT_STRATEGY,
    workers: int = DEFAULT_WORKERS,
    max_entries: int | None = None,
    max_references: int | None = None,
) -> dict[str, tuple[str, ...]]:
    """Build the prefix -> matching words mapping.

    Parameters
    ----------
    words : Iterable[str]
        Input words.  Duplicates collapse; case is kept in the values and
        ignored in the keys.
    strategy : str
        ``"bisect"`` (default) or ``"brute"``.  Output is identical.
    workers : int
        Threads used for matching.  ``1`` matches in the calling thread.
    max_entries : int | None
        Upper bound on the number of distinct prefixes.
    max_references : int | None
        Upper bound on the total number of words stored across entries.

    Returns
    -------
    dict[str, tuple[str, ...]]
        Each value is sorted ascending by the original strings.

    Raises
    ------
    ResourceExhausted
        When either budget would be exceeded.
    """
    if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
        raise ValueError(f"workers must be a positive integer, got {workers!r}")
    word_list = unique_words(words)
    matcher = make_matcher(strategy, word_list)

    if max_entries is not None:
        n_keys = count_prefixes(word_list)
        if n_keys > max_entries:
            raise ResourceExhausted("max_entries", max_entries, n_keys)

    workers = max(1, min(workers, len(word_list)))
    logger.debug(
        "Matching prefixes of %s words (strategy=%s, workers=%d)",
        f"{len(word_list):,}", strategy, workers,
    )

    if workers == 1:
        partials = [_match_slice(matcher, word_list, max_references)]
    else:
        slices = _split(word_list, workers)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="statictree") as pool:
            futures = [
                pool.submit(_match_slice, matcher, chunk, max_references)
                for chunk in slices
            ]
            partials = [f.result() for f in futures]

    entries: dict[str, list[str]] = {}
    references = 0
    for partial in partials:
        for key, found in partial.items():
            existing = entries.get(key)
            if existing is None:
                merged = list(found)
            else:
                merged = merge_deduplicate(existing, found)
                references -= len(existing)
            references += len(merged)
            if max_references is not None and references > max_references:
                raise ResourceExhausted("max_references", max_references, references)
            entries[key] = merged

    return {key: tuple(sorted(found)) for key, found in entries.items()}
