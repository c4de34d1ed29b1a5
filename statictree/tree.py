"""Precomputed prefix search tree with constant-time lookups."""

from __future__ import annotations

import logging
import time
from typing import Iterable, Iterator

from statictree.builder import build_entries
from statictree.folding import fold

log = logging.getLogger("statictree")


class StaticSearchTree:
    """Read-only mapping from every folded prefix to the words it starts.

    The tree is built once from a snapshot of words and never changes
    afterwards.  Every query returns a fresh list, so callers can mutate
    results freely and concurrent readers need no locking.
    """

    __slots__ = ("_entries", "_word_count")

    def __init__(self, words: Iterable[str] = (), **options):
        words = list(words)
        t0 = time.perf_counter()
        self._entries: dict[str, tuple[str, ...]] = build_entries(words, **options)
        self._word_count = len({w for w in words if w})
        log.info(
            "Built search tree with %s prefixes from %s words in %.3fs",
            f"{len(self._entries):,}", f"{self._word_count:,}", time.perf_counter() - t0,
        )

    # queries

    def search(self, query: str) -> list[str]:
        """Words starting with *query* (case-insensitive), ascending.

        The empty query matches nothing.
        """
        if not isinstance(query, str):
            raise TypeError(f"query must be a string, got {type(query).__name__}")
        matches = self._entries.get(fold(query))
        if matches is None:
            return []
        return list(matches)

    def search_with_limit(self, query: str, limit: int) -> list[str]:
        """At most *limit* results of :meth:`search`, in the same order."""
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise TypeError(f"limit must be an integer, got {type(limit).__name__}")
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        return self.search(query)[:limit]

    def all_prefixes(self) -> list[str]:
        """Every stored prefix, ascending."""
        return sorted(self._entries)

    def size(self) -> int:
        """Number of distinct stored prefixes."""
        return len(self._entries)

    def entries(self) -> Iterator[tuple[str, list[str]]]:
        """Yield ``(prefix, words)`` pairs in ascending prefix order."""
        for prefix in sorted(self._entries):
            yield prefix, list(self._entries[prefix])

    @property
    def word_count(self) -> int:
        """Number of distinct input words."""
        return self._word_count

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, prefix: object) -> bool:
        return isinstance(prefix, str) and fold(prefix) in self._entries

    def __repr__(self) -> str:
        return f"StaticSearchTree(prefixes={len(self._entries)}, words={self._word_count})"


def build_tree(words: Iterable[str], **options) -> StaticSearchTree:
    """Build a :class:`StaticSearchTree`; see :func:`build_entries` for options."""
    return StaticSearchTree(words, **options)
