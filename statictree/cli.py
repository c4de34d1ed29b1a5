"""CLI / terminal mode for the static search tree."""

from __future__ import annotations

import time
from typing import Iterable, Sequence

from statictree.constants import (
    DEFAULT_LIMIT,
    DEMO_CASE_QUERIES,
    DEMO_QUERIES,
    DEMO_SAMPLE_PREFIXES,
)
from statictree.tree import StaticSearchTree


def format_entry(prefix: str, words: Sequence[str]) -> str:
    return f"'{prefix}' -> [{' '.join(words)}]"


def print_tree(tree: StaticSearchTree, prefixes: Iterable[str] | None = None) -> None:
    """Print ``'prefix' -> [words]`` lines, for every prefix or just *prefixes*."""
    if prefixes is None:
        for prefix, words in tree.entries():
            print(format_entry(prefix, words))
        return
    for prefix in prefixes:
        if prefix in tree:
            print(format_entry(prefix, tree.search(prefix)))


def run_demo(
    tree: StaticSearchTree,
    queries: Sequence[str] = DEMO_QUERIES,
    limit: int = DEFAULT_LIMIT,
) -> None:
    """Print the standard demonstration searches."""
    print(f"Tree built with {tree.size()} prefixes\n")

    for query in queries:
        print(f"Search '{query}': [{' '.join(tree.search(query))}]")

    print(f"\n--- Limited Results (max {limit}) ---")
    for query in queries:
        results = tree.search_with_limit(query, limit)
        print(f"Search '{query}' (limit {limit}): [{' '.join(results)}]")

    print("\n--- Case Insensitive Search ---")
    for query in DEMO_CASE_QUERIES:
        print(f"Search '{query}': [{' '.join(tree.search(query))}]")

    print("\n--- Sample Tree Structure ---")
    print_tree(tree, DEMO_SAMPLE_PREFIXES)


def benchmark(tree: StaticSearchTree, queries: Iterable[str], iterations: int = 1000) -> float:
    """Average seconds per search over *iterations* passes of *queries*.

    Returns ``0.0`` when there is nothing to time.
    """
    query_list = list(queries)
    if not query_list or iterations <= 0:
        return 0.0

    t0 = time.perf_counter()
    for _ in range(iterations):
        for query in query_list:
            tree.search(query)
    elapsed = time.perf_counter() - t0
    return elapsed / (iterations * len(query_list))


def run_interactive(tree: StaticSearchTree, limit: int = DEFAULT_LIMIT) -> None:
    """Prompt for queries until ``quit`` or end of input."""
    print("\n" + "=" * 60)
    print("  STATIC SEARCH TREE -- Interactive Search")
    print("=" * 60)
    print()
    print("Commands:")
    print("  TEXT          -- search for words starting with TEXT")
    print("  :limit N      -- show at most N results (0 = all)")
    print("  :size         -- number of stored prefixes")
    print("  :prefixes     -- list every stored prefix")
    print("  :tree         -- print the whole tree")
    print("  quit          -- leave")
    print()

    while True:
        try:
            inp = input("  search> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        cmd = inp.lower()
        if cmd in ("quit", "exit"):
            break
        if cmd == ":size":
            print(f"  {tree.size()} prefixes")
            continue
        if cmd == ":prefixes":
            print("  " + " ".join(tree.all_prefixes()))
            continue
        if cmd == ":tree":
            print_tree(tree)
            continue
        if cmd.startswith(":limit"):
            parts = inp.split()
            try:
                new_limit = int(parts[1])
                if new_limit < 0:
                    raise ValueError(new_limit)
            except (IndexError, ValueError):
                print("  Usage: :limit N   (N >= 0)")
                continue
            limit = new_limit
            print(f"  Limit set to {limit or 'unlimited'}")
            continue

        if limit:
            results = tree.search_with_limit(inp, limit)
        else:
            results = tree.search(inp)
        total = len(tree.search(inp))
        if not results:
            print("  No matches.")
        else:
            more = f"  (+{total - len(results)} more)" if total > len(results) else ""
            print(f"  {', '.join(results)}{more}")
