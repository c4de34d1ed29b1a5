#!/usr/bin/env python3
"""
Static Search

Builds a precomputed prefix search tree from a word list and answers
prefix queries by direct lookup. Runs the demonstration searches by
default, or an interactive prompt with --interactive.
"""

from __future__ import annotations

import argparse
import logging
import sys

from statictree import ResourceExhausted, StaticSearchTree
from statictree.cli import benchmark, print_tree, run_demo, run_interactive
from statictree.constants import (
    DEFAULT_LIMIT,
    DEFAULT_STRATEGY,
    DEFAULT_WORKERS,
    DEMO_QUERIES,
    STRATEGIES,
)
from statictree.wordlist import load_words


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("statictree")


# Entry point

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Static Search -- precomputed prefix search over a word list",
    )
    parser.add_argument("--words", type=str, default=None,
                        help="Path to word list file (one word per line)")
    parser.add_argument("--strategy", choices=STRATEGIES, default=DEFAULT_STRATEGY,
                        help="Prefix matching strategy used while building")
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS,
                        help="Threads used to build the tree")
    parser.add_argument("--max-entries", type=int, default=None,
                        help="Refuse to build more than this many prefixes")
    parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT,
                        help="Result cap for limited searches")
    parser.add_argument("--interactive", "-i", action="store_true",
                        help="Prompt for queries instead of running the demo")
    parser.add_argument("--benchmark", type=int, default=0, metavar="N",
                        help="Time N passes over the demo queries")
    parser.add_argument("--print-tree", action="store_true",
                        help="Print every prefix and its matches")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.limit < 0:
        parser.error("--limit must be non-negative")
    if args.workers < 1:
        parser.error("--workers must be at least 1")

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    print("STATIC SEARCH -- Prefix Search Tree")

    words = load_words(args.words)
    try:
        tree = StaticSearchTree(
            words,
            strategy=args.strategy,
            workers=args.workers,
            max_entries=args.max_entries,
        )
    except ResourceExhausted as exc:
        log.error("Could not build search tree: %s", exc)
        return 1

    if args.print_tree:
        print_tree(tree)
    if args.interactive:
        run_interactive(tree, args.limit)
    else:
        run_demo(tree, limit=args.limit)

    if args.benchmark:
        avg = benchmark(tree, DEMO_QUERIES, args.benchmark)
        print(f"\n--- Performance Test ({args.benchmark} iterations) ---")
        for query in DEMO_QUERIES:
            print(f"Query '{query}': {len(tree.search(query))} results")
        print(f"Average search latency: {avg * 1e6:.2f} us")
    return 0


if __name__ == "__main__":
    sys.exit(main())
