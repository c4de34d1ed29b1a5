"""Defaults shared by the builder, the word-list loader and the demo driver."""

from __future__ import annotations

import os

# Matching strategies understood by the builder
STRATEGY_BISECT = "bisect"
STRATEGY_BRUTE = "brute"
STRATEGIES = (STRATEGY_BISECT, STRATEGY_BRUTE)
DEFAULT_STRATEGY = STRATEGY_BISECT

DEFAULT_WORKERS = 1
DEFAULT_LIMIT = 3

# Word list files tried in order when no explicit path is given
WORDLIST_SEARCH_PATHS = (
    "words.txt",
    "wordlist.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
)

SAMPLE_WORDS = (
    "apple", "application", "apply", "apricot",
    "banana", "band", "bandana", "bank",
    "cat", "car", "card", "care", "careful",
    "dog", "door", "double",
    "elephant", "eleven", "elevator",
)

DEMO_QUERIES = ("app", "ban", "car", "el", "z", "do")
DEMO_CASE_QUERIES = ("APP", "Car", "EL")
DEMO_SAMPLE_PREFIXES = ("a", "ap", "app", "car", "el")
