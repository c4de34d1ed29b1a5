"""Word list loading for the search tree demo."""

from __future__ import annotations

import logging
import os

from statictree.constants import SAMPLE_WORDS, WORDLIST_SEARCH_PATHS

log = logging.getLogger("statictree")


def read_words(path: str) -> list[str]:
    """Words from a UTF-8 file, one per line.

    Surrounding whitespace is stripped; blank lines and ``#`` comments are
    skipped.  Order and duplicates are kept as found.
    """
    words: list[str] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if word and not word.startswith("#"):
                words.append(word)
    return words


def load_words(path: str | None = None) -> list[str]:
    """Load the first word list found, or the built-in sample list."""
    search_paths: list[str] = []
    if path:
        if not os.path.exists(path):
            log.warning("Word list %s not found -- searching default locations.", path)
        search_paths.append(path)
    search_paths.extend(WORDLIST_SEARCH_PATHS)

    for candidate in search_paths:
        if os.path.exists(candidate):
            words = read_words(candidate)
            if words:
                log.info("Loaded %s words from %s", f"{len(words):,}", candidate)
                return words
            log.debug("Word list %s is empty, skipping.", candidate)

    log.warning("No word list found -- using built-in sample list.")
    return list(SAMPLE_WORDS)
