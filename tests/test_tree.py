"""Tests for the query surface of the static search tree."""

from __future__ import annotations

import itertools
import random

import pytest

from statictree import StaticSearchTree, build_tree
from statictree.folding import fold


MIXED_WORDS = [
    "apple", "Apple", "APPLE", "app", "application", "apply", "approach",
    "banana", "band", "bandana", "bank", "Ban",
    "car", "card", "care", "careful", "cat",
    "naïve", "Naïveté", "ΟΔΟΣ", "İstanbul", "straße",
    "new york", "o'clock", "e-mail", "123go",
]


def test_prefix_scenario_counts_every_prefix() -> None:
    tree = StaticSearchTree(["apple", "app", "application"])

    assert tree.search("app") == ["app", "apple", "application"]
    assert tree.all_prefixes() == [
        "a", "ap", "app", "appl", "apple", "appli", "applic", "applica",
        "applicat", "applicati", "applicatio", "application",
    ]
    assert tree.size() == 12
    assert len(tree) == 12


def test_single_word_has_one_entry_per_character() -> None:
    tree = StaticSearchTree(["hello"])

    assert tree.size() == 5
    for query in ("h", "he", "hel", "hell", "hello"):
        assert tree.search(query) == ["hello"]
    assert tree.search("hellos") == []


def test_empty_word_list() -> None:
    tree = StaticSearchTree([])

    assert tree.size() == 0
    assert tree.search("anything") == []
    assert tree.all_prefixes() == []
    assert list(tree.entries()) == []


def test_duplicates_collapse() -> None:
    tree = StaticSearchTree(["apple", "apple", "apple"])

    assert tree.search("app") == ["apple"]
    assert tree.size() == 5
    assert tree.word_count == 1


def test_search_with_limit_is_prefix_of_larger_limit() -> None:
    tree = StaticSearchTree(["app", "apple", "application", "apply", "approach"])

    two = tree.search_with_limit("app", 2)
    ten = tree.search_with_limit("app", 10)

    assert len(two) == 2
    assert len(ten) == 5
    assert ten[:2] == two
    assert tree.search_with_limit("app", 0) == []
    assert tree.search_with_limit("xyz", 5) == []


def test_case_insensitive_keys_keep_original_case() -> None:
    tree = StaticSearchTree(["Apple", "BANANA", "CaR"])

    assert tree.search("APP") == ["Apple"]
    assert tree.search("ApP") == ["Apple"]
    assert tree.search("ban") == ["BANANA"]
    assert tree.search("Ca") == ["CaR"]


def test_case_variants_coexist_in_one_entry() -> None:
    tree = StaticSearchTree(["apple", "Apple", "APPLE"])

    assert tree.search("apple") == ["APPLE", "Apple", "apple"]
    assert tree.size() == 5


def test_empty_query_matches_nothing() -> None:
    tree = StaticSearchTree(MIXED_WORDS)

    assert tree.search("") == []
    assert tree.search_with_limit("", 10) == []
    assert "" not in tree


def test_results_are_copies() -> None:
    tree = StaticSearchTree(["app", "apple", "apply"])

    first = tree.search("app")
    first.append("intruder")
    first.remove("app")
    assert tree.search("app") == ["app", "apple", "apply"]

    limited = tree.search_with_limit("app", 2)
    limited[0] = "changed"
    assert tree.search_with_limit("app", 2) == ["app", "apple"]

    prefixes = tree.all_prefixes()
    prefixes.clear()
    assert tree.size() == len(tree.all_prefixes()) == 6

    for _prefix, words in tree.entries():
        words.clear()
    assert tree.search("a") == ["app", "apple", "apply"]


def test_every_prefix_of_every_word_finds_it() -> None:
    tree = StaticSearchTree(MIXED_WORDS)

    for word in set(MIXED_WORDS):
        for k in range(1, len(word) + 1):
            assert word in tree.search(word[:k]), (word, k)
            assert tree.search(word[:k]).count(word) == 1


def test_entries_are_sorted_and_unique() -> None:
    tree = StaticSearchTree(MIXED_WORDS + MIXED_WORDS[:5])

    for prefix, words in tree.entries():
        assert words == sorted(set(words)), prefix
        assert all(fold(w).startswith(prefix) for w in words)


def test_query_case_does_not_change_results() -> None:
    tree = StaticSearchTree(MIXED_WORDS)

    for query in ("app", "BAN", "Car", "naï", "e-M", "new Y"):
        assert tree.search(query) == tree.search(query.upper()) == tree.search(query.lower())


def test_greek_final_sigma_word_is_complete() -> None:
    tree = StaticSearchTree(["ΟΔΟΣ"])

    assert tree.search("ΟΔΟΣ") == ["ΟΔΟΣ"]
    assert tree.search("οδ") == ["ΟΔΟΣ"]
    assert tree.size() == 4


def test_queries_fold_sharp_s_and_final_sigma() -> None:
    tree = StaticSearchTree(["straße"])

    assert tree.search("straß") == ["straße"]
    assert tree.search("STRASS") == ["straße"]
    assert tree.search("straß".upper()) == tree.search("straß")

    greek = StaticSearchTree(["ΟΔΟΣ", "οδος"])

    assert greek.search("οδος") == ["ΟΔΟΣ", "οδος"]
    assert greek.search("οδος".upper()) == greek.search("οδος")
    assert greek.search("ΟΔΟΣ") == greek.search("οδοσ")


def test_word_count_ignores_empty_words() -> None:
    tree = StaticSearchTree(["", "a", "a"])

    assert tree.word_count == 1
    assert repr(tree) == "StaticSearchTree(prefixes=1, words=1)"


def test_size_counts_distinct_prefixes() -> None:
    cases = [
        ([], 0),
        (["a"], 1),
        (["ab"], 2),
        (["abc"], 3),
        (["a", "ab"], 2),
        (["cat", "car"], 4),
        (["hi", "hello"], 6),
    ]
    for words, expected in cases:
        assert StaticSearchTree(words).size() == expected, words


def test_build_is_independent_of_input_order() -> None:
    rng = random.Random(7)
    shuffled = MIXED_WORDS * 2
    rng.shuffle(shuffled)

    a = StaticSearchTree(MIXED_WORDS)
    b = StaticSearchTree(shuffled)

    assert a.all_prefixes() == b.all_prefixes()
    assert list(a.entries()) == list(b.entries())


def test_strategies_and_workers_agree() -> None:
    reference = list(StaticSearchTree(MIXED_WORDS, strategy="brute").entries())

    for strategy, workers in itertools.product(("brute", "bisect"), (1, 2, 5)):
        tree = build_tree(MIXED_WORDS, strategy=strategy, workers=workers)
        assert list(tree.entries()) == reference, (strategy, workers)


def test_contains_and_repr() -> None:
    tree = StaticSearchTree(["Hello", "help"])

    assert "HEL" in tree
    assert "hello" in tree
    assert "helm" not in tree
    assert 42 not in tree
    assert repr(tree) == "StaticSearchTree(prefixes=6, words=2)"


def test_query_validation() -> None:
    tree = StaticSearchTree(["alpha"])

    with pytest.raises(TypeError):
        tree.search(None)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        tree.search_with_limit("a", -1)
    with pytest.raises(TypeError):
        tree.search_with_limit("a", 1.5)  # type: ignore[arg-type]
