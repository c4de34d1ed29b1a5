"""Static Search Tree -- precomputed prefix search."""

from statictree.builder import build_entries, merge_deduplicate
from statictree.errors import ResourceExhausted, StaticTreeError
from statictree.folding import fold, prefixes_of
from statictree.tree import StaticSearchTree, build_tree
from statictree.wordlist import load_words

__all__ = [
    "ResourceExhausted",
    "StaticSearchTree",
    "StaticTreeError",
    "build_entries",
    "build_tree",
    "fold",
    "load_words",
    "merge_deduplicate",
    "prefixes_of",
]
