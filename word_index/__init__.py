"""
word_index

Builds a word-occurrence index over a text file: every ASCII word with its
frequency and the lines it appears on, kept in a binary search tree ordered
by a selectable policy.
"""

from .core import (
    Entry,
    Indexer,
    OrderedTree,
    build_index,
    build_index_from_entries,
    build_index_from_file,
    get_highest_frequency,
    get_ordering,
    sort_by_alpha,
    sort_by_frequency,
)

__all__ = [
    "Entry",
    "Indexer",
    "OrderedTree",
    "build_index",
    "build_index_from_entries",
    "build_index_from_file",
    "get_highest_frequency",
    "get_ordering",
    "sort_by_alpha",
    "sort_by_frequency",
]

__version__ = "0.1.0"
