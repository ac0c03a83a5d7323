"""
word_index.core

The indexing engine.
Contains:
 - the per-word record (Entry)
 - an unbalanced binary search tree with pluggable ordering (OrderedTree)
 - ordering policies (natural, ignore-case, frequency, alpha-freq)
 - the Indexer that folds words from text into a tree
 - reporting queries over a built tree
"""

from .entry import Entry
from .ordered_tree import OrderedTree
from .ordering import (
    ALPHA_FREQ,
    FREQUENCY,
    IGNORE_CASE,
    NATURAL,
    ORDERINGS,
    Ordering,
    get_ordering,
)
from .indexer import Indexer, build_index, build_index_from_entries, build_index_from_file
from .reporting import get_highest_frequency, sort_by_alpha, sort_by_frequency, summarize

__all__ = [
    "Entry",
    "OrderedTree",
    "Ordering",
    "NATURAL",
    "IGNORE_CASE",
    "FREQUENCY",
    "ALPHA_FREQ",
    "ORDERINGS",
    "get_ordering",
    "Indexer",
    "build_index",
    "build_index_from_entries",
    "build_index_from_file",
    "sort_by_alpha",
    "sort_by_frequency",
    "get_highest_frequency",
    "summarize",
]
