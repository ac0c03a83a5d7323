# reporting.py
# Sorted views over an index tree.
# All queries drain the tree's in-order sequence into a list and sort it
# with a secondary comparator; the tree itself is never modified.

from __future__ import annotations
from functools import cmp_to_key
from itertools import takewhile
from typing import List, Optional

from .entry import Entry
from .ordered_tree import OrderedTree
from .ordering import ALPHA_FREQ, FREQUENCY
from .protocols import IndexSummary

Entries = List[Entry]


def _drain(tree: OrderedTree[Entry]) -> Entries:
    return list(tree)


def sort_by_alpha(tree: Optional[OrderedTree[Entry]]) -> Optional[Entries]:
    """
    Entries by text, ties broken by frequency (ascending).
    Text is unique in trees built from raw lines, but trees built from
    entry lists can carry the same text twice, hence the tie-break.
    """
    if tree is None:
        return None
    return sorted(_drain(tree), key=cmp_to_key(ALPHA_FREQ))


def sort_by_frequency(tree: Optional[OrderedTree[Entry]]) -> Optional[Entries]:
    """Entries by frequency, highest first. Stable: equal counts keep tree order."""
    if tree is None:
        return None
    return sorted(_drain(tree), key=cmp_to_key(FREQUENCY))


def _max_frequency(entries: Entries) -> int:
    best = 0
    for e in entries:
        if e.frequency > best:
            best = e.frequency
    return best


def get_highest_frequency(tree: Optional[OrderedTree[Entry]]) -> Optional[Entries]:
    """All entries sharing the top frequency, in frequency order."""
    if tree is None:
        return None
    by_freq = sort_by_frequency(tree)
    top = _max_frequency(by_freq)
    return list(takewhile(lambda e: e.frequency == top, by_freq))


def summarize(tree: Optional[OrderedTree[Entry]]) -> Optional[IndexSummary]:
    if tree is None:
        return None
    entries = _drain(tree)
    return IndexSummary(
        words=len(entries),
        occurrences=sum(e.frequency for e in entries),
        height=tree.height(),
        max_frequency=_max_frequency(entries),
    )
