# indexer.py
# Builds word index trees from raw text lines, files or ready-made entries.

from __future__ import annotations
from typing import Iterable, List, Optional

from .entry import Entry
from .ordered_tree import OrderedTree
from .ordering import NATURAL
from .protocols import LineSource, OrderingPolicy
from ..context.line_source import read_lines
from ..context.tokenizer import tokenize

IndexTree = OrderedTree[Entry]


def _merge(stored: Entry, seen: Entry) -> None:
    # every occurrence counts, the line set dedups
    for line_no in seen.lines:
        stored.bump(line_no)


class Indexer:
    """
    Turns text into an OrderedTree of Entry.
    Each valid word becomes an Entry on first sighting; later sightings are
    folded into the stored Entry (frequency + 1, line added) through upsert.

    Orderings that are not keyed on word text (e.g. frequency) can't find a
    word's existing entry by comparison, so those builds aggregate under the
    natural ordering first and then re-key the finished entries.
    """

    def __init__(self, line_source: Optional[LineSource] = None) -> None:
        self.line_source = line_source or read_lines

    # raw lines -----------------------------------------------------------------
    def build_index(
        self, lines: Optional[Iterable[str]], ordering: Optional[OrderingPolicy] = None
    ) -> Optional[IndexTree]:
        """
        Index `lines` (line numbers start at 1).
        ordering=None keeps Entry's natural ordering (by text).
        Returns None when there are no lines at all.
        """
        if lines is None:
            return None
        lines = list(lines)
        if not lines:
            return None

        if ordering is not None and not getattr(ordering, "keyed_on_text", True):
            aggregated = self._aggregate(lines, NATURAL, fold_case=False)
            return self.build_index_from_entries(list(aggregated), ordering)

        fold_case = bool(getattr(ordering, "fold_case", False))
        return self._aggregate(lines, ordering, fold_case)

    def _aggregate(
        self, lines: List[str], ordering: Optional[OrderingPolicy], fold_case: bool
    ) -> IndexTree:
        tree: IndexTree = OrderedTree(ordering)
        for line_no, line in enumerate(lines, start=1):
            for word in tokenize(line):
                if fold_case:
                    word = word.lower()
                tree.upsert(Entry(word, 1, (line_no,)), _merge)
        return tree

    # pre-built entries ---------------------------------------------------------
    def build_index_from_entries(
        self, entries: Optional[Iterable[Entry]], ordering: Optional[OrderingPolicy] = None
    ) -> Optional[IndexTree]:
        """
        Insert entries as given, no tokenizing or aggregation.
        Entries equal under `ordering` to one already inserted are dropped.
        """
        if entries is None:
            return None
        entries = list(entries)
        if not entries:
            return None

        tree: IndexTree = OrderedTree(ordering)
        for entry in entries:
            tree.insert(entry)
        return tree

    # files ---------------------------------------------------------------------
    def build_index_from_file(
        self, path: str, ordering: Optional[OrderingPolicy] = None, encoding: str = "latin-1"
    ) -> Optional[IndexTree]:
        """Read `path` via the line source and index it; None if the file is missing or empty."""
        lines = self.line_source(path, encoding=encoding)
        if lines is None:
            return None
        return self.build_index(lines, ordering)


# module-level shortcuts ----------------------------------------------------------
_default = Indexer()


def build_index(lines, ordering=None):
    return _default.build_index(lines, ordering)


def build_index_from_entries(entries, ordering=None):
    return _default.build_index_from_entries(entries, ordering)


def build_index_from_file(path, ordering=None, encoding="latin-1"):
    return _default.build_index_from_file(path, ordering, encoding)
