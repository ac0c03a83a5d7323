# word_index/core/protocols.py
"""
Protocol interfaces for the pieces the index core depends on.

The tree only needs "something that compares two elements", and the file
entry point only needs "something that yields lines". Depending on these
Protocols keeps the core testable with plain lists and lambdas.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, TypeVar, runtime_checkable
from typing_extensions import TypedDict

T_contra = TypeVar("T_contra", contravariant=True)


# Typed structures --------------------------------------------------------------

class IndexSummary(TypedDict):
    """
    Shape of Reporting.summarize() output.

    Example:
      {"words": 120, "occurrences": 431, "height": 14, "max_frequency": 37}
    """
    words: int
    occurrences: int
    height: int
    max_frequency: int


# Protocols -----------------------------------------------------------------------

@runtime_checkable
class OrderingPolicy(Protocol[T_contra]):
    """
    A total order over elements, fixed for the lifetime of a tree.
    Only __call__ is required. The index pipeline additionally reads the
    optional attributes `fold_case` and `keyed_on_text` when present.
    """

    def __call__(self, a: T_contra, b: T_contra) -> int:
        ...


class LineSource(Protocol):
    """Anything that can hand back a file's lines, or None when there is nothing to read."""

    def __call__(self, path: str, encoding: str = ...) -> Optional[List[str]]:
        ...
