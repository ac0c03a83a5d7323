# entry.py
# Per-word record stored in the index tree.
# Holds the word text, how many times it was seen and on which lines.

from __future__ import annotations
from functools import total_ordering
from typing import Iterable, List, Optional, Set


@total_ordering
class Entry:
    """
    A single word in the index.
    text: the word (lower-cased only when indexed with a case-folding ordering)
    frequency: every occurrence counts, even repeats on the same line
    lines: line numbers the word appears on, deduplicated
    Natural ordering compares text only, frequency plays no part.
    """

    __slots__ = ("text", "frequency", "lines")

    def __init__(
        self, text: str, frequency: int = 1, lines: Optional[Iterable[int]] = None
    ) -> None:
        self.text = text
        self.frequency = frequency
        self.lines: Set[int] = set(lines) if lines else set()

    # mutation ------------------------------------------------------------
    def add_line(self, line_no: int) -> None:
        self.lines.add(line_no)

    def bump(self, line_no: int) -> None:
        """Count one more occurrence, seen on `line_no`."""
        self.frequency += 1
        self.lines.add(line_no)

    def sorted_lines(self) -> List[int]:
        return sorted(self.lines)

    # natural ordering ----------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.text == other.text

    def __lt__(self, other: "Entry") -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.text < other.text

    # mutable record, keep it out of sets/dicts
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Entry({self.text!r}, frequency={self.frequency}, lines={self.sorted_lines()})"

    def __str__(self) -> str:
        return f"{self.text} {self.frequency} {self.sorted_lines()}"
