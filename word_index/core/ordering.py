# ordering.py
# Ordering policies for index trees and reports.
# Each policy is a small frozen value wrapping a cmp-style function, so it can
# be handed to OrderedTree directly or to functools.cmp_to_key for sorting.

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict

from .entry import Entry


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


@dataclass(frozen=True)
class Ordering:
    """
    name: lookup key used by config and CLI
    compare: cmp-style function over two entries
    fold_case: indexer lower-cases word text before insertion
    keyed_on_text: equal under this ordering means same word
    """
    name: str
    compare: Callable[[Entry, Entry], int]
    fold_case: bool = False
    keyed_on_text: bool = True

    def __call__(self, a: Entry, b: Entry) -> int:
        return self.compare(a, b)


def _natural(a: Entry, b: Entry) -> int:
    return _cmp(a.text, b.text)


def _ignore_case(a: Entry, b: Entry) -> int:
    return _cmp(a.text.lower(), b.text.lower())


def _frequency(a: Entry, b: Entry) -> int:
    # descending: higher counts first
    return b.frequency - a.frequency


def _alpha_freq(a: Entry, b: Entry) -> int:
    by_text = _cmp(a.text, b.text)
    if by_text == 0:
        return a.frequency - b.frequency
    return by_text


NATURAL = Ordering("natural", _natural)
IGNORE_CASE = Ordering("ignore-case", _ignore_case, fold_case=True)
FREQUENCY = Ordering("frequency", _frequency, keyed_on_text=False)
ALPHA_FREQ = Ordering("alpha-freq", _alpha_freq, keyed_on_text=False)

ORDERINGS: Dict[str, Ordering] = {
    o.name: o for o in (NATURAL, IGNORE_CASE, FREQUENCY, ALPHA_FREQ)
}


def get_ordering(name: str) -> Ordering:
    """Look up a policy by name, e.g. 'ignore-case'."""
    try:
        return ORDERINGS[name]
    except KeyError:
        known = ", ".join(sorted(ORDERINGS))
        raise KeyError(f"unknown ordering {name!r} (known: {known})") from None
