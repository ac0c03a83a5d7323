# tests/test_ordering.py
from functools import cmp_to_key

import pytest

from word_index.core.entry import Entry
from word_index.core.ordering import (
    ALPHA_FREQ,
    FREQUENCY,
    IGNORE_CASE,
    NATURAL,
    get_ordering,
)
from word_index.core.protocols import OrderingPolicy


def test_natural_is_case_sensitive():
    assert NATURAL(Entry("B"), Entry("a")) < 0
    assert NATURAL(Entry("a"), Entry("a")) == 0


def test_ignore_case_compares_lowered_text():
    assert IGNORE_CASE(Entry("Cat"), Entry("cAT")) == 0
    assert IGNORE_CASE(Entry("apple"), Entry("Banana")) < 0
    assert IGNORE_CASE.fold_case


def test_frequency_is_descending():
    hi, lo = Entry("x", 5), Entry("y", 2)
    assert FREQUENCY(hi, lo) < 0
    assert FREQUENCY(lo, hi) > 0
    assert not FREQUENCY.keyed_on_text


def test_alpha_freq_breaks_text_ties_by_frequency():
    words = [Entry("b", 1), Entry("a", 4), Entry("a", 2)]
    out = sorted(words, key=cmp_to_key(ALPHA_FREQ))
    assert [(e.text, e.frequency) for e in out] == [("a", 2), ("a", 4), ("b", 1)]


def test_get_ordering_by_name():
    assert get_ordering("natural") is NATURAL
    assert get_ordering("ignore-case") is IGNORE_CASE
    assert get_ordering("frequency") is FREQUENCY


def test_get_ordering_unknown_name():
    with pytest.raises(KeyError, match="unknown ordering"):
        get_ordering("reverse")


def test_policies_satisfy_protocol():
    assert isinstance(NATURAL, OrderingPolicy)
    assert isinstance(lambda a, b: 0, OrderingPolicy)
