# tests/test_ordered_tree.py
# unit tests for OrderedTree: placement, lookup, shape and traversal

import random
import types

import pytest

from word_index.core.ordered_tree import OrderedTree


def by_length(a, b):
    return len(a) - len(b)


def test_empty_tree():
    t = OrderedTree()
    assert t.root() is None
    assert t.search(3) is None
    assert t.height() == 0
    assert t.node_count() == 0
    assert len(t) == 0
    assert list(t) == []
    assert t.is_empty()
    assert 3 not in t


def test_single_node_height_zero():
    t = OrderedTree()
    t.insert(10)
    assert t.root() == 10
    assert t.height() == 0
    assert t.node_count() == 1


def test_in_order_is_strictly_ascending():
    rnd = random.Random(7)
    values = [rnd.randint(0, 500) for _ in range(300)]
    t = OrderedTree()
    for v in values:
        t.insert(v)
    out = list(t)
    assert out == sorted(set(values))
    assert all(a < b for a, b in zip(out, out[1:]))


def test_search_after_insert_returns_equal_element():
    t = OrderedTree()
    for v in [5, 2, 8, 1, 9, 3]:
        t.insert(v)
        assert t.search(v) == v
    assert t.search(4) is None
    assert 8 in t


def test_duplicates_collapse_to_one_node():
    t = OrderedTree()
    for v in [4, 4, 2, 2, 2, 6, 4]:
        t.insert(v)
    assert t.node_count() == 3
    assert list(t) == [2, 4, 6]


def test_equal_insert_leaves_existing_element():
    t = OrderedTree(by_length)
    t.insert("cat")
    t.insert("dog")  # same length -> equal under this ordering
    assert t.node_count() == 1
    assert t.search("xyz") == "cat"


def test_custom_comparator_controls_order():
    t = OrderedTree(by_length)
    for w in ["ccc", "a", "bbbb", "dd"]:
        t.insert(w)
    assert list(t) == ["a", "dd", "ccc", "bbbb"]
    assert t.comparator() is by_length


def test_natural_ordering_has_no_comparator():
    assert OrderedTree().comparator() is None


def test_sorted_input_degenerates_to_chain():
    n = 2000
    t = OrderedTree()
    for v in range(n):
        t.insert(v)
    assert t.height() == n - 1
    assert t.node_count() == n
    assert t.root() == 0
    # deep chain still searchable and traversable
    assert t.search(n - 1) == n - 1
    assert list(t) == list(range(n))


def test_height_counts_edges():
    t = OrderedTree()
    for v in [4, 2, 6, 1]:
        t.insert(v)
    # 4 -> 2 -> 1 is the longest path
    assert t.height() == 2


def test_balanced_shape_height():
    t = OrderedTree()
    for v in [4, 2, 6, 1, 3, 5, 7]:
        t.insert(v)
    assert t.height() == 2
    assert t.node_count() == 7


def test_traversal_is_restartable_and_independent():
    t = OrderedTree()
    for v in [3, 1, 2, 5, 4]:
        t.insert(v)
    first = iter(t)
    second = t.in_order()
    assert next(first) == 1
    assert next(first) == 2
    assert list(second) == [1, 2, 3, 4, 5]
    assert list(first) == [3, 4, 5]
    assert list(t) == [1, 2, 3, 4, 5]


def test_traversal_is_lazy():
    t = OrderedTree()
    for v in [5, 3, 8, 1]:
        t.insert(v)
    it = iter(t)
    assert isinstance(it, types.GeneratorType)
    assert next(it) == 1


def test_upsert_inserts_then_merges():
    seen = []

    def merge(stored, new):
        seen.append((stored, new))

    t = OrderedTree(by_length)
    assert t.upsert("ab", merge) == "ab"
    assert seen == []
    assert t.upsert("cd", merge) == "ab"
    assert seen == [("ab", "cd")]
    assert t.node_count() == 1


@pytest.mark.parametrize("values", [[], [1], [2, 1], [1, 2, 3], [3, 2, 1]])
def test_count_matches_distinct(values):
    t = OrderedTree()
    for v in values:
        t.insert(v)
    assert t.node_count() == len(set(values))


def test_comparator_satisfies_ordering_policy():
    from word_index.core.protocols import OrderingPolicy

    t = OrderedTree(by_length)
    assert isinstance(t.comparator(), OrderingPolicy)
