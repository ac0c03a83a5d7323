# ordered_tree.py
# Unbalanced binary search tree with a pluggable ordering.
# - Ordering is a cmp-style function captured at construction; None means natural order (<).
# - Equal keys never create a second node: insert is a no-op, upsert merges into the stored element.
# - No rebalancing, shape depends only on insertion order (sorted input gives a chain).
# Descent, height and counting use loops/explicit stacks (no recursion) so a degenerate
# chain of any length is safe. In-order traversal is a lazy generator over the left spine.

from __future__ import annotations
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

from .protocols import OrderingPolicy

T = TypeVar("T")


class OrderedTree(Generic[T]):
    """Binary search tree whose placement is decided by an injected comparator."""

    class Node:
        __slots__ = ("data", "left", "right")

        def __init__(self, data) -> None:
            self.data = data
            self.left: Optional[OrderedTree.Node] = None
            self.right: Optional[OrderedTree.Node] = None

    def __init__(self, comparator: Optional[OrderingPolicy] = None) -> None:
        self._comparator = comparator
        self._root: Optional[OrderedTree.Node] = None

    def _compare(self, a: T, b: T) -> int:
        if self._comparator is not None:
            return self._comparator(a, b)
        return (a > b) - (a < b)

    # introspection -------------------------------------------------------------
    def comparator(self) -> Optional[OrderingPolicy]:
        """The ordering in effect, None when natural ordering is used."""
        return self._comparator

    def root(self) -> Optional[T]:
        if self._root is None:
            return None
        return self._root.data

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        """
        Edges on the longest root-to-leaf path.
        0 for an empty tree and for a single node.
        """
        if self._root is None:
            return 0
        best = 0
        stack = [(self._root, 0)]
        while stack:
            node, depth = stack.pop()
            if depth > best:
                best = depth
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best

    def node_count(self) -> int:
        if self._root is None:
            return 0
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return count

    def __len__(self) -> int:
        return self.node_count()

    # search --------------------------------------------------------------------
    def _find(self, key: T) -> Optional["OrderedTree.Node"]:
        node = self._root
        while node is not None:
            c = self._compare(node.data, key)
            if c == 0:
                return node
            node = node.left if c > 0 else node.right
        return None

    def search(self, key: T) -> Optional[T]:
        """Return the stored element equal to `key` under the ordering, or None."""
        node = self._find(key)
        return node.data if node is not None else None

    def __contains__(self, key: T) -> bool:
        return self._find(key) is not None

    # insertion -----------------------------------------------------------------
    def insert(self, value: T) -> None:
        """
        Attach `value` as a new leaf.
        If an equal element is already stored the tree is left untouched.
        """
        if self._root is None:
            self._root = OrderedTree.Node(value)
            return

        node = self._root
        while True:
            c = self._compare(node.data, value)
            if c == 0:
                return
            if c > 0:
                if node.left is None:
                    node.left = OrderedTree.Node(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = OrderedTree.Node(value)
                    return
                node = node.right

    def upsert(self, value: T, merge: Callable[[T, T], None]) -> T:
        """
        Insert `value`, or if an equal element exists call merge(stored, value).
        Returns the element that ends up stored in the tree.
        merge must not change how the stored element orders.
        """
        node = self._find(value)
        if node is not None:
            merge(node.data, value)
            return node.data
        self.insert(value)
        return value

    # traversal -----------------------------------------------------------------
    @staticmethod
    def _push_left(stack: List["OrderedTree.Node"], node: Optional["OrderedTree.Node"]) -> None:
        while node is not None:
            stack.append(node)
            node = node.left

    def in_order(self) -> Iterator[T]:
        """
        Lazy ascending traversal.
        Holds only the pending left spine, so memory is O(height).
        Every call starts a fresh, independent traversal from the root.
        """
        stack: List[OrderedTree.Node] = []
        self._push_left(stack, self._root)
        while stack:
            node = stack.pop()
            self._push_left(stack, node.right)
            yield node.data

    def __iter__(self) -> Iterator[T]:
        return self.in_order()

    def __repr__(self) -> str:
        return f"OrderedTree(nodes={self.node_count()}, height={self.height()})"
