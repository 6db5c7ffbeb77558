"""
B-Tree implementation for ordered key-value storage.

Rebalancing is done top-down: full nodes are split before insertion enters
them, and thin nodes are topped up (borrow or merge) before deletion enters
them, so every operation is a single O(log N) descent.
"""

import logging
from collections.abc import AsyncIterator, Iterator
from typing import Any

from btreemap.interfaces.sorted_container import SortedContainer
from btreemap.models.key_entry import KeyEntry
from btreemap.models.sortedcontainers.btree_node import Node

logger = logging.getLogger(__name__)


class BTree(SortedContainer):
    """
    B-Tree implementation of SortedContainer.

    Properties maintained:
    1. Every node holds at most 2t-1 keys
    2. Every non-root node holds at least t-1 keys
    3. Internal nodes have one more child than keys
    4. All leaves sit at the same depth

    insert() keeps duplicate keys; upsert() is the only path that keeps
    keys unique.
    """

    DEFAULT_MIN_DEGREE = 2

    # Smallest degree for which a split leaves both halves non-empty
    MIN_MIN_DEGREE = 2

    def __init__(self, min_degree: int = DEFAULT_MIN_DEGREE) -> None:
        """
        Initialize an empty tree.

        Args:
            min_degree: Minimum degree t. Nodes hold up to 2t-1 keys.
                Values below MIN_MIN_DEGREE are raised to it.
        """
        if isinstance(min_degree, bool) or not isinstance(min_degree, int):
            raise TypeError(f"min_degree must be an int, got {type(min_degree).__name__}")

        if min_degree < self.MIN_MIN_DEGREE:
            logger.warning(
                f"min_degree {min_degree} is below {self.MIN_MIN_DEGREE}, "
                f"using {self.MIN_MIN_DEGREE}"
            )
            min_degree = self.MIN_MIN_DEGREE

        self._min_degree: int = min_degree
        self._max_keys: int = 2 * min_degree - 1
        self._root: Node = Node()
        self._size: int = 0

    @property
    def min_degree(self) -> int:
        return self._min_degree

    @property
    def max_keys(self) -> int:
        return self._max_keys

    @property
    def root(self) -> Node:
        return self._root

    def insert(self, key: Any, value: Any) -> None:
        """Insert a key-value pair, keeping existing equal keys. O(log N)"""
        entry = KeyEntry(key=key, value=value)

        # A full root is split up front so every full node met below has a parent
        if self._is_full(self._root):
            self._split_root()

        parent: Node | None = None
        node = self._root
        index = 0

        while True:
            if self._is_full(node):
                median, left, right = node.split()
                parent.insert(median, left, right, index=index)
                node = left if key < median.key else right

            if node.is_leaf():
                node.insert(entry)
                self._size += 1
                return

            parent = node
            node, index = node.find_node_containing_key(key)

    def find_key(self, key: Any) -> KeyEntry | None:
        """Find the stored entry for key. O(log N)"""
        node = self._root
        while True:
            candidate, _ = node.find_node_or_key_containing_key(key)
            if candidate is None:
                return None
            if isinstance(candidate, KeyEntry):
                return candidate
            node = candidate

    def find(self, key: Any, default: Any = None) -> Any:
        """Retrieve value by key. O(log N)"""
        entry = self.find_key(key)
        return default if entry is None else entry.value

    def upsert(self, key: Any, value: Any) -> Any:
        """Replace the value of key in place, or insert it. O(log N)"""
        entry = self.find_key(key)
        if entry is None:
            self.insert(key, value)
            return None

        old_value = entry.value
        entry.value = value
        return old_value

    def delete(self, key: Any, default: Any = None) -> Any:
        """Remove one entry for key. O(log N)"""
        entry = self.delete_key(key)
        return default if entry is None else entry.value

    def delete_min(self) -> tuple[Any, Any] | None:
        entry = self.delete_min_key()
        return None if entry is None else entry.as_tuple()

    def delete_max(self) -> tuple[Any, Any] | None:
        entry = self.delete_max_key()
        return None if entry is None else entry.as_tuple()

    def has(self, key: Any) -> bool:
        return self.find_key(key) is not None

    contains = has

    def size(self) -> int:
        return self._size

    def each(self) -> Iterator[tuple[Any, Any]]:
        return _InOrderIterator(self._root)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self.each()

    def __aiter__(self) -> AsyncIterator[tuple[Any, Any]]:
        return _AsyncInOrderIterator(self._root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __getitem__(self, key: Any) -> Any:
        entry = self.find_key(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: Any, value: Any) -> None:
        self.upsert(key, value)

    def __delitem__(self, key: Any) -> None:
        if self.delete_key(key) is None:
            raise KeyError(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(min_degree={self._min_degree}, size={self._size})"

    def delete_key(self, key: Any) -> KeyEntry | None:
        """
        Remove one entry matching key and return it.

        Every node is made able to lose a key before the descent enters it,
        so no fix-up walk back towards the root is needed.
        """
        # Topping up nodes reshapes the tree, so a miss must bail out first
        if self.find_key(key) is None:
            return None

        node = self._root

        while True:
            candidate, index = node.find_node_or_key_containing_key(key)
            if candidate is None:
                return None

            if isinstance(candidate, KeyEntry):
                if node.is_leaf():
                    node.take(index)
                    self._size -= 1
                    return candidate

                left = node.children[index]
                right = node.children[index + 1]

                if self._can_spare(left):
                    node.keys[index] = self.delete_max_key(left)
                    return candidate

                if self._can_spare(right):
                    node.keys[index] = self.delete_min_key(right)
                    return candidate

                # Both neighbours are thin: pull the match down into their merge
                node = self.merge_with_right(node, index)
                self._collapse_root()
                continue

            child = candidate
            if self._needs_fixing(child):
                child = self._fix_child(node, index)
                self._collapse_root()
            node = child

    def delete_min_key(self, node: Node | None = None) -> KeyEntry | None:
        """Remove and return the smallest entry of the subtree at node (root by default)."""
        if self._size == 0:
            return None

        if node is None:
            self._collapse_root()
            node = self._root

        while not node.is_leaf():
            node = self._enter_child(node, 0)

        self._size -= 1
        return node.take_min()[0]

    def delete_max_key(self, node: Node | None = None) -> KeyEntry | None:
        """Remove and return the largest entry of the subtree at node (root by default)."""
        if self._size == 0:
            return None

        if node is None:
            self._collapse_root()
            node = self._root

        while not node.is_leaf():
            node = self._enter_child(node, len(node.children) - 1)

        self._size -= 1
        return node.take_max()[0]

    def merge_with_left(self, parent: Node, index: int) -> Node:
        """
        Merge children[index] into its left sibling around their separator.

        The merged node takes the sibling's slot and is returned.
        """
        sibling = parent.children[index - 1]
        child = parent.children[index]
        merged = Node(
            keys=sibling.keys + [parent.keys[index - 1]] + child.keys,
            children=sibling.children + child.children,
        )
        parent.take(index - 1)
        parent.children[index - 1] = merged
        return merged

    def merge_with_right(self, parent: Node, index: int) -> Node:
        """
        Merge children[index] with its right sibling around their separator.

        The merged node takes the child's slot and is returned.
        """
        child = parent.children[index]
        sibling = parent.children[index + 1]
        merged = Node(
            keys=child.keys + [parent.keys[index]] + sibling.keys,
            children=child.children + sibling.children,
        )
        parent.take(index)
        parent.children[index] = merged
        return merged

    def _is_full(self, node: Node) -> bool:
        return len(node.keys) == self._max_keys

    def _can_spare(self, node: Node) -> bool:
        return len(node.keys) >= self._min_degree

    def _needs_fixing(self, node: Node) -> bool:
        return len(node.keys) < self._min_degree

    def _split_root(self) -> None:
        root = Node()
        root.insert(*self._root.split())
        self._root = root
        logger.debug(f"Split full root, {self._size} keys stored")

    def _collapse_root(self) -> None:
        """Promote the only child of a root left without keys by a merge."""
        if not self._root.keys and len(self._root.children) == 1:
            self._root = self._root.children[0]
            logger.debug(f"Collapsed empty root, {self._size} keys stored")

    def _enter_child(self, parent: Node, index: int) -> Node:
        """Return children[index], first topping it up if it needs fixing."""
        child = parent.children[index]
        if self._needs_fixing(child):
            child = self._fix_child(parent, index)
            self._collapse_root()
        return child

    def _fix_child(self, parent: Node, index: int) -> Node:
        """
        Give children[index] a spare key by borrowing or merging.

        The first child looks right, every other child looks left. Returns
        the node now holding the child's keys.
        """
        child = parent.children[index]

        if parent.is_first_child(child):
            if self._can_spare(parent.children[1]):
                self._borrow_from_right(parent, index)
                return child
            return self.merge_with_right(parent, index)

        if self._can_spare(parent.children[index - 1]):
            self._borrow_from_left(parent, index)
            return child
        return self.merge_with_left(parent, index)

    def _borrow_from_right(self, parent: Node, index: int) -> None:
        """Rotate the right sibling's min through the separator into children[index]."""
        entry, grandchild = parent.children[index + 1].take_min()
        parent.children[index].put_max(parent.keys[index], grandchild)
        parent.keys[index] = entry

    def _borrow_from_left(self, parent: Node, index: int) -> None:
        """Rotate the left sibling's max through the separator into children[index]."""
        entry, grandchild = parent.children[index - 1].take_max()
        parent.children[index].put_min(parent.keys[index - 1], grandchild)
        parent.keys[index - 1] = entry


class _InOrderIterator(Iterator[tuple[Any, Any]]):
    """In-order iterator over a B-Tree using an explicit (node, index) stack."""

    def __init__(self, root: Node) -> None:
        self._stack: list[tuple[Node, int]] = []
        self._push_left_path(root)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self

    def __next__(self) -> tuple[Any, Any]:
        while self._stack:
            node, index = self._stack[-1]

            if index == len(node.keys):
                self._stack.pop()
                continue

            self._stack[-1] = (node, index + 1)
            entry = node.keys[index]

            # Keys between this entry and the next one live in children[index + 1]
            if node.children:
                self._push_left_path(node.children[index + 1])

            return entry.as_tuple()

        raise StopIteration

    def _push_left_path(self, node: Node | None) -> None:
        """Push the leftmost path from node down to a leaf."""
        while node is not None:
            self._stack.append((node, 0))
            node = node.children[0] if node.children else None


class _AsyncInOrderIterator(AsyncIterator[tuple[Any, Any]]):
    """Async iterator for in-order traversal (in-memory, no I/O)."""

    def __init__(self, root: Node) -> None:
        self._inner = _InOrderIterator(root)

    def __aiter__(self) -> "_AsyncInOrderIterator":
        return self

    async def __anext__(self) -> tuple[Any, Any]:
        try:
            return next(self._inner)
        except StopIteration:
            raise StopAsyncIteration from None
