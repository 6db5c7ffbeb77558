"""
Node of a B-tree: ordered key entries plus, when internal, child links.
"""

from bisect import bisect_right
from dataclasses import dataclass, field
from operator import attrgetter
from typing import Any

from btreemap.models.exceptions import InvalidSplitArguments
from btreemap.models.key_entry import KeyEntry

_entry_key = attrgetter("key")


@dataclass(eq=False)
class Node:
    """
    Node in the B-tree.

    Invariants kept by the mutation primitives below:
    - A leaf has no children.
    - An internal node has exactly one more child than it has keys.
    - Keys are ascending, and children[i] only holds keys between
      keys[i-1] and keys[i].

    Nodes compare by identity; a node is referenced from one place only.
    """

    keys: list[KeyEntry] = field(default_factory=list)
    children: list["Node"] = field(default_factory=list)

    def is_leaf(self) -> bool:
        return not self.children

    def insert(
        self,
        entry: KeyEntry,
        left_child: "Node | None" = None,
        right_child: "Node | None" = None,
        index: int | None = None,
    ) -> int:
        """
        Insert an entry after any keys equal to it.

        When the two halves of a split are given, left_child replaces the
        child at the insertion index (the node that was split) and
        right_child goes right after it. The node must have room.

        Args:
            entry: Entry to place.
            left_child: Left half of a split, or None.
            right_child: Right half of a split, or None.
            index: Slot of the split child. Must be passed when this node
                may hold keys equal to the median, since the search would
                then land past the split child.

        Returns:
            The index the entry was inserted at.

        Raises:
            InvalidSplitArguments: If only one of the children is given.
        """
        if (left_child is None) != (right_child is None):
            raise InvalidSplitArguments(left_child, right_child)

        if index is None:
            index = bisect_right(self.keys, entry.key, key=_entry_key)
        self.keys.insert(index, entry)

        if left_child is not None:
            if index < len(self.children):
                self.children[index] = left_child
            else:
                self.children.append(left_child)
            self.children.insert(index + 1, right_child)

        return index

    def split(self) -> tuple[KeyEntry, "Node", "Node"]:
        """
        Split a full node around its median.

        Returns:
            (median, left, right) where left takes the keys before the median
            and the first half of the children, right takes the rest.
        """
        key_partition = len(self.keys) // 2
        child_partition = len(self.children) // 2

        left = Node(
            keys=self.keys[:key_partition],
            children=self.children[:child_partition],
        )
        right = Node(
            keys=self.keys[key_partition + 1 :],
            children=self.children[child_partition:],
        )
        return self.keys[key_partition], left, right

    def find_node_or_key_containing_key(
        self, key: Any
    ) -> tuple["KeyEntry | Node | None", int]:
        """
        Scan this node for key.

        Returns:
            (entry, i) if keys[i] matches, (child, i) for the subtree that
            would hold the key, or (None, -1) on a leaf without a match.
        """
        for i, entry in enumerate(self.keys):
            if key == entry.key:
                return entry, i
            if key < entry.key:
                return (self.children[i], i) if self.children else (None, -1)

        if not self.children:
            return None, -1
        return self.children[-1], len(self.children) - 1

    def find_node_containing_key(self, key: Any) -> tuple["Node", int]:
        """Child (and its index) to descend into when inserting key; equal keys go right."""
        index = bisect_right(self.keys, key, key=_entry_key)
        return self.children[index], index

    def take_min(self) -> tuple[KeyEntry, "Node | None"]:
        return self.take(0)

    def take_max(self) -> tuple[KeyEntry, "Node | None"]:
        return self.keys.pop(), (self.children.pop() if self.children else None)

    def take(self, index: int) -> tuple[KeyEntry, "Node | None"]:
        """Remove keys[index] together with children[index], if any."""
        entry = self.keys.pop(index)
        child = self.children.pop(index) if self.children else None
        return entry, child

    def put_min(self, entry: KeyEntry, child: "Node | None" = None) -> None:
        self.put(0, entry, child)

    def put_max(self, entry: KeyEntry, child: "Node | None" = None) -> None:
        self.keys.append(entry)
        if child is not None:
            self.children.append(child)

    def put(self, index: int, entry: KeyEntry, child: "Node | None" = None) -> None:
        """Insert entry at keys[index] and child, if given, at children[index]."""
        self.keys.insert(index, entry)
        if child is not None:
            self.children.insert(index, child)

    def is_first_child(self, node: "Node") -> bool:
        return bool(self.children) and self.children[0] is node

    def is_last_child(self, node: "Node") -> bool:
        return bool(self.children) and self.children[-1] is node
