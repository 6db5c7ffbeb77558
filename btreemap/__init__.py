"""
In-memory ordered key-value container backed by a B-tree.

This package provides a sorted map with:
- insert(key, value) - O(log N), duplicate keys allowed
- find(key) - O(log N) point lookup
- upsert(key, value) - O(log N) replace-or-insert
- delete(key), delete_min(), delete_max() - O(log N) single-pass removal
- each() - lazy in-order traversal
"""

from btreemap.models.exceptions import InvalidSplitArguments
from btreemap.models.key_entry import KeyEntry
from btreemap.models.sortedcontainers import BTree

__all__ = ["BTree", "KeyEntry", "InvalidSplitArguments"]
