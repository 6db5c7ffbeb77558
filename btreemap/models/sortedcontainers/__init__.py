"""
Sorted container implementations.
"""

from btreemap.models.sortedcontainers.btree import BTree
from btreemap.models.sortedcontainers.btree_node import Node

__all__ = ["BTree", "Node"]
