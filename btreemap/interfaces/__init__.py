"""
Abstract base classes and protocols for ordered containers.
"""

from btreemap.interfaces.ordered_iterable import OrderedIterable
from btreemap.interfaces.sorted_container import SortedContainer

__all__ = ["OrderedIterable", "SortedContainer"]
