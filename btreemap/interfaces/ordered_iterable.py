"""
OrderedIterable protocol for data structures that support in-order iteration.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class OrderedIterable(ABC):
    """
    Protocol for data structures that can be walked in ascending key order.

    Implementations must support:
    - Full iteration via __iter__
    - Explicit traversal via each()
    - Async iteration via __aiter__

    Every call starts a fresh traversal over the current state.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Return an iterator over all key-value pairs in sorted order."""
        pass

    @abstractmethod
    def each(self) -> Iterator[tuple[Any, Any]]:
        """
        Return a lazy in-order iterator over the stored pairs.

        Returns:
            Iterator yielding (key, value) tuples in ascending key order.
        """
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[tuple[Any, Any]]:
        """Return an async iterator over all key-value pairs in sorted order."""
        pass
