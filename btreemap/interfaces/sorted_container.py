"""
SortedContainer abstract base class for ordered key-value data structures.
"""

from abc import abstractmethod
from typing import Any

from btreemap.interfaces.ordered_iterable import OrderedIterable


class SortedContainer(OrderedIterable):
    """
    Abstract base class for ordered key-value containers.

    Provides O(log N) operations for insert, find, upsert and delete.
    Inherits in-order iteration from OrderedIterable.

    Implementations:
    - BTree: Multi-way tree with top-down rebalancing
    """

    @abstractmethod
    def insert(self, key: Any, value: Any) -> None:
        """
        Insert a key-value pair. Duplicate keys are kept side by side.

        Args:
            key: The key to insert.
            value: The value to associate with the key.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def find(self, key: Any, default: Any = None) -> Any:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up.
            default: Returned when the key is absent.

        Returns:
            The value if found, default otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def upsert(self, key: Any, value: Any) -> Any:
        """
        Replace the value of an existing key, or insert it.

        Args:
            key: The key to insert/update.
            value: The new value.

        Returns:
            The previous value if the key existed, None otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def delete(self, key: Any, default: Any = None) -> Any:
        """
        Remove one key-value pair.

        Args:
            key: The key to remove.
            default: Returned when the key is absent.

        Returns:
            The removed value if found, default otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def delete_min(self) -> tuple[Any, Any] | None:
        """
        Remove the smallest key.

        Returns:
            The removed (key, value) pair, or None if the container is empty.
        """
        pass

    @abstractmethod
    def delete_max(self) -> tuple[Any, Any] | None:
        """
        Remove the largest key.

        Returns:
            The removed (key, value) pair, or None if the container is empty.
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Returns:
            The count of entries in the container.

        Time complexity: O(1)
        """
        pass
