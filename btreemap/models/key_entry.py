"""
KeyEntry - the key-value unit stored in B-tree nodes.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class KeyEntry:
    """
    A key paired with its value.

    Attributes:
        key: Ordering key. Must support <, > and == against other keys.
            Never reassigned once the entry is stored.
        value: Associated value. Replaced in place by upsert.
    """

    key: Any
    value: Any = None

    def as_tuple(self) -> tuple[Any, Any]:
        return (self.key, self.value)
