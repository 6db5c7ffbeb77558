"""
Data models for the ordered containers.
"""

from btreemap.models.exceptions import InvalidSplitArguments
from btreemap.models.key_entry import KeyEntry

__all__ = [
    "InvalidSplitArguments",
    "KeyEntry",
]
