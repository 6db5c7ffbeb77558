"""
Custom exceptions for the B-tree containers.
"""

from typing import Any


class InvalidSplitArguments(AssertionError):
    """
    Raised when a node insert receives exactly one of the two split halves.

    Node.insert takes either both children of a split or neither. Getting
    only one means the tree algorithm itself is broken, so this is an
    assertion rather than a recoverable error.
    """

    def __init__(self, left_child: Any, right_child: Any):
        """
        Initialize split arguments error.

        Args:
            left_child: Left half passed to the insert.
            right_child: Right half passed to the insert.
        """
        self.left_child = left_child
        self.right_child = right_child
        super().__init__(
            "Both left and right children must be given or omitted together, "
            f"got left={left_child!r} right={right_child!r}"
        )
