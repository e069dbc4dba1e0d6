"""Binary node for ArborTreeLib.

A BinaryNode has exactly two child slots, left and right. Slots are filled
by ``add`` in left-then-right order or explicitly through ``set_left`` and
``set_right``; a filled slot is never silently replaced.
"""

from typing import List, Optional, TypeVar

from ..core.errors import IndexOutOfRangeError, NodeOccupiedError
from ..core.node import Node, require_value

T = TypeVar("T")

LEFT = 0
RIGHT = 1


class BinaryNode(Node[T]):
    """A node in a binary tree.

    Example:
        >>> root = BinaryNode(5)
        >>> root.add(3)
        BinaryNode(value=3)
        >>> root.add(8)
        BinaryNode(value=8)
        >>> root.get_children_values()
        [3, 8]
    """

    def __init__(self, value: T, *, _parent: Optional["BinaryNode[T]"] = None):
        super().__init__(value, _parent=_parent)
        self._left: Optional[BinaryNode[T]] = None
        self._right: Optional[BinaryNode[T]] = None

    def add(self, value: T) -> "BinaryNode[T]":
        """Attach a child in the first free slot, left before right.

        Raises:
            InvalidArgumentError: If value is None
            NodeOccupiedError: If both slots are taken; carries the right child
        """
        require_value(value)
        if self._left is None:
            self._left = BinaryNode(value, _parent=self)
            return self._left
        if self._right is None:
            self._right = BinaryNode(value, _parent=self)
            return self._right
        raise NodeOccupiedError("both child slots are occupied.", self._right)

    def set_left(self, value: T) -> "BinaryNode[T]":
        """Fill the left slot.

        Raises:
            InvalidArgumentError: If value is None
            NodeOccupiedError: If the left slot is already filled
        """
        require_value(value)
        if self._left is not None:
            raise NodeOccupiedError("left node already occupied.", self._left)
        self._left = BinaryNode(value, _parent=self)
        return self._left

    def set_right(self, value: T) -> "BinaryNode[T]":
        """Fill the right slot.

        Raises:
            InvalidArgumentError: If value is None
            NodeOccupiedError: If the right slot is already filled
        """
        require_value(value)
        if self._right is not None:
            raise NodeOccupiedError("right node already occupied.", self._right)
        self._right = BinaryNode(value, _parent=self)
        return self._right

    def visit_left(self) -> Optional["BinaryNode[T]"]:
        return self._left

    def visit_right(self) -> Optional["BinaryNode[T]"]:
        return self._right

    def has_left(self) -> bool:
        return self._left is not None

    def has_right(self) -> bool:
        return self._right is not None

    def get_children(self) -> List[Optional["BinaryNode[T]"]]:
        """Return both slots, left then right. Either may be None."""
        return [self._left, self._right]

    def visit(self, index: int) -> Optional["BinaryNode[T]"]:
        """Return the left (0) or right (1) child.

        Raises:
            IndexOutOfRangeError: If index is not 0 or 1
        """
        if index == LEFT:
            return self._left
        if index == RIGHT:
            return self._right
        raise IndexOutOfRangeError(f"index can only be 0 (left) or 1 (right), got {index}.")

    def subtree(self):
        """Return a BinaryTree view rooted at this node."""
        from ..trees.binary import BinaryTree
        return BinaryTree(self)
