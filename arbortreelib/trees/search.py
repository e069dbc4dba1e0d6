"""Binary search tree for ArborTreeLib.

The tree is built once from a sequence of integers. The first integer is the
root and every following one is inserted by walking down from the root:
values less than or equal to a node go left, larger values go right, and
the walk stops at the first empty slot. Duplicates therefore always end up
in the left subtree.

There is no public insert, search or delete; once built, the tree is
queried through the BinaryTree interface.
"""

import logging
from numbers import Integral
from typing import Iterable, List, Optional

from ..core.errors import InvalidArgumentError
from ..nodes.binary import BinaryNode
from .binary import BinaryTree

logger = logging.getLogger(__name__)


def _validate_values(values: Optional[Iterable[int]]) -> List[int]:
    """Materialize and check the input before any node is created."""
    if values is None:
        raise InvalidArgumentError("values cannot be None.")

    items = list(values)
    if not items:
        raise InvalidArgumentError("cannot build a binary search tree from an empty sequence.")

    for position, value in enumerate(items):
        if not isinstance(value, Integral) or isinstance(value, bool):
            raise InvalidArgumentError(
                f"binary search tree values must be integers; "
                f"got {value!r} at position {position}."
            )
    return items


class BinarySearchTree(BinaryTree[int]):
    """A BinaryTree of integers ordered by insertion.

    For every node with value v, all values in its left subtree are <= v
    and all values in its right subtree are > v.

    Example:
        >>> bst = BinarySearchTree([5, 3, 8, 1, 4, 9])
        >>> bst.traverse()
        [5, 3, 1, 4, 8, 9]
        >>> bst.get_height()
        2
    """

    def __init__(self, values: Iterable[int]):
        """Build the tree from values, in order.

        Args:
            values: Non-empty iterable of integers

        Raises:
            InvalidArgumentError: If values is empty or holds a non-integer
        """
        items = _validate_values(values)
        root = BinaryNode(items[0])
        for value in items[1:]:
            self._insert(root, value)

        super().__init__(root)
        logger.debug(f"Built binary search tree with {len(items)} nodes")

    @staticmethod
    def _insert(root: BinaryNode[int], value: int) -> BinaryNode[int]:
        """Attach value below root following the ordering rule.

        Returns:
            The node created for value
        """
        node = root
        while True:
            if value <= node.get_value():
                if not node.has_left():
                    return node.set_left(value)
                node = node.visit_left()
            else:
                if not node.has_right():
                    return node.set_right(value)
                node = node.visit_right()

    def traverse_in_order(self) -> List[int]:
        """Return the values in ascending order (left, node, right)."""
        result: List[int] = []
        stack: List[BinaryNode[int]] = []
        node = self.get_root()

        while stack or node is not None:
            # Descend as far left as possible
            while node is not None:
                stack.append(node)
                node = node.visit_left()
            node = stack.pop()
            result.append(node.get_value())
            node = node.visit_right()

        return result
