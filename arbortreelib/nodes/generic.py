"""N-ary node for ArborTreeLib."""

from typing import List, Optional, TypeVar

from ..core.errors import IndexOutOfRangeError
from ..core.node import Node, require_value

T = TypeVar("T")


class GenericNode(Node[T]):
    """A node with any number of children.

    Children are kept in insertion order, which is also the order every
    traversal visits them in. There is no limit on how many can be added.
    """

    def __init__(self, value: T, *, _parent: Optional["GenericNode[T]"] = None):
        super().__init__(value, _parent=_parent)
        self._children: List[GenericNode[T]] = []

    def add(self, value: T) -> "GenericNode[T]":
        """Append a new child holding value.

        Raises:
            InvalidArgumentError: If value is None
        """
        require_value(value)
        child = GenericNode(value, _parent=self)
        self._children.append(child)
        return child

    def get_children(self) -> List["GenericNode[T]"]:
        """Return a copy of the child list; mutating it doesn't change the node."""
        return list(self._children)

    def child_count(self) -> int:
        return len(self._children)

    def visit(self, index: int) -> "GenericNode[T]":
        """Return the child at index.

        Raises:
            IndexOutOfRangeError: If index is outside [0, child_count)
        """
        if index < 0 or index >= len(self._children):
            raise IndexOutOfRangeError(
                f"index {index} out of range for node with {len(self._children)} children."
            )
        return self._children[index]

    def subtree(self):
        """Return an NTree view rooted at this node."""
        from ..trees.ntree import NTree
        return NTree(self)
