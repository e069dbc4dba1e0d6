"""Node abstraction for ArborTreeLib.

A node holds one value, owns its children, and keeps a non-owning reference
to its parent. Concrete shapes (binary, n-ary) decide how children are stored
and attached; everything that can be expressed through the child list alone
lives here so both shapes behave identically.
"""

import weakref
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterator, List, Optional, TypeVar

from .errors import InvalidArgumentError

T = TypeVar("T")


def require_value(value: Any, name: str = "value") -> None:
    """Reject absent values before any structure is touched.

    Args:
        value: Value about to be stored in a node
        name: Argument name used in the error message

    Raises:
        InvalidArgumentError: If value is None
    """
    if value is None:
        raise InvalidArgumentError(f"{name} cannot be None.")


class Node(ABC, Generic[T]):
    """Abstract base class for every node shape.

    This class defines the capability set shared by all nodes. Subclasses
    decide how children are stored (fixed slots or an open list) and how a
    new child is attached; height, size, leaf checks and value access are
    implemented once on top of ``get_children``.

    The parent is held through a weak reference. Children are owned by their
    parent, so the only strong references in a tree point downwards.
    """

    def __init__(self, value: T, *, _parent: Optional["Node[T]"] = None):
        """Create a node.

        Args:
            value: Value stored in this node
            _parent: Owning node; internal, only passed by add and set_*
                when they attach a child

        Raises:
            InvalidArgumentError: If value is None
        """
        require_value(value)
        self._value: T = value
        self._parent_ref = weakref.ref(_parent) if _parent is not None else None

    # Shape specific operations

    @abstractmethod
    def add(self, value: T) -> "Node[T]":
        """Attach a new child holding value.

        Args:
            value: Value for the new child

        Returns:
            The newly created child node

        Raises:
            InvalidArgumentError: If value is None
        """
        pass

    @abstractmethod
    def get_children(self) -> List[Optional["Node[T]"]]:
        """Return the ordered child slots of this node.

        Shapes with fixed slots may report empty slots as None.
        """
        pass

    @abstractmethod
    def visit(self, index: int) -> Optional["Node[T]"]:
        """Return the child at a position.

        Raises:
            IndexOutOfRangeError: If index is not a valid position
        """
        pass

    @abstractmethod
    def subtree(self) -> Any:
        """Return a tree view rooted at this node."""
        pass

    # Shared operations

    def get_value(self) -> T:
        return self._value

    def update(self, value: T) -> None:
        """Replace the stored value. Children are left untouched.

        Raises:
            InvalidArgumentError: If value is None
        """
        require_value(value)
        self._value = value

    def get_parent(self) -> Optional["Node[T]"]:
        """Return the parent node, or None if this node is a root.

        The parent is only weakly referenced. Holding a child after its
        parent (and every other node above it) has been released leaves
        the child detached: get_parent then returns None, and the child
        reports itself as a root, e.g. in PathCollector paths.
        """
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def iter_children(self) -> Iterator["Node[T]"]:
        """Iterate over the children that are actually present, in order."""
        for child in self.get_children():
            if child is not None:
                yield child

    def get_children_values(self) -> List[T]:
        """Return the values of the present children, in order."""
        return [child.get_value() for child in self.iter_children()]

    def has_children(self) -> bool:
        return any(True for _ in self.iter_children())

    def is_leaf(self) -> bool:
        return not self.has_children()

    def size(self) -> int:
        """Number of nodes in the subtree rooted here, including this one."""
        return self.subtree().size()

    def calculate_height(self) -> int:
        """Calculate the height of this node from its furthest leaf.

        An absent child counts as height -1, so a leaf has height 0 and
        every other node is one more than its tallest child. The walk goes
        level by level instead of recursing, so degenerate trees (a chain
        built from sorted input, for instance) don't hit the recursion limit.

        Returns:
            int: Number of edges on the longest downward path
        """
        height = -1
        level: List[Node[T]] = [self]
        while level:
            height += 1
            level = [child for node in level for child in node.iter_children()]
        return height

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self._value!r})"
