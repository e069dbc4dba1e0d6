"""Tree abstraction for ArborTreeLib.

A Tree wraps a single root node and answers structural questions about it.
Size is never cached: it's counted from the live structure on every call,
so nodes attached after the tree was built are always accounted for.
"""

from abc import ABC
from typing import Any, Generic, Iterator, List, Optional, Tuple, TypeVar

from ..config import TraversalConfig
from ..planning import ExecutionPlan
from .node import Node
from .traverser import (
    BreadthFirstTraverser,
    DepthFirstPostOrderTraverser,
    DepthFirstPreOrderTraverser,
    TreeTraverser,
)

T = TypeVar("T")


class Tree(ABC, Generic[T]):
    """Base class for tree wrappers.

    Subclasses decide which node shape they accept and how they are built;
    the queries below only rely on the Node contract.
    """

    def __init__(self, root: Optional[Node[T]] = None):
        self._root = root

    def get_root(self) -> Optional[Node[T]]:
        return self._root

    def is_empty(self) -> bool:
        return self._root is None

    def size(self) -> int:
        """Count the nodes reachable from the root."""
        return sum(1 for _ in self._walk(DepthFirstPreOrderTraverser()))

    def get_height(self) -> int:
        """Return the height of the root node.

        An empty tree has no root; it reports -1, the same value an absent
        child contributes to a height calculation.
        """
        if self._root is None:
            return -1
        return self._root.calculate_height()

    def traverse(self) -> List[T]:
        """Return the values in pre-order (node, then each child subtree)."""
        return [node.get_value() for node in self._walk(DepthFirstPreOrderTraverser())]

    def traverse_breadth_first(self) -> List[T]:
        """Return the values level by level, each node exactly once."""
        return [node.get_value() for node in self._walk(BreadthFirstTraverser())]

    def traverse_post_order(self) -> List[T]:
        """Return the values with every node after its children."""
        return [node.get_value() for node in self._walk(DepthFirstPostOrderTraverser())]

    def node_iterator(self) -> Iterator[Node[T]]:
        """Iterate over the nodes themselves, in pre-order."""
        return self._walk(DepthFirstPreOrderTraverser())

    def walk(self, config: Optional[TraversalConfig] = None) -> Iterator[Tuple[Node[T], Any]]:
        """Run a configured traversal over this tree.

        Args:
            config: Traversal settings (default: pre-order, values)

        Returns:
            Iterator of (node, collected_data) tuples

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        plan = ExecutionPlan(config or TraversalConfig())
        if self._root is None:
            return iter(())
        return plan.execute(self._root)

    def _walk(self, traverser: TreeTraverser) -> Iterator[Node[T]]:
        if self._root is None:
            return
        for node, _ in traverser.traverse(self._root):
            yield node

    def __iter__(self) -> Iterator[T]:
        # A fresh generator per call keeps iteration restartable
        for node in self._walk(DepthFirstPreOrderTraverser()):
            yield node.get_value()

    def __len__(self) -> int:
        return self.size()

    def __str__(self) -> str:
        return str(self.traverse())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.traverse()!r})"
