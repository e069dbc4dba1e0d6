"""N-ary tree wrapper for ArborTreeLib."""

from typing import Optional, TypeVar, Union

from ..core.errors import InvalidArgumentError
from ..core.node import Node
from ..core.tree import Tree
from ..nodes.generic import GenericNode

T = TypeVar("T")


class NTree(Tree[T]):
    """A tree where nodes can contain any number of children.

    Built from nothing (empty), a root value, or an existing GenericNode.
    Pre-order traversal visits a node and then each child's whole subtree,
    children in insertion order.
    """

    def __init__(self, root: Union[GenericNode[T], T, None] = None):
        """Create an n-ary tree.

        Args:
            root: Existing GenericNode, a root value, or None for an empty tree

        Raises:
            InvalidArgumentError: If a node of another shape is passed as root
        """
        if isinstance(root, GenericNode) or root is None:
            node = root
        elif isinstance(root, Node):
            raise InvalidArgumentError(
                f"NTree needs a GenericNode root, got {root.__class__.__name__}."
            )
        else:
            node = GenericNode(root)

        super().__init__(node)

    def get_root(self) -> Optional[GenericNode[T]]:
        return self._root
