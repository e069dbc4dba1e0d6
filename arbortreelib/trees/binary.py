"""Binary tree wrapper for ArborTreeLib."""

from typing import Optional, TypeVar, Union

from ..core.errors import InvalidArgumentError
from ..core.node import Node
from ..core.tree import Tree
from ..nodes.binary import BinaryNode

T = TypeVar("T")


class BinaryTree(Tree[T]):
    """A tree whose nodes have at most two children.

    A BinaryTree can be built in four ways:

        BinaryTree()                # empty, size 0
        BinaryTree(node)            # wraps an existing BinaryNode
        BinaryTree(5)               # single root holding 5
        BinaryTree(5, 3, 8)         # root 5 with left 3 and right 8

    In the last form either child may be None to leave that slot empty.
    Traversal, iteration and size are inherited from Tree; the default
    order is pre-order (root, left subtree, right subtree).
    """

    def __init__(self,
                 root: Union[BinaryNode[T], T, None] = None,
                 left: Optional[T] = None,
                 right: Optional[T] = None):
        """Create a binary tree.

        Args:
            root: Existing BinaryNode, a root value, or None for an empty tree
            left: Value for the root's left child
            right: Value for the root's right child

        Raises:
            InvalidArgumentError: If children are given without a root value,
                or a node of another shape is passed as root
        """
        has_children = left is not None or right is not None

        if isinstance(root, BinaryNode):
            if has_children:
                raise InvalidArgumentError(
                    "left and right can only be given together with a root value."
                )
            node = root
        elif isinstance(root, Node):
            raise InvalidArgumentError(
                f"BinaryTree needs a BinaryNode root, got {root.__class__.__name__}."
            )
        elif root is None:
            if has_children:
                raise InvalidArgumentError("root must not be None when children are given.")
            node = None
        else:
            node = BinaryNode(root)
            if left is not None:
                node.set_left(left)
            if right is not None:
                node.set_right(right)

        super().__init__(node)

    def get_root(self) -> Optional[BinaryNode[T]]:
        return self._root
