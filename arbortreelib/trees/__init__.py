"""Tree wrappers for each node shape."""

from .binary import BinaryTree
from .ntree import NTree
from .search import BinarySearchTree

__all__ = ['BinaryTree', 'NTree', 'BinarySearchTree']
