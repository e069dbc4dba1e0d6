"""Concrete node shapes."""

from .binary import BinaryNode
from .generic import GenericNode

__all__ = ['BinaryNode', 'GenericNode']
