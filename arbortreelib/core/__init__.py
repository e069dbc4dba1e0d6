"""Core abstractions shared by every node and tree shape.

Components here include:
- Error types (TreeError and its subclasses)
- The Node and Tree contracts
- Traversal strategies and data collectors
"""

from .errors import (
    TreeError,
    InvalidArgumentError,
    IndexOutOfRangeError,
    NodeOccupiedError,
    ConfigurationError,
)
from .node import Node
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    ValueCollector,
    NodeCollector,
    ChildCountCollector,
    PathCollector,
    CustomCollector,
)
from .tree import Tree

__all__ = [
    'TreeError',
    'InvalidArgumentError',
    'IndexOutOfRangeError',
    'NodeOccupiedError',
    'ConfigurationError',
    'Node',
    'Tree',
    'TreeTraverser',
    'BreadthFirstTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    'DataCollector',
    'ValueCollector',
    'NodeCollector',
    'ChildCountCollector',
    'PathCollector',
    'CustomCollector',
]
