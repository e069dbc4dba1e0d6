"""ArborTreeLib - Binary, n-ary and binary search trees.

ArborTreeLib provides in-memory tree containers with owned children,
non-owning parent references, and a configurable traversal layer.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from arbortreelib import BinaryTree, BinarySearchTree, NTree

    BinaryTree(5, 3, 8).traverse()                # [5, 3, 8]
    BinarySearchTree([5, 3, 8, 1, 4, 9]).get_height()  # 2
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

import logging

__version__ = "0.1.0"

# Core components
from .core import (
    TreeError,
    InvalidArgumentError,
    IndexOutOfRangeError,
    NodeOccupiedError,
    ConfigurationError,
    Node,
    Tree,
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    DataCollector,
    ValueCollector,
    NodeCollector,
    ChildCountCollector,
    PathCollector,
    CustomCollector,
)

# Node shapes and trees
from .nodes import BinaryNode, GenericNode
from .trees import BinaryTree, NTree, BinarySearchTree

# Configuration and planning
from .config import (
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    FilterConfig,
    DepthConfig,
)
from .planning import ExecutionPlan

# High-level API
from .api import (
    traverse_tree,
    collect_tree_data,
    count_nodes,
    find_nodes,
    get_tree_paths,
    get_leaf_nodes,
    get_tree_stats,
)

# Silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    '__version__',
    # Errors
    'TreeError',
    'InvalidArgumentError',
    'IndexOutOfRangeError',
    'NodeOccupiedError',
    'ConfigurationError',
    # Core
    'Node',
    'Tree',
    'BinaryNode',
    'GenericNode',
    'BinaryTree',
    'NTree',
    'BinarySearchTree',
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
    # Config
    'TraversalConfig',
    'TraversalStrategy',
    'DataRequirement',
    'FilterConfig',
    'DepthConfig',
    'ExecutionPlan',
    # API
    'traverse_tree',
    'collect_tree_data',
    'count_nodes',
    'find_nodes',
    'get_tree_paths',
    'get_leaf_nodes',
    'get_tree_stats',
]
