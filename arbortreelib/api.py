"""High-level API for ArborTreeLib.

This module provides simple, functional interfaces for common tree traversal
operations. These functions wrap the ExecutionPlan/TraversalConfig API for
ease of use in simple cases. Every function accepts either a node or a tree;
a tree is walked from its root and an empty tree yields nothing.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from .config import (
    DataRequirement,
    DepthConfig,
    FilterConfig,
    TraversalConfig,
    TraversalStrategy,
)
from .core.node import Node
from .core.tree import Tree
from .planning import ExecutionPlan

TreeLike = Union[Node, Tree]


def traverse_tree(
    root: TreeLike,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Node], bool]] = None,
    exclude_filter: Optional[Callable[[Node], bool]] = None,
    **kwargs
) -> Iterator[Node]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node, or a tree to walk from its root
        strategy: Traversal strategy (bfs, dfs_pre, dfs_post, level)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes
        include_filter: Function to determine if node should be included
        exclude_filter: Function to determine if node should be excluded
        **kwargs: Additional config options (e.g. max_nodes)

    Returns:
        Iterator of nodes that match the criteria

    Raises:
        ConfigurationError: If the resulting configuration is invalid

    Example:
        >>> tree = BinaryTree(5, 3, 8)
        >>> [node.get_value() for node in traverse_tree(tree, strategy="bfs")]
        [5, 3, 8]
    """
    kwargs.update(
        strategy=strategy,
        max_depth=max_depth,
        min_depth=min_depth,
        include_filter=include_filter,
        exclude_filter=exclude_filter,
        data_requirement=DataRequirement.NODE,
    )
    return (node for node, _ in collect_tree_data(root, **kwargs))


def collect_tree_data(
    root: TreeLike,
    data_requirement: DataRequirement = DataRequirement.VALUE,
    **kwargs
) -> Iterator[Tuple[Node, Any]]:
    """Traverse tree and collect specified data.

    Similar to traverse_tree but returns both nodes and collected data.

    Args:
        root: Starting node, or a tree to walk from its root
        data_requirement: What data to collect
        **kwargs: Additional traversal options (see traverse_tree)

    Returns:
        Iterator of (node, collected_data) tuples

    Example:
        >>> tree = NTree("root")
        >>> _ = tree.get_root().add("child")
        >>> [path for _, path in collect_tree_data(tree, DataRequirement.PATH)]
        [['root'], ['root', 'child']]
    """
    kwargs['data_requirement'] = data_requirement
    config = _build_config_from_kwargs(**kwargs)

    # The plan validates eagerly, before the first node is requested
    plan = ExecutionPlan(config)

    start = _resolve_root(root)
    if start is None:
        return iter(())
    return plan.execute(start)


def count_nodes(root: TreeLike, **kwargs) -> int:
    """Count nodes in a tree that match criteria.

    Args:
        root: Starting node, or a tree
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes that match criteria
    """
    count = 0
    for _ in traverse_tree(root, **kwargs):
        count += 1
    return count


def find_nodes(
    root: TreeLike,
    predicate: Callable[[Node], bool],
    **kwargs
) -> Iterator[Node]:
    """Find nodes that match a predicate.

    Args:
        root: Starting node, or a tree
        predicate: Function that returns True for matching nodes
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Iterator of nodes that match the predicate

    Example:
        >>> bst = BinarySearchTree([5, 3, 8, 1, 4, 9])
        >>> [n.get_value() for n in find_nodes(bst, lambda n: n.get_value() % 2 == 0)]
        [4, 8]
    """
    kwargs['include_filter'] = predicate
    return traverse_tree(root, **kwargs)


def get_tree_paths(root: TreeLike, **kwargs) -> Iterator[List[Any]]:
    """Get the value path from the starting node to each node.

    Args:
        root: Starting node, or a tree
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Iterator of value lists, starting node first
    """
    return (path for _, path in collect_tree_data(root, DataRequirement.PATH, **kwargs))


def get_leaf_nodes(root: TreeLike, **kwargs) -> Iterator[Node]:
    """Get all leaf nodes in a tree.

    Args:
        root: Starting node, or a tree
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Iterator of leaf nodes (nodes with no children)
    """
    return (node for node in traverse_tree(root, **kwargs) if node.is_leaf())


def get_tree_stats(root: TreeLike, **kwargs) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        root: Starting node, or a tree
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(BinaryTree(5, 3, 8))
        >>> stats['total_nodes'], stats['leaf_nodes'], stats['max_depth']
        (3, 2, 1)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'max_branching': 0,
        'depths': {}
    }
    total_children = 0

    for node, info in collect_tree_data(
        root,
        data_requirement=DataRequirement.CHILDREN_COUNT,
        **kwargs
    ):
        depth = info['depth']
        stats['total_nodes'] += 1

        if info['is_leaf']:
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['max_branching'] = max(stats['max_branching'], info['child_count'])
        total_children += info['child_count']

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['average_branching'] = (
        total_children / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats


# Helper functions

def _resolve_root(root: TreeLike) -> Optional[Node]:
    """Return the node a traversal should start from."""
    if isinstance(root, Tree):
        return root.get_root()
    return root


def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string

    Returns:
        TraversalStrategy enum value

    Raises:
        ValueError: If the name is not a known strategy
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
        'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'pre_order': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
        'depth_first_post': TraversalStrategy.DEPTH_FIRST_POST,
        'post_order': TraversalStrategy.DEPTH_FIRST_POST,
        'level': TraversalStrategy.LEVEL_ORDER,
        'level_order': TraversalStrategy.LEVEL_ORDER,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")


def _build_config_from_kwargs(**kwargs) -> TraversalConfig:
    """Build TraversalConfig from keyword arguments.

    Args:
        **kwargs: Configuration options

    Returns:
        TraversalConfig instance
    """
    config = TraversalConfig(depth=DepthConfig(), filter=FilterConfig())

    if 'strategy' in kwargs:
        config.strategy = _parse_strategy(kwargs.pop('strategy'))

    if 'max_depth' in kwargs:
        config.depth.max_depth = kwargs.pop('max_depth')

    if 'min_depth' in kwargs:
        config.depth.min_depth = kwargs.pop('min_depth')

    if 'include_filter' in kwargs:
        config.filter.include_filter = kwargs.pop('include_filter')

    if 'exclude_filter' in kwargs:
        config.filter.exclude_filter = kwargs.pop('exclude_filter')

    if 'data_requirement' in kwargs:
        config.data_requirements = kwargs.pop('data_requirement')

    # Apply any remaining kwargs directly
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)

    return config
