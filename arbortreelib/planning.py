"""Execution planning for ArborTreeLib.

The ExecutionPlan validates a TraversalConfig and coordinates the actual
traversal: it picks the traverser and collector, applies filters and
limits, and yields what was collected for each node.
"""

import logging
from typing import Any, Dict, Iterator, Tuple

from .config import DataRequirement, TraversalConfig, TraversalStrategy
from .core.collector import (
    ChildCountCollector,
    DataCollector,
    NodeCollector,
    PathCollector,
    ValueCollector,
)
from .core.errors import ConfigurationError
from .core.node import Node
from .core.traverser import TreeTraverser, create_traverser

logger = logging.getLogger(__name__)


class ExecutionPlan:
    """Validated execution plan for tree traversal.

    The ExecutionPlan is the bridge between user intent (TraversalConfig)
    and execution. Configuration problems are reported when the plan is
    built, before any node is visited.
    """

    def __init__(self, config: TraversalConfig):
        """Create and validate an execution plan.

        Args:
            config: User's traversal configuration

        Raises:
            ConfigurationError: If the configuration is inconsistent
        """
        self.config = config

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.traverser = self._select_traverser()
        self.collector = self._select_collector()

        # Track execution state
        self.nodes_processed = 0

        logger.debug(
            f"Execution plan ready: {self.traverser.__class__.__name__} "
            f"with {self.collector.__class__.__name__}"
        )

    def _select_traverser(self) -> TreeTraverser:
        """Select appropriate traverser based on configuration."""
        if self.config.strategy == TraversalStrategy.CUSTOM:
            return self.config.custom_traverser

        return create_traverser(self.config.strategy.value)

    def _select_collector(self) -> DataCollector:
        """Select appropriate data collector based on requirements."""
        if self.config.data_requirements == DataRequirement.CUSTOM:
            return self.config.custom_collector

        collector_map = {
            DataRequirement.VALUE: ValueCollector,
            DataRequirement.NODE: NodeCollector,
            DataRequirement.CHILDREN_COUNT: ChildCountCollector,
            DataRequirement.PATH: PathCollector,
        }

        return collector_map[self.config.data_requirements]()

    def _limit_reached(self, processed: int) -> bool:
        max_nodes = self.config.max_nodes
        return max_nodes is not None and processed >= max_nodes

    def execute(self, root: Node) -> Iterator[Tuple[Node, Any]]:
        """Execute the traversal plan.

        Every call starts a fresh traversal with its own node count, so
        several iterators from one plan can run side by side. The count of
        the most recently advanced iterator is mirrored in nodes_processed.

        Args:
            root: Root node to start traversal from

        Yields:
            Tuples of (node, collected_data)
        """
        processed = 0
        self.nodes_processed = 0
        depth_config = self.config.depth

        for node, depth in self.traverser.traverse(
            root,
            max_depth=depth_config.traversal_max_depth(),
            min_depth=depth_config.min_depth if depth_config.specific_depths is None else 0
        ):
            if not depth_config.should_yield(depth):
                continue

            if not self.config.filter.should_include(node):
                continue

            data = self.collector.collect(node, depth)
            processed += 1
            self.nodes_processed = processed
            yield (node, data)

            if self._limit_reached(processed):
                logger.warning(
                    f"Traversal stopped after {processed} nodes (max_nodes limit)"
                )
                break

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Useful for debugging and logging.

        Returns:
            Dictionary with plan details
        """
        return {
            'strategy': self.config.strategy.value,
            'data_requirements': self.config.data_requirements.value,
            'max_depth': self.config.depth.max_depth,
            'min_depth': self.config.depth.min_depth,
            'max_nodes': self.config.max_nodes,
            'traverser': self.traverser.__class__.__name__,
            'collector': self.collector.__class__.__name__,
        }
