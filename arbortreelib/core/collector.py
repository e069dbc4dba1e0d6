"""Data collection strategies for ArborTreeLib.

DataCollectors define what information to extract from nodes during traversal.
This allows the same traversal to collect different data based on requirements.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from .node import Node


class DataCollector(ABC):
    """Abstract base class for data collection strategies.

    DataCollectors determine what information is extracted from each node
    during traversal. This separation allows the same traversal algorithm
    to be used for different purposes (e.g., collecting just values vs.
    the nodes themselves vs. their position in the tree).
    """

    @abstractmethod
    def collect(self, node: Node, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass

    @abstractmethod
    def requires_children(self) -> bool:
        """Check if this collector needs access to child nodes.

        Returns:
            True if collector needs child information
        """
        pass


class ValueCollector(DataCollector):
    """Collects only the stored values.

    Most memory-efficient collector and the one behind ``Tree.traverse``.
    """

    def collect(self, node: Node, depth: int) -> Any:
        """Return node value."""
        return node.get_value()

    def requires_children(self) -> bool:
        return False


class NodeCollector(DataCollector):
    """Collects the node objects themselves.

    Useful when you need to update values in place after traversal.
    """

    def collect(self, node: Node, depth: int) -> Node:
        return node

    def requires_children(self) -> bool:
        return False


class ChildCountCollector(DataCollector):
    """Collects nodes with child count information.

    Returns a dict with node info and number of immediate children.
    Useful for tree structure analysis.
    """

    def collect(self, node: Node, depth: int) -> Dict[str, Any]:
        """Return node info with child count."""
        child_count = sum(1 for _ in node.iter_children())

        return {
            'value': node.get_value(),
            'depth': depth,
            'child_count': child_count,
            'is_leaf': child_count == 0
        }

    def requires_children(self) -> bool:
        """Needs to count children."""
        return True


class PathCollector(DataCollector):
    """Collects the values on the path from the traversal root to each node.

    The path is rebuilt from parent references. Only ``depth`` steps are
    taken, so a traversal started on an inner node reports paths relative
    to that node rather than to the real root.
    """

    def collect(self, node: Node, depth: int) -> List[Any]:
        """Return values from traversal root down to node."""
        path = [node.get_value()]
        current: Optional[Node] = node

        for _ in range(depth):
            current = current.get_parent()
            if current is None:
                break
            path.append(current.get_value())

        path.reverse()
        return path

    def requires_children(self) -> bool:
        """No child access needed."""
        return False


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows custom data collection logic without subclassing.
    """

    def __init__(self,
                 collect_func: Callable[[Node, int], Any],
                 requires_children_func: Optional[Callable[[], bool]] = None):
        """Initialize with custom collection function.

        Args:
            collect_func: Function(node, depth) -> Any
            requires_children_func: Function() -> bool (default: returns False)
        """
        self.collect_func = collect_func
        self.requires_children_func = requires_children_func or (lambda: False)

    def collect(self, node: Node, depth: int) -> Any:
        """Use custom function to collect data."""
        return self.collect_func(node, depth)

    def requires_children(self) -> bool:
        """Use custom function to determine if children needed."""
        return self.requires_children_func()
