"""Data collection strategies for TreeLinq.

DataCollectors define what a query sees for each node. The same query
engine runs over nodes or over their values depending on the collector it
is given, so each operation is written once.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from .node import Tree


class DataCollector(ABC):
    """Abstract base class for node projections.

    A collector turns a visited node into the item that predicates,
    selectors and results deal with.
    """

    @abstractmethod
    def collect(self, node: 'Tree') -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from

        Returns:
            Collected data (type depends on collector)
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class NodeCollector(DataCollector):
    """Collects complete node objects."""

    def collect(self, node: 'Tree') -> 'Tree':
        """Return the node itself."""
        return node


class ValueCollector(DataCollector):
    """Collects the payload stored in each node."""

    def collect(self, node: 'Tree') -> Any:
        """Return node value."""
        return node.value


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows custom projections without subclassing.
    """

    def __init__(self, collect_func: Callable[['Tree'], Any]):
        """Initialize with custom collection function.

        Args:
            collect_func: Function(node) -> Any
        """
        self.collect_func = collect_func

    def collect(self, node: 'Tree') -> Any:
        """Use custom function to collect data."""
        return self.collect_func(node)

    def __repr__(self) -> str:
        return f"CustomCollector({self.collect_func!r})"


NODES = NodeCollector()
VALUES = ValueCollector()
