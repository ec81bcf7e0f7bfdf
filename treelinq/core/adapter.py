"""Source adapters for growing trees.

A SourceAdapter knows how to navigate some external recursive structure
(a directory, nested records, a parsed document). ``grow_tree`` uses it to
build a Tree without the source needing to know about TreeLinq.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Iterable, List, Optional

if TYPE_CHECKING:
    from .node import Tree

logger = logging.getLogger(__name__)


class SourceAdapter(ABC):
    """Abstract adapter for reading an external hierarchy.

    Subclasses must provide ``get_children``. ``get_value`` defaults to using
    the source object itself as the node value and ``order_children`` keeps
    the order the source reports.
    """

    @abstractmethod
    def get_children(self, source: Any) -> Iterable[Any]:
        """Get the child sources of the given source.

        Args:
            source: The parent source object

        Returns:
            Iterable of child source objects
        """
        pass

    def get_value(self, source: Any) -> Any:
        """Extract the node value for a source object."""
        return source

    def order_children(self, children: List[Any]) -> Iterable[Any]:
        """Reorder one level of child sources before they are grown."""
        return children


class FunctionAdapter(SourceAdapter):
    """Adapter built from plain callables.

    Args:
        read_children: Function(source) -> iterable of child sources
        read_value: Function(source) -> node value (identity if None)
        order_children: Function(list of child sources) -> reordered iterable
    """

    def __init__(self,
                 read_children: Callable[[Any], Iterable[Any]],
                 read_value: Optional[Callable[[Any], Any]] = None,
                 order_children: Optional[Callable[[List[Any]], Iterable[Any]]] = None):
        if read_children is None:
            raise TypeError("read_children is required")
        self.read_children = read_children
        self.read_value = read_value
        self.ordering = order_children

    def get_children(self, source: Any) -> Iterable[Any]:
        return self.read_children(source)

    def get_value(self, source: Any) -> Any:
        if self.read_value is None:
            return source
        return self.read_value(source)

    def order_children(self, children: List[Any]) -> Iterable[Any]:
        if self.ordering is None:
            return children
        return self.ordering(children)


def grow_tree(source: Any, adapter: SourceAdapter) -> 'Tree':
    """Build a Tree by recursively reading ``source`` through ``adapter``.

    Child order is whatever ``adapter.order_children`` returns, applied
    separately at every level.

    Args:
        source: Root of the external structure
        adapter: Adapter describing how to read it

    Returns:
        Root of the new tree
    """
    from .node import Tree

    def _grow_recursive(current: Any) -> 'Tree':
        result = Tree(adapter.get_value(current))
        children = list(adapter.get_children(current) or ())
        for child in adapter.order_children(children):
            result.add_child(_grow_recursive(child))
        return result

    tree = _grow_recursive(source)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Grew tree of %d nodes with %s", tree.count(), adapter.__class__.__name__)
    return tree


def grow(source: Any,
         read_children: Callable[[Any], Iterable[Any]],
         read_value: Optional[Callable[[Any], Any]] = None,
         order_children: Optional[Callable[[List[Any]], Iterable[Any]]] = None) -> 'Tree':
    """Build a Tree from plain callables. See ``Tree.grow``."""
    return grow_tree(source, FunctionAdapter(read_children, read_value, order_children))
