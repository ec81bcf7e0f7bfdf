"""Query and aggregate engine for TreeLinq.

TreeQuery runs every filter, search and aggregate over "self and all
descendants" of one node. What the operations see for each node is decided
by a DataCollector, so a node query and a value query share one
implementation:

    >>> tree.nodes.where(lambda n: n.is_leaf)
    >>> tree.values.sum()
"""

from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator, List, Optional, Union

from ..config import TraversalStrategy
from ..exceptions import MultipleMatchesError, NotFoundError
from .collector import DataCollector
from .traverser import DepthFirstPreOrderTraverser, create_traverser

if TYPE_CHECKING:
    from .node import Tree

Predicate = Callable[[Any], bool]
Selector = Callable[[Any], Any]
ChildOrdering = Callable[[List['Tree']], Iterable['Tree']]

NO_MATCH_MESSAGE = "no matching element"
MULTIPLE_MATCH_MESSAGE = "more than one matching element"

_pre_order = DepthFirstPreOrderTraverser()


class TreeQuery:
    """Query engine bound to a subtree and a projection.

    Args:
        tree: Node the queries are rooted at
        collector: Projection applied to each visited node
    """

    def __init__(self, tree: 'Tree', collector: DataCollector):
        self.tree = tree
        self.collector = collector

    def __repr__(self) -> str:
        return f"TreeQuery({self.tree!r}, {self.collector!r})"

    def __iter__(self) -> Iterator[Any]:
        return self._iter_items()

    def _iter_items(self) -> Iterator[Any]:
        collect = self.collector.collect
        for node in _pre_order.traverse(self.tree):
            yield collect(node)

    def _selected(self, selector: Optional[Selector]) -> List[Any]:
        items = self._iter_items()
        if selector is None:
            return list(items)
        return [selector(item) for item in items]

    # Flattening

    def to_list(self,
                selector: Optional[Selector] = None,
                strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE) -> List[Any]:
        """Flatten the subtree in the given order, optionally projecting each item."""
        collect = self.collector.collect
        items = [collect(node) for node in create_traverser(strategy).traverse(self.tree)]
        if selector is None:
            return items
        return [selector(item) for item in items]

    # Filtering and counting

    def where(self, predicate: Predicate) -> List[Any]:
        """Return matching items in depth-first pre-order."""
        return [item for item in self._iter_items() if predicate(item)]

    def count(self, predicate: Optional[Predicate] = None) -> int:
        """Count items in the subtree, or only those matching predicate."""
        if predicate is None:
            return sum(1 for _ in _pre_order.traverse(self.tree))
        return sum(1 for item in self._iter_items() if predicate(item))

    def any(self, predicate: Predicate) -> bool:
        """True if at least one item matches. Stops at the first match."""
        return any(predicate(item) for item in self._iter_items())

    def all(self, predicate: Predicate) -> bool:
        """True if every item matches. Stops at the first mismatch."""
        return all(predicate(item) for item in self._iter_items())

    def contains(self, item: Any) -> bool:
        """True if an item equal to ``item`` is in the subtree."""
        return self.any(lambda candidate: candidate == item)

    # Numeric aggregates

    def sum(self, selector: Optional[Selector] = None) -> Any:
        """Sum the selected numbers over the whole subtree."""
        return sum(self._selected(selector))

    def max(self, selector: Optional[Selector] = None) -> Any:
        """Largest selected number in the subtree."""
        return max(self._selected(selector))

    def min(self, selector: Optional[Selector] = None) -> Any:
        """Smallest selected number in the subtree."""
        return min(self._selected(selector))

    def average(self, selector: Optional[Selector] = None) -> Any:
        """Arithmetic mean of the selected numbers.

        Uses true division, so integer selectors give a float while
        Decimal and Fraction selectors keep their own type.
        """
        values = self._selected(selector)
        return sum(values) / len(values)

    # Element retrieval

    def first(self, predicate: Predicate) -> Any:
        """Return the first match in depth-first pre-order.

        Raises:
            NotFoundError: If nothing matches
        """
        for item in self._iter_items():
            if predicate(item):
                return item
        raise NotFoundError(NO_MATCH_MESSAGE)

    def first_or_default(self, predicate: Predicate, default: Any = None) -> Any:
        """Like first, but return ``default`` when nothing matches."""
        for item in self._iter_items():
            if predicate(item):
                return item
        return default

    def single(self, predicate: Predicate) -> Any:
        """Return the only matching item.

        Raises:
            NotFoundError: If nothing matches
            MultipleMatchesError: If more than one item matches
        """
        found = self._find_single(predicate)
        if not found:
            raise NotFoundError(NO_MATCH_MESSAGE)
        return found[0]

    def single_or_default(self, predicate: Predicate, default: Any = None) -> Any:
        """Like single, but return ``default`` when nothing matches.

        Raises:
            MultipleMatchesError: If more than one item matches
        """
        found = self._find_single(predicate)
        if not found:
            return default
        return found[0]

    def _find_single(self, predicate: Predicate) -> List[Any]:
        found = []
        for item in self._iter_items():
            if predicate(item):
                if found:
                    raise MultipleMatchesError(MULTIPLE_MATCH_MESSAGE)
                found.append(item)
        return found

    # Projection

    def select(self,
               selector: Selector,
               order_children: Optional[ChildOrdering] = None) -> 'Tree':
        """Build a new tree of the same shape with every item projected.

        Args:
            selector: Function applied to each collected item
            order_children: Optional function reordering each node's children
                before they are projected; it sees one level at a time

        Returns:
            Root of the new tree
        """
        from .node import Tree

        collect = self.collector.collect

        def _select_recursive(node: 'Tree') -> 'Tree':
            result = Tree(selector(collect(node)))
            children = node.children
            if order_children is not None:
                children = list(order_children(children))
            for child in children:
                result.add_child(_select_recursive(child))
            return result

        return _select_recursive(self.tree)
