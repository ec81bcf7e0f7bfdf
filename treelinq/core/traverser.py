"""Tree traversal strategies for TreeLinq.

Traversers implement the two orderings every query is built on. They walk
the stored child links directly and never mutate the tree.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Iterator, List, Optional, Union

from ..config import TraversalStrategy, parse_strategy

if TYPE_CHECKING:
    from .node import Tree

SkipPredicate = Callable[['Tree'], bool]


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers implement the algorithms for walking through trees in
    different orders. The optional ``skip`` predicate is evaluated once per
    node; what skipping means depends on the strategy.
    """

    @abstractmethod
    def traverse(self,
                 root: 'Tree',
                 skip: Optional[SkipPredicate] = None) -> Iterator['Tree']:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            skip: Predicate selecting nodes that must not be visited

        Yields:
            Visited nodes in traversal order
        """
        pass

    def _is_skipped(self, node: 'Tree', skip: Optional[SkipPredicate]) -> bool:
        return skip is not None and bool(skip(node))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children, children left to right, finishing each
    child's subtree before the next sibling. A skipped node is pruned: neither
    it nor any of its descendants is visited.
    """

    def traverse(self,
                 root: 'Tree',
                 skip: Optional[SkipPredicate] = None) -> Iterator['Tree']:
        """Traverse tree depth-first, pre-order.

        Uses recursion (via generator) for natural depth-first behavior.
        """

        def _traverse_recursive(node: 'Tree') -> Iterator['Tree']:
            if self._is_skipped(node, skip):
                return

            # Yield parent first (pre-order)
            yield node

            for child in node.children:
                yield from _traverse_recursive(child)

        yield from _traverse_recursive(root)


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1, each
    level left to right across all parents. A skipped node is only left out
    of the output; its children are still enumerated for the next level.
    """

    def traverse(self,
                 root: 'Tree',
                 skip: Optional[SkipPredicate] = None) -> Iterator['Tree']:
        """Traverse tree level by level."""
        current_level: List['Tree'] = [root]

        while current_level:
            next_level: List['Tree'] = []

            for node in current_level:
                if not self._is_skipped(node, skip):
                    yield node

                # Children are collected even for skipped nodes
                next_level.extend(node.children)

            current_level = next_level


def create_traverser(strategy: Union[TraversalStrategy, str]) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or its name (dfs, dfs_pre, bfs, level, ...)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        TraversalStrategy.DEPTH_FIRST_PRE: DepthFirstPreOrderTraverser,
        TraversalStrategy.BREADTH_FIRST: BreadthFirstTraverser,
    }
    return strategies[parse_strategy(strategy)]()
