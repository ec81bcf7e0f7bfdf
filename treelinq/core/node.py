"""Tree node abstraction for TreeLinq.

A Tree is both a node and the subtree rooted at it: it owns a value, an
ordered list of children and a back-reference to its parent. Queries run
over the node and all of its descendants, so any node can be treated as a
collection without flattening it first.

The structure is not thread-safe. Concurrent mutation of one tree must be
serialised by the caller. Cycles are not detected: adding an ancestor as a
descendant is a caller error that makes traversal recurse forever.
"""

import copy
import logging
import pickle
from typing import (
    Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar, Union,
)

from ..config import TraversalStrategy
from ..exceptions import (
    GenerationRangeError, InvalidStateError, TreeIndexError, UnsupportedError,
)
from .adapter import SourceAdapter, grow, grow_tree
from .collector import NODES, VALUES
from .query import ChildOrdering, Predicate, Selector, TreeQuery
from .traverser import (
    BreadthFirstTraverser, DepthFirstPreOrderTraverser, SkipPredicate, create_traverser,
)

V = TypeVar('V')

logger = logging.getLogger(__name__)


def _spread(items: tuple) -> Iterable[Any]:
    """Expand a lone iterable argument; otherwise the arguments are the items."""
    if len(items) != 1:
        return items
    only = items[0]
    if only is None:
        return ()
    if isinstance(only, (Tree, str, bytes)) or not hasattr(only, '__iter__'):
        return items
    return only


_depth_first = DepthFirstPreOrderTraverser()
_breadth_first = BreadthFirstTraverser()


class Tree(Generic[V]):
    """A node in an ordered, in-memory tree.

    Args:
        value: Payload of this node. It is never reassigned.
        children: Optional iterable of child Trees or raw values. Raw values
            are wrapped in new nodes. A single Tree is taken as one child.

    Example:
        >>> tree = Tree("root", ["A", Tree("B", ["C"])])
        >>> tree.to_list_values_depth_first()
        ['root', 'A', 'B', 'C']
        >>> tree.count_by_value(lambda v: v < "C")
        2
    """

    def __init__(self, value: Optional[V] = None, children: Optional[Iterable[Any]] = None):
        self._value = value
        self._parent: Optional['Tree[V]'] = None
        self._children: List['Tree[V]'] = []

        if isinstance(children, Tree):
            self.add_child(children)
        elif children is not None:
            for child in children:
                if isinstance(child, Tree):
                    self.add_child(child)
                else:
                    self.add_child_by_value(child)

    # Stored links

    @property
    def value(self) -> V:
        return self._value

    @property
    def parent(self) -> Optional['Tree[V]']:
        """Parent node, or None for the root."""
        return self._parent

    @property
    def children(self) -> List['Tree[V]']:
        """Copy of the ordered child list."""
        return list(self._children)

    @property
    def children_values(self) -> List[V]:
        return [child._value for child in self._children]

    # Structural position

    @property
    def root(self) -> 'Tree[V]':
        """Topmost ancestor, found by following parent links."""
        tree = self
        while tree._parent is not None:
            tree = tree._parent
        return tree

    @property
    def is_root(self) -> bool:
        return self._parent is None

    @property
    def is_leaf(self) -> bool:
        return not self._children

    @property
    def has_children(self) -> bool:
        return bool(self._children)

    @property
    def is_first_child(self) -> bool:
        """True if this node is its parent's first child.

        Raises:
            InvalidStateError: If called on the root
        """
        if self.is_root:
            raise InvalidStateError("Root is not a child")
        return self._parent._children[0] is self

    @property
    def is_last_child(self) -> bool:
        """True if this node is its parent's last child.

        Raises:
            InvalidStateError: If called on the root
        """
        if self.is_root:
            raise InvalidStateError("Root is not a child")
        return self._parent._children[-1] is self

    @property
    def siblings(self) -> List['Tree[V]']:
        """Parent's other children, in order. Empty for the root."""
        if self.is_root:
            return []
        return [child for child in self._parent._children if child is not self]

    @property
    def sibling_values(self) -> List[V]:
        return [sibling._value for sibling in self.siblings]

    @property
    def has_siblings(self) -> bool:
        return not self.is_root and len(self._parent._children) > 1

    @property
    def next_sibling(self) -> 'Tree[V]':
        """The sibling directly after this node.

        Raises:
            InvalidStateError: If called on the root or on the last child
        """
        if self.is_root:
            raise InvalidStateError("Root can not be a sibling")
        if self.is_last_child:
            raise InvalidStateError("Can not move past last item")
        return self._parent._children[self._index_in_parent() + 1]

    @property
    def previous_sibling(self) -> 'Tree[V]':
        """The sibling directly before this node.

        Raises:
            InvalidStateError: If called on the root or on the first child
        """
        if self.is_root:
            raise InvalidStateError("Root can not be a sibling")
        if self.is_first_child:
            raise InvalidStateError("Can not move before first item")
        return self._parent._children[self._index_in_parent() - 1]

    @property
    def path(self) -> List['Tree[V]']:
        """Nodes from the root down to this node, both included."""
        result = []
        node = self
        while node is not None:
            result.append(node)
            node = node._parent
        result.reverse()
        return result

    @property
    def path_values(self) -> List[V]:
        return [node._value for node in self.path]

    def _index_in_parent(self) -> int:
        for index, child in enumerate(self._parent._children):
            if child is self:
                return index
        raise InvalidStateError("Node is not among its parent's children")

    def is_parent_of(self, tree: 'Tree[V]') -> bool:
        return tree._parent is self

    def is_child_of(self, tree: 'Tree[V]') -> bool:
        return self._parent is tree

    def is_sibling_of(self, tree: 'Tree[V]') -> bool:
        return any(sibling is tree for sibling in self.siblings)

    # Generations

    @property
    def generation_depth(self) -> int:
        """Number of parent hops to the root. The root is at depth 0."""
        depth = 0
        node = self._parent
        while node is not None:
            depth += 1
            node = node._parent
        return depth

    @property
    def generation_count(self) -> int:
        """One more than the deepest generation depth in this subtree."""

        def _height(node: 'Tree[V]') -> int:
            return 1 + max((_height(child) for child in node._children), default=0)

        return self.generation_depth + _height(self)

    @property
    def generations(self) -> List[List['Tree[V]']]:
        """Nodes grouped by generation depth, shallowest first."""
        return [self.get_generation(depth) for depth in range(self.generation_count)]

    def get_generation(self, depth: int) -> List['Tree[V]']:
        """Nodes at the given absolute depth, left to right.

        Depth 0 is always the structure's root. Deeper generations are
        collected from this node's subtree.
        """
        if depth == 0:
            return [self.root]

        result = []

        def _collect(node: 'Tree[V]') -> None:
            if node.generation_depth == depth:
                result.append(node)

        self.traverse_depth_first(_collect, skip=lambda node: node.generation_depth > depth)
        return result

    # Positional lookup

    def get_by_child_indexes_path(self, *indexes: int) -> 'Tree[V]':
        """Walk down from the root choosing a child by index at each level.

        Raises:
            TreeIndexError: If an index is outside that level's children
        """
        tree = self.root
        for index in indexes:
            if index < 0 or index >= len(tree._children):
                raise TreeIndexError(f"Index '{index}' out of range")
            tree = tree._children[index]
        return tree

    def get_by_generation_coordinates(self, depth: int, generation_index: int) -> 'Tree[V]':
        """Return the n-th node (left to right) of a generation.

        Raises:
            GenerationRangeError: If the generation does not exist
            TreeIndexError: If the generation has no node at that index
        """
        if depth < 0 or depth >= self.generation_count:
            raise GenerationRangeError(f"Generation depth '{depth}' out of range")

        generation = self.get_generation(depth)

        if generation_index < 0 or generation_index >= len(generation):
            raise TreeIndexError(f"Generation index '{generation_index}' out of range")

        return generation[generation_index]

    # Mutation

    def add_child(self, child: 'Tree[V]') -> 'Tree[V]':
        """Attach ``child`` as the last child of this node and return it.

        The child is not detached from any previous parent and no cycle
        check is made.
        """
        child._parent = self
        self._children.append(child)
        return child

    def add_child_by_value(self, value: V) -> 'Tree[V]':
        """Wrap ``value`` in a new node, attach it and return the node."""
        return self.add_child(Tree(value))

    def add_children(self, *children: Any) -> None:
        """Attach each node in order.

        Accepts either the nodes themselves or a single iterable of nodes.
        A lone ``Tree`` is one child, never the nodes of its subtree.
        ``None`` is a no-op.
        """
        for child in _spread(children):
            self.add_child(child)

    def add_children_by_values(self, *values: Any) -> None:
        """Wrap and attach each value in order.

        Accepts either the values themselves or a single iterable of values.
        A lone string is one value. ``None`` is a no-op.
        """
        for value in _spread(values):
            self.add_child_by_value(value)

    def remove_from_parent(self) -> None:
        """Detach this node. It becomes the root of its own subtree.

        Raises:
            InvalidStateError: If called on the root
        """
        if self.is_root:
            raise InvalidStateError("Can not remove root from parent")
        self._parent.remove_child(self)

    def remove_child(self, child: 'Tree[V]') -> None:
        """Remove ``child``, matched by identity first and then by equality.

        Does nothing if no child matches.
        """
        index = self._find_child(child)
        if index is None:
            return
        self._detach(self._children.pop(index))

    def remove_children(self,
                        selector: Union[Callable[['Tree[V]'], bool], Iterable['Tree[V]'], None] = None) -> None:
        """Remove several children at once.

        Args:
            selector: A predicate choosing children to remove, or an iterable
                of nodes to remove. ``None`` removes every child.
        """
        if selector is None:
            should_remove = lambda child: True  # noqa: E731
        elif callable(selector):
            should_remove = selector
        else:
            targets = list(selector)
            should_remove = lambda child: child in targets  # noqa: E731

        removed, kept = [], []
        for child in self._children:
            (removed if should_remove(child) else kept).append(child)
        self._children = kept
        for child in removed:
            self._detach(child)

    def remove_all_children(self) -> None:
        """Remove every child. Each removed child becomes a root."""
        for child in self._children:
            self._detach(child)
        self._children = []

    def _find_child(self, child: 'Tree[V]') -> Optional[int]:
        for index, candidate in enumerate(self._children):
            if candidate is child:
                return index
        for index, candidate in enumerate(self._children):
            if candidate == child:
                return index
        return None

    def _detach(self, child: 'Tree[V]') -> None:
        child._parent = None
        logger.debug("Detached %r from %r", child, self)

    # Traversal

    def traverse(self,
                 strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
                 skip: Optional[SkipPredicate] = None) -> Iterator['Tree[V]']:
        """Iterate over this subtree in the given order."""
        return create_traverser(strategy).traverse(self, skip)

    def traverse_depth_first(self,
                             action: Callable[['Tree[V]'], Any],
                             skip: Optional[SkipPredicate] = None) -> None:
        """Call ``action`` on each node in pre-order.

        A node for which ``skip`` is true is pruned together with its subtree.
        """
        Tree.traverse_tree_depth_first(self, action, skip)

    def traverse_breadth_first(self,
                               action: Callable[['Tree[V]'], Any],
                               skip: Optional[SkipPredicate] = None) -> None:
        """Call ``action`` on each node in level order.

        A node for which ``skip`` is true is passed over, but its children
        are still visited.
        """
        Tree.traverse_tree_breadth_first(self, action, skip)

    @staticmethod
    def traverse_tree_depth_first(tree: 'Tree',
                                  action: Callable[['Tree'], Any],
                                  skip: Optional[SkipPredicate] = None) -> None:
        for node in _depth_first.traverse(tree, skip):
            action(node)

    @staticmethod
    def traverse_tree_breadth_first(tree: 'Tree',
                                    action: Callable[['Tree'], Any],
                                    skip: Optional[SkipPredicate] = None) -> None:
        for node in _breadth_first.traverse(tree, skip):
            action(node)

    def to_list_depth_first(self, selector: Optional[Selector] = None) -> List[Any]:
        return self.nodes.to_list(selector)

    def to_list_values_depth_first(self, selector: Optional[Selector] = None) -> List[Any]:
        return self.values.to_list(selector)

    def to_list_breadth_first(self, selector: Optional[Selector] = None) -> List[Any]:
        return self.nodes.to_list(selector, TraversalStrategy.BREADTH_FIRST)

    def to_list_values_breadth_first(self, selector: Optional[Selector] = None) -> List[Any]:
        return self.values.to_list(selector, TraversalStrategy.BREADTH_FIRST)

    # Queries

    @property
    def nodes(self) -> TreeQuery:
        """Query engine over the nodes of this subtree."""
        return TreeQuery(self, NODES)

    @property
    def values(self) -> TreeQuery:
        """Query engine over the values of this subtree."""
        return TreeQuery(self, VALUES)

    def where(self, predicate: Predicate) -> List['Tree[V]']:
        return self.nodes.where(predicate)

    def where_by_value(self, predicate: Predicate) -> List[V]:
        return self.values.where(predicate)

    def count(self, predicate: Optional[Predicate] = None) -> int:
        """Number of nodes in this subtree, or of those matching ``predicate``."""
        return self.nodes.count(predicate)

    def count_by_value(self, predicate: Predicate) -> int:
        return self.values.count(predicate)

    def any(self, predicate: Predicate) -> bool:
        return self.nodes.any(predicate)

    def any_by_value(self, predicate: Predicate) -> bool:
        return self.values.any(predicate)

    def all(self, predicate: Predicate) -> bool:
        return self.nodes.all(predicate)

    def all_by_value(self, predicate: Predicate) -> bool:
        return self.values.all(predicate)

    def contains(self, tree: 'Tree[V]') -> bool:
        """True if a node equal to ``tree`` is in this subtree."""
        return self.nodes.contains(tree)

    def contains_by_value(self, value: V) -> bool:
        return self.values.contains(value)

    def sum(self, selector: Selector) -> Any:
        return self.nodes.sum(selector)

    def sum_by_value(self, selector: Optional[Selector] = None) -> Any:
        return self.values.sum(selector)

    def max(self, selector: Selector) -> Any:
        return self.nodes.max(selector)

    def max_by_value(self, selector: Optional[Selector] = None) -> Any:
        return self.values.max(selector)

    def min(self, selector: Selector) -> Any:
        return self.nodes.min(selector)

    def min_by_value(self, selector: Optional[Selector] = None) -> Any:
        return self.values.min(selector)

    def average(self, selector: Selector) -> Any:
        return self.nodes.average(selector)

    def average_by_value(self, selector: Optional[Selector] = None) -> Any:
        return self.values.average(selector)

    def first(self, predicate: Predicate) -> 'Tree[V]':
        return self.nodes.first(predicate)

    def first_by_value(self, predicate: Predicate) -> V:
        return self.values.first(predicate)

    def first_or_default(self, predicate: Predicate, default: Any = None) -> Optional['Tree[V]']:
        return self.nodes.first_or_default(predicate, default)

    def first_or_default_by_value(self, predicate: Predicate, default: Any = None) -> Optional[V]:
        return self.values.first_or_default(predicate, default)

    def single(self, predicate: Predicate) -> 'Tree[V]':
        return self.nodes.single(predicate)

    def single_by_value(self, predicate: Predicate) -> V:
        return self.values.single(predicate)

    def single_or_default(self, predicate: Predicate, default: Any = None) -> Optional['Tree[V]']:
        return self.nodes.single_or_default(predicate, default)

    def single_or_default_by_value(self, predicate: Predicate, default: Any = None) -> Optional[V]:
        return self.values.single_or_default(predicate, default)

    def select(self, selector: Selector, order_children: Optional[ChildOrdering] = None) -> 'Tree':
        """New tree of the same shape with ``selector`` applied to each node."""
        return self.nodes.select(selector, order_children)

    def select_by_value(self, selector: Selector, order_children: Optional[ChildOrdering] = None) -> 'Tree':
        """New tree of the same shape with ``selector`` applied to each value.

        ``order_children`` still receives nodes, so ordering can look at
        anything about the subtree.
        """
        return self.values.select(selector, order_children)

    # Construction

    @staticmethod
    def grow(source: Any,
             read_children: Callable[[Any], Iterable[Any]],
             read_value: Optional[Callable[[Any], Any]] = None,
             order_children: Optional[Callable[[List[Any]], Iterable[Any]]] = None) -> 'Tree':
        """Build a tree from any recursive structure.

        Args:
            source: Root of the external structure
            read_children: Function(source) -> iterable of child sources
            read_value: Function(source) -> node value; identity if None
            order_children: Function(list of child sources) -> reordered
                iterable, applied separately at every level

        Example:
            >>> Tree.grow(Path("."), lambda p: [c for c in p.iterdir() if c.is_dir()],
            ...           read_value=lambda p: p.name, order_children=sorted)
        """
        return grow(source, read_children, read_value, order_children)

    @staticmethod
    def grow_from_adapter(source: Any, adapter: SourceAdapter) -> 'Tree':
        return grow_tree(source, adapter)

    def clone(self, copier: Optional[Callable[[V], V]] = None) -> 'Tree[V]':
        """Deep copy of this subtree. The copy is a new root.

        Args:
            copier: Function duplicating one value; ``copy.deepcopy`` if None

        Raises:
            UnsupportedError: If a value can not be duplicated
        """
        copier = copier or copy.deepcopy

        def _clone_recursive(node: 'Tree[V]') -> 'Tree[V]':
            try:
                value = copier(node._value)
            except (TypeError, copy.Error, pickle.PickleError) as e:
                raise UnsupportedError(
                    f"Tree value type '{type(node._value).__qualname__}' can not be duplicated"
                ) from e
            result = node.__class__.__new__(node.__class__)
            Tree.__init__(result, value)
            for child in node._children:
                result.add_child(_clone_recursive(child))
            return result

        clone = _clone_recursive(self)
        logger.debug("Cloned %r", self)
        return clone

    def __deepcopy__(self, memo):
        return self.clone(lambda value: copy.deepcopy(value, memo))

    # Python protocols

    def __iter__(self) -> Iterator['Tree[V]']:
        """Iterate over this subtree depth-first, pre-order."""
        return _depth_first.traverse(self)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, tree: object) -> bool:
        return self.contains(tree)

    def __eq__(self, other: object) -> bool:
        """Trees are equal when values and ordered children are equal."""
        if not isinstance(other, Tree):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._value == other._value
            and self._children == other._children
        )

    def __hash__(self) -> int:
        return hash((self._value, tuple(self._children)))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r}, children={len(self._children)})"
