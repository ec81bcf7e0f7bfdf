"""TreeLinq - Queryable in-memory trees.

TreeLinq attaches collection-style queries (filter, map, aggregate, search)
directly to hierarchical data, so a tree can be used like a collection
without flattening it first.

    from treelinq import Tree

    tree = Tree("root", ["A", Tree("B", ["C"])])
    tree.where_by_value(lambda v: v != "root")   # ['A', 'B', 'C']
    tree.to_list_values_breadth_first()          # ['root', 'A', 'B', 'C']
"""

__version__ = "0.1.0"

from .core.node import Tree
from .core.adapter import SourceAdapter, FunctionAdapter, grow, grow_tree
from .core.traverser import (
    TreeTraverser,
    DepthFirstPreOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
)
from .core.collector import DataCollector, NodeCollector, ValueCollector, CustomCollector
from .core.query import TreeQuery
from .adapters.filesystem import FileSystemAdapter, FilteredFileSystemAdapter
from .config import TraversalConfig, TraversalStrategy, parse_strategy
from .exceptions import (
    TreeError,
    InvalidStateError,
    NotFoundError,
    MultipleMatchesError,
    TreeIndexError,
    GenerationRangeError,
    UnsupportedError,
)
from .api import (
    traverse_tree,
    count_nodes,
    find_nodes,
    get_tree_paths,
    get_leaf_nodes,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'Tree',
    'TreeQuery',
    'TreeTraverser',
    'DepthFirstPreOrderTraverser',
    'BreadthFirstTraverser',
    'create_traverser',
    'DataCollector',
    'NodeCollector',
    'ValueCollector',
    'CustomCollector',
    # Construction
    'SourceAdapter',
    'FunctionAdapter',
    'grow',
    'grow_tree',
    'FileSystemAdapter',
    'FilteredFileSystemAdapter',
    # Config
    'TraversalConfig',
    'TraversalStrategy',
    'parse_strategy',
    # Exceptions
    'TreeError',
    'InvalidStateError',
    'NotFoundError',
    'MultipleMatchesError',
    'TreeIndexError',
    'GenerationRangeError',
    'UnsupportedError',
    # API
    'traverse_tree',
    'count_nodes',
    'find_nodes',
    'get_tree_paths',
    'get_leaf_nodes',
    'get_tree_stats',
]
