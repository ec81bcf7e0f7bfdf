"""Core abstractions for TreeLinq.

This package contains the Tree node and the traversal, projection, query
and source-adapter building blocks it is made of.
"""

from .node import Tree
from .adapter import SourceAdapter, FunctionAdapter, grow_tree
from .traverser import TreeTraverser, DepthFirstPreOrderTraverser, BreadthFirstTraverser
from .collector import DataCollector, NodeCollector, ValueCollector, CustomCollector
from .query import TreeQuery

__all__ = [
    "Tree",
    "SourceAdapter",
    "FunctionAdapter",
    "grow_tree",
    "TreeTraverser",
    "DepthFirstPreOrderTraverser",
    "BreadthFirstTraverser",
    "DataCollector",
    "NodeCollector",
    "ValueCollector",
    "CustomCollector",
    "TreeQuery",
]
