"""High-level API for TreeLinq.

This module provides simple, functional interfaces for common traversal
operations. These functions wrap the Tree methods and traversers for
callers who prefer free functions or a TraversalConfig.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Union

from .config import TraversalConfig, TraversalStrategy, parse_strategy
from .core.node import Tree
from .core.traverser import create_traverser


def traverse_tree(
    root: Tree,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    skip: Optional[Callable[[Tree], bool]] = None,
    include_filter: Optional[Callable[[Tree], bool]] = None,
    config: Optional[TraversalConfig] = None,
) -> Iterator[Tree]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node for traversal
        strategy: Traversal strategy (dfs, dfs_pre, bfs, level)
        skip: Prune predicate handed to the traverser
        include_filter: Function to determine if a visited node is yielded
        config: Complete configuration; overrides the other options

    Yields:
        Tree nodes that match the criteria

    Raises:
        ValueError: If the configuration is invalid

    Example:
        >>> for node in traverse_tree(tree, "bfs", skip=lambda n: n.value == "B"):
        ...     print(node.value)
    """
    if config is None:
        config = TraversalConfig(
            strategy=parse_strategy(strategy),
            skip=skip,
            include_filter=include_filter,
        )

    config_errors = config.validate()
    if config_errors:
        raise ValueError(f"Invalid configuration: {'; '.join(config_errors)}")

    traverser = create_traverser(config.strategy)
    for node in traverser.traverse(root, config.skip):
        if config.should_include(node):
            yield node


def count_nodes(root: Tree, **kwargs) -> int:
    """Count nodes in a tree that match criteria.

    Args:
        root: Starting node for traversal
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes that match criteria
    """
    count = 0
    for _ in traverse_tree(root, **kwargs):
        count += 1
    return count


def find_nodes(root: Tree, predicate: Callable[[Tree], bool], **kwargs) -> Iterator[Tree]:
    """Find nodes that match a predicate.

    Args:
        root: Starting node for traversal
        predicate: Function that returns True for matching nodes
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Nodes that match the predicate
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(root, **kwargs)


def get_tree_paths(root: Tree, **kwargs) -> Iterator[List[Any]]:
    """Get value paths from the structure root to each visited node.

    Yields:
        Lists of values, root value first
    """
    for node in traverse_tree(root, **kwargs):
        yield node.path_values


def get_leaf_nodes(root: Tree, **kwargs) -> Iterator[Tree]:
    """Get all leaf nodes in a tree."""
    for node in traverse_tree(root, **kwargs):
        if node.is_leaf:
            yield node


def get_tree_stats(root: Tree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Depths are relative to ``root``.

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"Total nodes: {stats['total_nodes']}")
        >>> print(f"Leaf nodes: {stats['leaf_nodes']}")
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    level = [root]
    depth = 0
    while level:
        stats['max_depth'] = depth
        stats['depths'][depth] = len(level)

        for node in level:
            stats['total_nodes'] += 1
            if node.is_leaf:
                stats['leaf_nodes'] += 1

        level = [child for node in level for child in node.children]
        depth += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats
