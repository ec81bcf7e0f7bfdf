"""Configuration system for TreeLinq.

This module defines how callers describe a traversal: which ordering to use
and which nodes to prune or filter along the way.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Union


class TraversalStrategy(Enum):
    """How to traverse the tree."""
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    BREADTH_FIRST = "bfs"           # Level by level


_STRATEGY_NAMES = {
    'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
    'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'depth_first': TraversalStrategy.DEPTH_FIRST_PRE,
    'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
    'level': TraversalStrategy.BREADTH_FIRST,
    'level_order': TraversalStrategy.BREADTH_FIRST,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string

    Returns:
        TraversalStrategy enum value

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in _STRATEGY_NAMES:
        return _STRATEGY_NAMES[strategy_lower]

    raise ValueError(
        f"Unknown traversal strategy: {strategy}. "
        f"Choose from: {', '.join(_STRATEGY_NAMES.keys())}"
    )


@dataclass
class TraversalConfig:
    """Complete configuration for a tree traversal.

    ``skip`` is handed to the traverser and prunes in depth-first order
    (the node and its subtree are not visited) but only suppresses the
    node itself in breadth-first order. ``include_filter`` is applied to
    whatever the traverser yields and never affects descent.
    """

    strategy: TraversalStrategy = TraversalStrategy.DEPTH_FIRST_PRE
    skip: Optional[Callable[[Any], bool]] = None
    include_filter: Optional[Callable[[Any], bool]] = None

    @classmethod
    def depth_first(cls, skip: Optional[Callable[[Any], bool]] = None) -> 'TraversalConfig':
        """Create config for a pre-order depth-first walk."""
        return cls(strategy=TraversalStrategy.DEPTH_FIRST_PRE, skip=skip)

    @classmethod
    def breadth_first(cls, skip: Optional[Callable[[Any], bool]] = None) -> 'TraversalConfig':
        """Create config for a level-order walk."""
        return cls(strategy=TraversalStrategy.BREADTH_FIRST, skip=skip)

    def should_include(self, node) -> bool:
        """Check if a yielded node passes the include filter."""
        if self.include_filter:
            return self.include_filter(node)
        return True

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if self.skip is not None and not callable(self.skip):
            errors.append("skip must be callable")

        if self.include_filter is not None and not callable(self.include_filter):
            errors.append("include_filter must be callable")

        return errors
