"""Configuration system for ZNodeTreeLib.

This module defines how callers pick a traversal strategy and whether
watches should be registered while walking a subtree.
"""

from dataclasses import dataclass
from enum import Enum


PATH_SEPARATOR = "/"   # Delimiter between path components; also the root
ANY_VERSION = -1       # Version number that disables the version check


class TraversalStrategy(Enum):
    """How to walk a subtree.

    Different strategies give different visiting orders.
    """
    BREADTH_FIRST = "bfs"           # Level by level, remote child order
    DEPTH_FIRST_PRE = "dfs_pre"     # Sorted siblings before grandchildren

    @classmethod
    def from_string(cls, value: str) -> "TraversalStrategy":
        """Look up a strategy by its short name ('bfs', 'dfs_pre').

        Raises:
            ValueError: If no strategy has that name
        """
        for strategy in cls:
            if strategy.value == value:
                return strategy
        raise ValueError(f"Unknown strategy: {value}")


@dataclass
class TraversalConfig:
    """Configuration for a subtree walk."""

    strategy: TraversalStrategy = TraversalStrategy.BREADTH_FIRST
    watch: bool = False  # Ask the service to register watches while walking

    def validate(self) -> None:
        """Check the configuration is internally consistent.

        Raises:
            ValueError: If the configuration cannot be honoured
        """
        if not isinstance(self.strategy, TraversalStrategy):
            raise ValueError(f"strategy must be a TraversalStrategy, got {self.strategy!r}")
        if self.watch and self.strategy is TraversalStrategy.BREADTH_FIRST:
            # The BFS lister never registers watches
            raise ValueError("watch is only supported with DEPTH_FIRST_PRE traversal")

    @classmethod
    def breadth_first(cls) -> "TraversalConfig":
        """Create config for a level-order listing."""
        return cls(strategy=TraversalStrategy.BREADTH_FIRST)

    @classmethod
    def depth_first(cls, watch: bool = False) -> "TraversalConfig":
        """Create config for a depth-first visit."""
        return cls(strategy=TraversalStrategy.DEPTH_FIRST_PRE, watch=watch)
