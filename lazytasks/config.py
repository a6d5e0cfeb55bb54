"""Configuration constants for lazytasks.

The producers here take no runtime configuration; these are the fixed
tunables and the traversal strategy names shared by the API and traversers.
"""

from enum import Enum


# Terms produced by get_fibonacci_sequence(): term(0) through
# term(38) = 39088169.
FIBONACCI_TERMS = 39


class TraversalStrategy(Enum):
    """How to traverse the tree.

    Only the two orders the library implements are listed.
    """
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    BREADTH_FIRST = "bfs"           # Level by level


# String aliases accepted wherever a strategy can be named
STRATEGY_ALIASES = {
    'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
    'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'depth_first': TraversalStrategy.DEPTH_FIRST_PRE,
    'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
}
