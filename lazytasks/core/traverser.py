"""Tree traversal strategies for lazytasks.

Traversers implement different algorithms for walking through trees.
They work with any TreeAdapter, making them independent of the node shape.
Both strategies keep an explicit work list instead of recursing, so deep
chains do not hit the interpreter's recursion limit.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Iterator, List, Optional, Union

from ..config import STRATEGY_ALIASES, TraversalStrategy
from .adapter import NodeAdapter, TreeAdapter

logger = logging.getLogger(__name__)


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers only read the tree. Each call to traverse() returns a fresh
    generator with its own work list, so two traversals of the same tree
    never share state.
    """

    def __init__(self, adapter: Optional[TreeAdapter] = None):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter for navigating the tree (defaults to NodeAdapter)
        """
        self.adapter = adapter or NodeAdapter()

    @abstractmethod
    def traverse(self, root: Any) -> Iterator[Any]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal

        Yields:
            Every node reachable from root, exactly once
        """
        pass


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children, and the first child's entire subtree
    before the second child's.
    """

    def traverse(self, root: Any) -> Iterator[Any]:
        """Traverse tree depth-first, pre-order.

        Children are pushed in reverse so the first child is popped next.
        """
        stack: List[Any] = [root]

        while stack:
            node = stack.pop()
            yield node

            # reversed() leaves the caller's children list untouched
            stack.extend(reversed(self.adapter.get_children(node)))


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N, left to right, before any node at
    depth N+1.
    """

    def traverse(self, root: Any) -> Iterator[Any]:
        """Traverse tree breadth-first.

        Uses a deque as a strict FIFO queue.
        """
        queue: Deque[Any] = deque([root])

        while queue:
            node = queue.popleft()
            yield node
            queue.extend(self.adapter.get_children(node))


_TRAVERSERS = {
    TraversalStrategy.DEPTH_FIRST_PRE: DepthFirstPreOrderTraverser,
    TraversalStrategy.BREADTH_FIRST: BreadthFirstTraverser,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or alias string (case-insensitive)

    Returns:
        TraversalStrategy enum value

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower not in STRATEGY_ALIASES:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(STRATEGY_ALIASES.keys())}"
        )
    return STRATEGY_ALIASES[strategy_lower]


# Factory function for creating traversers by name
def create_traverser(strategy: Union[TraversalStrategy, str],
                     adapter: Optional[TreeAdapter] = None) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or alias (dfs, dfs_pre, bfs, ...)
        adapter: TreeAdapter for the tree shape

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    traverser_cls = _TRAVERSERS[parse_strategy(strategy)]
    logger.debug("Selected %s for strategy %r", traverser_cls.__name__, strategy)
    return traverser_cls(adapter)
