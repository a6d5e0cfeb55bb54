"""High-level API for lazytasks tree traversal.

This module provides simple, functional interfaces for walking a tree.
These functions wrap the traverser classes for ease of use in simple cases,
and pick the right adapter from the shape of the root.
"""

from typing import Any, Iterator, Optional, Union

from .config import TraversalStrategy
from .core.adapter import TreeAdapter, resolve_adapter
from .core.traverser import (
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    create_traverser,
)


def depth_traversal_tree(root: Any, adapter: Optional[TreeAdapter] = None) -> Iterator[Any]:
    """Traverse a tree depth-first, pre-order.

    See https://en.wikipedia.org/wiki/Depth-first_search

    Args:
        root: Tree root (TreeNode, object with ``children``, or mapping)
        adapter: Tree adapter (defaults to one matching root's shape)

    Yields:
        Every node of the tree in pre-order

    Example:
        Given the tree (root = 1)::

                   1
                 / | \\
                2  6  7
               / \\     \\
              3   4     8
                  |
                  5

        depth_traversal_tree(node1) yields node1, node2, ..., node8.
    """
    traverser = DepthFirstPreOrderTraverser(adapter or resolve_adapter(root))
    yield from traverser.traverse(root)


def breadth_traversal_tree(root: Any, adapter: Optional[TreeAdapter] = None) -> Iterator[Any]:
    """Traverse a tree breadth-first.

    See https://en.wikipedia.org/wiki/Breadth-first_search

    Args:
        root: Tree root (TreeNode, object with ``children``, or mapping)
        adapter: Tree adapter (defaults to one matching root's shape)

    Yields:
        Every node of the tree, level by level, left to right

    Example:
        Given the tree (root = 1)::

                   1
                 / | \\
                2  3  4
               / \\     \\
              5   6     7
                  |
                  8

        breadth_traversal_tree(node1) yields node1, node2, ..., node8.
    """
    traverser = BreadthFirstTraverser(adapter or resolve_adapter(root))
    yield from traverser.traverse(root)


def traverse_tree(
    root: Any,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    adapter: Optional[TreeAdapter] = None,
) -> Iterator[Any]:
    """Simple interface for tree traversal with a named strategy.

    Args:
        root: Tree root
        strategy: TraversalStrategy or alias (dfs, dfs_pre, depth_first,
            depth_first_pre, bfs, breadth_first)
        adapter: Tree adapter (defaults to one matching root's shape)

    Returns:
        Iterator over the tree's nodes in the chosen order

    Raises:
        ValueError: If strategy name is not recognized. Raised at call
            time, not on first iteration.
    """
    traverser = create_traverser(strategy, adapter or resolve_adapter(root))
    return traverser.traverse(root)
