"""Core abstractions for lazytasks.

This module contains the tree node record, the adapters that know how to
read children from a node, and the traversal strategies built on them.
"""

from .node import TreeNode
from .adapter import TreeAdapter, NodeAdapter, MappingAdapter, resolve_adapter
from .traverser import (
    TreeTraverser,
    DepthFirstPreOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
    parse_strategy,
)

__all__ = [
    "TreeNode",
    "TreeAdapter",
    "NodeAdapter",
    "MappingAdapter",
    "resolve_adapter",
    "TreeTraverser",
    "DepthFirstPreOrderTraverser",
    "BreadthFirstTraverser",
    "create_traverser",
    "parse_strategy",
]
