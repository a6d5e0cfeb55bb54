"""lazytasks - lazy sequence producers and date helpers.

Generators for tree traversal (depth-first and breadth-first), the
Fibonacci sequence, the "99 Bottles of Beer" lyrics and merging two sorted
sequences, plus a handful of date/time helpers.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from lazytasks import TreeNode, depth_traversal_tree

    root = TreeNode(1, [TreeNode(2), TreeNode(3)])
    [node.payload for node in depth_traversal_tree(root)]   # [1, 2, 3]
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

# Core components
from .core.node import TreeNode
from .core.adapter import TreeAdapter, NodeAdapter, MappingAdapter
from .core.traverser import (
    TreeTraverser,
    DepthFirstPreOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
)

# Configuration
from .config import TraversalStrategy, FIBONACCI_TERMS

# Sequences
from .sequences import (
    get_99_bottles_of_beer,
    get_fibonacci_sequence,
    merge_sorted_sequences,
)

# Dates
from .dates import (
    ParseError,
    parse_rfc2822,
    parse_iso8601,
    is_leap_year,
    timespan_to_string,
    angle_between_clock_hands,
)

# High-level API
from .api import (
    depth_traversal_tree,
    breadth_traversal_tree,
    traverse_tree,
)

__all__ = [
    "__version__",
    # Core
    "TreeNode",
    "TreeAdapter",
    "NodeAdapter",
    "MappingAdapter",
    "TreeTraverser",
    "DepthFirstPreOrderTraverser",
    "BreadthFirstTraverser",
    "create_traverser",
    # Config
    "TraversalStrategy",
    "FIBONACCI_TERMS",
    # Sequences
    "get_99_bottles_of_beer",
    "get_fibonacci_sequence",
    "merge_sorted_sequences",
    # Dates
    "ParseError",
    "parse_rfc2822",
    "parse_iso8601",
    "is_leap_year",
    "timespan_to_string",
    "angle_between_clock_hands",
    # API
    "depth_traversal_tree",
    "breadth_traversal_tree",
    "traverse_tree",
]
