"""TreeNode record for lazytasks.

The TreeNode is intentionally kept simple - it's a data container holding a
payload and an ordered list of children. Navigation logic lives in the
TreeAdapter, so traversers can also walk trees built from plain dicts.
"""

from typing import Any, Iterable, List, Optional


class TreeNode:
    """A node in a caller-owned tree.

    Children are kept in declaration order; traversal order depends on it.
    A node with no children is a leaf - ``children=None`` and an empty list
    mean the same thing.

    Nodes compare and hash by identity, so two nodes carrying equal payloads
    remain distinct members of a set.

    Example:
        >>> leaf = TreeNode(2)
        >>> root = TreeNode(1, [leaf])
        >>> root.is_leaf(), leaf.is_leaf()
        (False, True)
    """

    __slots__ = ("payload", "children")

    def __init__(self, payload: Any = None, children: Optional[Iterable["TreeNode"]] = None):
        """Create a node.

        Args:
            payload: Opaque value carried by the node
            children: Ordered child nodes (None for a leaf)
        """
        self.payload = payload
        self.children: List[TreeNode] = list(children) if children else []

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return not self.children

    def add_child(self, child: "TreeNode") -> "TreeNode":
        """Append a child and return it, for building trees inline."""
        self.children.append(child)
        return child

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(payload={self.payload!r}, children={len(self.children)})"
