"""TreeAdapter abstraction for lazytasks.

The adapter provides the navigation logic for a specific node shape,
decoupling the node representation from the traversal mechanism. Two shapes
are supported out of the box: objects with a ``children`` attribute (such as
TreeNode) and mappings with an optional ``"children"`` key.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Sequence


class TreeAdapter(ABC):
    """Abstract adapter for navigating a specific kind of node.

    Traversers only ever ask an adapter for a node's children, so an
    adapter is all it takes to walk a new tree shape.
    """

    @abstractmethod
    def get_children(self, node: Any) -> Sequence[Any]:
        """Get the ordered children of the given node.

        The returned sequence must preserve declaration order and must not
        be mutated by the caller. Leaves return an empty sequence.

        Args:
            node: The parent node

        Returns:
            Sequence of child nodes, possibly empty
        """
        pass

    def is_leaf(self, node: Any) -> bool:
        """Check if the node has no children.

        Default implementation asks get_children().
        """
        return not self.get_children(node)


class NodeAdapter(TreeAdapter):
    """Adapter for objects exposing a ``children`` attribute.

    Works with TreeNode and with any ad-hoc object whose ``children`` is
    either missing, None, or an ordered sequence.
    """

    def get_children(self, node: Any) -> Sequence[Any]:
        return getattr(node, "children", None) or ()


class MappingAdapter(TreeAdapter):
    """Adapter for dict-shaped nodes like ``{"n": 1, "children": [...]}``.

    Leaf mappings usually omit the ``children`` key entirely.
    """

    def get_children(self, node: Mapping) -> Sequence[Any]:
        return node.get("children") or ()


def resolve_adapter(root: Any) -> TreeAdapter:
    """Pick the adapter matching the shape of ``root``.

    Args:
        root: Tree root supplied by the caller

    Returns:
        MappingAdapter for mappings, NodeAdapter for everything else
    """
    if isinstance(root, Mapping):
        return MappingAdapter()
    return NodeAdapter()
