"""Unit tests for edge cases in tree traversal.

Tests unusual shapes and boundary cases: single nodes, chains, empty and
missing children, and ad-hoc node objects.
"""

import unittest
import sys
from pathlib import Path
from types import SimpleNamespace

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lazytasks import (
    TreeNode,
    NodeAdapter,
    MappingAdapter,
    depth_traversal_tree,
    breadth_traversal_tree,
)
from lazytasks.core.adapter import resolve_adapter

PRODUCERS = (depth_traversal_tree, breadth_traversal_tree)


def all_nodes(root):
    """Collect every node reachable from root, by identity."""
    found = []
    pending = [root]
    while pending:
        node = pending.pop()
        found.append(node)
        pending.extend(node.children)
    return found


class TestSmallTrees(unittest.TestCase):
    """Test the smallest possible trees."""

    def test_single_node(self):
        """Test a lone root produces just itself."""
        root = TreeNode("only")
        for producer in PRODUCERS:
            with self.subTest(producer=producer.__name__):
                self.assertEqual(list(producer(root)), [root])

    def test_single_mapping_without_children_key(self):
        """Test a leaf dict with no children key."""
        root = {"n": 1}
        for producer in PRODUCERS:
            with self.subTest(producer=producer.__name__):
                self.assertEqual(list(producer(root)), [root])

    def test_empty_and_none_children_are_leaves(self):
        """Test None and [] children both mean leaf."""
        empty = {"n": 2, "children": []}
        missing = {"n": 3, "children": None}
        root = {"n": 1, "children": [empty, missing]}
        for producer in PRODUCERS:
            with self.subTest(producer=producer.__name__):
                self.assertEqual([node["n"] for node in producer(root)], [1, 2, 3])


class TestChains(unittest.TestCase):
    """Test trees that degenerate into one branch."""

    def test_deep_chain(self):
        """Test a chain deeper than the recursion limit."""
        depth = sys.getrecursionlimit() + 100
        root = TreeNode(0)
        current = root
        for i in range(1, depth):
            current = current.add_child(TreeNode(i))

        for producer in PRODUCERS:
            with self.subTest(producer=producer.__name__):
                payloads = [node.payload for node in producer(root)]
                self.assertEqual(payloads, list(range(depth)))

    def test_left_leaning_chain_with_leaves(self):
        """Test a spine where each level also has one leaf on the right."""
        root = TreeNode("s0")
        spine = root
        for i in range(1, 4):
            next_spine = TreeNode(f"s{i}")
            spine.children = [next_spine, TreeNode(f"l{i}")]
            spine = next_spine

        self.assertEqual(
            [node.payload for node in depth_traversal_tree(root)],
            ["s0", "s1", "s2", "s3", "l3", "l2", "l1"],
        )
        self.assertEqual(
            [node.payload for node in breadth_traversal_tree(root)],
            ["s0", "s1", "l1", "s2", "l2", "s3", "l3"],
        )


class TestVisitEveryNodeOnce(unittest.TestCase):
    """Test both strategies produce each node exactly once."""

    def test_equal_payloads_stay_distinct(self):
        """Test identical payloads do not collapse into one node."""
        root = TreeNode("x", [TreeNode("x"), TreeNode("x", [TreeNode("x")])])
        expected = all_nodes(root)

        for producer in PRODUCERS:
            with self.subTest(producer=producer.__name__):
                produced = list(producer(root))
                self.assertEqual(len(produced), 4)
                self.assertEqual(set(map(id, produced)), set(map(id, expected)))

    def test_bushy_tree(self):
        """Test a tree with varying fan-out."""
        root = TreeNode(0)
        counter = 1
        frontier = [root]
        for fan_out in (3, 2, 4):
            next_frontier = []
            for parent in frontier:
                for _ in range(fan_out):
                    next_frontier.append(parent.add_child(TreeNode(counter)))
                    counter += 1
            frontier = next_frontier

        for producer in PRODUCERS:
            with self.subTest(producer=producer.__name__):
                produced = [node.payload for node in producer(root)]
                self.assertEqual(sorted(produced), list(range(counter)))


class TestAdapters(unittest.TestCase):
    """Test adapter selection and ad-hoc node objects."""

    def test_resolve_adapter(self):
        """Test mapping roots get MappingAdapter, others NodeAdapter."""
        self.assertIsInstance(resolve_adapter({"n": 1}), MappingAdapter)
        self.assertIsInstance(resolve_adapter(TreeNode(1)), NodeAdapter)

    def test_object_without_children_attribute(self):
        """Test plain objects with and without a children attribute."""
        leaf = SimpleNamespace(n=2)
        root = SimpleNamespace(n=1, children=(leaf,))
        self.assertEqual([node.n for node in depth_traversal_tree(root)], [1, 2])
        self.assertEqual([node.n for node in breadth_traversal_tree(root)], [1, 2])

    def test_adapter_is_leaf(self):
        """Test the default is_leaf implementation."""
        adapter = NodeAdapter()
        self.assertTrue(adapter.is_leaf(TreeNode(1)))
        self.assertFalse(adapter.is_leaf(TreeNode(1, [TreeNode(2)])))

    def test_tree_node_basics(self):
        """Test TreeNode construction copies the children iterable."""
        kids = [TreeNode(2)]
        node = TreeNode(1, kids)
        kids.append(TreeNode(3))

        self.assertEqual(len(node.children), 1)
        self.assertFalse(node.is_leaf())
        self.assertTrue(TreeNode(1, None).is_leaf())
        self.assertIn("payload=1", repr(node))


if __name__ == "__main__":
    unittest.main()
