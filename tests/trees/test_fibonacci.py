"""Tests for the Fibonacci tree"""
# pylint: skip-file

import random
import unittest

from dsviz.tree_stats import tree_stats
from dsviz.trees import build_fibonacci_tree, generate_random_depth, node_count, tree_height
from dsviz.trees.fibonacci import MAX_RANDOM_DEPTH, MIN_RANDOM_DEPTH


class TestFibonacciTree(unittest.TestCase):

    def test_small_depths_are_leaves(self):
        for depth in (-1, 0, 1):
            root = build_fibonacci_tree(depth)
            self.assertEqual(root.value, 1)
            self.assertEqual(root.children, [])

    def test_node_values_are_sums_of_children(self):
        root = build_fibonacci_tree(6)
        stack = [root]
        while stack:
            node = stack.pop()
            if node.children:
                self.assertEqual(node.value, node.left.value + node.right.value)
                stack.extend(node.children)

    def test_root_values(self):
        expected = {2: 2, 3: 3, 4: 5, 5: 8, 6: 13, 10: 89}
        for depth, value in expected.items():
            self.assertEqual(build_fibonacci_tree(depth).value, value, f"depth={depth}")

    def test_shape(self):
        root = build_fibonacci_tree(5)
        self.assertEqual(tree_height(root), 5)
        self.assertEqual(node_count(root), 15)
        self.assertEqual(tree_height(root.left), 4)
        self.assertEqual(tree_height(root.right), 3)

    def test_is_balanced_but_not_search_tree(self):
        stats = tree_stats(build_fibonacci_tree(7))
        self.assertTrue(stats.is_balanced)
        self.assertFalse(stats.is_search_tree)

    def test_random_depth_range(self):
        rng = random.Random(0)
        depths = {generate_random_depth(rng) for _ in range(200)}
        self.assertTrue(depths <= set(range(MIN_RANDOM_DEPTH, MAX_RANDOM_DEPTH + 1)))
        self.assertGreater(len(depths), 1)


if __name__ == "__main__":
    unittest.main()
