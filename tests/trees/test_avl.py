"""Tests for the AVL tree"""
# pylint: skip-file

import random
import unittest

from dsviz.invariants import check_avl
from dsviz.trees import AVLNode, insert_avl
from dsviz.trees.avl import balance_factor, rotate_left, rotate_right
from tests.trees.base import AVLTestCase


class TestAVLInsert(AVLTestCase):

    def test_single_value(self):
        root = self.build([1])
        self.assertIsInstance(root, AVLNode)
        self.assertEqual(root.height, 1)

    def test_right_right_case(self):
        root = self.build([1, 2, 3])
        self.assertEqual(root.value, 2)
        self.assertEqual(root.height, 2)
        self.assertEqual(root.left.value, 1)
        self.assertEqual(root.right.value, 3)
        self.assertEqual(root.left.height, 1)
        self.assertEqual(root.right.height, 1)

    def test_left_left_case(self):
        root = self.build([3, 2, 1])
        self.assertEqual(root.value, 2)
        self.assertEqual(root.left.value, 1)
        self.assertEqual(root.right.value, 3)

    def test_left_right_case(self):
        root = self.build([3, 1, 2])
        self.assertEqual(root.value, 2)
        self.expected_values = [1, 2, 3]

    def test_right_left_case(self):
        root = self.build([1, 3, 2])
        self.assertEqual(root.value, 2)
        self.expected_values = [1, 2, 3]

    def test_duplicate_is_ignored(self):
        self.build([4, 2, 6, 4, 2])
        self.expected_node_count = 3

    def test_balanced_after_every_insert(self):
        rng = random.Random(11)
        values = rng.sample(range(5000), 200)
        root = None
        for v in values:
            root = insert_avl(root, v)
            check_avl(root)
        self.tree = root
        self.inserted = values
        self.expected_values = sorted(values)

    def test_sorted_input_stays_logarithmic(self):
        n = 1023
        self.build(list(range(n)))
        # A perfect tree for 2^10 - 1 nodes has height 10
        self.expected_height = 10


class TestRotations(unittest.TestCase):

    def test_rotate_right_updates_heights(self):
        y = AVLNode(3, height=3)
        y.left = AVLNode(2, height=2)
        y.left.left = AVLNode(1)
        x = rotate_right(y)
        self.assertEqual(x.value, 2)
        self.assertEqual(x.height, 2)
        self.assertEqual(x.right.height, 1)
        self.assertEqual(balance_factor(x), 0)

    def test_rotate_left_updates_heights(self):
        x = AVLNode(1, height=3)
        x.right = AVLNode(2, height=2)
        x.right.right = AVLNode(3)
        y = rotate_left(x)
        self.assertEqual(y.value, 2)
        self.assertEqual(y.left.value, 1)
        self.assertEqual(y.height, 2)


if __name__ == "__main__":
    unittest.main()
