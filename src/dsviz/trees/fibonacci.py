"""Fibonacci tree: a synthetic binary tree whose node values are Fibonacci numbers."""

from __future__ import annotations

import random
from typing import Optional

from dsviz.trees.base import BinaryNode

MIN_RANDOM_DEPTH = 5
MAX_RANDOM_DEPTH = 10


def build_fibonacci_tree(depth: int) -> BinaryNode:
    """
    Build the Fibonacci tree of the given depth.

    ``depth <= 1`` gives a leaf of value 1. Otherwise the left subtree has
    depth - 1, the right subtree depth - 2, and the node value is the sum of
    the two child values. The result is not a search tree.
    """
    if depth <= 1:
        return BinaryNode(1)
    left = build_fibonacci_tree(depth - 1)
    right = build_fibonacci_tree(depth - 2)
    return BinaryNode(left.value + right.value, [left, right])


def generate_random_depth(rng: Optional[random.Random] = None) -> int:
    """Random depth in [MIN_RANDOM_DEPTH, MAX_RANDOM_DEPTH]."""
    rng = rng or random
    return rng.randint(MIN_RANDOM_DEPTH, MAX_RANDOM_DEPTH)
