"""AVL tree: a binary search tree rebalanced by rotations after each insert."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from dsviz.logging_config import get_logger
from dsviz.trees.base import AVLNode

logger = get_logger("AVL")


def height(node: Optional[AVLNode]) -> int:
    """Stored height of ``node``; an absent child has height 0."""
    return node.height if node is not None else 0


def balance_factor(node: AVLNode) -> int:
    return height(node.left) - height(node.right)


def update_height(node: Optional[AVLNode]) -> None:
    if node is not None:
        node.height = 1 + max(height(node.left), height(node.right))


def rotate_right(y: AVLNode) -> AVLNode:
    x = y.left
    y.left = x.right
    x.right = y
    update_height(y)
    update_height(x)
    return x


def rotate_left(x: AVLNode) -> AVLNode:
    y = x.right
    x.right = y.left
    y.left = x
    update_height(x)
    update_height(y)
    return y


def insert_avl(root: Optional[AVLNode], value: int) -> AVLNode:
    """
    Insert ``value`` and rebalance on the way back up.

    Returns the root of the rebalanced subtree. A duplicate value leaves the
    subtree untouched.

    Rotation cases, with ``balance = height(left) - height(right)``:
        balance > 1:  left-right case if value > left.value, then rotate right
        balance < -1: right-left case if value < right.value, then rotate left
    """
    if root is None:
        return AVLNode(value)
    if value == root.value:
        return root
    if value < root.value:
        root.left = insert_avl(root.left, value)
    else:
        root.right = insert_avl(root.right, value)

    update_height(root)
    balance = balance_factor(root)

    if balance > 1:
        if value > root.left.value:
            root.left = rotate_left(root.left)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Rotating right at %s (balance=%d)", root.value, balance)
        return rotate_right(root)

    if balance < -1:
        if value < root.right.value:
            root.right = rotate_right(root.right)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Rotating left at %s (balance=%d)", root.value, balance)
        return rotate_left(root)

    return root


def build_avl(values: Iterable[int]) -> Optional[AVLNode]:
    root = None
    for v in values:
        root = insert_avl(root, v)
    return root
