"""Unbalanced binary search tree."""

from __future__ import annotations

from typing import Iterable, Optional

from dsviz.trees.base import BinaryNode


def insert_bst(root: Optional[BinaryNode], value: int) -> BinaryNode:
    """
    Insert ``value`` below ``root`` and return the (possibly new) root.

    Duplicates are ignored: the same root is returned and nothing changes.
    Smaller values go left, larger values go right. Sorted input degenerates
    the tree into a chain, so the descent is a loop rather than recursion.
    """
    if root is None:
        return BinaryNode(value)
    node = root
    while value != node.value:
        if value < node.value:
            if node.left is None:
                node.left = BinaryNode(value)
                break
            node = node.left
        else:
            if node.right is None:
                node.right = BinaryNode(value)
                break
            node = node.right
    return root


def build_bst(values: Iterable[int]) -> Optional[BinaryNode]:
    root = None
    for v in values:
        root = insert_bst(root, v)
    return root


def search_bst(root: Optional[BinaryNode], value: int) -> Optional[BinaryNode]:
    node = root
    while node is not None:
        if value == node.value:
            return node
        node = node.left if value < node.value else node.right
    return None
