"""
Tree builders: BST, AVL, simplified B-Tree and Fibonacci tree.

Every ``insert_*`` function takes the current root (or None) and returns the
root that replaces it.
"""

from dsviz.trees.avl import build_avl, insert_avl
from dsviz.trees.base import (
    AVLNode,
    BinaryNode,
    BTreeNode,
    TreeAlgorithm,
    TreeNode,
    inorder_values,
    iter_children,
    iter_preorder,
    node_count,
    tree_height,
)
from dsviz.trees.bst import build_bst, insert_bst, search_bst
from dsviz.trees.btree import build_btree, insert_btree
from dsviz.trees.factory import (
    TreeData,
    build_tree,
    generate_random_values,
    generate_tree_data,
)
from dsviz.trees.fibonacci import build_fibonacci_tree, generate_random_depth

__all__ = [
    "AVLNode",
    "BTreeNode",
    "BinaryNode",
    "TreeAlgorithm",
    "TreeData",
    "TreeNode",
    "build_avl",
    "build_bst",
    "build_btree",
    "build_fibonacci_tree",
    "build_tree",
    "generate_random_depth",
    "generate_random_values",
    "generate_tree_data",
    "inorder_values",
    "insert_avl",
    "insert_btree",
    "insert_bst",
    "iter_children",
    "iter_preorder",
    "node_count",
    "search_bst",
    "tree_height",
]
