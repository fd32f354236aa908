"""Utility functions for testing tree invariants."""

from typing import Optional

from dsviz.invariants import InvariantError, check_avl, check_bst, check_btree
from dsviz.tree_stats import Stats
from dsviz.trees import TreeAlgorithm, TreeNode, inorder_values

_CHECKS = {
    TreeAlgorithm.BST: check_bst,
    TreeAlgorithm.AVL: check_avl,
    TreeAlgorithm.B_TREE: check_btree,
}


def assert_tree_invariants_tc(
    tc,
    root: Optional[TreeNode],
    algorithm: TreeAlgorithm,
    stats: Stats,
    err_msg: Optional[str] = "",
) -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    check = _CHECKS.get(algorithm)
    if check is not None:
        try:
            check(root)
        except InvariantError as e:
            tc.fail(f"{e}\n\n{err_msg}")
        tc.assertTrue(
            stats.is_search_tree,
            f"Invariant failed: is_search_tree is False \n\n{err_msg}"
        )
        values = inorder_values(root)
        tc.assertEqual(values, sorted(values), f"In-order values not sorted\n\n{err_msg}")

    if algorithm is TreeAlgorithm.AVL:
        tc.assertTrue(stats.is_balanced, f"Invariant failed: is_balanced is False \n\n{err_msg}")

    if root is not None:
        tc.assertGreater(
            stats.node_count, 0,
            f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree\n\n{err_msg}"
        )
        tc.assertGreater(
            stats.height, 0,
            f"Invariant failed: height={stats.height} ≤ 0 for non-empty tree\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.least_value,
            f"Invariant failed: least_value is None for non-empty tree\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.greatest_value,
            f"Invariant failed: greatest_value is None for non-empty tree\n\n{err_msg}"
        )
