"""Shape statistics for randomly built BST, AVL and B-Tree instances."""

import argparse
import logging
import os
import random
import time
from datetime import datetime
from typing import Dict, Optional

import numpy as np
from tqdm import trange

from dsviz.invariants import check_avl, check_bst, check_btree
from dsviz.tree_stats import tree_stats
from dsviz.trees import TreeAlgorithm, TreeNode, build_tree

logger = logging.getLogger(__name__)

SEARCH_TREES = (TreeAlgorithm.BST, TreeAlgorithm.AVL, TreeAlgorithm.B_TREE)

_CHECKS = {
    TreeAlgorithm.BST: check_bst,
    TreeAlgorithm.AVL: check_avl,
    TreeAlgorithm.B_TREE: check_btree,
}


def random_tree_of_size(algorithm: TreeAlgorithm, n: int, rng: Optional[random.Random] = None) -> TreeNode:
    """Build a tree from ``n`` unique keys inserted in random order."""
    rng = rng or random.Random()
    space = 1 << 24
    if space <= n:
        raise ValueError(f"Key-space too small! Required: {n + 1}, Available: {space}")
    keys = rng.sample(range(1, space), k=n)
    return build_tree(algorithm, keys)


def repeated_experiment(
    size: int,
    repetitions: int,
    algorithm: TreeAlgorithm,
    seed: Optional[int] = None,
) -> Dict[str, float]:
    """
    Repeatedly build random trees of ``size`` keys and aggregate their shape.

    Every tree is checked against its invariants before its stats are used.

    Returns:
        Averages keyed by metric name.
    """
    rng = random.Random(seed)
    heights, nodes, leaves, amps, times_build = [], [], [], [], []
    check = _CHECKS[algorithm]

    for _ in trange(repetitions, desc=f"{algorithm.value} n={size}", leave=False):
        t0 = time.perf_counter()
        tree = random_tree_of_size(algorithm, size, rng)
        times_build.append(time.perf_counter() - t0)

        check(tree)
        stats = tree_stats(tree)
        heights.append(stats.height)
        nodes.append(stats.node_count)
        leaves.append(stats.leaf_count)
        amps.append(stats.height / stats.perfect_height if stats.perfect_height else 0.0)

    perfect_height = int(np.ceil(np.log2(size + 1))) if size > 0 else 0
    rows = [
        ("Height", np.mean(heights), np.var(heights)),
        ("Node count", np.mean(nodes), np.var(nodes)),
        ("Leaf count", np.mean(leaves), np.var(leaves)),
        ("Perfect height", perfect_height, None),
        ("Height amplification", np.mean(amps), np.var(amps)),
        ("Build time (s)", np.mean(times_build), np.var(times_build)),
    ]

    header = f"{'Metric':<22} {'Avg':>15} {'(Var)':>15}"
    logger.info(header)
    logger.info("-" * len(header))
    for name, avg, var in rows:
        if var is None:
            logger.info(f"{name:<22} {avg:>15}")
        else:
            logger.info(f"{name:<22} {avg:15.4f} {f'({var:.4f})':>15}")

    return {name: float(avg) for name, avg, _ in rows}


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run shape statistics for the search trees.")
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=[10, 100, 1000], help="List of tree sizes to test."
    )
    parser.add_argument(
        "--algorithms",
        nargs="+",
        choices=[a.value for a in SEARCH_TREES],
        default=[a.value for a in SEARCH_TREES],
        help="Tree algorithms to test.",
    )
    parser.add_argument("--repetitions", type=int, default=20, help="Number of repetitions for each experiment.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set the logging level (default: INFO)",
    )
    args = parser.parse_args()

    log_dir = os.path.join(os.getcwd(), "stats/logs")
    os.makedirs(log_dir, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = os.path.join(log_dir, f"run_{ts}.log")

    log_level = getattr(logging, args.log_level)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(log_path, mode="w"),
            logging.StreamHandler(),
        ],
        force=True,
    )
    logging.getLogger("dsviz").setLevel(log_level)

    for n in args.sizes:
        for name in args.algorithms:
            logger.info("")
            logger.info(
                f"---------------- NOW RUNNING EXPERIMENT: n = {n}, {name}, repetitions = {args.repetitions} ----------------"
            )
            t0 = time.perf_counter()
            repeated_experiment(size=n, repetitions=args.repetitions, algorithm=TreeAlgorithm(name), seed=args.seed)
            logger.info(f"Total experiment time: {time.perf_counter() - t0:.3f} seconds")
