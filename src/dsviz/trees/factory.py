"""Tree construction by algorithm name."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Union

from dsviz.logging_config import get_logger
from dsviz.trees.avl import insert_avl
from dsviz.trees.base import TreeAlgorithm, TreeNode
from dsviz.trees.bst import insert_bst
from dsviz.trees.btree import insert_btree
from dsviz.trees.fibonacci import build_fibonacci_tree, generate_random_depth
from dsviz.utils import fingerprint

logger = get_logger("TreeFactory")

RANDOM_VALUE_LIMIT = 1000

INSERTERS: Dict[TreeAlgorithm, Callable] = {
    TreeAlgorithm.BST: insert_bst,
    TreeAlgorithm.AVL: insert_avl,
    TreeAlgorithm.B_TREE: insert_btree,
}


@dataclass
class TreeData:
    """A built tree together with its content fingerprint."""
    hash: str
    tree: Optional[TreeNode]


def build_tree(algorithm: TreeAlgorithm, values: Iterable[int]) -> Optional[TreeNode]:
    """Fold ``values`` left to right through the algorithm's single-value insert."""
    insert = INSERTERS[algorithm]
    root = None
    for v in values:
        root = insert(root, v)
    return root


def generate_tree_data(
    algorithm: Union[str, TreeAlgorithm],
    values: Iterable[int],
    fib_depth: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> TreeData:
    """
    Build the tree selected by ``algorithm`` and fingerprint it.

    Args:
        algorithm: One of "bst", "avl", "b-tree", "fib-tree" (or the enum).
        values: Insertion sequence. Ignored by "fib-tree".
        fib_depth: Depth of the Fibonacci tree. A random depth in [5, 10]
            is drawn from ``rng`` when omitted.
        rng: Random source for the Fibonacci depth.

    Returns:
        TreeData: ``tree`` is None for an unrecognized algorithm name.
    """
    algo = TreeAlgorithm.parse(algorithm)
    if algo is None:
        logger.warning("Unknown tree algorithm %r; no tree built", algorithm)
        root = None
    elif algo is TreeAlgorithm.FIB_TREE:
        depth = fib_depth if fib_depth is not None else generate_random_depth(rng)
        root = build_fibonacci_tree(depth)
    else:
        root = build_tree(algo, values)
    return TreeData(hash=fingerprint(root), tree=root)


def generate_random_values(size: int = 20, rng: Optional[random.Random] = None) -> List[int]:
    """
    Generate ``size`` unique random integers in [0, RANDOM_VALUE_LIMIT).

    Raises:
        ValueError: If ``size`` is negative or larger than the value range.
    """
    if size < 0 or size > RANDOM_VALUE_LIMIT:
        raise ValueError(f"size must be in [0, {RANDOM_VALUE_LIMIT}], got {size}")
    rng = rng or random
    seen = set()
    values = []
    while len(values) < size:
        v = rng.randrange(RANDOM_VALUE_LIMIT)
        if v not in seen:
            seen.add(v)
            values.append(v)
    return values
