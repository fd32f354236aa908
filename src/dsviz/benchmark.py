"""
Timing harness for the tree builders.

Every measurement builds its structure from empty over the same input, so
the figures are comparable across structures. Garbage collection is disabled
while a measurement runs.

Logging:
    Measurements should be taken with logging at INFO level or higher; debug
    output from the builders would otherwise be timed too. Callers that run
    many measurements call :func:`check_logging_level` once up front.
"""

from __future__ import annotations

import gc
import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

from dsviz.logging_config import ROOT_LOGGER_NAME, get_logger
from dsviz.trees.avl import insert_avl
from dsviz.trees.base import iter_children
from dsviz.trees.bst import insert_bst
from dsviz.trees.btree import insert_btree
from dsviz.trees.fibonacci import build_fibonacci_tree

logger = get_logger("Benchmark")

FIXED_FIB_DEPTH = 10


@dataclass
class BenchmarkResult:
    """Elapsed wall-clock time per structure, in milliseconds."""
    bst: float
    avl: float
    b_tree: float
    fib_tree: float

    def as_dict(self) -> Dict[str, float]:
        return {
            "BST": self.bst,
            "AVL": self.avl,
            "B-Tree": self.b_tree,
            "Fib-Tree": self.fib_tree,
        }


def check_logging_level() -> None:
    """Warn if verbose logging is enabled during measurement."""
    effective_level = logging.getLogger(ROOT_LOGGER_NAME).getEffectiveLevel()
    if effective_level < logging.INFO:
        logger.warning(
            "Verbose logging (%s) is enabled. This may affect benchmark timing! "
            "Set log level to INFO or higher for accurate measurements.",
            logging.getLevelName(effective_level),
        )


def measure_time(callback: Callable[[], object]) -> float:
    """Run ``callback`` once and return the elapsed time in milliseconds."""
    gc_was_enabled = gc.isenabled()
    gc.disable()
    try:
        start = time.perf_counter()
        callback()
        return (time.perf_counter() - start) * 1000.0
    finally:
        if gc_was_enabled:
            gc.enable()


def _fold(insert: Callable, values: Sequence[int]) -> Callable[[], object]:
    def build():
        root = None
        for v in values:
            root = insert(root, v)
        return root
    return build


def time_fibonacci_nodes(depth: int = FIXED_FIB_DEPTH) -> float:
    """
    Build a Fibonacci tree of ``depth`` and return the sum of the per-node
    timings taken while visiting every node in pre-order.
    """
    root = build_fibonacci_tree(depth)
    total = 0.0
    stack = [root]
    while stack:
        node = stack.pop()
        total += measure_time(lambda: list(iter_children(node)))
        stack.extend(reversed(list(iter_children(node))))
    return total


def benchmark_structures(values: Sequence[int], fib_depth: int = FIXED_FIB_DEPTH) -> BenchmarkResult:
    """
    Time the construction of each tree over ``values``.

    ``values`` itself is never modified; each structure is built from empty.
    """
    values = list(values)
    result = BenchmarkResult(
        bst=measure_time(_fold(insert_bst, values)),
        avl=measure_time(_fold(insert_avl, values)),
        b_tree=measure_time(_fold(insert_btree, values)),
        fib_tree=time_fibonacci_nodes(fib_depth),
    )
    logger.debug("Benchmark over %d values: %s", len(values), result)
    return result


def format_results(result: BenchmarkResult, precision: int = 4) -> List[str]:
    """One ``name: time ms`` line per structure."""
    return [f"{name}: {ms:.{precision}f} ms" for name, ms in result.as_dict().items()]
