"""Core benchmark runner for the tree builders."""

import logging
from dataclasses import dataclass
from typing import Dict, List

import numpy as np
from tqdm import tqdm

from dsviz.benchmark import BenchmarkResult, benchmark_structures, check_logging_level
from dsviz.invariants import InvariantError, check_avl, check_bst, check_btree
from dsviz.trees import TreeAlgorithm, build_tree

from .config import BenchmarkConfig, BenchmarkMetadata, get_git_commit_hash
from .utils import generate_deterministic_keys

logger = logging.getLogger(__name__)

_CHECKS = {
    TreeAlgorithm.BST: check_bst,
    TreeAlgorithm.AVL: check_avl,
    TreeAlgorithm.B_TREE: check_btree,
}


@dataclass
class AggregateResult:
    """Per-structure timing summary over all repetitions of one size, in ms."""
    metadata: BenchmarkMetadata
    mean: Dict[str, float]
    median: Dict[str, float]
    stdev: Dict[str, float]
    verified: bool

    def format(self) -> str:
        lines = [str(self.metadata), ""]
        for name in self.mean:
            lines.append(
                f"{name:>8}: mean={self.mean[name]:.4f}  median={self.median[name]:.4f}  "
                f"stdev={self.stdev[name]:.4f}"
            )
        lines.append(f"Invariants: {'OK' if self.verified else 'FAILED'}")
        return "\n".join(lines)


class BenchmarkRunner:
    """
    Manages the benchmark lifecycle with proper phase separation.

    Phases:
    1. Setup (not timed): Input generation
    2. Warmup (not timed): Optional warmup iterations
    3. Run (timed): Actual measurement
    4. Verify (not timed): Correctness checks
    """

    def __init__(self, config: BenchmarkConfig):
        self.config = config
        check_logging_level()

    def setup(self, size: int, repetitions: int) -> List[List[int]]:
        """
        Setup phase: one deterministic input sequence per repetition.

        NOT TIMED.
        """
        return [
            generate_deterministic_keys(
                size,
                seed=self.config.seed + i,
                distribution=self.config.distribution,
            )
            for i in range(repetitions)
        ]

    def warmup(self, inputs: List[List[int]]) -> None:
        """Warmup phase: run a few measurements and discard them. NOT TIMED."""
        if self.config.skip_warmup:
            return
        for values in inputs[:min(3, len(inputs))]:
            benchmark_structures(values, fib_depth=self.config.fib_depth)

    def run_single(self, values: List[int]) -> BenchmarkResult:
        """TIMED - only the tree construction is measured."""
        return benchmark_structures(values, fib_depth=self.config.fib_depth)

    def verify(self, values: List[int]) -> bool:
        """
        Verify phase: rebuild each tree and check its invariants.

        NOT TIMED.
        """
        for algorithm, check in _CHECKS.items():
            try:
                check(build_tree(algorithm, values))
            except InvariantError as e:
                logger.error("%s: %s", algorithm.value, e)
                return False
        return True

    def run(self, size: int) -> AggregateResult:
        """Run all phases for one input size and aggregate the timings."""
        repetitions = self.config.repetitions
        inputs = self.setup(size, repetitions)
        verified = all(self.verify(values) for values in inputs)

        results: List[BenchmarkResult] = []
        if not self.config.verify_only:
            self.warmup(inputs)
            for values in tqdm(inputs, desc=f"n={size}", leave=False):
                results.append(self.run_single(values))

        metadata = BenchmarkMetadata(
            commit_hash=get_git_commit_hash(),
            config=self.config,
            size=size,
            repetitions=repetitions,
        )
        return aggregate(results, metadata, verified)

    def run_all(self) -> List[AggregateResult]:
        return [self.run(size) for size in self.config.sizes]


def aggregate(results: List[BenchmarkResult], metadata: BenchmarkMetadata, verified: bool) -> AggregateResult:
    """Reduce per-repetition timings to mean/median/stdev per structure."""
    names = ["BST", "AVL", "B-Tree", "Fib-Tree"]
    if results:
        table = np.array([[r.as_dict()[n] for n in names] for r in results])
        mean = dict(zip(names, table.mean(axis=0).tolist()))
        median = dict(zip(names, np.median(table, axis=0).tolist()))
        stdev = dict(zip(names, table.std(axis=0).tolist()))
    else:
        mean = dict.fromkeys(names, 0.0)
        median = dict.fromkeys(names, 0.0)
        stdev = dict.fromkeys(names, 0.0)
    return AggregateResult(metadata=metadata, mean=mean, median=median, stdev=stdev, verified=verified)
