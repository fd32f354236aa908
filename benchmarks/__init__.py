"""
Benchmarks package for the dsviz tree builders.

Runs the timing harness from ``dsviz.benchmark`` over deterministic inputs of
several sizes and aggregates the results:
- BST, AVL and B-Tree construction from empty
- Fibonacci tree per-node timing at a fixed depth

The benchmarks are designed to be robust against CPU and memory load variations
by using multiple repetitions, deterministic test data, and aggregate statistics.
"""

from .config import BenchmarkConfig
from .runner import AggregateResult, BenchmarkRunner

__all__ = ["AggregateResult", "BenchmarkConfig", "BenchmarkRunner"]
