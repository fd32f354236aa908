"""
dsviz: classic in-memory data structures and their core algorithms.

Quick-start imports::

    from dsviz import generate_tree_data, LinkedList, SkipList, HashTable

See subpackage ``__init__`` files for the full public surface.
"""

# Trees
from dsviz.trees import (
    TreeAlgorithm,
    TreeData,
    build_fibonacci_tree,
    generate_random_values,
    generate_tree_data,
    insert_avl,
    insert_btree,
    insert_bst,
)
from dsviz.utils import fingerprint

# Linear structures & hashing
from dsviz.hash_table import TABLE_FULL, HashStrategy, HashTable
from dsviz.linked_list import LinkedList, SearchResult
from dsviz.skip_list import SkipList

# Stats, invariants & benchmarking
from dsviz.benchmark import BenchmarkResult, benchmark_structures, measure_time
from dsviz.invariants import InvariantError
from dsviz.tree_stats import Stats, tree_stats

__all__ = [
    "BenchmarkResult",
    "HashStrategy",
    "HashTable",
    "InvariantError",
    "LinkedList",
    "SearchResult",
    "SkipList",
    "Stats",
    "TABLE_FULL",
    "TreeAlgorithm",
    "TreeData",
    "benchmark_structures",
    "build_fibonacci_tree",
    "fingerprint",
    "generate_random_values",
    "generate_tree_data",
    "insert_avl",
    "insert_bst",
    "insert_btree",
    "measure_time",
    "tree_stats",
]
