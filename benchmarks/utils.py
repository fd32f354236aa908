"""
Deterministic input generation for the benchmarks.

Reproducibility:
    All random data generation uses deterministic seeds by default.
    The default seed can be overridden via the BENCHMARK_SEED environment variable.
"""

import os
from typing import List, Tuple

import numpy as np

# Default seed for deterministic benchmarking - can be overridden via environment variable
DEFAULT_BENCHMARK_SEED = int(os.environ.get('BENCHMARK_SEED', '42'))


def generate_deterministic_keys(size: int,
                                seed: int = None,
                                key_range: Tuple[int, int] = (1, 1000000),
                                distribution: str = 'uniform') -> List[int]:
    """
    Generate deterministic unique keys for benchmarking.

    Args:
        size: Number of keys to generate
        seed: Random seed for reproducibility. If None, uses DEFAULT_BENCHMARK_SEED.
        key_range: Range of key values (min, max)
        distribution: Distribution type ('uniform', 'clustered', 'sequential')

    Returns:
        List of deterministic keys

    Note:
        This function always produces the same output for the same inputs.
        'sequential' input degenerates the BST into a list.
    """
    if seed is None:
        seed = DEFAULT_BENCHMARK_SEED

    rng = np.random.default_rng(seed)
    min_key, max_key = key_range
    if max_key - min_key + 1 < size:
        raise ValueError("Not enough unique keys available to generate desired size")

    if distribution == 'uniform':
        return rng.choice(np.arange(min_key, max_key + 1), size=size, replace=False).tolist()
    elif distribution == 'clustered':
        # Draw around a few hot spots, then top up with unused uniform keys
        cluster_centers = np.linspace(min_key, max_key, 5, dtype=int)
        cluster_size = size // 5
        keys = np.empty(0, dtype=int)
        for center in cluster_centers:
            cluster_keys = rng.normal(center, max(1, (max_key - min_key) // 20), cluster_size)
            cluster_keys = np.clip(cluster_keys, min_key, max_key).astype(int)
            keys = np.concatenate([keys, cluster_keys])

        # Keep first occurrences only, preserving draw order
        _, first_idx = np.unique(keys, return_index=True)
        unique_keys = keys[np.sort(first_idx)][:size]
        if len(unique_keys) < size:
            remaining = np.setdiff1d(np.arange(min_key, max_key + 1), unique_keys)
            pad = rng.choice(remaining, size=size - len(unique_keys), replace=False)
            unique_keys = np.concatenate([unique_keys, pad])
        return unique_keys.tolist()
    elif distribution == 'sequential':
        return list(range(min_key, min_key + size))
    else:
        raise ValueError(f"Unknown distribution: {distribution}")
