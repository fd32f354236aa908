#!/usr/bin/env python3
"""
Main entry point for the tree builder benchmarks.

This script runs performance benchmarks with proper phase separation:
- Setup (not timed): Data generation and configuration
- Warmup (not timed): Cache warming
- Run (timed): Actual measurement
- Verify (not timed): Correctness checks

Usage:
    # Run with default settings
    python -m benchmarks.run_benchmarks

    # Run with custom seed for reproducibility
    BENCHMARK_SEED=123 python -m benchmarks.run_benchmarks

    # Run in verify-only mode (no timing, only correctness)
    BENCHMARK_VERIFY_ONLY=true python -m benchmarks.run_benchmarks

    # Deeper Fibonacci tree for the per-node timing
    BENCHMARK_FIB_DEPTH=12 python -m benchmarks.run_benchmarks

    # Sequential input degenerates the BST
    python -m benchmarks.run_benchmarks --distribution sequential --sizes 10 100
"""

import argparse
import logging
import os
import sys
import time
from datetime import datetime

from .config import BenchmarkConfig
from .runner import BenchmarkRunner


def setup_logging(config: BenchmarkConfig, log_dir: str = None) -> None:
    """
    Configure logging for benchmark output.

    Args:
        config: Benchmark configuration
        log_dir: Optional directory for log files
    """
    handlers = [logging.StreamHandler()]

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = os.path.join(log_dir, f"benchmark_{ts}.log")
        handlers.append(logging.FileHandler(log_path, mode="w"))

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,  # Override any existing configuration
    )


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Run tree builder benchmarks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducibility (default: from env or 42)",
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        help="Input sizes to benchmark (default: 10 100 1000)",
    )
    parser.add_argument(
        "--repetitions",
        type=int,
        help="Number of repetitions per size (default: 20)",
    )
    parser.add_argument(
        "--distribution",
        choices=["uniform", "clustered", "sequential"],
        help="Input distribution (default: uniform)",
    )
    parser.add_argument(
        "--fib-depth",
        type=int,
        help="Depth of the Fibonacci tree (default: 10)",
    )
    parser.add_argument(
        "--verify-only",
        action="store_true",
        help="Run in verify-only mode (no timing)",
    )
    parser.add_argument(
        "--skip-warmup",
        action="store_true",
        help="Skip warmup phase",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--log-dir",
        help="Directory for log files (default: none)",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> BenchmarkConfig:
    """Environment config overridden by command-line arguments."""
    config = BenchmarkConfig.from_env()
    if args.seed is not None:
        config.seed = args.seed
    if args.sizes is not None:
        config.sizes = args.sizes
    if args.repetitions is not None:
        config.repetitions = args.repetitions
    if args.distribution is not None:
        config.distribution = args.distribution
    if args.fib_depth is not None:
        config.fib_depth = args.fib_depth
    if args.verify_only:
        config.verify_only = True
    if args.skip_warmup:
        config.skip_warmup = True
    if args.log_level is not None:
        config.log_level = args.log_level
    return config


def main(argv=None) -> int:
    """
    Main benchmark execution.

    Returns:
        Exit code (0 for success, 1 if any invariant check failed)
    """
    args = parse_args(argv)
    config = build_config(args)
    setup_logging(config, args.log_dir)

    logging.info("=" * 70)
    logging.info("TREE BUILDER BENCHMARKS")
    logging.info("=" * 70)
    if config.verify_only:
        logging.info("Mode: VERIFY-ONLY (correctness checks, no timing)")
    else:
        logging.info("Mode: PERFORMANCE (timed measurements)")

    runner = BenchmarkRunner(config)
    overall_start = time.perf_counter()
    all_ok = True

    for size in config.sizes:
        logging.info("")
        logging.info("BENCHMARK: n=%d, repetitions=%d", size, config.repetitions)
        result = runner.run(size)
        all_ok = all_ok and result.verified
        for line in result.format().splitlines():
            logging.info(line)

    overall_elapsed = time.perf_counter() - overall_start
    logging.info("")
    logging.info("TOTAL EXECUTION TIME: %.3f seconds", overall_elapsed)

    return 0 if all_ok else 1


if __name__ == "__main__":
    sys.exit(main())
