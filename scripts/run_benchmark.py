#!/usr/bin/env python3
"""
Run A* on random worlds and check every returned path.

Usage:
    python scripts/run_benchmark.py
    python scripts/run_benchmark.py --num-worlds 500 --grid-size 16
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from grid_nav.evaluate import benchmark, print_benchmark_table, save_results


def main():
    parser = argparse.ArgumentParser(description="Benchmark GridNav A*")
    parser.add_argument("--num-worlds", type=int, default=100,
                        help="Number of random worlds")
    parser.add_argument("--grid-size", type=int, default=10,
                        help="Grid size")
    parser.add_argument("--obstacle-density", type=float, default=0.2,
                        help="Wall density (0.0 to 1.0)")
    parser.add_argument("--seed", type=int, default=12345,
                        help="Random seed for reproducibility")
    parser.add_argument("--output", type=str, default="results/benchmark.json",
                        help="Output path for results")

    args = parser.parse_args()

    if not 0.0 <= args.obstacle_density < 1.0:
        print(f"ERROR: obstacle density must be in [0, 1), got {args.obstacle_density}")
        sys.exit(1)

    print("=" * 50)
    print("GridNav Benchmark")
    print("=" * 50)
    print(f"Worlds:     {args.num_worlds}")
    print(f"Grid size:  {args.grid_size}x{args.grid_size}")
    print(f"Density:    {args.obstacle_density}")
    print("-" * 50)

    print("\nRunning benchmark...")
    results = benchmark(
        num_worlds=args.num_worlds,
        size=args.grid_size,
        obstacle_density=args.obstacle_density,
        base_seed=args.seed,
        verbose=True
    )

    print_benchmark_table(results['summary'])
    save_results(results, args.output)


if __name__ == "__main__":
    main()
