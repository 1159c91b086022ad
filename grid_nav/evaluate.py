"""
Evaluation Module

Path validity checks and a benchmark over random worlds.
"""

import json
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np
from tqdm import tqdm

from .a_star import heuristic, search, MOVES
from .grid import Cell, GridWorld
from .map_generator import generate_solvable_world


def validate_path(world: GridWorld, path: Optional[List[Cell]]) -> List[str]:
    """
    Check a path against the world.

    Returns:
        List of problems found; empty when the path is valid
    """
    if not path:
        return ["path is empty"]

    problems = []
    if path[0] != world.start:
        problems.append(f"path starts at {path[0]}, expected {world.start}")
    if path[-1] != world.goal:
        problems.append(f"path ends at {path[-1]}, expected {world.goal}")

    unit_steps = set(MOVES.values())
    for a, b in zip(path, path[1:]):
        if (b[0] - a[0], b[1] - a[1]) not in unit_steps:
            problems.append(f"{a} -> {b} is not a 4-directional step")

    for cell in path:
        if not world.is_walkable(cell):
            problems.append(f"{cell} is a wall or out of bounds")

    if len(set(path)) != len(path):
        problems.append("path visits a cell more than once")

    return problems


def path_stats(world: GridWorld, path: Optional[List[Cell]]) -> Dict:
    """Summarize a path: cell count, steps and detour over Manhattan distance."""
    manhattan = heuristic(world.start, world.goal)

    if path is None:
        return {
            'found': False,
            'cells': 0,
            'steps': None,
            'manhattan': manhattan,
            'detour': None
        }

    steps = len(path) - 1
    return {
        'found': True,
        'cells': len(path),
        'steps': steps,
        'manhattan': manhattan,
        'detour': steps - manhattan
    }


def benchmark(
    num_worlds: int = 100,
    size: int = 10,
    obstacle_density: float = 0.2,
    base_seed: int = 12345,
    verbose: bool = True
) -> Dict:
    """
    Run A* on random solvable worlds and check every path.

    Args:
        num_worlds: Number of worlds to try
        size: Grid size
        obstacle_density: Wall probability
        base_seed: Random seed for reproducibility
        verbose: Whether to show a progress bar

    Returns:
        Dictionary with 'summary' and per-world 'episodes'
    """
    results = []
    iterator = range(num_worlds)
    if verbose:
        iterator = tqdm(iterator, desc="Benchmarking")

    for i in iterator:
        try:
            world = generate_solvable_world(
                size=size,
                obstacle_density=obstacle_density,
                seed=base_seed + i
            )
        except ValueError:
            # Skip failed map generation
            continue

        result = search(world)
        episode = path_stats(world, result.path)
        episode['episode'] = i
        episode['valid'] = not validate_path(world, result.path)
        episode['expanded'] = result.expanded
        episode['generated'] = result.generated
        results.append(episode)

    found = [r for r in results if r['found']]
    detours = [r['detour'] for r in found]
    expanded = [r['expanded'] for r in results]

    summary = {
        'num_worlds': len(results),
        'success_rate': len(found) / len(results) if results else 0,
        'valid_rate': sum(1 for r in results if r['valid']) / len(results) if results else 0,
        'mean_steps': float(np.mean([r['steps'] for r in found])) if found else 0.0,
        'mean_detour': float(np.mean(detours)) if detours else 0.0,
        'mean_expanded': float(np.mean(expanded)) if expanded else 0.0,
        'grid_size': size
    }

    return {
        'summary': summary,
        'episodes': results
    }


def print_benchmark_table(summary: Dict) -> None:
    """Print formatted benchmark results."""
    print("\n" + "=" * 50)
    print("GridNav A* Benchmark Results")
    print("=" * 50)
    print(f"Grid Size: {summary['grid_size']}x{summary['grid_size']}")
    print(f"Worlds:    {summary['num_worlds']}")
    print("-" * 50)
    print(f"{'Found':<12} {'Valid':<12} {'Avg Steps':<12} {'Avg Detour':<12} {'Avg Expanded':<12}")
    print("-" * 50)
    print(f"{summary['success_rate']*100:.1f}%{'':<6} "
          f"{summary['valid_rate']*100:.1f}%{'':<6} "
          f"{summary['mean_steps']:<12.2f} "
          f"{summary['mean_detour']:<12.2f} "
          f"{summary['mean_expanded']:<12.1f}")
    print("=" * 50)


def save_results(results: Dict, path: str) -> None:
    """Save benchmark results to JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Convert numpy types for JSON serialization
    def convert(obj):
        if isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, np.ndarray):
            return obj.tolist()
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

    with open(path, 'w') as f:
        json.dump(results, f, default=convert, indent=2)

    print(f"Results saved to {path}")
