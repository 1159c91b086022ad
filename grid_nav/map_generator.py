"""
Map Generator

Generates random occupancy grids and solvable worlds for testing and benchmarks.
"""

import numpy as np
from typing import List, Optional

from .grid import GridWorld
from .a_star import astar_path


def generate_random_map(
    size: int = 10,
    obstacle_density: float = 0.2,
    seed: Optional[int] = None
) -> np.ndarray:
    """
    Generate a random occupancy grid.

    Args:
        size: Grid size (size x size)
        obstacle_density: Probability of each cell being a wall
        seed: Random seed for reproducibility

    Returns:
        2D numpy array (0=free, 1=wall)
    """
    rng = np.random.RandomState(seed)
    return (rng.random_sample((size, size)) < obstacle_density).astype(np.int32)


def generate_solvable_world(
    size: int = 10,
    obstacle_density: float = 0.2,
    seed: Optional[int] = None,
    max_attempts: int = 100
) -> GridWorld:
    """
    Generate a random world whose start and goal are connected.

    Args:
        size: Grid size
        obstacle_density: Wall probability
        seed: Random seed
        max_attempts: Maximum attempts to find a solvable configuration

    Returns:
        GridWorld with distinct, free start and goal

    Raises:
        ValueError: If no solvable configuration found
    """
    rng = np.random.RandomState(seed)

    for _ in range(max_attempts):
        grid = (rng.random_sample((size, size)) < obstacle_density).astype(np.int32)

        free_cells = list(zip(*np.where(grid == 0)))
        if len(free_cells) < 2:
            continue

        indices = rng.choice(len(free_cells), size=2, replace=False)
        world = GridWorld(grid, free_cells[indices[0]], free_cells[indices[1]])

        path = astar_path(world)
        if path is not None and len(path) > 1:
            return world

    raise ValueError(f"Could not generate solvable map after {max_attempts} attempts")


def generate_worlds(
    num_worlds: int,
    size: int = 10,
    obstacle_density: float = 0.2,
    base_seed: int = 42
) -> List[GridWorld]:
    """
    Generate several solvable worlds, one per seed.

    Seeds that fail to produce a solvable world are skipped,
    so fewer than num_worlds may be returned.
    """
    worlds = []

    for i in range(num_worlds):
        try:
            worlds.append(generate_solvable_world(
                size=size,
                obstacle_density=obstacle_density,
                seed=base_seed + i
            ))
        except ValueError:
            continue

    return worlds
