"""
Test 3: Map Generator

Run with:
    python tests/test_map_generator.py
    pytest tests/test_map_generator.py -v
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
from grid_nav.map_generator import generate_random_map, generate_solvable_world, generate_worlds
from grid_nav.a_star import astar_path, heuristic


def test_random_map_shape():
    """Random maps have correct shape."""
    for size in [4, 8, 16]:
        grid = generate_random_map(size=size, seed=42)
        assert grid.shape == (size, size), f"Expected ({size}, {size}), got {grid.shape}"

    print("✓ Map shapes: 4x4, 8x8, 16x16")


def test_random_map_values():
    """Maps contain only 0s and 1s."""
    grid = generate_random_map(size=8, obstacle_density=0.3, seed=42)
    unique_vals = np.unique(grid)

    assert all(v in [0, 1] for v in unique_vals), f"Invalid values: {unique_vals}"
    print(f"✓ Map values: {unique_vals.tolist()} (only 0 and 1)")


def test_random_map_reproducibility():
    """Same seed produces same map."""
    grid1 = generate_random_map(size=8, seed=123)
    grid2 = generate_random_map(size=8, seed=123)

    assert np.array_equal(grid1, grid2), "Same seed should produce same map"
    print("✓ Reproducibility: same seed = same map")


def test_solvable_world_has_path():
    """Generated worlds are actually solvable."""
    print("✓ Solvable worlds (10 tests):")

    for i in range(10):
        world = generate_solvable_world(size=8, obstacle_density=0.2, seed=i)

        assert world.is_walkable(world.start), "Start should be free"
        assert world.is_walkable(world.goal), "Goal should be free"
        assert world.start != world.goal, "Start and goal should be different"

        path = astar_path(world)
        assert path is not None, f"World {i} should be solvable"
        assert len(path) - 1 >= heuristic(world.start, world.goal)

        if i < 3:  # Print first 3
            print(f"    World {i}: start={world.start}, goal={world.goal}, path_len={len(path)}")


def test_solvable_world_reproducibility():
    """Same seed produces same world."""
    assert generate_solvable_world(size=8, seed=7) == generate_solvable_world(size=8, seed=7)
    print("✓ Reproducibility: same seed = same world")


def test_obstacle_density():
    """Obstacle density is approximately correct."""
    densities = []
    for i in range(20):
        grid = generate_random_map(size=8, obstacle_density=0.25, seed=i)
        densities.append(grid.sum() / (8 * 8))

    avg_density = np.mean(densities)
    assert 0.15 < avg_density < 0.35, f"Average density {avg_density} out of range"
    print(f"✓ Obstacle density: {avg_density:.2f} (target: 0.25)")


def test_unsolvable_density_raises():
    """A fully walled grid cannot produce a world."""
    try:
        generate_solvable_world(size=4, obstacle_density=1.0, seed=0, max_attempts=5)
    except ValueError as e:
        print(f"✓ Unsolvable density: {e}")
    else:
        raise AssertionError("Expected ValueError for a fully walled grid")


def test_generate_worlds():
    """Batch world generation works."""
    worlds = generate_worlds(num_worlds=20, size=8, base_seed=42)

    assert len(worlds) > 0, "Should generate some worlds"
    assert len(worlds) <= 20, "Should not exceed requested count"

    for world in worlds:
        assert world.shape == (8, 8)
        assert astar_path(world) is not None, "All worlds should be solvable"

    print(f"✓ Batch generation: {len(worlds)} solvable worlds")


def run_all():
    """Run all tests with visual output."""
    print("\n" + "=" * 50)
    print("TEST 3: Map Generator")
    print("=" * 50 + "\n")

    test_random_map_shape()
    test_random_map_values()
    test_random_map_reproducibility()
    test_solvable_world_has_path()
    test_solvable_world_reproducibility()
    test_obstacle_density()
    test_unsolvable_density_raises()
    test_generate_worlds()

    print("\n" + "-" * 50)
    print("All map generator tests passed!")
    print("-" * 50)


if __name__ == "__main__":
    run_all()
