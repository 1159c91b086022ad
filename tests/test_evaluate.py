"""
Test 4: Path Checks and Benchmark

Run with:
    python tests/test_evaluate.py
    pytest tests/test_evaluate.py -v
"""

import sys
import json
import tempfile
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np

from grid_nav.grid import GridWorld, build_default_world
from grid_nav.a_star import astar_path
from grid_nav.evaluate import validate_path, path_stats, benchmark, save_results


def test_validate_good_path():
    """A* paths pass validation."""
    world = build_default_world()
    path = astar_path(world)

    assert validate_path(world, path) == []
    print("✓ Valid path: no problems")


def test_validate_bad_paths():
    """Validation reports each kind of problem."""
    world = build_default_world()

    assert validate_path(world, None) == ["path is empty"]
    assert validate_path(world, []) == ["path is empty"]

    wrong_start = validate_path(world, [(0, 1), (0, 0)])
    assert any("starts at" in p for p in wrong_start)
    assert any("ends at" in p for p in wrong_start)

    diagonal = GridWorld(np.zeros((2, 2)), (0, 0), (1, 1))
    problems = validate_path(diagonal, [(0, 0), (1, 1)])
    assert problems == ["(0, 0) -> (1, 1) is not a 4-directional step"]

    through_wall = GridWorld(np.array([[0, 1, 0]]), (0, 0), (0, 2))
    problems = validate_path(through_wall, [(0, 0), (0, 1), (0, 2)])
    assert problems == ["(0, 1) is a wall or out of bounds"]

    loop = GridWorld(np.zeros((2, 2)), (0, 0), (0, 1))
    problems = validate_path(loop, [(0, 0), (1, 0), (0, 0), (0, 1)])
    assert problems == ["path visits a cell more than once"]

    print("✓ Invalid paths: endpoints, steps, walls and repeats reported")


def test_path_stats():
    """Stats report steps and detour over Manhattan distance."""
    grid = np.zeros((10, 10), dtype=np.int32)
    grid[5, 0:9] = 1
    world = GridWorld(grid, (0, 0), (9, 0))

    stats = path_stats(world, astar_path(world))
    assert stats == {'found': True, 'cells': 28, 'steps': 27, 'manhattan': 9, 'detour': 18}

    missing = path_stats(world, None)
    assert missing['found'] is False
    assert missing['steps'] is None
    print(f"✓ Path stats: {stats}")


def test_benchmark():
    """Benchmark finds valid paths on every generated world."""
    results = benchmark(num_worlds=10, size=8, base_seed=0, verbose=False)
    summary = results['summary']

    assert summary['num_worlds'] == len(results['episodes']) > 0
    assert summary['success_rate'] == 1.0
    assert summary['valid_rate'] == 1.0
    assert summary['mean_detour'] >= 0
    assert all(e['detour'] >= 0 for e in results['episodes'])
    print(f"✓ Benchmark: {summary['num_worlds']} worlds, mean detour {summary['mean_detour']:.2f}")


def test_save_results():
    """Results are written as JSON."""
    results = benchmark(num_worlds=3, size=6, base_seed=5, verbose=False)

    with tempfile.TemporaryDirectory() as tmp:
        out = Path(tmp) / "nested" / "benchmark.json"
        save_results(results, str(out))

        with open(out) as f:
            loaded = json.load(f)

    assert loaded['summary']['num_worlds'] == results['summary']['num_worlds']
    assert len(loaded['episodes']) == len(results['episodes'])
    print("✓ Save results: JSON round trip")


def run_all():
    """Run all tests with visual output."""
    print("\n" + "=" * 50)
    print("TEST 4: Evaluation")
    print("=" * 50 + "\n")

    test_validate_good_path()
    test_validate_bad_paths()
    test_path_stats()
    test_benchmark()
    test_save_results()

    print("\n" + "-" * 50)
    print("All evaluation tests passed!")
    print("-" * 50)


if __name__ == "__main__":
    run_all()
