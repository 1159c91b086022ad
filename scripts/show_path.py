#!/usr/bin/env python3
"""
Show the A* path on the default 10x10 scene, or on a random world.

Usage:
    python scripts/show_path.py
    python scripts/show_path.py --random --seed 42 --size 12 --density 0.25
    python scripts/show_path.py --save results/plots/astar.png --no-plot
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import argparse
from grid_nav.grid import build_default_world
from grid_nav.map_generator import generate_solvable_world
from grid_nav.a_star import search, path_to_moves, MOVE_NAMES
from grid_nav.evaluate import path_stats
from grid_nav.visualize import plot_grid, print_grid_ascii


def main():
    parser = argparse.ArgumentParser(description="A* Pathfinding Visualization")
    parser.add_argument("--random", action="store_true", help="Use a random solvable world")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--size", type=int, default=10, help="Grid size for --random")
    parser.add_argument("--density", type=float, default=0.2, help="Wall density for --random")
    parser.add_argument("--save", type=str, default=None, help="Save path for image")
    parser.add_argument("--no-plot", action="store_true", help="ASCII only, no window")
    args = parser.parse_args()

    print("=" * 50)
    print("A* Pathfinding")
    print("=" * 50)

    if args.random:
        print(f"Random world: {args.size}x{args.size}, density {args.density}, seed {args.seed}")
        try:
            world = generate_solvable_world(
                size=args.size,
                obstacle_density=args.density,
                seed=args.seed
            )
        except ValueError as e:
            print(f"ERROR: {e}")
            sys.exit(1)
    else:
        print("Default world: 10x10, wall on row 5 (columns 2-7)")
        world = build_default_world()

    result = search(world)
    stats = path_stats(world, result.path)

    print()
    print("-" * 50)
    print("RESULTS")
    print("-" * 50)
    print(f"Start:     {world.start}")
    print(f"Goal:      {world.goal}")
    print(f"Walls:     {int(world.grid.sum())} / {world.rows * world.cols} cells")
    print(f"Expanded:  {result.expanded} nodes")
    if result.found:
        moves = path_to_moves(result.path)
        print(f"Path:      {stats['cells']} positions ({stats['steps']} moves, detour {stats['detour']})")
        print()
        print("Moves:")
        print("  " + " -> ".join(MOVE_NAMES[m] for m in moves))
    else:
        print("Path:      none (goal unreachable)")
    print()

    print("ASCII Grid:")
    print_grid_ascii(world, result.path)

    if args.save or not args.no_plot:
        print()
        if not args.no_plot:
            print("Displaying plot... (close window to exit)")
        title = f"A* Pathfinding | {stats['steps'] if result.found else 'no'} moves"
        plot_grid(
            world,
            path=result.path,
            title=title,
            save_path=args.save,
            show=not args.no_plot
        )


if __name__ == "__main__":
    main()
