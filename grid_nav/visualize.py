"""
Visualization Utilities

Static rendering of a grid world and its shortest path.
"""

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
from matplotlib.colors import to_rgb
import numpy as np
from typing import List, Optional, Tuple
from pathlib import Path

from .grid import Cell, GridWorld


# Color scheme
COLORS = {
    'free': '#FFFFFF',       # White
    'wall': '#000000',       # Black
    'start': '#00C853',      # Green
    'goal': '#F44336',       # Red
    'path': '#00E5FF',       # Cyan
    'grid_line': '#9E9E9E',  # Gray
}


def grid_to_rgb(world: GridWorld, path: Optional[List[Cell]] = None) -> np.ndarray:
    """
    Color every cell: walls, free space, then path, start and goal on top.

    Returns:
        (rows, cols, 3) float array of RGB values
    """
    display = np.empty((world.rows, world.cols, 3))
    display[:] = to_rgb(COLORS['free'])
    display[world.grid == 1] = to_rgb(COLORS['wall'])

    for row, col in path or []:
        display[row, col] = to_rgb(COLORS['path'])

    display[world.start] = to_rgb(COLORS['start'])
    display[world.goal] = to_rgb(COLORS['goal'])
    return display


def plot_grid(
    world: GridWorld,
    path: Optional[List[Cell]] = None,
    title: str = "A* Pathfinding Visualization",
    show_coords: bool = False,
    figsize: Tuple[int, int] = (6, 6),
    save_path: Optional[str] = None,
    show: bool = True
) -> plt.Figure:
    """
    Draw the world as filled squares with the path highlighted.

    Args:
        world: Grid world to draw
        path: Path to highlight, or None
        title: Plot title
        show_coords: Show row/column tick labels
        figsize: Figure size
        save_path: Path to save figure
        show: Whether to display

    Returns:
        matplotlib Figure
    """
    fig, ax = plt.subplots(figsize=figsize)
    rows, cols = world.shape

    ax.imshow(grid_to_rgb(world, path), origin='upper', aspect='equal')

    # Draw grid lines
    for i in range(rows + 1):
        ax.axhline(i - 0.5, color=COLORS['grid_line'], linewidth=1)
    for j in range(cols + 1):
        ax.axvline(j - 0.5, color=COLORS['grid_line'], linewidth=1)

    if show_coords:
        ax.set_xticks(range(cols))
        ax.set_yticks(range(rows))
        ax.set_xlabel('Column')
        ax.set_ylabel('Row')
    else:
        ax.set_xticks([])
        ax.set_yticks([])

    ax.set_xlim(-0.5, cols - 0.5)
    ax.set_ylim(rows - 0.5, -0.5)
    ax.set_title(title, fontsize=14, fontweight='bold')

    handles = [
        mpatches.Patch(color=COLORS['start'], label='Start'),
        mpatches.Patch(color=COLORS['goal'], label='Goal'),
    ]
    if path:
        handles.append(mpatches.Patch(color=COLORS['path'], label=f'Path ({len(path) - 1} steps)'))
    else:
        handles.append(mpatches.Patch(color=COLORS['free'], label='No path'))
    ax.legend(handles=handles, loc='upper center', bbox_to_anchor=(0.5, -0.02),
              ncol=len(handles), fontsize=9, frameon=False)

    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight', facecolor='white')
        print(f"Saved: {save_path}")

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig


def render_ascii(world: GridWorld, path: Optional[List[Cell]] = None) -> str:
    """
    Render the world as text.

    S=start, G=goal, *=path, #=wall, .=free
    """
    path_set = set(path) if path else set()
    lines = ["+" + "-" * world.cols + "+"]

    for i in range(world.rows):
        row = []
        for j in range(world.cols):
            pos = (i, j)
            if pos == world.start:
                row.append("S")
            elif pos == world.goal:
                row.append("G")
            elif pos in path_set:
                row.append("*")
            elif world.is_wall(pos):
                row.append("#")
            else:
                row.append(".")
        lines.append("|" + "".join(row) + "|")

    lines.append("+" + "-" * world.cols + "+")
    return "\n".join(lines)


def print_grid_ascii(world: GridWorld, path: Optional[List[Cell]] = None) -> None:
    """Print grid as ASCII art (for terminal output)."""
    print(render_ascii(world, path))


def demo():
    """Search the default scene once and show the result."""
    from .grid import build_default_world
    from .a_star import astar_path, path_to_moves, MOVE_NAMES

    print("=" * 50)
    print("A* Pathfinding Visualization")
    print("=" * 50)

    world = build_default_world()
    path = astar_path(world)

    print("\nASCII Grid:")
    print_grid_ascii(world, path)

    print(f"\nStart: {world.start}, Goal: {world.goal}")
    if path is None:
        print("No path found")
    else:
        print(f"Path length: {len(path)} positions ({len(path) - 1} moves)")
        print(f"Moves: {[MOVE_NAMES[m] for m in path_to_moves(path)]}")

    print("\nDisplaying plot... (close window to exit)")
    plot_grid(world, path)


if __name__ == "__main__":
    demo()
