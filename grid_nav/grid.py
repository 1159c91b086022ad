"""
Grid Model

Occupancy grid plus fixed start/goal cells, built once and never mutated.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple
import numpy as np


Cell = Tuple[int, int]  # (row, col)

# Default scene: 10x10 grid, horizontal wall across row 5, columns 2-7
GRID_ROWS = 10
GRID_COLS = 10
DEFAULT_START: Cell = (0, 0)
DEFAULT_GOAL: Cell = (9, 9)
WALL_ROW = 5
WALL_COLS = range(2, 8)

FREE = 0
WALL = 1


class InvalidCoordinate(ValueError):
    """A coordinate is not an integer cell inside the grid."""

    def __init__(self, cell, shape: Tuple[int, int]):
        self.cell = cell
        self.shape = shape
        super().__init__(f"Cell {cell} is not a cell of the {shape[0]}x{shape[1]} grid")


@dataclass(frozen=True, eq=False)
class GridWorld:
    """
    A read-only occupancy grid with a start and a goal.

    Args:
        grid: 2D array (0=free, 1=wall)
        start: Start position (row, col)
        goal: Goal position (row, col)

    Raises:
        ValueError: If the grid is not a non-empty 2D array of 0s and 1s
        InvalidCoordinate: If start or goal is not an integer cell inside the grid
    """
    grid: np.ndarray = field(repr=False)
    start: Cell
    goal: Cell

    def __post_init__(self):
        raw = np.asarray(self.grid)
        if raw.ndim != 2 or raw.size == 0:
            raise ValueError(f"Grid must be a non-empty 2D array, got shape {raw.shape}")
        # Check before the int cast, which would truncate 0.7 to 0
        if not np.isin(raw, (FREE, WALL)).all():
            raise ValueError(f"Grid cells must be {FREE} (free) or {WALL} (wall), "
                             f"got {np.unique(raw).tolist()}")

        grid = raw.astype(np.int32)
        grid.setflags(write=False)

        # frozen dataclass: assign through object.__setattr__
        object.__setattr__(self, "grid", grid)
        object.__setattr__(self, "start", as_cell(self.start, grid.shape))
        object.__setattr__(self, "goal", as_cell(self.goal, grid.shape))

        for cell in (self.start, self.goal):
            if not self.in_bounds(cell):
                raise InvalidCoordinate(cell, self.shape)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.grid.shape

    @property
    def rows(self) -> int:
        return self.grid.shape[0]

    @property
    def cols(self) -> int:
        return self.grid.shape[1]

    def in_bounds(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_wall(self, cell: Cell) -> bool:
        """True only for in-bounds wall cells."""
        return self.in_bounds(cell) and bool(self.grid[cell[0], cell[1]] == WALL)

    def is_walkable(self, cell: Cell) -> bool:
        """Out-of-bounds cells count as not walkable."""
        return self.in_bounds(cell) and bool(self.grid[cell[0], cell[1]] == FREE)

    def free_cells(self) -> List[Cell]:
        """Walkable cells in row-major order."""
        return [(int(r), int(c)) for r, c in zip(*np.where(self.grid == FREE))]

    def __eq__(self, other):
        if not isinstance(other, GridWorld):
            return NotImplemented
        return (self.start == other.start and self.goal == other.goal
                and np.array_equal(self.grid, other.grid))

    def __hash__(self):
        return hash((self.start, self.goal, self.grid.shape, self.grid.tobytes()))


def as_cell(cell, shape: Tuple[int, int]) -> Cell:
    """
    Normalize a coordinate pair to a (row, col) tuple of plain ints.

    Raises:
        InvalidCoordinate: If either value is not integral, e.g. (0.9, 0)
    """
    row, col = cell
    if int(row) != row or int(col) != col:
        raise InvalidCoordinate(tuple(cell), shape)
    return (int(row), int(col))


def world_from_rows(
    rows: Sequence[Sequence[int]],
    start: Cell,
    goal: Cell
) -> GridWorld:
    """Build a world from nested lists (0=free, 1=wall)."""
    return GridWorld(np.array(rows), start, goal)


def build_default_world() -> GridWorld:
    """
    Build the default scene.

    Returns:
        10x10 world with a wall across row 5 (columns 2-7),
        start at (0, 0) and goal at (9, 9)
    """
    grid = np.zeros((GRID_ROWS, GRID_COLS), dtype=np.int32)
    grid[WALL_ROW, WALL_COLS.start:WALL_COLS.stop] = WALL
    return GridWorld(grid, DEFAULT_START, DEFAULT_GOAL)
