"""
A* Pathfinding Algorithm

Shortest 4-directional path on a uniform-cost occupancy grid,
using the Manhattan distance heuristic.
"""

import heapq
from dataclasses import dataclass
from typing import List, Tuple, Optional

from .grid import Cell, GridWorld, InvalidCoordinate, as_cell


# Move definitions
# 0: UP, 1: DOWN, 2: LEFT, 3: RIGHT
MOVES = {
    0: (-1, 0),   # UP (decrease row)
    1: (1, 0),    # DOWN (increase row)
    2: (0, -1),   # LEFT (decrease col)
    3: (0, 1),    # RIGHT (increase col)
}

MOVE_NAMES = {0: "UP", 1: "DOWN", 2: "LEFT", 3: "RIGHT"}

NO_PARENT = -1


@dataclass
class SearchNode:
    """A cell reached during search; parent is an index into the node list."""
    cell: Cell
    g: int
    h: int
    parent: int = NO_PARENT

    @property
    def f(self) -> int:
        return self.g + self.h


@dataclass
class SearchResult:
    path: Optional[List[Cell]]
    expanded: int = 0
    generated: int = 0

    @property
    def found(self) -> bool:
        return self.path is not None


def heuristic(a: Cell, b: Cell) -> int:
    """Manhattan distance heuristic."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def get_neighbors(
    pos: Cell,
    world: GridWorld
) -> List[Tuple[Cell, int]]:
    """
    Get walkable neighboring positions and the move to reach them.

    Args:
        pos: Current position (row, col)
        world: Grid world to search

    Returns:
        List of (neighbor_pos, move_id) tuples
    """
    neighbors = []

    for move_id, (dr, dc) in MOVES.items():
        neighbor = (pos[0] + dr, pos[1] + dc)

        # Bounds and wall check
        if world.is_walkable(neighbor):
            neighbors.append((neighbor, move_id))

    return neighbors


def _reconstruct(nodes: List[SearchNode], index: int) -> List[Cell]:
    path = []
    while index != NO_PARENT:
        node = nodes[index]
        path.append(node.cell)
        index = node.parent
    path.reverse()
    return path


def _endpoint(world: GridWorld, cell: Optional[Cell], default: Cell) -> Cell:
    if cell is None:
        return default
    cell = as_cell(cell, world.shape)
    if not world.in_bounds(cell):
        raise InvalidCoordinate(cell, world.shape)
    return cell


def search(
    world: GridWorld,
    start: Optional[Cell] = None,
    goal: Optional[Cell] = None
) -> SearchResult:
    """
    Run A* and report the path with search counters.

    Args:
        world: Grid world to search
        start: Start position, defaults to world.start
        goal: Goal position, defaults to world.goal

    Returns:
        SearchResult; path is None when the goal is unreachable

    Raises:
        InvalidCoordinate: If start or goal is not an integer cell inside the grid
    """
    start = _endpoint(world, start, world.start)
    goal = _endpoint(world, goal, world.goal)

    # Walled endpoints have no path
    if not world.is_walkable(start) or not world.is_walkable(goal):
        return SearchResult(path=None)

    if start == goal:
        return SearchResult(path=[start], generated=1)

    # All nodes live here; parents are indices into this list
    nodes = [SearchNode(start, 0, heuristic(start, goal))]

    # Priority queue: (f_score, counter, node_index)
    # counter breaks ties in insertion order
    counter = 0
    open_set = [(nodes[0].f, counter, 0)]

    g_score = {start: 0}
    closed_set = set()
    expanded = 0

    while open_set:
        _, _, index = heapq.heappop(open_set)
        current = nodes[index]

        # Stale entry for a cell already settled through a cheaper route
        if current.cell in closed_set:
            continue

        if current.cell == goal:
            return SearchResult(
                path=_reconstruct(nodes, index),
                expanded=expanded,
                generated=len(nodes)
            )

        closed_set.add(current.cell)
        expanded += 1

        for neighbor, _ in get_neighbors(current.cell, world):
            if neighbor in closed_set:
                continue

            tentative_g = current.g + 1

            if neighbor not in g_score or tentative_g < g_score[neighbor]:
                g_score[neighbor] = tentative_g
                nodes.append(SearchNode(neighbor, tentative_g, heuristic(neighbor, goal), index))
                counter += 1
                heapq.heappush(open_set, (nodes[-1].f, counter, len(nodes) - 1))

    return SearchResult(path=None, expanded=expanded, generated=len(nodes))


def astar_path(
    world: GridWorld,
    start: Optional[Cell] = None,
    goal: Optional[Cell] = None
) -> Optional[List[Cell]]:
    """
    Compute the shortest path using A*.

    Args:
        world: Grid world to search
        start: Start position, defaults to world.start
        goal: Goal position, defaults to world.goal

    Returns:
        List of positions from start to goal (inclusive), or None if no path exists
    """
    return search(world, start, goal).path


def path_to_moves(path: List[Cell]) -> List[int]:
    """
    Convert a path (list of positions) to a list of move IDs.

    Args:
        path: List of (row, col) positions

    Returns:
        List of move IDs to walk along the path

    Raises:
        ValueError: If two consecutive cells are not 4-adjacent
    """
    if not path or len(path) < 2:
        return []

    deltas = {delta: move_id for move_id, delta in MOVES.items()}

    moves = []
    for curr, next_pos in zip(path, path[1:]):
        delta = (next_pos[0] - curr[0], next_pos[1] - curr[1])
        if delta not in deltas:
            raise ValueError(f"Cells {curr} and {next_pos} are not adjacent")
        moves.append(deltas[delta])

    return moves


def get_next_move(
    world: GridWorld,
    current: Cell,
    goal: Optional[Cell] = None
) -> Optional[int]:
    """
    Get the first move of a shortest path from current toward goal.

    Returns:
        Move ID, or None if already at goal or no path exists
    """
    path = astar_path(world, current, goal)

    if path is None or len(path) < 2:
        return None

    return path_to_moves(path)[0]
