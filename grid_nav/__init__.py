"""
GridNav: A* Shortest Path on an Occupancy Grid

Computes one 4-directional shortest path on a fixed grid and draws it.
"""

__version__ = "0.1.0"

from .grid import GridWorld, InvalidCoordinate, build_default_world, world_from_rows
from .a_star import astar_path, search, SearchResult
from .map_generator import generate_random_map, generate_solvable_world
