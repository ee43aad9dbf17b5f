"""Grid views of a maze description: arrays, ASCII and floor regions."""

from collections import deque
from typing import List, Set

import numpy as np

from ..domain.types import Coord, MazeDescription

CELL_FLOOR = 0
CELL_WALL = 1
CELL_OPENING = 2


def description_to_array(description: MazeDescription) -> np.ndarray:
    """
    Convert a description into an int8 cell array.

    Args:
        description: Finished maze description

    Returns:
        Array of shape (width, height) indexed [row, column]
    """
    cells = np.full(description.floor_extent, CELL_FLOOR, dtype=np.int8)
    for row, column in description.wall_cells:
        cells[row, column] = CELL_WALL
    for row, column in description.opening_cells:
        cells[row, column] = CELL_OPENING
    return cells


def render_ascii(description: MazeDescription) -> str:
    """Render with '#' for walls, '.' for floor and ' ' for openings, top row first."""
    symbols = {CELL_FLOOR: ".", CELL_WALL: "#", CELL_OPENING: " "}
    cells = description_to_array(description)

    lines = []
    for column in range(description.height - 1, -1, -1):
        lines.append("".join(symbols[int(cells[row, column])] for row in range(description.width)))
    return "\n".join(lines)


def find_floor_regions(description: MazeDescription) -> List[Set[Coord]]:
    """
    Group all non-wall cells into 4-connected regions using flood fill.

    Returns:
        List of regions, largest first
    """
    passable = ~description.to_array()
    visited = np.zeros_like(passable)
    directions = [(0, 1), (1, 0), (0, -1), (-1, 0)]
    regions = []

    for start in zip(*np.nonzero(passable)):
        start = (int(start[0]), int(start[1]))
        if visited[start]:
            continue

        region = {start}
        visited[start] = True
        queue = deque([start])
        while queue:
            row, column = queue.popleft()
            for d_row, d_column in directions:
                neighbor = (row + d_row, column + d_column)
                if (description.is_valid_coord(neighbor) and
                        passable[neighbor] and not visited[neighbor]):
                    visited[neighbor] = True
                    region.add(neighbor)
                    queue.append(neighbor)
        regions.append(region)

    regions.sort(key=len, reverse=True)
    return regions
