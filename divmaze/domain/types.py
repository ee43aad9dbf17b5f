"""Core type definitions for recursive-division maze generation."""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, List, Literal, Mapping, Optional, Tuple

import numpy as np

# Grid position as (row, column); row runs along the maze width, column along its height
Coord = Tuple[int, int]

# Materials understood by the paint sink
Material = Literal["floor", "wall", "corner", "empty"]

# Inclusive bounds for either maze dimension
MIN_DIMENSION = 10
MAX_DIMENSION = 255


def clamp_dimension(value: int) -> int:
    """Clamp a requested maze dimension into [MIN_DIMENSION, MAX_DIMENSION]."""
    return max(MIN_DIMENSION, min(MAX_DIMENSION, int(value)))


@dataclass(frozen=True)
class Chamber:
    """An axis-aligned rectangle produced by splitting; origin is its bottom-left cell."""
    origin: Coord
    width: int
    height: int
    leaf: bool = False

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Chamber dimensions must be positive, got {self.width}x{self.height}")

    @property
    def row(self) -> int:
        return self.origin[0]

    @property
    def column(self) -> int:
        return self.origin[1]

    @property
    def last_row(self) -> int:
        return self.row + self.width - 1

    @property
    def last_column(self) -> int:
        return self.column + self.height - 1

    def corners(self) -> List[Coord]:
        """Top-left, bottom-left, top-right and bottom-right cells."""
        return [
            (self.row, self.last_column),
            (self.row, self.column),
            (self.last_row, self.last_column),
            (self.last_row, self.column),
        ]

    def perimeter(self) -> Iterator[Coord]:
        """Yield the boundary cells, walking local rows then columns."""
        for row in range(self.width):
            for column in range(self.height):
                if row == 0 or row == self.width - 1 or column == 0 or column == self.height - 1:
                    yield (self.row + row, self.column + column)

    def interior(self) -> Iterator[Coord]:
        """Yield the cells strictly inside the boundary."""
        for row in range(self.row + 1, self.last_row):
            for column in range(self.column + 1, self.last_column):
                yield (row, column)

    def cells(self) -> Iterator[Coord]:
        for row in range(self.row, self.last_row + 1):
            for column in range(self.column, self.last_column + 1):
                yield (row, column)

    def within(self, width: int, height: int) -> bool:
        """Check if the chamber lies fully inside [0, width) x [0, height)."""
        return self.row >= 0 and self.column >= 0 and self.last_row < width and self.last_column < height


@dataclass
class Connector:
    """
    A candidate single-cell opening in a wall.

    A vertical connector sits on a wall that runs along the column axis, so its
    alternatives keep the row fixed and vary the column within
    [minimum, maximum]. A horizontal connector keeps the column fixed instead.
    """
    position: Coord
    minimum: int
    maximum: int
    is_vertical: bool

    def __post_init__(self):
        if self.minimum > self.maximum:
            raise ValueError(f"Connector range is empty: [{self.minimum}, {self.maximum}]")

    def candidates(self) -> List[Coord]:
        """All cells along this connector's wall segment, inclusive."""
        row, column = self.position
        if self.is_vertical:
            return [(row, i) for i in range(self.minimum, self.maximum + 1)]
        return [(i, column) for i in range(self.minimum, self.maximum + 1)]

    def relocate(self, position: Coord):
        """Move the opening to another cell on the same wall segment."""
        self.position = position


@dataclass
class DivisionResult:
    """Everything collected while recursively dividing a region."""
    chambers: List[Chamber] = field(default_factory=list)
    corners: List[Coord] = field(default_factory=list)
    connectors: List[Connector] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def leaves(self) -> List[Chamber]:
        return [chamber for chamber in self.chambers if chamber.leaf]


@dataclass(frozen=True)
class MazeDescription:
    """The complete, final result of one generation run."""
    floor_extent: Tuple[int, int]
    chambers: Tuple[Chamber, ...]
    wall_cells: FrozenSet[Coord]
    opening_cells: FrozenSet[Coord]
    connectors: Tuple[Connector, ...] = field(default=(), hash=False)
    relocated_count: int = 0
    warnings: Tuple[str, ...] = ()
    # Populated only when debug visualization is enabled
    wall_tags: Optional[Mapping[Coord, Optional[str]]] = field(default=None, hash=False)
    corners: Optional[FrozenSet[Coord]] = None

    @property
    def width(self) -> int:
        return self.floor_extent[0]

    @property
    def height(self) -> int:
        return self.floor_extent[1]

    def is_valid_coord(self, coord: Coord) -> bool:
        """Check if coordinate is within the floor extent."""
        row, column = coord
        return 0 <= row < self.width and 0 <= column < self.height

    @property
    def entrances(self) -> FrozenSet[Coord]:
        """Openings that sit on the outer boundary of the maze."""
        return frozenset(
            (row, column) for row, column in self.opening_cells
            if row in (0, self.width - 1) or column in (0, self.height - 1)
        )

    def to_array(self) -> np.ndarray:
        """Return a boolean wall mask of shape (width, height)."""
        mask = np.zeros(self.floor_extent, dtype=bool)
        for row, column in self.wall_cells:
            mask[row, column] = True
        return mask


@dataclass(frozen=True)
class Busy:
    """Returned instead of a description when a generation is already running."""
    reason: str = "Generation request denied, still busy with the last request"


@dataclass
class GenerationConfig:
    """Configuration for a generation request."""
    width: int = MIN_DIMENSION
    height: int = MIN_DIMENSION
    debug_visual: bool = False
    seed: Optional[int] = None


def validate_dimensions(width: int, height: int):
    """Raise ValueError unless both dimensions lie in [MIN_DIMENSION, MAX_DIMENSION]."""
    for name, value in (("width", width), ("height", height)):
        if not MIN_DIMENSION <= value <= MAX_DIMENSION:
            raise ValueError(
                f"Maze {name} must be between {MIN_DIMENSION} and {MAX_DIMENSION}, got {value}"
            )
