"""Recursive chamber division."""

import logging
from typing import Optional

from ..utils.rng import SeededRNG, default_rng
from .types import Chamber, Connector, DivisionResult

logger = logging.getLogger(__name__)

# A region is split along an axis only while its size on that axis exceeds this
SPLIT_THRESHOLD = 4

# Smallest size a split may leave on either side: a 1-cell interior plus two walls
MIN_CHAMBER_SIZE = 3


def split_axis(width: int, height: int) -> Optional[str]:
    """
    Decide how a region would be split.

    Splits across the width are preferred when the region is wider than it is
    tall; otherwise the height is tried.

    Returns:
        "vertical", "horizontal", or None when the region is a leaf
    """
    if width > height:
        return "vertical" if width > SPLIT_THRESHOLD else None
    return "horizontal" if height > SPLIT_THRESHOLD else None


class ChamberDivider:
    """
    Splits a rectangular region into chambers with the recursive division algorithm.

    Each split emits two chambers that overlap on a single shared wall line and
    one connector on that wall. The very first split of a maze additionally
    emits two entrance connectors on the opposite outer edges of the region.
    """

    def __init__(self, rng: Optional[SeededRNG] = None):
        self.rng = rng if rng is not None else default_rng

    def divide(self, width: int, height: int, origin_row: int = 0, origin_column: int = 0,
               is_first_division: bool = True) -> DivisionResult:
        """
        Divide a region until no chamber can be split any further.

        Args:
            width: Region size along the row axis
            height: Region size along the column axis
            origin_row: Row of the region's bottom-left cell
            origin_column: Column of the region's bottom-left cell
            is_first_division: Whether this is the top-level split of a maze

        Returns:
            DivisionResult with every emitted chamber, their corners and all connectors

        Raises:
            ValueError: If width or height <= 0
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Region dimensions must be positive, got {width}x{height}")

        result = DivisionResult()
        self._divide(result, width, height, origin_row, origin_column, is_first_division, depth=0)
        logger.debug(
            "Divided %dx%d region into %d chambers (%d leaves) with %d connectors",
            width, height, len(result.chambers), len(result.leaves), len(result.connectors)
        )
        return result

    def _divide(self, result: DivisionResult, width: int, height: int,
                origin_row: int, origin_column: int, is_first_division: bool, depth: int):
        axis = split_axis(width, height)
        if axis == "vertical":
            self._vertical_split(result, width, height, origin_row, origin_column, is_first_division, depth)
        elif axis == "horizontal":
            self._horizontal_split(result, width, height, origin_row, origin_column, is_first_division, depth)

    def _draw_split(self, result: DivisionResult, size: int, origin: tuple, axis: str) -> Optional[int]:
        """Draw a split size in [MIN_CHAMBER_SIZE, size - 2], or None if that range is empty."""
        upper = size - 2
        if upper < MIN_CHAMBER_SIZE:
            message = f"Degenerate {axis} split of size {size} at {origin}, leaving region unsplit"
            logger.warning(message)
            result.warnings.append(message)
            return None
        return self.rng.randint(MIN_CHAMBER_SIZE, upper)

    def _vertical_split(self, result: DivisionResult, width: int, height: int,
                        origin_row: int, origin_column: int, is_first_division: bool, depth: int):
        """Split into a left and a right chamber sharing one column of wall."""
        split_width = self._draw_split(result, width, (origin_row, origin_column), "vertical")
        if split_width is None:
            return

        # Room 1
        self._emit(result, origin_row, origin_column, split_width, height)
        self._divide(result, split_width, height, origin_row, origin_column, False, depth + 1)

        # Room 2 starts on room 1's last row
        wall_row = origin_row + split_width - 1
        self._emit(result, wall_row, origin_column, width - split_width + 1, height)
        self._divide(result, width - split_width + 1, height, wall_row, origin_column, False, depth + 1)

        # Wall ends coincide with corners, so only interior columns are usable
        minimum = origin_column + 1
        maximum = origin_column + height - 2
        result.connectors.append(
            Connector((wall_row, self.rng.randint(minimum, maximum)), minimum, maximum, True)
        )

        if is_first_division:
            # Entrances on the outer left and right edges
            for edge_row in (origin_row, origin_row + width - 1):
                result.connectors.append(
                    Connector((edge_row, self.rng.randint(minimum, maximum)), minimum, maximum, True)
                )

        logger.debug("Vertical split of %dx%d at depth %d, wall row %d", width, height, depth, wall_row)

    def _horizontal_split(self, result: DivisionResult, width: int, height: int,
                          origin_row: int, origin_column: int, is_first_division: bool, depth: int):
        """Split into a lower and an upper chamber sharing one row of wall."""
        split_height = self._draw_split(result, height, (origin_row, origin_column), "horizontal")
        if split_height is None:
            return

        # Room 1
        self._emit(result, origin_row, origin_column, width, split_height)
        self._divide(result, width, split_height, origin_row, origin_column, False, depth + 1)

        # Room 2 starts on room 1's last column
        wall_column = origin_column + split_height - 1
        self._emit(result, origin_row, wall_column, width, height - split_height + 1)
        self._divide(result, width, height - split_height + 1, origin_row, wall_column, False, depth + 1)

        minimum = origin_row + 1
        maximum = origin_row + width - 2
        result.connectors.append(
            Connector((self.rng.randint(minimum, maximum), wall_column), minimum, maximum, False)
        )

        if is_first_division:
            # Entrances on the outer bottom and top edges
            for edge_column in (origin_column, origin_column + height - 1):
                result.connectors.append(
                    Connector((self.rng.randint(minimum, maximum), edge_column), minimum, maximum, False)
                )

        logger.debug("Horizontal split of %dx%d at depth %d, wall column %d", width, height, depth, wall_column)

    def _emit(self, result: DivisionResult, row: int, column: int, width: int, height: int):
        """Record a chamber and its four corners."""
        chamber = Chamber((row, column), width, height, leaf=split_axis(width, height) is None)
        result.chambers.append(chamber)
        result.corners.extend(chamber.corners())
