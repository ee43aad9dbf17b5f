"""
Tests for the grid views of a maze description.
"""

import numpy as np
import pytest

from divmaze.domain.types import MazeDescription
from divmaze.utils.grid_factory import (
    CELL_FLOOR, CELL_OPENING, CELL_WALL,
    description_to_array, find_floor_regions, render_ascii
)


@pytest.fixture
def split_room():
    """A 5x3 floor with a wall column at row 2 and one opening in it."""
    return MazeDescription(
        floor_extent=(5, 3),
        chambers=(),
        wall_cells=frozenset({(2, 0), (2, 2)}),
        opening_cells=frozenset({(2, 1)}),
    )


class TestDescriptionToArray:

    def test_cell_codes(self, split_room):
        cells = description_to_array(split_room)

        assert cells.shape == (5, 3)
        assert cells.dtype == np.int8
        assert cells[2, 0] == CELL_WALL
        assert cells[2, 1] == CELL_OPENING
        assert cells[0, 0] == CELL_FLOOR

    def test_wall_mask(self, split_room):
        mask = split_room.to_array()
        assert mask.sum() == 2
        assert mask[2, 2]


class TestRenderAscii:

    def test_top_row_printed_first(self, split_room):
        assert render_ascii(split_room) == "\n".join([
            "..#..",
            ".. ..",
            "..#..",
        ])

    def test_dimensions(self):
        description = MazeDescription((4, 2), (), frozenset({(3, 1)}), frozenset())
        lines = render_ascii(description).split("\n")
        assert lines == ["...#", "...."]


class TestFloorRegions:

    def test_opening_joins_both_sides(self, split_room):
        regions = find_floor_regions(split_room)
        assert len(regions) == 1
        assert len(regions[0]) == 13

    def test_closed_wall_splits_regions(self):
        description = MazeDescription(
            floor_extent=(5, 3),
            chambers=(),
            wall_cells=frozenset({(2, 0), (2, 1), (2, 2), (4, 0), (4, 1), (4, 2)}),
            opening_cells=frozenset(),
        )

        regions = find_floor_regions(description)

        assert [len(region) for region in regions] == [6, 3]
        assert (0, 0) in regions[0]
