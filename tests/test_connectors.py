"""
Tests for connector validation and relocation.
"""

import pytest

from divmaze.domain.connectors import ConnectorPlanner
from divmaze.domain.divider import ChamberDivider
from divmaze.domain.types import Connector
from divmaze.utils.rng import SeededRNG


class TestConnector:

    def test_vertical_candidates_vary_column(self):
        connector = Connector((4, 2), 1, 3, True)
        assert connector.candidates() == [(4, 1), (4, 2), (4, 3)]

    def test_horizontal_candidates_vary_row(self):
        connector = Connector((2, 7), 5, 6, False)
        assert connector.candidates() == [(5, 7), (6, 7)]

    def test_empty_range_raises(self):
        with pytest.raises(ValueError):
            Connector((0, 0), 3, 2, True)


class TestVerify:

    def test_valid_connector_is_untouched(self, seeded_rng):
        connector = Connector((4, 5), 1, 8, True)
        planner = ConnectorPlanner(seeded_rng)

        assert planner.verify([connector], {(4, 1), (4, 8)}) == 0
        assert connector.position == (4, 5)
        assert planner.warnings == []

    def test_connector_on_corner_is_relocated_along_its_wall(self, seeded_rng):
        forbidden = {(4, 3), (4, 6)}
        connector = Connector((4, 3), 1, 8, True)

        relocated = ConnectorPlanner(seeded_rng).verify([connector], forbidden)

        assert relocated == 1
        assert connector.position[0] == 4
        assert 1 <= connector.position[1] <= 8
        assert connector.position not in forbidden

    def test_horizontal_connector_keeps_its_column(self, scripted_rng):
        forbidden = {(2, 6), (3, 6)}
        connector = Connector((2, 6), 2, 5, False)

        ConnectorPlanner(scripted_rng()).verify([connector], forbidden)

        # ScriptedRNG picks the first remaining candidate
        assert connector.position == (4, 6)

    def test_exhausted_connector_keeps_position_with_warning(self, seeded_rng):
        connector = Connector((0, 2), 1, 3, True)
        forbidden = {(0, 1), (0, 2), (0, 3)}
        planner = ConnectorPlanner(seeded_rng)

        assert planner.verify([connector], forbidden) == 0
        assert connector.position == (0, 2)
        assert len(planner.warnings) == 1
        assert "(0, 2)" in planner.warnings[0]

    def test_candidate_positions_excludes_forbidden(self):
        connector = Connector((1, 1), 1, 4, True)
        assert ConnectorPlanner.candidate_positions(connector, {(1, 2), (1, 4)}) == [(1, 1), (1, 3)]

    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
    def test_verification_never_increases_collisions(self, seed):
        rng = SeededRNG(seed)
        result = ChamberDivider(rng).divide(60, 45)
        corners = set(result.corners)

        before = sum(1 for c in result.connectors if c.position in corners)
        ConnectorPlanner(rng).verify(result.connectors, corners)
        after = sum(1 for c in result.connectors if c.position in corners)

        assert after <= before
        assert after == 0
