"""
Tests for paint plans and the reveal scheduler.
"""

import pytest

from divmaze.app.reveal import PaintCommand, RevealScheduler, build_paint_plan
from divmaze.domain.assembler import MazeAssembler
from divmaze.domain.types import MazeDescription
from divmaze.utils.rng import SeededRNG


@pytest.fixture
def small_description():
    return MazeDescription(
        floor_extent=(3, 2),
        chambers=(),
        wall_cells=frozenset({(0, 0), (2, 1)}),
        opening_cells=frozenset({(1, 0)}),
        wall_tags={(0, 0): "#ff0000", (2, 1): None},
        corners=frozenset({(0, 0)}),
    )


class TestPaintPlan:

    def test_plan_order(self, small_description):
        plan = build_paint_plan(small_description)

        materials = [command.material for command in plan]
        assert materials == ["floor"] * 6 + ["wall", "wall", "corner", "empty"]
        assert plan[6] == PaintCommand((0, 0), "wall", "#ff0000")
        assert plan[-1] == PaintCommand((1, 0), "empty")

    def test_no_corners_without_debug(self):
        description = MazeAssembler(SeededRNG(1)).generate(12, 12)
        plan = build_paint_plan(description)

        assert all(command.material != "corner" for command in plan)
        assert sum(1 for c in plan if c.material == "wall") == len(description.wall_cells)
        assert sum(1 for c in plan if c.material == "empty") == len(description.opening_cells)


class TestRevealScheduler:

    def test_start_clears_the_sink(self, small_description, sink):
        scheduler = RevealScheduler.for_description(small_description, sink)

        scheduler.start()

        assert sink.cleared == 1
        assert scheduler.progress == 0.0
        assert scheduler.active

    def test_tick_paints_in_batches(self, small_description, sink):
        scheduler = RevealScheduler.for_description(small_description, sink)
        scheduler.start()

        assert scheduler.tick(4) == 4
        assert len(sink.painted) == 4
        assert scheduler.progress == pytest.approx(0.4)

        assert scheduler.tick(4) == 4
        assert scheduler.tick(4) == 2
        assert scheduler.finished
        assert scheduler.tick(4) == 0
        assert sink.painted[-1] == ((1, 0), "empty", None)

    def test_tick_before_start_does_nothing(self, small_description, sink):
        scheduler = RevealScheduler.for_description(small_description, sink)
        assert scheduler.tick() == 0
        assert sink.painted == []

    def test_flush_paints_everything(self, small_description, sink):
        scheduler = RevealScheduler.for_description(small_description, sink)
        scheduler.start()
        scheduler.tick()

        assert scheduler.flush() == 9
        assert scheduler.finished
        assert scheduler.progress == 1.0

    def test_cancel_stops_painting(self, small_description, sink):
        scheduler = RevealScheduler.for_description(small_description, sink)
        scheduler.start()
        scheduler.tick(3)

        scheduler.cancel()

        assert scheduler.tick(10) == 0
        assert len(sink.painted) == 3
        assert not scheduler.active

    def test_restart_after_cancel(self, small_description, sink):
        scheduler = RevealScheduler.for_description(small_description, sink)
        scheduler.start()
        scheduler.tick(5)
        scheduler.cancel()

        scheduler.start()
        scheduler.flush()

        assert sink.cleared == 2
        assert len(sink.painted) == 10
