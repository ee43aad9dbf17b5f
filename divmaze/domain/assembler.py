"""Maze assembly: division, wall collection, connector correction and output."""

import logging
import threading
from dataclasses import replace
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional, Set, Union

from ..utils.rng import SeededRNG, default_rng
from .connectors import ConnectorPlanner
from .divider import ChamberDivider
from .fsm import GenerationState, GenerationStateMachine
from .types import Busy, Chamber, Coord, DivisionResult, MazeDescription, validate_dimensions

logger = logging.getLogger(__name__)


def build_wall_map(chambers: Iterable[Chamber], rng: Optional[SeededRNG] = None,
                   tagged: bool = False) -> Dict[Coord, Optional[str]]:
    """
    Trace every chamber perimeter into one cell -> display tag mapping.

    Adjacent chambers share perimeter cells; a shared cell keeps the tag of the
    chamber processed last.

    Args:
        chambers: Chambers in processing order
        rng: Source for the per-chamber debug colors
        tagged: Attach a random color per chamber instead of None

    Returns:
        Dictionary of wall cell to tag, in first-insertion order
    """
    if rng is None:
        rng = default_rng

    walls: Dict[Coord, Optional[str]] = {}
    for chamber in chambers:
        tag = rng.random_color() if tagged else None
        for cell in chamber.perimeter():
            walls[cell] = tag
    return walls


class GenerationRun:
    """
    One generation request, executed as a sequence of stages.

    The run owns all working state. The assembler stays in the GENERATING
    state until the last stage completes or a stage raises.
    """

    STAGES = (
        "reset",
        "divide",
        "dedupe_corners",
        "build_walls",
        "verify_connectors",
        "carve_openings",
        "emit",
    )

    def __init__(self, assembler: "MazeAssembler", width: int, height: int):
        self._assembler = assembler
        self.width = width
        self.height = height
        self.debug_visual = assembler.debug_visual
        self._next_stage = 0
        self.description: Optional[MazeDescription] = None

        self._division = DivisionResult()
        self._corners: Set[Coord] = set()
        self._walls: Dict[Coord, Optional[str]] = {}
        self._openings: Set[Coord] = set()
        self._relocated = 0
        self._warnings: List[str] = []

    @property
    def finished(self) -> bool:
        return self._next_stage >= len(self.STAGES)

    @property
    def next_stage(self) -> Optional[str]:
        return None if self.finished else self.STAGES[self._next_stage]

    def step(self) -> str:
        """
        Execute the next stage.

        Returns:
            Name of the stage that was executed

        Raises:
            RuntimeError: If the run has already finished
        """
        if self.finished:
            raise RuntimeError("Generation run has already finished")

        stage = self.STAGES[self._next_stage]
        try:
            getattr(self, f"_stage_{stage}")()
        except Exception:
            self._next_stage = len(self.STAGES)
            self._assembler._release()
            raise

        self._next_stage += 1
        if self.finished:
            self._assembler._complete(self.description)
        return stage

    def run(self) -> MazeDescription:
        """Execute all remaining stages and return the description."""
        while not self.finished:
            self.step()
        return self.description

    def _stage_reset(self):
        self._division = DivisionResult()
        self._corners = set()
        self._walls = {}
        self._openings = set()
        self._relocated = 0
        self._warnings = []

    def _stage_divide(self):
        divider = ChamberDivider(self._assembler.rng)
        self._division = divider.divide(self.width, self.height, 0, 0, True)
        self._warnings.extend(self._division.warnings)

    def _stage_dedupe_corners(self):
        self._corners = set(self._division.corners)

    def _stage_build_walls(self):
        self._walls = build_wall_map(
            self._division.chambers, self._assembler.rng, tagged=self.debug_visual
        )

    def _stage_verify_connectors(self):
        planner = ConnectorPlanner(self._assembler.rng)
        self._relocated = planner.verify(self._division.connectors, self._corners)
        self._warnings.extend(planner.warnings)

    def _stage_carve_openings(self):
        self._openings = {connector.position for connector in self._division.connectors}
        for cell in self._openings:
            self._walls.pop(cell, None)

    def _stage_emit(self):
        self.description = MazeDescription(
            floor_extent=(self.width, self.height),
            chambers=tuple(self._division.leaves),
            wall_cells=frozenset(self._walls),
            opening_cells=frozenset(self._openings),
            connectors=tuple(replace(connector) for connector in self._division.connectors),
            relocated_count=self._relocated,
            warnings=tuple(self._warnings),
            wall_tags=MappingProxyType(dict(self._walls)) if self.debug_visual else None,
            corners=frozenset(self._corners) if self.debug_visual else None,
        )


class MazeAssembler:
    """
    Produces complete maze descriptions with the recursive division algorithm.

    Only one generation may be in progress at a time; a request received while
    another one is running is rejected with a Busy value and changes nothing.
    """

    def __init__(self, rng: Optional[SeededRNG] = None, debug_visual: bool = False):
        self.rng = rng if rng is not None else default_rng
        self.debug_visual = debug_visual
        self.last_description: Optional[MazeDescription] = None
        self._state_machine = GenerationStateMachine()
        self._lock = threading.Lock()
        self._state_machine.on_transition(
            GenerationState.IDLE, GenerationState.GENERATING, self._on_generation_started
        )

    @property
    def is_generating(self) -> bool:
        return self._state_machine.is_generating()

    @property
    def state_machine(self) -> GenerationStateMachine:
        return self._state_machine

    def start(self, width: int, height: int) -> Union[GenerationRun, Busy]:
        """
        Accept a generation request without executing any stage.

        Raises:
            ValueError: If width or height is outside the supported range
        """
        validate_dimensions(width, height)

        with self._lock:
            accepted = self._state_machine.begin({"width": width, "height": height})
        if not accepted:
            busy = Busy()
            logger.info("%s (%dx%d requested)", busy.reason, width, height)
            return busy

        return GenerationRun(self, width, height)

    def generate(self, width: int, height: int) -> Union[MazeDescription, Busy]:
        """Generate a complete maze, or return Busy if one is already being generated."""
        run = self.start(width, height)
        if isinstance(run, Busy):
            return run
        return run.run()

    def _on_generation_started(self, from_state, to_state, context):
        logger.info("Generating %dx%d recursive division maze", context["width"], context["height"])

    def _complete(self, description: MazeDescription):
        self.last_description = description
        logger.info(
            "Completed %dx%d maze: %d chambers, %d walls, %d openings",
            description.width, description.height, len(description.chambers),
            len(description.wall_cells), len(description.opening_cells)
        )
        self._release()

    def _release(self):
        with self._lock:
            self._state_machine.finish()
