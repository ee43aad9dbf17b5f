"""Staggered painting of a finished maze description onto a paint sink."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol

from ..domain.types import Coord, MazeDescription, Material

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaintCommand:
    """Set one cell of the paint surface to a material."""
    cell: Coord
    material: Material
    tag: Optional[str] = None


class PaintSink(Protocol):
    """Anything that can display maze cells, e.g. a tile grid widget."""

    def clear_all(self) -> None:
        ...

    def paint(self, cell: Coord, material: Material, tag: Optional[str] = None) -> None:
        ...


def build_paint_plan(description: MazeDescription) -> List[PaintCommand]:
    """
    Order the description into paint commands.

    Floor first (row-major), then walls, then corners when debug data is
    present, and finally the openings that clear wall cells.
    """
    plan = [
        PaintCommand((row, column), "floor")
        for row in range(description.width)
        for column in range(description.height)
    ]

    tags = description.wall_tags or {}
    plan.extend(
        PaintCommand(cell, "wall", tags.get(cell))
        for cell in sorted(description.wall_cells)
    )

    if description.corners is not None:
        plan.extend(PaintCommand(cell, "corner") for cell in sorted(description.corners))

    plan.extend(PaintCommand(cell, "empty") for cell in sorted(description.opening_cells))
    return plan


class RevealScheduler:
    """
    Replays a paint plan a few commands at a time.

    The scheduler has no clock of its own; the caller drives it with tick()
    from a timer. Cancelling only drops the cursor, the description is untouched.
    """

    def __init__(self, plan: List[PaintCommand], sink: PaintSink):
        self.plan = plan
        self.sink = sink
        self._cursor: Optional[int] = None

    @classmethod
    def for_description(cls, description: MazeDescription, sink: PaintSink) -> "RevealScheduler":
        return cls(build_paint_plan(description), sink)

    @property
    def active(self) -> bool:
        return self._cursor is not None and self._cursor < len(self.plan)

    @property
    def finished(self) -> bool:
        return self._cursor is not None and self._cursor >= len(self.plan)

    @property
    def progress(self) -> float:
        """Fraction of the plan painted so far, in [0, 1]."""
        if not self.plan:
            return 1.0 if self._cursor is not None else 0.0
        if self._cursor is None:
            return 0.0
        return self._cursor / len(self.plan)

    def start(self):
        """Clear the sink and rewind to the first command."""
        self.sink.clear_all()
        self._cursor = 0
        logger.debug("Revealing %d paint commands", len(self.plan))

    def tick(self, batch: int = 1) -> int:
        """
        Paint up to `batch` commands.

        Returns:
            Number of commands painted; 0 once finished or cancelled
        """
        if not self.active:
            return 0

        end = min(self._cursor + max(1, batch), len(self.plan))
        for command in self.plan[self._cursor:end]:
            self.sink.paint(command.cell, command.material, command.tag)
        painted = end - self._cursor
        self._cursor = end
        return painted

    def flush(self) -> int:
        """Paint everything that is left."""
        return self.tick(len(self.plan))

    def cancel(self):
        """Abandon the reveal; already painted cells stay painted."""
        self._cursor = None
