"""Main application controller connecting UI and maze generation."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from ..domain.assembler import MazeAssembler
from ..domain.fsm import GenerationState
from ..domain.types import Busy, GenerationConfig, MazeDescription, clamp_dimension
from ..utils.rng import SeededRNG
from .reveal import PaintSink, RevealScheduler

logger = logging.getLogger(__name__)


class MazeController(QObject):
    """
    Controller that runs maze generation and paces the reveal of its result.

    Signals:
        maze_generated: Emitted with the new MazeDescription
        generation_rejected: Emitted when a request arrives while busy
        reveal_progress: Emitted with the painted fraction after each tick
        reveal_finished: Emitted when the whole description has been painted
        config_changed: Emitted when width, height or a toggle changes
        error_occurred: Emitted when a request is invalid
        state_changed: Emitted with a readable description of the assembler state
    """

    maze_generated = Signal(object)  # MazeDescription
    generation_rejected = Signal(str)
    reveal_progress = Signal(float)
    reveal_finished = Signal()
    config_changed = Signal()
    error_occurred = Signal(str)
    state_changed = Signal(str)

    def __init__(self, config: Optional[GenerationConfig] = None):
        super().__init__()

        self._config = config or GenerationConfig()
        self._rng = SeededRNG(self._config.seed)
        self._assembler = MazeAssembler(self._rng, self._config.debug_visual)
        state_machine = self._assembler.state_machine
        state_machine.on_state_enter(GenerationState.GENERATING, self._on_state_entered)
        state_machine.on_state_enter(GenerationState.IDLE, self._on_state_entered)
        self._description: Optional[MazeDescription] = None
        self._sink: Optional[PaintSink] = None
        self._scheduler: Optional[RevealScheduler] = None

        # Presentation settings
        self.immediate = False
        self.tiles_per_tick = 4

        # Timer for staggered reveal
        self._timer = QTimer()
        self._timer.timeout.connect(self._on_timer_tick)
        self._timer_interval = 10  # milliseconds

    # Properties

    @property
    def config(self) -> GenerationConfig:
        """Get the generation configuration."""
        return self._config

    @property
    def description(self) -> Optional[MazeDescription]:
        """Get the most recently generated maze."""
        return self._description

    @property
    def width(self) -> int:
        return self._config.width

    @width.setter
    def width(self, value: int):
        self._config.width = clamp_dimension(value)
        self.config_changed.emit()

    @property
    def height(self) -> int:
        return self._config.height

    @height.setter
    def height(self, value: int):
        self._config.height = clamp_dimension(value)
        self.config_changed.emit()

    @property
    def debug_visual(self) -> bool:
        return self._config.debug_visual

    @debug_visual.setter
    def debug_visual(self, enabled: bool):
        self._config.debug_visual = enabled
        self._assembler.debug_visual = enabled
        self.config_changed.emit()

    @property
    def speed(self) -> int:
        """Get the current speed (timer interval in ms)."""
        return self._timer_interval

    @speed.setter
    def speed(self, interval_ms: int):
        """Set the speed (timer interval in ms)."""
        self._timer_interval = max(1, min(250, interval_ms))
        if self._timer.isActive():
            self._timer.setInterval(self._timer_interval)

    @property
    def state_description(self) -> str:
        return self._assembler.state_machine.get_state_description()

    def set_paint_sink(self, sink: PaintSink):
        """Attach the surface that generated mazes are painted onto."""
        self._sink = sink

    # Generation

    def generate(self) -> bool:
        """Generate a maze with the current configuration and start revealing it."""
        try:
            result = self._assembler.generate(self._config.width, self._config.height)
        except ValueError as e:
            self.error_occurred.emit(f"Failed to generate maze: {str(e)}")
            return False

        if isinstance(result, Busy):
            self.generation_rejected.emit(result.reason)
            return False

        self._description = result
        for warning in result.warnings:
            logger.warning(warning)
        self.maze_generated.emit(result)
        self._start_reveal(result)
        return True

    def _on_state_entered(self, context: Optional[dict]):
        self.state_changed.emit(self.state_description)

    def _start_reveal(self, description: MazeDescription):
        self.cancel_reveal()
        if self._sink is None:
            return

        self._scheduler = RevealScheduler.for_description(description, self._sink)
        self._scheduler.start()
        if self.immediate:
            self._scheduler.flush()
            self._finish_reveal()
        else:
            self._timer.start(self._timer_interval)

    def cancel_reveal(self):
        """Stop painting the current maze, leaving what is already painted."""
        self._timer.stop()
        if self._scheduler is not None:
            self._scheduler.cancel()
            self._scheduler = None

    def _finish_reveal(self):
        self._timer.stop()
        self.reveal_progress.emit(1.0)
        self.reveal_finished.emit()

    def _on_timer_tick(self):
        """Called on each timer tick while revealing."""
        if self._scheduler is None:
            self._timer.stop()
            return

        self._scheduler.tick(self.tiles_per_tick)
        self.reveal_progress.emit(self._scheduler.progress)
        if self._scheduler.finished:
            self._finish_reveal()

    def cleanup(self):
        """Stop the reveal timer before shutdown."""
        self.cancel_reveal()
