"""Finite State Machine for maze generation requests."""

from enum import Enum
from typing import Callable, Dict, Optional, Set, Tuple


class GenerationState(Enum):
    """States of a maze assembler."""
    IDLE = "idle"
    GENERATING = "generating"


class GenerationStateMachine:
    """
    Finite State Machine guarding maze generation.

    State Transitions:
    IDLE -> GENERATING (when a generation request is accepted)
    GENERATING -> IDLE (when the generation completes or fails)

    A request arriving while GENERATING has no valid transition, which is how
    busy requests are told apart from accepted ones.
    """

    def __init__(self):
        self._current_state = GenerationState.IDLE
        self._state_callbacks: Dict[GenerationState, Callable[[Optional[dict]], None]] = {}
        self._transition_callbacks: Dict[Tuple[GenerationState, GenerationState], Callable] = {}
        self._valid_transitions = self._build_transition_map()

    def _build_transition_map(self) -> Dict[GenerationState, Set[GenerationState]]:
        """Build the valid state transition map."""
        return {
            GenerationState.IDLE: {GenerationState.GENERATING},
            GenerationState.GENERATING: {GenerationState.IDLE},
        }

    @property
    def current_state(self) -> GenerationState:
        """Get the current state."""
        return self._current_state

    def can_transition_to(self, target_state: GenerationState) -> bool:
        """Check if transition to target state is valid."""
        return target_state in self._valid_transitions.get(self._current_state, set())

    def transition_to(self, target_state: GenerationState, context: dict = None) -> bool:
        """
        Attempt to transition to the target state.

        Args:
            target_state: The state to transition to
            context: Optional context data for the transition

        Returns:
            True if transition was successful, False otherwise
        """
        if not self.can_transition_to(target_state):
            return False

        old_state = self._current_state
        self._current_state = target_state

        transition_key = (old_state, target_state)
        if transition_key in self._transition_callbacks:
            self._transition_callbacks[transition_key](old_state, target_state, context)

        if target_state in self._state_callbacks:
            self._state_callbacks[target_state](context)

        return True

    def on_state_enter(self, state: GenerationState, callback: Callable[[Optional[dict]], None]):
        """Register a callback for when entering a specific state."""
        self._state_callbacks[state] = callback

    def on_transition(self, from_state: GenerationState, to_state: GenerationState,
                      callback: Callable[[GenerationState, GenerationState, Optional[dict]], None]):
        """Register a callback for a specific state transition."""
        self._transition_callbacks[(from_state, to_state)] = callback

    def begin(self, context: dict = None) -> bool:
        """Enter GENERATING; False if a generation is already running."""
        return self.transition_to(GenerationState.GENERATING, context)

    def finish(self, context: dict = None) -> bool:
        """Return to IDLE once a generation is over."""
        return self.transition_to(GenerationState.IDLE, context)

    def is_generating(self) -> bool:
        return self._current_state == GenerationState.GENERATING

    def get_state_description(self) -> str:
        """Get a human-readable description of the current state."""
        descriptions = {
            GenerationState.IDLE: "Ready to generate",
            GenerationState.GENERATING: "Generating maze",
        }
        return descriptions.get(self._current_state, "Unknown state")
