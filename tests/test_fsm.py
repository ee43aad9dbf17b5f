"""
Tests for the generation state machine.
"""

from divmaze.domain.fsm import GenerationState, GenerationStateMachine


class TestGenerationStateMachine:

    def test_starts_idle(self):
        fsm = GenerationStateMachine()
        assert fsm.current_state == GenerationState.IDLE
        assert fsm.get_state_description() == "Ready to generate"

    def test_begin_and_finish(self):
        fsm = GenerationStateMachine()

        assert fsm.begin()
        assert fsm.is_generating()
        assert fsm.get_state_description() == "Generating maze"
        assert fsm.finish()
        assert fsm.current_state == GenerationState.IDLE

    def test_second_begin_is_rejected(self):
        fsm = GenerationStateMachine()
        fsm.begin()

        assert not fsm.begin()
        assert fsm.current_state == GenerationState.GENERATING

    def test_finish_while_idle_is_rejected(self):
        fsm = GenerationStateMachine()
        assert not fsm.finish()
        assert not fsm.can_transition_to(GenerationState.IDLE)

    def test_callbacks_fire_on_transition(self):
        fsm = GenerationStateMachine()
        entered = []
        transitions = []
        fsm.on_state_enter(GenerationState.GENERATING, lambda ctx: entered.append(ctx))
        fsm.on_transition(GenerationState.GENERATING, GenerationState.IDLE,
                          lambda old, new, ctx: transitions.append((old, new)))

        fsm.begin({"width": 10})
        fsm.begin({"width": 20})
        fsm.finish()

        assert entered == [{"width": 10}]
        assert transitions == [(GenerationState.GENERATING, GenerationState.IDLE)]
