"""
Tests for the undo stack and reset.
"""

from ..engine_core import ActionId, EventId, RuleSet, TurnController, undo, reset
from .conftest import make_controller


class TestUndo:
    """Undo restores the previous state exactly."""

    def test_undo_pairs_with_advance(self, controller, normal_state):
        for action in ActionId:
            result = controller.advance_turn(action, normal_state)
            assert controller.undo(result.new_state) == normal_state

    def test_undo_after_several_turns(self, controller, normal_state):
        first = controller.advance_turn("NOURISH", normal_state).new_state
        second = controller.advance_turn("REEF", first).new_state
        assert controller.undo(second) == first
        assert controller.undo(controller.undo(second)) == normal_state

    def test_undo_restores_log_and_history(self, normal_state):
        controller = make_controller(EventId.STORM)
        state = controller.advance_turn("NONE", normal_state).new_state
        restored = controller.undo(state)
        assert restored.log == normal_state.log
        assert restored.history == normal_state.history

    def test_undo_reverts_game_over(self, controller, normal_state):
        state = normal_state._copy_with(budget=10)
        lost = controller.advance_turn("NOURISH", state).new_state
        assert lost.game_over
        restored = controller.undo(lost)
        assert not restored.game_over
        assert restored == state

    def test_undo_empty_stack_is_noop(self, normal_state):
        assert undo(normal_state) is normal_state

    def test_snapshots_carry_no_stack(self, controller, normal_state):
        state = normal_state
        for action in ("NOURISH", "DUNES", "DUNES"):
            state = controller.advance_turn(action, state).new_state
        assert len(state.past) == 3
        assert all(snapshot.past == () for snapshot in state.past)

    def test_stack_is_bounded(self, normal_state):
        controller = TurnController(rules=RuleSet(undo_limit=3))
        state = normal_state
        for _ in range(5):
            state = controller.advance_turn("DUNES", state).new_state
        assert len(state.past) == 3
        assert [s.round for s in state.past] == [3, 4, 5]

    def test_default_cap_is_twenty(self):
        assert RuleSet().undo_limit == 20


class TestReset:
    """Reset starts over on the same difficulty."""

    def test_reset(self, controller, hard_state):
        state = hard_state
        for action in ("NOURISH", "REEF"):
            state = controller.advance_turn(action, state).new_state
        fresh = controller.reset(state)
        assert fresh == controller.initial_state("hard")
        assert not fresh.can_undo

    def test_reset_helper(self, controller, easy_state):
        state = controller.advance_turn("SEAWALL", easy_state).new_state
        assert reset(state) == easy_state
