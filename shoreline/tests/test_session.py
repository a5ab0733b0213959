"""
Tests for the session manager.
"""

import pytest

from ..engine_core import RuleSet, WinPolicy
from ..session import SessionManager, SessionStatus


class TestSessionManager:
    """Tests for session lifecycle."""

    @pytest.fixture
    def manager(self):
        return SessionManager()

    def test_create_session(self, manager):
        session = manager.create_session("hard", seed=7)
        assert session.session_id
        assert session.seed == 7
        assert session.state.difficulty_id == "hard"
        assert session.status == SessionStatus.ACTIVE
        assert manager.get_session(session.session_id) is session

    def test_take_turn_updates_state(self, manager):
        session = manager.create_session("normal")
        result = session.take_turn("NOURISH")
        assert result.success
        assert session.state is result.new_state
        assert session.state.width == 45

    def test_rejected_turn_keeps_state(self, manager):
        session = manager.create_session("normal")
        session.state = session.state._copy_with(game_over=True)
        before = session.state
        result = session.take_turn("NOURISH")
        assert not result.success
        assert session.state is before
        assert session.status == SessionStatus.LOST

    def test_last_event_recorded(self, manager):
        session = manager.create_session("normal", seed=1)
        result = session.take_turn("NONE")
        assert session.last_event == result.drawn_event
        assert session.last_event is not None
        session.take_turn("DUNES")
        assert session.last_event is None

    def test_undo_and_reset(self, manager):
        session = manager.create_session("normal")
        start = session.state
        assert not session.undo()
        session.take_turn("NOURISH")
        assert session.undo()
        assert session.state == start
        session.take_turn("REEF")
        session.reset()
        assert session.state == start

    def test_seeded_sessions_replay(self):
        first = SessionManager(default_seed=11).create_session("normal")
        second = SessionManager(default_seed=11).create_session("normal")
        for _ in range(4):
            first.take_turn("NONE")
            second.take_turn("NONE")
        assert first.state == second.state

    def test_rules_passed_to_sessions(self):
        manager = SessionManager(rules=RuleSet(win_policy=WinPolicy.GOAL_WIDTH))
        session = manager.create_session("easy")
        assert session.controller.rules.win_policy == WinPolicy.GOAL_WIDTH

    def test_end_session(self, manager):
        session = manager.create_session()
        assert manager.end_session(session.session_id)
        assert session.status == SessionStatus.ENDED
        assert manager.get_session(session.session_id) is None
        assert not manager.end_session(session.session_id)

    def test_list_sessions(self, manager):
        active = manager.create_session()
        finished = manager.create_session()
        finished.state = finished.state._copy_with(game_over=True, victory=True)
        assert set(manager.list_sessions()) == {active.session_id, finished.session_id}
        assert manager.list_active_sessions() == [active.session_id]

    def test_cleanup_stale_sessions(self, manager):
        active = manager.create_session()
        finished = manager.create_session()
        finished.state = finished.state._copy_with(game_over=True)
        active.created_at -= 7200
        finished.created_at -= 7200
        assert manager.cleanup_stale_sessions(max_age_seconds=3600) == 1
        assert manager.list_sessions() == [active.session_id]
