"""
Tests for API Pydantic schemas.

Validates that:
- Request models apply defaults and reject bad bodies
- Engine state converts to StateInfo faithfully
- Error codes serialize as plain strings
"""

import pytest
from pydantic import ValidationError

from ..api.schemas import (
    CreateSessionRequest,
    TurnRequest,
    StateInfo,
    ErrorResponse,
    ErrorCode,
)
from ..api.service import state_to_info
from ..engine_core import DEFAULT_RULES


class TestPydanticSchemas:
    """Tests for Pydantic schema validation."""

    def test_create_session_defaults(self):
        request = CreateSessionRequest()
        assert request.difficulty == "normal"
        assert request.seed is None

    def test_turn_request_requires_action(self):
        with pytest.raises(ValidationError):
            TurnRequest()

    def test_state_info_rejects_negative_width(self):
        with pytest.raises(ValidationError):
            StateInfo(
                difficulty_id="normal", year=2020, round=1, rounds=8,
                width=-1, budget=200, base_baseline=-10,
                current_base_rate=-10, active_modifier="baseline",
            )

    def test_error_response_serializes(self):
        error = ErrorResponse(error="gone", error_code=ErrorCode.SESSION_NOT_FOUND)
        data = error.model_dump(mode="json")
        assert data == {"error": "gone", "error_code": "SESSION_NOT_FOUND", "details": None}


class TestStateConversion:
    """Tests for engine state -> StateInfo."""

    def test_fresh_state(self, normal_state):
        info = state_to_info(normal_state, DEFAULT_RULES)
        assert info.rounds == 8
        assert info.phase == "in_progress"
        assert info.undo_depth == 0
        assert info.last_rate is None
        assert info.history[0].model_dump() == {"year": 2020, "width": 50, "budget": 200}

    def test_after_turns(self, controller, normal_state):
        state = controller.advance_turn("NOURISH", normal_state).new_state
        state = controller.advance_turn("SEAWALL", state).new_state
        info = state_to_info(state, DEFAULT_RULES)
        assert info.seawall_built
        assert info.current_base_rate == -20
        assert info.active_modifier == "seawall"
        assert info.undo_depth == 2
        assert info.log == list(state.log)
