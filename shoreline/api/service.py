"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to session calls
2. Converts engine values to response schemas
3. Maps rejected operations to structured errors

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .schemas import (
    # Requests
    CreateSessionRequest,
    TurnRequest,
    # Responses
    CatalogResponse,
    SessionResponse,
    TurnResponse,
    SessionListResponse,
    HealthResponse,
    ErrorResponse,
    # Shared
    DifficultyInfo,
    ActionInfo,
    WildcardInfo,
    StateInfo,
    HistoryPointInfo,
    EventInfo,
    # Enums
    SessionStatus,
    ErrorCode,
)
from .. import __version__
from ..catalog import DIFFICULTIES, ACTIONS, ACTION_ORDER, WILDCARDS, get_difficulty
from ..engine_core import SimulationState, DrawnEvent, current_base_rate
from ..engine_core.rates import active_modifier
from ..session import SessionManager, Session


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()
        session = service.create_session(CreateSessionRequest(difficulty="hard"))
        turn = service.take_turn(session.session_id, TurnRequest(action="NOURISH"))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def health(self) -> HealthResponse:
        return HealthResponse(
            version=__version__,
            active_sessions=len(self.session_manager.list_active_sessions()),
        )

    def catalog(self) -> CatalogResponse:
        """All catalog tables, actions in display order."""
        return CatalogResponse(
            difficulties=[DifficultyInfo.model_validate(d) for d in DIFFICULTIES.values()],
            actions=[ActionInfo.model_validate(ACTIONS[key]) for key in ACTION_ORDER],
            wildcards=[WildcardInfo.model_validate(w) for w in WILDCARDS.values()],
        )

    def create_session(self, request: CreateSessionRequest) -> SessionResponse | ErrorResponse:
        """Create a new session. Unknown difficulties are rejected here."""
        if get_difficulty(request.difficulty) is None:
            return ErrorResponse(
                error=f"Unknown difficulty: {request.difficulty}",
                error_code=ErrorCode.INVALID_DIFFICULTY,
                details={"valid": list(DIFFICULTIES)},
            )
        session = self.session_manager.create_session(
            difficulty_id=request.difficulty,
            seed=request.seed,
        )
        return self._session_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        return self._session_response(session)

    def list_sessions(self) -> SessionListResponse:
        sessions = self.session_manager.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    def end_session(self, session_id: str) -> bool:
        return self.session_manager.end_session(session_id)

    def take_turn(self, session_id: str, request: TurnRequest) -> TurnResponse | ErrorResponse:
        """Advance one decade in a session."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        result = session.take_turn(request.action)
        if not result.success:
            return ErrorResponse(
                error=result.error or "Turn rejected",
                error_code=ErrorCode(result.error_code or ErrorCode.INTERNAL_ERROR.value),
            )

        return TurnResponse(
            session_id=session.session_id,
            status=SessionStatus(session.status.value),
            state=self._state_info(session),
            event=_event_info(result.drawn_event),
            changes=result.state_changes,
        )

    def undo(self, session_id: str) -> SessionResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        if not session.undo():
            return ErrorResponse(
                error="Nothing to undo",
                error_code=ErrorCode.NOTHING_TO_UNDO,
            )
        return self._session_response(session)

    def reset(self, session_id: str) -> SessionResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        session.reset()
        return self._session_response(session)

    # =========================================================================
    # Conversion helpers
    # =========================================================================

    def _not_found(self, session_id: str) -> ErrorResponse:
        return ErrorResponse(
            error=f"Session {session_id} not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
        )

    def _session_response(self, session: Session) -> SessionResponse:
        return SessionResponse(
            session_id=session.session_id,
            status=SessionStatus(session.status.value),
            seed=session.seed,
            state=self._state_info(session),
            last_event=_event_info(session.last_event),
        )

    def _state_info(self, session: Session) -> StateInfo:
        return state_to_info(session.state, session.controller.rules)


def state_to_info(state: SimulationState, rules) -> StateInfo:
    """Convert an engine state to its API schema."""
    return StateInfo(
        difficulty_id=state.difficulty_id,
        year=state.year,
        round=state.round,
        rounds=rules.rounds,
        width=state.width,
        budget=state.budget,
        base_baseline=state.base_baseline,
        current_base_rate=current_base_rate(state, rules),
        active_modifier=active_modifier(state),
        reef_built=state.reef_built,
        reef_rounds_left=state.reef_rounds_left,
        seawall_built=state.seawall_built,
        retreat_rounds_left=state.retreat_rounds_left,
        last_rate=state.last_rate,
        last_base_rate=state.last_base_rate,
        game_over=state.game_over,
        victory=state.victory,
        phase=state.phase.value,
        can_undo=state.can_undo,
        undo_depth=len(state.past),
        log=list(state.log),
        history=[HistoryPointInfo.model_validate(point) for point in state.history],
    )


def _event_info(event: DrawnEvent | None) -> EventInfo | None:
    if event is None:
        return None
    return EventInfo(
        event_id=event.event_id.value,
        name=event.name,
        text=event.text,
        width_from_event=event.width_from_event,
        budget_from_event=event.budget_from_event,
        why=event.why,
    )
