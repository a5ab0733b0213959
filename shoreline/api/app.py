"""
FastAPI Application - REST API for a presentation layer.

Endpoints:
    GET    /api/v1/health                    Health check
    GET    /api/v1/catalog                   Difficulties, actions, wildcards
    POST   /api/v1/sessions                  Create session
    GET    /api/v1/sessions                  List sessions
    GET    /api/v1/sessions/{id}             Get session and state
    DELETE /api/v1/sessions/{id}             End session
    POST   /api/v1/sessions/{id}/turns       Advance one decade
    POST   /api/v1/sessions/{id}/undo        Step back one decade
    POST   /api/v1/sessions/{id}/reset       Start over

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Optional, Union
import logging
import os

from ..engine_core import RuleSet, WinPolicy, EmissionsTiming

logger = logging.getLogger(__name__)

# Environment configuration
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")


def rules_from_env(environ=None) -> RuleSet:
    """
    Build the rule set from environment variables.

    SHORELINE_WIN_POLICY: survive | goal_width
    SHORELINE_EMISSIONS_TIMING: immediate | next_decade
    """
    environ = os.environ if environ is None else environ
    win_policy = WinPolicy(environ.get("SHORELINE_WIN_POLICY", WinPolicy.SURVIVE.value).lower())
    emissions_timing = EmissionsTiming(
        environ.get("SHORELINE_EMISSIONS_TIMING", EmissionsTiming.IMMEDIATE.value).lower()
    )
    return RuleSet(win_policy=win_policy, emissions_timing=emissions_timing)


def seed_from_env(environ=None) -> Optional[int]:
    """SHORELINE_SEED: optional integer seed for every new session."""
    environ = os.environ if environ is None else environ
    raw = environ.get("SHORELINE_SEED")
    if not raw:
        return None
    return int(raw)


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI
        from fastapi.middleware.cors import CORSMiddleware
        from fastapi.responses import JSONResponse
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install fastapi uvicorn"
        )

    from .. import __version__
    from ..session import SessionManager
    from .service import APIService
    from .schemas import (
        CreateSessionRequest,
        TurnRequest,
        CatalogResponse,
        SessionResponse,
        TurnResponse,
        SessionListResponse,
        EndSessionResponse,
        HealthResponse,
        ErrorResponse,
        ErrorCode,
    )

    app = FastAPI(
        title="Shoreline Engine API",
        description="""
Coastal management simulation - one policy action per decade.

## Turn Flow

1. `POST /sessions` with a difficulty (and optional seed)
2. `POST /sessions/{id}/turns` with an action id, once per decade
3. Choosing `NONE` draws a wildcard; the response carries it in `event`
4. `POST /undo` steps back one decade, `POST /reset` starts over

## Error Codes

| Code | Description |
|------|-------------|
| `SESSION_NOT_FOUND` | Session does not exist |
| `INVALID_DIFFICULTY` | Difficulty id not in the catalog |
| `GAME_OVER` | Turn requested after the game ended |
| `NOTHING_TO_UNDO` | Undo stack is empty |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if service is None:
        manager = SessionManager(rules=rules_from_env(), default_seed=seed_from_env())
        service = APIService(session_manager=manager)
    api_service = service

    # =========================================================================
    # Error helpers
    # =========================================================================

    status_codes = {
        ErrorCode.SESSION_NOT_FOUND: 404,
        ErrorCode.GAME_OVER: 409,
    }

    def make_error_response(error: ErrorResponse) -> JSONResponse:
        """Render an ErrorResponse with its HTTP status."""
        status_code = status_codes.get(error.error_code, 400)
        if status_code != 404:
            logger.info("Request rejected: %s (%s)", error.error_code.value, error.error)
        return JSONResponse(status_code=status_code, content=error.model_dump(mode="json"))

    def respond(result):
        if isinstance(result, ErrorResponse):
            return make_error_response(result)
        return result

    # =========================================================================
    # Meta Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["Meta"],
        summary="Health check",
    )
    async def health() -> HealthResponse:
        return api_service.health()

    @app.get(
        "/api/v1/catalog",
        response_model=CatalogResponse,
        tags=["Meta"],
        summary="Difficulty presets, actions and wildcards",
    )
    async def catalog() -> CatalogResponse:
        return api_service.catalog()

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        responses={400: {"model": ErrorResponse, "description": "Unknown difficulty"}},
        tags=["Sessions"],
        summary="Create a new session",
    )
    async def create_session(body: CreateSessionRequest) -> Union[SessionResponse, JSONResponse]:
        """Create a new session at round 1."""
        return respond(api_service.create_session(body))

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List sessions",
    )
    async def list_sessions() -> SessionListResponse:
        return api_service.list_sessions()

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session and current state",
    )
    async def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        return respond(api_service.get_session(session_id))

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a session",
    )
    async def end_session(session_id: str) -> EndSessionResponse:
        success = api_service.end_session(session_id)
        return EndSessionResponse(success=success, session_id=session_id)

    # =========================================================================
    # Turn Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions/{session_id}/turns",
        response_model=TurnResponse,
        responses={
            404: {"model": ErrorResponse, "description": "Session not found"},
            409: {"model": ErrorResponse, "description": "Game is over"},
        },
        tags=["Turns"],
        summary="Advance one decade",
    )
    async def take_turn(session_id: str, body: TurnRequest) -> Union[TurnResponse, JSONResponse]:
        """
        Advance one decade with the chosen action.

        Unrecognized action ids resolve to a no-op decade.
        """
        return respond(api_service.take_turn(session_id, body))

    @app.post(
        "/api/v1/sessions/{session_id}/undo",
        response_model=SessionResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Nothing to undo"},
            404: {"model": ErrorResponse, "description": "Session not found"},
        },
        tags=["Turns"],
        summary="Step back one decade",
    )
    async def undo(session_id: str) -> Union[SessionResponse, JSONResponse]:
        return respond(api_service.undo(session_id))

    @app.post(
        "/api/v1/sessions/{session_id}/reset",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Turns"],
        summary="Start over on the same difficulty",
    )
    async def reset(session_id: str) -> Union[SessionResponse, JSONResponse]:
        return respond(api_service.reset(session_id))

    return app
