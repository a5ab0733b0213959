"""
API Module - Presentation-layer interface.

Exposes the engine via REST API. A client:
1. Reads the catalog
2. Creates a session for a difficulty
3. Submits one action per decade
4. Undoes or resets as needed

All state is session-scoped. Nothing is persisted.
"""

from .schemas import (
    # Requests
    CreateSessionRequest,
    TurnRequest,
    # Responses
    CatalogResponse,
    SessionResponse,
    TurnResponse,
    SessionListResponse,
    EndSessionResponse,
    HealthResponse,
    ErrorResponse,
    # Shared
    StateInfo,
    EventInfo,
    ErrorCode,
    SessionStatus,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "TurnRequest",
    # Responses
    "CatalogResponse",
    "SessionResponse",
    "TurnResponse",
    "SessionListResponse",
    "EndSessionResponse",
    "HealthResponse",
    "ErrorResponse",
    # Shared
    "StateInfo",
    "EventInfo",
    "ErrorCode",
    "SessionStatus",
    # Service
    "APIService",
    "create_app",
]
