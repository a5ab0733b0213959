"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between a presentation layer
and the engine.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has ended
- INVALID_DIFFICULTY: Difficulty id is not in the catalog
- GAME_OVER: Turn requested after the game ended
- NOTHING_TO_UNDO: Undo requested with an empty stack
- VALIDATION_ERROR: Request body is malformed
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Session status values."""
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"
    ENDED = "ended"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    INVALID_DIFFICULTY = "INVALID_DIFFICULTY"
    GAME_OVER = "GAME_OVER"
    NOTHING_TO_UNDO = "NOTHING_TO_UNDO"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Catalog Models
# =============================================================================

class DifficultyInfo(BaseModel):
    """A difficulty preset."""
    difficulty_id: str
    label: str
    baseline_rate: int = Field(description="ft/decade, negative = loss")
    starting_budget: int = Field(description="$M")

    model_config = {"from_attributes": True}


class ActionInfo(BaseModel):
    """A management action."""
    action_id: str
    title: str
    cost: int = Field(description="$M")
    cost_label: str
    effect: str
    description: str = ""
    one_time: bool = False

    model_config = {"from_attributes": True}


class WildcardInfo(BaseModel):
    """A wildcard event card."""
    event_id: str
    name: str
    text: str

    model_config = {"from_attributes": True}


class CatalogResponse(BaseModel):
    """All three catalog tables."""
    difficulties: list[DifficultyInfo] = Field(default_factory=list)
    actions: list[ActionInfo] = Field(default_factory=list)
    wildcards: list[WildcardInfo] = Field(default_factory=list)


# =============================================================================
# State Models
# =============================================================================

class HistoryPointInfo(BaseModel):
    """One point of the width/budget trajectory."""
    year: int
    width: int
    budget: int

    model_config = {"from_attributes": True}


class EventInfo(BaseModel):
    """A drawn wildcard with its attributed deltas."""
    event_id: str
    name: str
    text: str
    width_from_event: int = 0
    budget_from_event: int = 0
    why: str = ""


class StateInfo(BaseModel):
    """Simulation state as seen by the presentation layer."""
    difficulty_id: str
    year: int
    round: int
    rounds: int
    width: int = Field(ge=0, description="Beach width in feet")
    budget: int = Field(description="Treasury in $M")
    base_baseline: int
    current_base_rate: int
    active_modifier: str = Field(description="retreat, seawall, reef or baseline")

    reef_built: bool = False
    reef_rounds_left: int = 0
    seawall_built: bool = False
    retreat_rounds_left: int = 0

    last_rate: Optional[int] = None
    last_base_rate: Optional[int] = None

    game_over: bool = False
    victory: bool = False
    phase: str = "in_progress"

    can_undo: bool = False
    undo_depth: int = 0

    log: list[str] = Field(default_factory=list, description="Newest first")
    history: list[HistoryPointInfo] = Field(default_factory=list)


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to create a new session."""
    difficulty: str = Field("normal", description="easy, normal or hard")
    seed: Optional[int] = Field(None, description="Seed for the wildcard draw")


class TurnRequest(BaseModel):
    """Request to advance one decade."""
    action: str = Field(description="NONE, NOURISH, DUNES, REEF, SEAWALL or RETREAT")


# =============================================================================
# Response Models
# =============================================================================

class SessionResponse(BaseModel):
    """Session with its current state."""
    session_id: str
    status: SessionStatus
    seed: Optional[int] = None
    state: StateInfo
    last_event: Optional[EventInfo] = None


class TurnResponse(BaseModel):
    """Result of an accepted turn."""
    session_id: str
    status: SessionStatus
    state: StateInfo
    event: Optional[EventInfo] = None
    changes: list[str] = Field(default_factory=list, description="Log lines of this turn")


class SessionListResponse(BaseModel):
    """List of session ids."""
    sessions: list[str] = Field(default_factory=list)
    count: int = 0


class EndSessionResponse(BaseModel):
    """Result of ending a session."""
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    """Health check."""
    status: str = "ok"
    version: str
    active_sessions: int = 0


class ErrorResponse(BaseModel):
    """Standard error body."""
    error: str
    error_code: ErrorCode
    details: Optional[dict[str, Any]] = None
