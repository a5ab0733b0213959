"""
Session Manager - Creates and manages simulation sessions.

LIFECYCLE:
1. Caller creates a session for a difficulty (optionally seeded)
2. Caller submits one action per decade
3. Caller may undo or reset at any time
4. Session ends when the caller ends it or it goes stale

PERSISTENCE RULES:
- No database, no save files
- State lives in memory for the life of the session

Calls for one session are serialized with a per-session lock so the
engine always sees one turn at a time.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
import random
import threading
import time
import uuid

from ..engine_core import (
    RuleSet,
    DEFAULT_RULES,
    SimulationState,
    TurnController,
    TurnResult,
    EventResolver,
    DrawnEvent,
)

logger = logging.getLogger(__name__)


class SessionStatus(Enum):
    """State of a simulation session."""
    ACTIVE = "active"  # Turns accepted
    WON = "won"
    LOST = "lost"
    ENDED = "ended"  # Closed by the caller


@dataclass
class Session:
    """
    An ephemeral simulation session.

    The session is destroyed when it ends. State is NOT persisted.
    """
    session_id: str
    controller: TurnController
    state: SimulationState
    created_at: float
    seed: int | None = None

    # Last drawn wildcard, for display
    last_event: DrawnEvent | None = None
    ended: bool = False

    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def status(self) -> SessionStatus:
        if self.ended:
            return SessionStatus.ENDED
        if not self.state.game_over:
            return SessionStatus.ACTIVE
        return SessionStatus.WON if self.state.victory else SessionStatus.LOST

    def is_active(self) -> bool:
        """Check if session still accepts turns."""
        return self.status == SessionStatus.ACTIVE

    def take_turn(self, action: str) -> TurnResult:
        """Advance one decade and keep the new state on success."""
        with self._lock:
            result = self.controller.advance_turn(action, self.state)
            if result.success:
                self.state = result.new_state
                self.last_event = result.drawn_event
            return result

    def undo(self) -> bool:
        """Step back one decade. Returns False when there is nothing to undo."""
        with self._lock:
            if not self.state.can_undo:
                return False
            self.state = self.controller.undo(self.state)
            self.last_event = None
            return True

    def reset(self) -> SimulationState:
        """Start over on the same difficulty."""
        with self._lock:
            self.state = self.controller.reset(self.state)
            self.last_event = None
            return self.state


class SessionManager:
    """
    Manages simulation sessions.

    Responsibilities:
    - Create sessions with their own random source
    - Track active sessions
    - Clean up ended or stale sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self, rules: RuleSet = DEFAULT_RULES, default_seed: int | None = None):
        self.rules = rules
        self.default_seed = default_seed
        self._sessions: dict[str, Session] = {}

    def create_session(
        self,
        difficulty_id: str = "normal",
        seed: int | None = None,
    ) -> Session:
        """
        Create a new simulation session.

        Args:
            difficulty_id: Difficulty preset id
            seed: Optional seed for the wildcard draw

        Returns:
            New Session at round 1
        """
        session_id = str(uuid.uuid4())
        if seed is None:
            seed = self.default_seed

        resolver = EventResolver(rng=random.Random(seed), rules=self.rules)
        controller = TurnController(rules=self.rules, event_resolver=resolver)

        session = Session(
            session_id=session_id,
            controller=controller,
            state=controller.initial_state(difficulty_id),
            created_at=time.time(),
            seed=seed,
        )
        self._sessions[session_id] = session
        logger.info(
            "Session %s created (difficulty=%s, seed=%s)",
            session_id, session.state.difficulty_id, seed,
        )
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> bool:
        """
        End a session and drop it from memory.

        Returns False when the session does not exist.
        """
        session = self._sessions.pop(session_id, None)
        if not session:
            return False
        session.ended = True
        logger.info("Session %s ended at round %d", session_id, session.state.round)
        return True

    def list_sessions(self) -> list[str]:
        """List IDs of all sessions still in memory."""
        return list(self._sessions)

    def list_active_sessions(self) -> list[str]:
        """List IDs of sessions that still accept turns."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> int:
        """
        Drop finished sessions older than max_age.

        Returns the number of sessions removed.
        """
        current_time = time.time()
        to_remove = [
            session_id for session_id, session in self._sessions.items()
            if current_time - session.created_at > max_age_seconds and not session.is_active()
        ]
        for session_id in to_remove:
            self.end_session(session_id)
        return len(to_remove)
