"""
Session Module - In-memory game sessions.

A session owns:
- The current SimulationState
- A seeded random source for wildcards
- A turn controller bound to the session's rule set

Sessions are ephemeral. Nothing is persisted.
"""

from .manager import SessionManager, Session, SessionStatus

__all__ = [
    "SessionManager",
    "Session",
    "SessionStatus",
]
