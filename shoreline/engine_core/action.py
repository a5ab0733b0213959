"""
Action System - Action and event ids, resolver results, turn results.

Actions are the player's one choice per decade.
Events are wildcards drawn when the player chooses NONE.
All state changes flow through the turn controller, which
returns a TurnResult.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActionId(Enum):
    """Management actions, one per decade."""
    NONE = "NONE"
    NOURISH = "NOURISH"
    DUNES = "DUNES"
    REEF = "REEF"
    SEAWALL = "SEAWALL"
    RETREAT = "RETREAT"

    @classmethod
    def parse(cls, value: Any) -> ActionId | None:
        """Parse an action id, returning None when unrecognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


class EventId(Enum):
    """Wildcard events."""
    STORM = "STORM"
    RECALL = "RECALL"
    LA_NINA = "LA_NINA"
    KING_TIDE = "KING_TIDE"
    EMISSIONS = "EMISSIONS"

    @classmethod
    def parse(cls, value: Any) -> EventId | None:
        """Parse an event id, returning None when unrecognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


@dataclass(frozen=True)
class DecadeResult:
    """
    Width and budget deltas for one decade, before events.

    base_rate: erosion from structural modifiers alone
    rate: width delta after the chosen action (ft)
    cost: budget delta ($M, negative = spend)
    """
    base_rate: int
    rate: int
    cost: int
    notes: tuple[str, ...] = ()

    # Structure transitions the caller applies on top of the state
    builds_reef: bool = False
    builds_seawall: bool = False
    arms_retreat: bool = False


@dataclass(frozen=True)
class EventOutcome:
    """
    Decade deltas after a wildcard was applied.

    width_from_event / budget_from_event are the attributed deltas,
    the part of the change caused by the event alone.
    """
    event_id: EventId
    rate: int
    cost: int
    notes: tuple[str, ...] = ()
    width_from_event: int = 0
    budget_from_event: int = 0
    raises_baseline: bool = False
    why: str = ""


@dataclass(frozen=True)
class DrawnEvent:
    """A drawn wildcard as surfaced to the caller for display."""
    event_id: EventId
    name: str
    text: str
    width_from_event: int = 0
    budget_from_event: int = 0
    why: str = ""


@dataclass
class TurnResult:
    """
    Result of asking the engine to advance a turn.

    Contains:
    - Whether the turn was accepted
    - New state (if accepted)
    - Error and code (if rejected)
    - The drawn event, if any
    """
    success: bool
    new_state: Any | None = None  # SimulationState
    error: str | None = None
    error_code: str | None = None

    drawn_event: DrawnEvent | None = None

    # Log lines of this turn, for UI
    state_changes: list[str] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return self.success

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> TurnResult:
        """Create a rejected result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        changes: list[str] | None = None,
        drawn_event: DrawnEvent | None = None,
    ) -> TurnResult:
        """Create an accepted result with the new state."""
        return cls(
            success=True,
            new_state=state,
            state_changes=changes or [],
            drawn_event=drawn_event,
        )
