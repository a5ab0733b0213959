"""
Simulation State - Immutable value replaced on every turn.

Design principles:
- Immutable: frozen dataclass, tuples for sequences
- All changes go through the turn controller
- Undo snapshots are the same type, stored without their own stack
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum


class Phase(Enum):
    """High-level simulation phases."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class HistoryPoint:
    """One point of the width/budget trajectory."""
    year: int
    width: int
    budget: int


@dataclass(frozen=True)
class SimulationState:
    """
    Complete simulation state at the start of a decade.

    width is beach width in feet, budget is the treasury in $M,
    base_baseline is the difficulty's erosion rate (ft/decade).
    """
    difficulty_id: str
    year: int
    round: int
    width: int
    budget: int
    base_baseline: int

    # Structural modifiers
    reef_built: bool = False
    reef_rounds_left: int = 0
    seawall_built: bool = False
    retreat_rounds_left: int = 0

    # Previous decade, consumed only by the Recall event
    last_rate: int | None = None
    last_base_rate: int | None = None

    # Newest-first narrative, one multi-line block per turn
    log: tuple[str, ...] = ()

    # Terminal flags
    game_over: bool = False
    victory: bool = False

    # Trajectory, oldest first
    history: tuple[HistoryPoint, ...] = ()

    # Undo stack, oldest first; entries carry an empty stack of their own
    past: tuple[SimulationState, ...] = field(default=(), repr=False)

    def __post_init__(self):
        # Clamp on write
        if self.width < 0:
            object.__setattr__(self, "width", 0)

    @property
    def phase(self) -> Phase:
        if not self.game_over:
            return Phase.IN_PROGRESS
        return Phase.WON if self.victory else Phase.LOST

    @property
    def reef_active(self) -> bool:
        return self.reef_rounds_left > 0

    @property
    def retreat_active(self) -> bool:
        return self.retreat_rounds_left > 0

    @property
    def can_undo(self) -> bool:
        return len(self.past) > 0

    def snapshot(self) -> SimulationState:
        """This state without its undo stack, for pushing onto a stack."""
        return self._copy_with(past=())

    def _copy_with(self, **kwargs) -> SimulationState:
        """Create a copy with some fields replaced."""
        return replace(self, **kwargs)
