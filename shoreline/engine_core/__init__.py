"""
Engine Core - Deterministic simulation state and turn resolution.

The engine is the runtime that:
1. Creates a SimulationState for a difficulty
2. Resolves the baseline rate from structural modifiers
3. Resolves the chosen action for the decade
4. Layers a wildcard on top when the player does nothing
5. Advances the turn and keeps a bounded undo stack
"""

from .rules import RuleSet, DEFAULT_RULES, WinPolicy, EmissionsTiming
from .state import SimulationState, HistoryPoint, Phase
from .action import ActionId, EventId, DecadeResult, EventOutcome, DrawnEvent, TurnResult
from .rates import current_base_rate
from .decade import compute_decade
from .event_resolver import EventResolver
from .reducer import TurnController, initial_state, advance_turn, undo, reset

__all__ = [
    "RuleSet",
    "DEFAULT_RULES",
    "WinPolicy",
    "EmissionsTiming",
    "SimulationState",
    "HistoryPoint",
    "Phase",
    "ActionId",
    "EventId",
    "DecadeResult",
    "EventOutcome",
    "DrawnEvent",
    "TurnResult",
    "current_base_rate",
    "compute_decade",
    "EventResolver",
    "TurnController",
    "initial_state",
    "advance_turn",
    "undo",
    "reset",
]
