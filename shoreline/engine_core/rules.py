"""
Rule Set - Every tunable constant of the simulation in one value.

The canonical rules are DEFAULT_RULES. Alternative rule variants are
expressed as RuleSet instances, never as separate resolver code.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class WinPolicy(Enum):
    """How victory is decided at the end of the horizon."""
    SURVIVE = "survive"  # Reached the end without losing
    GOAL_WIDTH = "goal_width"  # Also needs width >= goal_width and budget > 0


class EmissionsTiming(Enum):
    """When the Emissions Reduction improvement takes effect."""
    IMMEDIATE = "immediate"  # This decade and every decade after
    NEXT_DECADE = "next_decade"  # Only the baseline, from next decade on


@dataclass(frozen=True)
class RuleSet:
    """
    Constants and policies for one simulation.

    Rates are ft/decade (negative = loss), money is $M.
    """
    # Horizon
    start_year: int = 2020
    decade_years: int = 10
    rounds: int = 8
    start_width: int = 50
    goal_width: int = 10

    # Structures
    structure_window: int = 3  # Rounds of reef / retreat benefit
    seawall_rate: int = -20
    reef_floor: int = -5
    retreat_rate: int = 0

    # Per-decade actions
    nourish_cost: int = 15
    nourish_bonus: int = 5
    dunes_cost: int = 5
    dunes_bonus: int = 2
    reef_cost: int = 100
    seawall_cost: int = 150
    retreat_cost: int = 150

    # Wildcards
    storm_loss: int = 20
    king_tide_cost: int = 30
    emissions_floor: int = -5

    # Recurring budget items (0 = off)
    seawall_upkeep: int = 0
    reef_revenue: int = 0
    retreat_revenue_loss: int = 0

    # Undo
    undo_limit: int = 20

    # Policies
    win_policy: WinPolicy = WinPolicy.SURVIVE
    emissions_timing: EmissionsTiming = EmissionsTiming.IMMEDIATE

    def __post_init__(self):
        if self.rounds < 1:
            raise ValueError(f"rounds must be positive, got {self.rounds}")
        if self.decade_years < 1:
            raise ValueError(f"decade_years must be positive, got {self.decade_years}")
        if self.structure_window < 1:
            raise ValueError(f"structure_window must be positive, got {self.structure_window}")
        if self.undo_limit < 1:
            raise ValueError(f"undo_limit must be positive, got {self.undo_limit}")

    @property
    def end_year(self) -> int:
        return self.start_year + self.decade_years * self.rounds

    def year_for_round(self, round_number: int) -> int:
        """Calendar year at the start of a 1-based round."""
        return self.start_year + self.decade_years * (round_number - 1)

    @property
    def has_recurring_items(self) -> bool:
        return bool(self.seawall_upkeep or self.reef_revenue or self.retreat_revenue_loss)


DEFAULT_RULES = RuleSet()
