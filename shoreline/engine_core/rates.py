"""
Rate Resolver - Baseline erosion under the active structural modifiers.

Precedence, highest wins (not additive):
1. Retreat window active -> retreat rate (0)
2. Seawall built -> seawall rate (-20)
3. Otherwise the difficulty baseline, floored at the reef floor (-5)
   while the reef window is active
"""

from __future__ import annotations

from .rules import RuleSet, DEFAULT_RULES
from .state import SimulationState


def current_base_rate(state: SimulationState, rules: RuleSet = DEFAULT_RULES) -> int:
    """
    Baseline erosion (ft/decade) before any per-decade action.

    Pure; reads only the structural fields of the state.
    """
    if state.retreat_rounds_left > 0:
        return rules.retreat_rate
    if state.seawall_built:
        return rules.seawall_rate
    if state.reef_rounds_left > 0:
        # The reef only ever improves on the baseline
        return max(state.base_baseline, rules.reef_floor)
    return state.base_baseline


def active_modifier(state: SimulationState) -> str:
    """Name of the modifier that decides the base rate, for display."""
    if state.retreat_rounds_left > 0:
        return "retreat"
    if state.seawall_built:
        return "seawall"
    if state.reef_rounds_left > 0:
        return "reef"
    return "baseline"
