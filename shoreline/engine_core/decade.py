"""
Decade Resolver - Width and budget deltas for the chosen action.

Given the chosen action and the current state, computes:
- base_rate from the Rate Resolver
- rate: the width delta this decade
- cost: the budget delta this decade
- notes: rationale lines for the log

Structure transitions (reef / seawall / retreat) are reported as flags on
the result; the turn controller applies them. Wildcards are layered on
afterwards by the Event Resolver when the action is NONE.
"""

from __future__ import annotations
from typing import Any

from .action import ActionId, DecadeResult
from .rates import current_base_rate
from .rules import RuleSet, DEFAULT_RULES
from .state import SimulationState


def pretty_money(amount: int) -> str:
    """Format $M with the sign in front: -$15M, $185M."""
    if amount < 0:
        return f"-${abs(amount):.0f}M"
    return f"${amount:.0f}M"


def compute_decade(
    action: ActionId | str | Any,
    state: SimulationState,
    rules: RuleSet = DEFAULT_RULES,
) -> DecadeResult:
    """
    Resolve one decade for a chosen action.

    Unrecognized actions resolve to a no-op decade with a generic note.
    """
    base_rate = current_base_rate(state, rules)
    rate = base_rate
    cost = 0
    notes: list[str] = []
    builds_reef = builds_seawall = arms_retreat = False

    action_id = ActionId.parse(action)

    if action_id == ActionId.NOURISH:
        cost -= rules.nourish_cost
        rate = base_rate + rules.nourish_bonus
        notes.append(
            f"Beach Nourishment this decade: {pretty_money(-rules.nourish_cost)}; "
            f"erosion eased by {rules.nourish_bonus} ft."
        )

    elif action_id == ActionId.DUNES:
        cost -= rules.dunes_cost
        rate = base_rate + rules.dunes_bonus
        notes.append(
            f"Dune Restoration this decade: {pretty_money(-rules.dunes_cost)}; "
            f"erosion eased by {rules.dunes_bonus} ft."
        )

    elif action_id == ActionId.REEF:
        if not state.reef_built:
            cost -= rules.reef_cost
            builds_reef = True
            notes.append(
                f"Built Artificial Reef {pretty_money(-rules.reef_cost)}. "
                f"Erosion no worse than {rules.reef_floor} ft/decade "
                f"for {rules.structure_window} decades."
            )
            if not state.retreat_active and not state.seawall_built:
                rate = max(base_rate, rules.reef_floor)
        else:
            notes.append("Artificial Reef already built; no additional cost.")

    elif action_id == ActionId.SEAWALL:
        if not state.seawall_built:
            cost -= rules.seawall_cost
            builds_seawall = True
            notes.append(
                f"Built Seawall {pretty_money(-rules.seawall_cost)}. "
                f"From next decade: erosion {rules.seawall_rate} ft/decade."
            )
        else:
            notes.append("Seawall already standing; no additional cost.")

    elif action_id == ActionId.RETREAT:
        cost -= rules.retreat_cost
        arms_retreat = True
        rate = rules.retreat_rate
        verb = "renewed" if state.retreat_active else "begun"
        notes.append(
            f"Managed Retreat {verb} {pretty_money(-rules.retreat_cost)}: "
            f"erosion {rules.retreat_rate} ft/decade for {rules.structure_window} decades."
        )

    elif action_id == ActionId.NONE:
        notes.append("Chose to do nothing -> draw a Wild Card.")

    else:
        notes.append(f"Unrecognized action {action!r}; no management this decade.")

    cost += _recurring_items(state, rules, notes)

    return DecadeResult(
        base_rate=base_rate,
        rate=rate,
        cost=cost,
        notes=tuple(notes),
        builds_reef=builds_reef,
        builds_seawall=builds_seawall,
        arms_retreat=arms_retreat,
    )


def _recurring_items(state: SimulationState, rules: RuleSet, notes: list[str]) -> int:
    """Upkeep and revenue of structures standing at the start of the decade."""
    if not rules.has_recurring_items:
        return 0

    delta = 0
    if rules.seawall_upkeep and state.seawall_built:
        delta -= rules.seawall_upkeep
        notes.append(f"Seawall maintenance {pretty_money(-rules.seawall_upkeep)}.")
    if rules.reef_revenue and state.reef_active:
        delta += rules.reef_revenue
        notes.append(f"Reef tourism +{pretty_money(rules.reef_revenue)}.")
    if rules.retreat_revenue_loss and state.retreat_active:
        delta -= rules.retreat_revenue_loss
        notes.append(f"Retreat lost revenue {pretty_money(-rules.retreat_revenue_loss)}.")
    return delta
