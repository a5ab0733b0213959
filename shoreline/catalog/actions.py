"""
Management actions.

One action is chosen per decade. Costs are shown as the player sees them;
the arithmetic lives in the decade resolver and the rule set.
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class ActionDefinition:
    """Display definition for a management action."""
    action_id: str
    title: str
    cost: int  # $M, 0 for free actions
    cost_label: str
    effect: str
    description: str = ""
    one_time: bool = False  # Charged only on first build


NONE = ActionDefinition(
    action_id="NONE",
    title="Do Nothing",
    cost=0,
    cost_label="-",
    effect="Draw a Wild Card",
    description="Skip a management action and draw a random event.",
)

NOURISH = ActionDefinition(
    action_id="NOURISH",
    title="Beach Nourishment",
    cost=15,
    cost_label="-$15M",
    effect="+5 ft vs. baseline this decade",
    description="Adds sand; slows loss this decade only.",
)

DUNES = ActionDefinition(
    action_id="DUNES",
    title="Dune Restoration",
    cost=5,
    cost_label="-$5M",
    effect="+2 ft vs. baseline this decade",
    description="Plant and stabilize dunes; slows loss a little.",
)

REEF = ActionDefinition(
    action_id="REEF",
    title="Artificial Reef",
    cost=100,
    cost_label="-$100M build",
    effect="Erosion no worse than -5 ft/decade for 3 decades",
    description="Offshore reef reduces wave energy.",
    one_time=True,
)

SEAWALL = ActionDefinition(
    action_id="SEAWALL",
    title="Seawall / Armoring",
    cost=150,
    cost_label="-$150M build",
    effect="-20 ft/decade from next decade on",
    description="Protects the backshore; accelerates beach loss.",
    one_time=True,
)

RETREAT = ActionDefinition(
    action_id="RETREAT",
    title="Managed Retreat",
    cost=150,
    cost_label="-$150M each time",
    effect="0 ft/decade for 3 decades",
    description="Relocate infrastructure and let the beach migrate.",
)

ACTIONS = MappingProxyType({
    a.action_id: a for a in (NONE, NOURISH, DUNES, REEF, SEAWALL, RETREAT)
})

# Display order for pickers
ACTION_ORDER = ("NOURISH", "DUNES", "REEF", "SEAWALL", "RETREAT", "NONE")


def get_action(action_id: str) -> ActionDefinition | None:
    """Get an action definition by ID."""
    if not isinstance(action_id, str):
        return None
    return ACTIONS.get(action_id.strip().upper())
