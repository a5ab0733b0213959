"""
Wildcard events, drawn only when the player does nothing.
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class Wildcard:
    """A wildcard event card."""
    event_id: str
    name: str
    text: str


STORM = Wildcard(
    event_id="STORM",
    name="100-Year Storm",
    text="Immediate -20 ft of beach this decade. Baseline rate unchanged.",
)

RECALL = Wildcard(
    event_id="RECALL",
    name="Recall",
    text="Reverse last decade's management effect on width (money not refunded).",
)

LA_NINA = Wildcard(
    event_id="LA_NINA",
    name="La Nina Year",
    text="0 ft erosion this decade (no loss).",
)

KING_TIDE = Wildcard(
    event_id="KING_TIDE",
    name="King Tide Flooding",
    text="Lose $30M from budget immediately (width unchanged).",
)

EMISSIONS = Wildcard(
    event_id="EMISSIONS",
    name="Emissions Reduction",
    text="Global shift: baseline erosion improves to -5 ft/decade permanently.",
)

WILDCARDS = MappingProxyType({
    w.event_id: w for w in (STORM, RECALL, LA_NINA, KING_TIDE, EMISSIONS)
})


def get_wildcard(event_id: str) -> Wildcard | None:
    """Get a wildcard by ID."""
    if not isinstance(event_id, str):
        return None
    return WILDCARDS.get(event_id.strip().upper())
