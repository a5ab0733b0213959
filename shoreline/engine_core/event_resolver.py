"""
Event Resolver - Draws and applies wildcard events.

Only runs when the player chose NONE. An event modifies the decade's
rate / cost computed by the Decade Resolver and reports the part of the
change it caused (the attributed deltas) separately.

Randomness is isolated in the injected rng so a fixed seed and a fixed
action sequence always replay the same game.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import random

from .action import EventId, DecadeResult, EventOutcome, DrawnEvent
from .decade import pretty_money
from .rules import RuleSet, DEFAULT_RULES, EmissionsTiming
from .state import SimulationState
from ..catalog import get_wildcard


@dataclass
class EventResolver:
    """
    Draws wildcards from an injectable random source and applies them.

    Usage:
        resolver = EventResolver(rng=random.Random(42))
        event_id = resolver.draw_event()
        outcome = resolver.apply_event(event_id, state, decade)
    """
    rng: random.Random = field(default_factory=random.Random)
    rules: RuleSet = DEFAULT_RULES

    def draw_event(self) -> EventId:
        """Uniform choice among the wildcard events."""
        return self.rng.choice(list(EventId))

    def apply_event(
        self,
        event_id: EventId,
        state: SimulationState,
        decade: DecadeResult,
    ) -> EventOutcome:
        """
        Layer a wildcard on top of the decade result.

        Returns the new rate / cost plus the attributed deltas.
        """
        handler = self._get_handler(event_id)
        return handler(state, decade)

    def describe(self, outcome: EventOutcome) -> DrawnEvent:
        """Package an applied event for display."""
        card = get_wildcard(outcome.event_id.value)
        return DrawnEvent(
            event_id=outcome.event_id,
            name=card.name if card else outcome.event_id.value,
            text=card.text if card else "",
            width_from_event=outcome.width_from_event,
            budget_from_event=outcome.budget_from_event,
            why=outcome.why,
        )

    def _get_handler(self, event_id: EventId):
        """Get the handler function for an event."""
        handlers = {
            EventId.STORM: self._apply_storm,
            EventId.RECALL: self._apply_recall,
            EventId.LA_NINA: self._apply_la_nina,
            EventId.KING_TIDE: self._apply_king_tide,
            EventId.EMISSIONS: self._apply_emissions,
        }
        return handlers[event_id]

    def _apply_storm(self, state: SimulationState, decade: DecadeResult) -> EventOutcome:
        loss = self.rules.storm_loss
        return EventOutcome(
            event_id=EventId.STORM,
            rate=decade.rate - loss,
            cost=decade.cost,
            notes=(
                "Wild Card: 100-Year Storm.",
                f"100-Year Storm -> additional -{loss} ft this decade.",
            ),
            width_from_event=-loss,
            why="A once-a-century storm strips sand on top of normal erosion.",
        )

    def _apply_recall(self, state: SimulationState, decade: DecadeResult) -> EventOutcome:
        """
        Take back last decade's management benefit from this decade's change.

        The improvement is last decade's applied rate minus its base rate.
        Width already moved last turn, so this is a proxy, not a replay.
        """
        if state.last_rate is None or state.last_base_rate is None:
            return EventOutcome(
                event_id=EventId.RECALL,
                rate=decade.rate,
                cost=decade.cost,
                notes=(
                    "Wild Card: Recall.",
                    "Recall had no effect (no prior decade recorded).",
                ),
                why="There was no earlier decade to reverse.",
            )

        improvement = state.last_rate - state.last_base_rate
        return EventOutcome(
            event_id=EventId.RECALL,
            rate=decade.rate - improvement,
            cost=decade.cost,
            notes=(
                "Wild Card: Recall.",
                f"Recall -> reversed last decade's management effect "
                f"({-improvement:+d} ft; money not refunded).",
            ),
            width_from_event=-improvement,
            why="Last decade's project is undone; the money stays spent.",
        )

    def _apply_la_nina(self, state: SimulationState, decade: DecadeResult) -> EventOutcome:
        return EventOutcome(
            event_id=EventId.LA_NINA,
            rate=0,
            cost=decade.cost,
            notes=(
                "Wild Card: La Nina Year.",
                "La Nina -> 0 ft loss this decade.",
            ),
            width_from_event=-decade.rate,
            why="Calm La Nina conditions cancel this decade's erosion.",
        )

    def _apply_king_tide(self, state: SimulationState, decade: DecadeResult) -> EventOutcome:
        hit = self.rules.king_tide_cost
        return EventOutcome(
            event_id=EventId.KING_TIDE,
            rate=decade.rate,
            cost=decade.cost - hit,
            notes=(
                "Wild Card: King Tide Flooding.",
                f"King Tide Flooding -> {pretty_money(-hit)} budget immediately.",
            ),
            budget_from_event=-hit,
            why="Flood damage to the waterfront is paid from the treasury.",
        )

    def _apply_emissions(self, state: SimulationState, decade: DecadeResult) -> EventOutcome:
        floor = self.rules.emissions_floor
        notes = ["Wild Card: Emissions Reduction."]
        if state.base_baseline < floor:
            notes.append(f"Global Emissions Reduction -> baseline improves to {floor} ft/decade.")
        else:
            notes.append("Global Emissions Reduction -> baseline already at or above the floor.")

        rate = decade.rate
        if self.rules.emissions_timing == EmissionsTiming.IMMEDIATE:
            rate = max(decade.rate, floor)

        return EventOutcome(
            event_id=EventId.EMISSIONS,
            rate=rate,
            cost=decade.cost,
            notes=tuple(notes),
            width_from_event=rate - decade.rate,
            raises_baseline=True,
            why="Global emissions fall; sea-level rise and erosion slow for good.",
        )
