"""
Turn Controller - Advances the simulation one decade at a time.

The controller is the single point of state change.
Every accepted turn produces exactly one successor state.

Design principles:
- Pure: (state, action) -> TurnResult with a new state
- Rejects turns once the game is over
- Bounded undo stack carried inside the state
- Delegates rates, decades and wildcards to their resolvers
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import random

from .action import ActionId, DecadeResult, DrawnEvent, TurnResult
from .decade import compute_decade, pretty_money
from .event_resolver import EventResolver
from .rules import RuleSet, DEFAULT_RULES, WinPolicy
from .state import SimulationState, HistoryPoint
from ..catalog import DEFAULT_DIFFICULTY, get_difficulty, get_action

logger = logging.getLogger(__name__)


@dataclass
class TurnController:
    """
    Orchestrates one full turn.

    Stateless apart from the event resolver's random source;
    all simulation state lives in SimulationState.
    """
    rules: RuleSet = DEFAULT_RULES
    event_resolver: EventResolver | None = None

    def __post_init__(self):
        if self.event_resolver is None:
            self.event_resolver = EventResolver(rules=self.rules)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initial_state(self, difficulty_id: str = DEFAULT_DIFFICULTY) -> SimulationState:
        """Create a fresh state for a difficulty preset."""
        difficulty = get_difficulty(difficulty_id)
        if difficulty is None:
            logger.warning(
                "Unknown difficulty %r; falling back to %r", difficulty_id, DEFAULT_DIFFICULTY
            )
            difficulty = get_difficulty(DEFAULT_DIFFICULTY)

        rules = self.rules
        opening = (
            f"Game start: {rules.start_year}. Beach={rules.start_width} ft, "
            f"Budget={pretty_money(difficulty.starting_budget)}. "
            f"Baseline erosion {difficulty.baseline_rate} ft/decade."
        )
        return SimulationState(
            difficulty_id=difficulty.difficulty_id,
            year=rules.start_year,
            round=1,
            width=rules.start_width,
            budget=difficulty.starting_budget,
            base_baseline=difficulty.baseline_rate,
            log=(opening,),
            history=(
                HistoryPoint(
                    year=rules.start_year,
                    width=rules.start_width,
                    budget=difficulty.starting_budget,
                ),
            ),
        )

    def reset(self, state: SimulationState) -> SimulationState:
        """Discard everything and start over on the same difficulty."""
        return self.initial_state(state.difficulty_id)

    def undo(self, state: SimulationState) -> SimulationState:
        """
        Restore the previous snapshot.

        No-op when the stack is empty. The restored state gets the
        remaining (shorter) stack.
        """
        if not state.past:
            return state
        previous = state.past[-1]
        return previous._copy_with(past=state.past[:-1])

    # ------------------------------------------------------------------
    # Turn
    # ------------------------------------------------------------------

    def advance_turn(self, action: ActionId | str, state: SimulationState) -> TurnResult:
        """
        Advance one decade.

        Returns TurnResult with the new state, or a rejection
        when the game is already over.
        """
        if state.game_over:
            logger.warning("Turn requested after game over (round %d)", state.round)
            return TurnResult.failure("Game is over - no turns allowed", error_code="GAME_OVER")

        rules = self.rules
        action_id = ActionId.parse(action)
        if action_id is None:
            logger.warning("Unrecognized action %r; resolving as a no-op decade", action)

        # Snapshot for undo
        past = (state.past + (state.snapshot(),))[-rules.undo_limit:]
        working = state._copy_with(past=past)

        # Decade
        decade = compute_decade(action_id if action_id is not None else action, working, rules)
        rate, cost, notes = decade.rate, decade.cost, list(decade.notes)

        # Structures
        working = apply_structures(working, decade, rules)

        # Wildcard
        drawn: DrawnEvent | None = None
        base_baseline = working.base_baseline
        if action_id == ActionId.NONE:
            event_id = self.event_resolver.draw_event()
            outcome = self.event_resolver.apply_event(event_id, working, decade)
            rate, cost = outcome.rate, outcome.cost
            notes.extend(outcome.notes)
            if outcome.raises_baseline:
                base_baseline = max(base_baseline, rules.emissions_floor)
            drawn = self.event_resolver.describe(outcome)
            logger.debug(
                "Wildcard %s: width %+d, budget %+d",
                event_id.value, outcome.width_from_event, outcome.budget_from_event,
            )

        # Width and budget
        new_budget = working.budget + cost
        new_width = max(0, working.width + rate)

        # Timers tick after this decade's effect
        reef_left = max(0, working.reef_rounds_left - 1)
        retreat_left = max(0, working.retreat_rounds_left - 1)

        # Termination
        reached_end = working.round >= rules.rounds
        lost = new_width <= 0 or new_budget <= 0
        victory = self._is_victory(lost, reached_end, new_width, new_budget)
        game_over = lost or reached_end

        # Log
        lines = self._log_lines(
            action_id, working, decade.base_rate, rate, cost,
            notes, new_width, new_budget,
        )
        lines.extend(self._outcome_lines(lost, reached_end, victory, new_width, new_budget))

        # Advance
        next_year = working.year + rules.decade_years
        new_state = working._copy_with(
            year=next_year,
            round=working.round + 1,
            width=new_width,
            budget=new_budget,
            base_baseline=base_baseline,
            reef_rounds_left=reef_left,
            retreat_rounds_left=retreat_left,
            last_rate=rate,
            last_base_rate=decade.base_rate,
            log=("\n".join(lines),) + working.log,
            game_over=game_over,
            victory=victory,
            history=working.history + (
                HistoryPoint(year=next_year, width=new_width, budget=new_budget),
            ),
        )

        logger.debug(
            "Round %d: action=%s base=%+d applied=%+d cost=%+d width=%d budget=%d",
            working.round, action_id.value if action_id else action,
            decade.base_rate, rate, cost, new_width, new_budget,
        )
        if game_over:
            logger.info(
                "Game over in %d: %s (width %d ft, budget %s)",
                next_year, "victory" if victory else "defeat",
                new_width, pretty_money(new_budget),
            )

        return TurnResult.success_with_state(new_state, changes=lines, drawn_event=drawn)

    def _is_victory(self, lost: bool, reached_end: bool, width: int, budget: int) -> bool:
        if lost or not reached_end:
            return False
        if self.rules.win_policy == WinPolicy.GOAL_WIDTH:
            return width >= self.rules.goal_width and budget > 0
        return True

    def _log_lines(
        self,
        action_id: ActionId | None,
        state: SimulationState,
        base_rate: int,
        rate: int,
        cost: int,
        notes: list[str],
        new_width: int,
        new_budget: int,
    ) -> list[str]:
        """Multi-line log block for one decade."""
        definition = get_action(action_id.value) if action_id else None
        title = definition.title if definition else "Unknown action"
        end = state.year + self.rules.decade_years

        lines = [f"Year {state.year}-{end}: chose {title}."]
        lines.extend(f"• {note}" for note in notes)
        lines.append(f"• Base rate {base_rate} ft/decade; applied change {rate} ft")
        lines.append(f"• Budget change: {pretty_money(cost)} -> {pretty_money(new_budget)}")
        lines.append(f"• Beach width: {state.width} ft -> {new_width} ft")
        return lines

    def _outcome_lines(
        self, lost: bool, reached_end: bool, victory: bool, width: int, budget: int
    ) -> list[str]:
        if lost:
            if width <= 0:
                return ["• Game over: the beach is gone."]
            return ["• Game over: the treasury is empty."]
        if victory:
            return [f"• Victory: reached {self.rules.end_year} with {width} ft of beach."]
        if reached_end:
            return [f"• Reached {self.rules.end_year} below the {self.rules.goal_width} ft goal."]
        return []


def apply_structures(
    state: SimulationState,
    decade: DecadeResult,
    rules: RuleSet = DEFAULT_RULES,
) -> SimulationState:
    """
    Apply structure transitions on top of the existing flags.

    First reef build arms the reef window; first seawall build sets the
    permanent flag; retreat re-arms its window every time it is chosen.
    """
    changes = {}
    if decade.builds_reef and not state.reef_built:
        changes["reef_built"] = True
        changes["reef_rounds_left"] = rules.structure_window
    if decade.builds_seawall:
        changes["seawall_built"] = True
    if decade.arms_retreat:
        changes["retreat_rounds_left"] = rules.structure_window
    if not changes:
        return state
    return state._copy_with(**changes)


# ----------------------------------------------------------------------
# Convenience functions
# ----------------------------------------------------------------------

def initial_state(
    difficulty_id: str = DEFAULT_DIFFICULTY,
    rules: RuleSet = DEFAULT_RULES,
) -> SimulationState:
    """Create a fresh state for a difficulty preset."""
    return TurnController(rules=rules).initial_state(difficulty_id)


def advance_turn(
    action: ActionId | str,
    state: SimulationState,
    rng: random.Random | None = None,
    rules: RuleSet = DEFAULT_RULES,
) -> TurnResult:
    """
    Convenience function to advance one turn.

    Creates a TurnController around the given random source.
    """
    resolver = EventResolver(rng=rng or random.Random(), rules=rules)
    controller = TurnController(rules=rules, event_resolver=resolver)
    return controller.advance_turn(action, state)


def undo(state: SimulationState) -> SimulationState:
    """Pop the undo stack."""
    return TurnController().undo(state)


def reset(state: SimulationState, rules: RuleSet = DEFAULT_RULES) -> SimulationState:
    """Start over on the same difficulty."""
    return TurnController(rules=rules).reset(state)
