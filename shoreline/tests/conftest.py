"""
Pytest fixtures for Shoreline tests.
"""

import random

import pytest

from ..engine_core import (
    RuleSet,
    DEFAULT_RULES,
    SimulationState,
    TurnController,
    EventResolver,
    EventId,
)


class FixedRandom(random.Random):
    """Random source whose choice() returns queued events first."""

    def __init__(self):
        super().__init__(0)
        self.events = []

    def choice(self, seq):
        if self.events:
            return self.events.pop(0)
        return super().choice(seq)


def make_controller(*events: EventId, rules: RuleSet = DEFAULT_RULES) -> TurnController:
    """Controller whose wildcard draws return the given events in order."""
    rng = FixedRandom()
    rng.events = list(events)
    return TurnController(rules=rules, event_resolver=EventResolver(rng=rng, rules=rules))


@pytest.fixture
def controller() -> TurnController:
    """Controller with a seeded random source."""
    rules = DEFAULT_RULES
    return TurnController(
        rules=rules,
        event_resolver=EventResolver(rng=random.Random(1234), rules=rules),
    )


@pytest.fixture
def normal_state(controller) -> SimulationState:
    """Fresh state on normal difficulty."""
    return controller.initial_state("normal")


@pytest.fixture
def easy_state(controller) -> SimulationState:
    """Fresh state on easy difficulty."""
    return controller.initial_state("easy")


@pytest.fixture
def hard_state(controller) -> SimulationState:
    """Fresh state on hard difficulty."""
    return controller.initial_state("hard")
