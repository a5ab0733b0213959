"""
Tests for the rate resolver (baseline precedence).
"""

from ..engine_core import current_base_rate, RuleSet
from ..engine_core.rates import active_modifier


class TestBaseRatePrecedence:
    """Retreat beats seawall beats reef beats baseline."""

    def test_plain_baseline(self, normal_state):
        assert current_base_rate(normal_state) == -10
        assert active_modifier(normal_state) == "baseline"

    def test_reef_floors_erosion(self, hard_state):
        """Active reef improves -12 to -5."""
        state = hard_state._copy_with(reef_built=True, reef_rounds_left=2)
        assert current_base_rate(state) == -5
        assert active_modifier(state) == "reef"

    def test_reef_never_worsens_baseline(self, normal_state):
        """A baseline already better than the reef floor is kept."""
        state = normal_state._copy_with(base_baseline=-3, reef_built=True, reef_rounds_left=1)
        assert current_base_rate(state) == -3

    def test_lapsed_reef_has_no_effect(self, normal_state):
        state = normal_state._copy_with(reef_built=True, reef_rounds_left=0)
        assert current_base_rate(state) == -10

    def test_seawall_overrides_reef(self, normal_state):
        state = normal_state._copy_with(
            seawall_built=True, reef_built=True, reef_rounds_left=3,
        )
        assert current_base_rate(state) == -20
        assert active_modifier(state) == "seawall"

    def test_retreat_overrides_everything(self, normal_state):
        state = normal_state._copy_with(
            seawall_built=True, reef_built=True, reef_rounds_left=3, retreat_rounds_left=1,
        )
        assert current_base_rate(state) == 0
        assert active_modifier(state) == "retreat"

    def test_rates_come_from_rules(self, normal_state):
        """Changing the rule set changes the resolved rate."""
        rules = RuleSet(seawall_rate=-15)
        state = normal_state._copy_with(seawall_built=True)
        assert current_base_rate(state, rules) == -15

    def test_pure(self, normal_state):
        """Resolving a rate leaves the state untouched."""
        before = normal_state
        current_base_rate(normal_state)
        assert normal_state == before
