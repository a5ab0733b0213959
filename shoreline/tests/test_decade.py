"""
Tests for the decade resolver.

Tests:
- Per-decade actions (nourishment, dunes)
- One-time structures (reef, seawall)
- Re-armable retreat
- Unrecognized actions
- Recurring budget items
"""

from ..engine_core import ActionId, RuleSet, compute_decade


class TestPerDecadeActions:
    """Nourishment and dunes only help the current decade."""

    def test_nourish(self, normal_state):
        decade = compute_decade(ActionId.NOURISH, normal_state)
        assert decade.base_rate == -10
        assert decade.rate == -5
        assert decade.cost == -15

    def test_dunes(self, normal_state):
        decade = compute_decade(ActionId.DUNES, normal_state)
        assert decade.rate == -8
        assert decade.cost == -5

    def test_nourish_stacks_on_structure_rate(self, normal_state):
        """The bonus is added to whatever the base rate is."""
        state = normal_state._copy_with(seawall_built=True)
        decade = compute_decade(ActionId.NOURISH, state)
        assert decade.base_rate == -20
        assert decade.rate == -15

    def test_accepts_string_ids(self, normal_state):
        decade = compute_decade("nourish", normal_state)
        assert decade.rate == -5


class TestReef:
    """Reef is bought once and floors erosion."""

    def test_first_build(self, normal_state):
        decade = compute_decade(ActionId.REEF, normal_state)
        assert decade.cost == -100
        assert decade.builds_reef
        assert decade.rate == -5  # Floor applies this decade
        assert any("Built Artificial Reef" in n for n in decade.notes)

    def test_already_built_is_free(self, normal_state):
        state = normal_state._copy_with(reef_built=True, reef_rounds_left=0)
        decade = compute_decade(ActionId.REEF, state)
        assert decade.cost == 0
        assert not decade.builds_reef
        assert decade.rate == decade.base_rate == -10

    def test_no_immediate_floor_behind_seawall(self, normal_state):
        state = normal_state._copy_with(seawall_built=True)
        decade = compute_decade(ActionId.REEF, state)
        assert decade.cost == -100
        assert decade.rate == -20

    def test_no_immediate_floor_during_retreat(self, normal_state):
        state = normal_state._copy_with(retreat_rounds_left=2)
        decade = compute_decade(ActionId.REEF, state)
        assert decade.rate == 0


class TestSeawall:
    """Seawall is bought once; its rate starts next decade."""

    def test_first_build(self, normal_state):
        decade = compute_decade(ActionId.SEAWALL, normal_state)
        assert decade.cost == -150
        assert decade.builds_seawall
        assert decade.rate == -10

    def test_already_built_is_free(self, normal_state):
        state = normal_state._copy_with(seawall_built=True)
        decade = compute_decade(ActionId.SEAWALL, state)
        assert decade.cost == 0
        assert not decade.builds_seawall
        assert decade.rate == -20


class TestRetreat:
    """Retreat is charged every time it is chosen."""

    def test_first_retreat(self, normal_state):
        decade = compute_decade(ActionId.RETREAT, normal_state)
        assert decade.cost == -150
        assert decade.rate == 0
        assert decade.arms_retreat

    def test_renewed_retreat_charged_again(self, normal_state):
        state = normal_state._copy_with(retreat_rounds_left=1)
        decade = compute_decade(ActionId.RETREAT, state)
        assert decade.cost == -150
        assert decade.arms_retreat
        assert any("renewed" in n for n in decade.notes)


class TestNoneAndUnknown:
    """NONE defers to the event resolver; unknown ids are no-ops."""

    def test_none(self, normal_state):
        decade = compute_decade(ActionId.NONE, normal_state)
        assert decade.rate == -10
        assert decade.cost == 0
        assert any("Wild Card" in n for n in decade.notes)

    def test_unknown_action(self, normal_state):
        decade = compute_decade("TELEPORT", normal_state)
        assert decade.rate == decade.base_rate
        assert decade.cost == 0
        assert not (decade.builds_reef or decade.builds_seawall or decade.arms_retreat)
        assert any("Unrecognized" in n for n in decade.notes)


class TestRecurringItems:
    """Upkeep and revenue, off unless configured."""

    def test_off_by_default(self, normal_state):
        state = normal_state._copy_with(seawall_built=True, reef_built=True, reef_rounds_left=2)
        decade = compute_decade(ActionId.DUNES, state)
        assert decade.cost == -5

    def test_seawall_upkeep(self, normal_state):
        rules = RuleSet(seawall_upkeep=10)
        state = normal_state._copy_with(seawall_built=True)
        decade = compute_decade(ActionId.DUNES, state, rules)
        assert decade.cost == -15
        assert any("maintenance" in n for n in decade.notes)

    def test_upkeep_starts_after_build_decade(self, normal_state):
        rules = RuleSet(seawall_upkeep=10)
        decade = compute_decade(ActionId.SEAWALL, normal_state, rules)
        assert decade.cost == -150

    def test_reef_revenue_while_active(self, normal_state):
        rules = RuleSet(reef_revenue=10)
        active = normal_state._copy_with(reef_built=True, reef_rounds_left=1)
        lapsed = normal_state._copy_with(reef_built=True, reef_rounds_left=0)
        assert compute_decade(ActionId.NONE, active, rules).cost == 10
        assert compute_decade(ActionId.NONE, lapsed, rules).cost == 0

    def test_retreat_revenue_loss(self, normal_state):
        rules = RuleSet(retreat_revenue_loss=10)
        state = normal_state._copy_with(retreat_rounds_left=2)
        assert compute_decade(ActionId.DUNES, state, rules).cost == -15
