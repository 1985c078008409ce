"""
Tests for damage classification.
"""
import pytest

from buyers_tool.models import DamageLocation, DamageTier, TierLabel, VisibilityImpact
from buyers_tool.pipeline.damage import DamageClassifier


class TestTierAssignment:
    """Tests for tier calculation."""

    @pytest.mark.parametrize(
        "locations,expected",
        [
            (["back"], DamageTier.HIDDEN),
            (["back", "bottom", "top"], DamageTier.HIDDEN),
            (["left_side"], DamageTier.PARTIALLY_VISIBLE),
            (["back", "right_side"], DamageTier.PARTIALLY_VISIBLE),
            (["front_door"], DamageTier.PROMINENTLY_VISIBLE),
            (["left_side", "handle"], DamageTier.PROMINENTLY_VISIBLE),
        ],
    )
    def test_calculate_tier(self, locations, expected):
        """Test tier assignment by location set."""
        tier = DamageClassifier.calculate_tier([DamageLocation(loc) for loc in locations])
        assert tier == expected

    def test_empty_locations_are_hidden(self):
        """Test that no recorded damage falls into Tier 1."""
        assert DamageClassifier.calculate_tier([]) == DamageTier.HIDDEN

    def test_labels_and_impact(self, make_input):
        """Test label and visibility impact for a front-damaged unit."""
        output = DamageClassifier().evaluate(make_input(damage={"locations": ["front_panel"]}))

        assert output.result.tier == DamageTier.PROMINENTLY_VISIBLE
        assert output.result.tier_label == TierLabel.PROMINENTLY_VISIBLE
        assert output.result.visibility_impact == VisibilityImpact.SIGNIFICANT
        assert output.rules[0].message == "Damage classified as Tier 3 (Prominently Visible)"


class TestInstallationVisibility:
    """Tests for the visibility check against installed sides."""

    def test_hidden_side_passes(self, make_input):
        """Test side damage with only the front visible."""
        output = DamageClassifier().evaluate(make_input(damage={"locations": ["left_side"]}))

        assert output.result.acceptable_for_installation is True
        assert output.rules[1].passed is True

    def test_visible_side_fails(self, make_input):
        """Test side damage on a side left visible."""
        buyer_input = make_input(
            damage={"locations": ["left_side"]},
            installation={"visible_sides": ["front", "left"]},
        )
        output = DamageClassifier().evaluate(buyer_input)

        assert output.result.acceptable_for_installation is False
        assert output.rules[1].passed is False
        assert output.rules[1].message == "Damage will be visible in your installation configuration"

    def test_tier1_always_acceptable(self, make_input):
        """Test that visible top damage is still acceptable at Tier 1."""
        buyer_input = make_input(
            damage={"locations": ["top"]},
            installation={"visible_sides": ["front", "top"]},
        )
        output = DamageClassifier().evaluate(buyer_input)

        assert output.result.tier == DamageTier.HIDDEN
        assert output.result.acceptable_for_installation is True
        # The warning still records that the damage shows
        assert output.rules[1].passed is False

    def test_back_never_visible(self):
        """Test that back and bottom map to no visible side."""
        visible = DamageClassifier.visible_in_installation(
            [DamageLocation.BACK, DamageLocation.BOTTOM],
            [],
        )
        assert visible is False

    def test_emits_two_rules(self, clean_input):
        """Test the rule IDs emitted."""
        output = DamageClassifier().evaluate(clean_input)

        assert [rule.rule_id for rule in output.rules] == [
            "DAMAGE.TIER.ASSIGNMENT_V1",
            "DAMAGE.VISIBILITY.INSTALLATION_CHECK_V1",
        ]
