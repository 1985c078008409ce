"""
Tests for the pricing engine.
"""
import pytest

from buyers_tool.models import DamageTier, DiscountRating
from buyers_tool.pipeline.damage import DamageClassifier
from buyers_tool.pipeline.pricing import PricingEngine


def _price(buyer_input):
    damage = DamageClassifier().evaluate(buyer_input).result
    return PricingEngine().evaluate(buyer_input, damage)


class TestDiscount:
    """Tests for discount calculation and rating."""

    def test_forty_percent(self, clean_input):
        """Test 1000 retail, 600 asking."""
        result = _price(clean_input).result

        assert result.discount_percent == 40.0
        assert result.discount_rating == DiscountRating.EXCELLENT
        assert result.savings_vs_new == 400

    def test_zero_retail_price(self):
        """Test that a non-positive retail price yields 0, not an error."""
        assert PricingEngine.calculate_discount_percent(0, 100) == 0.0
        assert PricingEngine.calculate_discount_percent(-5, 100) == 0.0

    @pytest.mark.parametrize(
        "discount,expected",
        [
            (45, DiscountRating.EXCELLENT),
            (40, DiscountRating.EXCELLENT),
            (35, DiscountRating.GOOD),
            (30, DiscountRating.GOOD),
            (20, DiscountRating.FAIR),
            (19.9, DiscountRating.POOR),
            (-10, DiscountRating.POOR),
        ],
    )
    def test_rating_cutoffs(self, discount, expected):
        """Test rating boundaries."""
        assert PricingEngine.rate_discount(discount) == expected

    def test_discount_rounded(self, make_input):
        """Test that the reported discount is rounded to one decimal."""
        result = _price(make_input(appliance={"retail_price": 900, "asking_price": 600})).result

        assert result.discount_percent == 33.3


class TestExpectedRange:
    """Tests for the expected-range warning and fair price."""

    def test_within_range(self, clean_input):
        """Test that 40% on Tier 1 passes the range check."""
        output = _price(clean_input)
        range_rule = output.rules[2]

        assert range_rule.rule_id == "PRICING.DISCOUNT.EXPECTED_RANGE_V1"
        assert range_rule.passed is True
        assert output.result.expected_discount_range == (15, 25)

    def test_below_range(self, make_input):
        """Test that 20% on Tier 3 fails the range check."""
        buyer_input = make_input(
            appliance={"asking_price": 800},
            damage={"locations": ["front_door"]},
        )
        output = _price(buyer_input)
        range_rule = output.rules[2]

        assert range_rule.passed is False
        assert range_rule.message == "Discount (20.0%) is below typical range (35-50%) for Tier 3 damage"

    def test_fair_price_tier1(self):
        """Test the fair price band for hidden damage."""
        assert PricingEngine.fair_price_range(1000, DamageTier.HIDDEN) == (750, 850)

    def test_fair_price_tier3(self):
        """Test the fair price band is rounded to whole dollars."""
        assert PricingEngine.fair_price_range(1299, DamageTier.PROMINENTLY_VISIBLE) == (650, 844)

    def test_all_rules_info_or_warning(self, clean_input):
        """Test the three pricing rules and their severities."""
        output = _price(clean_input)

        assert [rule.severity.value for rule in output.rules] == ["info", "info", "warning"]
