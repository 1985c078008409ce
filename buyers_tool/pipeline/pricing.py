"""
Pricing engine - discount, rating and fair price range for the damage tier.
"""
import logging

from ..models.enums import DamageTier, DiscountRating, ModuleName
from ..models.inputs import BuyerInput
from ..models.results import DamageAssessment, FinancialAssessment
from ..models.rules import ModuleOutput
from ..registry import (
    DISCOUNT_RATING_CUTOFFS,
    EXPECTED_DISCOUNT_BY_TIER,
    PRICING_DISCOUNT_CALCULATE_V1,
    PRICING_DISCOUNT_EXPECTED_RANGE_V1,
    PRICING_DISCOUNT_RATING_V1,
)
from .base import RuleModule


logger = logging.getLogger(__name__)


class PricingEngine(RuleModule):
    """Deterministic price analysis against the expected range for a tier."""

    NAME = ModuleName.PRICING_ENGINE

    def evaluate(
        self,
        buyer_input: BuyerInput,
        damage: DamageAssessment,
    ) -> ModuleOutput[FinancialAssessment]:
        appliance = buyer_input.appliance
        tier = damage.tier

        discount_percent = self.calculate_discount_percent(appliance.retail_price, appliance.asking_price)
        savings_vs_new = appliance.retail_price - appliance.asking_price

        rules = [
            self._rule(
                PRICING_DISCOUNT_CALCULATE_V1,
                passed=True,
                message=f"Discount is {discount_percent:.1f}% (${savings_vs_new:,.0f} savings)",
                inputs_used=["appliance.retailPrice", "appliance.askingPrice"],
                outputs_affected=["financial.discountPercent", "financial.savingsVsNew"],
            )
        ]

        rating = self.rate_discount(discount_percent)
        rules.append(
            self._rule(
                PRICING_DISCOUNT_RATING_V1,
                passed=True,
                message=f'Discount rated as "{rating.value}"',
                inputs_used=["financial.discountPercent"],
                outputs_affected=["financial.discountRating"],
            )
        )

        expected_min, expected_max = EXPECTED_DISCOUNT_BY_TIER[tier]
        below_expected = discount_percent < expected_min
        if below_expected:
            range_message = (
                f"Discount ({discount_percent:.1f}%) is below typical range "
                f"({expected_min}-{expected_max}%) for Tier {tier.value} damage"
            )
        else:
            range_message = (
                f"Discount ({discount_percent:.1f}%) is within expected range "
                f"({expected_min}-{expected_max}%) for Tier {tier.value} damage"
            )
        rules.append(
            self._rule(
                PRICING_DISCOUNT_EXPECTED_RANGE_V1,
                passed=not below_expected,
                message=range_message,
                inputs_used=["financial.discountPercent", "damageAssessment.tier"],
                outputs_affected=["financial.expectedDiscountRange"],
            )
        )

        logger.debug(f"Discount {discount_percent:.1f}% rated {rating.value}")

        return ModuleOutput(
            result=FinancialAssessment(
                discount_percent=round(discount_percent, 1),
                discount_rating=rating,
                expected_discount_range=(expected_min, expected_max),
                savings_vs_new=savings_vs_new,
                fair_price_estimate=self.fair_price_range(appliance.retail_price, tier),
            ),
            rules=rules,
        )

    @staticmethod
    def calculate_discount_percent(retail_price: float, asking_price: float) -> float:
        if retail_price <= 0:
            return 0.0
        return (retail_price - asking_price) / retail_price * 100

    @staticmethod
    def rate_discount(discount_percent: float) -> DiscountRating:
        for cutoff, rating in DISCOUNT_RATING_CUTOFFS:
            if discount_percent >= cutoff:
                return rating
        return DiscountRating.POOR

    @staticmethod
    def fair_price_range(retail_price: float, tier: DamageTier) -> tuple[int, int]:
        """[low, high] fair asking price in whole dollars for the tier."""
        min_discount, max_discount = EXPECTED_DISCOUNT_BY_TIER[tier]
        low = retail_price * (1 - max_discount / 100)
        high = retail_price * (1 - min_discount / 100)
        return (int(round(low)), int(round(high)))
