"""
Negotiation engine - how much room there is to talk the price down.

Leverage points and alternative asks are advice only; every rule this
module emits is informational.
"""
import logging
from typing import Optional

from ..models.enums import DamageTier, ModuleName, NegotiationProbability, RetailerType
from ..models.inputs import BuyerInput
from ..models.results import DamageAssessment, FinancialAssessment, NegotiationAssessment
from ..models.rules import ModuleOutput
from ..registry import (
    EXPECTED_DISCOUNT_BY_TIER,
    INVENTORY_AGE_AGING_DAYS,
    INVENTORY_AGE_STALE_DAYS,
    NEGOTIATION_ALTERNATIVES_CALCULATE_V1,
    NEGOTIATION_LEVERAGE_INVENTORY_AGE_V1,
    NEGOTIATION_LEVERAGE_VISIBLE_DAMAGE_V1,
    NEGOTIATION_POSSIBLE_RETAILER_TYPE_V1,
    NEGOTIATION_PROBABILITY_CUTOFFS,
    NEGOTIATION_TARGET_CALCULATE_V1,
)
from .base import RuleModule


logger = logging.getLogger(__name__)

# Score weights
RETAILER_TYPE_POINTS: dict[RetailerType, int] = {
    RetailerType.INDEPENDENT: 2,
    RetailerType.LIQUIDATION: 2,
    RetailerType.OUTLET: 1,
}
TIER_POINTS: dict[DamageTier, int] = {
    DamageTier.PROMINENTLY_VISIBLE: 2,
    DamageTier.PARTIALLY_VISIBLE: 1,
}
BELOW_EXPECTED_POINTS = 2

ALTERNATIVE_ASKS = [
    "Free delivery/installation",
    "Extended warranty at no cost",
    "Waived restocking fee on return policy",
    "Free haul-away of old appliance",
    "Accessories included (ice maker kit, stacking kit, etc.)",
]

FALLBACK_LEVERAGE_POINT = "Be polite but firm — scratches and dents reduce resale value"


class NegotiationEngine(RuleModule):
    """
    Negotiation potential and strategy.

    Uses the damage tier from the classifier and the discount from the
    pricing engine.
    """

    NAME = ModuleName.NEGOTIATION_ENGINE

    def evaluate(
        self,
        buyer_input: BuyerInput,
        damage: DamageAssessment,
        financial: FinancialAssessment,
    ) -> ModuleOutput[NegotiationAssessment]:
        retailer = buyer_input.retailer
        tier = damage.tier
        discount_percent = financial.discount_percent
        expected_min = EXPECTED_DISCOUNT_BY_TIER[tier][0]

        possible = retailer.type != RetailerType.BIG_BOX
        rules = [
            self._rule(
                NEGOTIATION_POSSIBLE_RETAILER_TYPE_V1,
                passed=True,
                message=(
                    f"Negotiation likely possible at {retailer.type.value} retailer"
                    if possible
                    else f"Negotiation unlikely at {retailer.type.value} — prices typically fixed"
                ),
                inputs_used=["retailer.type"],
                outputs_affected=["negotiation.possible", "negotiation.probability"],
            )
        ]

        age = retailer.inventory_age_days
        if age is not None and age > INVENTORY_AGE_AGING_DAYS:
            rules.append(
                self._rule(
                    NEGOTIATION_LEVERAGE_INVENTORY_AGE_V1,
                    passed=True,
                    message=f"Item on floor for {age} days — increases negotiation leverage",
                    inputs_used=["retailer.inventoryAgeDays"],
                    outputs_affected=["negotiation.leveragePoints"],
                )
            )

        if tier >= DamageTier.PARTIALLY_VISIBLE:
            rules.append(
                self._rule(
                    NEGOTIATION_LEVERAGE_VISIBLE_DAMAGE_V1,
                    passed=True,
                    message=f"Tier {tier.value} damage provides negotiation leverage",
                    inputs_used=["damageAssessment.tier"],
                    outputs_affected=["negotiation.leveragePoints"],
                )
            )

        probability = self.calculate_probability(retailer.type, age, tier, discount_percent, expected_min)

        target_price = self.target_price(buyer_input.appliance.retail_price, tier)
        rules.append(
            self._rule(
                NEGOTIATION_TARGET_CALCULATE_V1,
                passed=True,
                message=f"Suggested target price: ${target_price}",
                inputs_used=["appliance.retailPrice", "damageAssessment.tier"],
                outputs_affected=["negotiation.suggestedTargetPrice"],
            )
        )

        rules.append(
            self._rule(
                NEGOTIATION_ALTERNATIVES_CALCULATE_V1,
                passed=True,
                message="Alternative asks generated for if price is firm",
                inputs_used=[],
                outputs_affected=["negotiation.alternativeAsks"],
            )
        )

        logger.debug(f"Negotiation probability {probability.value}, target ${target_price}")

        return ModuleOutput(
            result=NegotiationAssessment(
                possible=possible,
                probability=probability,
                suggested_target_price=target_price,
                leverage_points=self.leverage_points(age, tier, discount_percent, expected_min),
                alternative_asks=list(ALTERNATIVE_ASKS),
            ),
            rules=rules,
        )

    @staticmethod
    def calculate_probability(
        retailer_type: RetailerType,
        inventory_age_days: Optional[int],
        tier: DamageTier,
        discount_percent: float,
        expected_min: int,
    ) -> NegotiationProbability:
        """Additive score over retailer, floor time, damage and pricing."""
        if retailer_type == RetailerType.BIG_BOX:
            return NegotiationProbability.UNLIKELY

        score = RETAILER_TYPE_POINTS.get(retailer_type, 0)

        if inventory_age_days is not None:
            if inventory_age_days > INVENTORY_AGE_STALE_DAYS:
                score += 2
            elif inventory_age_days > INVENTORY_AGE_AGING_DAYS:
                score += 1

        score += TIER_POINTS.get(tier, 0)

        # Priced above the usual range for this damage, so there is room to move
        if discount_percent < expected_min:
            score += BELOW_EXPECTED_POINTS

        for cutoff, probability in NEGOTIATION_PROBABILITY_CUTOFFS:
            if score >= cutoff:
                return probability
        return NegotiationProbability.UNLIKELY

    @staticmethod
    def target_price(retail_price: float, tier: DamageTier) -> int:
        """Retail price at the midpoint of the tier's expected discount."""
        min_discount, max_discount = EXPECTED_DISCOUNT_BY_TIER[tier]
        target_discount = (min_discount + max_discount) / 2
        return int(round(retail_price * (1 - target_discount / 100)))

    @staticmethod
    def leverage_points(
        inventory_age_days: Optional[int],
        tier: DamageTier,
        discount_percent: float,
        expected_min: int,
    ) -> list[str]:
        points = []

        if inventory_age_days is not None and inventory_age_days > INVENTORY_AGE_AGING_DAYS:
            points.append(
                f"Item has been on floor for {inventory_age_days} days — retailer may want to move it"
            )

        if tier == DamageTier.PROMINENTLY_VISIBLE:
            points.append("Prominently visible damage reduces desirability for most buyers")
        elif tier == DamageTier.PARTIALLY_VISIBLE:
            points.append("Side damage may deter some buyers")

        if discount_percent < expected_min:
            points.append(
                f"Current discount ({discount_percent:.1f}%) is below typical range for this damage level"
            )

        return points or [FALLBACK_LEVERAGE_POINT]
