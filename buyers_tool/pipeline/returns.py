"""
Return policy filter - rate the return terms and list concerns.

A final sale with no warranty of any kind is a blocker and halts the
pipeline (checked only when the safety gate did not already halt it).
"""
import logging

from ..models.enums import ModuleName, ReturnPolicyRating
from ..models.inputs import BuyerInput, ReturnPolicyInfo, WarrantyInfo
from ..models.results import ReturnPolicyAssessment
from ..models.rules import ModuleOutput
from ..registry import (
    RESTOCKING_FEE_ACCEPTABLE_PERCENT,
    RETURN_BLOCKER_FINAL_SALE_NO_WARRANTY_V1,
    RETURN_INFO_RESTOCKING_FEE_V1,
    RETURN_RATING_ASSESSMENT_V1,
    RETURN_WARNING_FINAL_SALE_V1,
    RETURN_WARNING_SHORT_WINDOW_V1,
    RETURN_WINDOW_EXCELLENT_DAYS,
    RETURN_WINDOW_LIMITED_DAYS,
    RETURN_WINDOW_SHORT_DAYS,
)
from .base import RuleModule


logger = logging.getLogger(__name__)


def has_any_warranty(warranty: WarrantyInfo) -> bool:
    return warranty.retailer_warranty_months > 0 or warranty.manufacturer_covered is True


class ReturnPolicyFilter(RuleModule):
    NAME = ModuleName.RETURN_POLICY_FILTER

    def evaluate(self, buyer_input: BuyerInput) -> ModuleOutput[ReturnPolicyAssessment]:
        policy = buyer_input.return_policy
        has_warranty = has_any_warranty(buyer_input.warranty)
        rules = []

        if policy.final_sale and not has_warranty:
            rules.append(
                self._rule(
                    RETURN_BLOCKER_FINAL_SALE_NO_WARRANTY_V1,
                    passed=False,
                    message="Final sale with no warranty — no recourse if unit fails",
                    inputs_used=[
                        "returnPolicy.finalSale",
                        "warranty.retailerWarrantyMonths",
                        "warranty.manufacturerCovered",
                    ],
                    outputs_affected=["returnPolicyAssessment.rating"],
                )
            )

        if policy.final_sale and has_warranty:
            rules.append(
                self._rule(
                    RETURN_WARNING_FINAL_SALE_V1,
                    passed=False,
                    message="Final sale — warranty provides some protection, but no returns for cosmetic issues",
                    inputs_used=["returnPolicy.finalSale"],
                    outputs_affected=["returnPolicyAssessment.concerns"],
                )
            )

        if not policy.final_sale and policy.window_days < RETURN_WINDOW_SHORT_DAYS:
            rules.append(
                self._rule(
                    RETURN_WARNING_SHORT_WINDOW_V1,
                    passed=False,
                    message=(
                        f"Very short return window ({policy.window_days} days) — "
                        "limited time to identify issues"
                    ),
                    inputs_used=["returnPolicy.windowDays"],
                    outputs_affected=["returnPolicyAssessment.concerns"],
                )
            )

        if policy.restocking_fee_percent > 0:
            rules.append(
                self._rule(
                    RETURN_INFO_RESTOCKING_FEE_V1,
                    passed=True,
                    message=f"{_percent(policy.restocking_fee_percent)}% restocking fee applies to returns",
                    inputs_used=["returnPolicy.restockingFeePercent"],
                    outputs_affected=["returnPolicyAssessment.concerns"],
                )
            )

        rating = self.calculate_rating(policy, has_warranty)
        rules.append(
            self._rule(
                RETURN_RATING_ASSESSMENT_V1,
                passed=True,
                message=f'Return policy rated as "{rating.value}"',
                inputs_used=[
                    "returnPolicy.windowDays",
                    "returnPolicy.restockingFeePercent",
                    "returnPolicy.finalSale",
                ],
                outputs_affected=["returnPolicyAssessment.rating"],
            )
        )

        logger.debug(f"Return policy rated {rating.value}")

        return ModuleOutput(
            result=ReturnPolicyAssessment(rating=rating, concerns=self.concerns(policy)),
            rules=rules,
        )

    @staticmethod
    def calculate_rating(policy: ReturnPolicyInfo, has_warranty: bool) -> ReturnPolicyRating:
        """Ordered decision table; the first matching row wins."""
        window = policy.window_days
        fee = policy.restocking_fee_percent

        if policy.final_sale and not has_warranty:
            return ReturnPolicyRating.RED_FLAG
        if policy.final_sale or window < RETURN_WINDOW_SHORT_DAYS:
            return ReturnPolicyRating.RISKY
        if window >= RETURN_WINDOW_EXCELLENT_DAYS and fee == 0:
            return ReturnPolicyRating.EXCELLENT
        if window >= RETURN_WINDOW_LIMITED_DAYS or fee <= RESTOCKING_FEE_ACCEPTABLE_PERCENT:
            # window is already >= RETURN_WINDOW_SHORT_DAYS here
            return ReturnPolicyRating.ACCEPTABLE
        return ReturnPolicyRating.RISKY

    @staticmethod
    def concerns(policy: ReturnPolicyInfo) -> list[str]:
        """Listed independently of the rating."""
        concerns = []

        if policy.final_sale:
            concerns.append("Final sale — no returns accepted")
        elif policy.window_days < RETURN_WINDOW_SHORT_DAYS:
            concerns.append(f"Very short return window ({policy.window_days} days)")
        elif policy.window_days < RETURN_WINDOW_LIMITED_DAYS:
            concerns.append(f"Limited return window ({policy.window_days} days)")

        if policy.restocking_fee_percent > 0:
            concerns.append(f"{_percent(policy.restocking_fee_percent)}% restocking fee applies")

        return concerns


def _percent(value: float) -> str:
    """15.0 -> '15', 12.5 -> '12.5'."""
    return f"{value:g}"
