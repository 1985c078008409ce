"""
Warranty evaluator - score coverage and list its gaps.
"""
import logging
from typing import Literal, Union

from ..models.enums import ModuleName, RiskLevel, WarrantyScore
from ..models.inputs import BuyerInput, WarrantyInfo
from ..models.results import FinancialAssessment, WarrantyEvaluation
from ..models.rules import ModuleOutput
from ..registry import (
    REPAIR_COST_MULTIPLIER,
    TYPICAL_REPAIR_COST,
    WARRANTY_ACCEPTABLE_MONTHS,
    WARRANTY_EXCELLENT_MONTHS,
    WARRANTY_LIMITED_MONTHS,
    WARRANTY_SCORE_ACCEPTABLE_V1,
    WARRANTY_SCORE_EXCELLENT_V1,
    WARRANTY_SCORE_LIMITED_V1,
    WARRANTY_SCORE_UNACCEPTABLE_V1,
    WARRANTY_WARNING_LIMITED_COVERAGE_V1,
    WARRANTY_WARNING_NO_LABOR_INCLUDED_V1,
    WARRANTY_WARNING_UNKNOWN_MFG_V1,
)
from .base import RuleModule


logger = logging.getLogger(__name__)

SCORE_RULES: dict[WarrantyScore, str] = {
    WarrantyScore.EXCELLENT: WARRANTY_SCORE_EXCELLENT_V1,
    WarrantyScore.ACCEPTABLE: WARRANTY_SCORE_ACCEPTABLE_V1,
    WarrantyScore.LIMITED: WARRANTY_SCORE_LIMITED_V1,
    WarrantyScore.UNACCEPTABLE: WARRANTY_SCORE_UNACCEPTABLE_V1,
}

RISK_LEVELS: dict[WarrantyScore, RiskLevel] = {
    WarrantyScore.EXCELLENT: RiskLevel.LOW,
    WarrantyScore.ACCEPTABLE: RiskLevel.LOW,
    WarrantyScore.LIMITED: RiskLevel.MEDIUM,
    WarrantyScore.UNACCEPTABLE: RiskLevel.HIGH,
}


class WarrantyEvaluator(RuleModule):
    """Depends on the pricing engine's savings figure."""

    NAME = ModuleName.WARRANTY_EVALUATOR

    def evaluate(
        self,
        buyer_input: BuyerInput,
        financial: FinancialAssessment,
    ) -> ModuleOutput[WarrantyEvaluation]:
        warranty = buyer_input.warranty
        savings = financial.savings_vs_new

        score = self.calculate_score(
            warranty.manufacturer_covered,
            warranty.retailer_warranty_months,
            warranty.labor_included,
        )

        rules = [
            self._rule(
                SCORE_RULES[score],
                passed=True,
                message=f'Warranty rated as "{score.value}"',
                inputs_used=[
                    "warranty.manufacturerCovered",
                    "warranty.retailerWarrantyMonths",
                    "warranty.laborIncluded",
                ],
                outputs_affected=["warrantyEvaluation.score"],
            )
        ]

        # Short coverage is tolerable only if the savings cover a few repair visits
        if warranty.retailer_warranty_months < WARRANTY_ACCEPTABLE_MONTHS and not warranty.labor_included:
            savings_justify_risk = savings >= TYPICAL_REPAIR_COST * REPAIR_COST_MULTIPLIER
            rules.append(
                self._rule(
                    WARRANTY_WARNING_LIMITED_COVERAGE_V1,
                    passed=savings_justify_risk,
                    message=(
                        f"Limited warranty, but savings (${savings:,.0f}) justify the risk"
                        if savings_justify_risk
                        else "Limited warranty may not justify savings if repairs needed"
                    ),
                    inputs_used=[
                        "warranty.retailerWarrantyMonths",
                        "warranty.laborIncluded",
                        "financial.savingsVsNew",
                    ],
                    outputs_affected=["warrantyEvaluation.riskLevel"],
                )
            )

        if not warranty.labor_included and warranty.retailer_warranty_months > 0:
            rules.append(
                self._rule(
                    WARRANTY_WARNING_NO_LABOR_INCLUDED_V1,
                    passed=False,
                    message="Warranty does not include labor — repair visits will cost extra",
                    inputs_used=["warranty.laborIncluded"],
                    outputs_affected=["warrantyEvaluation.coverageGaps"],
                )
            )

        if warranty.manufacturer_covered == "unknown":
            rules.append(
                self._rule(
                    WARRANTY_WARNING_UNKNOWN_MFG_V1,
                    passed=False,
                    message="Manufacturer warranty status unknown — verify before purchase",
                    inputs_used=["warranty.manufacturerCovered"],
                    outputs_affected=["warrantyEvaluation.coverageGaps"],
                )
            )

        logger.debug(f"Warranty scored {score.value}")

        return ModuleOutput(
            result=WarrantyEvaluation(
                score=score,
                coverage_gaps=self.coverage_gaps(warranty),
                risk_level=RISK_LEVELS[score],
            ),
            rules=rules,
        )

    @staticmethod
    def calculate_score(
        manufacturer_covered: Union[bool, Literal["unknown"]],
        retailer_months: int,
        labor_included: bool,
    ) -> WarrantyScore:
        """Ordered decision table; the first matching row wins."""
        manufacturer = manufacturer_covered is True
        if manufacturer and retailer_months >= WARRANTY_EXCELLENT_MONTHS and labor_included:
            return WarrantyScore.EXCELLENT
        if manufacturer or (retailer_months >= WARRANTY_ACCEPTABLE_MONTHS and labor_included):
            return WarrantyScore.ACCEPTABLE
        if retailer_months >= WARRANTY_LIMITED_MONTHS:
            return WarrantyScore.LIMITED
        return WarrantyScore.UNACCEPTABLE

    @staticmethod
    def coverage_gaps(warranty: WarrantyInfo) -> list[str]:
        gaps = []

        if warranty.manufacturer_covered == "unknown":
            gaps.append("Manufacturer warranty status unknown")
        elif warranty.manufacturer_covered is False:
            gaps.append("No manufacturer warranty coverage")

        months = warranty.retailer_warranty_months
        if months == 0:
            gaps.append("No retailer warranty")
        elif months < WARRANTY_ACCEPTABLE_MONTHS:
            gaps.append(f"Short retailer warranty ({months} months)")

        if not warranty.labor_included:
            gaps.append("Labor costs not covered")
        if not warranty.parts_included:
            gaps.append("Parts not covered")

        return gaps
