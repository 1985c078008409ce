"""
Verdict compiler - aggregate every rule emitted so far into one recommendation.

Only failed blockers and failed warnings count toward the decision. Risk
tolerance moves the SKIP threshold and nothing else.
"""
import logging

from ..models.enums import Confidence, ModuleName, Recommendation, RiskTolerance
from ..models.inputs import BuyerContext
from ..models.results import Verdict
from ..models.rules import ModuleOutput, RuleResult, is_blocker, is_warning
from ..registry import (
    RISK_TOLERANCE_SKIP_THRESHOLDS,
    THRESHOLDS,
    VERDICT_DECIDE_CAUTION_V1,
    VERDICT_DECIDE_PROCEED_V1,
    VERDICT_DECIDE_SKIP_V1,
    VERDICT_DECIDE_WALK_AWAY_V1,
    VERDICT_RISK_TOLERANCE_ADJUSTMENT_V1,
    VERDICT_THRESHOLD_BLOCKER_COUNT_V1,
    VERDICT_THRESHOLD_WARNING_CAUTION_V1,
    VERDICT_THRESHOLD_WARNING_SKIP_V1,
)
from .base import RuleModule


logger = logging.getLogger(__name__)

DECISION_RULES: dict[Recommendation, str] = {
    Recommendation.WALK_AWAY: VERDICT_DECIDE_WALK_AWAY_V1,
    Recommendation.SKIP: VERDICT_DECIDE_SKIP_V1,
    Recommendation.PROCEED_WITH_CAUTION: VERDICT_DECIDE_CAUTION_V1,
    Recommendation.PROCEED: VERDICT_DECIDE_PROCEED_V1,
}


def adjusted_thresholds(risk_tolerance: RiskTolerance) -> dict[str, int]:
    """Registry thresholds with the SKIP threshold looked up for the tolerance."""
    thresholds = dict(THRESHOLDS)
    thresholds[VERDICT_THRESHOLD_WARNING_SKIP_V1] = RISK_TOLERANCE_SKIP_THRESHOLDS[risk_tolerance]
    return thresholds


class VerdictCompiler(RuleModule):
    """Runs last and reads the full accumulated rule list."""

    NAME = ModuleName.VERDICT_COMPILER

    def evaluate(self, all_rules: list[RuleResult], buyer: BuyerContext) -> ModuleOutput[Verdict]:
        blockers = [rule for rule in all_rules if is_blocker(rule)]
        warnings = [rule for rule in all_rules if is_warning(rule)]

        thresholds = adjusted_thresholds(buyer.risk_tolerance)
        blocker_threshold = thresholds[VERDICT_THRESHOLD_BLOCKER_COUNT_V1]
        skip_threshold = thresholds[VERDICT_THRESHOLD_WARNING_SKIP_V1]
        caution_threshold = thresholds[VERDICT_THRESHOLD_WARNING_CAUTION_V1]

        rules = []

        if buyer.risk_tolerance != RiskTolerance.MODERATE:
            base_skip = THRESHOLDS[VERDICT_THRESHOLD_WARNING_SKIP_V1]
            rules.append(
                self._rule(
                    VERDICT_RISK_TOLERANCE_ADJUSTMENT_V1,
                    passed=True,
                    message=(
                        f'Risk tolerance "{buyer.risk_tolerance.value}" adjusted skip threshold: '
                        f"{base_skip} → {skip_threshold}"
                    ),
                    inputs_used=["buyer.riskTolerance"],
                    outputs_affected=["verdict.recommendation"],
                )
            )

        for rule_id, label, found in (
            (VERDICT_THRESHOLD_BLOCKER_COUNT_V1, "Blocker threshold", len(blockers)),
            (VERDICT_THRESHOLD_WARNING_SKIP_V1, "Warning skip threshold", len(warnings)),
            (VERDICT_THRESHOLD_WARNING_CAUTION_V1, "Warning caution threshold", len(warnings)),
        ):
            rules.append(
                self._rule(
                    rule_id,
                    passed=True,
                    message=f"{label}: {thresholds[rule_id]} (found: {found})",
                    inputs_used=["buyer.riskTolerance"],
                    outputs_affected=[],
                )
            )

        if len(blockers) >= blocker_threshold:
            recommendation = Recommendation.WALK_AWAY
            decision_message = f"{len(blockers)} blocker(s) found — recommending WALK_AWAY"
        elif len(warnings) >= skip_threshold:
            recommendation = Recommendation.SKIP
            decision_message = (
                f"{len(warnings)} warnings (threshold: {skip_threshold}) — recommending SKIP"
            )
        elif len(warnings) >= caution_threshold:
            recommendation = Recommendation.PROCEED_WITH_CAUTION
            decision_message = f"{len(warnings)} warning(s) found — recommending PROCEED_WITH_CAUTION"
        else:
            recommendation = Recommendation.PROCEED
            decision_message = "All checks passed — recommending PROCEED"

        rules.append(
            self._rule(
                DECISION_RULES[recommendation],
                passed=True,
                message=decision_message,
                inputs_used=[rule.rule_id for rule in blockers + warnings],
                outputs_affected=["verdict.recommendation", "verdict.confidence", "verdict.summary"],
            )
        )

        logger.debug(
            f"Verdict {recommendation.value}: {len(blockers)} blocker(s), "
            f"{len(warnings)} warning(s), skip threshold {skip_threshold}"
        )

        return ModuleOutput(
            result=Verdict(
                recommendation=recommendation,
                confidence=self.confidence(recommendation, len(warnings)),
                summary=self.summary(recommendation, blockers, warnings),
            ),
            rules=rules,
        )

    @staticmethod
    def confidence(recommendation: Recommendation, warning_count: int) -> Confidence:
        if recommendation in (Recommendation.WALK_AWAY, Recommendation.PROCEED):
            return Confidence.HIGH
        # SKIP and PROCEED_WITH_CAUTION
        if warning_count == 1:
            return Confidence.MEDIUM
        return Confidence.LOW

    @staticmethod
    def summary(
        recommendation: Recommendation,
        blockers: list[RuleResult],
        warnings: list[RuleResult],
    ) -> str:
        if recommendation == Recommendation.WALK_AWAY:
            if len(blockers) == 1:
                return f"Cannot proceed: {blockers[0].message}"
            return f"Cannot proceed: {len(blockers)} safety issues identified"
        if recommendation == Recommendation.SKIP:
            return f"Too many concerns: {len(warnings)} issues identified"
        if recommendation == Recommendation.PROCEED_WITH_CAUTION:
            return "Caution advised: " + "; ".join(warning.message for warning in warnings)
        return "All checks passed — this appears to be a good deal"
