"""
Safety gate: scan inspection facts for hazards.

Any failed blocker here halts the pipeline and forces WALK_AWAY.
"""
import logging
from typing import NamedTuple

from ..models.enums import ModuleName
from ..models.inputs import BuyerInput
from ..models.results import SafetyGateResult
from ..models.rules import ModuleOutput
from ..registry import (
    SAFETY_BLOCKER_CORD_DAMAGED_V1,
    SAFETY_BLOCKER_MISSING_PARTS_V1,
    SAFETY_BLOCKER_ODOR_DETECTED_V1,
    SAFETY_BLOCKER_RUST_DETECTED_V1,
    SAFETY_BLOCKER_WATER_DAMAGE_V1,
    SAFETY_INFO_POWER_ON_WORKS_V1,
    SAFETY_WARNING_PRIOR_REPAIRS_V1,
    SAFETY_WARNING_UNUSUAL_SOUNDS_V1,
)
from .base import RuleModule


logger = logging.getLogger(__name__)


class InspectionCondition(NamedTuple):
    rule_id: str
    flag: str  # InspectionResults attribute
    failure_message: str
    pass_message: str


# Evaluated in this order; any one forces WALK_AWAY
BLOCKER_CONDITIONS: list[InspectionCondition] = [
    InspectionCondition(
        SAFETY_BLOCKER_RUST_DETECTED_V1,
        "rust_present",
        "Rust detected on unit — indicates potential internal corrosion",
        "No rust detected",
    ),
    InspectionCondition(
        SAFETY_BLOCKER_WATER_DAMAGE_V1,
        "water_stains",
        "Water damage signs present — risk of electrical hazard",
        "No water damage detected",
    ),
    InspectionCondition(
        SAFETY_BLOCKER_CORD_DAMAGED_V1,
        "cord_damaged",
        "Electrical cord is damaged — fire and shock hazard",
        "No cord damage detected",
    ),
    InspectionCondition(
        SAFETY_BLOCKER_ODOR_DETECTED_V1,
        "odors_present",
        "Unusual odors detected — may indicate burning or mold",
        "No unusual odors detected",
    ),
    InspectionCondition(
        SAFETY_BLOCKER_MISSING_PARTS_V1,
        "missing_parts",
        "Parts or components missing — unit may not function properly",
        "No missing parts detected",
    ),
]

WARNING_CONDITIONS: list[InspectionCondition] = [
    InspectionCondition(
        SAFETY_WARNING_PRIOR_REPAIRS_V1,
        "prior_repairs_evident",
        "Prior repairs evident — unknown repair quality",
        "No prior repair issues",
    ),
    InspectionCondition(
        SAFETY_WARNING_UNUSUAL_SOUNDS_V1,
        "unusual_sounds",
        "Unusual sounds during operation — may indicate mechanical issues",
        "No unusual sound issues",
    ),
]

NO_INSPECTION_ADVISORY = "No inspection data provided — consider inspecting before purchase"
POWER_ON_FAILED_ADVISORY = "Unit failed power-on test — request demonstration before purchase"


class SafetyGate(RuleModule):
    """Reads the inspection block only."""

    NAME = ModuleName.SAFETY_GATE

    def evaluate(self, buyer_input: BuyerInput) -> ModuleOutput[SafetyGateResult]:
        inspection = buyer_input.inspection

        # Without inspection data there is nothing to gate on
        if inspection is None:
            logger.debug("No inspection data; safety gate passes with advisory")
            return ModuleOutput(
                result=SafetyGateResult(
                    passed=True,
                    inspected=False,
                    warnings=[NO_INSPECTION_ADVISORY],
                ),
                rules=[],
            )

        rules = []
        blockers: list[str] = []
        warnings: list[str] = []

        for condition in BLOCKER_CONDITIONS:
            triggered = getattr(inspection, condition.flag)
            if triggered:
                blockers.append(condition.failure_message)
            rules.append(
                self._rule(
                    condition.rule_id,
                    passed=not triggered,
                    message=condition.failure_message if triggered else condition.pass_message,
                    inputs_used=[f"inspection.{_camel(condition.flag)}"],
                    outputs_affected=["safetyGate.passed", "safetyGate.blockers"],
                )
            )

        for condition in WARNING_CONDITIONS:
            triggered = getattr(inspection, condition.flag)
            if triggered:
                warnings.append(condition.failure_message)
            rules.append(
                self._rule(
                    condition.rule_id,
                    passed=not triggered,
                    message=condition.failure_message if triggered else condition.pass_message,
                    inputs_used=[f"inspection.{_camel(condition.flag)}"],
                    outputs_affected=["safetyGate.warnings"],
                )
            )

        rules.append(
            self._rule(
                SAFETY_INFO_POWER_ON_WORKS_V1,
                passed=inspection.power_on_works,
                message=(
                    "Unit powers on and operates correctly"
                    if inspection.power_on_works
                    else "Unit failed power-on test"
                ),
                inputs_used=["inspection.powerOnWorks"],
                outputs_affected=["safetyGate.passed"],
            )
        )
        # Concerning but not a blocker
        if not inspection.power_on_works:
            warnings.append(POWER_ON_FAILED_ADVISORY)

        if blockers:
            logger.debug(f"Safety gate failed with {len(blockers)} blocker(s)")

        return ModuleOutput(
            result=SafetyGateResult(
                passed=not blockers,
                failures=list(blockers),
                blockers=blockers,
                warnings=warnings,
            ),
            rules=rules,
        )


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)
