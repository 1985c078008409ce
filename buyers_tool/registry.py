"""
Rule registry: stable rule IDs, per-rule metadata, thresholds and the
canonical module execution order.

Every rule has an addressable ID of the form ``{MODULE}.{CATEGORY}.{NAME}_V{n}``.
IDs are never reused. A rule is retired by registering a new ``_V{n+1}`` ID
and setting ``deprecated_by`` on the old entry, which stays in the catalog.

Any change to a value in this module is a ruleset change: bump
``RULESET_VERSION``, not ``COMPILER_VERSION``.
"""
from typing import Optional

from .models.base import CompilerModel
from .models.enums import (
    DamageLocation,
    DamageTier,
    DiscountRating,
    ModuleName,
    NegotiationProbability,
    RiskTolerance,
    RuleSeverity,
    VisibleSide,
)


# =============================================================================
# RULE IDS
# =============================================================================

# Damage Classifier
DAMAGE_TIER_ASSIGNMENT_V1 = "DAMAGE.TIER.ASSIGNMENT_V1"
DAMAGE_VISIBILITY_INSTALLATION_CHECK_V1 = "DAMAGE.VISIBILITY.INSTALLATION_CHECK_V1"

# Pricing Engine
PRICING_DISCOUNT_CALCULATE_V1 = "PRICING.DISCOUNT.CALCULATE_V1"
PRICING_DISCOUNT_RATING_V1 = "PRICING.DISCOUNT.RATING_V1"
PRICING_DISCOUNT_EXPECTED_RANGE_V1 = "PRICING.DISCOUNT.EXPECTED_RANGE_V1"

# Safety Gate
SAFETY_BLOCKER_RUST_DETECTED_V1 = "SAFETY.BLOCKER.RUST_DETECTED_V1"
SAFETY_BLOCKER_WATER_DAMAGE_V1 = "SAFETY.BLOCKER.WATER_DAMAGE_V1"
SAFETY_BLOCKER_CORD_DAMAGED_V1 = "SAFETY.BLOCKER.CORD_DAMAGED_V1"
SAFETY_BLOCKER_ODOR_DETECTED_V1 = "SAFETY.BLOCKER.ODOR_DETECTED_V1"
SAFETY_BLOCKER_MISSING_PARTS_V1 = "SAFETY.BLOCKER.MISSING_PARTS_V1"
SAFETY_WARNING_PRIOR_REPAIRS_V1 = "SAFETY.WARNING.PRIOR_REPAIRS_V1"
SAFETY_WARNING_UNUSUAL_SOUNDS_V1 = "SAFETY.WARNING.UNUSUAL_SOUNDS_V1"
SAFETY_INFO_POWER_ON_WORKS_V1 = "SAFETY.INFO.POWER_ON_WORKS_V1"

# Warranty Evaluator
WARRANTY_SCORE_EXCELLENT_V1 = "WARRANTY.SCORE.EXCELLENT_V1"
WARRANTY_SCORE_ACCEPTABLE_V1 = "WARRANTY.SCORE.ACCEPTABLE_V1"
WARRANTY_SCORE_LIMITED_V1 = "WARRANTY.SCORE.LIMITED_V1"
WARRANTY_SCORE_UNACCEPTABLE_V1 = "WARRANTY.SCORE.UNACCEPTABLE_V1"
WARRANTY_WARNING_LIMITED_COVERAGE_V1 = "WARRANTY.WARNING.LIMITED_COVERAGE_V1"
WARRANTY_WARNING_NO_LABOR_INCLUDED_V1 = "WARRANTY.WARNING.NO_LABOR_INCLUDED_V1"
WARRANTY_WARNING_UNKNOWN_MFG_V1 = "WARRANTY.WARNING.UNKNOWN_MFG_V1"

# Return Policy Filter
RETURN_BLOCKER_FINAL_SALE_NO_WARRANTY_V1 = "RETURN.BLOCKER.FINAL_SALE_NO_WARRANTY_V1"
RETURN_WARNING_FINAL_SALE_V1 = "RETURN.WARNING.FINAL_SALE_V1"
RETURN_WARNING_SHORT_WINDOW_V1 = "RETURN.WARNING.SHORT_WINDOW_V1"
RETURN_INFO_RESTOCKING_FEE_V1 = "RETURN.INFO.RESTOCKING_FEE_V1"
RETURN_RATING_ASSESSMENT_V1 = "RETURN.RATING.ASSESSMENT_V1"

# Negotiation Engine
NEGOTIATION_POSSIBLE_RETAILER_TYPE_V1 = "NEGOTIATION.POSSIBLE.RETAILER_TYPE_V1"
NEGOTIATION_LEVERAGE_INVENTORY_AGE_V1 = "NEGOTIATION.LEVERAGE.INVENTORY_AGE_V1"
NEGOTIATION_LEVERAGE_VISIBLE_DAMAGE_V1 = "NEGOTIATION.LEVERAGE.VISIBLE_DAMAGE_V1"
NEGOTIATION_TARGET_CALCULATE_V1 = "NEGOTIATION.TARGET.CALCULATE_V1"
NEGOTIATION_ALTERNATIVES_CALCULATE_V1 = "NEGOTIATION.ALTERNATIVES.CALCULATE_V1"

# Logistics Solver
LOGISTICS_DELIVERY_REFRIGERATOR_V1 = "LOGISTICS.DELIVERY.REFRIGERATOR_V1"
LOGISTICS_DELIVERY_STACKED_V1 = "LOGISTICS.DELIVERY.STACKED_V1"
LOGISTICS_DELIVERY_GAS_V1 = "LOGISTICS.DELIVERY.GAS_V1"
LOGISTICS_DELIVERY_DEFAULT_V1 = "LOGISTICS.DELIVERY.DEFAULT_V1"
LOGISTICS_TRANSPORT_REFRIGERATOR_V1 = "LOGISTICS.TRANSPORT.REFRIGERATOR_V1"
LOGISTICS_TRANSPORT_WASHER_V1 = "LOGISTICS.TRANSPORT.WASHER_V1"
LOGISTICS_TRANSPORT_RANGE_V1 = "LOGISTICS.TRANSPORT.RANGE_V1"
LOGISTICS_INSTALLATION_NOTES_V1 = "LOGISTICS.INSTALLATION.NOTES_V1"

# Verdict Compiler
VERDICT_THRESHOLD_BLOCKER_COUNT_V1 = "VERDICT.THRESHOLD.BLOCKER_COUNT_V1"
VERDICT_THRESHOLD_WARNING_SKIP_V1 = "VERDICT.THRESHOLD.WARNING_SKIP_V1"
VERDICT_THRESHOLD_WARNING_CAUTION_V1 = "VERDICT.THRESHOLD.WARNING_CAUTION_V1"
VERDICT_RISK_TOLERANCE_ADJUSTMENT_V1 = "VERDICT.RISK_TOLERANCE.ADJUSTMENT_V1"
VERDICT_DECIDE_WALK_AWAY_V1 = "VERDICT.DECIDE.WALK_AWAY_V1"
VERDICT_DECIDE_SKIP_V1 = "VERDICT.DECIDE.SKIP_V1"
VERDICT_DECIDE_CAUTION_V1 = "VERDICT.DECIDE.CAUTION_V1"
VERDICT_DECIDE_PROCEED_V1 = "VERDICT.DECIDE.PROCEED_V1"


# =============================================================================
# METADATA
# =============================================================================

class RuleMetadata(CompilerModel):
    """Catalog entry for one rule ID."""
    id: str
    severity: RuleSeverity
    module: ModuleName
    description: str
    deprecated_by: Optional[str] = None


def _entry(rule_id: str, severity: RuleSeverity, module: ModuleName, description: str) -> RuleMetadata:
    return RuleMetadata(id=rule_id, severity=severity, module=module, description=description)


_BLOCKER = RuleSeverity.BLOCKER
_WARNING = RuleSeverity.WARNING
_INFO = RuleSeverity.INFO

# Every rule ever published, in registration order. Append only.
_CATALOG: list[RuleMetadata] = [
    # Damage Classifier
    _entry(DAMAGE_TIER_ASSIGNMENT_V1, _INFO, ModuleName.DAMAGE_CLASSIFIER,
           "Classifies damage into Tier 1/2/3 based on location"),
    _entry(DAMAGE_VISIBILITY_INSTALLATION_CHECK_V1, _WARNING, ModuleName.DAMAGE_CLASSIFIER,
           "Checks if damage will be visible in buyer installation context"),
    # Pricing Engine
    _entry(PRICING_DISCOUNT_CALCULATE_V1, _INFO, ModuleName.PRICING_ENGINE,
           "Calculates discount percentage"),
    _entry(PRICING_DISCOUNT_RATING_V1, _INFO, ModuleName.PRICING_ENGINE,
           "Rates discount as excellent/good/fair/poor"),
    _entry(PRICING_DISCOUNT_EXPECTED_RANGE_V1, _WARNING, ModuleName.PRICING_ENGINE,
           "Warns if discount below expected for damage tier"),
    # Safety Gate
    _entry(SAFETY_BLOCKER_RUST_DETECTED_V1, _BLOCKER, ModuleName.SAFETY_GATE,
           "Rust detected on unit"),
    _entry(SAFETY_BLOCKER_WATER_DAMAGE_V1, _BLOCKER, ModuleName.SAFETY_GATE,
           "Water damage signs present"),
    _entry(SAFETY_BLOCKER_CORD_DAMAGED_V1, _BLOCKER, ModuleName.SAFETY_GATE,
           "Electrical cord is damaged"),
    _entry(SAFETY_BLOCKER_ODOR_DETECTED_V1, _BLOCKER, ModuleName.SAFETY_GATE,
           "Unusual odors detected (burning/mold)"),
    _entry(SAFETY_BLOCKER_MISSING_PARTS_V1, _BLOCKER, ModuleName.SAFETY_GATE,
           "Parts or components missing"),
    _entry(SAFETY_WARNING_PRIOR_REPAIRS_V1, _WARNING, ModuleName.SAFETY_GATE,
           "Prior repairs evident on unit"),
    _entry(SAFETY_WARNING_UNUSUAL_SOUNDS_V1, _WARNING, ModuleName.SAFETY_GATE,
           "Unusual sounds during operation"),
    _entry(SAFETY_INFO_POWER_ON_WORKS_V1, _INFO, ModuleName.SAFETY_GATE,
           "Power-on test result"),
    # Warranty Evaluator
    _entry(WARRANTY_SCORE_EXCELLENT_V1, _INFO, ModuleName.WARRANTY_EVALUATOR,
           "Warranty rated as excellent"),
    _entry(WARRANTY_SCORE_ACCEPTABLE_V1, _INFO, ModuleName.WARRANTY_EVALUATOR,
           "Warranty rated as acceptable"),
    _entry(WARRANTY_SCORE_LIMITED_V1, _INFO, ModuleName.WARRANTY_EVALUATOR,
           "Warranty rated as limited"),
    _entry(WARRANTY_SCORE_UNACCEPTABLE_V1, _INFO, ModuleName.WARRANTY_EVALUATOR,
           "Warranty rated as unacceptable"),
    _entry(WARRANTY_WARNING_LIMITED_COVERAGE_V1, _WARNING, ModuleName.WARRANTY_EVALUATOR,
           "Limited warranty coverage may not justify savings"),
    _entry(WARRANTY_WARNING_NO_LABOR_INCLUDED_V1, _WARNING, ModuleName.WARRANTY_EVALUATOR,
           "Warranty does not include labor costs"),
    _entry(WARRANTY_WARNING_UNKNOWN_MFG_V1, _WARNING, ModuleName.WARRANTY_EVALUATOR,
           "Manufacturer warranty status unknown"),
    # Return Policy Filter
    _entry(RETURN_BLOCKER_FINAL_SALE_NO_WARRANTY_V1, _BLOCKER, ModuleName.RETURN_POLICY_FILTER,
           "Final sale with no warranty, no recourse if unit fails"),
    _entry(RETURN_WARNING_FINAL_SALE_V1, _WARNING, ModuleName.RETURN_POLICY_FILTER,
           "Final sale (but has warranty)"),
    _entry(RETURN_WARNING_SHORT_WINDOW_V1, _WARNING, ModuleName.RETURN_POLICY_FILTER,
           "Very short return window increases risk"),
    _entry(RETURN_INFO_RESTOCKING_FEE_V1, _INFO, ModuleName.RETURN_POLICY_FILTER,
           "Restocking fee applies to returns"),
    _entry(RETURN_RATING_ASSESSMENT_V1, _INFO, ModuleName.RETURN_POLICY_FILTER,
           "Overall return policy rating"),
    # Negotiation Engine
    _entry(NEGOTIATION_POSSIBLE_RETAILER_TYPE_V1, _INFO, ModuleName.NEGOTIATION_ENGINE,
           "Determines if negotiation is possible based on retailer type"),
    _entry(NEGOTIATION_LEVERAGE_INVENTORY_AGE_V1, _INFO, ModuleName.NEGOTIATION_ENGINE,
           "Inventory age increases negotiation leverage"),
    _entry(NEGOTIATION_LEVERAGE_VISIBLE_DAMAGE_V1, _INFO, ModuleName.NEGOTIATION_ENGINE,
           "Visible damage increases negotiation leverage"),
    _entry(NEGOTIATION_TARGET_CALCULATE_V1, _INFO, ModuleName.NEGOTIATION_ENGINE,
           "Calculates suggested target price"),
    _entry(NEGOTIATION_ALTERNATIVES_CALCULATE_V1, _INFO, ModuleName.NEGOTIATION_ENGINE,
           "Suggests alternative asks if price is firm"),
    # Logistics Solver
    _entry(LOGISTICS_DELIVERY_REFRIGERATOR_V1, _INFO, ModuleName.LOGISTICS_SOLVER,
           "Refrigerator delivery recommendation"),
    _entry(LOGISTICS_DELIVERY_STACKED_V1, _INFO, ModuleName.LOGISTICS_SOLVER,
           "Stacked unit delivery recommendation"),
    _entry(LOGISTICS_DELIVERY_GAS_V1, _INFO, ModuleName.LOGISTICS_SOLVER,
           "Gas appliance delivery recommendation"),
    _entry(LOGISTICS_DELIVERY_DEFAULT_V1, _INFO, ModuleName.LOGISTICS_SOLVER,
           "Default delivery recommendation"),
    _entry(LOGISTICS_TRANSPORT_REFRIGERATOR_V1, _INFO, ModuleName.LOGISTICS_SOLVER,
           "Refrigerator transport requirements"),
    _entry(LOGISTICS_TRANSPORT_WASHER_V1, _INFO, ModuleName.LOGISTICS_SOLVER,
           "Washer transport requirements"),
    _entry(LOGISTICS_TRANSPORT_RANGE_V1, _INFO, ModuleName.LOGISTICS_SOLVER,
           "Range transport requirements"),
    _entry(LOGISTICS_INSTALLATION_NOTES_V1, _INFO, ModuleName.LOGISTICS_SOLVER,
           "Installation notes for appliance type"),
    # Verdict Compiler
    _entry(VERDICT_THRESHOLD_BLOCKER_COUNT_V1, _INFO, ModuleName.VERDICT_COMPILER,
           "Blocker count threshold for WALK_AWAY"),
    _entry(VERDICT_THRESHOLD_WARNING_SKIP_V1, _INFO, ModuleName.VERDICT_COMPILER,
           "Warning count threshold for SKIP"),
    _entry(VERDICT_THRESHOLD_WARNING_CAUTION_V1, _INFO, ModuleName.VERDICT_COMPILER,
           "Warning count threshold for CAUTION"),
    _entry(VERDICT_RISK_TOLERANCE_ADJUSTMENT_V1, _INFO, ModuleName.VERDICT_COMPILER,
           "Threshold adjustment based on buyer risk tolerance"),
    _entry(VERDICT_DECIDE_WALK_AWAY_V1, _INFO, ModuleName.VERDICT_COMPILER,
           "Decision: WALK_AWAY"),
    _entry(VERDICT_DECIDE_SKIP_V1, _INFO, ModuleName.VERDICT_COMPILER,
           "Decision: SKIP"),
    _entry(VERDICT_DECIDE_CAUTION_V1, _INFO, ModuleName.VERDICT_COMPILER,
           "Decision: PROCEED_WITH_CAUTION"),
    _entry(VERDICT_DECIDE_PROCEED_V1, _INFO, ModuleName.VERDICT_COMPILER,
           "Decision: PROCEED"),
]

ALL_RULE_IDS: list[str] = [entry.id for entry in _CATALOG]
RULE_METADATA: dict[str, RuleMetadata] = {entry.id: entry for entry in _CATALOG}

ACTIVE_RULE_IDS: list[str] = [entry.id for entry in _CATALOG if entry.deprecated_by is None]
BLOCKER_RULES: list[str] = [entry.id for entry in _CATALOG if entry.severity == _BLOCKER]
WARNING_RULES: list[str] = [entry.id for entry in _CATALOG if entry.severity == _WARNING]

# Rule-ID prefix owned by each module
MODULE_RULE_PREFIX: dict[ModuleName, str] = {
    ModuleName.DAMAGE_CLASSIFIER: "DAMAGE",
    ModuleName.PRICING_ENGINE: "PRICING",
    ModuleName.SAFETY_GATE: "SAFETY",
    ModuleName.WARRANTY_EVALUATOR: "WARRANTY",
    ModuleName.RETURN_POLICY_FILTER: "RETURN",
    ModuleName.NEGOTIATION_ENGINE: "NEGOTIATION",
    ModuleName.LOGISTICS_SOLVER: "LOGISTICS",
    ModuleName.VERDICT_COMPILER: "VERDICT",
}


def get_rule(rule_id: str) -> RuleMetadata:
    """
    Look up catalog metadata for a rule ID.

    Raises:
        KeyError: If the ID was never registered
    """
    try:
        return RULE_METADATA[rule_id]
    except KeyError:
        raise KeyError(f"Unknown rule ID: {rule_id}") from None


def module_for_rule(rule_id: str) -> ModuleName:
    return get_rule(rule_id).module


def is_deprecated(rule_id: str) -> bool:
    return get_rule(rule_id).deprecated_by is not None


# =============================================================================
# THRESHOLDS
# =============================================================================

THRESHOLDS: dict[str, int] = {
    VERDICT_THRESHOLD_BLOCKER_COUNT_V1: 1,
    VERDICT_THRESHOLD_WARNING_SKIP_V1: 3,
    VERDICT_THRESHOLD_WARNING_CAUTION_V1: 1,
}

# Only the SKIP threshold moves with risk tolerance.
RISK_TOLERANCE_SKIP_THRESHOLDS: dict[RiskTolerance, int] = {
    RiskTolerance.LOW: 2,
    RiskTolerance.MODERATE: 3,
    RiskTolerance.HIGH: 4,
}

# Discount rating cutoffs, checked top-down; anything lower is POOR
DISCOUNT_RATING_CUTOFFS: list[tuple[float, DiscountRating]] = [
    (40, DiscountRating.EXCELLENT),
    (30, DiscountRating.GOOD),
    (20, DiscountRating.FAIR),
]

# Warranty
TYPICAL_REPAIR_COST = 300
REPAIR_COST_MULTIPLIER = 3
WARRANTY_EXCELLENT_MONTHS = 12
WARRANTY_ACCEPTABLE_MONTHS = 6
WARRANTY_LIMITED_MONTHS = 3

# Return policy
RETURN_WINDOW_SHORT_DAYS = 7
RETURN_WINDOW_LIMITED_DAYS = 14
RETURN_WINDOW_EXCELLENT_DAYS = 30
RESTOCKING_FEE_ACCEPTABLE_PERCENT = 15

# Negotiation
INVENTORY_AGE_STALE_DAYS = 60
INVENTORY_AGE_AGING_DAYS = 30
NEGOTIATION_PROBABILITY_CUTOFFS: list[tuple[int, NegotiationProbability]] = [
    (5, NegotiationProbability.HIGH),
    (3, NegotiationProbability.MEDIUM),
    (1, NegotiationProbability.LOW),
]


# =============================================================================
# DAMAGE TIERS
# =============================================================================

EXPECTED_DISCOUNT_BY_TIER: dict[DamageTier, tuple[int, int]] = {
    DamageTier.HIDDEN: (15, 25),
    DamageTier.PARTIALLY_VISIBLE: (25, 35),
    DamageTier.PROMINENTLY_VISIBLE: (35, 50),
}

TIER1_LOCATIONS = frozenset({DamageLocation.BACK, DamageLocation.BOTTOM, DamageLocation.TOP})
TIER3_LOCATIONS = frozenset({
    DamageLocation.FRONT_DOOR,
    DamageLocation.FRONT_PANEL,
    DamageLocation.CONTROL_PANEL,
    DamageLocation.HANDLE,
})

# Back and bottom are never visible once installed
LOCATION_TO_SIDE: dict[DamageLocation, Optional[VisibleSide]] = {
    DamageLocation.FRONT_DOOR: VisibleSide.FRONT,
    DamageLocation.FRONT_PANEL: VisibleSide.FRONT,
    DamageLocation.CONTROL_PANEL: VisibleSide.FRONT,
    DamageLocation.HANDLE: VisibleSide.FRONT,
    DamageLocation.LEFT_SIDE: VisibleSide.LEFT,
    DamageLocation.RIGHT_SIDE: VisibleSide.RIGHT,
    DamageLocation.BACK: None,
    DamageLocation.TOP: VisibleSide.TOP,
    DamageLocation.BOTTOM: None,
}


# =============================================================================
# EXECUTION ORDER
# =============================================================================

EXECUTION_ORDER: tuple[ModuleName, ...] = (
    ModuleName.DAMAGE_CLASSIFIER,
    ModuleName.PRICING_ENGINE,
    ModuleName.SAFETY_GATE,
    ModuleName.WARRANTY_EVALUATOR,
    ModuleName.RETURN_POLICY_FILTER,
    ModuleName.NEGOTIATION_ENGINE,
    ModuleName.LOGISTICS_SOLVER,
    ModuleName.VERDICT_COMPILER,
)
