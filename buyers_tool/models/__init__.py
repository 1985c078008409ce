"""
Pydantic models for the Buyer's Tool.
All data contracts are defined here for strict validation.
"""

from .enums import (
    ApplianceType,
    BuyerPurpose,
    Confidence,
    DamageLocation,
    DamageSeverity,
    DamageTier,
    DamageType,
    DeliveryRecommendation,
    DiscountRating,
    InstallationType,
    ModuleName,
    NegotiationProbability,
    PriceFlexibility,
    Recommendation,
    RetailerType,
    ReturnPolicyRating,
    RiskLevel,
    RiskTolerance,
    RuleSeverity,
    TierLabel,
    VisibilityImpact,
    VisibleSide,
    WarrantyScore,
)
from .inputs import (
    ApplianceInfo,
    BuyerContext,
    BuyerInput,
    DamageInfo,
    InspectionResults,
    InstallationInfo,
    RetailerInfo,
    ReturnPolicyInfo,
    WarrantyInfo,
    load_buyer_input,
)
from .rules import ModuleOutput, RuleResult, is_blocker, is_info, is_warning
from .results import (
    DamageAssessment,
    FinancialAssessment,
    LogisticsPlan,
    NegotiationAssessment,
    ReturnPolicyAssessment,
    SafetyGateResult,
    Verdict,
    WarrantyEvaluation,
)
from .output import CompilerOptions, CompilerOutput, CompilerTrace

__all__ = [
    # Enums
    "ApplianceType",
    "BuyerPurpose",
    "Confidence",
    "DamageLocation",
    "DamageSeverity",
    "DamageTier",
    "DamageType",
    "DeliveryRecommendation",
    "DiscountRating",
    "InstallationType",
    "ModuleName",
    "NegotiationProbability",
    "PriceFlexibility",
    "Recommendation",
    "RetailerType",
    "ReturnPolicyRating",
    "RiskLevel",
    "RiskTolerance",
    "RuleSeverity",
    "TierLabel",
    "VisibilityImpact",
    "VisibleSide",
    "WarrantyScore",
    # Input
    "ApplianceInfo",
    "BuyerContext",
    "BuyerInput",
    "DamageInfo",
    "InspectionResults",
    "InstallationInfo",
    "RetailerInfo",
    "ReturnPolicyInfo",
    "WarrantyInfo",
    "load_buyer_input",
    # Rules
    "ModuleOutput",
    "RuleResult",
    "is_blocker",
    "is_info",
    "is_warning",
    # Results
    "DamageAssessment",
    "FinancialAssessment",
    "LogisticsPlan",
    "NegotiationAssessment",
    "ReturnPolicyAssessment",
    "SafetyGateResult",
    "Verdict",
    "WarrantyEvaluation",
    # Output
    "CompilerOptions",
    "CompilerOutput",
    "CompilerTrace",
]
