"""
Result models - the conclusion each pipeline module reaches.

Modules that can be skipped when the pipeline halts carry an ``evaluated``
flag. Their ``not_evaluated`` constructors build the conservative
placeholder used in that case, so callers can tell "ran and concluded X"
apart from "never ran".
"""
from pydantic import Field

from .base import CompilerModel
from .enums import (
    Confidence,
    DamageTier,
    DeliveryRecommendation,
    DiscountRating,
    ModuleName,
    NegotiationProbability,
    Recommendation,
    ReturnPolicyRating,
    RiskLevel,
    TierLabel,
    VisibilityImpact,
    WarrantyScore,
)


def not_evaluated_reason(halted_at: ModuleName) -> str:
    return f"Not evaluated: pipeline halted at {halted_at.value}"


class DamageAssessment(CompilerModel):
    tier: DamageTier
    tier_label: TierLabel
    visibility_impact: VisibilityImpact
    acceptable_for_installation: bool


class FinancialAssessment(CompilerModel):
    discount_percent: float = Field(description="Rounded to one decimal")
    discount_rating: DiscountRating
    expected_discount_range: tuple[int, int]
    savings_vs_new: float
    fair_price_estimate: tuple[int, int] = Field(description="[low, high] in whole dollars")


class SafetyGateResult(CompilerModel):
    passed: bool
    inspected: bool = True
    failures: list[str] = Field(default_factory=list)
    blockers: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class WarrantyEvaluation(CompilerModel):
    score: WarrantyScore
    coverage_gaps: list[str] = Field(default_factory=list)
    risk_level: RiskLevel
    evaluated: bool = True

    @classmethod
    def not_evaluated(cls, halted_at: ModuleName) -> "WarrantyEvaluation":
        return cls(
            score=WarrantyScore.UNACCEPTABLE,
            coverage_gaps=[not_evaluated_reason(halted_at)],
            risk_level=RiskLevel.HIGH,
            evaluated=False,
        )


class ReturnPolicyAssessment(CompilerModel):
    rating: ReturnPolicyRating
    concerns: list[str] = Field(default_factory=list)
    evaluated: bool = True

    @classmethod
    def not_evaluated(cls, halted_at: ModuleName) -> "ReturnPolicyAssessment":
        return cls(
            rating=ReturnPolicyRating.RED_FLAG,
            concerns=[not_evaluated_reason(halted_at)],
            evaluated=False,
        )


class NegotiationAssessment(CompilerModel):
    possible: bool
    probability: NegotiationProbability
    suggested_target_price: int
    leverage_points: list[str] = Field(default_factory=list)
    alternative_asks: list[str] = Field(default_factory=list)
    evaluated: bool = True

    @classmethod
    def not_evaluated(cls, halted_at: ModuleName) -> "NegotiationAssessment":
        return cls(
            possible=False,
            probability=NegotiationProbability.UNLIKELY,
            suggested_target_price=0,
            leverage_points=[not_evaluated_reason(halted_at)],
            evaluated=False,
        )


class LogisticsPlan(CompilerModel):
    delivery_recommendation: DeliveryRecommendation
    delivery_reason: str
    transport_requirements: list[str] = Field(default_factory=list)
    installation_notes: list[str] = Field(default_factory=list)
    evaluated: bool = True

    @classmethod
    def not_evaluated(cls, halted_at: ModuleName) -> "LogisticsPlan":
        return cls(
            delivery_recommendation=DeliveryRecommendation.PROFESSIONAL,
            delivery_reason=not_evaluated_reason(halted_at),
            evaluated=False,
        )


class Verdict(CompilerModel):
    recommendation: Recommendation
    confidence: Confidence
    summary: str
