"""
Output models - the compiled verdict and its audit trace.
"""
from typing import Any, Optional

from pydantic import Field

from .base import CompilerModel
from .enums import ModuleName
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
from .rules import RuleResult


class CompilerOptions(CompilerModel):
    """Supplied by the caller. The compiler never reads the clock."""
    timestamp: str = Field(description="ISO-8601 timestamp recorded in the trace")


class CompilerTrace(CompilerModel):
    """
    Ordered record of every rule evaluated during one compile call.

    ``rules`` is the concatenation, in execution order, of the rules of every
    module that ran. ``execution_order`` lists only modules that ran.
    """
    rules: list[RuleResult] = Field(default_factory=list)
    execution_order: list[ModuleName] = Field(default_factory=list)
    halted_at_module: Optional[ModuleName] = None
    halted_by_rule_id: Optional[str] = None

    # Version axes
    compiler_version: str
    schema_version: str
    ruleset_version: str

    timestamp: str
    input_hash: str = Field(description="8 hex chars, non-cryptographic")

    @property
    def halted(self) -> bool:
        return self.halted_at_module is not None


class CompilerOutput(CompilerModel):
    """
    Complete result of one compile call. Never partially constructed:
    modules skipped by a halt are filled with ``not_evaluated`` placeholders.
    """
    verdict: Verdict
    financial: FinancialAssessment
    damage_assessment: DamageAssessment
    warranty_evaluation: WarrantyEvaluation
    safety_gate: SafetyGateResult
    negotiation: NegotiationAssessment
    logistics: LogisticsPlan
    return_policy_assessment: ReturnPolicyAssessment
    trace: CompilerTrace = Field(alias="_trace")

    def to_json_dict(self) -> dict[str, Any]:
        """Export in the camelCase wire shape, `_trace` included."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)
