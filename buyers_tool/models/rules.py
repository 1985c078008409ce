"""
Rule models - the unit of audit every module emits.
"""
from typing import Generic, TypeVar

from pydantic import Field

from .base import CompilerModel
from .enums import RuleSeverity

ResultT = TypeVar("ResultT")


class RuleResult(CompilerModel):
    """
    One evaluated rule. Immutable once emitted.

    ``rule_id`` follows ``{MODULE}.{CATEGORY}.{NAME}_V{n}`` and is opaque
    to consumers.
    """
    rule_id: str
    severity: RuleSeverity
    passed: bool
    message: str
    inputs_used: list[str] = Field(default_factory=list)
    outputs_affected: list[str] = Field(default_factory=list)

    @property
    def module_prefix(self) -> str:
        """First dot-segment of the rule ID (e.g. 'SAFETY')."""
        return self.rule_id.split(".", 1)[0]


class ModuleOutput(CompilerModel, Generic[ResultT]):
    """What every pipeline module returns: its conclusion plus its rules."""
    result: ResultT
    rules: list[RuleResult] = Field(default_factory=list)


def is_blocker(rule: RuleResult) -> bool:
    """A blocker that failed."""
    return rule.severity == RuleSeverity.BLOCKER and not rule.passed


def is_warning(rule: RuleResult) -> bool:
    """A warning that failed."""
    return rule.severity == RuleSeverity.WARNING and not rule.passed


def is_info(rule: RuleResult) -> bool:
    return rule.severity == RuleSeverity.INFO
