"""
Base class for pipeline modules.
Each module owns a slice of the rule registry and emits RuleResults for it.
"""
from ..models.enums import ModuleName
from ..models.rules import RuleResult
from ..registry import get_rule


class RuleModule:
    """
    Shared plumbing for the evaluation modules.

    Subclasses set NAME and expose an ``evaluate(...)`` method returning a
    ModuleOutput. Severity always comes from the registry so a module cannot
    emit a rule with a severity other than the one it was published with.
    """

    # Override in subclasses
    NAME: ModuleName

    def _rule(
        self,
        rule_id: str,
        passed: bool,
        message: str,
        inputs_used: list[str],
        outputs_affected: list[str],
    ) -> RuleResult:
        """Build a RuleResult for one of this module's registered rules."""
        metadata = get_rule(rule_id)
        if metadata.module != self.NAME:
            raise ValueError(
                f"{self.NAME.value} cannot emit {rule_id} "
                f"(owned by {metadata.module.value})"
            )
        return RuleResult(
            rule_id=rule_id,
            severity=metadata.severity,
            passed=passed,
            message=message,
            inputs_used=inputs_used,
            outputs_affected=outputs_affected,
        )
