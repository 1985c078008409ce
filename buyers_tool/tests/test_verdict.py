"""
Tests for the verdict compiler.
"""
import pytest

from buyers_tool.models import (
    BuyerContext,
    Confidence,
    Recommendation,
    RiskTolerance,
    RuleResult,
    RuleSeverity,
)
from buyers_tool.pipeline.verdict import VerdictCompiler, adjusted_thresholds


def _warning(index: int, passed: bool = False) -> RuleResult:
    return RuleResult(
        rule_id=f"WARRANTY.WARNING.TEST_{index}_V1",
        severity=RuleSeverity.WARNING,
        passed=passed,
        message=f"Warning {index}",
    )


def _blocker(message: str = "Rust detected", passed: bool = False) -> RuleResult:
    return RuleResult(
        rule_id="SAFETY.BLOCKER.RUST_DETECTED_V1",
        severity=RuleSeverity.BLOCKER,
        passed=passed,
        message=message,
    )


def _buyer(risk_tolerance: str = "moderate") -> BuyerContext:
    return BuyerContext(purpose="primary_home", risk_tolerance=risk_tolerance, price_flexibility="firm")


class TestDecision:
    """Tests for the ordered decision rules."""

    def test_no_failures_proceed(self):
        """Test that passing rules alone yield PROCEED with high confidence."""
        output = VerdictCompiler().evaluate([_warning(1, passed=True), _blocker(passed=True)], _buyer())

        assert output.result.recommendation == Recommendation.PROCEED
        assert output.result.confidence == Confidence.HIGH
        assert output.result.summary == "All checks passed — this appears to be a good deal"

    def test_one_warning_caution(self):
        """Test a single failed warning."""
        output = VerdictCompiler().evaluate([_warning(1)], _buyer())

        assert output.result.recommendation == Recommendation.PROCEED_WITH_CAUTION
        assert output.result.confidence == Confidence.MEDIUM
        assert output.result.summary == "Caution advised: Warning 1"

    def test_two_warnings_caution(self):
        """Test that caution summaries join every warning message."""
        output = VerdictCompiler().evaluate([_warning(1), _warning(2)], _buyer())

        assert output.result.recommendation == Recommendation.PROCEED_WITH_CAUTION
        assert output.result.confidence == Confidence.LOW
        assert output.result.summary == "Caution advised: Warning 1; Warning 2"

    def test_three_warnings_skip(self):
        """Test the base skip threshold."""
        output = VerdictCompiler().evaluate([_warning(i) for i in range(3)], _buyer())

        assert output.result.recommendation == Recommendation.SKIP
        assert output.result.confidence == Confidence.LOW
        assert output.result.summary == "Too many concerns: 3 issues identified"

    def test_blocker_beats_warnings(self):
        """Test that any failed blocker yields WALK_AWAY."""
        output = VerdictCompiler().evaluate([_warning(1), _blocker()], _buyer())

        assert output.result.recommendation == Recommendation.WALK_AWAY
        assert output.result.confidence == Confidence.HIGH
        assert output.result.summary == "Cannot proceed: Rust detected"

    def test_multiple_blockers_summary(self):
        """Test the plural blocker summary."""
        output = VerdictCompiler().evaluate([_blocker(), _blocker("Water")], _buyer())

        assert output.result.summary == "Cannot proceed: 2 safety issues identified"

    def test_info_rules_ignored(self):
        """Test that failed info rules do not count."""
        info = RuleResult(
            rule_id="SAFETY.INFO.POWER_ON_WORKS_V1",
            severity=RuleSeverity.INFO,
            passed=False,
            message="Unit failed power-on test",
        )
        output = VerdictCompiler().evaluate([info], _buyer())

        assert output.result.recommendation == Recommendation.PROCEED

    def test_decision_rule_lists_failures(self):
        """Test that the decision rule cites the failing rule IDs."""
        failing = [_blocker(), _warning(1)]
        output = VerdictCompiler().evaluate(failing + [_warning(2, passed=True)], _buyer())
        decision = output.rules[-1]

        assert decision.rule_id == "VERDICT.DECIDE.WALK_AWAY_V1"
        assert decision.inputs_used == [rule.rule_id for rule in failing]


class TestRiskTolerance:
    """Tests for the skip threshold shift."""

    @pytest.mark.parametrize(
        "tolerance,skip",
        [("low", 2), ("moderate", 3), ("high", 4)],
    )
    def test_adjusted_thresholds(self, tolerance, skip):
        """Test that only the skip threshold moves."""
        thresholds = adjusted_thresholds(RiskTolerance(tolerance))

        assert thresholds["VERDICT.THRESHOLD.WARNING_SKIP_V1"] == skip
        assert thresholds["VERDICT.THRESHOLD.BLOCKER_COUNT_V1"] == 1
        assert thresholds["VERDICT.THRESHOLD.WARNING_CAUTION_V1"] == 1

    @pytest.mark.parametrize(
        "tolerance,expected",
        [
            ("low", Recommendation.SKIP),
            ("moderate", Recommendation.PROCEED_WITH_CAUTION),
            ("high", Recommendation.PROCEED_WITH_CAUTION),
        ],
    )
    def test_two_warnings_by_tolerance(self, tolerance, expected):
        """Test that low tolerance skips at two warnings."""
        output = VerdictCompiler().evaluate([_warning(1), _warning(2)], _buyer(tolerance))

        assert output.result.recommendation == expected

    def test_moderate_has_no_adjustment_rule(self):
        """Test the rule list for moderate tolerance: three thresholds and a decision."""
        output = VerdictCompiler().evaluate([], _buyer())

        assert [rule.rule_id for rule in output.rules] == [
            "VERDICT.THRESHOLD.BLOCKER_COUNT_V1",
            "VERDICT.THRESHOLD.WARNING_SKIP_V1",
            "VERDICT.THRESHOLD.WARNING_CAUTION_V1",
            "VERDICT.DECIDE.PROCEED_V1",
        ]

    def test_adjustment_rule(self):
        """Test the adjustment rule for a non-moderate tolerance."""
        output = VerdictCompiler().evaluate([], _buyer("high"))
        adjustment = output.rules[0]

        assert adjustment.rule_id == "VERDICT.RISK_TOLERANCE.ADJUSTMENT_V1"
        assert adjustment.message == 'Risk tolerance "high" adjusted skip threshold: 3 → 4'
        assert len(output.rules) == 5

    def test_threshold_messages(self):
        """Test that threshold rules report the count found."""
        output = VerdictCompiler().evaluate([_warning(1)], _buyer("low"))
        messages = [rule.message for rule in output.rules[1:4]]

        assert messages == [
            "Blocker threshold: 1 (found: 0)",
            "Warning skip threshold: 2 (found: 1)",
            "Warning caution threshold: 1 (found: 1)",
        ]
