"""
Tests for Pydantic models.
"""
import pytest
from pydantic import ValidationError

from buyers_tool.models import (
    ApplianceType,
    BuyerInput,
    DamageLocation,
    DamageTier,
    LogisticsPlan,
    ModuleName,
    NegotiationAssessment,
    NegotiationProbability,
    ReturnPolicyAssessment,
    ReturnPolicyRating,
    RiskLevel,
    RuleResult,
    RuleSeverity,
    WarrantyEvaluation,
    WarrantyScore,
    is_blocker,
    is_info,
    is_warning,
    load_buyer_input,
)
from buyers_tool.tests.conftest import BASE_INPUT


class TestBuyerInput:
    """Tests for BuyerInput validation."""

    def test_accepts_snake_case(self):
        """Test that snake_case keys validate."""
        buyer_input = load_buyer_input(BASE_INPUT)

        assert buyer_input.appliance.type == ApplianceType.REFRIGERATOR
        assert buyer_input.appliance.retail_price == 1000
        assert buyer_input.damage.locations == [DamageLocation.BACK]

    def test_accepts_camel_case(self):
        """Test that the camelCase wire shape validates to the same input."""
        camel = load_buyer_input(BASE_INPUT).model_dump(mode="json", by_alias=True)

        assert "retailPrice" in camel["appliance"]
        assert "returnPolicy" in camel
        assert load_buyer_input(camel) == load_buyer_input(BASE_INPUT)

    def test_inspection_is_optional(self):
        """Test that inspection can be omitted."""
        data = {k: v for k, v in BASE_INPUT.items() if k != "inspection"}
        buyer_input = load_buyer_input(data)

        assert buyer_input.inspection is None

    def test_manufacturer_covered_unknown(self, make_input):
        """Test that manufacturer coverage accepts the 'unknown' literal."""
        buyer_input = make_input(warranty={"manufacturer_covered": "unknown"})

        assert buyer_input.warranty.manufacturer_covered == "unknown"

    def test_rejects_non_numeric_price(self):
        """Test that a non-numeric price raises ValidationError."""
        data = {**BASE_INPUT, "appliance": {**BASE_INPUT["appliance"], "retail_price": "lots"}}

        with pytest.raises(ValidationError):
            load_buyer_input(data)

    def test_rejects_unknown_enum_value(self):
        """Test that an unknown appliance type raises ValidationError."""
        data = {**BASE_INPUT, "appliance": {**BASE_INPUT["appliance"], "type": "toaster"}}

        with pytest.raises(ValidationError):
            load_buyer_input(data)

    def test_rejects_missing_block(self):
        """Test that a missing required block raises ValidationError."""
        data = {k: v for k, v in BASE_INPUT.items() if k != "warranty"}

        with pytest.raises(ValidationError):
            load_buyer_input(data)

    def test_frozen(self, clean_input: BuyerInput):
        """Test that inputs are immutable."""
        with pytest.raises(ValidationError):
            clean_input.appliance.asking_price = 1


class TestRuleResult:
    """Tests for RuleResult helpers."""

    @staticmethod
    def _rule(severity: RuleSeverity, passed: bool) -> RuleResult:
        return RuleResult(
            rule_id="SAFETY.BLOCKER.RUST_DETECTED_V1",
            severity=severity,
            passed=passed,
            message="test",
        )

    def test_failed_blocker(self):
        """Test that only a failed blocker counts as a blocker."""
        assert is_blocker(self._rule(RuleSeverity.BLOCKER, passed=False))
        assert not is_blocker(self._rule(RuleSeverity.BLOCKER, passed=True))
        assert not is_blocker(self._rule(RuleSeverity.WARNING, passed=False))

    def test_failed_warning(self):
        """Test that only a failed warning counts as a warning."""
        assert is_warning(self._rule(RuleSeverity.WARNING, passed=False))
        assert not is_warning(self._rule(RuleSeverity.WARNING, passed=True))

    def test_info(self):
        """Test info detection regardless of outcome."""
        assert is_info(self._rule(RuleSeverity.INFO, passed=True))
        assert not is_info(self._rule(RuleSeverity.WARNING, passed=True))

    def test_module_prefix(self):
        """Test that the prefix is the first dot-segment."""
        assert self._rule(RuleSeverity.BLOCKER, passed=True).module_prefix == "SAFETY"

    def test_camel_case_dump(self):
        """Test the wire names of a rule."""
        dumped = self._rule(RuleSeverity.INFO, passed=True).model_dump(mode="json", by_alias=True)

        assert set(dumped) == {"ruleId", "severity", "passed", "message", "inputsUsed", "outputsAffected"}
        assert dumped["severity"] == "info"


class TestPlaceholders:
    """Tests for not-evaluated placeholders."""

    def test_warranty_placeholder(self):
        """Test the conservative warranty placeholder."""
        placeholder = WarrantyEvaluation.not_evaluated(ModuleName.SAFETY_GATE)

        assert placeholder.evaluated is False
        assert placeholder.score == WarrantyScore.UNACCEPTABLE
        assert placeholder.risk_level == RiskLevel.HIGH
        assert placeholder.coverage_gaps == ["Not evaluated: pipeline halted at SafetyGate"]

    def test_return_policy_placeholder(self):
        """Test the conservative return-policy placeholder."""
        placeholder = ReturnPolicyAssessment.not_evaluated(ModuleName.SAFETY_GATE)

        assert placeholder.evaluated is False
        assert placeholder.rating == ReturnPolicyRating.RED_FLAG

    def test_negotiation_placeholder(self):
        """Test the conservative negotiation placeholder."""
        placeholder = NegotiationAssessment.not_evaluated(ModuleName.RETURN_POLICY_FILTER)

        assert placeholder.evaluated is False
        assert placeholder.possible is False
        assert placeholder.probability == NegotiationProbability.UNLIKELY
        assert placeholder.suggested_target_price == 0
        assert placeholder.alternative_asks == []

    def test_logistics_placeholder_names_halt_module(self):
        """Test that the logistics placeholder reason names where the pipeline halted."""
        placeholder = LogisticsPlan.not_evaluated(ModuleName.RETURN_POLICY_FILTER)

        assert placeholder.evaluated is False
        assert placeholder.delivery_reason == "Not evaluated: pipeline halted at ReturnPolicyFilter"
        assert placeholder.transport_requirements == []


class TestEnums:
    """Tests for closed enum sets."""

    def test_damage_tier_is_ordered(self):
        """Test that tiers compare numerically."""
        assert DamageTier.HIDDEN < DamageTier.PARTIALLY_VISIBLE < DamageTier.PROMINENTLY_VISIBLE
        assert DamageTier(3) == DamageTier.PROMINENTLY_VISIBLE

    def test_module_names_are_wire_names(self):
        """Test that module names serialize as the display names."""
        assert ModuleName.SAFETY_GATE.value == "SafetyGate"
        assert ModuleName("VerdictCompiler") == ModuleName.VERDICT_COMPILER
