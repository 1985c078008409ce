"""
Tests for the logistics solver.
"""
import pytest

from buyers_tool.models import ApplianceType, DeliveryRecommendation, InstallationType
from buyers_tool.pipeline.logistics import COMMON_TRANSPORT_REQUIREMENT, LogisticsSolver


class TestDelivery:
    """Tests for the delivery recommendation."""

    @pytest.mark.parametrize(
        "appliance,installation,recommendation,rule_id",
        [
            (ApplianceType.WASHER, InstallationType.STACKED, DeliveryRecommendation.PROFESSIONAL,
             "LOGISTICS.DELIVERY.STACKED_V1"),
            (ApplianceType.REFRIGERATOR, InstallationType.STACKED, DeliveryRecommendation.PROFESSIONAL,
             "LOGISTICS.DELIVERY.STACKED_V1"),
            (ApplianceType.REFRIGERATOR, InstallationType.BUILT_IN, DeliveryRecommendation.PROFESSIONAL,
             "LOGISTICS.DELIVERY.REFRIGERATOR_V1"),
            (ApplianceType.RANGE, InstallationType.FREESTANDING, DeliveryRecommendation.PROFESSIONAL,
             "LOGISTICS.DELIVERY.GAS_V1"),
            (ApplianceType.DRYER, InstallationType.FREESTANDING, DeliveryRecommendation.EITHER,
             "LOGISTICS.DELIVERY.DEFAULT_V1"),
            (ApplianceType.MICROWAVE, InstallationType.BUILT_IN, DeliveryRecommendation.EITHER,
             "LOGISTICS.DELIVERY.DEFAULT_V1"),
        ],
    )
    def test_determine_delivery(self, appliance, installation, recommendation, rule_id):
        """Test that stacked wins, then refrigerator, then range, then the default."""
        decision = LogisticsSolver.determine_delivery(appliance, installation)

        assert decision.recommendation == recommendation
        assert decision.rule_id == rule_id


class TestTransport:
    """Tests for transport requirements."""

    def test_measure_line_last(self):
        """Test that every list ends with the doorway measurement line."""
        for appliance in ApplianceType:
            requirements = LogisticsSolver.transport_requirements(appliance)
            assert requirements[-1] == COMMON_TRANSPORT_REQUIREMENT

    def test_refrigerator_requirements(self):
        """Test the refrigerator list."""
        requirements = LogisticsSolver.transport_requirements(ApplianceType.REFRIGERATOR)

        assert len(requirements) == 5
        assert requirements[0] == "Keep upright during transport"

    def test_range_transport_rule(self, make_input):
        """Test that ranges get their own transport rule."""
        output = LogisticsSolver().evaluate(make_input(appliance={"type": "range"}))

        assert output.rules[1].rule_id == "LOGISTICS.TRANSPORT.RANGE_V1"
        assert output.rules[1].message == "5 transport requirements for range"

    def test_dryer_shares_refrigerator_rule(self, make_input):
        """Test the shared transport rule ID for appliances without their own."""
        output = LogisticsSolver().evaluate(make_input(appliance={"type": "dryer"}))

        assert output.rules[1].rule_id == "LOGISTICS.TRANSPORT.REFRIGERATOR_V1"


class TestInstallationNotes:
    """Tests for installation notes."""

    def test_stacked_washer(self):
        """Test that installation-type notes come before appliance notes."""
        notes = LogisticsSolver.installation_notes(ApplianceType.WASHER, InstallationType.STACKED)

        assert len(notes) == 6
        assert notes[0] == "Verify floor can support combined weight"
        assert notes[3] == "Level washer to prevent excessive vibration"

    def test_freestanding_microwave(self):
        """Test that a freestanding microwave has no notes."""
        assert LogisticsSolver.installation_notes(ApplianceType.MICROWAVE, InstallationType.FREESTANDING) == []

    def test_clean_input(self, clean_input):
        """Test the full plan for a freestanding refrigerator."""
        output = LogisticsSolver().evaluate(clean_input)

        assert output.result.delivery_recommendation == DeliveryRecommendation.PROFESSIONAL
        assert len(output.result.installation_notes) == 3
        assert [rule.rule_id for rule in output.rules] == [
            "LOGISTICS.DELIVERY.REFRIGERATOR_V1",
            "LOGISTICS.TRANSPORT.REFRIGERATOR_V1",
            "LOGISTICS.INSTALLATION.NOTES_V1",
        ]
        assert output.rules[2].message == "3 installation notes for freestanding refrigerator"
