"""
Logistics solver - delivery, transport and installation guidance.

Pure lookups on appliance and installation type. All rules are
informational.
"""
import logging
from typing import NamedTuple

from ..models.enums import ApplianceType, DeliveryRecommendation, InstallationType, ModuleName
from ..models.inputs import BuyerInput
from ..models.results import LogisticsPlan
from ..models.rules import ModuleOutput
from ..registry import (
    LOGISTICS_DELIVERY_DEFAULT_V1,
    LOGISTICS_DELIVERY_GAS_V1,
    LOGISTICS_DELIVERY_REFRIGERATOR_V1,
    LOGISTICS_DELIVERY_STACKED_V1,
    LOGISTICS_INSTALLATION_NOTES_V1,
    LOGISTICS_TRANSPORT_RANGE_V1,
    LOGISTICS_TRANSPORT_REFRIGERATOR_V1,
    LOGISTICS_TRANSPORT_WASHER_V1,
)
from .base import RuleModule


logger = logging.getLogger(__name__)


class DeliveryDecision(NamedTuple):
    recommendation: DeliveryRecommendation
    reason: str
    rule_id: str


TRANSPORT_REQUIREMENTS: dict[ApplianceType, list[str]] = {
    ApplianceType.REFRIGERATOR: [
        "Keep upright during transport",
        "If tilted more than 45°, wait 24 hours before plugging in",
        "Secure doors with tape or straps",
        "Protect exterior with moving blankets",
    ],
    ApplianceType.WASHER: [
        "Install transit bolts before moving (check if included)",
        "Disconnect and drain all hoses",
        "Secure drum to prevent damage",
    ],
    ApplianceType.DRYER: [
        "Disconnect power and vent",
        "Clean lint trap and vent before moving",
    ],
    ApplianceType.RANGE: [
        "Disconnect gas line (requires shutoff)",
        "Cap gas line before transport",
        "Secure oven door",
        "Remove loose grates and burner covers",
    ],
    ApplianceType.DISHWASHER: [
        "Disconnect water supply and drain",
        "Run empty cycle before disconnecting",
        "Secure door latch",
    ],
    ApplianceType.MICROWAVE: [
        "Remove turntable and secure separately",
        "Pack in original box if available",
    ],
}
COMMON_TRANSPORT_REQUIREMENT = "Measure doorways and pathways before delivery"

INSTALLATION_TYPE_NOTES: dict[InstallationType, list[str]] = {
    InstallationType.BUILT_IN: [
        "Verify cabinet opening dimensions match appliance specs",
        "Check ventilation requirements for built-in installation",
    ],
    InstallationType.STACKED: [
        "Verify floor can support combined weight",
        "Install stacking kit (may be sold separately)",
        "Ensure proper electrical connections for both units",
    ],
}

# Microwaves have no per-type notes
APPLIANCE_NOTES: dict[ApplianceType, list[str]] = {
    ApplianceType.REFRIGERATOR: [
        'Allow 1" clearance on sides and top for ventilation',
        "Level the unit using adjustable feet",
        "Wait 24 hours before loading food if unit was tilted",
    ],
    ApplianceType.WASHER: [
        "Level washer to prevent excessive vibration",
        "Use braided stainless steel hoses (not rubber)",
        'Ensure drain standpipe is 30-36" high',
    ],
    ApplianceType.DRYER: [
        "Use rigid metal vent (not flexible foil)",
        "Keep vent run under 25 feet with minimal turns",
        "Clean vent path before connecting",
    ],
    ApplianceType.RANGE: [
        "Verify gas/electric matches your hookup",
        "Install anti-tip bracket (required by code)",
        "Test all burners and oven after installation",
    ],
    ApplianceType.DISHWASHER: [
        "Install air gap or high loop on drain line",
        "Verify hot water supply is at least 120°F",
        "Level unit for proper door alignment",
    ],
}

# TODO: dryer, dishwasher and microwave reuse the refrigerator transport rule ID;
# register dedicated LOGISTICS.TRANSPORT IDs with the next ruleset bump
TRANSPORT_RULE_BY_APPLIANCE: dict[ApplianceType, str] = {
    ApplianceType.REFRIGERATOR: LOGISTICS_TRANSPORT_REFRIGERATOR_V1,
    ApplianceType.WASHER: LOGISTICS_TRANSPORT_WASHER_V1,
    ApplianceType.RANGE: LOGISTICS_TRANSPORT_RANGE_V1,
    ApplianceType.DRYER: LOGISTICS_TRANSPORT_REFRIGERATOR_V1,
    ApplianceType.DISHWASHER: LOGISTICS_TRANSPORT_REFRIGERATOR_V1,
    ApplianceType.MICROWAVE: LOGISTICS_TRANSPORT_REFRIGERATOR_V1,
}


class LogisticsSolver(RuleModule):
    NAME = ModuleName.LOGISTICS_SOLVER

    def evaluate(self, buyer_input: BuyerInput) -> ModuleOutput[LogisticsPlan]:
        appliance_type = buyer_input.appliance.type
        installation_type = buyer_input.installation.type

        delivery = self.determine_delivery(appliance_type, installation_type)
        rules = [
            self._rule(
                delivery.rule_id,
                passed=True,
                message=delivery.reason,
                inputs_used=["appliance.type", "installation.type"],
                outputs_affected=["logistics.deliveryRecommendation", "logistics.deliveryReason"],
            )
        ]

        transport_requirements = self.transport_requirements(appliance_type)
        rules.append(
            self._rule(
                TRANSPORT_RULE_BY_APPLIANCE[appliance_type],
                passed=True,
                message=f"{len(transport_requirements)} transport requirements for {appliance_type.value}",
                inputs_used=["appliance.type"],
                outputs_affected=["logistics.transportRequirements"],
            )
        )

        installation_notes = self.installation_notes(appliance_type, installation_type)
        rules.append(
            self._rule(
                LOGISTICS_INSTALLATION_NOTES_V1,
                passed=True,
                message=(
                    f"{len(installation_notes)} installation notes for "
                    f"{installation_type.value} {appliance_type.value}"
                ),
                inputs_used=["appliance.type", "installation.type"],
                outputs_affected=["logistics.installationNotes"],
            )
        )

        logger.debug(f"Delivery: {delivery.recommendation.value}")

        return ModuleOutput(
            result=LogisticsPlan(
                delivery_recommendation=delivery.recommendation,
                delivery_reason=delivery.reason,
                transport_requirements=transport_requirements,
                installation_notes=installation_notes,
            ),
            rules=rules,
        )

    @staticmethod
    def determine_delivery(
        appliance_type: ApplianceType,
        installation_type: InstallationType,
    ) -> DeliveryDecision:
        # Stacked install wins over appliance type
        if installation_type == InstallationType.STACKED:
            return DeliveryDecision(
                DeliveryRecommendation.PROFESSIONAL,
                "Stacked units require professional installation for safety",
                LOGISTICS_DELIVERY_STACKED_V1,
            )
        if appliance_type == ApplianceType.REFRIGERATOR:
            return DeliveryDecision(
                DeliveryRecommendation.PROFESSIONAL,
                "Refrigerators are heavy and require careful handling to avoid compressor damage",
                LOGISTICS_DELIVERY_REFRIGERATOR_V1,
            )
        if appliance_type == ApplianceType.RANGE:
            return DeliveryDecision(
                DeliveryRecommendation.PROFESSIONAL,
                "Ranges require proper gas or electrical hookup — professional recommended",
                LOGISTICS_DELIVERY_GAS_V1,
            )
        return DeliveryDecision(
            DeliveryRecommendation.EITHER,
            "Self-transport possible if you have appropriate vehicle and help",
            LOGISTICS_DELIVERY_DEFAULT_V1,
        )

    @staticmethod
    def transport_requirements(appliance_type: ApplianceType) -> list[str]:
        return TRANSPORT_REQUIREMENTS.get(appliance_type, []) + [COMMON_TRANSPORT_REQUIREMENT]

    @staticmethod
    def installation_notes(
        appliance_type: ApplianceType,
        installation_type: InstallationType,
    ) -> list[str]:
        return INSTALLATION_TYPE_NOTES.get(installation_type, []) + APPLIANCE_NOTES.get(appliance_type, [])
