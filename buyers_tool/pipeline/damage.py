"""
Damage classifier - how visible the damage will be once installed.
"""
import logging

from ..models.enums import (
    DamageLocation,
    DamageTier,
    ModuleName,
    TierLabel,
    VisibilityImpact,
    VisibleSide,
)
from ..models.inputs import BuyerInput
from ..models.results import DamageAssessment
from ..models.rules import ModuleOutput
from ..registry import (
    DAMAGE_TIER_ASSIGNMENT_V1,
    DAMAGE_VISIBILITY_INSTALLATION_CHECK_V1,
    LOCATION_TO_SIDE,
    TIER1_LOCATIONS,
    TIER3_LOCATIONS,
)
from .base import RuleModule


logger = logging.getLogger(__name__)

TIER_LABELS: dict[DamageTier, TierLabel] = {
    DamageTier.HIDDEN: TierLabel.HIDDEN,
    DamageTier.PARTIALLY_VISIBLE: TierLabel.PARTIALLY_VISIBLE,
    DamageTier.PROMINENTLY_VISIBLE: TierLabel.PROMINENTLY_VISIBLE,
}

VISIBILITY_IMPACTS: dict[DamageTier, VisibilityImpact] = {
    DamageTier.HIDDEN: VisibilityImpact.MINIMAL,
    DamageTier.PARTIALLY_VISIBLE: VisibilityImpact.MODERATE,
    DamageTier.PROMINENTLY_VISIBLE: VisibilityImpact.SIGNIFICANT,
}


class DamageClassifier(RuleModule):
    """
    Tier 1: every location hidden when installed (back, bottom, top).
    Tier 3: any location on the front of the unit.
    Tier 2: everything else (sides).
    """

    NAME = ModuleName.DAMAGE_CLASSIFIER

    def evaluate(self, buyer_input: BuyerInput) -> ModuleOutput[DamageAssessment]:
        damage = buyer_input.damage
        installation = buyer_input.installation

        tier = self.calculate_tier(damage.locations)
        tier_label = TIER_LABELS[tier]

        rules = [
            self._rule(
                DAMAGE_TIER_ASSIGNMENT_V1,
                passed=True,
                message=f"Damage classified as Tier {tier.value} ({tier_label.value})",
                inputs_used=["damage.locations"],
                outputs_affected=[
                    "damageAssessment.tier",
                    "damageAssessment.tierLabel",
                    "damageAssessment.visibilityImpact",
                ],
            )
        ]

        visible = self.visible_in_installation(damage.locations, installation.visible_sides)
        rules.append(
            self._rule(
                DAMAGE_VISIBILITY_INSTALLATION_CHECK_V1,
                passed=not visible,
                message=(
                    "Damage will be visible in your installation configuration"
                    if visible
                    else "Damage will not be visible in your installation configuration"
                ),
                inputs_used=["damage.locations", "installation.visibleSides"],
                outputs_affected=["damageAssessment.acceptableForInstallation"],
            )
        )

        logger.debug(f"Damage tier {tier.value}, visible in installation: {visible}")

        return ModuleOutput(
            result=DamageAssessment(
                tier=tier,
                tier_label=tier_label,
                visibility_impact=VISIBILITY_IMPACTS[tier],
                acceptable_for_installation=not visible or tier == DamageTier.HIDDEN,
            ),
            rules=rules,
        )

    @staticmethod
    def calculate_tier(locations: list[DamageLocation]) -> DamageTier:
        # An empty list is vacuously all-hidden
        if all(loc in TIER1_LOCATIONS for loc in locations):
            return DamageTier.HIDDEN
        if any(loc in TIER3_LOCATIONS for loc in locations):
            return DamageTier.PROMINENTLY_VISIBLE
        return DamageTier.PARTIALLY_VISIBLE

    @staticmethod
    def visible_in_installation(
        locations: list[DamageLocation],
        visible_sides: list[VisibleSide],
    ) -> bool:
        """Check if any damaged location maps to a side left visible."""
        for loc in locations:
            side = LOCATION_TO_SIDE[loc]
            if side is not None and side in visible_sides:
                return True
        return False
