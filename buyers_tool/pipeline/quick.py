"""
Quick assessment - compile a verdict from four answers and fixed assumptions.

Fields a quick check does not ask about are filled with common defaults
(basic retailer warranty, standard returns, freestanding install). The
assumptions are returned alongside the output so they can be shown.
"""
import logging
from typing import Literal

from pydantic import Field

from ..models.base import CompilerModel
from ..models.enums import (
    ApplianceType,
    BuyerPurpose,
    DamageLocation,
    DamageSeverity,
    DamageType,
    InstallationType,
    PriceFlexibility,
    RetailerType,
    RiskTolerance,
    VisibleSide,
)
from ..models.inputs import (
    ApplianceInfo,
    BuyerContext,
    BuyerInput,
    DamageInfo,
    InspectionResults,
    InstallationInfo,
    RetailerInfo,
    ReturnPolicyInfo,
    WarrantyInfo,
)
from ..models.output import CompilerOptions, CompilerOutput
from .orchestrator import compile


logger = logging.getLogger(__name__)

DamageArea = Literal["front", "side", "back_hidden"]
RedFlag = Literal["none", "rust", "water", "odor"]

DAMAGE_AREA_LOCATIONS: dict[str, list[DamageLocation]] = {
    "front": [
        DamageLocation.FRONT_DOOR,
        DamageLocation.FRONT_PANEL,
        DamageLocation.CONTROL_PANEL,
        DamageLocation.HANDLE,
    ],
    "side": [DamageLocation.LEFT_SIDE, DamageLocation.RIGHT_SIDE],
    "back_hidden": [DamageLocation.BACK, DamageLocation.TOP, DamageLocation.BOTTOM],
}

# InspectionResults flag set by each red flag
RED_FLAG_FIELDS: dict[str, str] = {
    "rust": "rust_present",
    "water": "water_stains",
    "odor": "odors_present",
}

DEFAULT_RETAILER = RetailerInfo(type=RetailerType.INDEPENDENT)
DEFAULT_WARRANTY = WarrantyInfo(
    manufacturer_covered="unknown",
    retailer_warranty_months=3,
    labor_included=False,
    parts_included=True,
    extended_available=False,
)
DEFAULT_RETURN_POLICY = ReturnPolicyInfo(window_days=14, restocking_fee_percent=15, final_sale=False)
DEFAULT_INSTALLATION = InstallationInfo(
    type=InstallationType.FREESTANDING,
    visible_sides=[VisibleSide.FRONT],
)
DEFAULT_BUYER = BuyerContext(
    purpose=BuyerPurpose.PRIMARY_HOME,
    risk_tolerance=RiskTolerance.MODERATE,
    price_flexibility=PriceFlexibility.NEGOTIABLE,
)

ASSUMPTIONS = [
    "Independent retailer",
    "Manufacturer warranty status unknown",
    "3-month retailer warranty, parts only (no labor)",
    "14-day return window with a 15% restocking fee",
    "Freestanding install with the front visible",
    "Primary home, moderate risk tolerance, price negotiable",
]

MAX_CLARIFYING_BULLETS = 4


class QuickAssessment(CompilerModel):
    """Compiled output plus what the quick check assumed and what to ask next."""
    output: CompilerOutput
    assumptions: list[str] = Field(default_factory=list)
    clarifying_bullets: list[str] = Field(default_factory=list)


def build_quick_input(
    retail_price: float,
    asking_price: float,
    damage_area: DamageArea,
    red_flag: RedFlag = "none",
    appliance_type: ApplianceType = ApplianceType.REFRIGERATOR,
) -> BuyerInput:
    """
    Build a full BuyerInput from the quick-check answers.

    Raises:
        KeyError: If damage_area or red_flag is not one of the known answers
    """
    locations = DAMAGE_AREA_LOCATIONS[damage_area]

    inspection = None
    if red_flag != "none":
        flags = {
            "power_on_works": True,
            "unusual_sounds": False,
            "rust_present": False,
            "water_stains": False,
            "cord_damaged": False,
            "odors_present": False,
            "missing_parts": False,
            "prior_repairs_evident": False,
        }
        flags[RED_FLAG_FIELDS[red_flag]] = True
        inspection = InspectionResults(**flags)

    return BuyerInput(
        appliance=ApplianceInfo(
            type=appliance_type,
            retail_price=retail_price,
            asking_price=asking_price,
        ),
        damage=DamageInfo(
            locations=list(locations),
            severity=DamageSeverity.MODERATE,
            types=[DamageType.DENT, DamageType.SCRATCH],
        ),
        retailer=DEFAULT_RETAILER,
        warranty=DEFAULT_WARRANTY,
        return_policy=DEFAULT_RETURN_POLICY,
        installation=DEFAULT_INSTALLATION,
        buyer=DEFAULT_BUYER,
        inspection=inspection,
    )


def clarifying_bullets(damage_area: DamageArea, has_red_flag: bool) -> list[str]:
    """What to ask the retailer next, given what the quick check assumed."""
    # Warranty and returns were assumed, so always worth confirming
    bullets = ["Ask about warranty coverage", "Confirm return policy window"]

    if damage_area == "front":
        bullets.append("Consider if the visible damage bothers you")
    elif damage_area == "side":
        bullets.append("Check if damage will be visible in your installation")

    if has_red_flag:
        bullets.append("Have a technician inspect before purchasing")

    return bullets[:MAX_CLARIFYING_BULLETS]


def quick_assess(
    retail_price: float,
    asking_price: float,
    damage_area: DamageArea,
    red_flag: RedFlag = "none",
    appliance_type: ApplianceType = ApplianceType.REFRIGERATOR,
    *,
    timestamp: str,
) -> QuickAssessment:
    """
    Simplified entry point for a quick check.
    Builds the input from defaults and runs the full compiler.
    """
    buyer_input = build_quick_input(retail_price, asking_price, damage_area, red_flag, appliance_type)
    logger.debug(f"Quick assessment: damage area {damage_area}, red flag {red_flag}")

    output = compile(buyer_input, CompilerOptions(timestamp=timestamp))

    return QuickAssessment(
        output=output,
        assumptions=list(ASSUMPTIONS),
        clarifying_bullets=clarifying_bullets(damage_area, red_flag != "none"),
    )
