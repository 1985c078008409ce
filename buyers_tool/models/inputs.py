"""
Input models - the structured facts one compile call evaluates.

The compiler assumes a structurally valid BuyerInput. Raw form data goes
through ``load_buyer_input`` first, which raises pydantic's
ValidationError for anything malformed (non-numeric price, unknown enum
value, missing block).
"""
from typing import Any, Literal, Optional, Union

from pydantic import Field

from .base import CompilerModel
from .enums import (
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


class ApplianceInfo(CompilerModel):
    """The unit being considered."""
    type: ApplianceType
    brand: Optional[str] = None
    model: Optional[str] = None
    retail_price: float = Field(description="Price of the same unit new, undamaged")
    asking_price: float = Field(description="Price the retailer is asking")


class DamageInfo(CompilerModel):
    """Where and how the unit is damaged."""
    locations: list[DamageLocation] = Field(default_factory=list)
    severity: DamageSeverity
    types: list[DamageType] = Field(default_factory=list)


class RetailerInfo(CompilerModel):
    type: RetailerType
    inventory_age_days: Optional[int] = Field(
        default=None,
        description="Days the unit has been on the floor, if known",
    )


class WarrantyInfo(CompilerModel):
    manufacturer_covered: Union[bool, Literal["unknown"]] = Field(
        description="True, False, or 'unknown' when the buyer could not confirm"
    )
    retailer_warranty_months: int = 0
    labor_included: bool = False
    parts_included: bool = False
    extended_available: bool = False


class ReturnPolicyInfo(CompilerModel):
    window_days: int
    restocking_fee_percent: float = 0
    final_sale: bool = False


class InstallationInfo(CompilerModel):
    type: InstallationType
    visible_sides: list[VisibleSide] = Field(
        default_factory=list,
        description="Sides of the unit that stay visible once installed",
    )


class BuyerContext(CompilerModel):
    purpose: BuyerPurpose
    risk_tolerance: RiskTolerance
    price_flexibility: PriceFlexibility


class InspectionResults(CompilerModel):
    """Hands-on inspection flags. True means the condition was observed."""
    power_on_works: bool
    unusual_sounds: bool
    rust_present: bool
    water_stains: bool
    cord_damaged: bool
    odors_present: bool
    missing_parts: bool
    prior_repairs_evident: bool


class BuyerInput(CompilerModel):
    """
    Complete input for one compile call.
    Inspection is optional; everything else is required.
    """
    appliance: ApplianceInfo
    damage: DamageInfo
    retailer: RetailerInfo
    warranty: WarrantyInfo
    return_policy: ReturnPolicyInfo
    installation: InstallationInfo
    buyer: BuyerContext
    inspection: Optional[InspectionResults] = None


def load_buyer_input(data: dict[str, Any]) -> BuyerInput:
    """
    Validate raw (camelCase or snake_case) data into a BuyerInput.

    Raises:
        ValidationError: If the data is structurally invalid
    """
    return BuyerInput.model_validate(data)
