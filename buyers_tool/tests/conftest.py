"""
Shared fixtures for the Buyer's Tool tests.
"""
import copy

import pytest

from buyers_tool.models import BuyerInput, CompilerOptions


TIMESTAMP = "2026-01-15T12:00:00Z"

# Clean deal: hidden damage, strong warranty, easy returns, passed inspection.
# Compiles to PROCEED with 25 rules.
BASE_INPUT = {
    "appliance": {
        "type": "refrigerator",
        "brand": "Whirlpool",
        "model": "WRF555SDFZ",
        "retail_price": 1000,
        "asking_price": 600,
    },
    "damage": {
        "locations": ["back"],
        "severity": "light",
        "types": ["scratch"],
    },
    "retailer": {"type": "independent"},
    "warranty": {
        "manufacturer_covered": True,
        "retailer_warranty_months": 12,
        "labor_included": True,
        "parts_included": True,
        "extended_available": False,
    },
    "return_policy": {
        "window_days": 30,
        "restocking_fee_percent": 0,
        "final_sale": False,
    },
    "installation": {
        "type": "freestanding",
        "visible_sides": ["front"],
    },
    "buyer": {
        "purpose": "primary_home",
        "risk_tolerance": "moderate",
        "price_flexibility": "negotiable",
    },
    "inspection": {
        "power_on_works": True,
        "unusual_sounds": False,
        "rust_present": False,
        "water_stains": False,
        "cord_damaged": False,
        "odors_present": False,
        "missing_parts": False,
        "prior_repairs_evident": False,
    },
}

# Unknown manufacturer coverage, short retailer warranty, no labor, $400 savings:
# exactly three failed warnings, all from the warranty evaluator.
THREE_WARNING_WARRANTY = {
    "manufacturer_covered": "unknown",
    "retailer_warranty_months": 3,
    "labor_included": False,
}


def build_input(**overrides) -> BuyerInput:
    """
    BASE_INPUT with per-section overrides.

    Dict overrides are merged into the section; anything else (including
    None) replaces it.
    """
    data = copy.deepcopy(BASE_INPUT)
    for section, values in overrides.items():
        if isinstance(values, dict) and isinstance(data.get(section), dict):
            data[section].update(values)
        else:
            data[section] = values
    return BuyerInput.model_validate(data)


@pytest.fixture
def make_input():
    """Factory for BuyerInput variations."""
    return build_input


@pytest.fixture
def clean_input() -> BuyerInput:
    """Input that passes every check."""
    return build_input()


@pytest.fixture
def options() -> CompilerOptions:
    """Fixed compile options."""
    return CompilerOptions(timestamp=TIMESTAMP)
