"""Pytest configuration and shared fixtures for cabinet pricing tests."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from cabinet_pricing.domain import (
    CabinetType,
    GlobalSettings,
    HardwareRequirement,
    Part,
    RateSet,
    UnitScope,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def base_parts() -> tuple[Part, ...]:
    """Parts of a two-door 600 x 720 x 560 base cabinet."""
    return (
        Part("Back", "width", "height", 1, is_door=False, is_hardware=False),
        Part("Bottom", "width", "depth", 1, is_door=False, is_hardware=False),
        Part("Side", "depth", "height", 2, is_door=False, is_hardware=False),
        Part("Door", "width / 2 - 3", "height - 4", 2, is_door=True, is_hardware=False),
        Part("Hinge", "35", "35", 4, is_door=False, is_hardware=True),
    )


@pytest.fixture
def base_cabinet(base_parts: tuple[Part, ...]) -> CabinetType:
    """Two-door base cabinet with hinge and handle requirements."""
    return CabinetType(
        id="base-600",
        name="Base 600",
        default_width_mm=600,
        default_height_mm=720,
        default_depth_mm=560,
        door_count=2,
        parts=base_parts,
        hardware_requirements=(
            HardwareRequirement("hinge", "Hinge", UnitScope.PER_DOOR, 2),
            HardwareRequirement("handle", "Handle", UnitScope.PER_DOOR, 1),
        ),
    )


@pytest.fixture
def rates() -> RateSet:
    return RateSet(
        material_rate_per_sqm=45.0,
        finish_rate_per_sqm=60.0,
        door_style_rate_per_sqm=20.0,
        color_surcharge_per_sqm=5.0,
    )


@pytest.fixture
def no_tax_settings() -> GlobalSettings:
    """Settings with no wastage, GST or markup, for exact arithmetic."""
    return GlobalSettings(
        wastage_factor=0.0, gst_rate=0.0, hardware_markup_pct=0.0
    )


# =============================================================================
# Quote request fixtures
# =============================================================================

QUOTE_DATA: dict[str, Any] = {
    "schema_version": "1.1",
    "currency": "AUD",
    "settings": {
        "wastage_factor": 0.05,
        "gst_rate": 0.1,
        "hardware_markup_pct": 0,
    },
    "rates": {
        "material_rate_per_sqm": 45,
        "finish_rate_per_sqm": 60,
        "color_surcharge_per_sqm": 5,
    },
    "cabinet_types": [
        {
            "id": "base-600",
            "name": "Base 600",
            "default_width_mm": 600,
            "default_height_mm": 720,
            "default_depth_mm": 560,
            "door_count": 2,
            "parts": [
                {"name": "Back", "width_formula": "width", "height_formula": "height",
                 "is_door": False, "is_hardware": False},
                {"name": "Bottom", "width_formula": "width", "height_formula": "depth",
                 "is_door": False, "is_hardware": False},
                {"name": "Side", "width_formula": "depth", "height_formula": "height",
                 "quantity": 2, "is_door": False, "is_hardware": False},
                {"name": "Door", "width_formula": "width / 2 - 3",
                 "height_formula": "height - 4", "quantity": 2,
                 "is_door": True, "is_hardware": False},
                {"name": "Hinge", "width_formula": "35", "height_formula": "35",
                 "quantity": 4, "is_door": False, "is_hardware": True},
            ],
            "hardware_requirements": [
                {"id": "hinge", "name": "Hinge", "unit_scope": "per_door",
                 "units_per_scope": 2},
                {"id": "handle", "name": "Handle", "unit_scope": "per_door",
                 "units_per_scope": 1},
            ],
        },
        {
            "id": "tall-2400",
            "name": "Pantry 2400",
            "default_width_mm": 600,
            "default_height_mm": 2400,
            "default_depth_mm": 580,
            "door_count": 1,
            "parts": [
                {"name": "Back", "width_formula": "width", "height_formula": "height",
                 "is_door": False, "is_hardware": False},
                {"name": "Side", "width_formula": "depth", "height_formula": "height",
                 "quantity": 2, "is_door": False, "is_hardware": False},
                {"name": "Door", "width_formula": "width - 4",
                 "height_formula": "height - 4", "is_door": True,
                 "is_hardware": False},
            ],
        },
    ],
    "door_styles": [
        {"id": "shaker", "name": "Shaker", "rate_per_sqm": 40, "density": 14,
         "weight_factor": 1.1},
    ],
    "hardware_catalog": {"hinge": 8.5, "handle": 12.0},
    "hardware_brands": {"premium": {"hinge": 15.0}},
    "line_items": [
        {"cabinet_type": "base-600", "quantity": 2, "door_style": "shaker"},
        {"cabinet_type": "base-600", "width_mm": 900, "name": "Sink base"},
    ],
}


@pytest.fixture
def quote_data() -> dict[str, Any]:
    """A valid quote request as a dict (deep copy, safe to mutate)."""
    return copy.deepcopy(QUOTE_DATA)


@pytest.fixture
def quote_file(tmp_path: Path, quote_data: dict[str, Any]) -> Path:
    """The valid quote request written to a temporary JSON file."""
    path = tmp_path / "quote.json"
    path.write_text(json.dumps(quote_data), encoding="utf-8")
    return path
