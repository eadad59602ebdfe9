"""Tests for domain value objects and entities."""

from __future__ import annotations

import pytest

from cabinet_pricing.domain import (
    CabinetDimensions,
    CabinetType,
    CostBreakdown,
    DoorStyleSpec,
    GlobalSettings,
    HardwareRequirement,
    Part,
    PartCategory,
    PricingError,
    RateSet,
    ResolvedPart,
    UnitScope,
)


class TestCabinetDimensions:
    """Tests for CabinetDimensions."""

    @pytest.mark.parametrize("width,height,depth", [(0, 720, 560), (600, -1, 560)])
    def test_rejects_non_positive(self, width: float, height: float, depth: float) -> None:
        with pytest.raises(ValueError):
            CabinetDimensions(width=width, height=height, depth=depth)

    def test_bindings(self) -> None:
        dims = CabinetDimensions(width=900, height=720, depth=560, right_depth=300)
        bindings = dims.bindings(2)
        assert bindings["width"] == bindings["w"] == 900
        assert bindings["left_width"] == 900
        assert bindings["right_depth"] == 300
        assert bindings["left_depth"] == 560
        assert bindings["qty"] == 2.0

    def test_face_area(self) -> None:
        assert CabinetDimensions(600, 720, 560).face_area_mm2 == 432_000


class TestRateSet:
    """Tests for RateSet."""

    def test_door_rate(self) -> None:
        rates = RateSet(45, finish_rate_per_sqm=60, door_style_rate_per_sqm=20,
                        color_surcharge_per_sqm=5)
        assert rates.door_rate_per_sqm == 85

    def test_negative_rate_rejected(self) -> None:
        with pytest.raises(ValueError, match="finish_rate_per_sqm"):
            RateSet(45, finish_rate_per_sqm=-1)


class TestGlobalSettings:
    """Tests for GlobalSettings."""

    def test_defaults(self) -> None:
        settings = GlobalSettings()
        assert settings.wastage_factor == 0.05
        assert settings.gst_rate == 0.10
        assert settings.hardware_markup_pct == 35.0
        assert settings.hmr_rate_per_sqm == 85.0

    @pytest.mark.parametrize(
        "field,value",
        [
            ("wastage_factor", -0.1),
            ("gst_rate", -0.1),
            ("hardware_markup_pct", -1),
            ("hardware_discount_pct", 101),
            ("hardware_fallback_unit_cost", -5),
        ],
    )
    def test_rejects_invalid(self, field: str, value: float) -> None:
        with pytest.raises(ValueError, match=field):
            GlobalSettings(**{field: value})


class TestDoorStyleSpec:
    """Tests for DoorStyleSpec."""

    def test_optional_properties(self) -> None:
        style = DoorStyleSpec("Slab")
        assert style.density is None
        assert style.weight_factor is None

    def test_rejects_zero_thickness(self) -> None:
        with pytest.raises(ValueError):
            DoorStyleSpec("Slab", thickness_mm=0)


class TestResolvedPart:
    """Tests for ResolvedPart."""

    def test_instances(self) -> None:
        part = ResolvedPart("Side", 560, 720, 3, 0.56 * 0.72 * 3, PartCategory.CARCASS,
                            source="Kitchen")
        instances = part.instances()
        assert len(instances) == 3
        assert all(p.quantity == 1 for p in instances)
        assert instances[0].area_m2 == pytest.approx(0.4032)
        assert instances[0].label == "Kitchen - Side"

    def test_zero_quantity_has_no_instances(self) -> None:
        part = ResolvedPart("Side", 560, 720, 0, 0.0, PartCategory.CARCASS)
        assert part.instances() == []

    def test_rejects_negative_area(self) -> None:
        with pytest.raises(ValueError):
            ResolvedPart("Side", 560, 720, 1, -0.1, PartCategory.CARCASS)

    def test_category_label(self) -> None:
        assert PartCategory.DOOR.label == "Door"


class TestCostBreakdown:
    """Tests for CostBreakdown."""

    def test_negative_value_raises_pricing_error(self) -> None:
        with pytest.raises(PricingError, match="CostBreakdown.doors"):
            CostBreakdown(
                carcass=1.0, doors=-2.0, hardware=0.0, surcharges=0.0,
                subtotal=0.0, wastage=0.0, gst=0.0, total=0.0,
            )


class TestEntities:
    """Tests for Part, HardwareRequirement and CabinetType."""

    def test_part_flags(self) -> None:
        assert not Part("Back", "w", "h").has_explicit_flags
        assert Part("Back", "w", "h", is_door=False).has_explicit_flags

    def test_part_rejects_empty_name(self) -> None:
        with pytest.raises(ValueError):
            Part("", "w", "h")

    def test_requirement_rejects_negative_units(self) -> None:
        with pytest.raises(ValueError):
            HardwareRequirement("hinge", "Hinge", UnitScope.PER_DOOR, -1)

    def test_cabinet_dimensions_use_defaults(self) -> None:
        cabinet = CabinetType("c", "C", 600, 720, 560, left_side_width_mm=900)
        dims = cabinet.dimensions(height=2100)
        assert (dims.width, dims.height, dims.depth) == (600, 2100, 560)
        assert dims.left_width == 900

    def test_cabinet_density_default(self) -> None:
        assert CabinetType("c", "C", 600, 720, 560).density == 12.0
        assert CabinetType("c", "C", 600, 720, 560, default_density=0).density == 0

    def test_cabinet_rejects_negative_door_count(self) -> None:
        with pytest.raises(ValueError):
            CabinetType("c", "C", 600, 720, 560, door_count=-1)
