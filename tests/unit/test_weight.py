"""Tests for weight estimation."""

from __future__ import annotations

import pytest

from cabinet_pricing.domain import (
    CabinetDimensions,
    CabinetType,
    DoorStyleSpec,
    Part,
    PartDimensionResolver,
    PricingError,
    WeightBreakdown,
    WeightCalculator,
)


def _resolve(cabinet: CabinetType, qty: int = 1, dims: CabinetDimensions | None = None,
             door_style: DoorStyleSpec | None = None):
    return PartDimensionResolver().resolve(
        cabinet.parts,
        dims or cabinet.dimensions(),
        qty,
        cabinet_type=cabinet,
        door_style=door_style,
    )


class TestWeightCalculator:
    """Tests for WeightCalculator.weigh."""

    def test_single_cabinet(self, base_cabinet: CabinetType) -> None:
        weight = WeightCalculator().weigh(_resolve(base_cabinet), base_cabinet)

        # 1.5744 m² of carcass at 12 kg/m²
        assert weight.carcass == pytest.approx(18.8928)
        # 2 doors of 0.297 x 0.716 m at 12 kg/m²
        assert weight.doors == pytest.approx(5.103648)
        # 4 hinges x 2.5 kg at the reference size
        assert weight.hardware == pytest.approx(10.0)
        assert weight.total == pytest.approx(18.8928 + 5.103648 + 10.0)

    def test_categories_are_per_cabinet_and_total_scales(
        self, base_cabinet: CabinetType
    ) -> None:
        one = WeightCalculator().weigh(_resolve(base_cabinet, 1), base_cabinet, qty=1)
        three = WeightCalculator().weigh(_resolve(base_cabinet, 3), base_cabinet, qty=3)

        assert three.carcass == pytest.approx(one.carcass)
        assert three.doors == pytest.approx(one.doors)
        assert three.per_cabinet == pytest.approx(one.per_cabinet)
        assert three.total == pytest.approx(one.total * 3)

    def test_door_style_density_and_factor(self, base_cabinet: CabinetType) -> None:
        style = DoorStyleSpec("Shaker", density=14.0, weight_factor=1.1)
        weight = WeightCalculator().weigh(
            _resolve(base_cabinet, door_style=style), base_cabinet, door_style=style
        )
        assert weight.doors == pytest.approx(0.425304 * 14.0 * 1.1)

    def test_door_weight_matches_resolved_density(self) -> None:
        """Sheet weights and the breakdown agree for a door with its own density."""
        cabinet = CabinetType(
            "c", "C", 600, 720, 560,
            parts=(Part("Door", "width", "height", density=30.0, is_door=True,
                        is_hardware=False),),
        )
        style = DoorStyleSpec("Shaker", density=14.0)
        resolved = _resolve(cabinet, door_style=style)
        weight = WeightCalculator().weigh(resolved, cabinet, door_style=style)

        assert resolved[0].density == 14.0
        assert weight.doors == pytest.approx(resolved[0].area_m2 * resolved[0].density)

    def test_cabinet_density_drives_carcass(self, base_parts: tuple[Part, ...]) -> None:
        cabinet = CabinetType("heavy", "Heavy", 600, 720, 560, default_density=20.0,
                              parts=base_parts)
        weight = WeightCalculator().weigh(_resolve(cabinet), cabinet)
        assert weight.carcass == pytest.approx(1.5744 * 20.0)

    def test_hardware_scales_with_face_area(self, base_cabinet: CabinetType) -> None:
        dims = base_cabinet.dimensions(width=900)
        weight = WeightCalculator().weigh(
            _resolve(base_cabinet, dims=dims), base_cabinet, dimensions=dims
        )
        # 900 x 720 is 1.5 times the 600 x 720 reference face
        assert weight.hardware == pytest.approx(2.5 * 1.5 * 4)

    def test_weight_multiplier(self) -> None:
        cabinet = CabinetType(
            "c", "C", 600, 720, 560,
            parts=(Part("Back", "width", "height", weight_multiplier=2.0,
                        is_door=False, is_hardware=False),),
        )
        weight = WeightCalculator().weigh(_resolve(cabinet), cabinet)
        assert weight.carcass == pytest.approx(0.432 * 12.0 * 2.0)

    def test_volumes(self, base_cabinet: CabinetType) -> None:
        weight = WeightCalculator().weigh(_resolve(base_cabinet), base_cabinet)
        assert weight.carcass_volume_m3 == pytest.approx(1.5744 * 0.018)
        assert weight.doors_volume_m3 == pytest.approx(0.425304 * 0.018)

    def test_zero_quantity(self, base_cabinet: CabinetType) -> None:
        weight = WeightCalculator().weigh(_resolve(base_cabinet, 0), base_cabinet, qty=0)
        assert weight.total == 0.0

    def test_negative_quantity_rejected(self, base_cabinet: CabinetType) -> None:
        with pytest.raises(ValueError):
            WeightCalculator().weigh([], base_cabinet, qty=-1)


class TestWeightBreakdown:
    """Tests for the WeightBreakdown value object."""

    def test_negative_component_raises(self) -> None:
        with pytest.raises(PricingError, match="carcass"):
            WeightBreakdown(carcass=-1.0, doors=0.0, hardware=0.0, total=0.0)

    def test_per_cabinet(self) -> None:
        weight = WeightBreakdown(carcass=10.0, doors=5.0, hardware=2.5, total=35.0)
        assert weight.per_cabinet == 17.5
