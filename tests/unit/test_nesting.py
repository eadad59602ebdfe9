"""Tests for sheet nesting and shipping estimates.

Tests cover:
- Greedy, order-preserving sheet filling
- Efficiency bounds per sheet
- Exclusion of oversized, hardware and zero-area parts
- Package estimates per sheet
"""

from __future__ import annotations

import pytest

from cabinet_pricing.domain import CabinetType, PartCategory, PartDimensionResolver, ResolvedPart
from cabinet_pricing.infrastructure.nesting import (
    PACKAGE_PADDING_KG,
    PACKAGE_PADDING_MM,
    NestingResult,
    SheetConfig,
    SheetNestingOptimizer,
    estimate_packages,
    nest,
)


def _panel(name: str, width: float, height: float, qty: int = 1, **kwargs) -> ResolvedPart:
    return ResolvedPart(
        name=name,
        width_mm=width,
        height_mm=height,
        quantity=qty,
        area_m2=(width / 1000) * (height / 1000) * qty,
        category=kwargs.pop("category", PartCategory.CARCASS),
        per_cabinet_quantity=qty,
        **kwargs,
    )


class TestSheetConfig:
    """Tests for SheetConfig."""

    def test_defaults(self) -> None:
        config = SheetConfig()
        assert config.width_mm == 2400
        assert config.height_mm == 1200
        assert config.area_m2 == pytest.approx(2.88)

    @pytest.mark.parametrize("width,height", [(0, 1200), (2400, -1)])
    def test_rejects_non_positive(self, width: float, height: float) -> None:
        with pytest.raises(ValueError):
            SheetConfig(width_mm=width, height_mm=height)

    def test_fits(self) -> None:
        config = SheetConfig()
        assert config.fits(_panel("Side", 2400, 1200))
        assert not config.fits(_panel("Tall side", 580, 2400))


class TestSheetNestingOptimizer:
    """Tests for SheetNestingOptimizer.nest."""

    def test_rejects_bad_target(self) -> None:
        with pytest.raises(ValueError):
            SheetNestingOptimizer(target_efficiency=0)
        with pytest.raises(ValueError):
            SheetNestingOptimizer(target_efficiency=1.5)

    def test_empty_input(self) -> None:
        result = SheetNestingOptimizer().nest([])
        assert result.sheet_count == 0
        assert result.average_efficiency == 0.0

    def test_fills_multiple_sheets(self) -> None:
        """Two 1 m² panels fit the 85% budget of a 2.88 m² sheet."""
        result = SheetNestingOptimizer().nest([_panel("Panel", 1000, 1000, qty=10)])

        assert result.sheet_count == 5
        assert result.placed_count == 10
        assert [layout.part_count for layout in result.layouts] == [2, 2, 2, 2, 2]
        for layout in result.layouts:
            assert 0 < layout.efficiency <= 0.85

    def test_sheet_numbers_are_sequential(self) -> None:
        result = SheetNestingOptimizer().nest([_panel("Panel", 1000, 1000, qty=5)])
        assert [layout.sheet_number for layout in result.layouts] == [1, 2, 3]

    def test_input_order_is_preserved(self) -> None:
        parts = [_panel("A", 1000, 1000), _panel("B", 500, 500), _panel("C", 1200, 1000)]
        result = SheetNestingOptimizer().nest(parts)
        placed = [part.name for layout in result.layouts for part in layout.parts]
        assert placed == ["A", "B", "C"]
        # A + B = 1.25 m²; adding C (1.2 m²) would pass the 2.448 m² budget
        assert [part.name for part in result.layouts[0].parts] == ["A", "B"]

    def test_oversized_part_is_excluded_with_diagnostic(self) -> None:
        parts = [_panel("Pantry side", 580, 2400, qty=2), _panel("Shelf", 560, 500)]
        result = SheetNestingOptimizer().nest(parts)

        assert result.placed_count == 1
        assert len(result.excluded) == 2
        assert "exceeds sheet" in result.excluded[0].reason
        assert result.diagnostics[0].startswith("Pantry side:")

    def test_hardware_and_zero_area_are_excluded(self) -> None:
        parts = [
            _panel("Hinge", 35, 35, qty=4, category=PartCategory.HARDWARE),
            _panel("Filler", 0, 720),
            _panel("Back", 600, 720),
        ]
        result = SheetNestingOptimizer().nest(parts)
        assert result.placed_count == 1
        reasons = {item.reason for item in result.excluded}
        assert reasons == {"hardware is not sheet material", "part has no area"}
        assert len(result.excluded) == 5

    def test_lone_part_over_budget_gets_own_sheet(self) -> None:
        """A 2.64 m² panel fits the sheet but not the 85% target."""
        parts = [_panel("Small", 500, 500), _panel("Big", 2200, 1200), _panel("Small", 500, 500)]
        result = SheetNestingOptimizer().nest(parts)

        assert result.sheet_count == 3
        assert result.layouts[1].parts[0].name == "Big"
        assert result.layouts[1].efficiency == pytest.approx(2.64 / 2.88)

    def test_stack_height_is_thickest_part(self) -> None:
        parts = [
            _panel("Back", 600, 720, thickness_mm=16.0),
            _panel("Door", 300, 720, thickness_mm=22.0),
            _panel("Shelf", 560, 500, thickness_mm=18.0),
        ]
        result = SheetNestingOptimizer().nest(parts)
        assert result.layouts[0].stack_height_mm == 22.0

    def test_sheet_weight_uses_density(self) -> None:
        parts = [_panel("Back", 1000, 1000, density=12.0), _panel("Door", 500, 1000, density=14.0)]
        result = SheetNestingOptimizer().nest(parts)
        assert result.layouts[0].total_weight_kg == pytest.approx(12.0 + 7.0)
        assert result.total_weight_kg == pytest.approx(19.0)

    def test_custom_sheet_and_target(self) -> None:
        optimizer = SheetNestingOptimizer(SheetConfig(1000, 1000), target_efficiency=0.5)
        result = optimizer.nest([_panel("Panel", 500, 500, qty=4)])
        assert result.sheet_count == 2
        assert all(layout.efficiency == pytest.approx(0.5) for layout in result.layouts)

    def test_nests_resolved_cabinet(self, base_cabinet: CabinetType) -> None:
        resolved = PartDimensionResolver().resolve(
            base_cabinet.parts, base_cabinet.dimensions(), 1
        )
        result = SheetNestingOptimizer().nest(resolved)
        # Back, bottom, 2 sides and 2 doors; 4 hinges stay out
        assert result.sheet_count == 1
        assert result.placed_count == 6
        assert len(result.excluded) == 4
        assert result.layouts[0].area_used_m2 == pytest.approx(1.5744 + 0.425304)


class TestNestFunction:
    """Tests for the nest convenience function."""

    def test_returns_layouts(self) -> None:
        layouts = nest([_panel("Panel", 1000, 1000, qty=3)])
        assert len(layouts) == 2

    def test_custom_sheet(self) -> None:
        layouts = nest([_panel("Panel", 1000, 1000, qty=3)], 3000, 2000, 0.9)
        assert len(layouts) == 1


class TestEstimatePackages:
    """Tests for estimate_packages."""

    def test_one_package_per_sheet(self) -> None:
        result = SheetNestingOptimizer().nest(
            [_panel("Panel", 1000, 1000, qty=3, density=12.0)]
        )
        packages = estimate_packages(result)

        assert len(packages) == result.sheet_count
        first = packages[0]
        assert first.sheet_number == 1
        assert first.length_mm == 2400
        assert first.width_mm == 1200
        assert first.height_mm == 18.0 + PACKAGE_PADDING_MM
        assert first.weight_kg == pytest.approx(24.0 + PACKAGE_PADDING_KG)
        assert first.volume_m3 == pytest.approx(2.4 * 1.2 * 0.118)

    def test_custom_padding(self) -> None:
        result = SheetNestingOptimizer().nest([_panel("Panel", 1000, 1000)])
        package = estimate_packages(result, padding_mm=0, padding_kg=0)[0]
        assert package.height_mm == 18.0
        assert package.weight_kg == pytest.approx(12.0)

    def test_no_layouts(self) -> None:
        assert estimate_packages(NestingResult(layouts=())) == []
