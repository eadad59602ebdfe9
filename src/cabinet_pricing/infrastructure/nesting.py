"""Sheet nesting estimate for packaging and shipping.

This module places resolved parts onto fixed-size stock sheets with a
single greedy pass. It is a logistics estimator, not a cut optimiser:
parts are taken in input order and a sheet is closed once the next part
would push its filled area past the target efficiency.

All result dataclasses are frozen (immutable).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from cabinet_pricing.domain.value_objects import PartCategory, ResolvedPart

__all__ = [
    "DEFAULT_TARGET_EFFICIENCY",
    "ExcludedPart",
    "NestingResult",
    "PACKAGE_PADDING_KG",
    "PACKAGE_PADDING_MM",
    "SheetConfig",
    "SheetLayout",
    "SheetNestingOptimizer",
    "ShippingPackage",
    "estimate_packages",
    "nest",
]

logger = logging.getLogger(__name__)

DEFAULT_TARGET_EFFICIENCY = 0.85

# Allowance for wrapping and pallet per shipped sheet stack
PACKAGE_PADDING_MM = 100.0
PACKAGE_PADDING_KG = 5.0


@dataclass(frozen=True)
class SheetConfig:
    """Stock sheet dimensions in millimetres.

    Attributes:
        width_mm: Sheet width (default 2400).
        height_mm: Sheet height (default 1200).
    """

    width_mm: float = 2400.0
    height_mm: float = 1200.0

    def __post_init__(self) -> None:
        if self.width_mm <= 0:
            raise ValueError("Sheet width must be positive")
        if self.height_mm <= 0:
            raise ValueError("Sheet height must be positive")

    @property
    def area_m2(self) -> float:
        """Sheet area in square metres."""
        return (self.width_mm / 1000) * (self.height_mm / 1000)

    def fits(self, part: ResolvedPart) -> bool:
        """True if the part lies within the sheet bounds as given."""
        return part.width_mm <= self.width_mm and part.height_mm <= self.height_mm


@dataclass(frozen=True)
class SheetLayout:
    """Parts assigned to one stock sheet.

    Attributes:
        sheet_number: One-based sheet number in the result.
        parts: Placed part instances, in placement order.
        area_used_m2: Summed area of the placed parts.
        efficiency: Fraction of the sheet area used.
        stack_height_mm: Thickest part on the sheet.
        total_weight_kg: Summed weight of the placed parts.
    """

    sheet_number: int
    parts: tuple[ResolvedPart, ...]
    area_used_m2: float
    efficiency: float
    stack_height_mm: float
    total_weight_kg: float

    def __post_init__(self) -> None:
        if self.sheet_number < 1:
            raise ValueError("Sheet number must be at least 1")

    @property
    def efficiency_pct(self) -> float:
        """Efficiency as a percentage."""
        return self.efficiency * 100

    @property
    def part_count(self) -> int:
        return len(self.parts)


@dataclass(frozen=True)
class ExcludedPart:
    """A part instance left out of nesting, with the reason."""

    part: ResolvedPart
    reason: str


@dataclass(frozen=True)
class NestingResult:
    """Complete result of a nesting run.

    Attributes:
        layouts: Sheet layouts in the order they were filled.
        excluded: Part instances not placed on any sheet.
        sheet_config: Sheet dimensions used.
        target_efficiency: Fill threshold used.
    """

    layouts: tuple[SheetLayout, ...]
    excluded: tuple[ExcludedPart, ...] = ()
    sheet_config: SheetConfig = field(default_factory=SheetConfig)
    target_efficiency: float = DEFAULT_TARGET_EFFICIENCY

    @property
    def sheet_count(self) -> int:
        return len(self.layouts)

    @property
    def placed_count(self) -> int:
        """Total part instances placed across all sheets."""
        return sum(layout.part_count for layout in self.layouts)

    @property
    def diagnostics(self) -> list[str]:
        """Human-readable note for every excluded instance."""
        return [f"{item.part.label}: {item.reason}" for item in self.excluded]

    @property
    def total_weight_kg(self) -> float:
        return sum(layout.total_weight_kg for layout in self.layouts)

    @property
    def average_efficiency(self) -> float:
        if not self.layouts:
            return 0.0
        return sum(layout.efficiency for layout in self.layouts) / len(self.layouts)


@dataclass(frozen=True)
class ShippingPackage:
    """Logistics package for one sheet layout."""

    sheet_number: int
    length_mm: float
    width_mm: float
    height_mm: float
    weight_kg: float
    efficiency: float

    @property
    def volume_m3(self) -> float:
        return (self.length_mm * self.width_mm * self.height_mm) / 1_000_000_000


@dataclass
class _SheetState:
    """Sheet being filled during a nesting pass."""

    parts: list[ResolvedPart] = field(default_factory=list)
    area_used: float = 0.0
    stack_height: float = 0.0
    total_weight: float = 0.0

    def add(self, part: ResolvedPart) -> None:
        self.parts.append(part)
        self.area_used += part.area_m2
        self.stack_height = max(self.stack_height, part.thickness_mm)
        self.total_weight += part.area_m2 * part.density

    def close(self, sheet_number: int, sheet_area: float) -> SheetLayout:
        return SheetLayout(
            sheet_number=sheet_number,
            parts=tuple(self.parts),
            area_used_m2=self.area_used,
            efficiency=self.area_used / sheet_area,
            stack_height_mm=self.stack_height,
            total_weight_kg=self.total_weight,
        )


class SheetNestingOptimizer:
    """Greedy, order-preserving sheet filler.

    Attributes:
        sheet_config: Stock sheet dimensions.
        target_efficiency: Maximum fraction of a sheet filled before a new
            sheet is started.
    """

    def __init__(
        self,
        sheet_config: SheetConfig | None = None,
        target_efficiency: float = DEFAULT_TARGET_EFFICIENCY,
    ) -> None:
        if not 0 < target_efficiency <= 1:
            raise ValueError("Target efficiency must be in (0, 1]")
        self.sheet_config = sheet_config or SheetConfig()
        self.target_efficiency = target_efficiency

    def nest(self, resolved_parts: Sequence[ResolvedPart]) -> NestingResult:
        """Assign every sheet-material part instance to a sheet.

        Parts are processed in input order. Instances that exceed the
        sheet bounds, hardware and parts with no area are excluded and
        reported; they still count in cost and weight.
        """
        sheet_area = self.sheet_config.area_m2
        budget = sheet_area * self.target_efficiency

        layouts: list[SheetLayout] = []
        excluded: list[ExcludedPart] = []
        current = _SheetState()

        for resolved in resolved_parts:
            for part in resolved.instances():
                reason = self._exclusion_reason(part)
                if reason is not None:
                    excluded.append(ExcludedPart(part, reason))
                    logger.debug("Excluded %s from nesting: %s", part.label, reason)
                    continue

                if current.parts and current.area_used + part.area_m2 > budget:
                    layouts.append(current.close(len(layouts) + 1, sheet_area))
                    current = _SheetState()

                if part.area_m2 > budget:
                    logger.info(
                        "%s (%.3f m²) exceeds the %.0f%% fill target on its own",
                        part.label,
                        part.area_m2,
                        self.target_efficiency * 100,
                    )
                current.add(part)

        if current.parts:
            layouts.append(current.close(len(layouts) + 1, sheet_area))

        if excluded:
            logger.warning(
                "%d part instance(s) excluded from nesting", len(excluded)
            )
        logger.info(
            "Nested %d part instance(s) onto %d sheet(s) of %.0f x %.0f mm",
            sum(layout.part_count for layout in layouts),
            len(layouts),
            self.sheet_config.width_mm,
            self.sheet_config.height_mm,
        )
        return NestingResult(
            layouts=tuple(layouts),
            excluded=tuple(excluded),
            sheet_config=self.sheet_config,
            target_efficiency=self.target_efficiency,
        )

    def _exclusion_reason(self, part: ResolvedPart) -> str | None:
        if part.category is PartCategory.HARDWARE:
            return "hardware is not sheet material"
        if part.width_mm <= 0 or part.height_mm <= 0:
            return "part has no area"
        if not self.sheet_config.fits(part):
            return (
                f"{part.width_mm:.0f} x {part.height_mm:.0f} mm exceeds sheet "
                f"{self.sheet_config.width_mm:.0f} x {self.sheet_config.height_mm:.0f} mm"
            )
        return None


def nest(
    resolved_parts: Sequence[ResolvedPart],
    sheet_width_mm: float = 2400.0,
    sheet_height_mm: float = 1200.0,
    target_efficiency: float = DEFAULT_TARGET_EFFICIENCY,
) -> list[SheetLayout]:
    """Nest parts and return only the sheet layouts."""
    optimizer = SheetNestingOptimizer(
        SheetConfig(width_mm=sheet_width_mm, height_mm=sheet_height_mm),
        target_efficiency,
    )
    return list(optimizer.nest(resolved_parts).layouts)


def estimate_packages(
    result: NestingResult,
    padding_mm: float = PACKAGE_PADDING_MM,
    padding_kg: float = PACKAGE_PADDING_KG,
) -> list[ShippingPackage]:
    """One shipping package per sheet layout, with packaging allowance."""
    return [
        ShippingPackage(
            sheet_number=layout.sheet_number,
            length_mm=result.sheet_config.width_mm,
            width_mm=result.sheet_config.height_mm,
            height_mm=layout.stack_height_mm + padding_mm,
            weight_kg=layout.total_weight_kg + padding_kg,
            efficiency=layout.efficiency,
        )
        for layout in result.layouts
    ]
