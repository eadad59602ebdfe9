"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cabinet_pricing.domain import (
    CabinetDimensions,
    CabinetType,
    CostBreakdown,
    HardwareResolution,
    ResolvedPart,
    WeightBreakdown,
)
from cabinet_pricing.domain.services.cost import round_money

if TYPE_CHECKING:
    from cabinet_pricing.infrastructure.nesting import NestingResult, ShippingPackage


@dataclass(frozen=True)
class LineItemQuote:
    """Priced result for one configured cabinet line."""

    name: str
    cabinet_type: CabinetType
    dimensions: CabinetDimensions
    quantity: int
    resolved_parts: tuple[ResolvedPart, ...]
    hardware: HardwareResolution
    cost: CostBreakdown
    weight: WeightBreakdown
    legacy_total: float | None = None

    @property
    def unit_price(self) -> float:
        """Total price divided over the cabinets on the line."""
        if self.quantity == 0:
            return 0.0
        return round_money(self.cost.total / self.quantity)

    @property
    def part_count(self) -> int:
        """Physical part instances on the line, hardware included."""
        return sum(part.quantity for part in self.resolved_parts)


@dataclass
class QuoteOutput:
    """Output of a quote run.

    ``errors`` is non-empty when the request could not be priced; the
    other fields are then empty.
    """

    line_items: list[LineItemQuote] = field(default_factory=list)
    nesting: NestingResult | None = None
    packages: list[ShippingPackage] = field(default_factory=list)
    currency: str = "AUD"
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def total_price(self) -> float:
        return round_money(sum(item.cost.total for item in self.line_items))

    @property
    def total_weight_kg(self) -> float:
        return sum(item.weight.total for item in self.line_items)

    @property
    def shipping_weight_kg(self) -> float:
        """Weight of all packages, packaging allowance included."""
        return sum(package.weight_kg for package in self.packages)

    @property
    def resolved_parts(self) -> list[ResolvedPart]:
        """Resolved parts of all lines, in line order."""
        return [part for item in self.line_items for part in item.resolved_parts]
