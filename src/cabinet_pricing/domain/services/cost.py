"""Cost aggregation for resolved cabinet parts."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from ..value_objects import (
    CostBreakdown,
    GlobalSettings,
    PartCategory,
    PricingError,
    RateSet,
    ResolvedPart,
)

__all__ = ["CostCalculator", "category_area", "round_money"]

logger = logging.getLogger(__name__)


def round_money(value: float) -> float:
    """Round half-up to 2 decimal places."""
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def category_area(parts: Sequence[ResolvedPart], category: PartCategory) -> float:
    """Total area in m² of the parts tagged with ``category``."""
    return sum(part.area_m2 for part in parts if part.category is category)


class CostCalculator:
    """Prices a cabinet line from its resolved parts.

    Intermediate sums are kept at full precision; only the reported
    breakdown fields are rounded.
    """

    def price(
        self,
        resolved_parts: Sequence[ResolvedPart],
        rates: RateSet,
        hardware_cost: float,
        settings: GlobalSettings,
    ) -> CostBreakdown:
        """Compute the cost breakdown.

        Args:
            resolved_parts: Parts resolved for the whole line.
            rates: Material and door rates per square metre.
            hardware_cost: Cost of the line's hardware.
            settings: Wastage and GST settings.

        Returns:
            Fully computed breakdown.

        Raises:
            PricingError: If any figure comes out negative.
        """
        if hardware_cost < 0:
            raise PricingError(f"Hardware cost is negative ({hardware_cost:.2f})")

        carcass_area = category_area(resolved_parts, PartCategory.CARCASS)
        door_area = category_area(resolved_parts, PartCategory.DOOR)

        carcass = carcass_area * rates.material_rate_per_sqm
        doors = door_area * rates.door_rate_per_sqm
        surcharges = door_area * rates.color_surcharge_per_sqm

        subtotal = carcass + doors + hardware_cost
        subtotal_with_wastage = subtotal * (1 + settings.wastage_factor)
        total = subtotal_with_wastage * (1 + settings.gst_rate)

        logger.debug(
            "Carcass %.4f m² x %.2f = %.2f; doors %.4f m² x %.2f = %.2f; hardware %.2f",
            carcass_area,
            rates.material_rate_per_sqm,
            carcass,
            door_area,
            rates.door_rate_per_sqm,
            doors,
            hardware_cost,
        )

        if total < 0:
            raise PricingError(f"Computed total is negative ({total:.2f})")

        return CostBreakdown(
            carcass=round_money(carcass),
            doors=round_money(doors),
            hardware=round_money(hardware_cost),
            surcharges=round_money(surcharges),
            subtotal=round_money(subtotal),
            wastage=round_money(subtotal_with_wastage - subtotal),
            gst=round_money(total - subtotal_with_wastage),
            total=round_money(total),
        )
