"""Legacy parts-based pricing, kept for comparison only.

Before part formulas existed, cabinets were priced from fixed panel
shapes: backs and doors use the front face (width x height) while bottoms
and sides both use width x depth, all at the HMR board rate. Panel counts
start from 1 back, 1 bottom, 2 sides and the type's door count, and the
quantities of matching named parts are added on top. Quotes are produced
by the formula-driven pipeline in :mod:`.cost`; this module only explains
differences against old price lists and is never blended into a quote.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..entities import CabinetType, Part
from ..value_objects import CabinetDimensions, GlobalSettings, RateSet
from .cost import round_money

__all__ = ["LegacyPartsPricer", "LegacyQuantities", "PipelineComparison", "compare_pipelines"]


@dataclass(frozen=True)
class LegacyQuantities:
    backs: int
    bottoms: int
    sides: int
    doors: int


@dataclass(frozen=True)
class PipelineComparison:
    """Totals of both pipelines for the same configuration."""

    formula_total: float
    legacy_total: float

    @property
    def difference(self) -> float:
        """Formula total minus legacy total."""
        return round_money(self.formula_total - self.legacy_total)


class LegacyPartsPricer:
    """Reproduces the fixed-shape price formula."""

    def quantities(self, cabinet_type: CabinetType, parts: Sequence[Part]) -> LegacyQuantities:
        """Default panel counts plus the quantities of matching named parts.

        Only the ``is_door`` flag marks a door here; the name heuristic used
        by the formula pipeline does not apply.
        """

        def count(keyword: str) -> int:
            return sum(
                part.quantity
                for part in parts
                if keyword in part.name.lower() and not part.is_door
            )

        door_parts = sum(part.quantity for part in parts if part.is_door)
        return LegacyQuantities(
            backs=1 + count("back"),
            bottoms=1 + count("bottom"),
            sides=2 + count("side"),
            doors=cabinet_type.door_count + door_parts,
        )

    def price(
        self,
        cabinet_type: CabinetType,
        dims: CabinetDimensions,
        rates: RateSet,
        settings: GlobalSettings,
        hardware_cost: float = 0.0,
        qty: int = 1,
    ) -> float:
        """Legacy total for ``qty`` cabinets, GST included."""
        q = self.quantities(cabinet_type, cabinet_type.parts)
        width_m = dims.width / 1000
        height_m = dims.height / 1000
        depth_m = dims.depth / 1000
        hmr = settings.hmr_rate_per_sqm

        back_cost = width_m * height_m * q.backs * hmr
        bottom_cost = width_m * depth_m * q.bottoms * hmr
        side_cost = width_m * depth_m * q.sides * hmr
        door_cost = width_m * height_m * q.doors * rates.door_rate_per_sqm

        subtotal = (back_cost + bottom_cost + side_cost + door_cost) * qty + hardware_cost
        total = subtotal * (1 + settings.wastage_factor) * (1 + settings.gst_rate)
        return round_money(total)


def compare_pipelines(
    formula_total: float,
    cabinet_type: CabinetType,
    dims: CabinetDimensions,
    rates: RateSet,
    settings: GlobalSettings,
    hardware_cost: float = 0.0,
    qty: int = 1,
) -> PipelineComparison:
    """Report the legacy total next to a formula-driven total."""
    legacy_total = LegacyPartsPricer().price(
        cabinet_type, dims, rates, settings, hardware_cost, qty
    )
    return PipelineComparison(formula_total=formula_total, legacy_total=legacy_total)
