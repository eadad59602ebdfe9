"""Weight estimation for resolved cabinet parts.

Mirrors the cost pipeline, using board density in place of rate. Hardware
weight is a size-scaled estimate, not a measured value.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..entities import CabinetType
from ..value_objects import (
    DEFAULT_DOOR_DENSITY,
    CabinetDimensions,
    DoorStyleSpec,
    PartCategory,
    ResolvedPart,
    WeightBreakdown,
)

__all__ = [
    "BASE_HARDWARE_WEIGHT_KG",
    "REFERENCE_CABINET_AREA_MM2",
    "WeightCalculator",
]

logger = logging.getLogger(__name__)

# Hinges, handles and fixings of a 600 x 720 mm cabinet
BASE_HARDWARE_WEIGHT_KG = 2.5
REFERENCE_CABINET_AREA_MM2 = 600 * 720


class WeightCalculator:
    """Estimates the weight of a cabinet line."""

    def weigh(
        self,
        resolved_parts: Sequence[ResolvedPart],
        cabinet_type: CabinetType,
        door_style: DoorStyleSpec | None = None,
        qty: int = 1,
        dimensions: CabinetDimensions | None = None,
    ) -> WeightBreakdown:
        """Compute the weight breakdown.

        Category weights are computed per cabinet from each part's
        per-cabinet area; the total is multiplied by ``qty``. Doors always
        use the door style's density, as the resolver assigns it.

        Args:
            resolved_parts: Parts resolved for the line.
            cabinet_type: Supplies the default carcass density.
            door_style: Door density and weight factor, if a style is chosen.
            qty: Number of cabinets on the line.
            dimensions: Cabinet size used to scale the hardware estimate;
                defaults to the cabinet type's default size.
        """
        if qty < 0:
            raise ValueError("Cabinet quantity must be non-negative")
        dims = dimensions or cabinet_type.dimensions()

        door_density = DEFAULT_DOOR_DENSITY
        door_factor = 1.0
        if door_style is not None:
            if door_style.density is not None:
                door_density = door_style.density
            if door_style.weight_factor is not None:
                door_factor = door_style.weight_factor

        carcass = 0.0
        doors = 0.0
        hardware_quantity = 0
        carcass_volume = 0.0
        doors_volume = 0.0

        for part in resolved_parts:
            area = part.per_cabinet_area_m2
            if part.category is PartCategory.CARCASS:
                carcass += area * part.density * part.weight_multiplier
                carcass_volume += area * part.thickness_mm / 1000
            elif part.category is PartCategory.DOOR:
                doors += area * door_density * door_factor
                doors_volume += area * part.thickness_mm / 1000
            else:
                hardware_quantity += part.per_cabinet_quantity

        size_multiplier = dims.face_area_mm2 / REFERENCE_CABINET_AREA_MM2
        hardware = BASE_HARDWARE_WEIGHT_KG * size_multiplier * hardware_quantity

        total = (carcass + doors + hardware) * qty
        logger.debug(
            "%s weight: carcass %.2f kg, doors %.2f kg, hardware %.2f kg, x%d = %.2f kg",
            cabinet_type.name,
            carcass,
            doors,
            hardware,
            qty,
            total,
        )
        return WeightBreakdown(
            carcass=carcass,
            doors=doors,
            hardware=hardware,
            total=total,
            carcass_volume_m3=carcass_volume,
            doors_volume_m3=doors_volume,
        )
