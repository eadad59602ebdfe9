"""Hardware requirement resolution.

Converts abstract rules such as "2 hinges per door" into unit counts for a
cabinet line and prices them from a brand catalog.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from ..entities import HardwareRequirement
from ..value_objects import UnitScope

__all__ = [
    "DEFAULT_HARDWARE_UNIT_COST",
    "HardwareRequirementResolver",
    "HardwareResolution",
    "scope_count",
]

logger = logging.getLogger(__name__)

# Unit cost used for requirements the selected catalog does not price.
DEFAULT_HARDWARE_UNIT_COST = 45.0


def scope_count(scope: UnitScope, door_count: int, drawer_count: int) -> int:
    """Number of scope units one cabinet has for the given counting basis."""
    if scope is UnitScope.PER_DOOR:
        return door_count
    if scope is UnitScope.PER_DRAWER:
        return drawer_count
    return 1


@dataclass(frozen=True)
class HardwareResolution:
    """Resolved hardware for one cabinet line.

    Attributes:
        units_by_requirement: Units needed, keyed by requirement id.
        base_cost: Catalog cost of all units.
        final_cost: Cost after markup and discount; this is what is priced.
        markup_pct: Markup applied on top of the catalog cost.
        discount_pct: Discount applied after markup.
        fallback_requirements: Requirement ids priced with the fallback cost.
    """

    units_by_requirement: dict[str, float]
    base_cost: float
    final_cost: float
    markup_pct: float = 0.0
    discount_pct: float = 0.0
    fallback_requirements: tuple[str, ...] = field(default_factory=tuple)

    @property
    def total_cost(self) -> float:
        """Sum of units times unit cost, before markup."""
        return self.base_cost

    @property
    def total_units(self) -> float:
        return sum(self.units_by_requirement.values())


class HardwareRequirementResolver:
    """Resolves hardware requirements into units and cost.

    Args:
        fallback_unit_cost: Unit cost for requirements with no catalog entry.
        markup_pct: Percentage markup applied to the catalog cost.
        discount_pct: Percentage discount applied after markup.
    """

    def __init__(
        self,
        fallback_unit_cost: float = DEFAULT_HARDWARE_UNIT_COST,
        markup_pct: float = 0.0,
        discount_pct: float = 0.0,
    ) -> None:
        if fallback_unit_cost < 0:
            raise ValueError("Fallback unit cost must be non-negative")
        self.fallback_unit_cost = fallback_unit_cost
        self.markup_pct = markup_pct
        self.discount_pct = discount_pct

    def resolve_hardware(
        self,
        requirements: Sequence[HardwareRequirement],
        door_count: int,
        drawer_count: int,
        qty: int,
        catalog: Mapping[str, float],
    ) -> HardwareResolution:
        """Compute units per requirement and their cost for ``qty`` cabinets."""
        units_by_requirement: dict[str, float] = {}
        fallbacks: list[str] = []
        base_cost = 0.0

        for requirement in requirements:
            count = scope_count(requirement.unit_scope, door_count, drawer_count)
            units_needed = requirement.units_per_scope * count * qty
            units_by_requirement[requirement.id] = (
                units_by_requirement.get(requirement.id, 0.0) + units_needed
            )

            if requirement.id in catalog:
                unit_cost = catalog[requirement.id]
            else:
                unit_cost = self.fallback_unit_cost
                fallbacks.append(requirement.id)
                logger.warning(
                    "No catalog price for hardware requirement %r, using fallback %.2f",
                    requirement.id,
                    unit_cost,
                )
            base_cost += units_needed * unit_cost
            logger.debug(
                "%s: %s x %d x %d = %s units @ %.2f",
                requirement.name,
                requirement.units_per_scope,
                count,
                qty,
                units_needed,
                unit_cost,
            )

        final_cost = (
            base_cost * (1 + self.markup_pct / 100) * (1 - self.discount_pct / 100)
        )
        return HardwareResolution(
            units_by_requirement=units_by_requirement,
            base_cost=base_cost,
            final_cost=final_cost,
            markup_pct=self.markup_pct,
            discount_pct=self.discount_pct,
            fallback_requirements=tuple(fallbacks),
        )
