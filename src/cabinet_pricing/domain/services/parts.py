"""Resolution of part formulas into concrete geometry."""

from __future__ import annotations

import logging
from typing import Sequence

from ..entities import CabinetType, Part
from ..value_objects import (
    DEFAULT_CARCASS_DENSITY,
    DEFAULT_DOOR_DENSITY,
    DEFAULT_THICKNESS_MM,
    CabinetDimensions,
    DoorStyleSpec,
    PartCategory,
    ResolvedPart,
)
from .formula import FormulaEvaluator

__all__ = ["CARCASS_NAME_KEYWORDS", "PartDimensionResolver", "categorize_part"]

logger = logging.getLogger(__name__)

# Name fragments that identify carcass parts on legacy records without flags
CARCASS_NAME_KEYWORDS: tuple[str, ...] = ("back", "bottom", "side")
DOOR_NAME_KEYWORDS: tuple[str, ...] = ("door", "drawer front")


def categorize_part(part: Part) -> PartCategory:
    """Decide which pricing bucket a part belongs to.

    Explicit flags win: hardware first, then door. Parts with no flags at
    all are matched by name, case-insensitively. This is the only place a
    part's category is decided; calculators read the resulting tag.
    """
    if part.is_hardware:
        return PartCategory.HARDWARE
    if part.is_door:
        return PartCategory.DOOR
    if part.has_explicit_flags:
        return PartCategory.CARCASS

    name = part.name.lower()
    if any(keyword in name for keyword in CARCASS_NAME_KEYWORDS):
        return PartCategory.CARCASS
    if any(keyword in name for keyword in DOOR_NAME_KEYWORDS):
        return PartCategory.DOOR
    logger.debug("Legacy part %r has no category flags, treating as carcass", part.name)
    return PartCategory.CARCASS


class PartDimensionResolver:
    """Turns part formulas and cabinet dimensions into resolved parts."""

    def __init__(self, evaluator: FormulaEvaluator | None = None) -> None:
        self.evaluator = evaluator or FormulaEvaluator()

    def resolve(
        self,
        parts: Sequence[Part],
        dims: CabinetDimensions,
        qty: int,
        cabinet_type: CabinetType | None = None,
        door_style: DoorStyleSpec | None = None,
        source: str = "",
    ) -> list[ResolvedPart]:
        """Resolve every part for ``qty`` cabinets of the given dimensions.

        Args:
            parts: Part templates of the cabinet type.
            dims: Concrete cabinet dimensions in millimetres.
            qty: Number of cabinets on the line.
            cabinet_type: Supplies the default carcass density.
            door_style: Supplies density and thickness for door parts.
            source: Line name recorded on each resolved part.

        Returns:
            One resolved part per input part, in input order.
        """
        if qty < 0:
            raise ValueError("Cabinet quantity must be non-negative")

        bindings = dims.bindings(qty)
        resolved: list[ResolvedPart] = []
        for part in parts:
            width_mm = self.evaluator.evaluate(part.width_formula, bindings)
            height_mm = self.evaluator.evaluate(part.height_formula, bindings)
            if width_mm <= 0 or height_mm <= 0:
                logger.warning(
                    "Part %r resolved to %.1f x %.1f mm; it will carry no area",
                    part.name,
                    width_mm,
                    height_mm,
                )
                width_mm = max(width_mm, 0.0)
                height_mm = max(height_mm, 0.0)

            category = categorize_part(part)
            quantity = part.quantity * qty
            area_m2 = (width_mm / 1000) * (height_mm / 1000) * quantity
            density, thickness = self._material_for(
                part, category, cabinet_type, door_style
            )

            resolved.append(
                ResolvedPart(
                    name=part.name,
                    width_mm=width_mm,
                    height_mm=height_mm,
                    quantity=quantity,
                    area_m2=area_m2,
                    category=category,
                    per_cabinet_quantity=part.quantity,
                    thickness_mm=thickness,
                    density=density,
                    weight_multiplier=(
                        1.0 if part.weight_multiplier is None else part.weight_multiplier
                    ),
                    source=source,
                )
            )
            logger.debug(
                "Resolved %s: %.1f x %.1f mm x %d = %.4f m² (%s)",
                part.name,
                width_mm,
                height_mm,
                quantity,
                area_m2,
                category.value,
            )
        return resolved

    @staticmethod
    def _material_for(
        part: Part,
        category: PartCategory,
        cabinet_type: CabinetType | None,
        door_style: DoorStyleSpec | None,
    ) -> tuple[float, float]:
        """Effective (density, thickness) for a part.

        Door density always comes from the door style, matching
        :class:`WeightCalculator`; a part's own density only applies to
        carcass and hardware parts.
        """
        if category is PartCategory.DOOR and door_style is not None:
            density = (
                door_style.density
                if door_style.density is not None
                else DEFAULT_DOOR_DENSITY
            )
            thickness = door_style.thickness_mm or DEFAULT_THICKNESS_MM
        elif category is PartCategory.DOOR:
            density = DEFAULT_DOOR_DENSITY
            thickness = DEFAULT_THICKNESS_MM
        else:
            density = (
                cabinet_type.density if cabinet_type is not None else DEFAULT_CARCASS_DENSITY
            )
            thickness = DEFAULT_THICKNESS_MM

        if part.density is not None and category is not PartCategory.DOOR:
            density = part.density
        if part.thickness_mm is not None:
            thickness = part.thickness_mm
        return density, thickness
