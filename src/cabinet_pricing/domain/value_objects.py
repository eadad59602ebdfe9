"""Value objects for the pricing domain.

All classes are frozen dataclasses so that a calculation can never mutate
the reference data it was handed. Dimensions are in millimetres, areas in
square metres, weights in kilograms and money in the request currency.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

__all__ = [
    "DEFAULT_CARCASS_DENSITY",
    "DEFAULT_DOOR_DENSITY",
    "DEFAULT_THICKNESS_MM",
    "CabinetDimensions",
    "CostBreakdown",
    "DoorStyleSpec",
    "GlobalSettings",
    "PartCategory",
    "PricingError",
    "RateSet",
    "ResolvedPart",
    "UnitScope",
    "WeightBreakdown",
]

# Board weight in kg/m² used when neither the part nor the cabinet type
# carries a density.
DEFAULT_CARCASS_DENSITY = 12.0
DEFAULT_DOOR_DENSITY = 12.0
DEFAULT_THICKNESS_MM = 18.0


class PricingError(Exception):
    """Raised when pricing inputs are inconsistent or produce invalid output."""


class PartCategory(str, Enum):
    """Bucket a resolved part is priced and weighed in."""

    CARCASS = "carcass"
    DOOR = "door"
    HARDWARE = "hardware"

    @property
    def label(self) -> str:
        """Display label used in reports and exports."""
        return self.value.capitalize()


class UnitScope(str, Enum):
    """Counting basis for a hardware requirement."""

    PER_CABINET = "per_cabinet"
    PER_DOOR = "per_door"
    PER_DRAWER = "per_drawer"
    CUSTOM = "custom"


@dataclass(frozen=True)
class CabinetDimensions:
    """Concrete dimensions of a configured cabinet in millimetres.

    The corner-cabinet variants default to the main width/depth when
    they are not given.
    """

    width: float
    height: float
    depth: float
    left_width: float | None = None
    right_width: float | None = None
    left_depth: float | None = None
    right_depth: float | None = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("All dimensions must be positive")

    @property
    def face_area_mm2(self) -> float:
        """Front face area (width x height) in square millimetres."""
        return self.width * self.height

    def bindings(self, qty: int) -> dict[str, float]:
        """Variables available to part formulas for these dimensions."""
        return {
            "width": self.width,
            "height": self.height,
            "depth": self.depth,
            "left_width": self.left_width or self.width,
            "right_width": self.right_width or self.width,
            "left_depth": self.left_depth or self.depth,
            "right_depth": self.right_depth or self.depth,
            "qty": float(qty),
            "w": self.width,
            "h": self.height,
            "d": self.depth,
        }


@dataclass(frozen=True)
class RateSet:
    """Per square metre rates supplied with a pricing request."""

    material_rate_per_sqm: float
    finish_rate_per_sqm: float = 0.0
    door_style_rate_per_sqm: float = 0.0
    color_surcharge_per_sqm: float = 0.0

    def __post_init__(self) -> None:
        for name in (
            "material_rate_per_sqm",
            "finish_rate_per_sqm",
            "door_style_rate_per_sqm",
            "color_surcharge_per_sqm",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    @property
    def door_rate_per_sqm(self) -> float:
        """Combined door rate: finish + door style + colour surcharge."""
        return (
            self.finish_rate_per_sqm
            + self.door_style_rate_per_sqm
            + self.color_surcharge_per_sqm
        )


@dataclass(frozen=True)
class GlobalSettings:
    """Process-wide pricing settings, built once per request.

    Attributes:
        wastage_factor: Fraction added to the subtotal for offcuts (0.05 = 5%).
        gst_rate: Goods and services tax fraction applied last.
        hardware_markup_pct: Percentage markup on hardware catalog cost.
        hardware_discount_pct: Percentage discount after markup.
        hmr_rate_per_sqm: Default carcass board rate when a request has none.
        hardware_fallback_unit_cost: Unit cost for requirements missing from
            the hardware catalog.
        strict_formulas: Raise on bad part formulas instead of using 0.
    """

    wastage_factor: float = 0.05
    gst_rate: float = 0.10
    hardware_markup_pct: float = 35.0
    hardware_discount_pct: float = 0.0
    hmr_rate_per_sqm: float = 85.0
    hardware_fallback_unit_cost: float = 45.0
    strict_formulas: bool = False

    def __post_init__(self) -> None:
        if self.wastage_factor < 0:
            raise ValueError("wastage_factor must be non-negative")
        if self.gst_rate < 0:
            raise ValueError("gst_rate must be non-negative")
        if self.hardware_markup_pct < 0:
            raise ValueError("hardware_markup_pct must be non-negative")
        if not 0 <= self.hardware_discount_pct <= 100:
            raise ValueError("hardware_discount_pct must be between 0 and 100")
        if self.hmr_rate_per_sqm < 0:
            raise ValueError("hmr_rate_per_sqm must be non-negative")
        if self.hardware_fallback_unit_cost < 0:
            raise ValueError("hardware_fallback_unit_cost must be non-negative")


@dataclass(frozen=True)
class DoorStyleSpec:
    """Physical properties of a door style used for weight estimates."""

    name: str
    density: float | None = None
    weight_factor: float | None = None
    thickness_mm: float | None = None

    def __post_init__(self) -> None:
        if self.density is not None and self.density < 0:
            raise ValueError("Door style density must be non-negative")
        if self.weight_factor is not None and self.weight_factor < 0:
            raise ValueError("Door style weight factor must be non-negative")
        if self.thickness_mm is not None and self.thickness_mm <= 0:
            raise ValueError("Door style thickness must be positive")


@dataclass(frozen=True)
class ResolvedPart:
    """A part with concrete geometry for one configured cabinet line.

    Attributes:
        name: Part name from the cabinet type definition.
        width_mm: Resolved width of a single piece.
        height_mm: Resolved height of a single piece.
        quantity: Pieces across the whole line (part qty x cabinet qty).
        area_m2: Area of all pieces in square metres.
        category: Bucket the part is priced and weighed in.
        per_cabinet_quantity: Pieces needed for a single cabinet.
        thickness_mm: Board thickness of the piece.
        density: Effective board weight in kg/m².
        weight_multiplier: Extra factor applied to the weight.
        source: Name of the cabinet line the part came from.
    """

    name: str
    width_mm: float
    height_mm: float
    quantity: int
    area_m2: float
    category: PartCategory
    per_cabinet_quantity: int = 1
    thickness_mm: float = DEFAULT_THICKNESS_MM
    density: float = DEFAULT_CARCASS_DENSITY
    weight_multiplier: float = 1.0
    source: str = ""

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("Resolved quantity must be non-negative")
        if self.area_m2 < 0:
            raise ValueError("Resolved area must be non-negative")

    @property
    def unit_area_m2(self) -> float:
        """Area of a single piece in square metres."""
        return (self.width_mm / 1000) * (self.height_mm / 1000)

    @property
    def per_cabinet_area_m2(self) -> float:
        """Area of this part needed for a single cabinet."""
        return self.unit_area_m2 * self.per_cabinet_quantity

    @property
    def label(self) -> str:
        """Name prefixed with its cabinet line when known."""
        return f"{self.source} - {self.name}" if self.source else self.name

    def instances(self) -> list[ResolvedPart]:
        """Expand into single-piece parts, one per physical instance."""
        single = replace(
            self,
            quantity=1,
            per_cabinet_quantity=1,
            area_m2=self.unit_area_m2,
        )
        return [single] * self.quantity


def _check_non_negative(owner: str, values: dict[str, float]) -> None:
    for name, value in values.items():
        if value < 0:
            raise PricingError(
                f"{owner}.{name} is negative ({value:.2f}); check rates and part data"
            )


@dataclass(frozen=True)
class CostBreakdown:
    """Priced result for one cabinet line, rounded for display.

    ``surcharges`` is the colour surcharge share of ``doors`` and is not
    added to the total a second time.
    """

    carcass: float
    doors: float
    hardware: float
    surcharges: float
    subtotal: float
    wastage: float
    gst: float
    total: float

    def __post_init__(self) -> None:
        _check_non_negative(
            "CostBreakdown",
            {
                "carcass": self.carcass,
                "doors": self.doors,
                "hardware": self.hardware,
                "surcharges": self.surcharges,
                "subtotal": self.subtotal,
                "wastage": self.wastage,
                "gst": self.gst,
                "total": self.total,
            },
        )


@dataclass(frozen=True)
class WeightBreakdown:
    """Estimated weight of one cabinet line in kilograms.

    Category fields are per cabinet; ``total`` covers the whole line.
    """

    carcass: float
    doors: float
    hardware: float
    total: float
    carcass_volume_m3: float = 0.0
    doors_volume_m3: float = 0.0

    def __post_init__(self) -> None:
        _check_non_negative(
            "WeightBreakdown",
            {
                "carcass": self.carcass,
                "doors": self.doors,
                "hardware": self.hardware,
                "total": self.total,
            },
        )

    @property
    def per_cabinet(self) -> float:
        """Weight of a single cabinet."""
        return self.carcass + self.doors + self.hardware
