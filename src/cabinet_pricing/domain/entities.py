"""Reference entities describing what a cabinet is made of."""

from __future__ import annotations

from dataclasses import dataclass, field

from .value_objects import DEFAULT_CARCASS_DENSITY, CabinetDimensions, UnitScope

__all__ = ["CabinetType", "HardwareRequirement", "Part"]


@dataclass(frozen=True)
class Part:
    """A part template belonging to a cabinet type.

    Width and height are formulas over the cabinet dimensions, e.g.
    ``"width - 36"`` or ``"(height - 4) / 2"``. ``is_door`` and
    ``is_hardware`` are ``None`` for legacy parts created before the flags
    existed; those are categorised by name.
    """

    name: str
    width_formula: str
    height_formula: str
    quantity: int = 1
    is_door: bool | None = None
    is_hardware: bool | None = None
    density: float | None = None
    weight_multiplier: float | None = None
    thickness_mm: float | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Part name must not be empty")
        if self.quantity < 0:
            raise ValueError("Part quantity must be non-negative")
        if self.density is not None and self.density < 0:
            raise ValueError("Part density must be non-negative")
        if self.weight_multiplier is not None and self.weight_multiplier < 0:
            raise ValueError("Part weight multiplier must be non-negative")
        if self.thickness_mm is not None and self.thickness_mm <= 0:
            raise ValueError("Part thickness must be positive")

    @property
    def has_explicit_flags(self) -> bool:
        """True when at least one category flag was set on the part."""
        return self.is_door is not None or self.is_hardware is not None


@dataclass(frozen=True)
class HardwareRequirement:
    """Abstract hardware rule, e.g. two hinges per door."""

    id: str
    name: str
    unit_scope: UnitScope
    units_per_scope: float = 1.0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Hardware requirement id must not be empty")
        if self.units_per_scope < 0:
            raise ValueError("units_per_scope must be non-negative")


@dataclass(frozen=True)
class CabinetType:
    """Immutable catalog definition of a cabinet."""

    id: str
    name: str
    default_width_mm: float
    default_height_mm: float
    default_depth_mm: float
    door_count: int = 0
    drawer_count: int = 0
    category: str = "base"
    default_density: float | None = None
    left_side_width_mm: float | None = None
    right_side_width_mm: float | None = None
    left_side_depth_mm: float | None = None
    right_side_depth_mm: float | None = None
    parts: tuple[Part, ...] = field(default_factory=tuple)
    hardware_requirements: tuple[HardwareRequirement, ...] = field(
        default_factory=tuple
    )

    def __post_init__(self) -> None:
        if (
            self.default_width_mm <= 0
            or self.default_height_mm <= 0
            or self.default_depth_mm <= 0
        ):
            raise ValueError("Default dimensions must be positive")
        if self.door_count < 0 or self.drawer_count < 0:
            raise ValueError("Door and drawer counts must be non-negative")
        if self.default_density is not None and self.default_density < 0:
            raise ValueError("Default density must be non-negative")

    @property
    def density(self) -> float:
        """Carcass board weight in kg/m²."""
        if self.default_density is None:
            return DEFAULT_CARCASS_DENSITY
        return self.default_density

    def dimensions(
        self,
        width: float | None = None,
        height: float | None = None,
        depth: float | None = None,
    ) -> CabinetDimensions:
        """Concrete dimensions, using the type defaults for omitted values."""
        return CabinetDimensions(
            width=width or self.default_width_mm,
            height=height or self.default_height_mm,
            depth=depth or self.default_depth_mm,
            left_width=self.left_side_width_mm,
            right_width=self.right_side_width_mm,
            left_depth=self.left_side_depth_mm,
            right_depth=self.right_side_depth_mm,
        )
