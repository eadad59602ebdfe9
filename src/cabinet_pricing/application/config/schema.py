"""Pydantic configuration schema for quote requests.

A quote request carries everything the pricing engine needs: settings,
rates, cabinet type definitions with their parts and hardware rules, the
hardware catalog and the configured line items. It uses Pydantic v2 for
validation and serialization.

Unknown fields are rejected (``extra="forbid"``) so that typos in a
request surface as errors instead of silently using defaults.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cabinet_pricing.domain.value_objects import UnitScope

# Supported schema versions for quote files
# Version 1.0: Initial schema
# Version 1.1: Added hardware brands and per-line rate overrides
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


class SettingsConfig(BaseModel):
    """Global pricing settings.

    Attributes:
        wastage_factor: Fraction added to the subtotal for offcuts.
        gst_rate: Tax fraction applied after wastage.
        hardware_markup_pct: Markup on hardware catalog cost, in percent.
        hardware_discount_pct: Discount after markup, in percent.
        hmr_rate_per_sqm: Default carcass board rate.
        hardware_fallback_unit_cost: Unit cost for hardware missing from the catalog.
        strict_formulas: Reject quotes with unevaluable part formulas.
    """

    model_config = ConfigDict(extra="forbid")

    wastage_factor: float = Field(default=0.05, ge=0, le=1)
    gst_rate: float = Field(default=0.10, ge=0, le=1)
    hardware_markup_pct: float = Field(default=35.0, ge=0)
    hardware_discount_pct: float = Field(default=0.0, ge=0, le=100)
    hmr_rate_per_sqm: float = Field(default=85.0, ge=0)
    hardware_fallback_unit_cost: float = Field(default=45.0, ge=0)
    strict_formulas: bool = False


class RatesConfig(BaseModel):
    """Rates per square metre.

    ``material_rate_per_sqm`` falls back to ``settings.hmr_rate_per_sqm``.
    """

    model_config = ConfigDict(extra="forbid")

    material_rate_per_sqm: float | None = Field(default=None, ge=0)
    finish_rate_per_sqm: float = Field(default=0.0, ge=0)
    door_style_rate_per_sqm: float = Field(default=0.0, ge=0)
    color_surcharge_per_sqm: float = Field(default=0.0, ge=0)


class PartConfig(BaseModel):
    """A part template of a cabinet type."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    width_formula: str
    height_formula: str
    quantity: int = Field(default=1, ge=0)
    is_door: bool | None = None
    is_hardware: bool | None = None
    density: float | None = Field(default=None, ge=0)
    weight_multiplier: float | None = Field(default=None, ge=0)
    thickness_mm: float | None = Field(default=None, gt=0)


class HardwareRequirementConfig(BaseModel):
    """A hardware rule, e.g. two hinges per door."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = ""
    unit_scope: UnitScope = UnitScope.PER_CABINET
    units_per_scope: float = Field(default=1.0, ge=0)


class CabinetTypeConfig(BaseModel):
    """Cabinet type definition with its parts and hardware rules."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    category: str = "base"
    default_width_mm: float = Field(..., gt=0)
    default_height_mm: float = Field(..., gt=0)
    default_depth_mm: float = Field(..., gt=0)
    door_count: int = Field(default=0, ge=0)
    drawer_count: int = Field(default=0, ge=0)
    default_density: float | None = Field(default=None, ge=0)
    left_side_width_mm: float | None = Field(default=None, gt=0)
    right_side_width_mm: float | None = Field(default=None, gt=0)
    left_side_depth_mm: float | None = Field(default=None, gt=0)
    right_side_depth_mm: float | None = Field(default=None, gt=0)
    parts: list[PartConfig] = Field(default_factory=list)
    hardware_requirements: list[HardwareRequirementConfig] = Field(
        default_factory=list
    )


class DoorStyleConfig(BaseModel):
    """Door style with rate and physical properties."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = ""
    rate_per_sqm: float | None = Field(default=None, ge=0)
    density: float | None = Field(default=None, ge=0)
    weight_factor: float | None = Field(default=None, ge=0)
    thickness_mm: float | None = Field(default=None, gt=0)


class LineItemConfig(BaseModel):
    """A configured cabinet on the quote.

    Omitted dimensions use the cabinet type defaults.
    """

    model_config = ConfigDict(extra="forbid")

    cabinet_type: str = Field(..., min_length=1)
    name: str | None = None
    width_mm: float | None = Field(default=None, gt=0)
    height_mm: float | None = Field(default=None, gt=0)
    depth_mm: float | None = Field(default=None, gt=0)
    quantity: int = Field(default=1, ge=1)
    door_style: str | None = None
    hardware_brand: str | None = None
    rates: RatesConfig | None = None


class NestingConfig(BaseModel):
    """Stock sheet size and fill target for the packaging estimate."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    sheet_width_mm: float = Field(default=2400.0, gt=0)
    sheet_height_mm: float = Field(default=1200.0, gt=0)
    target_efficiency: float = Field(default=0.85, gt=0, le=1)


class QuoteConfiguration(BaseModel):
    """Root model of a quote request."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    currency: Literal["AUD", "NZD", "USD"] = "AUD"
    settings: SettingsConfig = Field(default_factory=SettingsConfig)
    rates: RatesConfig = Field(default_factory=RatesConfig)
    cabinet_types: list[CabinetTypeConfig] = Field(..., min_length=1)
    door_styles: list[DoorStyleConfig] = Field(default_factory=list)
    hardware_catalog: dict[str, float] = Field(default_factory=dict)
    hardware_brands: dict[str, dict[str, float]] = Field(default_factory=dict)
    line_items: list[LineItemConfig] = Field(default_factory=list)
    nesting: NestingConfig = Field(default_factory=NestingConfig)

    @model_validator(mode="after")
    def check_version_and_ids(self) -> "QuoteConfiguration":
        if self.schema_version not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema_version '{self.schema_version}'. "
                f"Supported versions: {supported}"
            )
        ids = [cabinet.id for cabinet in self.cabinet_types]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate cabinet type ids: {', '.join(duplicates)}")
        for cost in self.hardware_catalog.values():
            if cost < 0:
                raise ValueError("Hardware catalog costs must be non-negative")
        for brand, catalog in self.hardware_brands.items():
            if any(cost < 0 for cost in catalog.values()):
                raise ValueError(f"Hardware brand '{brand}' has a negative cost")
        return self

    def cabinet_type(self, cabinet_id: str) -> CabinetTypeConfig | None:
        return next((c for c in self.cabinet_types if c.id == cabinet_id), None)

    def door_style(self, style_id: str) -> DoorStyleConfig | None:
        return next((s for s in self.door_styles if s.id == style_id), None)
