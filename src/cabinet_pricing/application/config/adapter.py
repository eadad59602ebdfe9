"""Adapters from the quote configuration schema to domain objects.

The Pydantic schema is the request format; the pricing services only see
frozen domain dataclasses. Every conversion happens here, once per request.
"""

from typing import TYPE_CHECKING, Any, Iterable, Mapping

from cabinet_pricing.application.config.schema import (
    CabinetTypeConfig,
    DoorStyleConfig,
    LineItemConfig,
    NestingConfig,
    QuoteConfiguration,
    RatesConfig,
    SettingsConfig,
)
from cabinet_pricing.domain.entities import CabinetType, HardwareRequirement, Part
from cabinet_pricing.domain.value_objects import (
    CabinetDimensions,
    DoorStyleSpec,
    GlobalSettings,
    RateSet,
)

if TYPE_CHECKING:
    from cabinet_pricing.infrastructure.nesting import SheetConfig

# Keys of the flat settings table and the GlobalSettings field each maps to
_SETTINGS_KEYS: dict[str, str] = {
    "wastage_factor": "wastage_factor",
    "gst_rate": "gst_rate",
    "hardware_markup_percentage": "hardware_markup_pct",
    "hardware_markup_pct": "hardware_markup_pct",
    "hardware_discount_percentage": "hardware_discount_pct",
    "hardware_discount_pct": "hardware_discount_pct",
    "hmr_rate_per_sqm": "hmr_rate_per_sqm",
    "hardware_base_cost": "hardware_fallback_unit_cost",
    "hardware_fallback_unit_cost": "hardware_fallback_unit_cost",
    "strict_formulas": "strict_formulas",
}


def parse_global_settings(
    rows: Iterable[Mapping[str, Any]] | Mapping[str, Any],
) -> GlobalSettings:
    """Build validated settings from a flat key/value settings table.

    Accepts either rows of ``{"setting_key": ..., "setting_value": ...}``
    or a plain mapping. Unknown keys are ignored, missing keys keep their
    defaults and values are validated through :class:`SettingsConfig`.

    Raises:
        pydantic.ValidationError: If a known key has an invalid value.
    """
    if isinstance(rows, Mapping):
        table = dict(rows)
    else:
        table = {row["setting_key"]: row["setting_value"] for row in rows}

    values = {
        _SETTINGS_KEYS[key]: value
        for key, value in table.items()
        if key in _SETTINGS_KEYS
    }
    return config_to_settings(SettingsConfig.model_validate(values))


def config_to_settings(settings: SettingsConfig) -> GlobalSettings:
    return GlobalSettings(**settings.model_dump())


def config_to_rates(
    rates: RatesConfig,
    settings: GlobalSettings,
    door_style: DoorStyleConfig | None = None,
) -> RateSet:
    """Convert rates, filling the carcass rate from the HMR setting.

    A selected door style's own rate replaces ``door_style_rate_per_sqm``.
    """
    material_rate = rates.material_rate_per_sqm
    if material_rate is None:
        material_rate = settings.hmr_rate_per_sqm
    door_style_rate = rates.door_style_rate_per_sqm
    if door_style is not None and door_style.rate_per_sqm is not None:
        door_style_rate = door_style.rate_per_sqm
    return RateSet(
        material_rate_per_sqm=material_rate,
        finish_rate_per_sqm=rates.finish_rate_per_sqm,
        door_style_rate_per_sqm=door_style_rate,
        color_surcharge_per_sqm=rates.color_surcharge_per_sqm,
    )


def config_to_cabinet_type(cabinet: CabinetTypeConfig) -> CabinetType:
    parts = tuple(Part(**part.model_dump()) for part in cabinet.parts)
    requirements = tuple(
        HardwareRequirement(
            id=req.id,
            name=req.name or req.id,
            unit_scope=req.unit_scope,
            units_per_scope=req.units_per_scope,
        )
        for req in cabinet.hardware_requirements
    )
    fields = cabinet.model_dump(exclude={"parts", "hardware_requirements"})
    return CabinetType(**fields, parts=parts, hardware_requirements=requirements)


def config_to_door_style(style: DoorStyleConfig | None) -> DoorStyleSpec | None:
    if style is None:
        return None
    return DoorStyleSpec(
        name=style.name or style.id,
        density=style.density,
        weight_factor=style.weight_factor,
        thickness_mm=style.thickness_mm,
    )


def config_to_dimensions(
    item: LineItemConfig, cabinet_type: CabinetType
) -> CabinetDimensions:
    return cabinet_type.dimensions(item.width_mm, item.height_mm, item.depth_mm)


def config_to_sheet(nesting: NestingConfig) -> "SheetConfig":
    # Lazy import to avoid circular dependencies
    from cabinet_pricing.infrastructure.nesting import SheetConfig

    return SheetConfig(width_mm=nesting.sheet_width_mm, height_mm=nesting.sheet_height_mm)


def hardware_catalog_for(
    config: QuoteConfiguration, item: LineItemConfig
) -> dict[str, float]:
    """Unit costs for a line: the base catalog overlaid with its brand's prices."""
    catalog = dict(config.hardware_catalog)
    if item.hardware_brand is not None:
        catalog.update(config.hardware_brands.get(item.hardware_brand, {}))
    return catalog
