"""Domain layer: cabinet reference data, value objects and pricing services."""

from .entities import CabinetType, HardwareRequirement, Part
from .services import (
    CostCalculator,
    FormulaError,
    FormulaEvaluator,
    HardwareRequirementResolver,
    HardwareResolution,
    LegacyPartsPricer,
    PartDimensionResolver,
    WeightCalculator,
    categorize_part,
    compare_pipelines,
    evaluate,
    evaluate_strict,
)
from .value_objects import (
    DEFAULT_CARCASS_DENSITY,
    DEFAULT_DOOR_DENSITY,
    DEFAULT_THICKNESS_MM,
    CabinetDimensions,
    CostBreakdown,
    DoorStyleSpec,
    GlobalSettings,
    PartCategory,
    PricingError,
    RateSet,
    ResolvedPart,
    UnitScope,
    WeightBreakdown,
)

__all__ = [
    "CabinetDimensions",
    "CabinetType",
    "CostBreakdown",
    "CostCalculator",
    "DEFAULT_CARCASS_DENSITY",
    "DEFAULT_DOOR_DENSITY",
    "DEFAULT_THICKNESS_MM",
    "DoorStyleSpec",
    "FormulaError",
    "FormulaEvaluator",
    "GlobalSettings",
    "HardwareRequirement",
    "HardwareRequirementResolver",
    "HardwareResolution",
    "LegacyPartsPricer",
    "Part",
    "PartCategory",
    "PartDimensionResolver",
    "PricingError",
    "RateSet",
    "ResolvedPart",
    "UnitScope",
    "WeightBreakdown",
    "WeightCalculator",
    "categorize_part",
    "compare_pipelines",
    "evaluate",
    "evaluate_strict",
]
