"""Domain services for part resolution, pricing and weight estimation."""

from ._legacy import (
    LegacyPartsPricer,
    LegacyQuantities,
    PipelineComparison,
    compare_pipelines,
)
from .cost import CostCalculator, category_area, round_money
from .formula import (
    FormulaError,
    FormulaEvaluator,
    evaluate,
    evaluate_strict,
    parse,
    tokenize,
)
from .hardware import (
    DEFAULT_HARDWARE_UNIT_COST,
    HardwareRequirementResolver,
    HardwareResolution,
    scope_count,
)
from .parts import CARCASS_NAME_KEYWORDS, PartDimensionResolver, categorize_part
from .weight import (
    BASE_HARDWARE_WEIGHT_KG,
    REFERENCE_CABINET_AREA_MM2,
    WeightCalculator,
)

__all__ = [
    # Formulas
    "FormulaError",
    "FormulaEvaluator",
    "evaluate",
    "evaluate_strict",
    "parse",
    "tokenize",
    # Parts
    "CARCASS_NAME_KEYWORDS",
    "PartDimensionResolver",
    "categorize_part",
    # Hardware
    "DEFAULT_HARDWARE_UNIT_COST",
    "HardwareRequirementResolver",
    "HardwareResolution",
    "scope_count",
    # Cost and weight
    "BASE_HARDWARE_WEIGHT_KG",
    "CostCalculator",
    "REFERENCE_CABINET_AREA_MM2",
    "WeightCalculator",
    "category_area",
    "round_money",
    # Legacy comparison
    "LegacyPartsPricer",
    "LegacyQuantities",
    "PipelineComparison",
    "compare_pipelines",
]
