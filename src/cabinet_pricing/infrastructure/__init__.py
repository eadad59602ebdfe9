"""Infrastructure layer: sheet nesting, exporters and formatters."""

from .exporters import (
    CUTLIST_COLUMNS,
    CutlistCsvExporter,
    Exporter,
    ExporterRegistry,
    QuoteJsonExporter,
)
from .formatters import (
    PartListFormatter,
    QuoteFormatter,
    SheetLayoutFormatter,
    format_price,
)
from .nesting import (
    ExcludedPart,
    NestingResult,
    SheetConfig,
    SheetLayout,
    SheetNestingOptimizer,
    ShippingPackage,
    estimate_packages,
    nest,
)

__all__ = [
    # Nesting
    "ExcludedPart",
    "NestingResult",
    "SheetConfig",
    "SheetLayout",
    "SheetNestingOptimizer",
    "ShippingPackage",
    "estimate_packages",
    "nest",
    # Exporters
    "CUTLIST_COLUMNS",
    "CutlistCsvExporter",
    "Exporter",
    "ExporterRegistry",
    "QuoteJsonExporter",
    # Formatters
    "PartListFormatter",
    "QuoteFormatter",
    "SheetLayoutFormatter",
    "format_price",
]
