"""Quote exporters.

Registered formats:
- csv: flat cut list, one row per part
- json: full quote document

Usage:
    from cabinet_pricing.infrastructure.exporters import ExporterRegistry

    exporter = ExporterRegistry.get("csv")()
    text = exporter.export_string(quote_output)
"""

from cabinet_pricing.infrastructure.exporters.base import Exporter, ExporterRegistry
from cabinet_pricing.infrastructure.exporters.cutlist import (
    CUTLIST_COLUMNS,
    CutlistCsvExporter,
)
from cabinet_pricing.infrastructure.exporters.quote_json import QuoteJsonExporter

__all__ = [
    "CUTLIST_COLUMNS",
    "CutlistCsvExporter",
    "Exporter",
    "ExporterRegistry",
    "QuoteJsonExporter",
]
