"""Flat cut list export for spreadsheets and reporting tools.

One row per resolved part of every line item, repeating the line's
cabinet columns on each row.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from cabinet_pricing.infrastructure.exporters.base import ExporterRegistry, write_text
from cabinet_pricing.infrastructure.formatters import format_price

if TYPE_CHECKING:
    from cabinet_pricing.application.dtos import QuoteOutput


CUTLIST_COLUMNS: tuple[str, ...] = (
    "Cabinet Type",
    "Dimensions (W×H×D)",
    "Quantity",
    "Part Name",
    "Part Width (mm)",
    "Part Height (mm)",
    "Part Quantity",
    "Part Area (m²)",
    "Type",
    "Unit Cost",
    "Total Cost",
)


@ExporterRegistry.register("csv")
class CutlistCsvExporter:
    """Exports the quote's resolved parts as CSV.

    ``Unit Cost`` is the line total divided by the cabinet quantity and
    ``Total Cost`` the line total; both are repeated on every part row of
    the line.
    """

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"

    def export_string(self, output: QuoteOutput) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CUTLIST_COLUMNS)

        for item in output.line_items:
            dims = item.dimensions
            unit_cost = format_price(item.unit_price, output.currency)
            total_cost = format_price(item.cost.total, output.currency)
            for part in item.resolved_parts:
                writer.writerow(
                    [
                        item.cabinet_type.name,
                        f"{dims.width:g}×{dims.height:g}×{dims.depth:g}",
                        item.quantity,
                        part.name,
                        f"{part.width_mm:g}",
                        f"{part.height_mm:g}",
                        part.quantity,
                        f"{part.area_m2:.4f}",
                        part.category.label,
                        unit_cost,
                        total_cost,
                    ]
                )

        return buffer.getvalue()

    def export(self, output: QuoteOutput, path: Path) -> None:
        write_text(path, self.export_string(output))
