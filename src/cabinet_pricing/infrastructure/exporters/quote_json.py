"""JSON export of a priced quote."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from cabinet_pricing.domain.services.cost import round_money
from cabinet_pricing.infrastructure.exporters.base import ExporterRegistry, write_text

if TYPE_CHECKING:
    from cabinet_pricing.application.dtos import LineItemQuote, QuoteOutput
    from cabinet_pricing.domain import ResolvedPart
    from cabinet_pricing.infrastructure.nesting import NestingResult, ShippingPackage


@ExporterRegistry.register("json")
class QuoteJsonExporter:
    """Exports a quote as a JSON document.

    The same document shape is returned by the web API's quote endpoint.
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def export_string(self, output: QuoteOutput) -> str:
        return json.dumps(self.to_dict(output), indent=self.indent, ensure_ascii=False)

    def export(self, output: QuoteOutput, path: Path) -> None:
        write_text(path, self.export_string(output))

    def to_dict(self, output: QuoteOutput) -> dict[str, Any]:
        if not output.is_valid:
            return {"errors": output.errors, "warnings": output.warnings}

        data: dict[str, Any] = {
            "currency": output.currency,
            "line_items": [self._line_item(item) for item in output.line_items],
            "totals": {
                "price": output.total_price,
                "weight_kg": round(output.total_weight_kg, 3),
                "shipping_weight_kg": round(output.shipping_weight_kg, 3),
            },
            "warnings": output.warnings,
        }
        if output.nesting is not None:
            data["nesting"] = self._nesting(output.nesting)
            data["packages"] = [self._package(p) for p in output.packages]
        return data

    def _line_item(self, item: LineItemQuote) -> dict[str, Any]:
        dims = item.dimensions
        cost = item.cost
        weight = item.weight
        data: dict[str, Any] = {
            "name": item.name,
            "cabinet_type": item.cabinet_type.id,
            "dimensions": {"width": dims.width, "height": dims.height, "depth": dims.depth},
            "quantity": item.quantity,
            "parts": [self._part(p) for p in item.resolved_parts],
            "hardware": {
                "units": item.hardware.units_by_requirement,
                "base_cost": round_money(item.hardware.base_cost),
                "final_cost": round_money(item.hardware.final_cost),
                "fallback": list(item.hardware.fallback_requirements),
            },
            "cost": {
                "carcass": cost.carcass,
                "doors": cost.doors,
                "hardware": cost.hardware,
                "surcharges": cost.surcharges,
                "subtotal": cost.subtotal,
                "wastage": cost.wastage,
                "gst": cost.gst,
                "total": cost.total,
                "unit_price": item.unit_price,
            },
            "weight": {
                "carcass": round(weight.carcass, 3),
                "doors": round(weight.doors, 3),
                "hardware": round(weight.hardware, 3),
                "total": round(weight.total, 3),
                "per_cabinet": round(weight.per_cabinet, 3),
            },
        }
        if item.legacy_total is not None:
            data["legacy_total"] = item.legacy_total
        return data

    def _part(self, part: ResolvedPart) -> dict[str, Any]:
        return {
            "name": part.name,
            "width_mm": part.width_mm,
            "height_mm": part.height_mm,
            "quantity": part.quantity,
            "area_m2": round(part.area_m2, 6),
            "category": part.category.value,
        }

    def _nesting(self, result: NestingResult) -> dict[str, Any]:
        return {
            "sheet": {
                "width_mm": result.sheet_config.width_mm,
                "height_mm": result.sheet_config.height_mm,
            },
            "target_efficiency": result.target_efficiency,
            "sheet_count": result.sheet_count,
            "layouts": [
                {
                    "sheet_number": layout.sheet_number,
                    "parts": [part.label for part in layout.parts],
                    "area_used_m2": round(layout.area_used_m2, 6),
                    "efficiency": round(layout.efficiency, 6),
                    "stack_height_mm": layout.stack_height_mm,
                    "total_weight_kg": round(layout.total_weight_kg, 3),
                }
                for layout in result.layouts
            ],
            "excluded": result.diagnostics,
        }

    def _package(self, package: ShippingPackage) -> dict[str, Any]:
        return {
            "sheet_number": package.sheet_number,
            "length_mm": package.length_mm,
            "width_mm": package.width_mm,
            "height_mm": package.height_mm,
            "weight_kg": round(package.weight_kg, 3),
        }
