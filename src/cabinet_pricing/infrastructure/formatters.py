"""Text formatters for quotes and sheet layouts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cabinet_pricing.domain import CostBreakdown, ResolvedPart

if TYPE_CHECKING:
    from cabinet_pricing.application.dtos import LineItemQuote, QuoteOutput
    from cabinet_pricing.infrastructure.nesting import NestingResult, ShippingPackage


CURRENCY_SYMBOLS: dict[str, str] = {"AUD": "$", "NZD": "NZ$", "USD": "US$"}


def format_price(amount: float, currency: str = "AUD") -> str:
    """Format a money amount the way quotes show it, e.g. ``$1,234.50``."""
    symbol = CURRENCY_SYMBOLS.get(currency, f"{currency} ")
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


class PartListFormatter:
    """Formats resolved parts as a table."""

    def format(self, parts: list[ResolvedPart] | tuple[ResolvedPart, ...]) -> str:
        if not parts:
            return "No parts."

        lines = [
            f"{'Part':<24} {'Width':>8} {'Height':>8} {'Qty':>5} {'Area m²':>9}  Type",
            "-" * 70,
        ]
        for part in parts:
            lines.append(
                f"{part.name[:24]:<24} {part.width_mm:>8.1f} {part.height_mm:>8.1f} "
                f"{part.quantity:>5} {part.area_m2:>9.4f}  {part.category.label}"
            )
        return "\n".join(lines)


class QuoteFormatter:
    """Formats a full quote for terminal display."""

    def __init__(self, show_parts: bool = True) -> None:
        self._show_parts = show_parts
        self._parts = PartListFormatter()

    def format(self, output: QuoteOutput) -> str:
        if not output.is_valid:
            return "\n".join(["Quote could not be priced:"] + [f"  - {e}" for e in output.errors])

        lines = ["QUOTE", "=" * 70]
        for item in output.line_items:
            lines.extend(self._format_line_item(item, output.currency))
            lines.append("")

        lines.append("-" * 70)
        lines.append(f"{'TOTAL (inc. GST)':<40} {format_price(output.total_price, output.currency):>20}")
        lines.append(f"{'Total weight':<40} {output.total_weight_kg:>17.1f} kg")
        if output.nesting is not None:
            lines.append(f"{'Sheets':<40} {output.nesting.sheet_count:>20}")
        if output.packages:
            lines.append(f"{'Shipping weight':<40} {output.shipping_weight_kg:>17.1f} kg")

        if output.warnings:
            lines.append("")
            lines.append("Warnings:")
            lines.extend(f"  - {w}" for w in output.warnings)

        return "\n".join(lines)

    def _format_line_item(self, item: LineItemQuote, currency: str) -> list[str]:
        dims = item.dimensions
        lines = [
            f"{item.name} x{item.quantity}",
            f"  {dims.width:g} x {dims.height:g} x {dims.depth:g} mm",
        ]
        if self._show_parts:
            lines.extend("  " + line for line in self._parts.format(item.resolved_parts).splitlines())
        lines.extend(self._format_cost(item.cost, currency))
        if item.hardware.fallback_requirements:
            lines.append(
                "  Hardware at fallback cost: " + ", ".join(item.hardware.fallback_requirements)
            )
        lines.append(f"  Weight: {item.weight.total:.1f} kg ({item.weight.per_cabinet:.1f} kg each)")
        if item.legacy_total is not None:
            lines.append(f"  Legacy price: {format_price(item.legacy_total, currency)}")
        return lines

    def _format_cost(self, cost: CostBreakdown, currency: str) -> list[str]:
        rows = [
            ("Carcass", cost.carcass),
            ("Doors", cost.doors),
            ("Hardware", cost.hardware),
            ("Subtotal", cost.subtotal),
            ("Wastage", cost.wastage),
            ("GST", cost.gst),
            ("Total", cost.total),
        ]
        return [f"  {label:<12} {format_price(value, currency):>14}" for label, value in rows]


class SheetLayoutFormatter:
    """Formats nesting results and shipping packages."""

    def format(
        self, result: NestingResult, packages: list[ShippingPackage] | None = None
    ) -> str:
        config = result.sheet_config
        lines = [
            "SHEET LAYOUT",
            "=" * 70,
            f"Sheet: {config.width_mm:g} x {config.height_mm:g} mm, "
            f"target fill {result.target_efficiency:.0%}",
            "",
        ]

        if not result.layouts:
            lines.append("No parts to nest.")
        for layout in result.layouts:
            lines.append(
                f"Sheet {layout.sheet_number}: {layout.part_count} part(s), "
                f"{layout.area_used_m2:.3f} m², {layout.efficiency_pct:.1f}% used, "
                f"stack {layout.stack_height_mm:g} mm, {layout.total_weight_kg:.1f} kg"
            )
            for part in layout.parts:
                lines.append(f"    {part.label} ({part.width_mm:g} x {part.height_mm:g})")

        if result.excluded:
            lines.append("")
            lines.append("Not nested:")
            lines.extend(f"  - {line}" for line in result.diagnostics)

        if packages:
            lines.append("")
            lines.append("PACKAGES")
            lines.append("-" * 70)
            for package in packages:
                lines.append(
                    f"Package {package.sheet_number}: {package.length_mm:g} x "
                    f"{package.width_mm:g} x {package.height_mm:g} mm, "
                    f"{package.weight_kg:.1f} kg"
                )

        return "\n".join(lines)
