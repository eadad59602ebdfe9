"""Application commands (use cases) for quoting cabinets."""

from __future__ import annotations

import logging

from cabinet_pricing.application.config import (
    QuoteConfiguration,
    config_to_cabinet_type,
    config_to_dimensions,
    config_to_door_style,
    config_to_rates,
    config_to_settings,
    config_to_sheet,
    hardware_catalog_for,
    validate_config,
)
from cabinet_pricing.application.config.schema import LineItemConfig
from cabinet_pricing.domain import (
    CostCalculator,
    FormulaEvaluator,
    GlobalSettings,
    HardwareRequirementResolver,
    PartDimensionResolver,
    WeightCalculator,
)
from cabinet_pricing.domain.services import compare_pipelines
from cabinet_pricing.infrastructure.nesting import (
    SheetNestingOptimizer,
    estimate_packages,
)

from .dtos import LineItemQuote, QuoteOutput

logger = logging.getLogger(__name__)


class PriceQuoteCommand:
    """Prices every line of a quote request and estimates its packaging.

    For each line item the parts are resolved, hardware is counted and
    priced, then cost and weight are computed from the same resolved
    parts. All lines are then nested together onto stock sheets.
    """

    def __init__(
        self,
        cost_calculator: CostCalculator | None = None,
        weight_calculator: WeightCalculator | None = None,
        include_legacy: bool = False,
    ) -> None:
        self.cost_calculator = cost_calculator or CostCalculator()
        self.weight_calculator = weight_calculator or WeightCalculator()
        self.include_legacy = include_legacy

    def execute(self, config: QuoteConfiguration) -> QuoteOutput:
        """Run the pricing pipeline for a schema-valid request.

        Args:
            config: The quote request.

        Returns:
            QuoteOutput with priced lines, nesting and packages, or with
            ``errors`` set if cross-field validation failed.
        """
        validation = validate_config(config)
        warnings = [f"{w.path}: {w.message}" for w in validation.warnings]
        if not validation.is_valid:
            return QuoteOutput(
                currency=config.currency,
                errors=[f"{e.path}: {e.message}" for e in validation.errors],
                warnings=warnings,
            )

        settings = config_to_settings(config.settings)
        line_items = [
            self.price_line(config, item, settings, index)
            for index, item in enumerate(config.line_items)
        ]

        output = QuoteOutput(
            line_items=line_items, currency=config.currency, warnings=warnings
        )
        if config.nesting.enabled:
            optimizer = SheetNestingOptimizer(
                config_to_sheet(config.nesting), config.nesting.target_efficiency
            )
            output.nesting = optimizer.nest(output.resolved_parts)
            output.packages = estimate_packages(output.nesting)
            output.warnings.extend(output.nesting.diagnostics)

        logger.info(
            "Quoted %d line item(s): total %.2f %s, %.1f kg",
            len(line_items),
            output.total_price,
            output.currency,
            output.total_weight_kg,
        )
        return output

    def price_line(
        self,
        config: QuoteConfiguration,
        item: LineItemConfig,
        settings: GlobalSettings,
        index: int = 0,
    ) -> LineItemQuote:
        """Price a single line item of ``config``."""
        cabinet_config = config.cabinet_type(item.cabinet_type)
        if cabinet_config is None:
            raise ValueError(f"Unknown cabinet type '{item.cabinet_type}'")
        cabinet_type = config_to_cabinet_type(cabinet_config)
        style_config = config.door_style(item.door_style) if item.door_style else None
        door_style = config_to_door_style(style_config)
        dims = config_to_dimensions(item, cabinet_type)
        rates = config_to_rates(item.rates or config.rates, settings, style_config)
        name = item.name or f"{index + 1}. {cabinet_type.name}"

        resolver = PartDimensionResolver(FormulaEvaluator(strict=settings.strict_formulas))
        resolved = resolver.resolve(
            cabinet_type.parts,
            dims,
            item.quantity,
            cabinet_type=cabinet_type,
            door_style=door_style,
            source=name,
        )

        hardware = HardwareRequirementResolver(
            fallback_unit_cost=settings.hardware_fallback_unit_cost,
            markup_pct=settings.hardware_markup_pct,
            discount_pct=settings.hardware_discount_pct,
        ).resolve_hardware(
            cabinet_type.hardware_requirements,
            cabinet_type.door_count,
            cabinet_type.drawer_count,
            item.quantity,
            hardware_catalog_for(config, item),
        )

        cost = self.cost_calculator.price(resolved, rates, hardware.final_cost, settings)
        weight = self.weight_calculator.weigh(
            resolved, cabinet_type, door_style, item.quantity, dims
        )

        legacy_total = None
        if self.include_legacy:
            legacy_total = compare_pipelines(
                cost.total,
                cabinet_type,
                dims,
                rates,
                settings,
                hardware.final_cost,
                item.quantity,
            ).legacy_total

        logger.debug("%s: %.2f (%d part(s))", name, cost.total, len(resolved))
        return LineItemQuote(
            name=name,
            cabinet_type=cabinet_type,
            dimensions=dims,
            quantity=item.quantity,
            resolved_parts=tuple(resolved),
            hardware=hardware,
            cost=cost,
            weight=weight,
            legacy_total=legacy_total,
        )
