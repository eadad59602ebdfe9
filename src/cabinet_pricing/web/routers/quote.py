"""Quote pricing endpoints."""

from fastapi import APIRouter

from cabinet_pricing.application import LineItemQuote, QuoteOutput
from cabinet_pricing.application.config import load_config_from_dict
from cabinet_pricing.infrastructure import NestingResult, ShippingPackage
from cabinet_pricing.web.dependencies import CommandFactoryDep
from cabinet_pricing.web.exceptions import QuoteRejectedError
from cabinet_pricing.web.schemas.requests import QuoteRequest
from cabinet_pricing.web.schemas.responses import (
    CostBreakdownSchema,
    HardwareSchema,
    LineItemSchema,
    NestingSchema,
    QuoteResponseSchema,
    ResolvedPartSchema,
    SheetLayoutSchema,
    ShippingPackageSchema,
    WeightBreakdownSchema,
)

router = APIRouter(prefix="/quote", tags=["quote"])


def _line_item_to_schema(item: LineItemQuote) -> LineItemSchema:
    cost = item.cost
    weight = item.weight
    return LineItemSchema(
        name=item.name,
        cabinet_type=item.cabinet_type.id,
        width_mm=item.dimensions.width,
        height_mm=item.dimensions.height,
        depth_mm=item.dimensions.depth,
        quantity=item.quantity,
        parts=[
            ResolvedPartSchema(
                name=part.name,
                width_mm=part.width_mm,
                height_mm=part.height_mm,
                quantity=part.quantity,
                area_m2=part.area_m2,
                category=part.category.value,
            )
            for part in item.resolved_parts
        ],
        hardware=HardwareSchema(
            units=item.hardware.units_by_requirement,
            base_cost=item.hardware.base_cost,
            final_cost=item.hardware.final_cost,
            fallback=list(item.hardware.fallback_requirements),
        ),
        cost=CostBreakdownSchema(
            carcass=cost.carcass,
            doors=cost.doors,
            hardware=cost.hardware,
            surcharges=cost.surcharges,
            subtotal=cost.subtotal,
            wastage=cost.wastage,
            gst=cost.gst,
            total=cost.total,
            unit_price=item.unit_price,
        ),
        weight=WeightBreakdownSchema(
            carcass=weight.carcass,
            doors=weight.doors,
            hardware=weight.hardware,
            total=weight.total,
        ),
        legacy_total=item.legacy_total,
    )


def nesting_to_schema(
    result: NestingResult, packages: list[ShippingPackage]
) -> NestingSchema:
    """Convert a NestingResult and its packages to the response schema."""
    return NestingSchema(
        sheet_width_mm=result.sheet_config.width_mm,
        sheet_height_mm=result.sheet_config.height_mm,
        target_efficiency=result.target_efficiency,
        sheet_count=result.sheet_count,
        layouts=[
            SheetLayoutSchema(
                sheet_number=layout.sheet_number,
                parts=[part.label for part in layout.parts],
                area_used_m2=layout.area_used_m2,
                efficiency=layout.efficiency,
                stack_height_mm=layout.stack_height_mm,
                total_weight_kg=layout.total_weight_kg,
            )
            for layout in result.layouts
        ],
        excluded=result.diagnostics,
        packages=[
            ShippingPackageSchema(
                sheet_number=package.sheet_number,
                length_mm=package.length_mm,
                width_mm=package.width_mm,
                height_mm=package.height_mm,
                weight_kg=package.weight_kg,
            )
            for package in packages
        ],
    )


def quote_output_to_schema(output: QuoteOutput) -> QuoteResponseSchema:
    """Convert QuoteOutput to the response schema."""
    return QuoteResponseSchema(
        currency=output.currency,
        line_items=[_line_item_to_schema(item) for item in output.line_items],
        total_price=output.total_price,
        total_weight_kg=output.total_weight_kg,
        nesting=(
            nesting_to_schema(output.nesting, output.packages)
            if output.nesting is not None
            else None
        ),
        warnings=output.warnings,
    )


@router.post("", response_model=QuoteResponseSchema)
async def price_quote(
    request: QuoteRequest,
    factory: CommandFactoryDep,
) -> QuoteResponseSchema:
    """Price every line item of a quote request.

    Raises:
        ConfigError: If the request does not match the quote schema.
        QuoteRejectedError: If the request references undefined data.
    """
    config = load_config_from_dict(request.config)
    command = factory.create_quote_command(include_legacy=request.include_legacy)
    output = command.execute(config)
    if not output.is_valid:
        raise QuoteRejectedError(output.errors)
    return quote_output_to_schema(output)
