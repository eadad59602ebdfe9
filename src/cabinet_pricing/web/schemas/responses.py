"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class ResolvedPartSchema(BaseModel):
    """Resolved part of a line item."""

    name: str = Field(..., description="Part name")
    width_mm: float = Field(..., description="Width of one piece in mm")
    height_mm: float = Field(..., description="Height of one piece in mm")
    quantity: int = Field(..., description="Pieces across the line")
    area_m2: float = Field(..., description="Area of all pieces in m²")
    category: str = Field(..., description="carcass, door or hardware")


class HardwareSchema(BaseModel):
    """Resolved hardware for a line item."""

    units: dict[str, float] = Field(default_factory=dict, description="Units by requirement id")
    base_cost: float = Field(..., description="Catalog cost before markup")
    final_cost: float = Field(..., description="Cost after markup and discount")
    fallback: list[str] = Field(
        default_factory=list, description="Requirements priced at the fallback cost"
    )


class CostBreakdownSchema(BaseModel):
    """Cost breakdown of a line item, GST inclusive total."""

    carcass: float
    doors: float
    hardware: float
    surcharges: float
    subtotal: float
    wastage: float
    gst: float
    total: float
    unit_price: float = Field(..., description="Total divided by cabinet quantity")


class WeightBreakdownSchema(BaseModel):
    """Weight breakdown of a line item in kg."""

    carcass: float = Field(..., description="Carcass weight per cabinet")
    doors: float = Field(..., description="Door weight per cabinet")
    hardware: float = Field(..., description="Hardware weight per cabinet")
    total: float = Field(..., description="Weight of all cabinets on the line")


class LineItemSchema(BaseModel):
    """Priced line item."""

    name: str
    cabinet_type: str = Field(..., description="Cabinet type id")
    width_mm: float
    height_mm: float
    depth_mm: float
    quantity: int
    parts: list[ResolvedPartSchema] = Field(default_factory=list)
    hardware: HardwareSchema
    cost: CostBreakdownSchema
    weight: WeightBreakdownSchema
    legacy_total: float | None = Field(
        default=None, description="Fixed-shape legacy price, when requested"
    )


class SheetLayoutSchema(BaseModel):
    """Parts assigned to one stock sheet."""

    sheet_number: int
    parts: list[str] = Field(default_factory=list, description="Part labels")
    area_used_m2: float
    efficiency: float = Field(..., description="Fraction of the sheet area used")
    stack_height_mm: float
    total_weight_kg: float


class ShippingPackageSchema(BaseModel):
    """Shipping package for one sheet layout."""

    sheet_number: int
    length_mm: float
    width_mm: float
    height_mm: float
    weight_kg: float


class NestingSchema(BaseModel):
    """Result of nesting parts onto stock sheets."""

    sheet_width_mm: float
    sheet_height_mm: float
    target_efficiency: float
    sheet_count: int
    layouts: list[SheetLayoutSchema] = Field(default_factory=list)
    excluded: list[str] = Field(
        default_factory=list, description="Part instances not placed, with reasons"
    )
    packages: list[ShippingPackageSchema] = Field(default_factory=list)


class QuoteResponseSchema(BaseModel):
    """Response for quote pricing."""

    currency: str
    line_items: list[LineItemSchema] = Field(default_factory=list)
    total_price: float = Field(..., description="Sum of line totals, GST inclusive")
    total_weight_kg: float
    nesting: NestingSchema | None = None
    warnings: list[str] = Field(default_factory=list)


class FormulaResultSchema(BaseModel):
    """Response for formula evaluation."""

    formula: str
    value: float


class ValidationResultSchema(BaseModel):
    """Response for quote request validation."""

    is_valid: bool = Field(..., description="Whether the request can be priced")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
