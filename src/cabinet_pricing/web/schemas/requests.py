"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class QuoteRequest(BaseModel):
    """Request for pricing a quote."""

    config: dict[str, Any] = Field(..., description="Full quote request JSON")
    include_legacy: bool = Field(
        default=False, description="Also report the fixed-shape legacy price"
    )


class NestRequest(BaseModel):
    """Request for nesting the parts of a quote onto stock sheets."""

    config: dict[str, Any] = Field(..., description="Full quote request JSON")
    sheet_width_mm: float | None = Field(
        default=None, gt=0, description="Override stock sheet width in mm"
    )
    sheet_height_mm: float | None = Field(
        default=None, gt=0, description="Override stock sheet height in mm"
    )
    target_efficiency: float | None = Field(
        default=None, gt=0, le=1, description="Override sheet fill target"
    )


class FormulaEvaluateRequest(BaseModel):
    """Request for evaluating a part dimension formula."""

    formula: str = Field(..., min_length=1, description="Arithmetic formula")
    variables: dict[str, float] = Field(
        default_factory=dict, description="Variable bindings"
    )
    strict: bool = Field(
        default=False, description="Reject bad formulas instead of returning 0"
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a quote request."""

    config: dict[str, Any] = Field(..., description="Quote request JSON")
