"""Pydantic schemas for the REST API."""

from cabinet_pricing.web.schemas.requests import (
    ConfigValidateRequest,
    FormulaEvaluateRequest,
    NestRequest,
    QuoteRequest,
)
from cabinet_pricing.web.schemas.responses import (
    CostBreakdownSchema,
    ErrorResponseSchema,
    FormulaResultSchema,
    HardwareSchema,
    LineItemSchema,
    NestingSchema,
    QuoteResponseSchema,
    ResolvedPartSchema,
    SheetLayoutSchema,
    ShippingPackageSchema,
    ValidationResultSchema,
    WeightBreakdownSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "FormulaEvaluateRequest",
    "NestRequest",
    "QuoteRequest",
    # Responses
    "CostBreakdownSchema",
    "ErrorResponseSchema",
    "FormulaResultSchema",
    "HardwareSchema",
    "LineItemSchema",
    "NestingSchema",
    "QuoteResponseSchema",
    "ResolvedPartSchema",
    "SheetLayoutSchema",
    "ShippingPackageSchema",
    "ValidationResultSchema",
    "WeightBreakdownSchema",
]
