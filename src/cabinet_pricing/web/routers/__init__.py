"""API routers for the REST API."""

from cabinet_pricing.web.routers.formulas import router as formulas_router
from cabinet_pricing.web.routers.nest import router as nest_router
from cabinet_pricing.web.routers.quote import router as quote_router
from cabinet_pricing.web.routers.validate import router as validate_router

__all__ = [
    "formulas_router",
    "nest_router",
    "quote_router",
    "validate_router",
]
