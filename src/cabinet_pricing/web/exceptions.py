"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cabinet_pricing.application.config import ConfigError
from cabinet_pricing.domain import FormulaError, PricingError


class QuoteRejectedError(Exception):
    """Raised when a schema-valid quote fails cross-field validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Quote rejected: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(QuoteRejectedError)
    async def quote_rejected_handler(
        request: Request, exc: QuoteRejectedError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Quote could not be priced",
                "error_type": "validation",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(FormulaError)
    async def formula_error_handler(request: Request, exc: FormulaError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "formula",
                "details": {"formula": exc.formula},
            },
        )

    @app.exception_handler(PricingError)
    async def pricing_error_handler(request: Request, exc: PricingError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "pricing",
                "details": None,
            },
        )
