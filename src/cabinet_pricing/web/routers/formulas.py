"""Formula evaluation endpoints."""

from fastapi import APIRouter

from cabinet_pricing.domain import FormulaEvaluator
from cabinet_pricing.web.schemas.requests import FormulaEvaluateRequest
from cabinet_pricing.web.schemas.responses import FormulaResultSchema

router = APIRouter(prefix="/formulas", tags=["formulas"])


@router.post("/evaluate", response_model=FormulaResultSchema)
async def evaluate_formula(request: FormulaEvaluateRequest) -> FormulaResultSchema:
    """Evaluate a part dimension formula against the given variables.

    Without ``strict`` a formula that cannot be evaluated returns 0; with
    it the request fails with a ``formula`` error.
    """
    evaluator = FormulaEvaluator(strict=request.strict)
    value = evaluator.evaluate(request.formula, request.variables)
    return FormulaResultSchema(formula=request.formula, value=value)
