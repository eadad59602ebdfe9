"""Sheet nesting endpoints."""

from typing import Any

from fastapi import APIRouter

from cabinet_pricing.application.config import load_config_from_dict
from cabinet_pricing.web.dependencies import QuoteCommandDep
from cabinet_pricing.web.exceptions import QuoteRejectedError
from cabinet_pricing.web.routers.quote import nesting_to_schema
from cabinet_pricing.web.schemas.requests import NestRequest
from cabinet_pricing.web.schemas.responses import NestingSchema

router = APIRouter(prefix="/nest", tags=["nest"])


@router.post("", response_model=NestingSchema)
async def nest_parts(request: NestRequest, command: QuoteCommandDep) -> NestingSchema:
    """Nest all parts of a quote request onto stock sheets.

    Nesting runs even if the request disables it; the overrides in the
    request replace the request's own sheet settings.
    """
    config = load_config_from_dict(request.config)

    overrides: dict[str, Any] = {"enabled": True}
    if request.sheet_width_mm is not None:
        overrides["sheet_width_mm"] = request.sheet_width_mm
    if request.sheet_height_mm is not None:
        overrides["sheet_height_mm"] = request.sheet_height_mm
    if request.target_efficiency is not None:
        overrides["target_efficiency"] = request.target_efficiency
    config = config.model_copy(
        update={"nesting": config.nesting.model_copy(update=overrides)}
    )

    output = command.execute(config)
    if not output.is_valid or output.nesting is None:
        raise QuoteRejectedError(output.errors)
    return nesting_to_schema(output.nesting, output.packages)
