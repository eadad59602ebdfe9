"""Quote request validation endpoints."""

from fastapi import APIRouter

from cabinet_pricing.application.config import (
    ConfigError,
    load_config_from_dict,
    validate_config,
)
from cabinet_pricing.web.schemas.requests import ConfigValidateRequest
from cabinet_pricing.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_quote(request: ConfigValidateRequest) -> ValidationResultSchema:
    """Validate a quote request without pricing it.

    Schema errors are reported in the same shape as cross-field errors.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        errors = [
            {"message": detail.get("message", e.message), "path": detail.get("path", "")}
            for detail in e.details
        ] or [{"message": e.message, "path": ""}]
        return ValidationResultSchema(is_valid=False, errors=errors)

    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
