"""Configuration validation endpoints."""

from fastapi import APIRouter

from fences.application.config import (
    ConfigError,
    config_error_result,
    load_config_from_dict,
    validate_config,
)
from fences.web.schemas.requests import ConfigValidateRequest
from fences.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a fence configuration and report advisories.

    Schema violations come back as errors with is_valid false; allowed but
    unusual values come back as warnings.
    """
    try:
        result = validate_config(load_config_from_dict(request.config))
    except ConfigError as e:
        result = config_error_result(e)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
