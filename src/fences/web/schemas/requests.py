"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from fences.web.schemas.common import SegmentSchema


class QuoteRequest(BaseModel):
    """Request for quoting or resolving a fence design."""

    segments: list[SegmentSchema] = Field(
        default_factory=list, max_length=500, description="Segments in design order"
    )
    config: dict[str, Any] | None = Field(
        default=None,
        description="Optional project configuration JSON (fence, pricing, closure)",
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Fence configuration JSON")
