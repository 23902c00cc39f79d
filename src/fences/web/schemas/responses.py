"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from fences.web.schemas.common import PointSchema


class SegmentPositionSchema(BaseModel):
    """A segment together with its place in the plan."""

    index: int = Field(..., description="Position in the design")
    id: str = Field(..., description="Stable segment identifier")
    kind: str = Field(..., description="standard or gate")
    label: str = Field(..., description="Display label, e.g. 2.4m or GATE")
    raw_length: float = Field(..., description="Catalog length in meters")
    effective_length: float = Field(..., description="Length after joint overlap")
    turn_angle: float = Field(..., description="Heading change before the segment")
    heading: float = Field(..., description="Absolute heading in degrees")
    start: PointSchema = Field(..., description="Start point")
    end: PointSchema = Field(..., description="End point")


class BoundingBoxSchema(BaseModel):
    """Plan extent of the design."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float
    width: float
    height: float


class GeometrySchema(BaseModel):
    """Resolved plan geometry."""

    segments: list[SegmentPositionSchema] = Field(default_factory=list)
    bounding_box: BoundingBoxSchema
    is_closed_loop: bool = Field(..., description="Whether the run closes on itself")
    closure_gap: float = Field(..., description="Distance from end point to origin")
    total_length: float = Field(..., description="Sum of effective lengths")


class LineItemSchema(BaseModel):
    """One purchasable item."""

    item: str
    quantity: int
    unit_price: float
    total: float


class BillOfMaterialsSchema(BaseModel):
    """Material quantities and cost estimate."""

    segment_count: int
    total_length: float
    rails_per_section: int
    total_posts: int
    post_height: float = Field(..., description="Recommended post length in meters")
    gate_count: int
    pole_counts: dict[str, int] = Field(
        default_factory=dict, description="Sections per catalog length"
    )
    pole_requirement: dict[str, int] = Field(
        default_factory=dict, description="Poles to buy per catalog length"
    )
    line_items: list[LineItemSchema] = Field(default_factory=list)
    post_cost: float
    gate_cost: float
    pole_cost: float
    total_cost: float
    currency_symbol: str


class ElevationSchema(BaseModel):
    """Unfolded side-view data."""

    fence_height: float
    post_height: float
    rail_heights: list[float] = Field(default_factory=list)
    post_stations: list[float] = Field(default_factory=list)
    total_length: float


class QuoteResponseSchema(BaseModel):
    """Response for a design quote."""

    geometry: GeometrySchema
    bill_of_materials: BillOfMaterialsSchema
    elevation: ElevationSchema


class CatalogPoleSchema(BaseModel):
    """A catalog pole length and its price."""

    length: float
    label: str
    price: float


class CatalogSchema(BaseModel):
    """Purchasable items with current prices."""

    poles: list[CatalogPoleSchema]
    gate_width: float
    gate_price: float
    post_price: float
    currency_symbol: str
    overlap: float


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
