"""Pydantic schemas for the REST API."""

from fences.web.schemas.common import PointSchema, SegmentKindEnum, SegmentSchema
from fences.web.schemas.requests import ConfigValidateRequest, QuoteRequest
from fences.web.schemas.responses import (
    BillOfMaterialsSchema,
    BoundingBoxSchema,
    CatalogPoleSchema,
    CatalogSchema,
    ElevationSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    GeometrySchema,
    LineItemSchema,
    QuoteResponseSchema,
    SegmentPositionSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "PointSchema",
    "SegmentKindEnum",
    "SegmentSchema",
    # Requests
    "ConfigValidateRequest",
    "QuoteRequest",
    # Responses
    "BillOfMaterialsSchema",
    "BoundingBoxSchema",
    "CatalogPoleSchema",
    "CatalogSchema",
    "ElevationSchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "GeometrySchema",
    "LineItemSchema",
    "QuoteResponseSchema",
    "SegmentPositionSchema",
    "ValidationResultSchema",
]
