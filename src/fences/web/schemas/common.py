"""Common Pydantic schemas shared across requests and responses."""

from enum import Enum

from pydantic import BaseModel, Field


class SegmentKindEnum(str, Enum):
    """Segment kind options."""

    STANDARD = "standard"
    GATE = "gate"


class SegmentSchema(BaseModel):
    """One append request: a pole section or a gate, with its turn."""

    kind: SegmentKindEnum = Field(
        default=SegmentKindEnum.STANDARD, description="Segment kind"
    )
    length: float | None = Field(
        default=None,
        description="Catalog pole length in meters (1.8, 2.4 or 3.6); ignored for gates",
    )
    turn: float = Field(
        default=0.0,
        ge=-360,
        le=360,
        description="Heading change in degrees before this segment (negative = left)",
    )


class PointSchema(BaseModel):
    """Plan point in meters."""

    x: float = Field(..., description="X coordinate in meters")
    y: float = Field(..., description="Y coordinate in meters")
