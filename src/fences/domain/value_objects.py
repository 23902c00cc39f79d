"""Value objects for the fence domain."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

# Raw length of a gate leaf in meters. Overlap never applies to gates.
GATE_WIDTH: float = 1.0

# Height of the lowest rail above ground in meters.
RAIL_GROUND_CLEARANCE: float = 0.1

# Recommended post length as a multiple of fence height (includes the
# portion buried in the ground).
POST_HEIGHT_FACTOR: float = 1.25

# Defaults for closed-loop detection.
DEFAULT_CLOSURE_TOLERANCE: float = 0.25  # meters
DEFAULT_MIN_CLOSED_SEGMENTS: int = 3


class SegmentKind(str, Enum):
    """Kinds of fence sections."""

    STANDARD = "standard"
    GATE = "gate"


class PoleLength(float, Enum):
    """Purchasable standard pole lengths in meters."""

    SHORT = 1.8
    MEDIUM = 2.4
    LONG = 3.6

    @property
    def label(self) -> str:
        """Display label such as '2.4m'."""
        return f"{self.value:g}m"

    @classmethod
    def from_meters(cls, length: float) -> "PoleLength":
        """Look up the catalog entry matching a raw length.

        Raises:
            ValueError: If the length is not a catalog length.
        """
        for pole in cls:
            if math.isclose(pole.value, length, abs_tol=1e-9):
                return pole
        catalog = ", ".join(pole.label for pole in cls)
        raise ValueError(f"{length}m is not a catalog pole length ({catalog})")


CATALOG_LENGTHS: tuple[PoleLength, ...] = tuple(PoleLength)
MIN_CATALOG_LENGTH: float = min(pole.value for pole in PoleLength)


@dataclass(frozen=True)
class Point2D:
    """2D point in plan coordinates (meters). The design starts at the origin."""

    x: float
    y: float

    def distance_to(self, other: "Point2D") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)


ORIGIN = Point2D(0.0, 0.0)


@dataclass(frozen=True)
class BoundingBox2D:
    """Axis-aligned bounding box in plan coordinates."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self) -> None:
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError("Bounding box minimum must not exceed maximum")

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def include(self, point: Point2D) -> "BoundingBox2D":
        """Return a box grown to contain the given point."""
        return BoundingBox2D(
            min_x=min(self.min_x, point.x),
            min_y=min(self.min_y, point.y),
            max_x=max(self.max_x, point.x),
            max_y=max(self.max_y, point.y),
        )

    @classmethod
    def at(cls, point: Point2D) -> "BoundingBox2D":
        """Degenerate box covering a single point."""
        return cls(min_x=point.x, min_y=point.y, max_x=point.x, max_y=point.y)


@dataclass(frozen=True)
class SegmentPosition:
    """Computed placement of one segment in the plan.

    Attributes:
        index: Position of the segment in the design sequence.
        segment_id: Identifier of the segment this placement belongs to.
        start: Point where the segment begins.
        end: Point where the segment ends.
        heading: Absolute heading in degrees after applying the segment's turn.
    """

    index: int
    segment_id: str
    start: Point2D
    end: Point2D
    heading: float

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("Segment index must be non-negative")

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)
