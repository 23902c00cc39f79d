"""Plan and elevation geometry for fence designs.

Every view of a design (plan, elevation, totals) reads its positions from
this module, so there is exactly one walk of the segment sequence.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..value_objects import (
    DEFAULT_CLOSURE_TOLERANCE,
    DEFAULT_MIN_CLOSED_SEGMENTS,
    ORIGIN,
    BoundingBox2D,
    Point2D,
    SegmentKind,
    SegmentPosition,
)
from .rails import post_height, rail_heights

if TYPE_CHECKING:
    from ..config import FenceConfig
    from ..entities import FenceSegment

__all__ = [
    "ElevationProfile",
    "ElevationStation",
    "FenceGeometry",
    "GeometryResolver",
    "build_elevation",
    "resolve_geometry",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FenceGeometry:
    """Resolved plan geometry of a design.

    Attributes:
        positions: Placement of each segment, in design order.
        bounding_box: Box around every visited point, origin included.
        is_closed_loop: True if the run returns to the origin within tolerance.
        closure_gap: Distance from the final end point back to the origin.
        heading: Absolute heading in degrees after the final segment.
    """

    positions: tuple[SegmentPosition, ...]
    bounding_box: BoundingBox2D
    is_closed_loop: bool
    closure_gap: float
    heading: float

    @property
    def end_point(self) -> Point2D:
        """Where the run currently ends (the origin for an empty design)."""
        if not self.positions:
            return ORIGIN
        return self.positions[-1].end

    @property
    def points(self) -> list[Point2D]:
        """The origin followed by every segment end point."""
        return [ORIGIN] + [position.end for position in self.positions]


class GeometryResolver:
    """Walks a segment sequence turn by turn to place it in the plan.

    The walk starts at the origin heading along 0 degrees. Each segment turns
    the heading by its turn angle (turns accumulate over the whole run) and
    then advances by its effective length.
    """

    def __init__(
        self,
        closure_tolerance: float = DEFAULT_CLOSURE_TOLERANCE,
        min_closed_segments: int = DEFAULT_MIN_CLOSED_SEGMENTS,
    ) -> None:
        self.closure_tolerance = closure_tolerance
        self.min_closed_segments = min_closed_segments

    @classmethod
    def for_config(cls, config: FenceConfig) -> "GeometryResolver":
        """Create a resolver using the closure settings of a configuration."""
        return cls(
            closure_tolerance=config.closure_tolerance,
            min_closed_segments=config.min_closed_segments,
        )

    def resolve(self, segments: Sequence[FenceSegment]) -> FenceGeometry:
        """Compute positions, bounding box and loop closure for the segments."""
        positions: list[SegmentPosition] = []
        current = ORIGIN
        heading = 0.0
        bbox = BoundingBox2D.at(ORIGIN)

        for index, segment in enumerate(segments):
            heading += segment.turn_angle
            heading_rad = math.radians(heading)
            end = Point2D(
                x=current.x + segment.effective_length * math.cos(heading_rad),
                y=current.y + segment.effective_length * math.sin(heading_rad),
            )
            positions.append(
                SegmentPosition(
                    index=index,
                    segment_id=segment.id,
                    start=current,
                    end=end,
                    heading=heading,
                )
            )
            bbox = bbox.include(end)
            current = end

        closure_gap = current.distance_to(ORIGIN)
        is_closed = (
            len(positions) >= self.min_closed_segments
            and closure_gap < self.closure_tolerance
        )
        logger.debug(
            f"Resolved {len(positions)} segments: gap={closure_gap:.3f}m closed={is_closed}"
        )

        return FenceGeometry(
            positions=tuple(positions),
            bounding_box=bbox,
            is_closed_loop=is_closed,
            closure_gap=closure_gap,
            heading=heading,
        )


def resolve_geometry(
    segments: Sequence[FenceSegment], config: FenceConfig
) -> FenceGeometry:
    """Resolve the plan geometry of a segment sequence under a configuration."""
    return GeometryResolver.for_config(config).resolve(segments)


@dataclass(frozen=True)
class ElevationStation:
    """One segment laid out along the unfolded fence line.

    Attributes:
        segment_id: Identifier of the segment.
        kind: Standard pole section or gate.
        label: Display label for the segment.
        start: Distance along the run where the segment starts, in meters.
        end: Distance along the run where the segment ends, in meters.
    """

    segment_id: str
    kind: SegmentKind
    label: str
    start: float
    end: float

    @property
    def length(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class ElevationProfile:
    """Side-view data: the run straightened out with its rails and posts.

    Attributes:
        stations: Segments in order along the unfolded run.
        rail_heights: Height above ground of each rail in standard sections.
        fence_height: Nominal fence height in meters.
        post_height: Recommended post length in meters.
        post_stations: Distance along the run of every distinct post.
    """

    stations: tuple[ElevationStation, ...]
    rail_heights: tuple[float, ...]
    fence_height: float
    post_height: float
    post_stations: tuple[float, ...] = field(default_factory=tuple)

    @property
    def total_length(self) -> float:
        return self.stations[-1].end if self.stations else 0.0


def build_elevation(
    segments: Sequence[FenceSegment],
    config: FenceConfig,
    is_closed_loop: bool | None = None,
) -> ElevationProfile:
    """Lay the design out along a straight line for the elevation view.

    Args:
        segments: Segments in design order.
        config: Fence configuration.
        is_closed_loop: Loop closure flag from the plan geometry. Resolved
            from the segments when omitted.

    Returns:
        ElevationProfile whose rail heights match the billed rail count.
    """
    if is_closed_loop is None:
        is_closed_loop = resolve_geometry(segments, config).is_closed_loop

    stations: list[ElevationStation] = []
    offset = 0.0
    for segment in segments:
        stations.append(
            ElevationStation(
                segment_id=segment.id,
                kind=segment.kind,
                label=segment.label,
                start=offset,
                end=offset + segment.effective_length,
            )
        )
        offset += segment.effective_length

    post_stations = [station.start for station in stations]
    if stations and not is_closed_loop:
        # An open run needs a terminal post; a closed loop reuses the first one.
        post_stations.append(offset)

    return ElevationProfile(
        stations=tuple(stations),
        rail_heights=tuple(rail_heights(config)),
        fence_height=config.fence_height,
        post_height=post_height(config),
        post_stations=tuple(post_stations),
    )
