"""Domain entities for fence design."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace

from .config import FenceConfig
from .value_objects import GATE_WIDTH, PoleLength, SegmentKind

__all__ = ["Design", "FenceSegment", "new_segment_id"]


def new_segment_id() -> str:
    """Generate an opaque identifier for a new segment."""
    return uuid.uuid4().hex[:12]


@dataclass(frozen=True)
class FenceSegment:
    """One fence section: a run of standard poles or a gate.

    Attributes:
        id: Opaque identifier, stable for the lifetime of the segment.
        kind: Whether this is a standard pole section or a gate.
        raw_length: Purchased length in meters. A catalog length for standard
            sections, the gate width for gates.
        effective_length: Length contributed to the fence line in meters,
            after subtracting the joint overlap. Always derived from
            raw_length and the current overlap; use with_overlap() to change it.
        turn_angle: Heading change in degrees applied before this segment,
            relative to the previous segment (negative = left, positive = right).
    """

    id: str
    kind: SegmentKind
    raw_length: float
    effective_length: float
    turn_angle: float = 0.0

    def __post_init__(self) -> None:
        if self.kind == SegmentKind.STANDARD:
            # Raises for lengths outside the catalog.
            PoleLength.from_meters(self.raw_length)
        elif self.raw_length != GATE_WIDTH:
            raise ValueError(f"Gate raw length must be {GATE_WIDTH}m")
        if self.effective_length <= 0:
            raise ValueError("Effective length must be positive")

    @classmethod
    def create(
        cls,
        kind: SegmentKind,
        overlap: float,
        raw_length: float | None = None,
        turn_angle: float = 0.0,
        segment_id: str | None = None,
    ) -> "FenceSegment":
        """Build a segment with its effective length derived from the overlap.

        Args:
            kind: Standard pole section or gate.
            overlap: Current joint overlap in meters.
            raw_length: Catalog length for standard sections. Ignored for gates.
            turn_angle: Heading change in degrees before this segment.
            segment_id: Identifier to use. A new one is generated if omitted.

        Raises:
            ValueError: If a standard section has no or a non-catalog length.
        """
        if kind == SegmentKind.GATE:
            raw = GATE_WIDTH
        else:
            if raw_length is None:
                raise ValueError("Standard sections need a pole length")
            raw = PoleLength.from_meters(raw_length).value
        return cls(
            id=segment_id or new_segment_id(),
            kind=kind,
            raw_length=raw,
            effective_length=_effective_length(kind, raw, overlap),
            turn_angle=turn_angle,
        )

    @property
    def is_gate(self) -> bool:
        return self.kind == SegmentKind.GATE

    @property
    def pole_length(self) -> PoleLength | None:
        """Catalog length of a standard section, None for gates."""
        if self.is_gate:
            return None
        return PoleLength.from_meters(self.raw_length)

    @property
    def label(self) -> str:
        """Short display label ('GATE' or the pole length)."""
        if self.is_gate:
            return "GATE"
        return f"{self.raw_length:g}m"

    def with_overlap(self, overlap: float) -> "FenceSegment":
        """Return this segment with its effective length recomputed for an overlap."""
        effective = _effective_length(self.kind, self.raw_length, overlap)
        if effective == self.effective_length:
            return self
        return replace(self, effective_length=effective)


def _effective_length(kind: SegmentKind, raw_length: float, overlap: float) -> float:
    if kind == SegmentKind.GATE:
        return GATE_WIDTH
    return raw_length - overlap


@dataclass(frozen=True)
class Design:
    """The ordered fence segments plus the configuration they were built with.

    A Design is never changed in place. Every edit returns a new Design so
    readers always see a consistent snapshot.

    Attributes:
        config: Current fence configuration.
        segments: Segments in traversal order.
    """

    config: FenceConfig = field(default_factory=FenceConfig)
    segments: tuple[FenceSegment, ...] = ()

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def is_empty(self) -> bool:
        return not self.segments

    @property
    def last(self) -> FenceSegment | None:
        return self.segments[-1] if self.segments else None

    def append(
        self,
        kind: SegmentKind,
        raw_length: float | None = None,
        turn_angle: float = 0.0,
    ) -> "Design":
        """Append a new segment to the end of the run.

        The first segment of a design always starts along the reference
        heading, so its stored turn is 0 whatever turn was requested.

        Args:
            kind: Standard pole section or gate.
            raw_length: Catalog pole length for standard sections.
            turn_angle: Requested heading change in degrees.

        Returns:
            A new Design with the segment appended.
        """
        segment = FenceSegment.create(
            kind,
            overlap=self.config.overlap,
            raw_length=raw_length,
            turn_angle=0.0 if self.is_empty else turn_angle,
        )
        return replace(self, segments=self.segments + (segment,))

    def remove_last(self) -> "Design":
        """Drop the final segment. An empty design is returned unchanged."""
        if self.is_empty:
            return self
        return replace(self, segments=self.segments[:-1])

    def reset(self) -> "Design":
        """Clear every segment, keeping the configuration."""
        return replace(self, segments=())

    def apply_configuration(self, config: FenceConfig) -> "Design":
        """Switch to a new configuration.

        Effective lengths are recomputed only when the overlap changed. Raw
        lengths, kinds, turns and ids are never touched.
        """
        segments = self.segments
        if config.overlap != self.config.overlap:
            segments = tuple(seg.with_overlap(config.overlap) for seg in segments)
        return replace(self, config=config, segments=segments)
