"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from fences.domain import (
    BillOfMaterials,
    Design,
    ElevationProfile,
    FenceGeometry,
    PoleLength,
    SegmentKind,
)

GATE_TOKENS = frozenset({"gate", "g"})


@dataclass
class SegmentInput:
    """Input DTO for one append request.

    Attributes:
        kind: "standard" or "gate".
        length: Catalog pole length in meters (standard sections only).
        turn: Heading change in degrees before the segment.
    """

    kind: str = SegmentKind.STANDARD.value
    length: float | None = None
    turn: float = 0.0

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        valid_kinds = [k.value for k in SegmentKind]
        if self.kind not in valid_kinds:
            errors.append(f"Segment kind must be one of: {', '.join(valid_kinds)}")
            return errors
        if not math.isfinite(self.turn):
            errors.append(f"Turn angle must be a finite number, got {self.turn}")
        if self.kind == SegmentKind.STANDARD.value:
            if self.length is None:
                errors.append("Standard sections need a pole length")
            else:
                try:
                    PoleLength.from_meters(self.length)
                except ValueError as e:
                    errors.append(str(e))
        return errors

    @property
    def segment_kind(self) -> SegmentKind:
        return SegmentKind(self.kind)

    @classmethod
    def from_token(cls, token: str) -> "SegmentInput":
        """Parse a compact segment token.

        Tokens are "<length>[@<turn>]" or "gate[@<turn>]", for example
        "2.4", "3.6@90" or "gate@-45".

        Raises:
            ValueError: If the token cannot be parsed.
        """
        text = token.strip().lower()
        if not text:
            raise ValueError("Empty segment token")
        body, _, turn_text = text.partition("@")
        turn = 0.0
        if turn_text:
            try:
                turn = float(turn_text)
            except ValueError:
                raise ValueError(f"Invalid turn angle in segment '{token}'")
            if not math.isfinite(turn):
                raise ValueError(f"Invalid turn angle in segment '{token}'")
        body = body.strip().removesuffix("m")
        if body in GATE_TOKENS:
            return cls(kind=SegmentKind.GATE.value, turn=turn)
        try:
            length = float(body)
        except ValueError:
            raise ValueError(
                f"Invalid segment '{token}': expected a pole length or 'gate'"
            )
        return cls(kind=SegmentKind.STANDARD.value, length=length, turn=turn)


@dataclass
class DesignSnapshot:
    """Consistent view of a design with everything derived from it.

    Attributes:
        design: The design the derived values were computed from.
        geometry: Plan geometry of the design.
        bill: Bill of materials for the design.
        elevation: Unfolded side-view data.
        pending_turn: Turn that will be applied to the next appended segment.
    """

    design: Design
    geometry: FenceGeometry
    bill: BillOfMaterials
    elevation: ElevationProfile
    pending_turn: float = 0.0


@dataclass
class QuoteOutput:
    """Output DTO for a batch quote.

    Attributes:
        snapshot: Design and derived values. None when the input was invalid.
        errors: Validation errors that prevented the quote.
    """

    snapshot: DesignSnapshot | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the quote was produced successfully."""
        return len(self.errors) == 0 and self.snapshot is not None
