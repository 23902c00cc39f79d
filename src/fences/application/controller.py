"""Interactive design session state."""

from __future__ import annotations

import logging

from fences.domain import (
    BillOfMaterialsCalculator,
    Design,
    FenceConfig,
    GeometryResolver,
    PoleLength,
    SegmentKind,
    build_elevation,
)

from .dtos import DesignSnapshot

logger = logging.getLogger(__name__)


class DesignController:
    """Owns the state of one design session.

    The controller holds the current Design and the pending turn selection.
    Each action swaps in a new Design and recomputes the snapshot before
    returning, so callers never observe stale geometry or totals.
    """

    def __init__(
        self,
        config: FenceConfig | None = None,
        bill_calculator: BillOfMaterialsCalculator | None = None,
    ) -> None:
        self.bill_calculator = bill_calculator or BillOfMaterialsCalculator()
        self._design = Design(config=config or FenceConfig())
        self._pending_turn = 0.0
        self._snapshot = self._compute_snapshot()

    @property
    def design(self) -> Design:
        return self._design

    @property
    def config(self) -> FenceConfig:
        return self._design.config

    @property
    def pending_turn(self) -> float:
        return self._pending_turn

    def snapshot(self) -> DesignSnapshot:
        """Current design with its geometry, bill and elevation."""
        return self._snapshot

    def select_turn(self, angle: float) -> DesignSnapshot:
        """Choose the turn applied to segments appended from now on."""
        self._pending_turn = float(angle)
        logger.debug(f"Pending turn set to {self._pending_turn:g} degrees")
        self._snapshot = self._compute_snapshot()
        return self._snapshot

    def append(self, kind: SegmentKind, raw_length: float | None = None) -> DesignSnapshot:
        """Append a segment using the pending turn.

        Raises:
            ValueError: If a standard section is requested with a non-catalog length.
        """
        return self._replace(
            self._design.append(kind, raw_length=raw_length, turn_angle=self._pending_turn),
            f"append {kind.value} {raw_length if raw_length is not None else ''}".rstrip(),
        )

    def add_pole(self, length: float | PoleLength) -> DesignSnapshot:
        """Append a standard section of the given catalog length."""
        return self.append(SegmentKind.STANDARD, float(length))

    def add_gate(self) -> DesignSnapshot:
        """Append a gate."""
        return self.append(SegmentKind.GATE)

    def remove_last(self) -> DesignSnapshot:
        """Remove the final segment, if any."""
        return self._replace(self._design.remove_last(), "remove last")

    def reset(self) -> DesignSnapshot:
        """Clear the design and the pending turn."""
        self._pending_turn = 0.0
        return self._replace(self._design.reset(), "reset")

    def update_configuration(self, config: FenceConfig) -> DesignSnapshot:
        """Replace the configuration, recomputing effective lengths if needed."""
        return self._replace(self._design.apply_configuration(config), "configure")

    def _replace(self, design: Design, action: str) -> DesignSnapshot:
        self._design = design
        self._snapshot = self._compute_snapshot()
        logger.debug(
            f"{action}: {len(design)} segments, closed={self._snapshot.geometry.is_closed_loop}"
        )
        return self._snapshot

    def _compute_snapshot(self) -> DesignSnapshot:
        design = self._design
        geometry = GeometryResolver.for_config(design.config).resolve(design.segments)
        bill = self.bill_calculator.calculate(
            design.segments, design.config, geometry.is_closed_loop
        )
        elevation = build_elevation(
            design.segments, design.config, is_closed_loop=geometry.is_closed_loop
        )
        return DesignSnapshot(
            design=design,
            geometry=geometry,
            bill=bill,
            elevation=elevation,
            pending_turn=self._pending_turn,
        )
