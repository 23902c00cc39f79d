"""Application commands (use cases) for fence quoting."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from fences.domain import BillOfMaterialsCalculator, FenceConfig

from .controller import DesignController
from .dtos import QuoteOutput, SegmentInput

logger = logging.getLogger(__name__)


class QuoteDesignCommand:
    """Command to build a design from append requests and price it.

    The requests are replayed in order through a DesignController, exactly as
    if a user had selected each turn and pressed the matching button.
    """

    def __init__(self, bill_calculator: BillOfMaterialsCalculator | None = None) -> None:
        self.bill_calculator = bill_calculator or BillOfMaterialsCalculator()

    def execute(
        self,
        segments: Sequence[SegmentInput],
        config: FenceConfig | None = None,
    ) -> QuoteOutput:
        """Execute the quote command.

        Args:
            segments: Append requests in design order.
            config: Fence configuration. Defaults are used when omitted.

        Returns:
            QuoteOutput with the snapshot, or the validation errors.
        """
        errors: list[str] = []
        for index, segment in enumerate(segments):
            errors.extend(f"Segment {index + 1}: {e}" for e in segment.validate())
        if errors:
            return QuoteOutput(errors=errors)

        controller = DesignController(config=config, bill_calculator=self.bill_calculator)
        for segment in segments:
            controller.select_turn(segment.turn)
            controller.append(segment.segment_kind, segment.length)

        snapshot = controller.snapshot()
        logger.debug(
            f"Quoted {len(snapshot.design)} segments, total {snapshot.bill.total_cost:.2f}"
        )
        return QuoteOutput(snapshot=snapshot)

