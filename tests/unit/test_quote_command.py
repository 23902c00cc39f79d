"""Unit tests for QuoteDesignCommand."""

import pytest

from fences.application import QuoteDesignCommand, SegmentInput
from fences.domain import FenceConfig


class TestQuoteDesignCommand:
    """Tests for QuoteDesignCommand."""

    def test_empty_input_quotes_empty_design(self, quote_command: QuoteDesignCommand) -> None:
        """No segments gives a valid, empty quote."""
        result = quote_command.execute([])
        assert result.is_valid
        assert result.snapshot.bill.is_empty

    def test_pole_and_gate(self, quote_command: QuoteDesignCommand) -> None:
        """The 2.4m + gate scenario costs 2090 with defaults."""
        result = quote_command.execute(
            [SegmentInput(length=2.4), SegmentInput(kind="gate", turn=90)]
        )
        assert result.is_valid
        assert result.snapshot.bill.total_cost == pytest.approx(2090.0)
        assert result.snapshot.bill.total_posts == 3

    def test_first_turn_anchored(self, quote_command: QuoteDesignCommand) -> None:
        """A turn on the first segment is ignored."""
        result = quote_command.execute([SegmentInput(length=2.4, turn=75)])
        assert result.snapshot.design.segments[0].turn_angle == 0.0

    def test_uses_supplied_config(self, quote_command: QuoteDesignCommand) -> None:
        """The configuration is passed through to the design."""
        config = FenceConfig(overlap=0.0)
        result = quote_command.execute(
            [
                SegmentInput(length=2.4),
                SegmentInput(length=2.4, turn=120),
                SegmentInput(length=2.4, turn=120),
            ],
            config,
        )
        assert result.snapshot.geometry.is_closed_loop
        assert result.snapshot.design.config is config

    def test_invalid_segments_reported_with_position(
        self, quote_command: QuoteDesignCommand
    ) -> None:
        """Each invalid segment is reported and no snapshot is produced."""
        result = quote_command.execute(
            [
                SegmentInput(length=2.4),
                SegmentInput(length=2.0),
                SegmentInput(kind="fence"),
                SegmentInput(),
            ]
        )
        assert not result.is_valid
        assert result.snapshot is None
        assert len(result.errors) == 3
        assert result.errors[0].startswith("Segment 2:")
        assert result.errors[1].startswith("Segment 3:")
        assert "pole length" in result.errors[2]
