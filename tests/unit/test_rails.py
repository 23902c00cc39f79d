"""Unit tests for the shared rail layout rules."""

import pytest

from fences.domain import FenceConfig, rail_heights, rails_per_section
from fences.domain.services import post_height


class TestRailsPerSection:
    """Tests for rails_per_section."""

    def test_default_fence_has_four_rails(self) -> None:
        """1.2m high with 0.3m spacing stacks 4 rails."""
        assert rails_per_section(FenceConfig(fence_height=1.2, rail_spacing=0.3)) == 4

    @pytest.mark.parametrize(
        ("height", "spacing", "expected"),
        [
            (1.8, 0.3, 6),
            (1.0, 0.25, 4),
            (2.4, 0.6, 4),
            (0.5, 0.6, 1),
        ],
    )
    def test_floor_of_usable_height(self, height: float, spacing: float, expected: int) -> None:
        """Rails fill the height above the ground clearance."""
        assert rails_per_section(FenceConfig(fence_height=height, rail_spacing=spacing)) == expected

    def test_clamps_at_zero(self) -> None:
        """A fence lower than the bottom rail clearance gets no rails."""
        assert rails_per_section(FenceConfig(fence_height=0.05, rail_spacing=0.3)) == 0
        assert rail_heights(FenceConfig(fence_height=0.05, rail_spacing=0.3)) == []

    def test_rail_heights_match_count(self) -> None:
        """One height per billed rail."""
        config = FenceConfig(fence_height=1.8, rail_spacing=0.3)
        heights = rail_heights(config)
        assert len(heights) == rails_per_section(config)
        assert heights[0] == pytest.approx(0.1)
        assert heights[-1] == pytest.approx(1.6)

    def test_post_height(self) -> None:
        """Posts are a quarter longer than the fence is high."""
        assert post_height(FenceConfig(fence_height=2.0)) == pytest.approx(2.5)
