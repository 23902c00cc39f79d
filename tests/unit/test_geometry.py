"""Unit tests for plan geometry resolution and the elevation profile.

These tests verify:
- Heading accumulation and segment placement
- Closed-loop detection with tolerance and minimum segment count
- Bounding box includes the origin
- Elevation stations and post stations
"""

import pytest

from fences.domain import Design, FenceConfig, GeometryResolver, SegmentKind, resolve_geometry
from fences.domain.services import build_elevation


class TestGeometryResolver:
    """Tests for GeometryResolver."""

    def test_empty_design(self) -> None:
        """No segments: no positions, degenerate box at the origin, not closed."""
        geometry = GeometryResolver().resolve([])
        assert geometry.positions == ()
        assert geometry.bounding_box.width == 0.0
        assert geometry.bounding_box.height == 0.0
        assert not geometry.is_closed_loop
        assert geometry.closure_gap == 0.0
        assert geometry.end_point.x == 0.0

    def test_single_segment_along_x_axis(self, zero_overlap_config: FenceConfig) -> None:
        """The first segment runs along heading 0."""
        design = Design(config=zero_overlap_config).append(SegmentKind.STANDARD, 2.4)
        geometry = resolve_geometry(design.segments, design.config)
        position = geometry.positions[0]
        assert position.start.x == 0.0
        assert position.end.x == pytest.approx(2.4)
        assert position.end.y == pytest.approx(0.0)
        assert position.segment_id == design.segments[0].id

    def test_headings_accumulate(self, zero_overlap_config: FenceConfig) -> None:
        """Turns add up along the run."""
        design = (
            Design(config=zero_overlap_config)
            .append(SegmentKind.STANDARD, 1.8)
            .append(SegmentKind.STANDARD, 1.8, turn_angle=90)
            .append(SegmentKind.STANDARD, 1.8, turn_angle=90)
        )
        geometry = resolve_geometry(design.segments, design.config)
        assert [p.heading for p in geometry.positions] == [0.0, 90.0, 180.0]
        end = geometry.end_point
        assert end.x == pytest.approx(0.0, abs=1e-9)
        assert end.y == pytest.approx(1.8)
        assert geometry.heading == 180.0

    def test_segments_are_contiguous(self, triangle_design: Design) -> None:
        """Each segment starts where the previous one ended."""
        geometry = resolve_geometry(triangle_design.segments, triangle_design.config)
        for previous, current in zip(geometry.positions, geometry.positions[1:]):
            assert current.start == previous.end

    def test_equilateral_triangle_is_closed(self, triangle_design: Design) -> None:
        """Three 2.4m sections turned 120 degrees twice close the loop."""
        geometry = resolve_geometry(triangle_design.segments, triangle_design.config)
        assert geometry.is_closed_loop
        assert geometry.closure_gap < 1e-9

    def test_two_segments_never_close(self, zero_overlap_config: FenceConfig) -> None:
        """Two segments are not a loop even if they fold back on themselves."""
        design = (
            Design(config=zero_overlap_config)
            .append(SegmentKind.STANDARD, 2.4)
            .append(SegmentKind.STANDARD, 2.4, turn_angle=180)
        )
        geometry = resolve_geometry(design.segments, design.config)
        assert geometry.closure_gap < 1e-9
        assert not geometry.is_closed_loop

    def test_right_angle_pair_is_open(self, zero_overlap_config: FenceConfig) -> None:
        """Turns [0, 90] leave an open run."""
        design = (
            Design(config=zero_overlap_config)
            .append(SegmentKind.STANDARD, 2.4)
            .append(SegmentKind.STANDARD, 2.4, turn_angle=90)
        )
        geometry = resolve_geometry(design.segments, design.config)
        assert not geometry.is_closed_loop
        assert geometry.closure_gap == pytest.approx(2.4 * 2**0.5)

    def test_gap_within_tolerance_closes(self) -> None:
        """A square with overlap still closes when the gap is under tolerance."""
        config = FenceConfig(overlap=0.15)
        design = Design(config=config)
        for turn in (0, 90, 90, 90):
            design = design.append(SegmentKind.STANDARD, 2.4, turn_angle=turn)
        geometry = resolve_geometry(design.segments, config)
        assert geometry.is_closed_loop

    def test_gap_at_tolerance_is_open(self, zero_overlap_config: FenceConfig) -> None:
        """The gap must be strictly below the tolerance."""
        design = Design(config=zero_overlap_config)
        for turn in (0, 90, 90):
            design = design.append(SegmentKind.STANDARD, 1.8, turn_angle=turn)
        gap = GeometryResolver().resolve(design.segments).closure_gap
        assert gap == pytest.approx(1.8)
        assert not GeometryResolver(closure_tolerance=gap).resolve(design.segments).is_closed_loop
        assert GeometryResolver(closure_tolerance=gap + 0.01).resolve(design.segments).is_closed_loop

    def test_closure_settings_from_config(self, triangle_design: Design) -> None:
        """min_closed_segments from the configuration is honored."""
        config = triangle_design.config.with_changes(min_closed_segments=4)
        geometry = resolve_geometry(triangle_design.segments, config)
        assert not geometry.is_closed_loop

    def test_bounding_box_includes_origin(self, zero_overlap_config: FenceConfig) -> None:
        """The box always covers the start point, even for a left-heading run."""
        design = (
            Design(config=zero_overlap_config)
            .append(SegmentKind.STANDARD, 2.4)
            .append(SegmentKind.STANDARD, 3.6, turn_angle=-90)
        )
        box = resolve_geometry(design.segments, design.config).bounding_box
        assert box.min_x == 0.0
        assert box.max_x == pytest.approx(2.4)
        assert box.min_y == pytest.approx(-3.6)
        assert box.max_y == pytest.approx(0.0, abs=1e-9)

    def test_points_include_origin(self, triangle_design: Design) -> None:
        """points lists the origin followed by every end point."""
        geometry = resolve_geometry(triangle_design.segments, triangle_design.config)
        assert len(geometry.points) == 4
        assert geometry.points[0].x == 0.0


class TestElevationProfile:
    """Tests for build_elevation."""

    def test_stations_follow_effective_lengths(self, default_config: FenceConfig) -> None:
        """Stations are laid end to end using effective lengths."""
        design = (
            Design(config=default_config)
            .append(SegmentKind.STANDARD, 2.4)
            .append(SegmentKind.GATE, turn_angle=90)
        )
        profile = build_elevation(design.segments, default_config)
        assert [s.label for s in profile.stations] == ["2.4m", "GATE"]
        assert profile.stations[0].end == pytest.approx(2.25)
        assert profile.stations[1].start == pytest.approx(2.25)
        assert profile.total_length == pytest.approx(3.25)

    def test_open_run_has_terminal_post(self, default_config: FenceConfig) -> None:
        """An open run gets a post at its end."""
        design = Design(config=default_config).append(SegmentKind.STANDARD, 2.4)
        profile = build_elevation(design.segments, default_config, is_closed_loop=False)
        assert profile.post_stations == pytest.approx((0.0, 2.25))

    def test_closed_loop_shares_first_post(self, triangle_design: Design) -> None:
        """A closed loop has one post per segment."""
        profile = build_elevation(triangle_design.segments, triangle_design.config)
        assert len(profile.post_stations) == 3

    def test_rail_heights_and_post_height(self, default_config: FenceConfig) -> None:
        """Rails start 0.1m above ground; posts are 1.25 x fence height."""
        profile = build_elevation([], default_config)
        assert profile.rail_heights == pytest.approx((0.1, 0.4, 0.7, 1.0))
        assert profile.post_height == pytest.approx(1.5)
        assert profile.total_length == 0.0
        assert profile.post_stations == ()
