"""Unit tests for the interactive design session command dispatcher."""

import pytest

from fences.application import DesignController
from fences.cli.commands import DesignSession


@pytest.fixture
def session() -> DesignSession:
    """Session over a fresh default controller."""
    return DesignSession(DesignController())


class TestDesignSession:
    """Tests for DesignSession.handle."""

    def test_blank_line(self, session: DesignSession) -> None:
        """Blank input does nothing."""
        assert session.handle("   ") == ""

    def test_add_poles_and_gate(self, session: DesignSession) -> None:
        """Pole lengths and 'gate' append sections."""
        session.handle("2.4")
        session.handle("3.6m")
        status = session.handle("gate")
        segments = session.controller.design.segments
        assert [s.label for s in segments] == ["2.4m", "3.6m", "GATE"]
        assert status.startswith("3 sections")

    def test_turn_left_and_right(self, session: DesignSession) -> None:
        """'left' negates the angle; 'right' and 'turn' keep it."""
        session.handle("2.4")
        session.handle("left 90")
        session.handle("2.4")
        session.handle("right 45")
        session.handle("2.4")
        assert [s.turn_angle for s in session.controller.design.segments] == [0.0, -90.0, 45.0]

    def test_undo_and_reset(self, session: DesignSession) -> None:
        """undo removes one section; reset clears everything."""
        session.handle("2.4")
        session.handle("1.8")
        session.handle("undo")
        assert len(session.controller.design) == 1
        session.handle("turn 30")
        session.handle("reset")
        assert session.controller.design.is_empty
        assert session.controller.pending_turn == 0.0

    def test_overlap_change(self, session: DesignSession) -> None:
        """Changing overlap updates existing sections."""
        session.handle("3.6")
        session.handle("overlap 0.2")
        assert session.controller.design.segments[0].effective_length == pytest.approx(3.4)

    def test_height_and_spacing(self, session: DesignSession) -> None:
        """Height and spacing change the rails per section."""
        session.handle("height 1.8")
        session.handle("spacing 0.3")
        assert session.snapshot.bill.rails_per_section == 6

    def test_triangle_status_reports_closed(self, session: DesignSession) -> None:
        """The status line reports loop closure."""
        session.handle("overlap 0")
        session.handle("2.4")
        session.handle("turn 120")
        session.handle("2.4")
        status = session.handle("2.4")
        assert "closed loop" in status

    def test_reports(self, session: DesignSession) -> None:
        """show, plan, elevation, json and help return their text."""
        session.handle("2.4")
        assert "MATERIAL BILL" in session.handle("show")
        assert "PLAN" in session.handle("plan")
        assert "ELEVATION" in session.handle("elevation")
        assert '"segments"' in session.handle("json")
        assert "Commands:" in session.handle("help")

    @pytest.mark.parametrize(
        "line",
        ["2.0", "fly", "turn", "turn left", "overlap 2.0", "turn inf", "left nan", "overlap nan"],
    )
    def test_invalid_commands(self, session: DesignSession, line: str) -> None:
        """Bad commands raise ValueError and leave the design unchanged."""
        with pytest.raises(ValueError):
            session.handle(line)
        assert session.controller.design.is_empty

    def test_non_finite_turn_keeps_pending_turn(self, session: DesignSession) -> None:
        """A rejected turn leaves the selected turn as it was."""
        session.handle("turn 45")
        with pytest.raises(ValueError):
            session.handle("turn inf")
        assert session.controller.pending_turn == 45
