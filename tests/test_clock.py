"""Tests for the mission clock."""

import pytest

from rover.engine.clock import advance_clock, forces_hibernation
from rover.models import MissionMode
from rover.utils import TOTAL_HOURS


def test_idle_tick():
    """One idle tick advances one hour."""
    tick = advance_clock(0, 1)
    assert tick.hour == 1
    assert tick.elapsed == 1
    assert not tick.deadline_reached


def test_advance_clamped_at_deadline():
    """The clock never runs past the end of daylight."""
    tick = advance_clock(TOTAL_HOURS - 1, 3)
    assert tick.hour == TOTAL_HOURS
    assert tick.elapsed == 1
    assert tick.deadline_reached


def test_advance_at_deadline_elapses_nothing():
    """At the deadline, further advances are zero-length but still flag it."""
    tick = advance_clock(TOTAL_HOURS, 1)
    assert tick.hour == TOTAL_HOURS
    assert tick.elapsed == 0
    assert tick.deadline_reached


def test_negative_delta_rejected():
    """Hour is monotonically non-decreasing."""
    with pytest.raises(ValueError):
        advance_clock(10, -1)


@pytest.mark.parametrize(
    "mode,expected",
    [
        (MissionMode.NAVIGATION, True),
        (MissionMode.ANALYZING, True),
        (MissionMode.HIBERNATING, False),
        (MissionMode.AWAITING_WAKE, False),
    ],
)
def test_deadline_forces_hibernation(mode, expected):
    """Deadline forces hibernation unless the rover is already dormant."""
    assert forces_hibernation(advance_clock(TOTAL_HOURS, 1), mode) is expected


def test_no_forced_hibernation_before_deadline():
    """Ordinary ticks never change mode."""
    assert not forces_hibernation(advance_clock(100, 1), MissionMode.NAVIGATION)
