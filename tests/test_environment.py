"""Tests for solar irradiance and comm-window scheduling."""

import math

import pytest

from rover.engine.environment import (
    hour_to_day_hour,
    hours_until_comm_window,
    is_comm_window_open,
    solar_irradiance,
)
from rover.models import TileType
from rover.utils import TOTAL_HOURS

NON_PSR_TYPES = [t for t in TileType if t != TileType.PSR]


def test_psr_irradiance_is_zero():
    """Shadowed regions never see the sun."""
    for hour in range(TOTAL_HOURS + 1):
        assert solar_irradiance(hour, TileType.PSR) == 0


def test_irradiance_within_bounds():
    """Irradiance is a percentage for every hour and sunlit tile."""
    for tile_type in NON_PSR_TYPES:
        for hour in range(TOTAL_HOURS + 1):
            assert 0 <= solar_irradiance(hour, tile_type) <= 100


def test_irradiance_curve_shape():
    """Low at landing, full at mid-mission, symmetric about the middle."""
    assert solar_irradiance(0, TileType.NORMAL) == pytest.approx(math.sin(math.pi * 0.05) * 100)
    assert solar_irradiance(TOTAL_HOURS // 2, TileType.NORMAL) == pytest.approx(100)

    for hour in range(0, TOTAL_HOURS + 1, 7):
        assert solar_irradiance(hour, TileType.RIM) == pytest.approx(
            solar_irradiance(TOTAL_HOURS - hour, TileType.RIM)
        )


def test_irradiance_rises_then_falls():
    """Single hump: increasing up to mid-mission, decreasing after."""
    half = TOTAL_HOURS // 2
    values = [solar_irradiance(h, TileType.NORMAL) for h in range(TOTAL_HOURS + 1)]
    assert all(a <= b for a, b in zip(values[:half], values[1 : half + 1]))
    assert all(a >= b for a, b in zip(values[half:], values[half + 1 :]))


@pytest.mark.parametrize(
    "hour,expected",
    [
        (0, False),
        (1, False),
        (2, True),
        (3, True),
        (4, False),
        (9, False),
        (10, True),
        (11, True),
        (12, False),
        (18, True),
        (19, True),
        (20, False),
        (23, False),
        (26, True),
        (28, False),
        (TOTAL_HOURS, False),
    ],
)
def test_comm_windows(hour, expected):
    """Three two-hour windows per day: 02-04, 10-12, 18-20."""
    assert is_comm_window_open(hour) is expected


def test_comm_window_period_is_one_day():
    """The window pattern repeats every 24 hours."""
    for hour in range(TOTAL_HOURS):
        assert is_comm_window_open(hour) == is_comm_window_open(hour + 24)


def test_hour_to_day_hour():
    """Mission hours map to 1-based days and 0-based hours of day."""
    assert hour_to_day_hour(0) == (1, 0)
    assert hour_to_day_hour(23) == (1, 23)
    assert hour_to_day_hour(50) == (3, 2)
    assert hour_to_day_hour(TOTAL_HOURS - 1) == (14, 23)


def test_hours_until_comm_window():
    """Wait time to the next window, zero while one is open."""
    assert hours_until_comm_window(0) == 2
    assert hours_until_comm_window(2) == 0
    assert hours_until_comm_window(3) == 0
    assert hours_until_comm_window(4) == 6
    assert hours_until_comm_window(20) == 6
