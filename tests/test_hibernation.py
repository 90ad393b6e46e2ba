"""Tests for the hibernation timing and wake model."""

import pytest

from rover.engine.hibernation import (
    attempt_wake,
    in_green_band,
    timing_skill,
    wake_probability,
)
from rover.models import TileType
from rover.utils import MissionRNG


@pytest.mark.parametrize(
    "stop,skill",
    [(55, 1.0), (0, 0.0), (110, 0.0), (100, pytest.approx(1 - 45 / 55)), (44, pytest.approx(0.8))],
)
def test_timing_skill(stop, skill):
    """Skill falls off linearly from the center and never goes negative."""
    assert timing_skill(stop) == skill


def test_green_band():
    """The highlighted band is the open interval (45, 65)."""
    assert in_green_band(55)
    assert in_green_band(45.1)
    assert not in_green_band(45)
    assert not in_green_band(65)


@pytest.mark.parametrize(
    "tile_type,base",
    [
        (TileType.NORMAL, 0.35),
        (TileType.RIM, 0.35),
        (TileType.LANDER, 0.35),
        (TileType.SLOPE, 0.15),
        (TileType.BOULDER, 0.15),
        (TileType.CRATER, 0.15),
        (TileType.PSR, 0.15),
    ],
)
def test_wake_probability(tile_type, base):
    """Base by terrain, plus half the skill, capped at 0.85."""
    assert wake_probability(0.0, tile_type) == pytest.approx(base)
    assert wake_probability(0.4, tile_type) == pytest.approx(base + 0.2)
    assert wake_probability(1.0, tile_type) == pytest.approx(min(0.85, base + 0.5))


def test_wake_probability_bounds():
    """Probability stays within [0.15, 0.85] for any skill input."""
    for skill in (-1.0, 0.0, 0.3, 0.7, 1.0, 2.0):
        for tile_type in TileType:
            assert 0.15 <= wake_probability(skill, tile_type) <= 0.85


def test_attempt_wake_frequency():
    """Over many draws the success rate tracks the probability."""
    rng = MissionRNG(2024)
    trials = 4000
    successes = sum(attempt_wake(rng, 1.0, TileType.NORMAL) for _ in range(trials))
    assert abs(successes / trials - 0.85) < 0.03


def test_attempt_wake_deterministic():
    """Same seed, same outcomes."""
    a, b = MissionRNG(8), MissionRNG(8)
    assert [attempt_wake(a, 0.5, TileType.SLOPE) for _ in range(20)] == [
        attempt_wake(b, 0.5, TileType.SLOPE) for _ in range(20)
    ]
