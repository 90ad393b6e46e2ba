"""Tests for the mission and terrain RNGs."""

import math

from rover.utils import MissionRNG, TerrainRNG


def test_same_seed_same_sequence():
    """Two RNGs with one seed produce identical draws."""
    a, b = MissionRNG(99), MissionRNG(99)
    assert [a.randint(0, 100) for _ in range(20)] == [b.randint(0, 100) for _ in range(20)]
    assert a.sample(list(range(10)), 4) == b.sample(list(range(10)), 4)
    assert a.random() == b.random()


def test_chance_bounds():
    """Probability 0 never fires and probability 1 always does."""
    rng = MissionRNG(5)
    assert not any(rng.chance(0.0) for _ in range(100))
    assert all(rng.chance(1.0) for _ in range(100))


def test_sample_distinct():
    """Sampled elements are unique."""
    rng = MissionRNG(3)
    for _ in range(50):
        drawn = rng.sample(["a", "b", "c", "d", "e", "f"], 4)
        assert len(set(drawn)) == 4



def test_terrain_rng_iterated_sine():
    """Each terrain draw is the fractional part of sin(previous) * 10000."""
    rng = TerrainRNG(1337)
    x = math.sin(1337) * 10000
    for _ in range(10):
        x = math.sin(x) * 10000
        assert rng.random() == x - math.floor(x)


def test_terrain_rng_ranges():
    """randint and choice scale one draw onto the requested range."""
    rng = TerrainRNG(42)
    values = [rng.randint(18, 25) for _ in range(500)]
    assert min(values) >= 18 and max(values) <= 25
    assert len(set(values)) == 8
    assert {rng.choice(["a", "b"]) for _ in range(100)} == {"a", "b"}


def test_terrain_rng_deterministic():
    """Same seed, same terrain stream."""
    a, b = TerrainRNG(7), TerrainRNG(7)
    assert [a.random() for _ in range(50)] == [b.random() for _ in range(50)]


def test_terrain_rng_seed_zero_is_degenerate():
    """sin(0) is 0, so seed 0 only ever draws 0.0."""
    rng = TerrainRNG(0)
    assert [rng.random() for _ in range(5)] == [0.0] * 5
