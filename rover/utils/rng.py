"""Seedable RNGs for deterministic missions."""

import math
import random


class MissionRNG:
    """Wrapper around Python's random.Random for deterministic missions.

    Every draw made while the mission runs (wheel slips, spectrum challenges,
    science gains, wake attempts) goes through one instance of this class so
    that a mission replays identically from its seed.
    """

    def __init__(self, seed: int):
        """Initialize RNG with given seed.

        Args:
            seed: Integer seed for deterministic randomness
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return random integer in range [a, b], inclusive."""
        return self.rng.randint(a, b)

    def choice(self, seq):
        """Choose random element from non-empty sequence."""
        return self.rng.choice(seq)

    def sample(self, population, k: int) -> list:
        """Choose k unique elements from population, in random order.

        Args:
            population: Sequence to draw from
            k: Number of elements to draw

        Returns:
            New list of k distinct elements
        """
        return self.rng.sample(population, k)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self.rng.random()

    def chance(self, probability: float) -> bool:
        """Single Bernoulli draw.

        Args:
            probability: Success probability in [0, 1]

        Returns:
            True with the given probability
        """
        return self.rng.random() < probability


class TerrainRNG:
    """Iterated-sine generator that lays out the polar sector.

    Each draw is ``x = sin(x) * 10000`` keeping the fractional part, starting
    from ``x = sin(seed) * 10000``. Published seeds (1337 lands Vikram on
    flat regolith) depend on this exact sequence, so terrain never comes
    from MissionRNG.

    Seed 0 is degenerate: every draw is 0.0.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self._x = math.sin(seed) * 10000

    def random(self) -> float:
        """Return the next float in [0.0, 1.0)."""
        self._x = math.sin(self._x) * 10000
        return self._x - math.floor(self._x)

    def randint(self, a: int, b: int) -> int:
        """Return integer in [a, b] from a single draw."""
        return a + math.floor(self.random() * (b - a + 1))

    def choice(self, seq):
        """Choose an element of a non-empty sequence from a single draw."""
        return seq[math.floor(self.random() * len(seq))]
