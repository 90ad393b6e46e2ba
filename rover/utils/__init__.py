"""Utility functions and constants for the rover simulator."""

from .constants import (
    ELEMENTS,
    MAP_SIZE,
    MAX_DATA_BUFFER,
    RNG_SEED_DEFAULT,
    START_POWER,
    TOTAL_HOURS,
)
from .grid import manhattan_distance, orthogonal_neighbours, within
from .rng import MissionRNG, TerrainRNG

__all__ = [
    "ELEMENTS",
    "MAP_SIZE",
    "MAX_DATA_BUFFER",
    "RNG_SEED_DEFAULT",
    "START_POWER",
    "TOTAL_HOURS",
    "manhattan_distance",
    "orthogonal_neighbours",
    "within",
    "MissionRNG",
    "TerrainRNG",
]
