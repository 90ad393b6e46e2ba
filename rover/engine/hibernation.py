"""Lunar-night hibernation: timing skill and wake-up odds."""

from ..models import TileType
from ..models.tile import UNEVEN_TILES
from ..utils import MissionRNG
from ..utils.constants import (
    FLAT_WAKE_BASE,
    MAX_WAKE_PROB,
    ROUGH_WAKE_BASE,
    TIMING_CENTER,
    TIMING_GREEN_BAND,
    WAKE_SKILL_WEIGHT,
)

WAKE_SUCCESS_MESSAGE = "Pragyan responded after lunar night! Limited operations possible."
WAKE_FAILURE_MESSAGE = "No response. Mission concluded."


def timing_skill(stop_position: float, center: float = TIMING_CENTER) -> float:
    """Score how close the shutdown timing bar was stopped to its center.

    Args:
        stop_position: Where the bar was stopped, on a 0..100 scale
        center: Ideal stop position on the same scale

    Returns:
        Skill in [0, 1]; 1 means stopped dead center
    """
    return max(0.0, 1 - abs(stop_position - center) / center)


def in_green_band(stop_position: float) -> bool:
    """Whether the bar stopped inside the highlighted band."""
    low, high = TIMING_GREEN_BAND
    return low < stop_position < high


def wake_probability(skill: float, tile_type: TileType) -> float:
    """Chance the rover answers after the lunar night.

    Flat ground gives a 35% base, uneven ground 15%; skill adds up to 50
    points, capped at 85%.
    """
    skill = max(0.0, min(1.0, skill))
    base = FLAT_WAKE_BASE if tile_type not in UNEVEN_TILES else ROUGH_WAKE_BASE
    return min(MAX_WAKE_PROB, base + skill * WAKE_SKILL_WEIGHT)


def attempt_wake(rng: MissionRNG, skill: float, tile_type: TileType) -> bool:
    """Single Bernoulli draw against ``wake_probability``."""
    return rng.chance(wake_probability(skill, tile_type))
