"""Sun elevation and relay visibility as functions of mission time."""

import math

from ..models import TileType
from ..utils.constants import COMM_WINDOW_HOURS, HOURS_PER_DAY, TOTAL_HOURS


def solar_irradiance(hour: int, tile_type: TileType) -> float:
    """Percent of full solar power reaching the panels.

    A single hump across the daylight campaign: low at landing and at dusk,
    peaking mid-mission. Shadowed regions get nothing.

    Args:
        hour: Mission hour (0..TOTAL_HOURS)
        tile_type: Terrain under the rover

    Returns:
        Irradiance percent in [0, 100]
    """
    if tile_type == TileType.PSR:
        return 0.0
    t = hour / TOTAL_HOURS
    base = math.sin(math.pi * (t * 0.9 + 0.05))
    return max(0.0, min(1.0, base)) * 100


def is_comm_window_open(hour: int) -> bool:
    """True while Vikram has a relay link; the schedule repeats every day."""
    hour_of_day = hour % HOURS_PER_DAY
    return any(start <= hour_of_day < start + duration for start, duration in COMM_WINDOW_HOURS)


def hour_to_day_hour(hour: int) -> tuple[int, int]:
    """Split a mission hour into (day 1..14, hour-of-day 0..23).

    Examples:
        >>> hour_to_day_hour(0)
        (1, 0)
        >>> hour_to_day_hour(50)
        (3, 2)
    """
    return hour // HOURS_PER_DAY + 1, hour % HOURS_PER_DAY


def hours_until_comm_window(hour: int) -> int:
    """Hours to wait for the next relay window; 0 if one is open now."""
    for wait in range(HOURS_PER_DAY):
        if is_comm_window_open(hour + wait):
            return wait
    raise RuntimeError("No comm window configured within a day")
