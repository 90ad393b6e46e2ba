"""Mission clock: bounded hour counter and the end-of-daylight deadline."""

from dataclasses import dataclass

from ..models import DORMANT_MODES, MissionMode
from ..utils.constants import TOTAL_HOURS

DEADLINE_MESSAGE = "Lunar night imminent. Initiating emergency hibernation."


@dataclass
class ClockTick:
    """Result of advancing the clock.

    Attributes:
        hour: Mission hour after the advance
        elapsed: Hours that actually passed (0 when already at the deadline)
        deadline_reached: True when ``hour`` equals TOTAL_HOURS
    """

    hour: int
    elapsed: int
    deadline_reached: bool


def advance_clock(hour: int, delta: int) -> ClockTick:
    """Advance the mission hour by ``delta``, clamped to [0, TOTAL_HOURS].

    Args:
        hour: Current mission hour
        delta: Hours to add (1 for an idle tick, more for slow actions)

    Returns:
        ClockTick with the new hour
    """
    if delta < 0:
        raise ValueError(f"Invalid delta: {delta} (clock never runs backwards)")
    new_hour = max(0, min(TOTAL_HOURS, hour + delta))
    return ClockTick(
        hour=new_hour,
        elapsed=new_hour - hour,
        deadline_reached=new_hour >= TOTAL_HOURS,
    )


def forces_hibernation(tick: ClockTick, mode: MissionMode) -> bool:
    """Whether the deadline check must push the rover into hibernation.

    This is the only mode change the simulation makes on its own.
    """
    return tick.deadline_reached and mode not in DORMANT_MODES
