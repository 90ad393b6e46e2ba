"""Mission state container and read-only snapshot."""

from dataclasses import dataclass, field
from enum import Enum

from ..utils.constants import (
    DEFAULT_TICK_RATE,
    MAX_DATA_BUFFER,
    MAX_POWER,
    MAX_RESOURCE_POTENTIAL,
    START_POWER,
    TOTAL_HOURS,
)
from .challenge import SpectrumChallenge
from .objective import Objective, initial_objectives
from .position import Position
from .tile import Tile


class MissionMode(Enum):
    """High-level operating state of the rover."""

    NAVIGATION = "NAVIGATION"
    ANALYZING = "ANALYZING"
    HIBERNATING = "HIBERNATING"
    AWAITING_WAKE = "AWAITING_WAKE"


# Modes in which the rover is shut down for the lunar night
DORMANT_MODES = frozenset({MissionMode.HIBERNATING, MissionMode.AWAITING_WAKE})


@dataclass
class MissionState:
    """Single mutable mission aggregate.

    Only MissionController writes to this object. Engine modules read it and
    return outcomes that the controller commits.
    """

    position: Position
    hour: int = 0  # 0..TOTAL_HOURS
    power: float = START_POWER  # percent
    data_buffer: float = 0.0  # MB
    resource_potential: float = 0.0  # percent
    mode: MissionMode = MissionMode.NAVIGATION
    objectives: list[Objective] = field(default_factory=initial_objectives)
    log: list[str] = field(default_factory=list)  # Newest first
    challenge: SpectrumChallenge | None = None  # Active analysis, if any
    path: list[Position] = field(default_factory=list)  # Queued single steps
    wake_succeeded: bool | None = None  # Outcome of the wake attempt

    def __post_init__(self):
        """Validate mission data after initialization."""
        if not 0 <= self.hour <= TOTAL_HOURS:
            raise ValueError(f"Invalid hour: {self.hour} (must be 0-{TOTAL_HOURS})")
        if not 0 <= self.power <= MAX_POWER:
            raise ValueError(f"Invalid power: {self.power} (must be 0-{MAX_POWER})")
        if not 0 <= self.data_buffer <= MAX_DATA_BUFFER:
            raise ValueError(
                f"Invalid data_buffer: {self.data_buffer} (must be 0-{MAX_DATA_BUFFER})"
            )
        if not 0 <= self.resource_potential <= MAX_RESOURCE_POTENTIAL:
            raise ValueError(
                f"Invalid resource_potential: {self.resource_potential} "
                f"(must be 0-{MAX_RESOURCE_POTENTIAL})"
            )

    def add_log(self, message: str) -> None:
        """Prepend a mission log entry."""
        self.log.insert(0, message)

    def objective(self, objective_id) -> Objective:
        """Look up an objective by id."""
        for obj in self.objectives:
            if obj.id == objective_id:
                return obj
        raise KeyError(objective_id)


@dataclass(frozen=True)
class ChallengeView:
    """Read-only view of an active spectrum challenge."""

    instrument: str
    target_count: int
    peaks: tuple[int, ...]  # Peak channels only; element identities stay hidden
    guessed_elements: tuple[str, ...]
    correct_elements: tuple[str, ...]
    solved: bool


@dataclass(frozen=True)
class MissionSnapshot:
    """Immutable copy of everything a presentation layer may render."""

    seed: int
    grid: tuple[tuple[Tile, ...], ...]
    lander: Position
    position: Position
    hour: int
    day: int
    hour_of_day: int
    power: float
    data_buffer: float
    resource_potential: float
    irradiance: float
    comm_window_open: bool
    mode: MissionMode
    objectives: tuple[Objective, ...]
    log: tuple[str, ...]
    challenge: ChallengeView | None
    queued_steps: int
    running: bool
    tick_rate: int
    wake_succeeded: bool | None
