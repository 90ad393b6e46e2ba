"""Intent data model for commands sent to the mission controller."""

from dataclasses import dataclass, field
from enum import Enum


class IntentKind(Enum):
    """Things a presentation layer can ask the rover to do."""

    MOVE = "move"
    QUEUE_PATH = "queue_path"
    CLEAR_PATH = "clear_path"
    USE_INSTRUMENT = "use_instrument"
    GUESS_ELEMENT = "guess_element"
    ABANDON_ANALYSIS = "abandon_analysis"
    TRANSMIT = "transmit"
    BEGIN_HIBERNATION = "begin_hibernation"
    COMMIT_WAKE = "commit_wake"
    WAIT = "wait"
    SET_TICK_RATE = "set_tick_rate"
    PAUSE = "pause"
    RESUME = "resume"


# Number of positional arguments each intent carries
_ARITY = {
    IntentKind.MOVE: 2,
    IntentKind.QUEUE_PATH: 2,
    IntentKind.USE_INSTRUMENT: 1,
    IntentKind.GUESS_ELEMENT: 1,
    IntentKind.COMMIT_WAKE: 1,
    IntentKind.WAIT: 1,
    IntentKind.SET_TICK_RATE: 1,
}


@dataclass
class Intent:
    """A single player command, e.g. Intent(IntentKind.MOVE, (-1, 0))."""

    kind: IntentKind
    args: tuple = field(default_factory=tuple)

    def __post_init__(self):
        """Validate intent data after initialization."""
        expected = _ARITY.get(self.kind, 0)
        if len(self.args) != expected:
            raise ValueError(
                f"Invalid args for {self.kind.value}: {self.args} (expected {expected})"
            )
