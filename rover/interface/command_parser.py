"""Text command parser for the console host.

This module parses short commands like "goto 3 4" or "guess si" into
Intent objects that the console dispatches to the MissionController.
"""

import re
from enum import Enum
from typing import Optional

from ..models.intent import Intent, IntentKind

DIRECTIONS = {
    "n": (-1, 0),
    "north": (-1, 0),
    "up": (-1, 0),
    "s": (1, 0),
    "south": (1, 0),
    "down": (1, 0),
    "e": (0, 1),
    "east": (0, 1),
    "right": (0, 1),
    "w": (0, -1),
    "west": (0, -1),
    "left": (0, -1),
}

INSTRUMENT_WORDS = ("apxs", "libs")

KNOWN_COMMANDS = [
    "move", "goto", "stop", "clear", "apxs", "libs", "use", "guess", "abandon",
    "transmit", "tx", "hibernate", "wake", "wait", "speed", "pause", "resume",
    "help", "status", "quit", "h", "st", "q", "exit",
] + list(DIRECTIONS)


class ErrorType(Enum):
    """Classification of command input errors."""
    UNKNOWN_COMMAND = "unknown_command"
    SYNTAX_ERROR = "syntax_error"
    VALIDATION_ERROR = "validation_error"


class CommandParseError(Exception):
    """Raised when command parsing fails with classification."""

    def __init__(self, error_type: ErrorType, message: str):
        """Initialize parse error.

        Args:
            error_type: Classification of the error
            message: Human-readable error message
        """
        self.error_type = error_type
        self.message = message
        super().__init__(message)


class CommandParser:
    """Parse console commands into Intents."""

    def parse(self, command: str) -> Optional[Intent]:
        """Parse a command string into an Intent.

        Supported formats:
        - "n" / "s" / "e" / "w" (or north, up, ...)
        - "move <d_row> <d_col>" or "move <direction>"
        - "goto <row> <col>", "stop"
        - "apxs", "libs", "use <instrument>"
        - "guess <element>", "abandon"
        - "transmit", "hibernate", "wake <stop 0-100>"
        - "wait [hours]", "speed <ticks/s>", "pause", "resume"

        Special commands raise ValueError("HELP" / "STATUS" / "QUIT").

        Args:
            command: Command string to parse

        Returns:
            Intent if parsed successfully, None for an empty line

        Raises:
            CommandParseError: If the command is unknown or malformed
            ValueError: For help/status/quit signals
        """
        cmd = command.strip().lower()
        if not cmd:
            return None

        if cmd in ("help", "h", "?"):
            raise ValueError("HELP")

        if cmd in ("status", "st"):
            raise ValueError("STATUS")

        if cmd in ("quit", "exit", "q"):
            raise ValueError("QUIT")

        parts = cmd.split()
        head, rest = parts[0], parts[1:]

        if head in DIRECTIONS and not rest:
            return Intent(IntentKind.MOVE, DIRECTIONS[head])

        if head == "move":
            return self._parse_move(rest)

        if head == "goto":
            row, col = self._parse_int_pair(rest, "goto <row> <col>")
            return Intent(IntentKind.QUEUE_PATH, (row, col))

        if head in ("stop", "clear") and not rest:
            return Intent(IntentKind.CLEAR_PATH)

        if head in INSTRUMENT_WORDS and not rest:
            return Intent(IntentKind.USE_INSTRUMENT, (head.upper(),))

        if head == "use":
            if len(rest) != 1 or rest[0] not in INSTRUMENT_WORDS:
                raise CommandParseError(
                    ErrorType.SYNTAX_ERROR,
                    "Syntax error: unknown instrument\nCorrect format: use apxs | use libs",
                )
            return Intent(IntentKind.USE_INSTRUMENT, (rest[0].upper(),))

        if head == "guess":
            if len(rest) != 1 or not re.fullmatch(r"[a-z]{1,2}", rest[0]):
                raise CommandParseError(
                    ErrorType.SYNTAX_ERROR,
                    "Syntax error: expected one element symbol\nCorrect format: guess <element>",
                )
            return Intent(IntentKind.GUESS_ELEMENT, (rest[0],))

        if head == "abandon" and not rest:
            return Intent(IntentKind.ABANDON_ANALYSIS)

        if head in ("transmit", "tx") and not rest:
            return Intent(IntentKind.TRANSMIT)

        if head == "hibernate" and not rest:
            return Intent(IntentKind.BEGIN_HIBERNATION)

        if head == "wake":
            return Intent(IntentKind.COMMIT_WAKE, (self._parse_stop_position(rest),))

        if head == "wait":
            return Intent(IntentKind.WAIT, (self._parse_positive_int(rest, "wait [hours]"),))

        if head == "speed":
            if not rest:
                raise CommandParseError(
                    ErrorType.SYNTAX_ERROR,
                    "Syntax error: missing tick rate\nCorrect format: speed <1-10>",
                )
            return Intent(
                IntentKind.SET_TICK_RATE, (self._parse_positive_int(rest, "speed <1-10>"),)
            )

        if head == "pause" and not rest:
            return Intent(IntentKind.PAUSE)

        if head == "resume" and not rest:
            return Intent(IntentKind.RESUME)

        if head not in KNOWN_COMMANDS:
            raise CommandParseError(ErrorType.UNKNOWN_COMMAND, f"Unknown command: '{head}'")

        raise CommandParseError(
            ErrorType.SYNTAX_ERROR, f"Syntax error: unexpected arguments for '{head}'"
        )

    def _parse_move(self, rest: list[str]) -> Intent:
        """Parse the arguments of 'move'."""
        if len(rest) == 1 and rest[0] in DIRECTIONS:
            return Intent(IntentKind.MOVE, DIRECTIONS[rest[0]])

        d_row, d_col = self._parse_int_pair(rest, "move <d_row> <d_col> | move <direction>")
        if abs(d_row) + abs(d_col) != 1:
            raise CommandParseError(
                ErrorType.VALIDATION_ERROR,
                f"Invalid step: ({d_row}, {d_col}) - the rover moves one cell at a time",
            )
        return Intent(IntentKind.MOVE, (d_row, d_col))

    def _parse_int_pair(self, rest: list[str], usage: str) -> tuple[int, int]:
        """Parse exactly two integers."""
        if len(rest) != 2:
            raise CommandParseError(
                ErrorType.SYNTAX_ERROR,
                f"Syntax error: expected two numbers\nCorrect format: {usage}",
            )
        try:
            return int(rest[0]), int(rest[1])
        except ValueError:
            raise CommandParseError(
                ErrorType.SYNTAX_ERROR,
                f"Syntax error: '{' '.join(rest)}' is not a pair of numbers\nCorrect format: {usage}",
            )

    def _parse_positive_int(self, rest: list[str], usage: str) -> int:
        """Parse an optional positive integer (default 1)."""
        if not rest:
            return 1
        if len(rest) != 1:
            raise CommandParseError(
                ErrorType.SYNTAX_ERROR, f"Syntax error: too many arguments\nCorrect format: {usage}"
            )
        try:
            value = int(rest[0])
        except ValueError:
            raise CommandParseError(
                ErrorType.SYNTAX_ERROR, f"Invalid number: '{rest[0]}' is not a number"
            )
        if value <= 0:
            raise CommandParseError(
                ErrorType.VALIDATION_ERROR, f"Invalid number: must be positive (got {value})"
            )
        return value

    def _parse_stop_position(self, rest: list[str]) -> float:
        """Parse the timing-bar stop position for 'wake'."""
        if len(rest) != 1:
            raise CommandParseError(
                ErrorType.SYNTAX_ERROR,
                "Syntax error: missing stop position\nCorrect format: wake <0-100>",
            )
        try:
            stop = float(rest[0])
        except ValueError:
            raise CommandParseError(
                ErrorType.SYNTAX_ERROR, f"Invalid stop position: '{rest[0]}' is not a number"
            )
        if not 0 <= stop <= 100:
            raise CommandParseError(
                ErrorType.VALIDATION_ERROR, f"Invalid stop position: must be 0-100 (got {stop:g})"
            )
        return stop
