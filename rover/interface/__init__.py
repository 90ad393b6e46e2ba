"""Console interface: command parsing, text rendering and the input loop."""

from .command_parser import CommandParseError, CommandParser, ErrorType
from .console import MissionConsole, dispatch_intent, drain_path
from .renderer import MapRenderer

__all__ = [
    "CommandParseError",
    "CommandParser",
    "ErrorType",
    "MissionConsole",
    "dispatch_intent",
    "drain_path",
    "MapRenderer",
]
