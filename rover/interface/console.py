"""Console host: reads text commands and paces the mission by hand.

The real-time host (rover.server) ticks the clock on a timer. Here time
only moves when the player acts: ``wait N`` advances N hours, and a queued
path drains one step per clock tick.
"""

import logging

from ..engine import MissionController
from ..models import Intent, IntentKind, MissionSnapshot
from .command_parser import CommandParseError, CommandParser, ErrorType
from .renderer import MapRenderer

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  n / s / e / w          drive one cell (also: move <d_row> <d_col>)
  goto <row> <col>       queue a path (rows first, then columns); stop clears it
  apxs | libs            take a spectrum on the current tile
  guess <element>        name an element (O, Si, Ca, Fe, S, Mg); abandon quits analysis
  transmit               relay the data buffer via Vikram (comm window only)
  wait [hours]           let the clock run
  hibernate              park for the lunar night; then wake <0-100> to stop the timing bar
  speed <1-10> | pause | resume | status | help | quit"""


def dispatch_intent(controller: MissionController, intent: Intent) -> MissionSnapshot:
    """Apply one intent to the controller and return the resulting snapshot."""
    kind = intent.kind
    if kind == IntentKind.MOVE:
        return controller.move(*intent.args)
    if kind == IntentKind.QUEUE_PATH:
        controller.queue_path(*intent.args)
        return drain_path(controller)
    if kind == IntentKind.CLEAR_PATH:
        return controller.clear_path()
    if kind == IntentKind.USE_INSTRUMENT:
        return controller.use_instrument(*intent.args)
    if kind == IntentKind.GUESS_ELEMENT:
        return controller.guess_element(*intent.args)
    if kind == IntentKind.ABANDON_ANALYSIS:
        return controller.abandon_analysis()
    if kind == IntentKind.TRANSMIT:
        return controller.transmit()
    if kind == IntentKind.BEGIN_HIBERNATION:
        return controller.begin_hibernation()
    if kind == IntentKind.COMMIT_WAKE:
        return controller.commit_wake(*intent.args)
    if kind == IntentKind.WAIT:
        (hours,) = intent.args
        snapshot = controller.snapshot()
        for _ in range(hours):
            snapshot = controller.advance_hour()
            if not snapshot.running:
                break
        return snapshot
    if kind == IntentKind.SET_TICK_RATE:
        return controller.set_tick_rate(*intent.args)
    if kind == IntentKind.PAUSE:
        return controller.pause()
    if kind == IntentKind.RESUME:
        return controller.resume()
    raise ValueError(f"Unhandled intent: {kind}")


def drain_path(controller: MissionController) -> MissionSnapshot:
    """Execute a queued path, one clock tick per step."""
    snapshot = controller.snapshot()
    while snapshot.queued_steps and snapshot.running:
        controller.step()
        snapshot = controller.advance_hour()
    return snapshot


class MissionConsole:
    """Interactive text loop around one MissionController."""

    def __init__(self, controller: MissionController):
        """Initialize console host.

        Args:
            controller: Mission to drive
        """
        self.controller = controller
        self.parser = CommandParser()
        self.renderer = MapRenderer()

    def _format_error_message(self, error_type: ErrorType, message: str) -> str:
        """Format a parse error, adding a help hint for unknown commands."""
        formatted = f"❌ {message}"
        if error_type == ErrorType.UNKNOWN_COMMAND:
            formatted += "\n\nType 'help' for the command list."
        return formatted

    def show(self, snapshot: MissionSnapshot) -> None:
        """Print map and status."""
        print(self.renderer.render(snapshot))
        print()
        print(self.renderer.render_status(snapshot))

    def handle(self, line: str) -> bool:
        """Process one input line.

        Returns:
            False when the player asked to quit
        """
        try:
            intent = self.parser.parse(line)
        except CommandParseError as e:
            print(self._format_error_message(e.error_type, e.message))
            return True
        except ValueError as e:
            signal = str(e)
            if signal == "QUIT":
                return False
            if signal == "HELP":
                print(HELP_TEXT)
            elif signal == "STATUS":
                self.show(self.controller.snapshot())
            return True

        if intent is None:
            return True

        logger.debug(f"Dispatching {intent.kind.value} {intent.args}")
        snapshot = dispatch_intent(self.controller, intent)
        self.show(snapshot)
        return True

    def run(self) -> MissionSnapshot:
        """Main input loop; returns the final snapshot."""
        print("\n" + "=" * 60)
        print("Pragyan Rover - Lunar Day Ops")
        print("=" * 60)
        print("\nMaximize science within 14 Earth days at the lunar south pole.")
        print("Type 'help' for commands. Press Ctrl+C at any time to quit.\n")
        self.show(self.controller.snapshot())

        try:
            while not self.controller.mission_over:
                line = input("\n> ")
                if not self.handle(line):
                    break
        except (KeyboardInterrupt, EOFError):
            print("\n\nMission interrupted by user. Exiting...")

        return self.controller.snapshot()
