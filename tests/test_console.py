"""Tests for the console host."""

from rover.engine import MissionController
from rover.interface.console import HELP_TEXT, MissionConsole, dispatch_intent, drain_path
from rover.models import Intent, IntentKind, MissionMode, Position, TileType


def flat_controller():
    controller = MissionController(0)
    for row in controller.grid:
        for tile in row:
            tile.type = TileType.NORMAL
            tile.science = 0
    controller.grid[6][6].type = TileType.LANDER
    controller.grid[6][6].science = 1
    return controller


def test_dispatch_move():
    """MOVE intents drive the rover."""
    controller = flat_controller()
    snapshot = dispatch_intent(controller, Intent(IntentKind.MOVE, (0, 1)))
    assert snapshot.position == Position(6, 7)


def test_dispatch_wait():
    """WAIT advances the clock hour by hour."""
    controller = flat_controller()
    assert dispatch_intent(controller, Intent(IntentKind.WAIT, (5,))).hour == 5


def test_wait_stops_at_deadline():
    """Waiting past the deadline stops when the rover hibernates."""
    controller = flat_controller()
    controller.state.hour = 334
    snapshot = dispatch_intent(controller, Intent(IntentKind.WAIT, (10,)))
    assert snapshot.hour == 336
    assert snapshot.mode == MissionMode.HIBERNATING


def test_goto_drains_path_with_ticks():
    """A queued path drains one step per clock tick."""
    controller = flat_controller()
    snapshot = dispatch_intent(controller, Intent(IntentKind.QUEUE_PATH, (4, 7)))
    assert snapshot.position == Position(4, 7)
    assert snapshot.queued_steps == 0
    assert snapshot.hour == 3


def test_drain_path_noop_without_queue():
    """Nothing happens without a queued path."""
    controller = flat_controller()
    assert drain_path(controller).hour == 0


def test_handle_prints_map_and_status(capsys):
    """A command prints the map and the status panel."""
    console = MissionConsole(flat_controller())
    assert console.handle("e") is True
    out = capsys.readouterr().out
    assert "@" in out
    assert "Power" in out
    assert "Objectives:" in out


def test_handle_help(capsys):
    """'help' prints the command list."""
    console = MissionConsole(flat_controller())
    assert console.handle("help") is True
    assert HELP_TEXT in capsys.readouterr().out


def test_handle_unknown_command(capsys):
    """Unknown commands get an error and a help hint."""
    console = MissionConsole(flat_controller())
    assert console.handle("dance") is True
    out = capsys.readouterr().out
    assert "❌ Unknown command: 'dance'" in out
    assert "Type 'help'" in out


def test_handle_syntax_error_has_no_hint(capsys):
    """Malformed commands show the error without the help hint."""
    console = MissionConsole(flat_controller())
    console.handle("goto 1")
    out = capsys.readouterr().out
    assert "❌ Syntax error" in out
    assert "Type 'help'" not in out


def test_handle_quit():
    """'quit' ends the loop."""
    console = MissionConsole(flat_controller())
    assert console.handle("quit") is False


def test_run_until_quit(monkeypatch, capsys):
    """The input loop stops on quit and returns the final snapshot."""
    commands = iter(["e", "wait 2", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(commands))
    snapshot = MissionConsole(flat_controller()).run()
    assert snapshot.position == Position(6, 7)
    assert snapshot.hour == 2


def test_run_handles_eof(monkeypatch, capsys):
    """End of input exits cleanly."""

    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    snapshot = MissionConsole(flat_controller()).run()
    assert snapshot.hour == 0
    assert "Mission interrupted" in capsys.readouterr().out
