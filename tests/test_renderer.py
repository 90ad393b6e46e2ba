"""Tests for ASCII map renderer."""

from rover.engine import MissionController
from rover.interface.renderer import MapRenderer
from rover.models import MissionMode, ObjectiveId, SpectrumChallenge, TileType


def flat_controller():
    controller = MissionController(0)
    for row in controller.grid:
        for tile in row:
            tile.type = TileType.NORMAL
            tile.science = 0
            tile.seen = False
    controller.grid[6][6].type = TileType.LANDER
    controller.grid[6][6].seen = True
    return controller


def map_cells(map_str):
    """Split rendered map rows into symbol lists, dropping the header and labels."""
    lines = map_str.split("\n")[1:]
    return [line.split()[1:] for line in lines]


def test_render_dimensions():
    """One header line plus one line per row, one symbol per cell."""
    cells = map_cells(MapRenderer().render(flat_controller().snapshot()))
    assert len(cells) == 12
    assert all(len(row) == 12 for row in cells)


def test_rover_and_fog():
    """Rover is '@'; cells beyond sensor range stay unknown until visited."""
    cells = map_cells(MapRenderer().render(flat_controller().snapshot()))
    assert cells[6][6] == "@"
    assert cells[6][8] == "."
    assert cells[6][9] == "?"
    assert cells[0][0] == "?"


def test_seen_tiles_keep_their_symbol():
    """Visited tiles show their terrain after the rover leaves."""
    controller = flat_controller()
    controller.grid[3][6].type = TileType.PSR
    for _ in range(3):
        controller.move(-1, 0)
    for _ in range(3):
        controller.move(1, 0)

    cells = map_cells(MapRenderer().render(controller.snapshot()))
    assert cells[3][6] == "#"
    assert cells[6][6] == "@"
    assert cells[5][6] == "."


def test_render_status():
    """Status panel shows clock, budgets, objectives and log."""
    controller = flat_controller()
    controller.move(0, 1)
    status = MapRenderer().render_status(controller.snapshot())
    assert "Day 1/14  00:00" in status
    assert "Comm window: closed, opens in 2h" in status
    assert "Power  99.0%" in status
    assert "[ ] Confirm presence of Sulfur in regolith" in status
    assert "Mode: NAVIGATION" in status


def test_render_status_with_challenge():
    """An open analysis lists its peaks and guesses."""
    controller = flat_controller()
    controller.state.challenge = SpectrumChallenge(
        "APXS", ["S", "O"], TileType.NORMAL, peaks=[(12, "S"), (40, "O")]
    )
    controller.state.mode = MissionMode.ANALYZING
    controller.guess_element("S")

    status = MapRenderer().render_status(controller.snapshot())
    assert "APXS spectrum: 2 peaks at channels [12, 40]; guessed: S" in status
    assert "[x] Confirm presence of Sulfur in regolith" in status
    assert controller.state.objective(ObjectiveId.SULFUR).done
