"""ASCII rendering of mission snapshots for the console host.

Map legend (one character per cell, two columns wide):
  @ rover   V Vikram lander   # PSR   / slope   o boulder
  r rim     c crater floor    . flat regolith   ? not yet surveyed
"""

from ..engine.environment import hours_until_comm_window
from ..models import MissionSnapshot, TileType
from ..utils.grid import manhattan_distance

TILE_SYMBOLS = {
    TileType.NORMAL: ".",
    TileType.SLOPE: "/",
    TileType.BOULDER: "o",
    TileType.PSR: "#",
    TileType.RIM: "r",
    TileType.CRATER: "c",
    TileType.LANDER: "V",
}

# Cells this close to the rover are visible even before a visit
SENSOR_RANGE = 2


class MapRenderer:
    """Renders the polar sector grid and rover status as text."""

    def render(self, snapshot: MissionSnapshot) -> str:
        """Render the map from the rover's point of view.

        Args:
            snapshot: Current mission snapshot

        Returns:
            Multi-line map with row/column labels
        """
        size = len(snapshot.grid)
        header = "   " + " ".join(f"{c:2d}" for c in range(size))
        lines = [header]
        for r, row in enumerate(snapshot.grid):
            cells = []
            for c, tile in enumerate(row):
                if (r, c) == (snapshot.position.row, snapshot.position.col):
                    symbol = "@"
                elif tile.seen or manhattan_distance(
                    r, c, snapshot.position.row, snapshot.position.col
                ) <= SENSOR_RANGE:
                    symbol = TILE_SYMBOLS[tile.type]
                else:
                    symbol = "?"
                cells.append(f" {symbol}")
            lines.append(f"{r:2d} " + " ".join(cells))
        return "\n".join(lines)

    def render_status(self, snapshot: MissionSnapshot, log_lines: int = 5) -> str:
        """Render the status panel: clock, budgets, objectives, recent log."""
        if snapshot.comm_window_open:
            comm = "OPEN"
        else:
            comm = f"closed, opens in {hours_until_comm_window(snapshot.hour)}h"
        lines = [
            f"Day {snapshot.day}/14  {snapshot.hour_of_day:02d}:00  "
            f"(hour {snapshot.hour})  Comm window: {comm}",
            f"Power {snapshot.power:5.1f}%  Solar {snapshot.irradiance:3.0f}%  "
            f"Data {snapshot.data_buffer:g}MB  Resource potential {snapshot.resource_potential:g}%",
            f"Mode: {snapshot.mode.value}  Queued steps: {snapshot.queued_steps}",
        ]

        if snapshot.challenge is not None:
            ch = snapshot.challenge
            guessed = ", ".join(ch.guessed_elements) or "-"
            lines.append(
                f"{ch.instrument} spectrum: {ch.target_count} peaks at channels "
                f"{list(ch.peaks)}; guessed: {guessed}"
            )

        lines.append("Objectives:")
        for objective in snapshot.objectives:
            mark = "x" if objective.done else " "
            lines.append(f"  [{mark}] {objective.description}")

        lines.append("Log:")
        for entry in snapshot.log[:log_lines]:
            lines.append(f"  - {entry}")
        return "\n".join(lines)
