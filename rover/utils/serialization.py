"""Snapshot serialization to JSON-compatible dictionaries.

The HTTP/WebSocket layer and the console host render from these dicts.
There is no save/load: a mission lives only in memory.
"""

from typing import Any

from ..models.challenge import ELEMENT_CATALOG
from ..models.mission import ChallengeView, MissionSnapshot
from ..models.objective import Objective
from ..models.position import Position
from ..models.tile import Tile
from .constants import MAX_DATA_BUFFER, TOTAL_HOURS


def serialize_snapshot(snapshot: MissionSnapshot, include_grid: bool = True) -> dict[str, Any]:
    """Convert a MissionSnapshot to a camelCase dictionary.

    Args:
        snapshot: Snapshot to serialize
        include_grid: If False, omit the tile grid (for lightweight tick updates)

    Returns:
        Dictionary representation of the snapshot
    """
    data = {
        "seed": snapshot.seed,
        "hour": snapshot.hour,
        "totalHours": TOTAL_HOURS,
        "day": snapshot.day,
        "hourOfDay": snapshot.hour_of_day,
        "position": _serialize_position(snapshot.position),
        "lander": _serialize_position(snapshot.lander),
        "power": round(snapshot.power, 2),
        "dataBuffer": snapshot.data_buffer,
        "maxDataBuffer": MAX_DATA_BUFFER,
        "resourcePotential": snapshot.resource_potential,
        "irradiance": round(snapshot.irradiance, 1),
        "commWindowOpen": snapshot.comm_window_open,
        "mode": snapshot.mode.value,
        "objectives": [_serialize_objective(o) for o in snapshot.objectives],
        "log": list(snapshot.log),
        "challenge": _serialize_challenge(snapshot.challenge),
        "queuedSteps": snapshot.queued_steps,
        "running": snapshot.running,
        "tickRate": snapshot.tick_rate,
        "wakeSucceeded": snapshot.wake_succeeded,
    }
    if include_grid:
        data["grid"] = [[_serialize_tile(tile) for tile in row] for row in snapshot.grid]
    return data


def element_catalog() -> list[dict[str, str]]:
    """Element buttons a spectrum view offers."""
    return [{"key": e.key, "name": e.name} for e in ELEMENT_CATALOG]


def _serialize_position(position: Position) -> dict[str, int]:
    """Convert Position to dictionary."""
    return {"row": position.row, "col": position.col}


def _serialize_tile(tile: Tile) -> dict[str, Any]:
    """Convert Tile to dictionary."""
    return {"type": tile.type.value, "seen": tile.seen, "science": tile.science}


def _serialize_objective(objective: Objective) -> dict[str, Any]:
    """Convert Objective to dictionary."""
    return {
        "id": objective.id.value,
        "description": objective.description,
        "done": objective.done,
    }


def _serialize_challenge(challenge: ChallengeView | None) -> dict[str, Any] | None:
    """Convert the active challenge view to dictionary (None when idle)."""
    if challenge is None:
        return None
    return {
        "instrument": challenge.instrument,
        "targetCount": challenge.target_count,
        "peaks": list(challenge.peaks),
        "guessed": list(challenge.guessed_elements),
        "correct": list(challenge.correct_elements),
        "solved": challenge.solved,
    }
