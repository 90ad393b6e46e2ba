"""Data models for the rover simulator."""

from .challenge import ELEMENT_CATALOG, ELEMENT_KEYS, Element, SpectrumChallenge
from .intent import Intent, IntentKind
from .mission import (
    DORMANT_MODES,
    ChallengeView,
    MissionMode,
    MissionSnapshot,
    MissionState,
)
from .objective import Objective, ObjectiveId, initial_objectives
from .position import Position
from .tile import Tile, TileType

__all__ = [
    "ELEMENT_CATALOG",
    "ELEMENT_KEYS",
    "Element",
    "SpectrumChallenge",
    "Intent",
    "IntentKind",
    "DORMANT_MODES",
    "ChallengeView",
    "MissionMode",
    "MissionSnapshot",
    "MissionState",
    "Objective",
    "ObjectiveId",
    "initial_objectives",
    "Position",
    "Tile",
    "TileType",
]
