"""Objective evaluation after each identified element."""

import logging

from ..models import Objective, ObjectiveId, TileType
from ..utils.constants import MAP100_BUFFER_THRESHOLD, SULFUR_KEY

logger = logging.getLogger(__name__)


def evaluate_objectives(
    objectives: list[Objective],
    element_key: str,
    tile_type: TileType,
    near_psr: bool,
    data_buffer: float,
) -> list[ObjectiveId]:
    """Mark objectives completed by a correct guess.

    Completed objectives are skipped; nothing is ever un-marked.

    Args:
        objectives: Mission objectives (mutated in place)
        element_key: Element just identified
        tile_type: Terrain where the spectrum was taken
        near_psr: Whether the rover sits next to a PSR tile
        data_buffer: Buffered data after this guess's science gain

    Returns:
        Ids of objectives newly completed by this evaluation
    """
    checks = {
        ObjectiveId.SULFUR: element_key == SULFUR_KEY,
        ObjectiveId.CRATER: tile_type in (TileType.RIM, TileType.CRATER),
        ObjectiveId.PSR_EDGE: near_psr,
        ObjectiveId.MAP100: data_buffer >= MAP100_BUFFER_THRESHOLD,
    }

    completed = []
    for objective in objectives:
        if objective.done:
            continue
        if checks.get(objective.id, False):
            objective.done = True
            completed.append(objective.id)
            logger.info(f"Objective {objective.id.value} completed")

    return completed
