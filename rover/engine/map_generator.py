"""Polar sector map generation: craters, shadowed regions and rough ground."""

import logging
import math
from dataclasses import dataclass

from ..models import Position, Tile, TileType
from ..utils import MAP_SIZE, TerrainRNG, orthogonal_neighbours, within
from ..utils.constants import (
    CRATER_COUNT_RANGE,
    CRATER_RADIUS_RANGE,
    CRATER_SCIENCE,
    LANDER_SCIENCE,
    PSR_BIAS_PROB,
    PSR_COUNT_RANGE,
    PSR_EDGE_SCIENCE,
    RIM_SCIENCE,
    ROUGH_COUNT,
)

logger = logging.getLogger(__name__)

Grid = list[list[Tile]]


@dataclass
class GeneratedMap:
    """Output of map generation: the tile grid and where Vikram sits."""

    grid: Grid
    lander: Position


def generate_map(seed: int) -> GeneratedMap:
    """Generate a polar sector map.

    Algorithm (every step draws from one TerrainRNG stream, so the order of
    steps is part of the result):
    1. All tiles NORMAL; Vikram at the grid center with science 1
    2. Carve 3-5 circular craters of radius 1-2 (floor + rim ring)
    3. Scatter 18-25 PSR tiles, biased toward the top rows and right columns
    4. Scatter 40 rough placements (slope or boulder) over NORMAL ground
    5. Score science: rim +2, crater +1, +2 per adjacent PSR (non-PSR tiles)

    Args:
        seed: RNG seed for deterministic generation

    Returns:
        GeneratedMap with the grid and lander position
    """
    rng = TerrainRNG(seed)

    grid: Grid = [[Tile() for _ in range(MAP_SIZE)] for _ in range(MAP_SIZE)]

    lander = Position(MAP_SIZE // 2, MAP_SIZE // 2)
    grid[lander.row][lander.col].type = TileType.LANDER
    grid[lander.row][lander.col].science = LANDER_SCIENCE

    craters = _carve_craters(rng, grid)
    psr_placed = _scatter_psrs(rng, grid)
    rough_placed = _scatter_rough_ground(rng, grid)
    _score_science(grid)

    logger.debug(
        f"Generated map seed={seed}: {craters} craters, {psr_placed} PSR tiles, "
        f"{rough_placed} rough tiles"
    )

    return GeneratedMap(grid=grid, lander=lander)


def _carve_craters(rng: TerrainRNG, grid: Grid) -> int:
    """Stamp crater floors and rims; cells off the grid are skipped.

    Returns:
        Number of craters carved
    """
    crater_count = rng.randint(*CRATER_COUNT_RANGE)
    for _ in range(crater_count):
        center_row = rng.randint(0, MAP_SIZE - 1)
        center_col = rng.randint(0, MAP_SIZE - 1)
        radius = rng.randint(*CRATER_RADIUS_RANGE)

        for row in range(center_row - radius, center_row + radius + 1):
            for col in range(center_col - radius, center_col + radius + 1):
                if not within(row, col):
                    continue
                dist = math.hypot(row - center_row, col - center_col)
                tile = grid[row][col]
                if dist <= radius - 0.5:
                    tile.type = TileType.CRATER
                elif dist <= radius + 0.5 and tile.type != TileType.LANDER:
                    tile.type = TileType.RIM

    return crater_count


def _scatter_psrs(rng: TerrainRNG, grid: Grid) -> int:
    """Place shadowed regions, favouring the top third of rows and the right third of columns.

    A roll that lands on an intact lander tile is dropped, not retried.

    Returns:
        Number of PSR placements that were applied
    """
    third = MAP_SIZE // 3
    psr_count = rng.randint(*PSR_COUNT_RANGE)
    placed = 0
    for _ in range(psr_count):
        row = rng.randint(0, MAP_SIZE - 1)
        col = rng.randint(0, MAP_SIZE - 1)
        if rng.random() < PSR_BIAS_PROB:
            row = rng.randint(0, third - 1)
        if rng.random() < PSR_BIAS_PROB:
            col = MAP_SIZE - 1 - rng.randint(0, third - 1)

        if not within(row, col) or grid[row][col].type == TileType.LANDER:
            continue
        grid[row][col].type = TileType.PSR
        placed += 1

    return placed


def _scatter_rough_ground(rng: TerrainRNG, grid: Grid) -> int:
    """Turn NORMAL cells into slopes or boulders.

    Returns:
        Number of cells that were converted
    """
    converted = 0
    for _ in range(ROUGH_COUNT):
        row = rng.randint(0, MAP_SIZE - 1)
        col = rng.randint(0, MAP_SIZE - 1)
        if grid[row][col].type == TileType.NORMAL:
            grid[row][col].type = rng.choice([TileType.SLOPE, TileType.BOULDER])
            converted += 1
    return converted


def _score_science(grid: Grid) -> None:
    """Add terrain and PSR-edge richness to every tile's science value."""
    for row in range(MAP_SIZE):
        for col in range(MAP_SIZE):
            tile = grid[row][col]
            score = 0
            if tile.type == TileType.RIM:
                score += RIM_SCIENCE
            if tile.type == TileType.CRATER:
                score += CRATER_SCIENCE
            if tile.type != TileType.PSR:
                for n_row, n_col in orthogonal_neighbours(row, col):
                    if grid[n_row][n_col].type == TileType.PSR:
                        score += PSR_EDGE_SCIENCE
            tile.science += score


def near_psr(grid: Grid, position: Position) -> bool:
    """Check whether any orthogonal neighbour of ``position`` is a PSR tile."""
    return any(
        grid[row][col].type == TileType.PSR
        for row, col in orthogonal_neighbours(position.row, position.col, len(grid))
    )
