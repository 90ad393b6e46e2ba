"""Terrain tile data model."""

from dataclasses import dataclass
from enum import Enum


class TileType(Enum):
    """Terrain classes on the polar map."""

    NORMAL = "NORMAL"
    SLOPE = "SLOPE"
    BOULDER = "BOULDER"
    PSR = "PSR"  # Permanently Shadowed Region
    RIM = "RIM"  # crater rim (good for science)
    CRATER = "CRATER"
    LANDER = "LANDER"  # Vikram


# Tiles that count as rough ground for hazards and wake attempts
ROUGH_TILES = frozenset({TileType.SLOPE, TileType.BOULDER})
UNEVEN_TILES = frozenset({TileType.SLOPE, TileType.BOULDER, TileType.CRATER, TileType.PSR})


@dataclass
class Tile:
    """A single grid cell.

    Type and science value are fixed once the map is generated; only the
    ``seen`` flag changes afterwards, as the rover visits the cell.
    """

    type: TileType = TileType.NORMAL
    seen: bool = False
    science: int = 0  # Richness of spectra taken here

    def __post_init__(self):
        """Validate tile data after initialization."""
        if not isinstance(self.type, TileType):
            raise ValueError(f"Invalid tile type: {self.type!r}")
        if self.science < 0:
            raise ValueError(f"Invalid science: {self.science} (must be >= 0)")
