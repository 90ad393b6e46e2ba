"""Element catalog and spectrum analysis challenge."""

from dataclasses import dataclass, field

from ..utils.constants import ELEMENTS
from .tile import TileType


@dataclass(frozen=True)
class Element:
    """Catalog entry for an identifiable element."""

    key: str  # Chemical symbol, e.g. "Si"
    name: str


ELEMENT_CATALOG: tuple[Element, ...] = tuple(Element(key, name) for key, name in ELEMENTS)
ELEMENT_KEYS: tuple[str, ...] = tuple(e.key for e in ELEMENT_CATALOG)


@dataclass
class SpectrumChallenge:
    """A pending spectrum analysis taken by one instrument at one tile.

    The rover has to name every element hidden in ``target_elements``.
    Guesses are recorded in order, without duplicates.
    """

    instrument: str  # "APXS" or "LIBS"
    target_elements: list[str]  # Hidden element keys, random order
    tile_type: TileType  # Terrain under the rover when the spectrum was taken
    peaks: list[tuple[int, str]] = field(default_factory=list)  # (channel 0..99, element key)
    guessed_elements: list[str] = field(default_factory=list)

    def __post_init__(self):
        """Validate challenge data after initialization."""
        if not 1 <= len(self.target_elements) <= len(ELEMENT_KEYS):
            raise ValueError(
                f"Invalid target count: {len(self.target_elements)} "
                f"(must be 1-{len(ELEMENT_KEYS)})"
            )
        if len(set(self.target_elements)) != len(self.target_elements):
            raise ValueError(f"Duplicate target elements: {self.target_elements}")
        unknown = [k for k in self.target_elements if k not in ELEMENT_KEYS]
        if unknown:
            raise ValueError(f"Unknown element keys: {unknown}")

    @property
    def solved(self) -> bool:
        """True once every target element has been guessed."""
        return all(key in self.guessed_elements for key in self.target_elements)

    @property
    def remaining(self) -> int:
        """Number of target elements not yet identified."""
        return sum(1 for key in self.target_elements if key not in self.guessed_elements)
