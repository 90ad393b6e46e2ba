"""Spectrum analysis minigame: hidden element sets and sequential guesses."""

import math
from dataclasses import dataclass

from ..models import ELEMENT_KEYS, SpectrumChallenge, TileType
from ..utils import MissionRNG
from ..utils.constants import MIN_TARGET_ELEMENTS, SCIENCE_GAIN_RANGE


def target_count(science: float) -> int:
    """Number of hidden elements for a spectrum of the given richness.

    Examples:
        >>> target_count(1)
        4
        >>> target_count(7)
        6
    """
    return min(MIN_TARGET_ELEMENTS + math.floor(science), len(ELEMENT_KEYS))


def start_challenge(
    rng: MissionRNG, science: float, instrument: str, tile_type: TileType
) -> SpectrumChallenge:
    """Take a spectrum and hide a random element set in it.

    Args:
        rng: Mission RNG
        science: Richness of the tile (callers pass at least 1)
        instrument: "APXS" or "LIBS"
        tile_type: Terrain under the rover

    Returns:
        New SpectrumChallenge with no guesses yet
    """
    targets = rng.sample(list(ELEMENT_KEYS), target_count(science))
    peaks = sorted((rng.randint(0, 99), key) for key in targets)
    return SpectrumChallenge(
        instrument=instrument,
        target_elements=targets,
        tile_type=tile_type,
        peaks=peaks,
    )


@dataclass
class GuessResult:
    """Outcome of naming one element.

    Attributes:
        correct: The element is in the hidden target set
        done: Every target element has now been named
        repeated: The element had already been guessed; nothing changed
    """

    correct: bool
    done: bool
    repeated: bool = False


def score_guess(challenge: SpectrumChallenge, key: str) -> GuessResult:
    """Record a guess against the challenge.

    Repeating an earlier guess is a no-op. Callers must validate ``key``
    against the element catalog first.
    """
    if key not in ELEMENT_KEYS:
        raise ValueError(f"Unknown element key: {key!r}")

    correct = key in challenge.target_elements
    if key in challenge.guessed_elements:
        return GuessResult(correct=correct, done=challenge.solved, repeated=True)

    challenge.guessed_elements.append(key)
    return GuessResult(correct=correct, done=challenge.solved)


def roll_science_gain(rng: MissionRNG) -> int:
    """MB of data produced by one identified element (5..10)."""
    return rng.randint(*SCIENCE_GAIN_RANGE)
