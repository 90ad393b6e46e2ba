"""Power and data accounting for movement, instruments and relay transmission.

This module handles:
1. Passive solar charge and idle drain per clock advance
2. Movement cost by destination terrain, plus wheel-slip hazards
3. Instrument power/time cost
4. Transmission power/time cost as a function of buffered data

Functions here only compute outcomes; MissionController commits them.
"""

import math
from dataclasses import dataclass

from ..models import Position, TileType
from ..models.tile import ROUGH_TILES
from ..utils import MissionRNG
from ..utils.constants import (
    BASE_MOVE_COST,
    BOULDER_PENALTY,
    IDLE_DRAIN,
    INSTRUMENTS,
    MAX_DATA_BUFFER,
    MAX_POWER,
    MAX_RESOURCE_POTENTIAL,
    MAX_SOLAR_CHARGE,
    MAX_TRANSMIT_POWER,
    POWER_RESERVE,
    PSR_PENALTY,
    SLOPE_PENALTY,
    TRANSMIT_HOURS_DIVISOR,
    TRANSMIT_POWER_DIVISOR,
    WHEEL_SLIP_HOURS,
    WHEEL_SLIP_POWER,
    WHEEL_SLIP_PROB,
)
from .environment import is_comm_window_open, solar_irradiance
from .map_generator import Grid

MSG_OUT_OF_BOUNDS = "Cannot move beyond the mapped sector."
MSG_NOT_ONE_STEP = "The rover moves one cell at a time (north, south, east or west)."
MSG_MOVE_NO_POWER = "Not enough power to move."
MSG_INSTRUMENT_NO_POWER = "Insufficient power for instrument."
MSG_UNKNOWN_INSTRUMENT = "Unknown instrument: {kind}"
MSG_NO_LINK = "No link to Vikram right now. Wait for comm window."
MSG_NOTHING_TO_SEND = "Nothing to transmit."
MSG_TRANSMIT_NO_POWER = "Insufficient power for transmission."
MSG_WHEEL_SLIP = "Wheel slip detected. Recovery takes extra time and power."


def clamp_power(power: float) -> float:
    """Clamp battery level into [0, MAX_POWER]."""
    return max(0.0, min(MAX_POWER, power))


def clamp_buffer(data_buffer: float) -> float:
    """Clamp buffered data into [0, MAX_DATA_BUFFER]."""
    return max(0.0, min(MAX_DATA_BUFFER, data_buffer))


def clamp_potential(potential: float) -> float:
    """Clamp resource potential into [0, MAX_RESOURCE_POTENTIAL]."""
    return max(0.0, min(MAX_RESOURCE_POTENTIAL, potential))


def has_reserve(power: float, cost: float) -> bool:
    """An action is allowed only if it leaves POWER_RESERVE in the battery."""
    return power >= cost + POWER_RESERVE


def passive_power(power: float, hour: int, tile_type: TileType) -> float:
    """Apply one hour of solar charge and idle drain.

    Charge is proportional to irradiance, at most +2%/h; drain is 0.15%/h.
    Charge and drain are netted before a single clamp, so a full battery
    in sunlight stays full.

    Args:
        power: Battery level before the update
        hour: Mission hour used for the irradiance lookup
        tile_type: Terrain under the rover

    Returns:
        New clamped battery level
    """
    charge = solar_irradiance(hour, tile_type) / 100 * MAX_SOLAR_CHARGE
    return clamp_power(power + charge - IDLE_DRAIN)


def movement_cost(tile_type: TileType) -> float:
    """Power needed to drive onto a tile of the given type."""
    cost = BASE_MOVE_COST
    if tile_type == TileType.SLOPE:
        cost += SLOPE_PENALTY
    if tile_type == TileType.BOULDER:
        cost += BOULDER_PENALTY
    if tile_type == TileType.PSR:
        cost += PSR_PENALTY
    return cost


@dataclass
class MoveOutcome:
    """Result of evaluating a single-step move."""

    accepted: bool
    destination: Position | None = None
    cost: float = 0.0
    slipped: bool = False  # Wheel slip: extra hours and power on top of cost
    reason: str | None = None  # Log message when rejected


def plan_move(
    grid: Grid, position: Position, power: float, d_row: int, d_col: int, rng: MissionRNG
) -> MoveOutcome:
    """Evaluate a move by (d_row, d_col) from ``position``.

    Only single orthogonal steps are accepted. The wheel-slip roll is drawn
    only for accepted moves onto slope or boulder tiles. Slip costs are not re-validated against the power reserve.

    Args:
        grid: Map tiles
        position: Current rover position
        power: Current battery level
        d_row: Row offset
        d_col: Column offset
        rng: Mission RNG

    Returns:
        MoveOutcome describing what should happen
    """
    if abs(d_row) + abs(d_col) != 1:
        return MoveOutcome(accepted=False, reason=MSG_NOT_ONE_STEP)

    destination = position.offset(d_row, d_col)
    if not destination.in_bounds(len(grid)):
        return MoveOutcome(accepted=False, reason=MSG_OUT_OF_BOUNDS)

    tile = grid[destination.row][destination.col]
    cost = movement_cost(tile.type)
    if not has_reserve(power, cost):
        return MoveOutcome(accepted=False, cost=cost, reason=MSG_MOVE_NO_POWER)

    slipped = tile.type in ROUGH_TILES and rng.chance(WHEEL_SLIP_PROB)
    return MoveOutcome(accepted=True, destination=destination, cost=cost, slipped=slipped)


def slip_penalty() -> tuple[float, int]:
    """Power and hours lost to a wheel slip."""
    return WHEEL_SLIP_POWER, WHEEL_SLIP_HOURS


@dataclass
class InstrumentOutcome:
    """Result of evaluating an instrument activation."""

    accepted: bool
    instrument: str
    power_cost: float = 0.0
    hours: int = 0
    reason: str | None = None


def plan_instrument(kind: str, power: float) -> InstrumentOutcome:
    """Evaluate running APXS or LIBS with the current battery level."""
    if kind not in INSTRUMENTS:
        return InstrumentOutcome(
            accepted=False, instrument=kind, reason=MSG_UNKNOWN_INSTRUMENT.format(kind=kind)
        )
    power_cost, hours = INSTRUMENTS[kind]
    if not has_reserve(power, power_cost):
        return InstrumentOutcome(
            accepted=False,
            instrument=kind,
            power_cost=power_cost,
            hours=hours,
            reason=MSG_INSTRUMENT_NO_POWER,
        )
    return InstrumentOutcome(accepted=True, instrument=kind, power_cost=power_cost, hours=hours)


def transmission_cost(data_buffer: float) -> tuple[int, int]:
    """Power and hours needed to relay the whole buffer.

    Examples:
        >>> transmission_cost(80)
        (4, 3)
    """
    power_cost = min(MAX_TRANSMIT_POWER, math.ceil(data_buffer / TRANSMIT_POWER_DIVISOR))
    hours = 1 + math.floor(data_buffer / TRANSMIT_HOURS_DIVISOR)
    return power_cost, hours


@dataclass
class TransmitOutcome:
    """Result of evaluating a relay transmission."""

    accepted: bool
    power_cost: int = 0
    hours: int = 0
    volume: float = 0.0  # MB sent
    reason: str | None = None


def plan_transmission(hour: int, power: float, data_buffer: float) -> TransmitOutcome:
    """Evaluate transmitting the buffer through Vikram.

    Checks, in order: comm window open, buffer non-empty, power reserve.
    """
    if not is_comm_window_open(hour):
        return TransmitOutcome(accepted=False, reason=MSG_NO_LINK)
    if data_buffer <= 0:
        return TransmitOutcome(accepted=False, reason=MSG_NOTHING_TO_SEND)

    power_cost, hours = transmission_cost(data_buffer)
    if not has_reserve(power, power_cost):
        return TransmitOutcome(
            accepted=False, power_cost=power_cost, hours=hours, reason=MSG_TRANSMIT_NO_POWER
        )
    return TransmitOutcome(accepted=True, power_cost=power_cost, hours=hours, volume=data_buffer)
