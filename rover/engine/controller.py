"""Mission orchestration: the single owner and mutator of mission state.

The controller turns player intents (move, analyse, transmit, hibernate, ...)
into state changes, using the engine modules to evaluate preconditions and
costs. Invalid intents never raise: they are rejected with a mission log
entry and leave the rest of the state untouched.

Pacing is left to the host. ``advance_hour()`` is one clock tick and
``step()`` drains one queued path step; a host calls them at whatever
cadence it likes (real-time loop, console command, test).
"""

import logging
import threading
from dataclasses import replace

from ..models import (
    DORMANT_MODES,
    ELEMENT_KEYS,
    ChallengeView,
    MissionMode,
    MissionSnapshot,
    MissionState,
    Position,
    Tile,
    TileType,
)
from ..utils import MissionRNG
from ..utils.constants import (
    BASE_RESOURCE_GAIN,
    DEFAULT_TICK_RATE,
    PSR_RESOURCE_GAIN,
    RNG_SEED_DEFAULT,
    TICK_RATE_RANGE,
)
from .clock import DEADLINE_MESSAGE, ClockTick, advance_clock, forces_hibernation
from .environment import hour_to_day_hour, is_comm_window_open, solar_irradiance
from .hibernation import (
    WAKE_FAILURE_MESSAGE,
    WAKE_SUCCESS_MESSAGE,
    attempt_wake,
    timing_skill,
    wake_probability,
)
from .map_generator import GeneratedMap, generate_map, near_psr
from .objectives import evaluate_objectives
from .resources import (
    MSG_WHEEL_SLIP,
    clamp_buffer,
    clamp_potential,
    clamp_power,
    passive_power,
    plan_instrument,
    plan_move,
    plan_transmission,
    slip_penalty,
)
from .spectrum import roll_science_gain, score_guess, start_challenge

logger = logging.getLogger(__name__)

START_MESSAGE = "Mission start. Systems nominal. Pragyan deployed near Vikram."
MSG_HIBERNATING = "Rover is hibernating. Command ignored."
MSG_ANALYSIS_BUSY = "Finish or abandon the current analysis first."
MSG_NO_ANALYSIS = "No analysis in progress."
MSG_TARGET_OUT_OF_BOUNDS = "Path target is outside the mapped sector."
MSG_PATH_OVERRIDDEN = "Manual drive: queued path cleared."
MSG_HIBERNATION_START = "Hibernation initiated. Parking for lunar night."
MSG_ALREADY_HIBERNATING = "Already hibernating."
MSG_WAKE_NOT_READY = "Wake attempt is only possible during hibernation."
MSG_ANALYSIS_COMPLETE = "Analysis complete. Composition updated & objectives checked."


class MissionController:
    """Holds the grid, mission state and RNG; applies intents one at a time.

    Every public method takes the controller lock, so hosts that call in from
    several threads or tasks still see intents applied strictly in sequence.
    Every intent returns a fresh MissionSnapshot.
    """

    def __init__(
        self,
        seed: int = RNG_SEED_DEFAULT,
        tick_rate: int = DEFAULT_TICK_RATE,
        running: bool = True,
    ):
        """Generate the map and start a new mission.

        Args:
            seed: Mission seed; drives the map and every later random draw
            tick_rate: Clock ticks per real-time second (host hint, clamped 1..10)
            running: Whether the clock starts unpaused
        """
        self.seed = seed
        self.rng = MissionRNG(seed)
        generated: GeneratedMap = generate_map(seed)
        self.grid: list[list[Tile]] = generated.grid
        self.lander = generated.lander
        self.state = MissionState(position=generated.lander)
        self.running = running
        self.tick_rate = _clamp_tick_rate(tick_rate)
        self._lock = threading.RLock()

        self._reveal(self.state.position)
        self.state.add_log(START_MESSAGE)
        logger.info(f"Mission created: seed={seed}, lander at {self.lander}")

    # =========================================================================
    # HOST HOOKS
    # =========================================================================

    def advance_hour(self) -> MissionSnapshot:
        """One clock tick: +1 hour, passive power update, deadline check.

        Does nothing while paused (hibernation always pauses the clock).
        """
        with self._lock:
            if self.running:
                self._advance(1)
            return self.snapshot()

    def step(self) -> MissionSnapshot:
        """Drain one queued path step, re-validating power for it.

        A failed step is logged and clears the rest of the queue; a step that
        is no longer adjacent to the rover fails like any other. Nothing
        happens while paused or outside navigation mode.
        """
        with self._lock:
            state = self.state
            if not self.running or state.mode != MissionMode.NAVIGATION or not state.path:
                return self.snapshot()

            next_step = state.path.pop(0)
            moved = self._move(
                next_step.row - state.position.row, next_step.col - state.position.col
            )
            if not moved and state.path:
                logger.debug(f"Path halted with {len(state.path)} steps left")
                state.path.clear()
            return self.snapshot()

    # =========================================================================
    # INTENTS
    # =========================================================================

    def move(self, d_row: int, d_col: int) -> MissionSnapshot:
        """Drive one step by (d_row, d_col).

        Driving by hand takes over from any queued path, which is dropped.
        """
        with self._lock:
            if self._reject_unless_navigating():
                return self.snapshot()
            if self.state.path:
                self.state.path.clear()
                self.state.add_log(MSG_PATH_OVERRIDDEN)
            self._move(d_row, d_col)
            return self.snapshot()

    def queue_path(self, target_row: int, target_col: int) -> MissionSnapshot:
        """Queue single steps toward a target: rows first, then columns.

        Replaces any previously queued path. Steps are executed by ``step()``.
        """
        with self._lock:
            if self._reject_unless_navigating():
                return self.snapshot()

            target = Position(target_row, target_col)
            if not target.in_bounds(len(self.grid)):
                self._reject(MSG_TARGET_OUT_OF_BOUNDS)
                return self.snapshot()

            self.state.path = plan_path(self.state.position, target)
            self.state.add_log(f"Path queued: {len(self.state.path)} steps")
            return self.snapshot()

    def clear_path(self) -> MissionSnapshot:
        """Drop any queued path steps."""
        with self._lock:
            if self.state.path:
                self.state.path.clear()
                self.state.add_log("Path cleared.")
            return self.snapshot()

    def use_instrument(self, kind: str) -> MissionSnapshot:
        """Run APXS or LIBS on the current tile and open a spectrum challenge."""
        with self._lock:
            if self._reject_unless_navigating():
                return self.snapshot()

            state = self.state
            outcome = plan_instrument(kind.upper(), state.power)
            if not outcome.accepted:
                self._reject(outcome.reason)
                return self.snapshot()

            state.power = clamp_power(state.power - outcome.power_cost)
            self._advance(outcome.hours)
            if state.mode in DORMANT_MODES:
                # Deadline hit while the instrument ran; the spectrum is lost
                return self.snapshot()

            tile = self._current_tile()
            state.challenge = start_challenge(
                self.rng, max(1, tile.science), outcome.instrument, tile.type
            )
            state.mode = MissionMode.ANALYZING
            state.add_log(
                f"{outcome.instrument}: spectrum acquired, "
                f"{len(state.challenge.target_elements)} peaks to identify."
            )
            logger.info(
                f"{outcome.instrument} at {state.position} (science {tile.science}), "
                f"hour {state.hour}, power {state.power:.1f}"
            )
            return self.snapshot()

    def guess_element(self, key: str) -> MissionSnapshot:
        """Name an element in the active spectrum.

        Repeating an earlier guess changes nothing. A correct guess adds
        5-10 MB to the data buffer, raises resource potential and checks
        objectives; naming the last hidden element closes the analysis.
        """
        with self._lock:
            state = self.state
            challenge = state.challenge
            if state.mode != MissionMode.ANALYZING or challenge is None:
                self._reject(MSG_NO_ANALYSIS)
                return self.snapshot()

            element = _normalize_element(key)
            if element is None:
                self._reject(f"Unknown element: {key}")
                return self.snapshot()

            result = score_guess(challenge, element)
            if result.repeated:
                return self.snapshot()

            if result.correct:
                gain = roll_science_gain(self.rng)
                state.data_buffer = clamp_buffer(state.data_buffer + gain)

                psr_edge = near_psr(self.grid, state.position)
                bonus = (
                    PSR_RESOURCE_GAIN
                    if challenge.tile_type == TileType.PSR or psr_edge
                    else BASE_RESOURCE_GAIN
                )
                state.resource_potential = clamp_potential(state.resource_potential + bonus)

                completed = evaluate_objectives(
                    state.objectives, element, challenge.tile_type, psr_edge, state.data_buffer
                )
                state.add_log(f"{challenge.instrument}: {element} identified. Data +{gain}MB")
                for objective_id in completed:
                    state.add_log(
                        f"Objective complete: {state.objective(objective_id).description}"
                    )
            else:
                state.add_log(f"{challenge.instrument}: {element} not significant.")

            if result.done:
                state.challenge = None
                state.mode = MissionMode.NAVIGATION
                state.add_log(MSG_ANALYSIS_COMPLETE)

            return self.snapshot()

    def abandon_analysis(self) -> MissionSnapshot:
        """Discard the active spectrum and return to navigation."""
        with self._lock:
            state = self.state
            if state.mode != MissionMode.ANALYZING or state.challenge is None:
                self._reject(MSG_NO_ANALYSIS)
                return self.snapshot()

            state.add_log(f"{state.challenge.instrument} analysis abandoned.")
            state.challenge = None
            state.mode = MissionMode.NAVIGATION
            return self.snapshot()

    def transmit(self) -> MissionSnapshot:
        """Relay the whole data buffer through Vikram during a comm window."""
        with self._lock:
            if self._reject_unless_navigating():
                return self.snapshot()

            state = self.state
            outcome = plan_transmission(state.hour, state.power, state.data_buffer)
            if not outcome.accepted:
                self._reject(outcome.reason)
                return self.snapshot()

            state.power = clamp_power(state.power - outcome.power_cost)
            state.add_log(f"Transmitting {outcome.volume:g}MB via Vikram...")
            self._advance(outcome.hours)
            state.data_buffer = 0.0
            logger.info(
                f"Transmitted {outcome.volume:g}MB: -{outcome.power_cost} power, "
                f"+{outcome.hours}h"
            )
            return self.snapshot()

    def begin_hibernation(self) -> MissionSnapshot:
        """Park the rover for the lunar night and stop the clock."""
        with self._lock:
            if self.state.mode in DORMANT_MODES:
                self._reject(MSG_ALREADY_HIBERNATING)
                return self.snapshot()
            self._enter_hibernation(MSG_HIBERNATION_START)
            return self.snapshot()

    def attempt_wake(self, skill: float) -> MissionSnapshot:
        """Try to wake the rover after the lunar night.

        Only one attempt is possible. Whatever the outcome, the mission ends
        in AWAITING_WAKE; the result is kept in ``wake_succeeded``.

        Args:
            skill: Shutdown timing skill in [0, 1]
        """
        with self._lock:
            state = self.state
            if state.mode != MissionMode.HIBERNATING:
                self._reject(MSG_WAKE_NOT_READY)
                return self.snapshot()

            tile_type = self._current_tile().type
            probability = wake_probability(skill, tile_type)
            succeeded = attempt_wake(self.rng, skill, tile_type)

            state.mode = MissionMode.AWAITING_WAKE
            state.wake_succeeded = succeeded
            state.add_log(WAKE_SUCCESS_MESSAGE if succeeded else WAKE_FAILURE_MESSAGE)
            logger.info(
                f"Wake attempt on {tile_type.value}: skill={skill:.2f}, "
                f"p={probability:.2f}, success={succeeded}"
            )
            return self.snapshot()

    def commit_wake(self, stop_position: float) -> MissionSnapshot:
        """Stop the shutdown timing bar at ``stop_position`` (0..100) and try to wake."""
        with self._lock:
            return self.attempt_wake(timing_skill(stop_position))

    def set_tick_rate(self, rate: int) -> MissionSnapshot:
        """Change the host's tick cadence hint (ticks per second, 1..10)."""
        with self._lock:
            self.tick_rate = _clamp_tick_rate(rate)
            logger.debug(f"Tick rate set to {self.tick_rate}")
            return self.snapshot()

    def pause(self) -> MissionSnapshot:
        """Stop the clock and path execution."""
        with self._lock:
            self.running = False
            return self.snapshot()

    def resume(self) -> MissionSnapshot:
        """Restart the clock; refused once the rover is hibernating."""
        with self._lock:
            if self.state.mode in DORMANT_MODES:
                self._reject(MSG_HIBERNATING)
                return self.snapshot()
            self.running = True
            return self.snapshot()

    # =========================================================================
    # READ-ONLY VIEW
    # =========================================================================

    @property
    def mission_over(self) -> bool:
        """True once the wake attempt has been made."""
        return self.state.mode == MissionMode.AWAITING_WAKE

    def snapshot(self) -> MissionSnapshot:
        """Copy the current state into an immutable snapshot."""
        with self._lock:
            state = self.state
            day, hour_of_day = hour_to_day_hour(state.hour)
            return MissionSnapshot(
                seed=self.seed,
                grid=tuple(tuple(replace(tile) for tile in row) for row in self.grid),
                lander=self.lander,
                position=state.position,
                hour=state.hour,
                day=day,
                hour_of_day=hour_of_day,
                power=state.power,
                data_buffer=state.data_buffer,
                resource_potential=state.resource_potential,
                irradiance=solar_irradiance(state.hour, self._current_tile().type),
                comm_window_open=is_comm_window_open(state.hour),
                mode=state.mode,
                objectives=tuple(replace(obj) for obj in state.objectives),
                log=tuple(state.log),
                challenge=self._challenge_view(),
                queued_steps=len(state.path),
                running=self.running,
                tick_rate=self.tick_rate,
                wake_succeeded=state.wake_succeeded,
            )

    # =========================================================================
    # PRIVATE HELPERS
    # =========================================================================

    def _current_tile(self) -> Tile:
        position = self.state.position
        return self.grid[position.row][position.col]

    def _reveal(self, position: Position) -> None:
        self.grid[position.row][position.col].seen = True

    def _reject(self, message: str) -> None:
        """Log a refused intent; no other state changes."""
        self.state.add_log(message)
        logger.debug(f"Intent rejected: {message}")

    def _reject_unless_navigating(self) -> bool:
        """Reject driving/instrument/relay intents outside navigation mode.

        Returns:
            True if the intent was rejected
        """
        mode = self.state.mode
        if mode in DORMANT_MODES:
            self._reject(MSG_HIBERNATING)
            return True
        if mode == MissionMode.ANALYZING:
            self._reject(MSG_ANALYSIS_BUSY)
            return True
        return False

    def _advance(self, hours: int) -> ClockTick:
        """Advance the clock, apply one passive power update, check the deadline.

        A multi-hour advance applies the power update once, using the tile
        under the rover at the time of the action.
        """
        state = self.state
        tick = advance_clock(state.hour, hours)
        state.hour = tick.hour
        if tick.elapsed > 0:
            state.power = passive_power(state.power, state.hour, self._current_tile().type)
        if forces_hibernation(tick, state.mode):
            self._enter_hibernation(DEADLINE_MESSAGE)
        return tick

    def _move(self, d_row: int, d_col: int) -> bool:
        """Evaluate and commit one step. Returns True if the rover moved."""
        state = self.state
        outcome = plan_move(self.grid, state.position, state.power, d_row, d_col, self.rng)
        if not outcome.accepted:
            self._reject(outcome.reason)
            return False

        state.power = clamp_power(state.power - outcome.cost)
        state.position = outcome.destination
        self._reveal(state.position)

        if outcome.slipped:
            slip_power, slip_hours = slip_penalty()
            state.add_log(MSG_WHEEL_SLIP)
            self._advance(slip_hours)
            state.power = clamp_power(state.power - slip_power)
            logger.debug(f"Wheel slip at {state.position}")

        return True

    def _enter_hibernation(self, message: str) -> None:
        state = self.state
        state.mode = MissionMode.HIBERNATING
        state.challenge = None
        state.path.clear()
        self.running = False
        state.add_log(message)
        logger.info(f"Hibernating at hour {state.hour}, power {state.power:.1f}")

    def _challenge_view(self) -> ChallengeView | None:
        challenge = self.state.challenge
        if challenge is None:
            return None
        return ChallengeView(
            instrument=challenge.instrument,
            target_count=len(challenge.target_elements),
            peaks=tuple(channel for channel, _ in challenge.peaks),
            guessed_elements=tuple(challenge.guessed_elements),
            correct_elements=tuple(
                key for key in challenge.guessed_elements if key in challenge.target_elements
            ),
            solved=challenge.solved,
        )


def plan_path(start: Position, target: Position) -> list[Position]:
    """Greedy axis-by-axis route: close the row gap first, then the column gap.

    Examples:
        >>> plan_path(Position(0, 0), Position(1, 2))
        [Position(row=1, col=0), Position(row=1, col=1), Position(row=1, col=2)]
    """
    steps = []
    row, col = start.row, start.col
    while (row, col) != (target.row, target.col):
        if row < target.row:
            row += 1
        elif row > target.row:
            row -= 1
        elif col < target.col:
            col += 1
        else:
            col -= 1
        steps.append(Position(row, col))
    return steps


def _normalize_element(key: str) -> str | None:
    """Map user input like 'si' or ' Fe ' to a catalog key."""
    cleaned = key.strip().lower()
    for element_key in ELEMENT_KEYS:
        if element_key.lower() == cleaned:
            return element_key
    return None


def _clamp_tick_rate(rate: int) -> int:
    low, high = TICK_RATE_RANGE
    return max(low, min(high, int(rate)))
