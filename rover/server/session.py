"""Mission session management and the real-time pacing loops."""

import asyncio
import logging
import uuid
from dataclasses import dataclass, field

from fastapi import WebSocket

from ..engine.controller import MissionController
from ..models import MissionSnapshot
from ..utils.constants import PATH_STEP_DELAY
from ..utils.serialization import serialize_snapshot

logger = logging.getLogger(__name__)


@dataclass
class MissionSession:
    """One running mission plus its WebSocket viewers.

    The session is the host that decides cadence: one task ticks the mission
    clock every ``1 / tick_rate`` seconds, another drains queued path steps
    every PATH_STEP_DELAY seconds. Both go through the controller lock, so
    they never interleave with HTTP intents.
    """

    id: str
    controller: MissionController
    connections: list[WebSocket] = field(default_factory=list)
    tasks: list[asyncio.Task] = field(default_factory=list)

    def get_state(self, include_grid: bool = True) -> dict:
        """Serialize the current snapshot."""
        return serialize_snapshot(self.controller.snapshot(), include_grid=include_grid)

    def start(self) -> None:
        """Start the clock and path loops on the running event loop."""
        if self.tasks:
            return
        self.tasks = [
            asyncio.create_task(self._clock_loop(), name=f"{self.id}-clock"),
            asyncio.create_task(self._path_loop(), name=f"{self.id}-path"),
        ]
        logger.info(f"Mission {self.id}: real-time loops started")

    async def stop(self) -> None:
        """Cancel the pacing loops."""
        for task in self.tasks:
            task.cancel()
        for task in self.tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass
        self.tasks = []

    async def _clock_loop(self) -> None:
        """Tick one mission hour per interval until the wake attempt is made."""
        while not self.controller.mission_over:
            await asyncio.sleep(1 / self.controller.tick_rate)
            if not self.controller.running:
                continue
            snapshot = self.controller.advance_hour()
            await self.broadcast_snapshot(snapshot, include_grid=False)

    async def _path_loop(self) -> None:
        """Drain queued path steps at a fixed real-time spacing."""
        while not self.controller.mission_over:
            await asyncio.sleep(PATH_STEP_DELAY)
            if not self.controller.state.path or not self.controller.running:
                continue
            snapshot = self.controller.step()
            await self.broadcast_snapshot(snapshot)

    async def broadcast_snapshot(self, snapshot: MissionSnapshot, include_grid: bool = True):
        """Push a state update to every viewer."""
        if not self.connections:
            return
        await self.broadcast(
            {"type": "STATE", "state": serialize_snapshot(snapshot, include_grid=include_grid)}
        )

    async def broadcast(self, message: dict):
        """Send message to all connected WebSocket clients.

        Args:
            message: Dictionary to send as JSON
        """
        disconnected = []
        for ws in self.connections:
            try:
                await ws.send_json(message)
            except Exception as e:
                logger.warning(f"Failed to send to WebSocket: {e}")
                disconnected.append(ws)

        for ws in disconnected:
            self.connections.remove(ws)

    def add_connection(self, websocket: WebSocket):
        """Add a WebSocket connection to this session."""
        self.connections.append(websocket)
        logger.info(f"WebSocket connected to mission {self.id}, total: {len(self.connections)}")

    def remove_connection(self, websocket: WebSocket):
        """Remove a WebSocket connection from this session."""
        if websocket in self.connections:
            self.connections.remove(websocket)
            logger.info(
                f"WebSocket disconnected from mission {self.id}, "
                f"remaining: {len(self.connections)}"
            )


class MissionSessionManager:
    """Manages all active mission sessions, in memory."""

    def __init__(self):
        self.sessions: dict[str, MissionSession] = {}

    def create_session(
        self, seed: int | None = None, tick_rate: int = 4, auto_start: bool = True
    ) -> MissionSession:
        """Create a new mission session.

        Args:
            seed: Optional RNG seed for determinism
            tick_rate: Mission hours per real-time second
            auto_start: Start the real-time pacing loops now (requires a running
                event loop); without them the client paces via tick/step

        Returns:
            Newly created MissionSession
        """
        mission_id = f"mission-{uuid.uuid4().hex[:8]}"
        if seed is None:
            seed = uuid.uuid4().int % (2**32)

        controller = MissionController(seed=seed, tick_rate=tick_rate)
        session = MissionSession(id=mission_id, controller=controller)
        self.sessions[mission_id] = session
        if auto_start:
            session.start()

        logger.info(f"Created mission {mission_id}: seed={seed}, tick_rate={tick_rate}")
        return session

    def get(self, mission_id: str) -> MissionSession | None:
        """Get a mission session by ID."""
        return self.sessions.get(mission_id)

    async def delete(self, mission_id: str) -> bool:
        """Stop and delete a mission session.

        Returns:
            True if deleted, False if not found
        """
        session = self.sessions.pop(mission_id, None)
        if session is None:
            return False
        await session.stop()
        logger.info(f"Deleted mission {mission_id}")
        return True

    async def cleanup_all(self):
        """Stop every session (called on shutdown)."""
        for mission_id in list(self.sessions):
            await self.delete(mission_id)
