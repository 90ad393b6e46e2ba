"""FastAPI server for the rover mission simulator.

Exposes the intent API over HTTP and pushes state snapshots over WebSocket.
Rejected intents (no power, closed comm window, ...) are not HTTP errors:
they return 200 with the reason at the top of the mission log.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware

from ..models import MissionSnapshot
from ..utils.constants import SERVER_HOST, SERVER_PORT
from ..utils.serialization import element_catalog, serialize_snapshot
from .schemas.requests import (
    CreateMissionRequest,
    GuessRequest,
    InstrumentRequest,
    MoveRequest,
    PathRequest,
    TickRateRequest,
    WakeRequest,
)
from .schemas.responses import CreateMissionResponse, MissionStateResponse
from .session import MissionSession, MissionSessionManager

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Global session manager
sessions = MissionSessionManager()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    logger.info("Rover mission server starting...")
    yield
    logger.info("Rover mission server shutting down...")
    await sessions.cleanup_all()


app = FastAPI(
    title="Pragyan Rover Mission API",
    description="Intent API and state snapshots for the lunar rover simulation",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _get_session(mission_id: str) -> MissionSession:
    session = sessions.get(mission_id)
    if not session:
        raise HTTPException(status_code=404, detail="Mission not found")
    return session


async def _respond(session: MissionSession, snapshot: MissionSnapshot) -> MissionStateResponse:
    """Broadcast the post-intent snapshot and return it."""
    await session.broadcast_snapshot(snapshot)
    return MissionStateResponse(missionId=session.id, state=serialize_snapshot(snapshot))


# ============================================
# API ENDPOINTS
# ============================================


@app.get("/api")
async def api_root():
    """API root endpoint - server health check."""
    return {
        "service": "Pragyan Rover",
        "status": "operational",
        "activeMissions": len(sessions.sessions),
    }


@app.post("/api/missions", response_model=CreateMissionResponse)
async def create_mission(request: CreateMissionRequest):
    """Start a new mission.

    Example:
        POST /api/missions
        {"seed": 1337, "tickRate": 4, "autoStart": true}
    """
    try:
        session = sessions.create_session(
            seed=request.seed, tick_rate=request.tickRate, auto_start=request.autoStart
        )
    except Exception as e:
        logger.error(f"Failed to create mission: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to create mission: {str(e)}")

    return CreateMissionResponse(
        missionId=session.id,
        seed=session.controller.seed,
        elements=element_catalog(),
        state=session.get_state(),
    )


@app.get("/api/missions/{mission_id}/state", response_model=MissionStateResponse)
async def get_mission_state(mission_id: str):
    """Get the current mission snapshot."""
    session = _get_session(mission_id)
    return MissionStateResponse(missionId=mission_id, state=session.get_state())


@app.post("/api/missions/{mission_id}/move", response_model=MissionStateResponse)
async def move(mission_id: str, request: MoveRequest):
    """Drive one cell."""
    session = _get_session(mission_id)
    return await _respond(session, session.controller.move(request.dRow, request.dCol))


@app.post("/api/missions/{mission_id}/path", response_model=MissionStateResponse)
async def queue_path(mission_id: str, request: PathRequest):
    """Queue a greedy path toward a target cell."""
    session = _get_session(mission_id)
    return await _respond(session, session.controller.queue_path(request.row, request.col))


@app.delete("/api/missions/{mission_id}/path", response_model=MissionStateResponse)
async def clear_path(mission_id: str):
    """Drop the queued path."""
    session = _get_session(mission_id)
    return await _respond(session, session.controller.clear_path())


@app.post("/api/missions/{mission_id}/instrument", response_model=MissionStateResponse)
async def use_instrument(mission_id: str, request: InstrumentRequest):
    """Run APXS or LIBS on the current tile."""
    session = _get_session(mission_id)
    return await _respond(session, session.controller.use_instrument(request.kind))


@app.post("/api/missions/{mission_id}/guess", response_model=MissionStateResponse)
async def guess_element(mission_id: str, request: GuessRequest):
    """Name an element in the active spectrum."""
    session = _get_session(mission_id)
    return await _respond(session, session.controller.guess_element(request.element))


@app.post("/api/missions/{mission_id}/abandon", response_model=MissionStateResponse)
async def abandon_analysis(mission_id: str):
    """Discard the active spectrum."""
    session = _get_session(mission_id)
    return await _respond(session, session.controller.abandon_analysis())


@app.post("/api/missions/{mission_id}/transmit", response_model=MissionStateResponse)
async def transmit(mission_id: str):
    """Relay the data buffer through Vikram."""
    session = _get_session(mission_id)
    return await _respond(session, session.controller.transmit())


@app.post("/api/missions/{mission_id}/hibernate", response_model=MissionStateResponse)
async def begin_hibernation(mission_id: str):
    """Park the rover for the lunar night."""
    session = _get_session(mission_id)
    return await _respond(session, session.controller.begin_hibernation())


@app.post("/api/missions/{mission_id}/wake", response_model=MissionStateResponse)
async def attempt_wake(mission_id: str, request: WakeRequest):
    """Attempt to wake the rover after hibernation."""
    session = _get_session(mission_id)
    if request.stopPosition is not None:
        snapshot = session.controller.commit_wake(request.stopPosition)
    else:
        snapshot = session.controller.attempt_wake(request.skill)
    return await _respond(session, snapshot)


@app.post("/api/missions/{mission_id}/tick", response_model=MissionStateResponse)
async def tick(mission_id: str, hours: int = Query(default=1, ge=1, le=24)):
    """Advance the clock by hand, for hosts that pace the mission themselves."""
    session = _get_session(mission_id)
    snapshot = session.controller.snapshot()
    for _ in range(hours):
        snapshot = session.controller.advance_hour()
    return await _respond(session, snapshot)


@app.post("/api/missions/{mission_id}/step", response_model=MissionStateResponse)
async def step(mission_id: str):
    """Execute the next queued path step by hand."""
    session = _get_session(mission_id)
    return await _respond(session, session.controller.step())


@app.post("/api/missions/{mission_id}/tick-rate", response_model=MissionStateResponse)
async def set_tick_rate(mission_id: str, request: TickRateRequest):
    """Change the real-time clock rate."""
    session = _get_session(mission_id)
    return await _respond(session, session.controller.set_tick_rate(request.rate))


@app.post("/api/missions/{mission_id}/pause", response_model=MissionStateResponse)
async def pause(mission_id: str):
    """Stop the clock."""
    session = _get_session(mission_id)
    return await _respond(session, session.controller.pause())


@app.post("/api/missions/{mission_id}/resume", response_model=MissionStateResponse)
async def resume(mission_id: str):
    """Restart the clock (and the real-time loops, if not yet running)."""
    session = _get_session(mission_id)
    snapshot = session.controller.resume()
    if snapshot.running:
        session.start()
    return await _respond(session, snapshot)


@app.delete("/api/missions/{mission_id}")
async def delete_mission(mission_id: str):
    """Delete a mission session."""
    if await sessions.delete(mission_id):
        return {"message": f"Mission {mission_id} deleted"}
    raise HTTPException(status_code=404, detail="Mission not found")


# ============================================
# WEBSOCKET ENDPOINT
# ============================================


@app.websocket("/ws/missions/{mission_id}")
async def websocket_endpoint(websocket: WebSocket, mission_id: str):
    """WebSocket connection for real-time state updates.

    Clients receive:
    - CONNECTED: Initial connection with the full snapshot
    - STATE: Snapshot after every tick, path step or intent
    """
    session = sessions.get(mission_id)
    if not session:
        await websocket.close(code=1008, reason="Mission not found")
        return

    await websocket.accept()
    session.add_connection(websocket)

    try:
        await websocket.send_json(
            {"type": "CONNECTED", "missionId": mission_id, "state": session.get_state()}
        )

        while True:
            data = await websocket.receive_json()
            if data.get("type") == "PING":
                await websocket.send_json({"type": "PONG"})

    except WebSocketDisconnect:
        logger.info(f"WebSocket disconnected from mission {mission_id}")
    except Exception as e:
        logger.error(f"WebSocket error in mission {mission_id}: {e}", exc_info=True)
    finally:
        session.remove_connection(websocket)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT, log_level="info")
