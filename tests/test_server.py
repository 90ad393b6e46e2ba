"""Tests for the FastAPI mission server.

Missions are created with autoStart disabled and paced through the tick and
step endpoints, so no real-time loop runs during the tests.
"""

import pytest
from fastapi.testclient import TestClient

from rover.server.main import app, sessions


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def mission_id(client):
    response = client.post("/api/missions", json={"seed": 1337, "autoStart": False})
    assert response.status_code == 200
    return response.json()["missionId"]


def test_api_root(client):
    """Health check reports the service."""
    response = client.get("/api")
    assert response.status_code == 200
    assert response.json()["status"] == "operational"


def test_create_mission(client):
    """Creating a mission returns its id, seed, element catalog and state."""
    response = client.post("/api/missions", json={"seed": 42, "tickRate": 6, "autoStart": False})
    assert response.status_code == 200
    data = response.json()
    assert data["missionId"].startswith("mission-")
    assert data["seed"] == 42
    assert len(data["elements"]) == 6
    assert data["state"]["tickRate"] == 6
    assert data["state"]["position"] == {"row": 6, "col": 6}
    assert sessions.get(data["missionId"]).tasks == []


def test_create_mission_random_seed(client):
    """Without a seed the server picks one."""
    response = client.post("/api/missions", json={"autoStart": False})
    assert isinstance(response.json()["seed"], int)


def test_create_mission_invalid_tick_rate(client):
    """Tick rate outside 1..10 fails validation."""
    response = client.post("/api/missions", json={"tickRate": 11})
    assert response.status_code == 422


def test_get_state(client, mission_id):
    """State endpoint returns the full snapshot."""
    response = client.get(f"/api/missions/{mission_id}/state")
    assert response.status_code == 200
    state = response.json()["state"]
    assert state["hour"] == 0
    assert len(state["grid"]) == 12


def test_unknown_mission(client):
    """Unknown missions are 404."""
    assert client.get("/api/missions/nope/state").status_code == 404
    assert client.post("/api/missions/nope/move", json={"dRow": 1, "dCol": 0}).status_code == 404
    assert client.delete("/api/missions/nope").status_code == 404


def test_move(client, mission_id):
    """A move changes position and spends power."""
    response = client.post(f"/api/missions/{mission_id}/move", json={"dRow": 0, "dCol": 1})
    assert response.status_code == 200
    state = response.json()["state"]
    assert state["position"] == {"row": 6, "col": 7}
    assert state["power"] < 100


def test_move_validation(client, mission_id):
    """Offsets beyond one cell are schema errors."""
    response = client.post(f"/api/missions/{mission_id}/move", json={"dRow": 2, "dCol": 0})
    assert response.status_code == 422


@pytest.mark.parametrize("offset", [{"dRow": 1, "dCol": 1}, {"dRow": 0, "dCol": 0}])
def test_move_must_be_one_orthogonal_cell(client, mission_id, offset):
    """Diagonal and zero moves are schema errors and leave the rover in place."""
    response = client.post(f"/api/missions/{mission_id}/move", json=offset)
    assert response.status_code == 422
    state = client.get(f"/api/missions/{mission_id}/state").json()["state"]
    assert state["position"] == {"row": 6, "col": 6}
    assert state["hour"] == 0


def test_rejected_intent_is_not_an_http_error(client, mission_id):
    """Game-level refusals are 200 with the reason in the log."""
    response = client.post(f"/api/missions/{mission_id}/transmit")
    assert response.status_code == 200
    assert response.json()["state"]["log"][0] == "No link to Vikram right now. Wait for comm window."


def test_tick(client, mission_id):
    """Manual ticks advance the clock."""
    response = client.post(f"/api/missions/{mission_id}/tick", params={"hours": 5})
    assert response.json()["state"]["hour"] == 5
    assert client.post(f"/api/missions/{mission_id}/tick", params={"hours": 0}).status_code == 422


def test_path_and_step(client, mission_id):
    """A queued path is driven one step at a time."""
    response = client.post(f"/api/missions/{mission_id}/path", json={"row": 6, "col": 4})
    assert response.json()["state"]["queuedSteps"] == 2

    response = client.post(f"/api/missions/{mission_id}/step")
    assert response.json()["state"]["queuedSteps"] <= 1

    response = client.delete(f"/api/missions/{mission_id}/path")
    assert response.json()["state"]["queuedSteps"] == 0


def test_instrument_and_guess(client, mission_id):
    """Instrument use opens a challenge; guesses are recorded."""
    response = client.post(f"/api/missions/{mission_id}/instrument", json={"kind": "APXS"})
    state = response.json()["state"]
    assert state["mode"] == "ANALYZING"
    assert state["challenge"]["instrument"] == "APXS"

    response = client.post(f"/api/missions/{mission_id}/guess", json={"element": "S"})
    state = response.json()["state"]
    assert state["mode"] == "ANALYZING"
    assert state["challenge"]["guessed"] == ["S"]

    response = client.post(f"/api/missions/{mission_id}/abandon")
    assert response.json()["state"]["mode"] == "NAVIGATION"


def test_instrument_validation(client, mission_id):
    """Only APXS and LIBS exist."""
    response = client.post(f"/api/missions/{mission_id}/instrument", json={"kind": "RADAR"})
    assert response.status_code == 422


def test_hibernate_and_wake(client, mission_id):
    """Hibernation then one wake attempt ends the mission."""
    response = client.post(f"/api/missions/{mission_id}/hibernate")
    state = response.json()["state"]
    assert state["mode"] == "HIBERNATING"
    assert state["running"] is False

    response = client.post(f"/api/missions/{mission_id}/wake", json={"stopPosition": 55})
    state = response.json()["state"]
    assert state["mode"] == "AWAITING_WAKE"
    assert state["wakeSucceeded"] in (True, False)


def test_wake_requires_exactly_one_input(client, mission_id):
    """Wake needs either skill or stopPosition, not both or neither."""
    url = f"/api/missions/{mission_id}/wake"
    assert client.post(url, json={}).status_code == 422
    assert client.post(url, json={"skill": 0.5, "stopPosition": 50}).status_code == 422


def test_tick_rate_and_pause(client, mission_id):
    """Tick rate and pause are reflected in the state."""
    response = client.post(f"/api/missions/{mission_id}/tick-rate", json={"rate": 9})
    assert response.json()["state"]["tickRate"] == 9

    response = client.post(f"/api/missions/{mission_id}/pause")
    assert response.json()["state"]["running"] is False

    response = client.post(f"/api/missions/{mission_id}/tick")
    assert response.json()["state"]["hour"] == 0


def test_delete_mission(client, mission_id):
    """Deleted missions are gone."""
    assert client.delete(f"/api/missions/{mission_id}").status_code == 200
    assert client.get(f"/api/missions/{mission_id}/state").status_code == 404


def test_websocket(client, mission_id):
    """WebSocket clients get the snapshot on connect and answer pings."""
    with client.websocket_connect(f"/ws/missions/{mission_id}") as websocket:
        message = websocket.receive_json()
        assert message["type"] == "CONNECTED"
        assert message["missionId"] == mission_id
        assert message["state"]["hour"] == 0

        websocket.send_json({"type": "PING"})
        assert websocket.receive_json() == {"type": "PONG"}
