"""Tests for snapshot serialization."""

import json

from rover.engine import MissionController
from rover.utils.serialization import element_catalog, serialize_snapshot


def test_serialize_snapshot_fields():
    """Snapshot becomes a camelCase, JSON-ready dict."""
    controller = MissionController(1337)
    data = serialize_snapshot(controller.snapshot())

    assert data["seed"] == 1337
    assert data["hour"] == 0
    assert data["totalHours"] == 336
    assert data["day"] == 1
    assert data["hourOfDay"] == 0
    assert data["position"] == {"row": 6, "col": 6}
    assert data["lander"] == {"row": 6, "col": 6}
    assert data["power"] == 100
    assert data["dataBuffer"] == 0
    assert data["maxDataBuffer"] == 100
    assert data["mode"] == "NAVIGATION"
    assert data["commWindowOpen"] is False
    assert data["challenge"] is None
    assert data["queuedSteps"] == 0
    assert data["running"] is True
    assert data["tickRate"] == 4
    assert data["wakeSucceeded"] is None
    assert [o["id"] for o in data["objectives"]] == ["SULFUR", "MAP100", "CRATER", "PSR_EDGE"]
    assert data["log"][0].startswith("Mission start")

    assert len(data["grid"]) == 12
    assert set(data["grid"][6][6]) == {"type", "seen", "science"}
    assert data["grid"][6][6]["seen"] is True

    json.dumps(data)


def test_serialize_without_grid():
    """Tick updates can omit the grid."""
    data = serialize_snapshot(MissionController(1).snapshot(), include_grid=False)
    assert "grid" not in data


def test_serialize_challenge():
    """The challenge view exposes peak channels but not the hidden elements."""
    controller = MissionController(1337)
    controller.use_instrument("APXS")
    data = serialize_snapshot(controller.snapshot())

    challenge = data["challenge"]
    assert challenge["instrument"] == "APXS"
    assert challenge["targetCount"] == len(challenge["peaks"])
    assert challenge["guessed"] == []
    assert challenge["correct"] == []
    assert challenge["solved"] is False
    assert all(isinstance(channel, int) for channel in challenge["peaks"])
    json.dumps(data)


def test_element_catalog():
    """Six elements with symbol and name."""
    catalog = element_catalog()
    assert len(catalog) == 6
    assert {"key": "S", "name": "Sulfur"} in catalog
