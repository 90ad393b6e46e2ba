"""Pydantic response schemas for API endpoints."""

from pydantic import BaseModel


class MissionStateResponse(BaseModel):
    """Response containing the current mission snapshot."""

    missionId: str  # noqa: N815
    state: dict


class CreateMissionResponse(BaseModel):
    """Response after creating a new mission."""

    missionId: str  # noqa: N815
    seed: int
    elements: list[dict]
    state: dict
