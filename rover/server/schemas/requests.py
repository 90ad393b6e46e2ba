"""Pydantic request schemas for API endpoints."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator


class CreateMissionRequest(BaseModel):
    """Request to start a new mission."""

    seed: int | None = Field(default=None, description="Optional RNG seed for determinism")
    tickRate: int = Field(  # noqa: N815
        default=4, ge=1, le=10, description="Mission hours per real-time second"
    )
    autoStart: bool = Field(  # noqa: N815
        default=True, description="Start the real-time clock immediately"
    )


class MoveRequest(BaseModel):
    """Single-cell move."""

    dRow: int = Field(ge=-1, le=1, description="Row offset")  # noqa: N815
    dCol: int = Field(ge=-1, le=1, description="Column offset")  # noqa: N815

    @model_validator(mode="after")
    def check_single_step(self):
        """Require exactly one orthogonal cell: no diagonals, no standing still."""
        if abs(self.dRow) + abs(self.dCol) != 1:
            raise ValueError("Move exactly one cell north, south, east or west")
        return self


class PathRequest(BaseModel):
    """Queue a path toward a target cell."""

    row: int = Field(description="Target row")
    col: int = Field(description="Target column")


class InstrumentRequest(BaseModel):
    """Instrument activation."""

    kind: Literal["APXS", "LIBS"] = Field(description="Instrument to run")


class GuessRequest(BaseModel):
    """Element guess for the active spectrum."""

    element: str = Field(min_length=1, max_length=2, description="Element symbol, e.g. 'Si'")


class WakeRequest(BaseModel):
    """Wake attempt: either a precomputed skill or the timing-bar stop position."""

    skill: float | None = Field(default=None, ge=0, le=1, description="Timing skill 0..1")
    stopPosition: float | None = Field(  # noqa: N815
        default=None, ge=0, le=100, description="Timing bar stop position 0..100"
    )

    @model_validator(mode="after")
    def check_exactly_one(self):
        """Require exactly one of skill / stopPosition."""
        if (self.skill is None) == (self.stopPosition is None):
            raise ValueError("Provide exactly one of 'skill' or 'stopPosition'")
        return self


class TickRateRequest(BaseModel):
    """Change the real-time clock rate."""

    rate: int = Field(ge=1, le=10, description="Mission hours per real-time second")
