"""Science objective data model."""

from dataclasses import dataclass
from enum import Enum


class ObjectiveId(Enum):
    """Fixed mission objectives."""

    SULFUR = "SULFUR"
    MAP100 = "MAP100"
    CRATER = "CRATER"
    PSR_EDGE = "PSR_EDGE"


OBJECTIVE_DESCRIPTIONS = {
    ObjectiveId.SULFUR: "Confirm presence of Sulfur in regolith",
    ObjectiveId.MAP100: "Map elemental distribution within 100m radius",
    ObjectiveId.CRATER: "Characterize soil near small crater",
    ObjectiveId.PSR_EDGE: "Investigate PSR edge composition",
}


@dataclass
class Objective:
    """A mission objective. ``done`` only ever goes from False to True."""

    id: ObjectiveId
    description: str
    done: bool = False

    def __post_init__(self):
        """Validate objective data after initialization."""
        if not isinstance(self.id, ObjectiveId):
            raise ValueError(f"Invalid objective id: {self.id!r}")
        if not self.description:
            raise ValueError("description cannot be empty")


def initial_objectives() -> list[Objective]:
    """Create the mission's objective list, all pending."""
    return [Objective(id=oid, description=desc) for oid, desc in OBJECTIVE_DESCRIPTIONS.items()]
