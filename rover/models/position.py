"""Grid position data model."""

from dataclasses import dataclass

from ..utils.grid import within


@dataclass(frozen=True)
class Position:
    """Row/column coordinates of a grid cell."""

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> "Position":
        """Return the position shifted by (d_row, d_col).

        The result is not bounds-checked; use ``in_bounds`` before committing it.
        """
        return Position(self.row + d_row, self.col + d_col)

    def in_bounds(self, size: int | None = None) -> bool:
        """Check whether this position lies on the grid."""
        if size is None:
            return within(self.row, self.col)
        return within(self.row, self.col, size)
