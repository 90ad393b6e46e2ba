"""Grid bounds and neighbourhood helpers."""

from .constants import MAP_SIZE

# Orthogonal neighbours (d_row, d_col)
ORTHOGONAL_DIRS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def within(row: int, col: int, size: int = MAP_SIZE) -> bool:
    """Check whether (row, col) lies on a size x size grid."""
    return 0 <= row < size and 0 <= col < size


def orthogonal_neighbours(row: int, col: int, size: int = MAP_SIZE) -> list[tuple[int, int]]:
    """List in-bounds orthogonal neighbours of a cell.

    Args:
        row: Cell row
        col: Cell column
        size: Grid edge length

    Returns:
        List of (row, col) tuples, at most four
    """
    return [
        (row + d_row, col + d_col)
        for d_row, d_col in ORTHOGONAL_DIRS
        if within(row + d_row, col + d_col, size)
    ]


def manhattan_distance(r1: int, c1: int, r2: int, c2: int) -> int:
    """Number of single-axis steps between two cells.

    Examples:
        >>> manhattan_distance(0, 0, 3, 2)
        5
    """
    return abs(r2 - r1) + abs(c2 - c1)
