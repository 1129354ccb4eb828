"""Winning-line geometry for the 3x3x3 cube.

The 49 lines are generated once at import time in a fixed order: the 27
axis-aligned lines, the 18 planar diagonals and the 4 space diagonals.
Win detection walks them in this order, so the order is part of the
observable behaviour.
"""

from __future__ import annotations

from ..models import GRID_SIZE, Coordinate

Line = tuple[Coordinate, Coordinate, Coordinate]
RawLine = tuple[tuple[int, int, int], tuple[int, int, int], tuple[int, int, int]]

AXIS_LINE_COUNT = 27
PLANAR_DIAGONAL_COUNT = 18
SPACE_DIAGONAL_COUNT = 4


def _axis_lines() -> list[RawLine]:
    lines: list[RawLine] = []
    for i in range(GRID_SIZE):
        for j in range(GRID_SIZE):
            lines.append(((0, i, j), (1, i, j), (2, i, j)))
            lines.append(((i, 0, j), (i, 1, j), (i, 2, j)))
            lines.append(((i, j, 0), (i, j, 1), (i, j, 2)))
    return lines


def _planar_diagonals() -> list[RawLine]:
    lines: list[RawLine] = []
    for i in range(GRID_SIZE):
        # x fixed
        lines.append(((i, 0, 0), (i, 1, 1), (i, 2, 2)))
        lines.append(((i, 0, 2), (i, 1, 1), (i, 2, 0)))
        # y fixed
        lines.append(((0, i, 0), (1, i, 1), (2, i, 2)))
        lines.append(((2, i, 0), (1, i, 1), (0, i, 2)))
        # z fixed
        lines.append(((0, 0, i), (1, 1, i), (2, 2, i)))
        lines.append(((2, 0, i), (1, 1, i), (0, 2, i)))
    return lines


def _space_diagonals() -> list[RawLine]:
    return [
        ((0, 0, 0), (1, 1, 1), (2, 2, 2)),
        ((2, 0, 0), (1, 1, 1), (0, 2, 2)),
        ((0, 2, 0), (1, 1, 1), (2, 0, 2)),
        ((0, 0, 2), (1, 1, 1), (2, 2, 0)),
    ]


def _to_line(raw: RawLine) -> Line:
    a, b, c = (Coordinate(x=x, y=y, z=z) for x, y, z in raw)
    return a, b, c


WINNING_LINES: tuple[Line, ...] = tuple(
    _to_line(raw)
    for raw in _axis_lines() + _planar_diagonals() + _space_diagonals()
)


def winning_lines() -> tuple[Line, ...]:
    """Return the 49 winning lines in evaluation order."""
    return WINNING_LINES


def lines_through(coordinate: Coordinate) -> list[Line]:
    """Return every winning line that passes through ``coordinate``."""
    return [line for line in WINNING_LINES if coordinate in line]
