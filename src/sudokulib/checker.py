from __future__ import annotations

from typing import Dict, Iterable, Iterator, List

from .structs import BLANK, BOX, SIZE, Conflict, Grid, Position


def _iter_row(row: int) -> Iterator[Position]:
    return (Position(row, c) for c in range(SIZE))


def _iter_column(column: int) -> Iterator[Position]:
    return (Position(r, column) for r in range(SIZE))


def _iter_box(row: int, column: int) -> Iterator[Position]:
    start_row = (row // BOX) * BOX
    start_column = (column // BOX) * BOX
    for r in range(start_row, start_row + BOX):
        for c in range(start_column, start_column + BOX):
            yield Position(r, c)


def is_valid_placement(grid: Grid, row: int, column: int, value: str) -> bool:
    """Whether `value` may go into ``(row, column)`` without a conflict.

    The row, the column and the 3x3 box through the target cell are each
    scanned for another cell already holding `value`. The target cell itself
    is never compared, so it does not matter whether it is blank.

    This does not modify `grid`. `IndexError` is raised for a position
    outside the grid.
    """
    if not (0 <= row < SIZE and 0 <= column < SIZE):
        raise IndexError(f"position {(row, column)!r} is outside the grid")
    target = Position(row, column)
    units = (_iter_row(row), _iter_column(column), _iter_box(row, column))
    for unit in units:
        for position in unit:
            if position != target and grid[position] == value:
                return False
    return True


def _iter_unit_conflicts(
    kind: str, positions: Iterable[Position], grid: Grid
) -> Iterator[Conflict]:
    seen: Dict[str, List[Position]] = {}
    for position in positions:
        value = grid[position]
        if value != BLANK:
            seen.setdefault(value, []).append(position)
    for value, found in seen.items():
        if len(found) > 1:
            yield Conflict(kind, value, found)


def find_conflicts(grid: Grid) -> List[Conflict]:
    """List every duplicated clue in `grid`.

    Rows come first, then columns, then boxes (left to right, top to
    bottom). An empty list means the clues are consistent.
    """
    conflicts: List[Conflict] = []
    for i in range(SIZE):
        conflicts.extend(_iter_unit_conflicts("row", _iter_row(i), grid))
    for i in range(SIZE):
        conflicts.extend(_iter_unit_conflicts("column", _iter_column(i), grid))
    for box_row in range(0, SIZE, BOX):
        for box_column in range(0, SIZE, BOX):
            positions = _iter_box(box_row, box_column)
            conflicts.extend(_iter_unit_conflicts("box", positions, grid))
    return conflicts
