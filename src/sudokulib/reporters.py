from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .structs import Grid, Position


class BaseReporter:
    """Delegate class to provide progress reporting for the solver.

    Any hook may raise to abort the search. The exception propagates out of
    the solver and the grid is left part-way through the search.
    """

    def starting(self, grid: Grid) -> None:
        """Called before the search actually starts."""

    def placing(self, position: Position, value: str) -> None:
        """Called before a candidate value is tentatively placed."""

    def backtracking(self, position: Position, value: str) -> None:
        """Called after a placement failed to lead to a solution.

        The cell at `position` has already been reset to blank.
        """

    def dead_end(self, position: Position) -> None:
        """Called when no value works for the blank cell at `position`."""

    def ending(self, grid: Grid) -> None:
        """Called when the search completes `grid` successfully."""
