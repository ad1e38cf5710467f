from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from ..structs import Conflict, Grid


class SolverException(Exception):
    """A base class for all exceptions raised by this module.

    Exceptions derived by this class should all be handled in this module. Any
    bubbling pass the solver should be treated as a bug.
    """


class SolverError(SolverException):
    pass


class InvalidInitialConfiguration(SolverError):
    """Two or more given clues collide in a row, column or box.

    The search is never started for such a puzzle.
    """

    def __init__(self, conflicts: List[Conflict]) -> None:
        super().__init__(conflicts)
        self.conflicts = conflicts

    def __str__(self) -> str:
        if not self.conflicts:
            return "initial board configuration is invalid"
        return "; ".join(c.describe() for c in self.conflicts)


class Unsolvable(SolverError):
    """The clues are consistent, but no completion of the grid exists."""

    def __init__(self, grid: Grid) -> None:
        super().__init__(grid)
        self.grid = grid


class SolvingTooDeep(SolverError):
    def __init__(self, round_count: int) -> None:
        super().__init__(round_count)
        self.round_count = round_count
