from __future__ import annotations

from typing import Optional

from ..checker import find_conflicts, is_valid_placement
from ..reporters import BaseReporter
from ..structs import BLANK, DIGITS, Grid, Position
from .abstract import AbstractSolver, Result
from .exceptions import (
    InvalidInitialConfiguration,
    SolverException,
    SolvingTooDeep,
    Unsolvable,
)


def is_initially_valid(grid: Grid) -> bool:
    """Whether the given clues of `grid` are mutually consistent.

    Each clue is blanked while it is checked against the rest of the grid,
    and put back before moving on, whatever the outcome.
    """
    for position in grid.iter_positions():
        value = grid[position]
        if value == BLANK:
            continue
        grid[position] = BLANK
        try:
            if not is_valid_placement(grid, position.row, position.column, value):
                return False
        finally:
            grid[position] = value
    return True


class Solving:
    """Stateful solving object.

    This is designed as a one-off object that owns the grid being searched
    for the whole search, and holds the round count afterwards.
    """

    def __init__(self, grid: Grid, reporter: BaseReporter) -> None:
        self._g = grid
        self._r = reporter
        self._rounds = 0
        self._max_rounds: Optional[int] = None
        self._started = False

    @property
    def grid(self) -> Grid:
        return self._g

    @property
    def rounds(self) -> int:
        """Number of tentative placements made so far."""
        return self._rounds

    def _place(self, position: Position, value: str) -> None:
        if self._max_rounds is not None and self._rounds >= self._max_rounds:
            raise SolvingTooDeep(self._max_rounds)
        self._rounds += 1
        self._r.placing(position, value)
        self._g[position] = value

    def _search(self) -> bool:
        position = self._g.first_blank()

        # Nothing left to fill, the grid is a solution.
        if position is None:
            return True

        for value in DIGITS:
            if not is_valid_placement(self._g, position.row, position.column, value):
                continue
            self._place(position, value)
            if self._search():
                return True
            self._g[position] = BLANK
            self._r.backtracking(position, value)

        # Every value failed here. The caller frame undoes its own placement.
        self._r.dead_end(position)
        return False

    def solve(self, max_rounds: Optional[int] = None) -> bool:
        """Complete the grid in place.

        Blank cells are filled in row-major order, trying values 1 to 9 in
        ascending order, so the solution returned is always the first one
        reached under that order.

        Return True with the grid completed, or False with every cell filled
        by the search blank again. `SolvingTooDeep` is raised if more than
        `max_rounds` placements are needed.

        The clues must already be consistent; see `is_initially_valid`.
        """
        if self._started:
            raise RuntimeError("already solved")
        self._started = True
        self._max_rounds = max_rounds

        self._r.starting(self._g)
        if not self._search():
            return False
        self._r.ending(self._g)
        return True


def solve(grid: Grid, reporter: Optional[BaseReporter] = None) -> bool:
    """Complete `grid` in place with a backtracking search.

    Return whether a solution was found. The clues must be consistent; check
    with `is_initially_valid` first.
    """
    if reporter is None:
        reporter = BaseReporter()
    return Solving(grid, reporter).solve()


class Solver(AbstractSolver):
    """The thing that validates a puzzle and searches for its solution."""

    base_exception = SolverException

    def solve(self, grid: Grid, max_rounds: Optional[int] = None) -> Result:
        """Take a puzzle, spit out the first solution found.

        The given grid is left untouched. The return value is a tuple
        subclass with two public members:

        * `grid`: A new, fully filled `Grid`. Every clue of the puzzle is
            kept as is.
        * `rounds`: The number of tentative placements the search made.

        The following exceptions may be raised if no solution is produced:

        * `InvalidInitialConfiguration`: Some given clues already collide.
            The search is not started.
        * `Unsolvable`: The clues are consistent, but cannot be completed.
        * `SolvingTooDeep`: The search needed more than `max_rounds`
            placements and gave up.
        """
        work = grid.copy()
        if not is_initially_valid(work):
            raise InvalidInitialConfiguration(find_conflicts(work))

        solving = Solving(work, self.reporter)
        if not solving.solve(max_rounds=max_rounds):
            raise Unsolvable(grid)
        return Result(grid=work, rounds=solving.rounds)
