from __future__ import annotations

import collections
from typing import TYPE_CHECKING, NamedTuple, Optional

from ..reporters import BaseReporter

if TYPE_CHECKING:
    from ..structs import Grid

    class Result(NamedTuple):
        grid: Grid
        rounds: int

else:
    Result = collections.namedtuple("Result", ["grid", "rounds"])


class AbstractSolver:
    """The thing that performs the actual solving work."""

    base_exception = Exception

    def __init__(self, reporter: Optional[BaseReporter] = None) -> None:
        self.reporter = reporter if reporter is not None else BaseReporter()

    def solve(self, grid: Grid, max_rounds: Optional[int] = None) -> Result:
        """Take a puzzle, and return a solved copy of it.

        :param grid: The puzzle. It is not modified.
        :param max_rounds: The maximum number of tentative placements the
            search may make before giving up. None means no limit.

        Returns a `Result`, or raises a subclass of `base_exception` if no
        solution can be produced.
        """
        raise NotImplementedError
