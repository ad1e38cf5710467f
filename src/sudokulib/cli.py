"""Command line front end to solve a puzzle given as nine row arguments.

Each row is nine characters of digits 1-9, with ``.`` for a blank cell::

    sudokulib "53..7...." "6..195..." ".98....6." "8...6...3" \\
        "4..8.3..1" "7...2...6" ".6....28." "...419..5" "....8..79"

The solution is printed as nine lines of space separated digits. Any error
is printed with an ``Error:`` prefix, and the exit status is 1.
"""

import argparse
import logging
import sys

from .reporters import BaseReporter
from .solvers import (
    InvalidInitialConfiguration,
    Solver,
    SolvingTooDeep,
    Unsolvable,
)
from .structs import SIZE, Grid, InvalidGridFormat

logger = logging.getLogger(__name__)


class LoggingReporter(BaseReporter):
    """Reporter to trace the search through the logging system."""

    def __init__(self, logger):
        self._logger = logger
        self._depth = 0

    def starting(self, grid):
        self._logger.debug("Solving:\n%s", grid.render())

    def placing(self, position, value):
        self._logger.debug(
            "%sPlace %s at %d,%d",
            " " * self._depth,
            value,
            position.row + 1,
            position.column + 1,
        )
        self._depth += 1

    def backtracking(self, position, value):
        self._depth -= 1
        self._logger.debug(
            "%sUndo  %s at %d,%d",
            " " * self._depth,
            value,
            position.row + 1,
            position.column + 1,
        )

    def ending(self, grid):
        self._logger.debug("Solved.")


# Options that take no value, and options that take the next argument.
FLAGS = ("-h", "--help", "-v", "--verbose", "--conflicts")
VALUED = ("--max-rounds",)


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="sudokulib",
        allow_abbrev=False,
        description="Solve a 9x9 Sudoku puzzle.",
    )
    parser.add_argument(
        "rows",
        metavar="ROW",
        nargs="*",
        help="nine characters of digits 1-9, or '.' for a blank cell",
    )
    parser.add_argument(
        "--max-rounds",
        type=int,
        default=None,
        help="give up after this many tentative placements",
    )
    parser.add_argument(
        "--conflicts",
        action="store_true",
        help="list every duplicated clue of an invalid puzzle",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="trace the search on stderr",
    )
    return parser


def _error(message):
    print(f"Error: {message}")
    return 1


def _split_argv(argv):
    """Separate option arguments from puzzle rows.

    A row may start with "-", which argparse would take for an unknown
    option. Rows are passed after "--" so they always reach the grid parser.
    """
    options, rows = [], []
    args = iter(argv)
    for arg in args:
        if arg == "--":
            rows.extend(args)
        elif arg in FLAGS or arg.startswith(tuple(f"{o}=" for o in VALUED)):
            options.append(arg)
        elif arg in VALUED:
            options.append(arg)
            value = next(args, None)
            if value is not None:
                options.append(value)
        else:
            rows.append(arg)
    return options + ["--"] + rows


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    options = _build_parser().parse_args(_split_argv(argv))

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if options.verbose else logging.WARNING,
        format="%(message)s",
    )

    if len(options.rows) != SIZE:
        return _error(f"You must provide exactly {SIZE} rows as arguments.")
    try:
        grid = Grid.from_rows(options.rows)
    except InvalidGridFormat as e:
        return _error(e)

    reporter = LoggingReporter(logger) if options.verbose else BaseReporter()
    solver = Solver(reporter)
    try:
        result = solver.solve(grid, max_rounds=options.max_rounds)
    except InvalidInitialConfiguration as e:
        if options.conflicts:
            for conflict in e.conflicts:
                print(conflict.describe())
        logger.info("Conflicts: %s", e)
        return _error(
            "Initial board configuration is invalid (violates Sudoku rules)."
        )
    except Unsolvable:
        return _error("No solution found for the given Sudoku puzzle.")
    except SolvingTooDeep as e:
        return _error(f"Search gave up after {e.round_count} rounds.")

    logger.info("Solved in %d rounds", result.rounds)
    print(result.grid.render())
    return 0
