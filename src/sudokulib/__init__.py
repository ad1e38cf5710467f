__all__ = [
    "BLANK",
    "AbstractSolver",
    "BaseReporter",
    "Conflict",
    "Grid",
    "InvalidGridFormat",
    "InvalidInitialConfiguration",
    "Position",
    "Solver",
    "SolverError",
    "SolverException",
    "SolvingTooDeep",
    "Unsolvable",
    "__version__",
    "find_conflicts",
    "is_initially_valid",
    "is_valid_placement",
    "solve",
]

__version__ = "0.1.0.dev0"


from .checker import find_conflicts, is_valid_placement
from .reporters import BaseReporter
from .solvers import (
    AbstractSolver,
    InvalidInitialConfiguration,
    Solver,
    SolverError,
    SolverException,
    SolvingTooDeep,
    Unsolvable,
    is_initially_valid,
    solve,
)
from .structs import BLANK, Conflict, Grid, InvalidGridFormat, Position
