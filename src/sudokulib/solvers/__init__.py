from .abstract import AbstractSolver, Result
from .backtracking import Solver, Solving, is_initially_valid, solve
from .exceptions import (
    InvalidInitialConfiguration,
    SolverError,
    SolverException,
    SolvingTooDeep,
    Unsolvable,
)

__all__ = [
    "AbstractSolver",
    "InvalidInitialConfiguration",
    "Result",
    "Solver",
    "SolverError",
    "SolverException",
    "Solving",
    "SolvingTooDeep",
    "Unsolvable",
    "is_initially_valid",
    "solve",
]
