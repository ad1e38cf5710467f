from __future__ import annotations

from collections import namedtuple
from typing import (
    TYPE_CHECKING,
    Dict,
    Iterable,
    Iterator,
    List,
    NamedTuple,
    Optional,
    Tuple,
    Union,
)

BLANK = "."
SIZE = 9
BOX = 3
DIGITS = "123456789"

CELL_VALUES = frozenset(DIGITS + BLANK)

if TYPE_CHECKING:

    class Position(NamedTuple):
        row: int
        column: int

        @property
        def box(self) -> Tuple[int, int]: ...

    class Conflict(NamedTuple):
        kind: str
        value: str
        positions: List[Position]

        def describe(self) -> str: ...

else:

    class Position(namedtuple("Position", ["row", "column"])):
        __slots__ = ()

        @property
        def box(self):
            """Index of the 3x3 subgrid holding this position."""
            return (self.row // BOX, self.column // BOX)

    class Conflict(namedtuple("Conflict", ["kind", "value", "positions"])):
        """Two or more given clues sharing a value in one row, column or box.

        * `kind` is one of ``"row"``, ``"column"`` or ``"box"``.
        * `value` is the duplicated digit.
        * `positions` lists every cell in the unit holding `value`, in
          row-major order.
        """

        __slots__ = ()

        def describe(self):
            first = self.positions[0]
            if self.kind == "row":
                where = f"row {first.row + 1}"
            elif self.kind == "column":
                where = f"column {first.column + 1}"
            else:
                box_row, box_column = first.box
                where = f"box at {box_row + 1},{box_column + 1}"
            return f"Duplicate {self.value} in {where}"


Key = Union[Position, Tuple[int, int]]


class InvalidGridFormat(ValueError):
    """The input does not describe a 9x9 grid of digits and blanks.

    `row` and `column` are 1-based and may be None when the error is not
    about a particular row or cell.
    """

    def __init__(
        self,
        message: str,
        row: Optional[int] = None,
        column: Optional[int] = None,
        character: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.row = row
        self.column = column
        self.character = character


def _check_rows(rows: List[str]) -> None:
    if len(rows) != SIZE:
        raise InvalidGridFormat(f"You must provide exactly {SIZE} rows.")
    for i, row in enumerate(rows, 1):
        if len(row) != SIZE:
            raise InvalidGridFormat(
                f"Row {i} must have exactly {SIZE} characters.", row=i
            )
        for j, char in enumerate(row, 1):
            if char not in CELL_VALUES:
                raise InvalidGridFormat(
                    f"Invalid character {char!r} detected in row {i}, "
                    f"column {j}. Only digits 1-9 and {BLANK!r} are allowed.",
                    row=i,
                    column=j,
                    character=char,
                )


class Grid:
    """A 9x9 Sudoku board.

    Each cell holds either `BLANK` or one of the characters ``"1"`` to
    ``"9"``. Cells are addressed with ``grid[row, column]`` or with a
    `Position`; both indexes are zero-based.

    A grid is meant to be owned by a single caller. The solver mutates it
    in place, so use `copy()` to keep the original around.
    """

    __slots__ = ("_cells",)

    def __init__(self, rows: Optional[Iterable[Iterable[str]]] = None) -> None:
        if rows is None:
            self._cells = [[BLANK] * SIZE for _ in range(SIZE)]
            return
        cells = [list(row) for row in rows]
        _check_rows(["".join(row) for row in cells])
        self._cells = cells

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Grid:
        """Build a grid from nine strings of nine characters each.

        Raises `InvalidGridFormat` on a wrong row count, a wrong row length
        or a character other than a digit 1-9 or `BLANK`.
        """
        return cls(list(rows))

    @classmethod
    def from_string(cls, text: str) -> Grid:
        """Build a grid from a newline separated board."""
        return cls.from_rows(line.strip() for line in text.strip().splitlines())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rows()!r})"

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, key: Key) -> str:
        row, column = key
        return self._cells[row][column]

    def __setitem__(self, key: Key, value: str) -> None:
        if value not in CELL_VALUES:
            raise ValueError(f"invalid cell value {value!r}")
        row, column = key
        self._cells[row][column] = value

    def copy(self) -> Grid:
        """Return an independent copy of this grid."""
        other = type(self)()
        other._cells = [list(row) for row in self._cells]
        return other

    def rows(self) -> List[str]:
        return ["".join(row) for row in self._cells]

    def iter_positions(self) -> Iterator[Position]:
        """Iterate through every position in row-major order."""
        for row in range(SIZE):
            for column in range(SIZE):
                yield Position(row, column)

    def iter_blanks(self) -> Iterator[Position]:
        return (p for p in self.iter_positions() if self[p] == BLANK)

    def first_blank(self) -> Optional[Position]:
        return next(self.iter_blanks(), None)

    def is_complete(self) -> bool:
        return self.first_blank() is None

    def clues(self) -> Dict[Position, str]:
        """Mapping of every non-blank position to its value."""
        return {p: self[p] for p in self.iter_positions() if self[p] != BLANK}

    def render(self) -> str:
        """Render the grid as nine lines of space separated cells."""
        return "\n".join(" ".join(row) for row in self._cells)
