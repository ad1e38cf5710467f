"""Show how the search walks a puzzle, one placement per line."""

from sudokulib import BaseReporter, Grid, Solver, SolvingTooDeep

PUZZLE = [
    "5...7....",
    "672195348",
    "198342567",
    "859761423",
    "426853791",
    "713924856",
    "961537284",
    "287419635",
    "345286179",
]


class Reporter(BaseReporter):
    def __init__(self):
        self._depth = 0

    def starting(self, grid):
        print("Starting with:")
        print(grid.render())

    def placing(self, position, value):
        print("  " * self._depth + f"place {value} at {position}")
        self._depth += 1

    def backtracking(self, position, value):
        self._depth -= 1
        print("  " * self._depth + f"undo  {value} at {position}")

    def dead_end(self, position):
        print("  " * self._depth + f"dead end at {position}")

    def ending(self, grid):
        print("Done.")


def main():
    solver = Solver(Reporter())
    result = solver.solve(Grid.from_rows(PUZZLE))
    print(result.grid.render())

    # An empty grid needs at least 81 placements.
    try:
        Solver().solve(Grid(), max_rounds=10)
    except SolvingTooDeep as e:
        print(f"Gave up after {e.round_count} placements on an empty grid.")


if __name__ == "__main__":
    main()
