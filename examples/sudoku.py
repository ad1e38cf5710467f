from sudokulib import BaseReporter, Grid, Solver

PUZZLE = [
    "53..7....",
    "6..195...",
    ".98....6.",
    "8...6...3",
    "4..8.3..1",
    "7...2...6",
    ".6....28.",
    "...419..5",
    "....8..79",
]


def main():
    grid = Grid.from_rows(PUZZLE)
    print("Clues:")
    print(grid.render())

    solver = Solver(BaseReporter())
    result = solver.solve(grid)

    print(f"Solution ({result.rounds} placements):")
    print(result.grid.render())


if __name__ == "__main__":
    main()
