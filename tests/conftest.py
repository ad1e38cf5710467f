import pytest

from sudokulib import BaseReporter


class TestReporter(BaseReporter):
    def __init__(self):
        self._indent = 0
        self.events = []

    def starting(self, grid):
        self.events.append(("starting",))

    def placing(self, position, value):
        print(" " * self._indent, "Place ", value, " at ", position, sep="")
        self.events.append(("placing", position, value))
        self._indent += 1

    def backtracking(self, position, value):
        self._indent -= 1
        assert self._indent >= 0
        print(" " * self._indent, "Undo  ", value, " at ", position, sep="")
        self.events.append(("backtracking", position, value))

    def dead_end(self, position):
        self.events.append(("dead_end", position))

    def ending(self, grid):
        self.events.append(("ending",))

    def count(self, kind):
        return sum(1 for event in self.events if event[0] == kind)


@pytest.fixture(scope="session")
def reporter_cls():
    return TestReporter


@pytest.fixture()
def reporter(reporter_cls):
    return reporter_cls()


@pytest.fixture()
def classic_rows():
    return [
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


@pytest.fixture()
def classic_solution_rows():
    return [
        "534678912",
        "672195348",
        "198342567",
        "859761423",
        "426853791",
        "713924856",
        "961537284",
        "287419635",
        "345286179",
    ]


@pytest.fixture()
def exhausting_rows():
    """Consistent clues that two placements prove unsolvable."""
    return [
        ".2345678.",
        "........9",
        "........1",
        ".........",
        ".........",
        ".........",
        ".........",
        ".........",
        ".........",
    ]
