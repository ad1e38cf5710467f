import pytest

from sudokulib import BaseReporter


class TestReporter(BaseReporter):
    def __init__(self):
        self.rounds = 0

    def placing(self, position, value):
        self.rounds += 1


@pytest.fixture()
def reporter():
    return TestReporter()
