import pytest

from sudokulib.cli import main


def test_solves(capsys, classic_rows, classic_solution_rows):
    assert main(classic_rows) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [" ".join(row) for row in classic_solution_rows]


@pytest.mark.parametrize("count", [0, 8, 10])
def test_wrong_row_count(capsys, count):
    assert main(["........."] * count) == 1
    assert capsys.readouterr().out == (
        "Error: You must provide exactly 9 rows as arguments.\n"
    )


def test_wrong_row_length(capsys):
    rows = ["........."] * 9
    rows[1] = "1234"
    assert main(rows) == 1
    assert capsys.readouterr().out == (
        "Error: Row 2 must have exactly 9 characters.\n"
    )


def test_invalid_character(capsys):
    rows = ["........."] * 9
    rows[6] = "....0...."
    assert main(rows) == 1
    assert capsys.readouterr().out == (
        "Error: Invalid character '0' detected in row 7, column 5. "
        "Only digits 1-9 and '.' are allowed.\n"
    )


@pytest.mark.parametrize("index", [0, 3, 8])
def test_row_starting_with_dash(capsys, index):
    rows = ["........."] * 9
    rows[index] = "-........"
    assert main(rows) == 1
    assert capsys.readouterr().out == (
        f"Error: Invalid character '-' detected in row {index + 1}, column 1. "
        "Only digits 1-9 and '.' are allowed.\n"
    )


def test_options_mixed_with_rows(capsys, classic_rows, classic_solution_rows):
    argv = classic_rows[:4] + ["--max-rounds", "100000"] + classic_rows[4:]
    assert main(argv + ["--conflicts"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [" ".join(row) for row in classic_solution_rows]


def test_max_rounds_with_equals(capsys):
    assert main(["........."] * 9 + ["--max-rounds=3"]) == 1
    assert capsys.readouterr().out == "Error: Search gave up after 3 rounds.\n"


def test_invalid_configuration(capsys):
    assert main(["11......."] + ["........."] * 8) == 1
    assert capsys.readouterr().out == (
        "Error: Initial board configuration is invalid (violates Sudoku rules).\n"
    )


def test_invalid_configuration_lists_conflicts(capsys):
    assert main(["--conflicts", "11......."] + ["........."] * 8) == 1
    assert capsys.readouterr().out.splitlines() == [
        "Duplicate 1 in row 1",
        "Duplicate 1 in box at 1,1",
        "Error: Initial board configuration is invalid (violates Sudoku rules).",
    ]


def test_unsolvable(capsys, exhausting_rows):
    assert main(exhausting_rows) == 1
    assert capsys.readouterr().out == (
        "Error: No solution found for the given Sudoku puzzle.\n"
    )


def test_max_rounds(capsys):
    assert main(["--max-rounds", "5"] + ["........."] * 9) == 1
    assert capsys.readouterr().out == "Error: Search gave up after 5 rounds.\n"


def test_verbose_traces_search(caplog, capsys, classic_rows):
    with caplog.at_level("DEBUG", logger="sudokulib.cli"):
        assert main(["-v"] + classic_rows) == 0
    messages = [r.getMessage() for r in caplog.records]
    assert messages[0].startswith("Solving:")
    assert any(m.strip() == "Place 4 at 1,3" for m in messages)
    assert "Solved." in messages
    capsys.readouterr()
