import pytest

from cube import TOP, FRONT, COLORS
from state import create_solved_cube, create_empty_cube, set_facelet
from util import format_time, parse_move_sequence, color_count_table, print_color_counts


@pytest.mark.parametrize("elapsed, expected", [
    (0, "0.0s"),
    (2.5, "2.5s"),
    (61, "1m 1.0s"),
    (3600, "1h"),
    (3725.5, "1h 2m 5.5s"),
])
def test_format_time(elapsed, expected):
    assert format_time(elapsed) == expected


@pytest.mark.parametrize("sequence, expected", [
    ("R U R' U'", ["R", "U", "R'", "U'"]),
    ("RUR'U'", ["R", "U", "R'", "U'"]),
    ("F2 b' d", ["F2", "B'", "D"]),
    ("R, U; x", ["R", "U"]),
    ("", []),
])
def test_parse_move_sequence(sequence, expected):
    assert parse_move_sequence(sequence) == expected


def test_color_count_table_solved():
    df = color_count_table(create_solved_cube())
    assert list(df.index) == ["Red", "Orange", "White", "Yellow", "Green", "Blue"]
    assert list(df.columns) == ["count", "expected", "delta"]
    assert (df["count"] == 9).all()
    assert (df["delta"] == 0).all()


def test_color_count_table_reports_delta():
    state = set_facelet(create_solved_cube(), TOP, 0, COLORS[FRONT])
    df = color_count_table(state)
    assert df.loc["Red", "delta"] == 1
    assert df.loc["White", "delta"] == -1
    assert int(color_count_table(create_empty_cube())["count"].sum()) == 6


def test_print_color_counts(capsys):
    print_color_counts(create_solved_cube())
    out = capsys.readouterr().out
    assert "Yellow" in out
    assert "delta" in out
