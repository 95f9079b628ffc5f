import pytest

from aocsolve.y2015_day03 import parse_input, part_one, part_two


def test_parse_input_keeps_text():
    assert parse_input("^>v<") == "^>v<"


def test_part_one_single_move():
    assert part_one(">") == 2


def test_part_one_loop():
    assert part_one("^>v<") == 4


def test_part_one_repeating_path_adds_nothing():
    assert part_one("^v" * 10) == part_one("^v")


def test_part_two_split_moves():
    assert part_two("^v") == 3


def test_part_two_never_exceeds_moves_plus_start():
    moves = "^>v<^^>>vv<<"
    assert part_two(moves) <= len(moves) + 1


def test_part_two_santa_alone_matches_part_one_on_even_moves():
    # Robot stays put when every odd move is undone by the next even move pattern.
    moves = "^"
    assert part_two(moves) == part_one(moves)


@pytest.mark.parametrize("solve", [part_one, part_two])
def test_invalid_character(solve):
    with pytest.raises(ValueError):
        solve("^x")