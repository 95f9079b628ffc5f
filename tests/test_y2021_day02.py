import pytest

from aocsolve.y2021_day02 import Command, parse_input, part_one, part_two

EXAMPLE = "forward 5\ndown 5\nforward 8\nup 3\ndown 8\nforward 2"


def test_parse_input():
    assert parse_input("forward 5\nup 3") == [Command("forward", 5), Command("up", 3)]


def test_parse_missing_distance_raises():
    with pytest.raises(ValueError):
        parse_input("forward")


def test_parse_bad_distance_raises():
    with pytest.raises(ValueError):
        parse_input("down x")


def test_part_one_example():
    assert part_one(parse_input(EXAMPLE)) == 150


def test_part_two_example():
    assert part_two(parse_input(EXAMPLE)) == 900


def test_unknown_directions_are_ignored():
    base = parse_input(EXAMPLE)
    extended = base + [Command("sideways", 9)]
    assert part_one(extended) == part_one(base)
    assert part_two(extended) == part_two(base)


def test_no_forward_movement_gives_zero():
    commands = parse_input("down 4\nup 1")
    assert part_one(commands) == part_two(commands) == part_one([])