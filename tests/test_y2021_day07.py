import pytest

from aocsolve.y2021_day07 import parse_input, part_one, part_two

EXAMPLE = "16,1,2,0,4,2,7,1,2,14"


def test_part_one():
    assert part_one(parse_input(EXAMPLE)) == 37


def test_part_two():
    assert part_two(parse_input(EXAMPLE)) == 168


def test_parse_input():
    assert parse_input("16,1,2\n") == [16, 1, 2]


def test_parse_input_rejects_bad_number():
    with pytest.raises(ValueError):
        parse_input("1,-2")


def test_part_one_aligned_crabs_use_no_fuel():
    assert part_one([5, 5, 5]) == 0


def test_part_one_empty_raises():
    with pytest.raises(ValueError):
        part_one([])


def test_part_two_aligned_crabs_raise():
    with pytest.raises(ValueError):
        part_two([5, 5, 5])