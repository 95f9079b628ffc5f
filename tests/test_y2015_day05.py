import pytest

from aocsolve.y2015_day05 import is_nice, is_nicer, parse_input, part_one, part_two

SAMPLES = [
    "ugknbfddgicrmopn",
    "aaa",
    "jchzalrnumimnmhp",
    "haegwjzuvuyypxyu",
    "dvszwmarrgswjxmb",
    "qjhvhtzxzqqjkmpb",
    "xxyxx",
    "uurcxstgmygtbstg",
    "ieodomkazucvgmuy",
]


def test_parse_input_round_trip():
    assert parse_input("\n".join(SAMPLES)) == SAMPLES


@pytest.mark.parametrize("string", ["ugknbfddgicrmopn", "aaa"])
def test_nice_strings(string):
    assert is_nice(string)


@pytest.mark.parametrize(
    "string", ["jchzalrnumimnmhp", "haegwjzuvuyypxyu", "dvszwmarrgswjxmb"]
)
def test_naughty_strings(string):
    assert not is_nice(string)


@pytest.mark.parametrize("string", ["qjhvhtzxzqqjkmpb", "xxyxx", "xyxy"])
def test_nicer_strings(string):
    assert is_nicer(string)


@pytest.mark.parametrize("string", ["uurcxstgmygtbstg", "ieodomkazucvgmuy", "aaa"])
def test_not_nicer_strings(string):
    assert not is_nicer(string)


def test_part_one_counts_nice():
    assert part_one(SAMPLES) == sum(is_nice(s) for s in SAMPLES)


def test_part_two_counts_nicer():
    assert part_two(SAMPLES) == sum(is_nicer(s) for s in SAMPLES)