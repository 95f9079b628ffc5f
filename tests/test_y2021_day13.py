import pytest

from aocsolve.y2021_day13 import (
    Fold,
    Manual,
    fold,
    parse_fold,
    parse_input,
    part_one,
    part_two,
    render,
)

EXAMPLE_INPUT = """
6,10
0,14
9,10
0,3
10,4
4,11
6,0
6,12
4,1
0,13
10,12
3,4
3,0
8,4
1,10
2,14
8,10
9,0

fold along y=7
fold along x=5"""

EXAMPLE_PART2_RESULT = """
#####
#...#
#...#
#...#
#####"""

EXPECTED_PAPER = """
...#..#..#.
....#......
...........
#..........
...#....#.#
...........
...........
...........
...........
...........
.#....#.##.
....#......
......#...#
#..........
#.#........"""

EXPECTED_AFTER_FOLD = """
#.##..#..#.
#...#......
......#...#
#...#......
.#.#..#.###"""


def test_example_steps():
    manual = parse_input(EXAMPLE_INPUT)
    assert render(manual.points).strip() == EXPECTED_PAPER.strip()
    points = fold(manual.points, manual.instructions[0])
    assert render(points).strip() == EXPECTED_AFTER_FOLD.strip()
    points = fold(points, manual.instructions[1])
    assert render(points).strip() == EXAMPLE_PART2_RESULT.strip()


def test_example_parts():
    manual = parse_input(EXAMPLE_INPUT)
    assert part_one(manual) == 17
    assert part_two(manual) == "\n" + EXAMPLE_PART2_RESULT.strip()


def test_parse_fold():
    assert parse_fold("fold along y=7") == Fold("y", 7)
    assert parse_fold("fold along x=5") == Fold("x", 5)


@pytest.mark.parametrize(
    "line", ["fold along z=3", "fold", "fold along x7", "fold along x=a"]
)
def test_parse_fold_errors(line):
    with pytest.raises(ValueError):
        parse_fold(line)


def test_render_empty_raises():
    with pytest.raises(ValueError):
        render([])


def test_fold_off_paper_raises():
    with pytest.raises(ValueError):
        fold([(0, 9)], Fold("y", 2))


def test_part_one_needs_instruction():
    with pytest.raises(ValueError):
        part_one(Manual([(1, 1)], []))


def test_input_without_folds_raises():
    with pytest.raises(ValueError):
        parse_input("1,2\n3,4")