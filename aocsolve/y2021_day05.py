"""Hydrothermal vent line overlaps."""

import re
from collections import Counter
from typing import Optional

Point = tuple[int, int]
VentLine = tuple[Point, Point]

GRID_SIZE = 1000

_I32 = re.compile(r"[+-]?[0-9]+")


def _as_int(text: str) -> Optional[int]:
    return int(text) if _I32.fullmatch(text) else None


def parse_vent_line(line: str) -> Optional[VentLine]:
    """Parse "a,b -> c,d" into ((b, a), (d, c)); return None if malformed."""
    first, sep, second = line.partition(" -> ")
    if not sep:
        return None
    coords = []
    for part in (first, second):
        left, comma, right = part.partition(",")
        if not comma:
            return None
        coords.append((_as_int(left), _as_int(right)))
    (y1, x1), (y2, x2) = coords
    if None in (x1, y1, x2, y2):
        return None
    return (x1, y1), (x2, y2)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def count_overlaps(lines: list[VentLine], include_diagonals: bool, size: int) -> int:
    """Count grid points covered by at least two lines."""
    covered: Counter[Point] = Counter()
    for (x1, y1), (x2, y2) in lines:
        dx, dy = x2 - x1, y2 - y1
        straight = dx == 0 or dy == 0
        if not (straight or (include_diagonals and abs(dx) == abs(dy))):
            continue
        step_x, step_y = _sign(dx), _sign(dy)
        for i in range(max(abs(dx), abs(dy)) + 1):
            x, y = x1 + step_x * i, y1 + step_y * i
            if not (0 <= x < size and 0 <= y < size):
                raise IndexError(f"point ({x}, {y}) outside the seafloor")
            covered[(x, y)] += 1
    return sum(1 for hits in covered.values() if hits >= 2)


def parse_input(text: str) -> list[VentLine]:
    """Parse vent lines, skipping malformed ones."""
    return [line for line in map(parse_vent_line, text.splitlines()) if line is not None]


def part_one(lines: list[VentLine]) -> int:
    """Count overlaps of horizontal and vertical lines."""
    return count_overlaps(lines, False, GRID_SIZE)


def part_two(lines: list[VentLine]) -> int:
    """Count overlaps including 45-degree diagonals."""
    return count_overlaps(lines, True, GRID_SIZE)