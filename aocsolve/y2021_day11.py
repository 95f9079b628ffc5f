"""Flashing dumbo octopuses."""

import copy

Grid = list[list[int]]

_OFFSETS = ((0, 1), (1, 0), (0, -1), (-1, 0), (1, 1), (1, -1), (-1, 1), (-1, -1))


def _parse_row(line: str) -> list[int]:
    row = []
    for char in line:
        if char not in "0123456789":
            raise ValueError(f"failed to parse digit: {char!r}")
        row.append(int(char))
    return row


def parse_input(text: str) -> Grid:
    """Parse a grid of single-digit energy levels."""
    return [_parse_row(line) for line in text.splitlines()]


def step(levels: Grid) -> int:
    """Advance the grid one step in place and return how many flashed."""
    rows, cols = len(levels), len(levels[0]) if levels else 0
    to_flash = set()
    for i, row in enumerate(levels):
        for j in range(len(row)):
            row[j] += 1
            if row[j] > 9:
                to_flash.add((i, j))
    flashed = set()
    while to_flash:
        i, j = to_flash.pop()
        flashed.add((i, j))
        for di, dj in _OFFSETS:
            x, y = i + di, j + dj
            if 0 <= x < rows and 0 <= y < cols:
                levels[x][y] += 1
                if levels[x][y] > 9 and (x, y) not in flashed:
                    to_flash.add((x, y))
    for i, j in flashed:
        levels[i][j] = 0
    return len(flashed)


def part_one(levels: Grid) -> int:
    """Return the total number of flashes over 100 steps."""
    grid = copy.deepcopy(levels)
    return sum(step(grid) for _ in range(100))


def part_two(levels: Grid) -> int:
    """Return the first step on which every octopus flashes."""
    grid = copy.deepcopy(levels)
    total = sum(len(row) for row in grid)
    steps = 1
    while step(grid) != total:
        steps += 1
    return steps