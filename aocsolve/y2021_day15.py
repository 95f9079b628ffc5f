"""Lowest-risk path through a cave of risk levels."""

import heapq
import math

Point = tuple[int, int]
Grid = list[list[int]]

_OFFSETS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def _parse_row(line: str) -> list[int]:
    row = []
    for char in line.strip():
        if char not in "0123456789":
            raise ValueError(f"invalid digit: {char!r}")
        row.append(int(char))
    return row


def parse_input(text: str) -> Grid:
    """Parse a square grid of single-digit risk levels."""
    return [_parse_row(line) for line in text.splitlines()]


def _final_path(start: Point, goal: Point, prev: dict[Point, Point]) -> set[Point]:
    path = {start, goal}
    current = goal
    while current != start:
        path.add(current)
        current = prev[current]
    return path


def lowest_risk_path(grid: Grid) -> tuple[set[Point], int]:
    """Return the points of a lowest-risk path from top left to bottom right, and its risk."""
    size = len(grid)
    if size == 0:
        raise ValueError("empty map")
    start, goal = (0, 0), (size - 1, size - 1)
    dist: dict[Point, float] = {}
    prev: dict[Point, Point] = {}
    heap: list[tuple[int, Point]] = [(0, start)]
    while heap:
        risk, pos = heapq.heappop(heap)
        if pos == goal:
            return _final_path(start, goal, prev), risk
        if risk > dist.get(pos, math.inf):
            continue
        for dx, dy in _OFFSETS:
            x, y = pos[0] + dx, pos[1] + dy
            if not (0 <= x < size and 0 <= y < size):
                continue
            candidate = risk + grid[x][y]
            if candidate < dist.get((x, y), math.inf):
                prev[(x, y)] = pos
                dist[(x, y)] = candidate
                heapq.heappush(heap, (candidate, (x, y)))
    raise ValueError("Did not find solution")


def _wrap(value: int) -> int:
    if not 1 <= value <= 18:
        raise ValueError(f"risk level out of range: {value}")
    return (value - 1) % 9 + 1


def extend_map(grid: Grid) -> Grid:
    """Tile the map five times in each direction, raising risk per tile."""
    size = len(grid)
    extended = size * 5
    return [
        [
            _wrap(grid[i % size][j % size] + i // size + j // size)
            for j in range(extended)
        ]
        for i in range(extended)
    ]


def part_one(grid: Grid) -> int:
    """Return the lowest total risk across the map."""
    return lowest_risk_path(grid)[1]


def part_two(grid: Grid) -> int:
    """Return the lowest total risk across the fivefold map."""
    return lowest_risk_path(extend_map(grid))[1]