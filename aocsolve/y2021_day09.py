"""Smoke basins on a height map."""

from collections import deque

Point = tuple[int, int]

_DIGITS = "0123456789"


def _parse_row(line: str) -> list[int]:
    row = []
    for char in line:
        if char not in _DIGITS:
            raise ValueError(f"Expected Digit: {char!r}")
        row.append(int(char))
    return row


def parse_input(text: str) -> list[list[int]]:
    """Parse a grid of single-digit heights."""
    return [_parse_row(line) for line in text.splitlines()]


def _neighbours(point: Point, rows: int, cols: int) -> list[Point]:
    i, j = point
    candidates = ((i, j + 1), (i + 1, j), (i, j - 1), (i - 1, j))
    return [(x, y) for x, y in candidates if 0 <= x < rows and 0 <= y < cols]


def _dimensions(heights: list[list[int]]) -> tuple[int, int]:
    if not heights:
        raise ValueError("empty height map")
    return len(heights), len(heights[0])


def low_points(heights: list[list[int]]) -> list[Point]:
    """Return points lower than every orthogonal neighbour, row by row."""
    rows, cols = _dimensions(heights)
    return [
        (i, j)
        for i in range(rows)
        for j in range(cols)
        if all(
            heights[x][y] > heights[i][j] for x, y in _neighbours((i, j), rows, cols)
        )
    ]


def basin_size(heights: list[list[int]], low_point: Point) -> int:
    """Return the number of points flowing down to the low point."""
    rows, cols = _dimensions(heights)
    frontier = deque([low_point])
    visited = {low_point}
    size = 0
    while frontier:
        node = frontier.popleft()
        size += 1
        here = heights[node[0]][node[1]]
        for x, y in _neighbours(node, rows, cols):
            height = heights[x][y]
            if height > here and height != 9 and (x, y) not in visited:
                visited.add((x, y))
                frontier.append((x, y))
    return size


def part_one(heights: list[list[int]]) -> int:
    """Return the sum of risk levels of all low points."""
    return sum(heights[i][j] + 1 for i, j in low_points(heights))


def part_two(heights: list[list[int]]) -> int:
    """Return the product of the three largest basin sizes."""
    sizes = sorted(
        (
            basin_size(heights, point)
            for point in low_points(heights)
            if heights[point[0]][point[1]] != 9
        ),
        reverse=True,
    )
    product = 1
    for size in sizes[:3]:
        product *= size
    return product