"""Folding transparent paper marked with dots."""

from dataclasses import dataclass

Point = tuple[int, int]


@dataclass(frozen=True)
class Fold:
    """A fold along the line axis=position."""

    axis: str
    position: int


@dataclass
class Manual:
    points: list[Point]
    instructions: list[Fold]


def _parse_usize(text: str, message: str) -> int:
    if not text.isascii() or not text.isdecimal():
        raise ValueError(f"{message}: {text!r}")
    return int(text)


def parse_fold(line: str) -> Fold:
    """Parse a line such as "fold along y=7"."""
    if len(line) < 11:
        raise ValueError(f"Equation didn't have enough chars: {line!r}")
    axis, sep, value = line[11:].partition("=")
    if not sep:
        raise ValueError(f"failed to split equation: {line!r}")
    if axis not in ("x", "y"):
        raise ValueError(f"bad equation: {line!r}")
    return Fold(axis, _parse_usize(value, "failed to parse fold equation line"))


def _parse_point(line: str) -> Point:
    x, sep, y = line.partition(",")
    if not sep:
        raise ValueError(f"Failed to parse point: {line!r}")
    return (
        _parse_usize(x, "Failed to parse point"),
        _parse_usize(y, "Failed to parse point"),
    )


def _reflect(coordinate: int, line: int) -> int:
    if coordinate <= line:
        return coordinate
    reflected = 2 * line - coordinate
    if reflected < 0:
        raise ValueError(f"coordinate {coordinate} folds off the paper at {line}")
    return reflected


def fold(points: list[Point], instruction: Fold) -> list[Point]:
    """Return the points after folding along the instruction's line."""
    if instruction.axis == "x":
        return [(_reflect(x, instruction.position), y) for x, y in points]
    return [(x, _reflect(y, instruction.position)) for x, y in points]


def render(points: list[Point]) -> str:
    """Draw the paper, preceded by a newline, with '#' for dots."""
    if not points:
        raise ValueError("need a point after folding")
    width = max(x for x, _ in points) + 1
    height = max(y for _, y in points) + 1
    grid = [["."] * width for _ in range(height)]
    for x, y in points:
        grid[y][x] = "#"
    return "\n" + "\n".join("".join(row) for row in grid)


def parse_input(text: str) -> Manual:
    """Parse the dot list and the fold instructions."""
    dots, sep, folds = text.strip().partition("\n\n")
    if not sep:
        raise ValueError("invalid input")
    points = [_parse_point(line.strip()) for line in dots.splitlines()]
    instructions = [parse_fold(line.strip()) for line in folds.splitlines()]
    return Manual(points, instructions)


def part_one(manual: Manual) -> int:
    """Count visible dots after the first fold."""
    if not manual.instructions:
        raise ValueError("Need at least one instruction")
    return len(set(fold(manual.points, manual.instructions[0])))


def part_two(manual: Manual) -> str:
    """Render the paper after every fold."""
    points = manual.points
    for instruction in manual.instructions:
        points = fold(points, instruction)
    return render(points)