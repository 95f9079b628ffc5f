"""Trick-shot probe trajectories."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

_PREFIX = "target area: x="


@dataclass(frozen=True)
class TargetArea:
    x_min: int
    y_min: int
    x_max: int
    y_max: int


class _Status(Enum):
    BEFORE = auto()
    HIT = auto()
    MISS = auto()


def _status(x: int, y: int, dx: int, dy: int, target: TargetArea) -> _Status:
    if target.x_min <= x <= target.x_max and target.y_min <= y <= target.y_max:
        return _Status.HIT
    if x > target.x_max:
        return _Status.MISS
    if y < target.y_min and dy <= 0:
        return _Status.MISS
    if dx == 0 and x < target.x_min:
        return _Status.MISS
    return _Status.BEFORE


def trajectory_height(dx: int, dy: int, target: TargetArea) -> Optional[int]:
    """Return the highest y reached if the probe hits the target, else None."""
    x = y = 0
    highest = y
    while True:
        x += dx
        y += dy
        highest = max(highest, y)
        dx -= (dx > 0) - (dx < 0)
        dy -= 1
        status = _status(x, y, dx, dy, target)
        if status is _Status.HIT:
            return highest
        if status is _Status.MISS:
            return None


def _parse_range(text: str) -> tuple[int, int]:
    low, sep, high = text.partition("..")
    if not sep:
        raise ValueError(f"invalid range: {text!r}")
    return int(low), int(high)


def parse_input(text: str) -> TargetArea:
    """Parse "target area: x=a..b, y=c..d"."""
    text = text.strip()
    while text.startswith(_PREFIX):
        text = text[len(_PREFIX):]
    ranges = text.split(", y=")
    if len(ranges) < 2:
        raise ValueError("failed to parse target area")
    x1, x2 = _parse_range(ranges[0])
    y1, y2 = _parse_range(ranges[1])
    return TargetArea(min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))


def part_one(target: TargetArea) -> int:
    """Return the highest y of any trajectory that hits the target."""
    heights = [
        height
        for dx in range(100)
        for dy in range(1000)
        if (height := trajectory_height(dx, dy, target)) is not None
    ]
    if not heights:
        raise ValueError("failed to find max")
    return max(heights)


def part_two(target: TargetArea) -> int:
    """Count initial velocities that hit the target."""
    return sum(
        1
        for dx in range(target.x_max + 1)
        for dy in range(target.y_min, 400)
        if trajectory_height(dx, dy, target) is not None
    )