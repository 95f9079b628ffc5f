"""Wrapping paper and ribbon for present boxes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Box:
    """A present's dimensions."""

    l: int
    w: int
    h: int


def _parse_dimension(part: str, name: str) -> int:
    if not part.isdecimal():
        raise ValueError(f"invalid {name}: {part!r}")
    return int(part)


def _parse_box(line: str) -> Box:
    dims = line.split("x")
    names = ("length", "width", "height")
    if len(dims) < len(names):
        raise ValueError(f"Missing {names[len(dims)]} in {line!r}")
    l, w, h = (_parse_dimension(part, name) for part, name in zip(dims, names))
    return Box(l, w, h)


def parse_input(text: str) -> list[Box]:
    """Parse one LxWxH box per line."""
    return [_parse_box(line) for line in text.splitlines()]


def _paper(box: Box) -> int:
    lw, wh, hl = box.l * box.w, box.w * box.h, box.h * box.l
    return 2 * lw + 2 * wh + 2 * hl + min(lw, wh, hl)


def _ribbon(box: Box) -> int:
    perimeter = 2 * min(box.l + box.h, box.h + box.w, box.l + box.w)
    return perimeter + box.l * box.w * box.h


def part_one(boxes: list[Box]) -> int:
    """Return the total square feet of wrapping paper."""
    return sum(_paper(box) for box in boxes)


def part_two(boxes: list[Box]) -> int:
    """Return the total feet of ribbon."""
    return sum(_ribbon(box) for box in boxes)