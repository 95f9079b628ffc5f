"""Light grid instructions."""

import re
from dataclasses import dataclass
from enum import Enum

GRID_SIZE = 1000

Point = tuple[int, int]


class InstructionType(Enum):
    ON = "On"
    OFF = "Off"
    TOGGLE = "Toggle"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Instruction:
    """An action over the rectangle from start to end, inclusive."""

    kind: InstructionType
    start: Point
    end: Point

    def __str__(self) -> str:
        return (
            f"{self.kind} {self.start[0]},{self.start[1]} "
            f"through {self.end[0]},{self.end[1]}"
        )


_PREFIXES = (
    ("turn on", InstructionType.ON),
    ("turn off", InstructionType.OFF),
    ("toggle", InstructionType.TOGGLE),
)
_BODY = re.compile(r"[ \t]*(\S+)[ \t]*through[ \t]*(\S+)")
_FLIP = bytes.maketrans(b"\x00\x01", b"\x01\x00")


def _parse_point(token: str) -> Point:
    parts = token.split(",")
    if len(parts) != 2 or not all(part.isdecimal() for part in parts):
        raise ValueError(f"invalid point: {token!r}")
    return int(parts[0]), int(parts[1])


def parse_instruction(line: str) -> Instruction:
    """Parse a single instruction line."""
    for prefix, kind in _PREFIXES:
        if line.startswith(prefix):
            match = _BODY.fullmatch(line[len(prefix):].rstrip())
            if match is None:
                break
            return Instruction(kind, _parse_point(match[1]), _parse_point(match[2]))
    raise ValueError(f"invalid instruction: {line!r}")


def parse_input(text: str) -> list[Instruction]:
    """Parse one instruction per line."""
    instructions = [parse_instruction(line) for line in text.splitlines() if line.strip()]
    if not instructions:
        raise ValueError("no instructions")
    return instructions


def _bounds(instruction: Instruction) -> tuple[slice, slice]:
    for x, y in (instruction.start, instruction.end):
        if x >= GRID_SIZE or y >= GRID_SIZE:
            raise IndexError(f"point outside the grid: {instruction}")
    (x0, y0), (x1, y1) = instruction.start, instruction.end
    return slice(x0, x1 + 1), slice(y0, y1 + 1)


def part_one(instructions: list[Instruction]) -> int:
    """Return the number of lights left on."""
    grid = [bytearray(GRID_SIZE) for _ in range(GRID_SIZE)]
    for instruction in instructions:
        rows, cols = _bounds(instruction)
        width = max(0, cols.stop - cols.start)
        for row in grid[rows]:
            if instruction.kind is InstructionType.ON:
                row[cols] = b"\x01" * width
            elif instruction.kind is InstructionType.OFF:
                row[cols] = b"\x00" * width
            else:
                row[cols] = row[cols].translate(_FLIP)
    return sum(row.count(1) for row in grid)


_BRIGHTNESS = {
    InstructionType.ON: lambda value: value + 1,
    InstructionType.OFF: lambda value: value - 1 if value else 0,
    InstructionType.TOGGLE: lambda value: value + 2,
}


def part_two(instructions: list[Instruction]) -> int:
    """Return the total brightness of the grid."""
    grid = [[0] * GRID_SIZE for _ in range(GRID_SIZE)]
    for instruction in instructions:
        rows, cols = _bounds(instruction)
        adjust = _BRIGHTNESS[instruction.kind]
        for row in grid[rows]:
            row[cols] = [adjust(value) for value in row[cols]]
    return sum(map(sum, grid))