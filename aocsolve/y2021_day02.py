"""Submarine piloting commands."""

import re
import sys
from dataclasses import dataclass

_U32 = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Command:
    direction: str
    distance: int


def _parse_command(line: str) -> Command:
    words = line.split()
    if not words:
        raise ValueError("Missing first word on line")
    if len(words) < 2:
        raise ValueError("Missing second word on line")
    direction, distance = words[0], words[1]
    if not _U32.fullmatch(distance) or int(distance) > 0xFFFFFFFF:
        raise ValueError(f"Failed to parse input: {distance!r}")
    return Command(direction, int(distance))


def parse_input(text: str) -> list[Command]:
    """Parse one command per line."""
    return [_parse_command(line) for line in text.splitlines()]


def part_one(commands: list[Command]) -> int:
    """Return horizontal position times depth."""
    position = depth = 0
    for command in commands:
        if command.direction == "forward":
            position += command.distance
        elif command.direction == "down":
            depth += command.distance
        elif command.direction == "up":
            depth -= command.distance
    print(
        f"Position: {position}, Depth: {depth}, Value: {position * depth}",
        file=sys.stderr,
    )
    return position * depth


def part_two(commands: list[Command]) -> int:
    """Return horizontal position times depth, steering by aim."""
    position = depth = aim = 0
    for command in commands:
        if command.direction == "forward":
            position += command.distance
            depth += aim * command.distance
        elif command.direction == "down":
            aim += command.distance
        elif command.direction == "up":
            aim -= command.distance
    print(
        f"Position: {position}, Depth: {depth}, Aim: {aim}, Value: {position * depth}",
        file=sys.stderr,
    )
    return position * depth