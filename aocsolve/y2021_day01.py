"""Sonar sweep depth increases."""

import re

_U32 = re.compile(r"\+?[0-9]+")


def _parse_u32(text: str) -> int:
    if not _U32.fullmatch(text) or int(text) > 0xFFFFFFFF:
        raise ValueError(f"Failed to parse input: {text!r}")
    return int(text)


def parse_input(text: str) -> list[int]:
    """Parse one depth measurement per line."""
    return [_parse_u32(line) for line in text.splitlines()]


def part_one(depths: list[int]) -> int:
    """Count increases between consecutive measurements, plus one.

    Pairs whose first value is zero are not counted.
    """
    if not depths:
        raise ValueError("no measurements")
    return 1 + sum(
        1 for first, second in zip(depths, depths[1:]) if second > first and first != 0
    )


def part_two(depths: list[int]) -> int:
    """Count increases of the three-measurement sliding sum, plus one."""
    if len(depths) < 3:
        raise ValueError("need at least three measurements")
    count = 1
    old_sum = sum(depths[:3])
    for leaving, entering in zip(depths, depths[3:]):
        new_sum = old_sum + entering - leaving
        if new_sum > old_sum:
            count += 1
        old_sum = new_sum
    return count