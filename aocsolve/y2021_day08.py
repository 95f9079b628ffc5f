"""Seven-segment display decoding."""

from collections import Counter
from dataclasses import dataclass
from enum import Enum, auto


@dataclass(frozen=True)
class Entry:
    """Ten unique signal patterns and the four-digit output."""

    signal: list[str]
    output: list[str]


class _Segment(Enum):
    TOP = auto()
    TOP_LEFT = auto()
    TOP_RIGHT = auto()
    MIDDLE = auto()
    BOTTOM_LEFT = auto()
    BOTTOM_RIGHT = auto()
    BOTTOM = auto()


_S = _Segment
_DIGITS = {
    frozenset({_S.TOP, _S.TOP_LEFT, _S.TOP_RIGHT, _S.BOTTOM_LEFT, _S.BOTTOM_RIGHT, _S.BOTTOM}): 0,
    frozenset({_S.TOP_RIGHT, _S.BOTTOM_RIGHT}): 1,
    frozenset({_S.TOP, _S.TOP_RIGHT, _S.MIDDLE, _S.BOTTOM_LEFT, _S.BOTTOM}): 2,
    frozenset({_S.TOP, _S.TOP_RIGHT, _S.MIDDLE, _S.BOTTOM_RIGHT, _S.BOTTOM}): 3,
    frozenset({_S.TOP_LEFT, _S.TOP_RIGHT, _S.MIDDLE, _S.BOTTOM_RIGHT}): 4,
    frozenset({_S.TOP, _S.TOP_LEFT, _S.MIDDLE, _S.BOTTOM_RIGHT, _S.BOTTOM}): 5,
    frozenset({_S.TOP, _S.TOP_LEFT, _S.MIDDLE, _S.BOTTOM_LEFT, _S.BOTTOM_RIGHT, _S.BOTTOM}): 6,
    frozenset({_S.TOP, _S.TOP_RIGHT, _S.BOTTOM_RIGHT}): 7,
    frozenset(_Segment): 8,
    frozenset({_S.TOP, _S.TOP_LEFT, _S.TOP_RIGHT, _S.MIDDLE, _S.BOTTOM_RIGHT, _S.BOTTOM}): 9,
}

_UNIQUE_LENGTHS = frozenset({2, 3, 4, 7})


def _parse_entry(line: str) -> Entry:
    signal, sep, output = line.partition("|")
    if not sep:
        raise ValueError(f"failed to split line: {line!r}")
    return Entry(signal.split(" "), output.split(" "))


def parse_input(text: str) -> list[Entry]:
    """Parse one entry per line."""
    return [_parse_entry(line) for line in text.strip().splitlines()]


def part_one(entries: list[Entry]) -> int:
    """Count output digits drawn with a unique number of segments."""
    return sum(
        1
        for entry in entries
        for digit in entry.output
        if len(digit) in _UNIQUE_LENGTHS
    )


def _wire_mapping(patterns: list[str]) -> dict[str, _Segment]:
    patterns = [pattern for pattern in patterns if pattern]
    one = next((p for p in patterns if len(p) == 2), None)
    four = next((p for p in patterns if len(p) == 4), None)
    if one is None or four is None:
        raise ValueError("signal patterns lack the digits 1 and 4")
    counts = Counter(wire for pattern in patterns for wire in set(pattern))
    mapping = {}
    for wire, seen in counts.items():
        if seen == 4:
            mapping[wire] = _Segment.BOTTOM_LEFT
        elif seen == 6:
            mapping[wire] = _Segment.TOP_LEFT
        elif seen == 9:
            mapping[wire] = _Segment.BOTTOM_RIGHT
        elif seen == 8:
            mapping[wire] = _Segment.TOP_RIGHT if wire in one else _Segment.TOP
        elif seen == 7:
            mapping[wire] = _Segment.MIDDLE if wire in four else _Segment.BOTTOM
        else:
            raise ValueError(f"cannot place wire {wire!r}")
    return mapping


def _output_value(entry: Entry) -> int:
    mapping = _wire_mapping(entry.signal)
    value = 0
    for word in entry.output:
        if not word:
            continue
        try:
            digit = _DIGITS[frozenset(mapping[wire] for wire in word)]
        except KeyError:
            raise ValueError(f"cannot decode output {word!r}") from None
        value = value * 10 + digit
    return value


def part_two(entries: list[Entry]) -> int:
    """Decode every output value and return their sum."""
    return sum(_output_value(entry) for entry in entries)