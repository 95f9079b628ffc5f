"""Binary diagnostic report."""


def most_common_bits(lines: list[str]) -> str:
    """Return the most common bit of each column; ties go to '1'."""
    if not lines:
        raise ValueError("no lines")
    total = len(lines)
    result = []
    for column in zip(*lines):
        ones = column.count("1")
        result.append("1" if ones >= total - ones else "0")
    return "".join(result)


def parse_input(text: str) -> list[str]:
    """Split the report into lines."""
    return text.splitlines()


def part_one(lines: list[str]) -> int:
    """Return gamma rate times epsilon rate."""
    gamma = epsilon = 0
    for bit in most_common_bits(lines):
        gamma *= 2
        epsilon *= 2
        if bit == "1":
            gamma += 1
        else:
            epsilon += 1
    return gamma * epsilon


def _rating(lines: list[str], keep_common: bool) -> int:
    remaining = list(lines)
    column = 0
    while len(remaining) > 1:
        common = most_common_bits(remaining)[column]
        remaining = [
            line for line in remaining if (line[column] == common) == keep_common
        ]
        column += 1
    if not remaining:
        raise ValueError("no line left")
    return int(remaining[0], 2)


def part_two(lines: list[str]) -> int:
    """Return oxygen generator rating times CO2 scrubber rating."""
    return _rating(lines, True) * _rating(lines, False)