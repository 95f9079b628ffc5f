"""Lanternfish population growth."""

AGES = 9


def parse_input(text: str) -> list[int]:
    """Return how many fish there are at each timer value 0..8."""
    counts = [0] * AGES
    for token in text.strip().split(","):
        if not token.isascii() or not token.isdecimal():
            raise ValueError(f"Failed to parse number: {token!r}")
        age = int(token)
        if age >= AGES:
            raise ValueError(f"timer out of range: {age}")
        counts[age] += 1
    return counts


def simulate(counts: list[int], days: int) -> int:
    """Return the population after the given number of days."""
    counts = list(counts)
    for _ in range(days):
        breeders = counts[0]
        counts = counts[1:] + [breeders]
        counts[6] += breeders
    return sum(counts)


def part_one(counts: list[int]) -> int:
    """Return the population after 80 days."""
    return simulate(counts, 80)


def part_two(counts: list[int]) -> int:
    """Return the population after 256 days."""
    return simulate(counts, 256)