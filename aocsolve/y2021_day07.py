"""Aligning crab submarines with minimal fuel."""


def parse_input(text: str) -> list[int]:
    """Parse comma-separated horizontal positions."""
    positions = []
    for token in text.strip().split(","):
        if not token.isascii() or not token.isdecimal():
            raise ValueError(f"Failed to parse number: {token!r}")
        positions.append(int(token))
    return positions


def part_one(positions: list[int]) -> int:
    """Return the fuel to align on the median at constant cost per step."""
    if not positions:
        raise ValueError("no positions")
    ordered = sorted(positions)
    median = ordered[len(ordered) // 2]
    return sum(abs(position - median) for position in positions)


def _triangular_cost(positions: list[int], target: int) -> int:
    return sum(n * (n + 1) // 2 for n in (abs(p - target) for p in positions))


def part_two(positions: list[int]) -> int:
    """Return the least fuel when each further step costs one more."""
    if not positions:
        raise ValueError("no positions")
    candidates = range(min(positions), max(positions))
    if not candidates:
        raise ValueError("Failed to find min")
    return min(_triangular_cost(positions, target) for target in candidates)