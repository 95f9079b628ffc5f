"""Counting houses visited on an infinite grid."""

_STEPS = {"^": (0, 1), "v": (0, -1), ">": (1, 0), "<": (-1, 0)}


def parse_input(text: str) -> str:
    """Return the moves, rejecting any character that is not an arrow."""
    for char in text:
        if char not in _STEPS:
            raise ValueError(f"Invalid character: {char!r}")
    return text


def _step(position: tuple[int, int], char: str) -> tuple[int, int]:
    try:
        dx, dy = _STEPS[char]
    except KeyError:
        raise ValueError(f"Invalid character: {char!r}") from None
    return position[0] + dx, position[1] + dy


def part_one(moves: str) -> int:
    """Return how many houses Santa visits at least once."""
    position = (0, 0)
    visited = {position}
    for char in moves:
        position = _step(position, char)
        visited.add(position)
    return len(visited)


def part_two(moves: str) -> int:
    """Return how many houses Santa and the robot visit, taking turns."""
    santa = robot = (0, 0)
    visited = {santa}
    for index, char in enumerate(moves):
        if index % 2 == 0:
            santa = _step(santa, char)
        else:
            robot = _step(robot, char)
        visited.add(santa)
        visited.add(robot)
    return len(visited)