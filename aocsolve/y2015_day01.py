"""Floor counting from a string of parentheses."""

_STEPS = {"(": 1, ")": -1}


def parse_input(text: str) -> str:
    """Return the directions, rejecting any character that is not a parenthesis."""
    for char in text:
        if char not in _STEPS:
            raise ValueError(f"not a parenthesis: {char!r}")
    return text


def _step(char: str) -> int:
    try:
        return _STEPS[char]
    except KeyError:
        raise ValueError(f"not a parenthesis: {char!r}") from None


def part_one(directions: str) -> int:
    """Return the floor reached after following every direction."""
    return sum(_step(char) for char in directions)


def part_two(directions: str) -> int:
    """Return the 1-based position of the first move into the basement."""
    floor = 0
    for position, char in enumerate(directions, start=1):
        floor += _step(char)
        if floor < 0:
            return position
    raise ValueError("never went to the basement")