"""Naughty or nice string classification."""

_VOWELS = frozenset("aeiou")
_FORBIDDEN = ("ab", "cd", "pq", "xy")


def _has_three_vowels(string: str) -> bool:
    return sum(char in _VOWELS for char in string) >= 3


def _has_double_letter(string: str) -> bool:
    return any(a == b for a, b in zip(string, string[1:]))


def _has_forbidden_pair(string: str) -> bool:
    return any(pair in string for pair in _FORBIDDEN)


def _has_repeated_pair(string: str) -> bool:
    first_seen: dict[str, int] = {}
    for index, pair in enumerate(a + b for a, b in zip(string, string[1:])):
        if pair in first_seen:
            if index - first_seen[pair] > 1:
                return True
        else:
            first_seen[pair] = index
    return False


def _has_gapped_repeat(string: str) -> bool:
    return any(a == c for a, c in zip(string, string[2:]))


def is_nice(string: str) -> bool:
    """Apply the first set of rules."""
    return (
        _has_three_vowels(string)
        and _has_double_letter(string)
        and not _has_forbidden_pair(string)
    )


def is_nicer(string: str) -> bool:
    """Apply the second set of rules."""
    return _has_repeated_pair(string) and _has_gapped_repeat(string)


def parse_input(text: str) -> list[str]:
    """Split the input into one string per line."""
    return text.splitlines()


def part_one(strings: list[str]) -> int:
    """Count strings that are nice under the first rules."""
    return sum(1 for string in strings if is_nice(string))


def part_two(strings: list[str]) -> int:
    """Count strings that are nice under the second rules."""
    return sum(1 for string in strings if is_nicer(string))