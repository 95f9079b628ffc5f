"""Polymer pair insertion."""

from collections import Counter
from dataclasses import dataclass

Pair = tuple[str, str]


@dataclass
class PolymerManual:
    template: str
    rules: dict[Pair, str]


def run_polymerization(template: str, rules: dict[Pair, str], steps: int) -> int:
    """Return most common minus least common element count after the steps."""
    pairs: Counter[Pair] = Counter(zip(template, template[1:]))
    for _ in range(steps):
        grown: Counter[Pair] = Counter()
        for (a, c), count in pairs.items():
            b = rules[(a, c)]
            grown[(a, b)] += count
            grown[(b, c)] += count
        pairs = grown
    chars: Counter[str] = Counter()
    for (a, b), count in pairs.items():
        chars[a] += count
        chars[b] += count
    if not chars:
        raise ValueError("need at least one char_count")
    halves = [count // 2 for count in chars.values()]
    return max(halves) - min(halves) + 1


def _parse_rule(line: str) -> tuple[Pair, str]:
    pair, sep, inserted = line.partition(" -> ")
    if not sep:
        raise ValueError(f"invalid line: {line!r}")
    if len(pair) < 2 or not inserted:
        raise ValueError(f"invalid rule: {line!r}")
    return (pair[0], pair[1]), inserted[0]


def parse_input(text: str) -> PolymerManual:
    """Parse the template and the insertion rules."""
    template, sep, rules = text.strip().partition("\n\n")
    if not sep:
        raise ValueError("invalid input")
    return PolymerManual(
        template.strip(),
        dict(_parse_rule(line) for line in rules.strip().split("\n")),
    )


def part_one(manual: PolymerManual) -> int:
    """Run ten steps."""
    return run_polymerization(manual.template, manual.rules, 10)


def part_two(manual: PolymerManual) -> int:
    """Run forty steps."""
    return run_polymerization(manual.template, manual.rules, 40)