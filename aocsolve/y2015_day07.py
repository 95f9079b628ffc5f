"""Bitwise logic gate circuit with 16-bit signals."""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional, Union

MASK = 0xFFFF

Operand = Union[str, int]

_WIRE = re.compile(r"[^\W\d_]+")
_DIGITS = re.compile(r"[0-9]+")


class OpKind(Enum):
    LITERAL = auto()
    NOT = auto()
    AND = auto()
    OR = auto()
    LSHIFT = auto()
    RSHIFT = auto()


@dataclass(frozen=True)
class Operation:
    """A gate; for shifts, right holds the shift amount."""

    kind: OpKind
    left: Operand
    right: Optional[Operand] = None


@dataclass(frozen=True)
class Instruction:
    operation: Operation
    wire: str


def parse_operand(text: str) -> tuple[Operand, str]:
    """Parse a wire name or a 16-bit signal; return it with the remaining text."""
    match = _WIRE.match(text)
    if match:
        return match[0], text[match.end():]
    match = _DIGITS.match(text)
    if match:
        value = int(match[0])
        if value > MASK:
            raise ValueError(f"signal out of range: {match[0]}")
        return value, text[match.end():]
    raise ValueError(f"expected operand: {text!r}")


def _parse_shift(text: str) -> tuple[int, str]:
    match = _DIGITS.match(text)
    if not match or int(match[0]) > 0xFF:
        raise ValueError(f"expected shift amount: {text!r}")
    return int(match[0]), text[match.end():]


_BINARY = (
    (" AND ", OpKind.AND, parse_operand),
    (" OR ", OpKind.OR, parse_operand),
    (" LSHIFT ", OpKind.LSHIFT, _parse_shift),
    (" RSHIFT ", OpKind.RSHIFT, _parse_shift),
)


def parse_operation(text: str) -> tuple[Operation, str]:
    """Parse a gate expression; return it with the remaining text."""
    if text.startswith("NOT "):
        try:
            operand, rest = parse_operand(text[4:])
            return Operation(OpKind.NOT, operand), rest
        except ValueError:
            pass
    left, rest = parse_operand(text)
    for tag, kind, parse_right in _BINARY:
        if rest.startswith(tag):
            try:
                right, remainder = parse_right(rest[len(tag):])
            except ValueError:
                continue
            return Operation(kind, left, right), remainder
    return Operation(OpKind.LITERAL, left), rest


def parse_instruction(text: str) -> Instruction:
    """Parse a whole "<gate> -> <wire>" line."""
    operation, rest = parse_operation(text)
    if not rest.startswith(" -> "):
        raise ValueError(f"expected ' -> ' in {text!r}")
    match = _WIRE.fullmatch(rest[4:])
    if not match:
        raise ValueError(f"invalid target wire in {text!r}")
    return Instruction(operation, match[0])


def parse_input(text: str) -> list[Instruction]:
    """Parse one instruction per line."""
    return [parse_instruction(line) for line in text.splitlines()]


class Circuit:
    """Wires and the gates that drive them, with memoised signals."""

    def __init__(self, instructions: Iterable[Instruction]) -> None:
        self._gates = {ins.wire: ins.operation for ins in instructions}
        self._cache: dict[str, int] = {}

    def signal(self, wire: str) -> int:
        """Return the signal on a wire."""
        if wire in self._cache:
            return self._cache[wire]
        try:
            operation = self._gates[wire]
        except KeyError:
            raise KeyError(f"Missing {wire}") from None
        value = self._evaluate(operation)
        self._cache[wire] = value
        return value

    def override(self, wire: str, value: int) -> None:
        """Drive a wire with a fixed signal and forget all computed signals."""
        self._gates[wire] = Operation(OpKind.LITERAL, value)
        self._cache.clear()

    def _value(self, operand: Operand) -> int:
        return self.signal(operand) if isinstance(operand, str) else operand

    def _evaluate(self, operation: Operation) -> int:
        left = self._value(operation.left)
        match operation.kind:
            case OpKind.LITERAL:
                return left
            case OpKind.NOT:
                return ~left & MASK
            case OpKind.AND:
                return left & self._value(operation.right)
            case OpKind.OR:
                return left | self._value(operation.right)
            case OpKind.LSHIFT:
                return (left << operation.right) & MASK
            case OpKind.RSHIFT:
                return left >> operation.right
        raise ValueError(f"unknown operation {operation.kind}")


def part_one(instructions: list[Instruction]) -> int:
    """Return the signal on wire a."""
    return Circuit(instructions).signal("a")


def part_two(instructions: list[Instruction]) -> int:
    """Feed a's signal into b and return the new signal on a."""
    circuit = Circuit(instructions)
    circuit.override("b", circuit.signal("a"))
    return circuit.signal("a")