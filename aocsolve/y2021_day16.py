"""Decoding the BITS packet transmission."""

import math
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union

_HEX_PAIRS = re.compile(r"(?:[0-9A-Fa-f]{2})+")


def hex_to_bytes(text: str) -> bytes:
    """Decode the leading run of hex digit pairs; anything after it is ignored."""
    match = _HEX_PAIRS.match(text)
    if match is None:
        raise ValueError(f"no hex digits in {text!r}")
    return bytes.fromhex(match[0])


class BitReader:
    """Reads bits most-significant first from a byte string."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._position = 0

    @property
    def remaining(self) -> int:
        """Number of bits not yet read."""
        return len(self._data) * 8 - self._position

    def read_bit(self) -> bool:
        """Read one bit."""
        if self.remaining <= 0:
            raise EOFError("no bits left")
        byte = self._data[self._position // 8]
        bit = (byte >> (7 - self._position % 8)) & 1
        self._position += 1
        return bool(bit)

    def read(self, bits: int) -> int:
        """Read an unsigned integer of the given width."""
        value = 0
        for _ in range(bits):
            value = (value << 1) | self.read_bit()
        return value

    def __iter__(self) -> Iterator[bool]:
        while self.remaining > 0:
            yield self.read_bit()


class PacketType(IntEnum):
    SUM = 0
    PRODUCT = 1
    MINIMUM = 2
    MAXIMUM = 3
    LITERAL = 4
    GREATER_THAN = 5
    LESS_THAN = 6
    EQUAL_TO = 7


@dataclass(frozen=True)
class LiteralPacket:
    version: int
    value: int

    def version_numbers(self) -> list[int]:
        """Return the versions of this packet."""
        return [self.version]

    def evaluate(self) -> int:
        """Return the literal value."""
        return self.value


@dataclass(frozen=True)
class OperatorPacket:
    version: int
    type: PacketType
    sub_packets: list["Packet"] = field(default_factory=list)

    def version_numbers(self) -> list[int]:
        """Return the versions of all sub-packets, then this packet's own."""
        versions = [v for packet in self.sub_packets for v in packet.version_numbers()]
        versions.append(self.version)
        return versions

    def evaluate(self) -> int:
        """Apply the operator to the values of the sub-packets."""
        values = [packet.evaluate() for packet in self.sub_packets]
        kind = self.type
        if kind is PacketType.SUM:
            return sum(values)
        if kind is PacketType.PRODUCT:
            return math.prod(values)
        if kind is PacketType.MINIMUM:
            if not values:
                raise ValueError("min of no sub-packets")
            return min(values)
        if kind is PacketType.MAXIMUM:
            if not values:
                raise ValueError("max of no sub-packets")
            return max(values)
        if kind in (PacketType.GREATER_THAN, PacketType.LESS_THAN, PacketType.EQUAL_TO):
            if len(values) < 2:
                raise ValueError("comparison needs two sub-packets")
            first, second = values[0], values[1]
            if kind is PacketType.GREATER_THAN:
                return int(first > second)
            if kind is PacketType.LESS_THAN:
                return int(first < second)
            return int(first == second)
        raise ValueError("operator packet cannot have the literal type")


Packet = Union[LiteralPacket, OperatorPacket]


def parse_packet(reader: BitReader) -> Packet:
    """Read one packet, with all its sub-packets, from the reader."""
    version = reader.read(3)
    kind = PacketType(reader.read(3))
    if kind is PacketType.LITERAL:
        value = 0
        more = True
        while more:
            more = reader.read_bit()
            value = (value << 4) | reader.read(4)
        return LiteralPacket(version, value)
    sub_packets: list[Packet] = []
    if not reader.read_bit():
        length = reader.read(15)
        start = reader.remaining
        while start - reader.remaining < length:
            sub_packets.append(parse_packet(reader))
    else:
        count = reader.read(11)
        sub_packets.extend(parse_packet(reader) for _ in range(count))
    return OperatorPacket(version, kind, sub_packets)


def parse_input(text: str) -> Packet:
    """Decode the outermost packet of a hex transmission."""
    return parse_packet(BitReader(hex_to_bytes(text)))


def part_one(packet: Packet) -> int:
    """Return the sum of all version numbers."""
    return sum(packet.version_numbers())


def part_two(packet: Packet) -> int:
    """Return the value of the outermost packet."""
    return packet.evaluate()