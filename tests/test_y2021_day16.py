import pytest

from aocsolve.y2021_day16 import (
    BitReader,
    LiteralPacket,
    OperatorPacket,
    PacketType,
    hex_to_bytes,
    parse_input,
    parse_packet,
    part_one,
    part_two,
)


def _binary(data: bytes) -> str:
    return "".join(f"{byte:08b}" for byte in data)


def test_hex_parsing():
    assert list(hex_to_bytes("2F14DF")) == [47, 20, 223]


@pytest.mark.parametrize(
    "text, value",
    [("2f", 47), ("14", 20), ("DF", 223), ("28", 40), ("05", 5), ("0a", 10), ("FF", 255)],
)
def test_hex_pair(text, value):
    assert list(hex_to_bytes(text)) == [value]


def test_hex_stops_at_unpaired_digit():
    assert list(hex_to_bytes("2F1")) == [47]


def test_hex_rejects_non_hex():
    with pytest.raises(ValueError):
        hex_to_bytes("zz")


@pytest.mark.parametrize(
    "text, bits",
    [
        ("05", "00000101"),
        ("D2FE28", "110100101111111000101000"),
        ("38006F45291200", "00111000000000000110111101000101001010010001001000000000"),
        ("EE00D40C823060", "11101110000000001101010000001100100000100011000001100000"),
    ],
)
def test_hex_binary(text, bits):
    assert _binary(hex_to_bytes(text)) == bits


def test_bit_reader_reads_in_order():
    reader = BitReader(bytes([0b10110000]))
    assert reader.read(3) == 0b101
    assert reader.remaining == 5
    assert list(reader) == [True, False, False, False, False]


def test_bit_reader_past_end():
    reader = BitReader(bytes([0xFF]))
    assert reader.read(8) == 255
    with pytest.raises(EOFError):
        reader.read_bit()


def test_literal_packet():
    packet = parse_packet(BitReader(hex_to_bytes("D2FE28")))
    assert packet == LiteralPacket(6, 2021)


def test_operator_packet():
    packet = parse_packet(BitReader(hex_to_bytes("38006F45291200")))
    expected = OperatorPacket(
        1, PacketType.LESS_THAN, [LiteralPacket(6, 10), LiteralPacket(2, 20)]
    )
    assert packet == expected


def test_version_numbers_order():
    packet = parse_input("38006F45291200")
    assert packet.version_numbers() == [6, 2, 1]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("620080001611562C8802118E34", 12),
        ("8A004A801A8002F478", 16),
        ("C0015000016115A2E0802F182340", 23),
        ("A0016C880162017C3686B18A3D4780", 31),
    ],
)
def test_part_one(text, expected):
    assert part_one(parse_input(text)) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("C200B40A82", 3),
        ("04005AC33890", 54),
        ("880086C3E88112", 7),
        ("CE00C43D881120", 9),
        ("D8005AC2A8F0", 1),
        ("F600BC2D8F", 0),
        ("9C005AC2F8F0", 0),
        ("9C0141080250320F1802104A08", 1),
    ],
)
def test_part_two(text, expected):
    assert part_two(parse_input(text)) == expected


def test_truncated_packet_raises():
    with pytest.raises(EOFError):
        parse_input("38")


def test_minimum_of_nothing_raises():
    with pytest.raises(ValueError):
        OperatorPacket(0, PacketType.MINIMUM, []).evaluate()