"""Mining MD5 hashes with leading zeros."""

import hashlib
from itertools import count


def parse_input(text: str) -> bytes:
    """Return the secret key encoded as UTF-8 bytes."""
    return text.encode("utf-8")


def _as_bytes(key: str | bytes) -> bytes:
    return key.encode("utf-8") if isinstance(key, str) else key


def _digests(key: str | bytes):
    prefix = _as_bytes(key)
    for number in count():
        yield number, hashlib.md5(prefix + str(number).encode("ascii")).digest()


def part_one(key: str | bytes) -> int:
    """Return the lowest number whose hash starts with five zero hex digits."""
    for number, digest in _digests(key):
        if digest[0] == 0 and digest[1] == 0 and digest[2] < 16:
            return number
    raise AssertionError("unreachable")


def part_two(key: str | bytes) -> int:
    """Return the lowest number whose hash starts with six zero hex digits."""
    for number, digest in _digests(key):
        if digest[:3] == b"\x00\x00\x00":
            return number
    raise AssertionError("unreachable")