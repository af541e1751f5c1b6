"""Parsers for the string encodings used in state test JSON files."""

from __future__ import annotations

import re
from collections.abc import Iterable

U64_MAX = (1 << 64) - 1
U256_MAX = (1 << 256) - 1
ADDRESS_LENGTH = 20

_HEX = re.compile(r"[0-9a-fA-F]+")
_DIGITS = {
    16: re.compile(r"[0-9a-fA-F]+"),
    10: re.compile(r"[0-9]+"),
    8: re.compile(r"[0-7]+"),
    2: re.compile(r"[01]+"),
}


def _parse_int(digits: str, base: int, text: str) -> int:
    if not _DIGITS[base].fullmatch(digits):
        raise ValueError(f"invalid number: {text!r}")
    return int(digits, base)


def _strip_0x(text: str) -> str:
    return text[2:] if text.startswith("0x") else text


def parse_u64(text: str) -> int:
    """Parse a decimal or ``0x``-prefixed hexadecimal 64-bit integer."""
    if text.startswith("0x"):
        value = _parse_int(text[2:], 16, text)
    else:
        value = _parse_int(text, 10, text)
    if value > U64_MAX:
        raise ValueError(f"number does not fit in 64 bits: {text!r}")
    return value


def parse_u256(text: str) -> int:
    """Parse a 256-bit integer: decimal, or with a 0x, 0o or 0b prefix."""
    bases = {"0x": 16, "0o": 8, "0b": 2}
    base = bases.get(text[:2])
    if base is None:
        value = _parse_int(text, 10, text)
    else:
        value = _parse_int(text[2:], base, text)
    if value > U256_MAX:
        raise ValueError(f"number does not fit in 256 bits: {text!r}")
    return value


def parse_bytes(text: str) -> bytes:
    """Decode a hex string, with or without a ``0x`` prefix."""
    digits = _strip_0x(text)
    if digits and not _HEX.fullmatch(digits):
        raise ValueError(f"invalid hex: {text!r}")
    if len(digits) % 2:
        raise ValueError(f"odd number of hex digits: {text!r}")
    return bytes.fromhex(digits)


def parse_bytes_list(values: Iterable[str]) -> list[bytes]:
    """Decode every hex string in ``values``."""
    return [parse_bytes(value) for value in values]


def parse_optional_address(text: str) -> bytes | None:
    """Decode a 20-byte address; the empty string means no address."""
    if not text:
        return None
    digits = _strip_0x(text)
    if len(digits) != 2 * ADDRESS_LENGTH or not _HEX.fullmatch(digits):
        raise ValueError(f"invalid address: {text!r}")
    return bytes.fromhex(digits)


def parse_optional_bytes(value: str | None) -> bytes | None:
    """Decode a hex string, passing None through."""
    return None if value is None else parse_bytes(value)