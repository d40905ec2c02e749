"""Base-58 decoding in the variants used for public keys."""

from __future__ import annotations

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_DIGITS = {c: i for i, c in enumerate(ALPHABET)}
_C_SPACE = " \t\n\v\f\r"


class Base58Error(ValueError):
    """Raised when a base-58 string cannot be decoded."""


def _digit(c: str) -> int:
    try:
        return _DIGITS[c]
    except KeyError:
        raise Base58Error("invalid base-58 value") from None


def _minimal_bytes(value: int) -> bytes:
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def base58_to_binary(s: str, size: int) -> bytes:
    """Decode ``s`` into exactly ``size`` big-endian bytes."""
    limit = 1 << (8 * size)
    value = 0
    for c in s:
        value = value * 58 + _digit(c)
        if value >= limit:
            raise Base58Error("base-58 value is out of range")
    return value.to_bytes(size, "big")


def decode_base58(s: str) -> bytes:
    """Decode ``s``, allowing surrounding whitespace; each leading '1' gives a zero byte."""
    body = s.strip(_C_SPACE)
    if any(c in _C_SPACE for c in body):
        raise Base58Error("unexpected characters after base-58 value")
    digits = body.lstrip("1")
    zeroes = len(body) - len(digits)
    value = 0
    for c in digits:
        value = value * 58 + _digit(c)
    return b"\x00" * zeroes + _minimal_bytes(value)


def decode_base58_raw(s: str) -> bytes:
    """Decode ``s`` without whitespace handling; the value part is never empty."""
    value = 0
    for c in s:
        value = value * 58 + _digit(c)
    zeroes = len(s) - len(s.lstrip("1"))
    return b"\x00" * zeroes + (_minimal_bytes(value) or b"\x00")