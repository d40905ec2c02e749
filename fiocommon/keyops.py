"""Public key parsing and derivation of account names from keys."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from fiocommon.base58 import base58_to_binary, decode_base58_raw
from fiocommon.names import name_to_string

KEY_DATA_SIZE = 33
_CHECKSUM_SIZE = 4
ACCOUNT_NAME_LENGTH = 12


class KeyType(enum.IntEnum):
    """Curve of a public key."""

    K1 = 0
    R1 = 1


@dataclass(frozen=True)
class PublicKey:
    """A public key: its curve and 33 bytes of compressed key data."""

    type: KeyType
    data: bytes


def string_to_public_key(s: str) -> PublicKey:
    """Parse a ``FIO...`` or ``PUB_R1_...`` key string; the checksum is not verified."""
    if s.startswith("FIO"):
        key_type, body = KeyType.K1, s[3:]
    elif s.startswith("PUB_R1_"):
        key_type, body = KeyType.R1, s[7:]
    else:
        raise ValueError("unrecognized public key format")
    whole = base58_to_binary(body, KEY_DATA_SIZE + _CHECKSUM_SIZE)
    return PublicKey(key_type, whole[:KEY_DATA_SIZE])


def shorten_key(key: bytes) -> int:
    """Fold the non-zero 5-bit groups of key bytes into a 64-bit name value.

    The first byte is skipped; zero groups are passed over. Raises ValueError
    when the key runs out before thirteen groups are found.
    """
    result = 0
    length = 0
    i = 1
    while length <= 12:
        if i >= KEY_DATA_SIZE or i >= len(key):
            raise ValueError("key has too few non-zero bytes to derive an account")
        trimmed = key[i] & (0x0F if length == 12 else 0x1F)
        i += 1
        if trimmed == 0:
            continue
        shift = 0 if length == 12 else 5 * (12 - length) - 1
        result |= trimmed << shift
        length += 1
    return result


def key_to_account(pubkey: str) -> str:
    """Derive the 12-character account name belonging to a public key string."""
    key_bytes = decode_base58_raw(pubkey[3:])
    return name_to_string(shorten_key(key_bytes))[:ACCOUNT_NAME_LENGTH]