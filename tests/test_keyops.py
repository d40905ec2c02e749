import pytest

from fiocommon.base58 import ALPHABET, Base58Error
from fiocommon.keyops import (
    KeyType,
    PublicKey,
    key_to_account,
    shorten_key,
    string_to_public_key,
)
from fiocommon.names import string_to_name


def _encode(data: bytes) -> str:
    value = int.from_bytes(data, "big")
    out = ""
    while value:
        value, rem = divmod(value, 58)
        out = ALPHABET[rem] + out
    zeros = len(data) - len(data.lstrip(b"\x00"))
    return "1" * zeros + out


KEY_DATA = bytes([2]) + bytes(range(40, 72))
WHOLE = KEY_DATA + b"\xaa\xbb\xcc\xdd"
FIO_KEY = "FIO" + _encode(WHOLE)


def test_fio_key_parses_to_k1():
    key = string_to_public_key(FIO_KEY)
    assert key == PublicKey(KeyType.K1, KEY_DATA)


def test_r1_key_parses_to_r1():
    key = string_to_public_key("PUB_R1_" + _encode(WHOLE))
    assert key.type is KeyType.R1
    assert key.data == KEY_DATA
    assert len(key.data) == 33


def test_unrecognized_prefix_raises():
    with pytest.raises(ValueError, match="unrecognized public key format"):
        string_to_public_key("EOS" + _encode(WHOLE))


def test_invalid_character_raises():
    with pytest.raises(Base58Error):
        string_to_public_key("FIO0OIl")


def test_too_large_value_raises():
    with pytest.raises(Base58Error):
        string_to_public_key("FIO" + _encode(b"\xff" * 38))


def test_shorten_key_skips_zero_groups():
    base = bytes([9]) + bytes(range(1, 33))
    with_zeros = bytes([9, 0, 32, 64]) + bytes(range(1, 30))
    assert shorten_key(with_zeros) == shorten_key(base)


def test_shorten_key_ignores_head_byte():
    body = bytes(range(1, 33))
    assert shorten_key(b"\x00" + body) == shorten_key(b"\xff" + body)


def test_shorten_key_single_group_value():
    key = bytes([0, 1] + [0] * 11 + [1, 1] + [0] * 18)
    expected = string_to_name("a") >> 63 << 59
    value = shorten_key(key)
    assert value >> 59 == 1
    assert value & 0x0F == 1
    assert value & ~((1 << 63) - 1) == expected & ~((1 << 63) - 1)


def test_shorten_key_too_few_groups_raises():
    with pytest.raises(ValueError):
        shorten_key(bytes([2]) + bytes(32))


def test_key_to_account_shape():
    account = key_to_account(FIO_KEY)
    assert len(account) <= 12
    assert set(account) <= set(".12345abcdefghijklmnopqrstuvwxyz")


def test_key_to_account_ignores_prefix_text():
    body = FIO_KEY[3:]
    assert key_to_account("FIO" + body) == key_to_account("EOS" + body)


def test_key_to_account_distinguishes_keys():
    other = bytes([3]) + bytes(range(100, 132)) + b"\x01\x02\x03\x04"
    assert key_to_account("FIO" + _encode(other)) != key_to_account(FIO_KEY)