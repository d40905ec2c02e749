import pytest

from fiocommon.base58 import (
    ALPHABET,
    Base58Error,
    base58_to_binary,
    decode_base58,
    decode_base58_raw,
)


def test_alphabet_digit_values():
    for index, char in enumerate(ALPHABET):
        assert base58_to_binary(char, 1) == bytes([index])


def test_two_digit_value():
    assert base58_to_binary("21", 2) == bytes([0, 58])


def test_empty_string_gives_zero_bytes():
    assert base58_to_binary("", 4) == b"\x00" * 4


def test_fixed_size_pads_on_the_left():
    short = base58_to_binary("3yQ", 3)
    long = base58_to_binary("3yQ", 8)
    assert long == b"\x00" * 5 + short
    assert len(long) == 8


def test_out_of_range():
    with pytest.raises(Base58Error, match="out of range"):
        base58_to_binary("zzz", 1)


def test_zero_size_accepts_only_zero():
    assert base58_to_binary("111", 0) == b""
    with pytest.raises(Base58Error):
        base58_to_binary("2", 0)


@pytest.mark.parametrize("bad", ["0", "O", "I", "l", "+"])
def test_invalid_character(bad):
    with pytest.raises(Base58Error, match="invalid"):
        base58_to_binary("2" + bad, 4)
    with pytest.raises(Base58Error):
        decode_base58("2" + bad)
    with pytest.raises(Base58Error):
        decode_base58_raw("2" + bad)


def test_decode_leading_ones_become_zero_bytes():
    assert decode_base58("1112") == b"\x00\x00\x00\x01"


def test_decode_skips_surrounding_whitespace():
    assert decode_base58(" \t3yQ\n ") == decode_base58("3yQ")


def test_decode_rejects_inner_whitespace():
    with pytest.raises(Base58Error):
        decode_base58("2 2")


def test_decode_empty():
    assert decode_base58("") == b""


@pytest.mark.parametrize("text", ["2", "3yQ", "5HueCGU8rMjxEXxiPuD5BDku4MkFqeZyd4dZ1jvhTVqvbTLvyTJ", "11z"])
def test_decode_matches_fixed_size(text):
    decoded = decode_base58(text)
    assert base58_to_binary(text, len(decoded)) == decoded


@pytest.mark.parametrize("text", ["2", "3yQ", "112z", "zzzz"])
def test_raw_matches_decode_for_nonzero_values(text):
    assert decode_base58_raw(text) == decode_base58(text)


def test_raw_zero_value_keeps_one_byte():
    assert decode_base58_raw("") == b"\x00"
    assert decode_base58_raw("1") == b"\x00\x00"