"""Format checks for addresses, domains, chain codes and related inputs."""

from __future__ import annotations

from dataclasses import dataclass

MAX_FIO_LEN = 64
MAX_FIO_DOMAIN_LEN = 62
LOCATIONS = frozenset({10, 20, 30, 40, 50, 60, 70, 80})

_NAME_CHARS = frozenset("abcdefghijklmnopqrstuvwxyz0123456789-")
_CHAIN_CHARS = frozenset(
    "$ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
)
_RFC3986_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyz0123456789-._~:/?#[]@!$&'()*+,;="
)
_HEX_CHARS = frozenset("1234567890abcdef")
_DIGITS = frozenset("0123456789")

_ASCII_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ASCII_LOWER = "abcdefghijklmnopqrstuvwxyz"
_TO_LOWER = str.maketrans(_ASCII_UPPER, _ASCII_LOWER)
_TO_UPPER = str.maketrans(_ASCII_LOWER, _ASCII_UPPER)


def _byte_len(s: str) -> int:
    return len(s.encode("utf-8"))


def _lower(s: str) -> str:
    return s.translate(_TO_LOWER)


@dataclass(frozen=True)
class FioAddress:
    """An address split into its name and domain parts, lower-cased."""

    fioaddress: str
    fioname: str
    fiodomain: str
    domain_only: bool


def parse_fio_address(p: str) -> FioAddress:
    """Split ``name@domain``; text without '@' or starting with '@' is a bare domain."""
    pos = p.find("@")
    domain_only = pos <= 0
    address = _lower(p)
    if domain_only:
        return FioAddress(address, "", address, True)
    return FioAddress(address, address[:pos], address[pos + 1:], False)


def validate_char_name(name: str) -> bool:
    """Allow lower-case letters, digits and inner hyphens only."""
    if not name:
        return False
    if any(c not in _NAME_CHARS for c in name):
        return False
    return not (name.startswith("-") or name.endswith("-"))


def validate_fio_name_format(fa: FioAddress) -> bool:
    """Check the length and characters of a parsed address or domain."""
    if fa.domain_only:
        if not 1 <= _byte_len(fa.fiodomain) <= MAX_FIO_DOMAIN_LEN:
            return False
        return validate_char_name(fa.fiodomain)
    if not 3 <= _byte_len(fa.fioaddress) <= MAX_FIO_LEN:
        return False
    return validate_char_name(fa.fioname) and validate_char_name(fa.fiodomain)


def validate_chain_name_format(chain: str) -> bool:
    """Allow 1 to 10 ASCII letters, digits or '$'."""
    if not 1 <= _byte_len(chain) <= 10:
        return False
    return all(c in _CHAIN_CHARS for c in chain)


def validate_token_name_format(token: str) -> bool:
    """Allow the wildcard '*' or any valid chain code."""
    return token == "*" or validate_chain_name_format(token)


def validate_tpid_format(tpid: str) -> bool:
    """An empty TPID is allowed; otherwise it must be a well-formed address."""
    if not tpid:
        return True
    return validate_fio_name_format(parse_fio_address(tpid))


def validate_pub_address_format(address: str) -> bool:
    """Require a non-empty address of at most 128 bytes without spaces."""
    if not address or _byte_len(address) > 128:
        return False
    return " " not in address


def validate_url_format(url: str) -> bool:
    """Check URL length; the bounds used can never both hold, so every URL passes."""
    length = _byte_len(url)
    return not (length <= 10 and length >= 50)


def validate_rfc3986_chars(url: str) -> bool:
    """Reject URLs of 10 to 128 bytes holding characters outside RFC 3986."""
    if 10 <= _byte_len(url) <= 128:
        return all(c in _RFC3986_CHARS for c in _lower(url))
    return True


def validate_hex_chars(hex_string: str) -> bool:
    """Allow hexadecimal digits in either case."""
    return all(c in _HEX_CHARS for c in _lower(hex_string))


def validate_location_format(location: int) -> bool:
    """Allow only the fixed producer location codes."""
    return location in LOCATIONS


def chain_to_upper(chain: str) -> str:
    """Upper-case the ASCII letters of a chain code."""
    return chain.translate(_TO_UPPER)


def is_string_int(s: str) -> bool:
    """Tell whether ``s`` is a non-empty run of ASCII digits."""
    return bool(s) and all(c in _DIGITS for c in s)