"""Account name encoding and the well-known accounts of the protocol."""

from __future__ import annotations

MAX_NAME_LENGTH = 13
_CHARMAP = ".12345abcdefghijklmnopqrstuvwxyz"
_VALID_NAME_CHARS = frozenset(_CHARMAP)

MAX_TRX_SIZE = 8098
MAX_SET_ADDRESSES = 200

MSIG_ACCOUNT = "eosio.msig"
WRAP_ACCOUNT = "eosio.wrap"
SYSTEM_ACCOUNT = "eosio"
ASSERT_ACCOUNT = "eosio.assert"

# Legacy system accounts inherited from the base chain.
BPAY_ACCOUNT = "eosio.bpay"
NAMES_ACCOUNT = "eosio.names"
RAM_ACCOUNT = "eosio.ram"
RAMFEE_ACCOUNT = "eosio.ramfee"
SAVING_ACCOUNT = "eosio.saving"
STAKE_ACCOUNT = "eosio.stake"
VPAY_ACCOUNT = "eosio.vpay"

REQOBT_ACCOUNT = "fio.reqobt"
FEE_CONTRACT = "fio.fee"
STAKING_CONTRACT = "fio.staking"
ADDRESS_CONTRACT = "fio.address"
TPID_CONTRACT = "fio.tpid"
TOKEN_CONTRACT = "fio.token"
FOUNDATION_ACCOUNT = "tw4tjkmo4eyd"
TREASURY_ACCOUNT = "fio.treasury"
STAKING_ACCOUNT = "fio.staking"
FIO_SYSTEM_ACCOUNT = "fio.system"
ESCROW_CONTRACT = "fio.escrow"
FIO_ACCOUNT = "fio"
FIO_ORACLE_CONTRACT = "fio.oracle"

FIO_ISSUER = SYSTEM_ACCOUNT
FIO_SYMBOL_CODE = "FIO"
FIO_SYMBOL_PRECISION = 9

OWNER = "owner"
ACTIVE = "active"


def char_to_symbol(c: str) -> int:
    """Return the 5-bit value of a name character; 0 for '.' and anything else."""
    if "a" <= c <= "z":
        return ord(c) - ord("a") + 6
    if "1" <= c <= "5":
        return ord(c) - ord("1") + 1
    return 0


def string_to_name(s: str) -> int:
    """Encode an account name as its 64-bit integer value."""
    if len(s) > MAX_NAME_LENGTH:
        raise ValueError("string is too long to be a valid name")
    value = 0
    for i, c in enumerate(s):
        if c not in _VALID_NAME_CHARS:
            raise ValueError(f"character {c!r} is not in allowed character set for names")
        symbol = char_to_symbol(c)
        if i < MAX_NAME_LENGTH - 1:
            value |= (symbol & 0x1F) << (64 - 5 * (i + 1))
        else:
            if symbol > 0x0F:
                raise ValueError("thirteenth character in name cannot be a letter that comes after j")
            value |= symbol
    return value


def name_to_string(value: int) -> str:
    """Decode a 64-bit name value into its textual form."""
    if not 0 <= value < 1 << 64:
        raise ValueError("name value must fit in 64 bits")
    chars = []
    for i in range(MAX_NAME_LENGTH):
        if i == 0:
            chars.append(_CHARMAP[value & 0x0F])
            value >>= 4
        else:
            chars.append(_CHARMAP[value & 0x1F])
            value >>= 5
    return "".join(reversed(chars)).rstrip(".")