"""Shared helpers: name hashing, key validation and the reward-distribution actions."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Any

from Crypto.Hash import RIPEMD160

from fiocommon.base58 import Base58Error, decode_base58
from fiocommon.names import (
    ADDRESS_CONTRACT,
    ASSERT_ACCOUNT,
    ESCROW_CONTRACT,
    FEE_CONTRACT,
    FIO_ACCOUNT,
    FIO_ORACLE_CONTRACT,
    FIO_SYSTEM_ACCOUNT,
    MSIG_ACCOUNT,
    REQOBT_ACCOUNT,
    STAKING_ACCOUNT,
    SYSTEM_ACCOUNT,
    TOKEN_CONTRACT,
    TPID_CONTRACT,
    TREASURY_ACCOUNT,
    WRAP_ACCOUNT,
)

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1

YEAR_TO_SECONDS = 31536000
SECONDS_30_DAYS = 2592000
SECONDS_PER_DAY = 86400
DOMAIN_WAIT_FOR_BURN_DAYS = 90 * SECONDS_PER_DAY
ADDRESS_WAIT_FOR_BURN_DAYS = 365 * SECONDS_PER_DAY
MAX_BOUNTY_TOKENS_TO_MINT = 125000000000000000
MIN_VOTED_FIO = 65_000_000_000000000
MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_BETWEEN_BP_CLAIM = SECONDS_PER_HOUR * 4
YEAR_DAYS = 365
MAX_BPS = 42
MAX_ACTIVE_BPS = 21
DEFAULT_BUNDLE_AMOUNT = 100

STAKED_TOKEN_POOL_MINIMUM = 1000000000000000
STAKING_REWARDS_RESERVE_MAXIMUM = 25000000000000000
DAILY_STAKING_MINT_THRESHOLD = 25000000000000
MINIMUM_RETIRE = 1000000000000

STAKE_FIO_TOKENS_ENDPOINT = "stake_fio_tokens"
UNSTAKE_FIO_TOKENS_ENDPOINT = "unstake_fio_tokens"
REGISTER_ADDRESS_ENDPOINT = "register_fio_address"
REGISTER_DOMAIN_ENDPOINT = "register_fio_domain"
RENEW_ADDRESS_ENDPOINT = "renew_fio_address"
RENEW_DOMAIN_ENDPOINT = "renew_fio_domain"
TRANSFER_ADDRESS_ENDPOINT = "transfer_fio_address"
TRANSFER_DOMAIN_ENDPOINT = "transfer_fio_domain"
REMOVE_ALL_PUB_ENDPOINT = "remove_all_pub_addresses"
REMOVE_PUB_ADDRESS_ENDPOINT = "remove_pub_address"
REGISTER_PRODUCER_ENDPOINT = "register_producer"
ADD_PUB_ADDRESS_ENDPOINT = "add_pub_address"
UNREGISTER_PRODUCER_ENDPOINT = "unregister_producer"
VOTE_PRODUCER_ENDPOINT = "vote_producer"
VOTE_PROXY_ENDPOINT = "proxy_vote"
UNREGISTER_PROXY_ENDPOINT = "unregister_proxy"
REGISTER_PROXY_ENDPOINT = "register_proxy"
TRANSFER_LOCKED_TOKENS_ENDPOINT = "transfer_locked_tokens"
TRANSFER_TOKENS_PUBKEY_ENDPOINT = "transfer_tokens_pub_key"
SET_DOMAIN_PUBLIC = "set_fio_domain_public"
WRAP_FIO_TOKENS_ENDPOINT = "wrap_fio_tokens"
WRAP_FIO_DOMAIN_ENDPOINT = "wrap_fio_domain"
CANCEL_FUNDS_REQUEST_ENDPOINT = "cancel_funds_request"
REJECT_FUNDS_REQUEST_ENDPOINT = "reject_funds_request"
NEW_FUNDS_REQUEST_ENDPOINT = "new_funds_request"
RECORD_OBT_DATA_ENDPOINT = "record_obt_data"
SUBMIT_BUNDLED_TRANSACTION_ENDPOINT = "submit_bundled_transaction"
SUBMIT_FEE_RATIOS_ENDPOINT = "submit_fee_ratios"
SUBMIT_FEE_MULTIPLER_ENDPOINT = "submit_fee_multiplier"
BURN_FIO_ADDRESS_ENDPOINT = "burn_fio_address"
ADD_BUNDLED_TRANSACTION_ENDPOINT = "add_bundled_transactions"
ADD_NFT_ENDPOINT = "add_nft"
REM_NFT_ENDPOINT = "remove_nft"
REM_ALL_NFTS_ENDPOINT = "remove_all_nfts"
LIST_DOMAIN_ENDPOINT = "list_domain"
CANCEL_LIST_DOMAIN_ENDPOINT = "cancel_list_domain"
BUY_DOMAIN_ENDPOINT = "buy_domain"
SET_MARKETPLACE_CONFIG_ENDPOINT = "set_marketplace_config"

INITIAL_ACCOUNT_RAM = 25600
ADDITIONAL_RAM_BP_DESCHEDULING = 25600
STAKE_FIO_TOKENS_RAM = 512
UNSTAKE_FIO_TOKENS_RAM = 512
REG_DOMAIN_RAM = 2560
REG_ADDRESS_RAM = 2560
ADD_ADDRESS_RAM = 512
SET_DOMAIN_PUB_RAM = 256
NEW_FUNDS_REQUEST_RAM = 3120
RECORD_OBT_RAM = 4098
RENEW_ADDRESS_RAM = 1024
RENEW_DOMAIN_RAM = 1024
XFER_RAM = 512
TRANSFER_PUBKEY_RAM = 1024
REJECT_FUNDS_RAM = 512
WRAP_TOKEN_RAM = 512
CANCEL_FUNDS_RAM = 512
# Raised so non-top-21 producers can vote on fees repeatedly without hitting RAM limits.
SET_FEE_VOTE_RAM = 4000
BUNDLE_VOTE_RAM = 0
ADD_NFT_RAM_BASE = 512
ADD_NFT_RAM = 2048
LIST_DOMAIN_RAM = 1536
BASE_CONTENT_AMOUNT = 1000

PUBLIC_KEY_LENGTH = 53
PUBLIC_KEY_PREFIX = "FIO"

_FIO_SYSTEM_ACCOUNTS = frozenset(
    {
        MSIG_ACCOUNT,
        WRAP_ACCOUNT,
        SYSTEM_ACCOUNT,
        ASSERT_ACCOUNT,
        REQOBT_ACCOUNT,
        FEE_CONTRACT,
        ADDRESS_CONTRACT,
        TPID_CONTRACT,
        TOKEN_CONTRACT,
        TREASURY_ACCOUNT,
        FIO_SYSTEM_ACCOUNT,
        FIO_ACCOUNT,
        ESCROW_CONTRACT,
        FIO_ORACLE_CONTRACT,
    }
)


@dataclass(frozen=True)
class Action:
    """An inline action: who authorises it, which contract and action, and its data."""

    actor: str
    permission: str
    account: str
    name: str
    data: tuple[Any, ...]


def _active(actor: str, account: str, name: str, *data: Any) -> Action:
    return Action(actor, "active", account, name, tuple(data))


def _share(amount: int, ratio: float) -> int:
    return int(float(amount) * ratio)


def string_to_uint64_hash(s: str) -> int:
    """Pack the low bits of each character of ``s`` into a 64-bit value."""
    raw = s.encode("utf-8")
    length = len(raw)
    multv = 60 // length if length else 0
    value = 0
    for i, byte in enumerate(raw):
        if i < 60:
            c = ((byte & 0x1F) << (64 - multv * (i + 1))) & _MASK64
        else:
            c = byte & 0x0F
        value |= c
    return value


def string_to_uint128_hash(s: str) -> int:
    """Return the first 16 bytes of the SHA-1 of ``s`` read as a little-endian integer."""
    digest = hashlib.sha1(s.encode("utf-8")).digest()
    return int.from_bytes(digest[:16], "little")


def to_hex(data: bytes) -> str:
    """Render bytes as lower-case hexadecimal."""
    return bytes(data).hex()


def get_time_plus_seconds(t: int, seconds: int) -> int:
    """Add ``seconds`` to a 32-bit time value, wrapping as an unsigned 32-bit integer."""
    return (t + seconds) & _MASK32


def is_fio_system(actor: str) -> bool:
    """Tell whether ``actor`` is one of the protocol's system accounts."""
    return actor in _FIO_SYSTEM_ACCOUNTS


def is_pub_key_valid(pubkey: str) -> bool:
    """Check a ``FIO`` public key string: its length, encoding and RIPEMD-160 checksum."""
    if len(pubkey.encode("utf-8")) != PUBLIC_KEY_LENGTH:
        return False
    if not pubkey.startswith(PUBLIC_KEY_PREFIX):
        return False
    try:
        raw = decode_base58(pubkey[len(PUBLIC_KEY_PREFIX):])
    except Base58Error:
        return False
    if len(raw) != 37:
        return False
    checksum = RIPEMD160.new(raw[:33]).digest()
    return checksum[:4] == raw[-4:]


def fio_fees(actor: str, fee: int, act: str) -> list[Action]:
    """Return the transfer of a positive fee (in SUFs) from ``actor`` to the treasury."""
    if fee <= 0:
        return []
    return [
        _active(
            SYSTEM_ACCOUNT,
            TOKEN_CONTRACT,
            "transfer",
            actor,
            TREASURY_ACCOUNT,
            fee,
            "FIO fee: " + act,
        )
    ]


def set_auto_proxy(
    tpid: str, amount: int, auth: str, actor: str, tpid_registered: bool
) -> list[Action]:
    """Return the TPID update for ``actor`` when ``tpid`` is a registered address."""
    if not tpid_registered:
        return []
    return [_active(auth, TPID_CONTRACT, "updatetpid", tpid, actor, amount)]


def _tpid_and_pool_actions(
    tpid: str,
    amount: int,
    auth: str,
    actor: str,
    tpid_registered: bool,
    bounty_minted: int,
    pool_action: str,
) -> list[Action]:
    if not tpid_registered:
        return [
            _active(auth, TREASURY_ACCOUNT, pool_action, _share(amount, 0.70)),
            _active(auth, STAKING_ACCOUNT, "incgrewards", _share(amount, 0.25)),
        ]
    actions: list[Action] = []
    bounty = 0
    if bounty_minted < MAX_BOUNTY_TOKENS_TO_MINT:
        bounty = _share(amount, 0.40)
        actions.append(
            _active(TREASURY_ACCOUNT, TOKEN_CONTRACT, "mintfio", TREASURY_ACCOUNT, bounty)
        )
        actions.append(_active(TREASURY_ACCOUNT, TPID_CONTRACT, "updatebounty", bounty))
    actions.append(
        _active(auth, TPID_CONTRACT, "updatetpid", tpid, actor, amount // 10 + bounty)
    )
    actions.append(_active(auth, TREASURY_ACCOUNT, pool_action, _share(amount, 0.60)))
    actions.append(_active(auth, STAKING_ACCOUNT, "incgrewards", _share(amount, 0.25)))
    return actions


def process_rewards(
    tpid: str,
    amount: int,
    auth: str,
    actor: str,
    tpid_registered: bool,
    bounty_minted: int,
) -> list[Action]:
    """Return the actions that split a fee between foundation, TPID, producers and stakers."""
    actions = [
        _active(auth, TREASURY_ACCOUNT, "fdtnrwdupdat", _share(amount, 0.05)),
        _active(auth, SYSTEM_ACCOUNT, "clrgenlocked", actor),
    ]
    actions += _tpid_and_pool_actions(
        tpid, amount, auth, actor, tpid_registered, bounty_minted, "bprewdupdate"
    )
    return actions


def process_bucket_rewards(
    tpid: str,
    amount: int,
    auth: str,
    actor: str,
    tpid_registered: bool,
    bounty_minted: int,
) -> list[Action]:
    """Like process_rewards, but the producer share goes into the bucket pool."""
    actions = [_active(auth, TREASURY_ACCOUNT, "fdtnrwdupdat", _share(amount, 0.05))]
    actions += _tpid_and_pool_actions(
        tpid, amount, auth, actor, tpid_registered, bounty_minted, "bppoolupdate"
    )
    return actions


def process_rewards_no_tpid(amount: int, actor: str) -> list[Action]:
    """Return the producer, staking and foundation shares of a fee paid without a TPID."""
    return [
        _active(actor, TREASURY_ACCOUNT, "bprewdupdate", _share(amount, 0.70)),
        _active(actor, STAKING_ACCOUNT, "incgrewards", _share(amount, 0.25)),
        _active(actor, TREASURY_ACCOUNT, "fdtnrwdupdat", _share(amount, 0.05)),
    ]