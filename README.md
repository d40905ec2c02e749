# fiocommon

Helpers shared by the FIO protocol contracts, usable from plain Python.

## Installation

```
pip install fiocommon
```

The test extra installs pytest: `pip install "fiocommon[test]"`.

## Modules

- `fiocommon.names`: the well-known account names (`SYSTEM_ACCOUNT`,
  `TREASURY_ACCOUNT`, `TOKEN_CONTRACT`, ...) and conversion between account
  names and their 64-bit values with `string_to_name`, `name_to_string` and
  `char_to_symbol`. Names longer than 13 characters or holding characters
  outside `.12345a-z` raise `ValueError`.
- `fiocommon.base58`: base58 decoding. `base58_to_binary(s, size)` gives
  exactly `size` bytes; `decode_base58` accepts surrounding whitespace and
  turns each leading `1` into a zero byte; `decode_base58_raw` does no
  whitespace handling. Bad input raises `Base58Error` (a `ValueError`).
- `fiocommon.keyops`: `string_to_public_key` parses `FIO...` and
  `PUB_R1_...` key strings into a `PublicKey` (a `KeyType` and 33 bytes of
  key data; the checksum is not verified). `shorten_key` folds key bytes into
  a 64-bit name value, and `key_to_account` derives the 12-character account
  name belonging to a key string.
- `fiocommon.validator`: `parse_fio_address` splits `name@domain` into a
  lower-cased `FioAddress`; the `validate_*` functions check names, domains,
  chain and token codes, TPIDs, public addresses, URLs, hex strings and
  producer location codes. Also `chain_to_upper` and `is_string_int`.
- `fiocommon.chain_control`: `ChainControl` holds a list of `ChainEntry`
  records; `chain_from_index`, `index_from_chain` and `vector_index` return
  `None` when nothing matches.
- `fiocommon.fiotime`: `convert_fio_time` turns epoch seconds into a
  `FioTime` (raising `OverflowError` out of range), and `format_fio_time`
  renders it as `YYYY-MM-DDTHH:MM:SS`.
- `fiocommon.errors`: the protocol error codes (`ERROR_NO_WORK`,
  `ERROR_INVALID_FIO_NAME_FORMAT`, ...), `is_fio_error`, `get_http_result`,
  `get_fio_code`, the JSON bodies `Code400Result`, `Code403Result` and
  `Code404Result`, and `fio_400_assert`, `fio_403_assert` and
  `fio_404_assert`, which raise `FioAssertionError` carrying `code`,
  `message` and `http_status`.
- `fiocommon.common`: protocol constants (endpoints, RAM amounts, limits),
  `string_to_uint64_hash`, `string_to_uint128_hash`, `to_hex`,
  `get_time_plus_seconds`, `is_fio_system`, `is_pub_key_valid` (length,
  encoding and RIPEMD-160 checksum), and the fee and reward routing
  functions `fio_fees`, `set_auto_proxy`, `process_rewards`,
  `process_bucket_rewards` and `process_rewards_no_tpid`.

## Examples

```python
from fiocommon.validator import parse_fio_address, validate_fio_name_format
from fiocommon.errors import fio_400_assert, ERROR_INVALID_FIO_NAME_FORMAT

fa = parse_fio_address("Alice@Wallet")
fio_400_assert(validate_fio_name_format(fa), "fio_address", fa.fioaddress,
               "Invalid FIO Address format", ERROR_INVALID_FIO_NAME_FORMAT)
print(fa.fioname, fa.fiodomain)  # alice wallet
```

```python
from fiocommon.common import process_rewards_no_tpid
from fiocommon.names import ADDRESS_CONTRACT

for action in process_rewards_no_tpid(1_000_000, ADDRESS_CONTRACT):
    print(action.account, action.name, action.data)
```

## What the package does not do

It runs no contracts and keeps no chain state. The routing functions only
return the list of `Action` records that would be sent; nothing sends them.
They do not look up tables either: whether a TPID is a registered address
(`tpid_registered`) and how many bounty tokens have been minted
(`bounty_minted`) are passed in by the caller.