"""Protocol error codes and the HTTP-style messages attached to failed assertions."""

from __future__ import annotations

from dataclasses import dataclass, field

IDENT_OFFSET = 48
# Marks a value as a protocol error code.
IDENT = ((ord("F") << 4) | ord("I") << 4 | ord("O")) << IDENT_OFFSET
HTTP_OFFSET = 32
HTTP_DATA_ERROR = 400 << HTTP_OFFSET
HTTP_INVALID_ERROR = 403 << HTTP_OFFSET
HTTP_LOCATION_ERROR = 404 << HTTP_OFFSET
HTTP_MASK = 0xFFF << HTTP_OFFSET
EC_CODE_MASK = 0xFF

ERROR_DOMAIN_ALREADY_REGISTERED = IDENT | HTTP_DATA_ERROR | 100
ERROR_DOMAIN_NOT_REGISTERED = IDENT | HTTP_DATA_ERROR | 101
ERROR_FIO_NAME_ALREADY_REGISTERED = IDENT | HTTP_DATA_ERROR | 102
ERROR_FIO_NAME_EMPTY = IDENT | HTTP_DATA_ERROR | 103
ERROR_CHAIN_EMPTY = IDENT | HTTP_DATA_ERROR | 104
ERROR_CHAIN_ADDRESS_EMPTY = IDENT | HTTP_DATA_ERROR | 105
ERROR_CHAIN_CONTAINS_WHITE_SPACE = IDENT | HTTP_DATA_ERROR | 106
ERROR_CHAIN_NOT_SUPPORTED = IDENT | HTTP_DATA_ERROR | 107
ERROR_FIO_NAME_NOT_REGISTERED = IDENT | HTTP_LOCATION_ERROR | 108
ERROR_FIO_NAME_NOT_REG = IDENT | HTTP_DATA_ERROR | 127
ERROR_DOMAIN_EXPIRED = IDENT | HTTP_DATA_ERROR | 109
ERROR_PUB_ADDRESS_EMPTY = IDENT | HTTP_DATA_ERROR | 111
ERROR_PUB_KEY_EMPTY = IDENT | HTTP_DATA_ERROR | 112
ERROR_PUB_ADDRESS_EXIST = IDENT | HTTP_DATA_ERROR | 113
ERROR_SIGNATURE = IDENT | HTTP_INVALID_ERROR | 114
ERROR_NOT_FOUND = IDENT | HTTP_LOCATION_ERROR | 115
ERROR_INVALID_FIO_NAME_FORMAT = IDENT | HTTP_DATA_ERROR | 116
ERROR_TRANSACTION = IDENT | HTTP_INVALID_ERROR | 117
ERROR_NO_FIO_NAMES = IDENT | HTTP_LOCATION_ERROR | 118
ERROR_INVALID_JSON_INPUT = IDENT | HTTP_DATA_ERROR | 119
ERROR_REQUEST_CONTEXT_NOT_FOUND = IDENT | HTTP_DATA_ERROR | 120
ERROR_CHAIN_ADDRESS_NOT_FOUND = IDENT | HTTP_DATA_ERROR | 121
ERROR_NO_FIO_REQUESTS_FOUND = IDENT | HTTP_LOCATION_ERROR | 122
ERROR_400_FIO_NAME_NOT_REGISTERED = IDENT | HTTP_DATA_ERROR | 123
ERROR_PUB_ADDRESS_NOT_FOUND = IDENT | HTTP_LOCATION_ERROR | 124
ERROR_DOMAIN_NOT_FOUND = IDENT | HTTP_LOCATION_ERROR | 125
ERROR_LOW_FUNDS = IDENT | HTTP_DATA_ERROR | 126
ERROR_ENDPOINT_NOT_FOUND = IDENT | HTTP_DATA_ERROR | 127
ERROR_NO_ENDPOINT = IDENT | HTTP_DATA_ERROR | 128
ERROR_NO_FEES_FOUND_FOR_ENDPOINT = IDENT | HTTP_DATA_ERROR | 129
ERROR_MAX_FEE_EXCEEDED = IDENT | HTTP_DATA_ERROR | 130
INVALID_TPID = IDENT | HTTP_DATA_ERROR | 131
ERROR_PROXY_NOT_FOUND = IDENT | HTTP_LOCATION_ERROR | 132
ERROR_PUBLIC_KEY_EXISTS = IDENT | HTTP_DATA_ERROR | 133
ERROR_NO_FIO_ADDRESS_PRODUCER = IDENT | HTTP_DATA_ERROR | 134
ADDRESS_NOT_PROXY = IDENT | HTTP_DATA_ERROR | 135
INVALID_ACCOUNT_OR_ACTION = IDENT | HTTP_INVALID_ERROR | 136
ERROR_ACTOR_NOT_IN_FIO_ACCOUNT_MAP = IDENT | HTTP_DATA_ERROR | 137
ERROR_TOKEN_CODE_INVALID = IDENT | HTTP_DATA_ERROR | 138
ERROR_PUB_KEY_VALID = IDENT | HTTP_DATA_ERROR | 139
ERROR_INVALID_MULTIPLIER = IDENT | HTTP_INVALID_ERROR | 140
ERROR_MAX_FEE_INVALID = IDENT | HTTP_DATA_ERROR | 141
ERROR_FEE_INVALID = IDENT | HTTP_DATA_ERROR | 142
ERROR_INVALID_AMOUNT = IDENT | HTTP_DATA_ERROR | 143
ERROR_CONTENT_LIMIT = IDENT | HTTP_DATA_ERROR | 144
ERROR_PAGING_INVALID = IDENT | HTTP_DATA_ERROR | 145
ERROR_INVALID_NUMBER_ADDRESSES = IDENT | HTTP_DATA_ERROR | 146
ERROR_INSUFFICIENT_UNLOCKED_FUNDS = IDENT | HTTP_DATA_ERROR | 147
ERROR_NO_WORK = IDENT | HTTP_DATA_ERROR | 148
ERROR_CLIENT_KEY_NOT_FOUND = IDENT | HTTP_DATA_ERROR | 149
ERROR_TIME_VIOLATION = IDENT | HTTP_DATA_ERROR | 150
ERROR_NO_AUTH_WAITS = IDENT | HTTP_DATA_ERROR | 151
ERROR_TRANSACTION_TOO_LARGE = IDENT | HTTP_DATA_ERROR | 152
ERROR_REQUEST_STATUS_INVALID = IDENT | HTTP_DATA_ERROR | 153
ERROR_ACTOR_IS_SYSTEM_ACCOUNT = IDENT | HTTP_DATA_ERROR | 154
ERROR_INVALID_UNLOCK_PERIODS = IDENT | HTTP_DATA_ERROR | 155
ERROR_INVALID_VALUE = IDENT | HTTP_DATA_ERROR | 155
ERROR_NO_GENERAL_LOCKS_FOUND = IDENT | HTTP_LOCATION_ERROR | 156
ERROR_UNEXPECTED_NUMBER_RESULTS = IDENT | HTTP_LOCATION_ERROR | 156
ERROR_NO_FIO_ACTIONS_FOUND = IDENT | HTTP_LOCATION_ERROR | 157
ERROR_DOMAIN_OWNER = IDENT | HTTP_INVALID_ERROR | 158
ERROR_RETIRE_QUANTITY = IDENT | HTTP_DATA_ERROR | 159
ERROR_INVALID_MEMO = IDENT | HTTP_DATA_ERROR | 160
ERROR_DOMAIN_SALE_NOT_FOUND = IDENT | HTTP_INVALID_ERROR | 161

_FULL_MASK = IDENT | HTTP_MASK | EC_CODE_MASK


def is_fio_error(ec: int) -> bool:
    """Tell whether ``ec`` is a well-formed protocol error code."""
    return (ec & IDENT) == IDENT and (ec & ~_FULL_MASK) == 0


def get_http_result(ec: int) -> int:
    """Return the HTTP status carried by an error code."""
    return (ec & HTTP_MASK) >> HTTP_OFFSET


def get_fio_code(ec: int) -> int:
    """Return the protocol-specific error number carried by an error code."""
    return ec & EC_CODE_MASK


@dataclass
class Field:
    """One offending input field of a 400 result."""

    name: str = ""
    value: str = ""
    error: str = ""


class Code400Result:
    """An invalid-input result listing the fields at fault."""

    def __init__(self, fname: str = "", fval: str = "", ferr: str = "") -> None:
        self.type = "invalid_input"
        self.message = (
            "An invalid request was sent in, please check the nested errors for details."
        )
        self.fields: list[Field] = []
        self.add_field(fname, fval, ferr)

    def add_field(self, name: str, value: str, error: str) -> None:
        """Append a field to the result."""
        self.fields.append(Field(name, value, error))

    def to_json(self) -> str:
        """Render the result as the JSON text sent back to the caller."""
        entries = ",\n".join(
            f'    {{"name": "{f.name}",\n    "value": "{f.value}",\n    "error": "{f.error}"}}'
            for f in self.fields
        )
        return (
            f'{{\n  "type": "{self.type}",\n  "message": "{self.message}",\n'
            f'  "fields": [\n{entries}]\n}}\n'
        )


@dataclass
class Code403Result:
    """A permission or transaction-validity result chosen by error code."""

    code: int
    type: str = field(init=False)
    message: str = field(init=False)

    def __post_init__(self) -> None:
        self.type = "invalid_signature"
        self.message = (
            "Request signature is not valid or this user is not allowed to sign this transaction."
        )
        if self.code == ERROR_TRANSACTION:
            self.type = "invalid_transaction"
            self.message = "Signed transaction is not valid or is not formatted properly"
        if self.code == INVALID_ACCOUNT_OR_ACTION:
            self.type = "invalid_account_or_action"
            self.message = "Provided account or action is not valid for this endpoint"

    def to_json(self) -> str:
        """Render the result as the JSON text sent back to the caller."""
        return f'{{\n  "type": "{self.type}",\n  "message": "{self.message}"\n}}\n'


@dataclass
class Code404Result:
    """A not-found result carrying only a message."""

    message: str
    type: str = ""

    def to_json(self) -> str:
        """Render the result as the JSON text sent back to the caller."""
        return f'{{\n  "message": "{self.message}"\n}}\n'


class FioAssertionError(Exception):
    """A failed protocol assertion with its error code and JSON message."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    @property
    def http_status(self) -> int:
        return get_http_result(self.code)


def fio_400_assert(test: bool, fieldname: str, fieldvalue: str, fielderror: str, code: int) -> None:
    """Raise a 400 result naming the offending field unless ``test`` holds."""
    if not test:
        raise FioAssertionError(code, Code400Result(fieldname, fieldvalue, fielderror).to_json())


def fio_403_assert(test: bool, code: int) -> None:
    """Raise a 403 result unless ``test`` holds."""
    if not test:
        raise FioAssertionError(code, Code403Result(code).to_json())


def fio_404_assert(test: bool, message: str, code: int) -> None:
    """Raise a 404 result with ``message`` unless ``test`` holds."""
    if not test:
        raise FioAssertionError(code, Code404Result(message).to_json())