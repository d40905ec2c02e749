import json

import pytest

from fiocommon import errors
from fiocommon.errors import (
    Code400Result,
    Code403Result,
    Code404Result,
    Field,
    FioAssertionError,
    fio_400_assert,
    fio_403_assert,
    fio_404_assert,
    get_fio_code,
    get_http_result,
    is_fio_error,
)


@pytest.mark.parametrize(
    "code, http, number",
    [
        (errors.ERROR_NO_WORK, 400, 148),
        (errors.ERROR_TRANSACTION, 403, 117),
        (errors.ERROR_NOT_FOUND, 404, 115),
        (errors.ERROR_DOMAIN_SALE_NOT_FOUND, 403, 161),
        (errors.ERROR_TRANSACTION_TOO_LARGE, 400, 152),
    ],
)
def test_code_fields(code, http, number):
    assert is_fio_error(code)
    assert get_http_result(code) == http
    assert get_fio_code(code) == number


def test_non_fio_errors():
    assert not is_fio_error(0)
    assert not is_fio_error(400)
    assert not is_fio_error(errors.ERROR_NO_WORK | (1 << 20))


def test_ident_alone_is_error_code():
    assert is_fio_error(errors.IDENT)
    assert get_http_result(errors.IDENT) == 0


def test_400_default_has_one_empty_field():
    result = Code400Result()
    assert result.fields == [Field("", "", "")]
    assert result.type == "invalid_input"


def test_400_json_exact():
    result = Code400Result("tpid", "abc", "bad")
    expected = (
        '{\n  "type": "invalid_input",\n'
        '  "message": "An invalid request was sent in, please check the nested errors for details.",\n'
        '  "fields": [\n'
        '    {"name": "tpid",\n    "value": "abc",\n    "error": "bad"}]\n}\n'
    )
    assert result.to_json() == expected


def test_400_json_multiple_fields_parses():
    result = Code400Result("a", "1", "e1")
    result.add_field("b", "2", "e2")
    data = json.loads(result.to_json())
    assert data["type"] == "invalid_input"
    assert data["fields"] == [
        {"name": "a", "value": "1", "error": "e1"},
        {"name": "b", "value": "2", "error": "e2"},
    ]


def test_403_default():
    result = Code403Result(errors.ERROR_SIGNATURE)
    assert result.type == "invalid_signature"
    assert json.loads(result.to_json())["message"] == (
        "Request signature is not valid or this user is not allowed to sign this transaction."
    )


def test_403_transaction():
    result = Code403Result(errors.ERROR_TRANSACTION)
    assert result.type == "invalid_transaction"
    assert result.message == "Signed transaction is not valid or is not formatted properly"


def test_403_account_or_action():
    result = Code403Result(errors.INVALID_ACCOUNT_OR_ACTION)
    data = json.loads(result.to_json())
    assert data == {
        "type": "invalid_account_or_action",
        "message": "Provided account or action is not valid for this endpoint",
    }


def test_404_json():
    result = Code404Result("Domain not found")
    assert result.to_json() == '{\n  "message": "Domain not found"\n}\n'


def test_400_assert_passes_and_fails():
    fio_400_assert(True, "f", "v", "e", errors.ERROR_NO_WORK)
    with pytest.raises(FioAssertionError) as info:
        fio_400_assert(False, "tpidclaim", "tpidclaim", "No work.", errors.ERROR_NO_WORK)
    assert info.value.code == errors.ERROR_NO_WORK
    assert info.value.http_status == 400
    assert json.loads(info.value.message)["fields"][0]["error"] == "No work."


def test_403_assert():
    with pytest.raises(FioAssertionError) as info:
        fio_403_assert(False, errors.ERROR_SIGNATURE)
    assert info.value.http_status == 403
    assert info.value.message == Code403Result(errors.ERROR_SIGNATURE).to_json()


def test_404_assert():
    fio_404_assert(True, "x", errors.ERROR_NOT_FOUND)
    with pytest.raises(FioAssertionError) as info:
        fio_404_assert(False, "Proxy not found", errors.ERROR_PROXY_NOT_FOUND)
    assert info.value.http_status == 404
    assert json.loads(str(info.value)) == {"message": "Proxy not found"}