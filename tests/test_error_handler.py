import pytest

from app.domain.exceptions import CacheError, InputError, OracleError, RecordExistsError, StoreError
from app.presentation.middlewares.error_handler import ERROR_MESSAGES, GENERIC_ERROR, describe_error


@pytest.mark.parametrize("error, kind", [
    (InputError("bad"), "input"),
    (OracleError("down"), "oracle"),
    (StoreError("locked"), "store"),
    (RecordExistsError("dup"), "store"),
])
def test_each_kind_has_its_own_message(error, kind):
    assert describe_error(error) == ERROR_MESSAGES[kind]


def test_kinds_are_distinguishable():
    messages = {describe_error(InputError()), describe_error(OracleError()), describe_error(StoreError())}

    assert len(messages) == 3


def test_unexpected_errors_get_generic_message():
    assert describe_error(RuntimeError("boom")) == GENERIC_ERROR
    assert describe_error(CacheError("redis")) == GENERIC_ERROR
