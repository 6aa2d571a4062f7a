import pytest

from miku.common import Status
from miku.error import MikuError


def test_ok_value():
    err = MikuError.ok()
    assert err.is_ok()
    assert err.code == Status.OK
    assert err.message() == "ok"


def test_error_with_message():
    err = MikuError(Status.NOT_FOUND, "user u1 missing")
    assert not err.is_ok()
    assert err.code == Status.NOT_FOUND
    assert err.message() == "user u1 missing"
    assert str(err) == "user u1 missing"


def test_error_without_message_reads_ok():
    err = MikuError(Status.TIMEOUT)
    assert not err.is_ok()
    assert err.message() == "ok"


def test_message_truncated():
    err = MikuError(Status.IO, "x" * 1000)
    assert len(err.message()) == 255


def test_can_be_raised_and_caught():
    err = MikuError(Status.PERMISSION, "denied")
    assert err.message() == "denied"
    assert err.code == Status.PERMISSION
    with pytest.raises(MikuError, match="^denied$"):
        raise err


def test_plain_int_code():
    err = MikuError(-99, "custom")
    assert err.code == -99
    assert not err.is_ok()