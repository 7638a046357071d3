import pytest

from solong.mlx42.errors import MlxErrno, MlxError, strerror


def test_success_message():
    assert strerror(MlxErrno.SUCCESS) == "No Errors"


def test_last_message():
    assert strerror(MlxErrno.STRTOBIG) == "String is to big to be drawn"


def test_plain_int_accepted():
    assert strerror(3) == "PNG file is invalid or corrupted"


@pytest.mark.parametrize("code", list(MlxErrno))
def test_every_code_has_distinct_message(code):
    message = strerror(code)
    others = [strerror(other) for other in MlxErrno if other != code]
    assert message and message not in others


@pytest.mark.parametrize("bad", [-1, len(MlxErrno), 100])
def test_out_of_range_raises(bad):
    with pytest.raises(ValueError):
        strerror(bad)


def test_exception_carries_errno_and_message():
    err = MlxError(MlxErrno.INVDIM)
    assert err.errno is MlxErrno.INVDIM
    assert str(err) == strerror(MlxErrno.INVDIM)


def test_exception_from_int():
    err = MlxError(14)
    assert err.errno is MlxErrno.WINFAIL
    assert str(err) == "Failed to create window"


def test_exception_with_bad_code():
    with pytest.raises(ValueError):
        MlxError(99)