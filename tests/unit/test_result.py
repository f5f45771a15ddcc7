import pytest

from wallboard.libs.result import Error, Return


def test_ok_result():
    result = Return.ok({"id": 1})

    assert result.is_ok()
    assert not result.is_err()
    assert result.value == {"id": 1}
    with pytest.raises(ValueError):
        result.error


def test_err_result():
    result = Return.err(Error("ACCOUNT_NOT_FOUND", "User not found"))

    assert result.is_err()
    assert result.error.code == "ACCOUNT_NOT_FOUND"
    with pytest.raises(ValueError):
        result.value
