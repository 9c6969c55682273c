"""Tests for Crypt hash signing."""

import pytest

from officeconnect.core.config import Settings
from officeconnect.core.crypt import Crypt


@pytest.fixture
def crypt(settings: Settings) -> Crypt:
    return Crypt(settings)


def test_hash_round_trip(crypt: Crypt) -> None:
    token = crypt.get_hash({"action": "download", "fileId": 42, "userId": "alice"})
    payload, error = crypt.read_hash(token)
    assert error is None
    assert payload == {"action": "download", "fileId": 42, "userId": "alice"}


def test_hash_from_other_secret_is_invalid(crypt: Crypt) -> None:
    other = Crypt(Settings(OFFICECONNECT_SECRET_KEY="another-secret"))
    payload, error = crypt.read_hash(other.get_hash({"fileId": 1}))
    assert payload is None
    assert error == "Invalid hash"


@pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c"])
def test_garbage_is_invalid(crypt: Crypt, token: str) -> None:
    assert crypt.read_hash(token) == (None, "Invalid hash")


def test_empty_secret_rejected() -> None:
    with pytest.raises(ValueError, match="not configured"):
        Crypt(Settings(OFFICECONNECT_SECRET_KEY=""))
