from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from mktrading.core.config import settings
from mktrading.core.exceptions import AuthError
from mktrading.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)


def test_token_round_trip_carries_identity():
    token = create_access_token(7, "alice")
    assert decode_access_token(token) == {"id": 7, "username": "alice"}


def test_token_expires_after_seven_days():
    token = create_access_token(1, "alice")
    claims = jwt.get_unverified_claims(token)
    remaining = datetime.fromtimestamp(claims["exp"], tz=timezone.utc) - datetime.now(timezone.utc)
    assert timedelta(days=6, hours=23) < remaining <= timedelta(days=7)


def test_expired_token_rejected():
    token = create_access_token(1, "alice", expires_delta=timedelta(seconds=-5))
    with pytest.raises(AuthError):
        decode_access_token(token)


def test_token_signed_with_other_secret_rejected():
    token = jwt.encode(
        {"id": 1, "username": "alice", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        "not-the-secret",
        algorithm=settings.ALGORITHM,
    )
    with pytest.raises(AuthError):
        decode_access_token(token)


def test_malformed_token_rejected():
    with pytest.raises(AuthError) as excinfo:
        decode_access_token("not.a.token")
    assert excinfo.value.status_code == 401


def test_token_without_identity_rejected():
    token = jwt.encode(
        {"exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )
    with pytest.raises(AuthError):
        decode_access_token(token)


def test_password_hash_is_salted_and_verifies():
    first = get_password_hash("secret")
    second = get_password_hash("secret")
    assert first != second
    assert first != "secret"
    assert verify_password("secret", first)
    assert not verify_password("wrong", first)
