"""
Tests for password hashing and owner tokens.
"""
from datetime import timedelta
from types import SimpleNamespace
from jose import jwt
from tripwallet.core.config import settings
from tripwallet.core.security import (
    check_password, hash_password, create_owner_token, decode_owner_id
)


def test_password_round_trip():
    stored = hash_password("testpassword123")
    assert check_password("testpassword123", stored)
    assert not check_password("wrongpassword", stored)


def test_long_password_is_not_truncated():
    base = "x" * 80
    stored = hash_password(base + "a")
    assert not check_password(base + "b", stored)


def test_owner_token_carries_user_id():
    token = create_owner_token(SimpleNamespace(id=7, username="traveller"))
    assert decode_owner_id(token) == 7


def test_expired_token_rejected():
    token = create_owner_token(SimpleNamespace(id=7, username="traveller"), timedelta(seconds=-1))
    assert decode_owner_id(token) is None


def test_token_without_owner_claim_rejected():
    token = jwt.encode({"sub": "traveller"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    assert decode_owner_id(token) is None


def test_token_with_non_integer_owner_rejected():
    token = jwt.encode({"user_id": "7"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    assert decode_owner_id(token) is None


def test_token_signed_with_other_key_rejected():
    token = jwt.encode({"user_id": 7}, "another-key", algorithm=settings.ALGORITHM)
    assert decode_owner_id(token) is None
