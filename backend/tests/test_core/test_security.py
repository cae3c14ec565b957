"""
Tests for password hashing and token handling.
"""

from datetime import timedelta

import pytest

from app.core.exceptions import InvalidTokenException
from app.core.security import SecurityManager


@pytest.fixture
def security():
    return SecurityManager(secret_key="unit-test-secret", access_token_expire_minutes=5)


def test_password_round_trip(security):
    hashed = security.hash_password("correct horse")

    assert hashed != "correct horse"
    assert security.verify_password("correct horse", hashed)
    assert not security.verify_password("wrong horse", hashed)


def test_token_carries_claims(security):
    token = security.create_access_token({"sub": "7", "type": "student"})

    payload = security.verify_token(token)

    assert payload["sub"] == "7"
    assert payload["type"] == "student"
    assert payload["exp"] > payload["iat"]


def test_expired_token_rejected(security):
    token = security.create_access_token({"sub": "7"}, expires_delta=timedelta(seconds=-1))

    with pytest.raises(InvalidTokenException):
        security.verify_token(token)


def test_tampered_token_rejected(security):
    header, _, signature = security.create_access_token({"sub": "7"}).split(".")
    forged_payload = security.create_access_token({"sub": "8"}).split(".")[1]

    with pytest.raises(InvalidTokenException):
        security.verify_token(f"{header}.{forged_payload}.{signature}")


def test_defaults_come_from_settings():
    manager = SecurityManager()
    assert manager.secret_key == "test-secret-key-for-skillmatch"
    assert manager.algorithm == "HS256"
    assert manager.access_token_expire_minutes == 60
