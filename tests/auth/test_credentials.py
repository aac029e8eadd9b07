from __future__ import annotations

from datetime import timedelta

import pytest
from jose import jwt

from src.employee_directory.employee_directory.auth.credentials import Identity, PasswordHasher, TokenService
from src.employee_directory.employee_directory.core.enums import Role
from src.employee_directory.employee_directory.core.exceptions import ExpiredTokenError, InvalidTokenError


def _identity() -> Identity:
    return Identity(user_id="u-1", username="alice", role=Role.ADMIN)


def test_hash_is_salted_and_verifies():
    hasher = PasswordHasher("pbkdf2:sha256:1000")
    first = hasher.hash("secret1")
    second = hasher.hash("secret1")

    assert first != second
    assert "secret1" not in first
    assert hasher.verify("secret1", first)
    assert not hasher.verify("secret2", first)


def test_verify_unknown_hash_format_is_false():
    hasher = PasswordHasher("pbkdf2:sha256:1000")
    assert hasher.verify("secret1", "$2a$10$abcdefghijklmnopqrstuv") is False
    assert hasher.verify("secret1", "") is False


def test_token_roundtrip_keeps_identity(clock):
    tokens = TokenService("s3cret", clock=clock)
    identity = tokens.verify(tokens.issue(_identity()))
    assert identity == _identity()


def test_token_valid_just_before_24h_and_expired_after(clock, fixed_now):
    tokens = TokenService("s3cret", clock=clock)
    token = tokens.issue(_identity())

    clock.now = fixed_now + timedelta(hours=23, minutes=59)
    assert tokens.verify(token).username == "alice"

    clock.now = fixed_now + timedelta(hours=24, minutes=1)
    with pytest.raises(ExpiredTokenError):
        tokens.verify(token)


def test_token_signed_with_other_secret_is_invalid(clock):
    token = TokenService("other", clock=clock).issue(_identity())
    with pytest.raises(InvalidTokenError) as exc:
        TokenService("s3cret", clock=clock).verify(token)
    assert not isinstance(exc.value, ExpiredTokenError)


def test_tampered_token_is_invalid(clock):
    tokens = TokenService("s3cret", clock=clock)
    header, _payload, signature = tokens.issue(_identity()).split(".")
    forged = jwt.encode({"id": "u-1", "username": "alice", "role": "admin", "exp": 9999999999}, "guess")
    with pytest.raises(InvalidTokenError):
        tokens.verify(".".join([header, forged.split(".")[1], signature]))
    with pytest.raises(InvalidTokenError):
        tokens.verify("not-a-token")


def test_token_with_unknown_role_is_invalid(clock, fixed_now):
    token = jwt.encode(
        {"id": "u-1", "username": "alice", "role": "root", "exp": int(fixed_now.timestamp()) + 60},
        "s3cret",
        algorithm="HS256",
    )
    with pytest.raises(InvalidTokenError):
        TokenService("s3cret", clock=clock).verify(token)
