"""Tests for password hashing and token issuing/verification."""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from server.core.errors import InvalidToken
from server.core.security import PasswordHasher, TokenService


def test_same_password_hashes_differently_and_both_verify(hasher):
    first = hasher.hash("correct horse")
    second = hasher.hash("correct horse")

    assert first != second
    assert hasher.verify("correct horse", first)
    assert hasher.verify("correct horse", second)


def test_hash_uses_configured_cost():
    hashed = PasswordHasher(rounds=5).hash("pw")
    assert hashed.startswith("$2b$05$")


def test_verify_rejects_wrong_password(hasher):
    hashed = hasher.hash("right")
    assert hasher.verify("wrong", hashed) is False


@pytest.mark.parametrize("bad_hash", ["", "not-a-hash", "$2b$10$tooshort", None])
def test_verify_returns_false_for_malformed_hash(hasher, bad_hash):
    assert hasher.verify("anything", bad_hash) is False


def test_token_round_trip(tokens):
    token = tokens.issue("64f0c0ffee")
    assert tokens.verify(token) == "64f0c0ffee"


def test_token_expires_after_configured_lifetime(tokens):
    token = tokens.issue("abc")
    claims = jwt.get_unverified_claims(token)
    expected = datetime.now(timezone.utc) + timedelta(hours=1)
    assert abs(claims["exp"] - expected.timestamp()) < 5


def test_expired_token_is_rejected(tokens):
    token = tokens.issue("abc", expires_delta=timedelta(seconds=-30))
    with pytest.raises(InvalidToken):
        tokens.verify(token)


def test_token_signed_with_other_secret_is_rejected(tokens):
    forged = TokenService(secret_key="someone-else").issue("abc")
    with pytest.raises(InvalidToken):
        tokens.verify(forged)


@pytest.mark.parametrize("garbage", ["", "garbage", "a.b.c"])
def test_malformed_token_is_rejected(tokens, garbage):
    with pytest.raises(InvalidToken):
        tokens.verify(garbage)


def test_token_without_subject_is_rejected(tokens):
    exp = datetime.now(timezone.utc) + timedelta(minutes=5)
    token = jwt.encode({"exp": exp}, tokens.secret_key, algorithm="HS256")
    with pytest.raises(InvalidToken):
        tokens.verify(token)


def test_expired_and_tampered_tokens_fail_identically(tokens):
    expired = tokens.issue("abc", expires_delta=timedelta(seconds=-30))
    header, _, signature = tokens.issue("abc").split(".")
    other_payload = tokens.issue("someone-else").split(".")[1]
    tampered = f"{header}.{other_payload}.{signature}"

    errors = []
    for token in (expired, tampered):
        with pytest.raises(InvalidToken) as exc_info:
            tokens.verify(token)
        errors.append(exc_info.value.message)
    assert errors[0] == errors[1] == "Invalid token"


def test_missing_secret_is_a_configuration_error():
    with pytest.raises(RuntimeError):
        TokenService(secret_key="")
