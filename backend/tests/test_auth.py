from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from expense_tracker.config import get_settings
from expense_tracker.services import (
    AuthService,
    EmailAlreadyRegistered,
    InvalidToken,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_password_hash_round_trip() -> None:
    password_hash, salt = hash_password("hunter22")

    assert len(password_hash) == 64
    assert verify_password("hunter22", password_hash, salt)
    assert not verify_password("hunter23", password_hash, salt)


def test_same_password_gets_different_salts() -> None:
    first, _ = hash_password("hunter22")
    second, _ = hash_password("hunter22")
    assert first != second


def test_register_normalizes_email(session) -> None:
    user = AuthService(session).register("Alice", "  Alice@Example.COM ", "secret1")
    assert user.email == "alice@example.com"
    assert user.password_hash != "secret1"


def test_duplicate_email_is_rejected(session, user) -> None:
    with pytest.raises(EmailAlreadyRegistered):
        AuthService(session).register("Alice again", "ALICE@example.com", "secret1")


def test_authenticate(session, user) -> None:
    service = AuthService(session)
    assert service.authenticate("alice@example.com", "secret1").id == user.id
    assert service.authenticate("alice@example.com", "wrong") is None
    assert service.authenticate("nobody@example.com", "secret1") is None


def test_token_round_trip(user) -> None:
    settings = get_settings()
    token = create_access_token(user, settings)
    assert decode_access_token(token, settings) == user.id


def test_expired_token_is_rejected(user) -> None:
    settings = get_settings()
    past = datetime.now(timezone.utc) - timedelta(hours=1)
    token = jwt.encode(
        {"sub": str(user.id), "exp": past}, settings.jwt_secret, algorithm=settings.jwt_algorithm
    )
    with pytest.raises(InvalidToken):
        decode_access_token(token, settings)


def test_token_signed_with_other_key_is_rejected(user) -> None:
    settings = get_settings()
    token = jwt.encode({"sub": str(user.id)}, "not-the-secret", algorithm="HS256")
    with pytest.raises(InvalidToken):
        decode_access_token(token, settings)
