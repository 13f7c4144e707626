"""Unit tests for password verifiers and the credential check."""
import logging

import pytest

from quizbank.errors import Unauthorized
from quizbank.services.auth import (
    BcryptVerifier,
    PlaintextVerifier,
    get_password_verifier,
    login,
    register_user,
)
from quizbank.services.store import UserStore


def test_bcrypt_hash_and_verify():
    v = BcryptVerifier()
    stored = v.hash("s3cret")
    assert stored != "s3cret"
    assert v.verify("s3cret", stored) is True
    assert v.verify("S3cret", stored) is False


def test_bcrypt_rejects_non_hash_stored_value():
    assert BcryptVerifier().verify("plain", "plain") is False
    assert BcryptVerifier().verify("plain", None) is False


def test_plaintext_is_exact_match():
    v = PlaintextVerifier()
    assert v.hash("pw") == "pw"
    assert v.verify("pw", "pw") is True
    assert v.verify("pw ", "pw") is False
    assert v.verify("PW", "pw") is False


def test_get_password_verifier():
    assert isinstance(get_password_verifier("bcrypt"), BcryptVerifier)
    assert isinstance(get_password_verifier("plaintext"), PlaintextVerifier)
    with pytest.raises(ValueError):
        get_password_verifier("md5")


@pytest.mark.parametrize("verifier", [BcryptVerifier(), PlaintextVerifier()], ids=["bcrypt", "plaintext"])
def test_login_success_and_failures_look_alike(db, verifier):
    store = UserStore(db)
    register_user(store, verifier, "Ada", "ada@example.com", "0600", "pw123", "admin")

    view = login(store, verifier, "ada@example.com", "pw123")
    assert view == {"name": "Ada", "email": "ada@example.com", "phone": "0600", "role": "admin"}

    with pytest.raises(Unauthorized) as wrong_pw:
        login(store, verifier, "ada@example.com", "nope")
    with pytest.raises(Unauthorized) as unknown:
        login(store, verifier, "bob@example.com", "pw123")
    assert wrong_pw.value.to_body() == unknown.value.to_body()


def test_login_with_shared_email_matches_right_password(db):
    """Email is not unique; any user whose password matches is accepted."""
    store = UserStore(db)
    v = PlaintextVerifier()
    register_user(store, v, "First", "same@example.com", "1", "one", "student")
    register_user(store, v, "Second", "same@example.com", "2", "two", "student")
    assert login(store, v, "same@example.com", "two")["name"] == "Second"


def test_register_stores_hash_not_password(db):
    store = UserStore(db)
    user = register_user(store, BcryptVerifier(), "Ada", "ada@example.com", "0600", "pw123", "student")
    assert user.password != "pw123"
    assert user.password.startswith("$2")


def test_failed_login_does_not_log_email(db, caplog):
    store = UserStore(db)
    v = PlaintextVerifier()
    register_user(store, v, "Ada", "ada@example.com", "0600", "pw123", "student")
    with caplog.at_level(logging.DEBUG, logger="quizbank.services.auth"):
        with pytest.raises(Unauthorized):
            login(store, v, "ada@example.com", "wrong")
    assert all("ada@example.com" not in rec.getMessage() for rec in caplog.records)
    assert all(rec.levelno < logging.WARNING for rec in caplog.records)
