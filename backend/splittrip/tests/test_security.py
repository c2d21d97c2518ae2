"""
Tests for password hashing and bearer tokens.
"""
from datetime import timedelta
from splittrip.core.security import (
    check_password,
    create_access_token,
    hash_password,
    read_token_subject,
)


def test_password_hash_round_trip():
    hashed = hash_password("correct horse battery staple")
    assert hashed != "correct horse battery staple"
    assert check_password("correct horse battery staple", hashed)
    assert not check_password("wrong password", hashed)


def test_long_passwords_differ_past_72_bytes():
    prefix = "x" * 80
    hashed = hash_password(prefix + "a")
    assert not check_password(prefix + "b", hashed)


def test_guest_without_hash_never_matches():
    assert not check_password("anything", None)
    assert not check_password("", "")


def test_token_subject_is_user_id():
    token = create_access_token("user-123")
    assert read_token_subject(token) == "user-123"


def test_bad_or_expired_token_has_no_subject():
    assert read_token_subject("not-a-token") is None
    expired = create_access_token("user-123", expires_delta=timedelta(minutes=-1))
    assert read_token_subject(expired) is None
