"""Security primitives: password hashing and identity tokens."""

from uuid import uuid4

import jwt
import pytest

from bloglist.core.errors import AuthenticationError
from bloglist.infrastructure.security import (
    create_access_token, decode_access_token, dummy_verify,
    hash_password, verify_password,
)

SECRET = "unit-test-secret"


def test_hash_is_not_the_password():
    """The stored hash differs from the password and still verifies."""
    hashed = hash_password("sekret")
    assert hashed != "sekret"
    assert verify_password("sekret", hashed)


def test_wrong_password_fails_verification():
    """A different password does not verify."""
    assert not verify_password("nope", hash_password("sekret"))


def test_missing_hash_never_verifies():
    """No hash means no match, without raising."""
    assert not verify_password("sekret", None)
    assert not verify_password("sekret", "")


def test_same_password_hashes_differently():
    """Hashes are salted."""
    assert hash_password("sekret") != hash_password("sekret")


def test_token_round_trip_returns_user_id():
    """A signed token decodes back to the user id."""
    uid = uuid4()
    token = create_access_token(uid, "root", secret_key=SECRET)
    assert decode_access_token(token, SECRET) == uid


def test_token_payload_has_id_and_username_only():
    """Without an expiry the payload is exactly {id, username}."""
    uid = uuid4()
    token = create_access_token(uid, "root", secret_key=SECRET)
    payload = jwt.decode(token, SECRET, algorithms=["HS256"])
    assert payload == {"id": str(uid), "username": "root"}


def test_token_with_expiry_carries_exp():
    """A configured expiry adds the exp claim."""
    token = create_access_token(uuid4(), "root", secret_key=SECRET, expires_minutes=60)
    assert "exp" in jwt.decode(token, SECRET, algorithms=["HS256"])


def test_expired_token_is_rejected():
    """Expired tokens are a 401 with their own message."""
    token = create_access_token(uuid4(), "root", secret_key=SECRET, expires_minutes=-1)
    with pytest.raises(AuthenticationError) as exc:
        decode_access_token(token, SECRET)
    assert exc.value.message == "token expired"
    assert exc.value.http_status == 401


def test_token_signed_with_other_key_is_rejected():
    """Signature mismatch is "token invalid"."""
    token = create_access_token(uuid4(), "root", secret_key="other")
    with pytest.raises(AuthenticationError) as exc:
        decode_access_token(token, SECRET)
    assert exc.value.message == "token invalid"


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_malformed_token_is_rejected(token):
    """Garbage tokens are authentication failures."""
    with pytest.raises(AuthenticationError):
        decode_access_token(token, SECRET)


@pytest.mark.parametrize("payload", [{"username": "root"}, {"id": "not-a-uuid"}])
def test_token_without_valid_id_is_rejected(payload):
    """A validly signed token still needs a UUID id."""
    token = jwt.encode(payload, SECRET, algorithm="HS256")
    with pytest.raises(AuthenticationError):
        decode_access_token(token, SECRET)


def test_dummy_verify_does_not_raise():
    dummy_verify()
