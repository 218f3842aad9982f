"""Security Primitives: password hashing (passlib) and identity tokens (PyJWT).

Invariants:
    - Raw passwords are only ever passed to hash/verify, never stored or logged
    - Tokens carry the user id and username; nothing mutable
    - Every PyJWT failure surfaces as AuthenticationError
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from passlib.context import CryptContext

from bloglist.core.domain_types import UserId
from bloglist.core.errors import AuthenticationError

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str | None) -> bool:
    if not password_hash:
        return False
    return pwd_context.verify(password, password_hash)


def create_access_token(
    user_id: UUID,
    username: str,
    secret_key: str,
    algorithm: str = "HS256",
    expires_minutes: int | None = None,
) -> str:
    """Sign {id, username}; adds exp only when an expiry is configured."""
    payload = {"id": str(user_id), "username": username}
    if expires_minutes is not None:
        payload["exp"] = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    return jwt.encode(payload, secret_key, algorithm=algorithm)


def decode_access_token(
    token: str, secret_key: str, algorithm: str = "HS256",
) -> UserId:
    """Verify the signature and return the embedded user id."""
    try:
        payload = jwt.decode(token, secret_key, algorithms=[algorithm])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("token expired")
    except jwt.InvalidTokenError as e:
        logger.info(f"Rejected token: {e}")
        raise AuthenticationError("token invalid")

    raw_id = payload.get("id")
    try:
        return UserId(UUID(str(raw_id)))
    except ValueError:
        raise AuthenticationError("token invalid")


def dummy_verify() -> None:
    """Spend the same time as a real verify when the user does not exist."""
    pwd_context.dummy_verify()
