"""Password hashing and bearer token helpers."""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from passlib.context import CryptContext

from .errors import InvalidToken

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Return a salted hash of ``password``."""
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a stored hash.

    Malformed or unrecognised hashes count as a mismatch.
    """
    try:
        return pwd_context.verify(password, password_hash)
    except (ValueError, TypeError):
        return False


def create_access_token(
    claims: dict[str, Any],
    secret: str,
    algorithm: str,
    expires_delta: timedelta,
) -> str:
    """Sign ``claims`` into a JWT that expires after ``expires_delta``."""
    now = datetime.now(timezone.utc)
    payload = dict(claims)
    payload["iat"] = now
    payload["exp"] = now + expires_delta
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(token: str, secret: str, algorithm: str) -> dict[str, Any]:
    """Verify signature and expiry of a JWT and return its claims.

    Tokens without ``exp`` and ``iat`` claims are rejected, so no accepted
    token outlives its issue-time lifetime.

    Raises:
        InvalidToken: If the token is malformed, tampered with, or expired
    """
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require": ["exp", "iat"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise InvalidToken("Token has expired") from e
    except jwt.PyJWTError as e:
        raise InvalidToken() from e
