"""
Password hashing and session tokens.

Passwords are hashed with bcrypt; sessions are HS256 JWTs carrying the
user's identity and a 24 hour expiry.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

from app.config import settings
from app.exceptions import TokenExpired, InvalidToken
from app.schemas.auth import Identity

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    Raises:
        ValueError: If password is empty or longer than bcrypt accepts
    """
    if not password:
        raise ValueError("Password cannot be empty")
    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password exceeds maximum length of {MAX_PASSWORD_BYTES} bytes")

    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(encoded, salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Verify a password against its bcrypt hash."""
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError as e:
        logger.error(f"Password verification error: {e}")
        return False


def create_access_token(identity: Identity, expires_delta: Optional[timedelta] = None) -> str:
    """
    Issue a signed session token embedding the identity claims.

    Args:
        identity: id, username, full_name and role of the user
        expires_delta: Custom lifetime (defaults to TOKEN_EXPIRE_HOURS)
    """
    if expires_delta is None:
        expires_delta = timedelta(hours=settings.TOKEN_EXPIRE_HOURS)

    now = datetime.now(timezone.utc)
    payload = identity.model_dump()
    payload["iat"] = now
    payload["exp"] = now + expires_delta

    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Identity:
    """
    Validate a session token and return its identity.

    Raises:
        TokenExpired: token signature is valid but its lifetime has passed
        InvalidToken: anything else (bad signature, malformed, missing claims)
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except ExpiredSignatureError:
        logger.warning("JWT error: Token expired")
        raise TokenExpired()
    except InvalidTokenError as e:
        logger.warning(f"JWT error: {e}")
        raise InvalidToken()

    try:
        return Identity(
            id=payload["id"],
            username=payload["username"],
            full_name=payload["full_name"],
            role=payload["role"],
        )
    except (KeyError, ValueError) as e:
        logger.warning(f"JWT error: malformed claims ({e})")
        raise InvalidToken()


def token_from_header(authorization: Optional[str]) -> Optional[str]:
    """Accept either ``Bearer <token>`` or the raw token value."""
    if not authorization:
        return None
    authorization = authorization.strip()
    if authorization.startswith("Bearer "):
        return authorization[7:].strip() or None
    return authorization or None
