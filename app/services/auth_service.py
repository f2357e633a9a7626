"""
Auth service - registration and login.
"""
import logging
from typing import Any, Dict, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import Conflict, Unauthorized, ValidationError
from app.models.user import User
from app.schemas.auth import Identity
from app.utils.constants import DEFAULT_ROLE
from app.utils.security import (
    MAX_PASSWORD_BYTES,
    create_access_token,
    hash_password,
    verify_password,
)
from app.utils.validators import check_length, clean_text, require

logger = logging.getLogger(__name__)

# Same text for unknown user and wrong password
INVALID_CREDENTIALS = "Invalid username or password"


class AuthService:
    """Credential store and session issuer."""

    def __init__(self, db: Session):
        self.db = db

    def register(self, data: Dict[str, Any]) -> User:
        """
        Create a user account.

        Raises:
            ValidationError: missing fields or length violations
            Conflict: username already taken (400)
        """
        username = check_length("username", clean_text(data.get("username")))
        full_name = check_length("full_name", clean_text(data.get("full_name")))
        password = data.get("password") or None
        role = check_length("role", clean_text(data.get("role"))) or DEFAULT_ROLE

        require(
            {"username": username, "password": password, "full_name": full_name},
            ("username", "password", "full_name"),
        )
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be {MAX_PASSWORD_BYTES} bytes or less.")

        if self.db.query(User.id).filter(User.username == username).first():
            raise Conflict("Username already taken.", status_code=400)

        user = User(
            username=username,
            password_hash=hash_password(password),
            full_name=full_name,
            role=role,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise Conflict("Username already taken.", status_code=400)
        self.db.refresh(user)

        logger.info(f"Registered user {user.username} ({user.role})")
        return user

    def login(self, data: Dict[str, Any]) -> Tuple[str, Identity]:
        """
        Verify credentials and issue a session token.

        Unknown usernames and wrong passwords fail with the same message.
        """
        username = clean_text(data.get("username"))
        password = data.get("password") or None
        require({"username": username, "password": password}, ("username", "password"))

        user = self.db.query(User).filter(User.username == username).first()
        if user is None or not verify_password(password, user.password_hash):
            logger.warning(f"Failed login attempt for username {username!r}")
            raise Unauthorized(INVALID_CREDENTIALS)

        identity = Identity(
            id=user.id,
            username=user.username,
            full_name=user.full_name,
            role=user.role,
        )
        return create_access_token(identity), identity
