"""
Shared FastAPI dependencies.
"""
from typing import Optional

from fastapi import Header

from app.exceptions import Unauthorized
from app.schemas.auth import Identity
from app.utils.security import decode_access_token, token_from_header


def get_current_user(authorization: Optional[str] = Header(None)) -> Identity:
    """
    Resolve the caller's identity from the ``Authorization`` header.

    Raises ``Unauthorized`` when the token is missing, invalid or expired.
    """
    token = token_from_header(authorization)
    if not token:
        raise Unauthorized("No token provided")
    return decode_access_token(token)

