"""
Authentication Pydantic schemas.
"""
from pydantic import BaseModel
from typing import Optional

from app.schemas.common import RequestBody


class Identity(BaseModel):
    """Claims embedded in a session token."""
    id: int
    username: str
    full_name: str
    role: str


class RegisterRequest(RequestBody):
    username: Optional[str] = None
    password: Optional[str] = None
    full_name: Optional[str] = None
    role: Optional[str] = None


class LoginRequest(RequestBody):
    username: Optional[str] = None
    password: Optional[str] = None


class UserOut(BaseModel):
    """Public view of a user (never includes the password hash)."""
    id: int
    username: str
    full_name: str
    role: str

    class Config:
        from_attributes = True


class LoginResponse(BaseModel):
    token: str
    user: Identity
