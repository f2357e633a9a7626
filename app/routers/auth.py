"""
Authentication API endpoints.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user
from app.schemas.auth import Identity, LoginRequest, LoginResponse, RegisterRequest, UserOut
from app.services.auth_service import AuthService

router = APIRouter()


@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, db: Session = Depends(get_db)):
    """
    Create a user account.

    - **role** defaults to "Staff"
    """
    return AuthService(db).register(body.model_dump())


@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest, db: Session = Depends(get_db)):
    """Exchange credentials for a 24 hour session token."""
    token, identity = AuthService(db).login(body.model_dump())
    return {"token": token, "user": identity}


@router.get("/me", response_model=Identity)
def me(current_user: Identity = Depends(get_current_user)):
    """Echo the identity embedded in the caller's token."""
    return current_user
