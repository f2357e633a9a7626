"""
Barangay profile API endpoints.
"""
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user
from app.schemas.auth import Identity
from app.schemas.barangay_profile import BarangayProfileOut, BarangayProfileUpdate
from app.services.barangay_profile_service import BarangayProfileService

router = APIRouter()


@router.get("", response_model=Optional[BarangayProfileOut])
def get_profile(db: Session = Depends(get_db)):
    """The single profile row, or null before it has been saved."""
    return BarangayProfileService(db).get_profile()


@router.put("", response_model=BarangayProfileOut)
def save_profile(
    body: BarangayProfileUpdate,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    return BarangayProfileService(db).save_profile(body.model_dump(), actor=current_user)
