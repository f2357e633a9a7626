"""
Resident API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user
from app.schemas.auth import Identity
from app.schemas.certificate import CertificateOut
from app.schemas.resident import ResidentCreate, ResidentOut, ResidentUpdate
from app.services.certificate_service import CertificateService
from app.services.resident_service import ResidentService

router = APIRouter()


@router.get("", response_model=List[ResidentOut])
def list_residents(db: Session = Depends(get_db)):
    """
    List residents ordered by last name, first name.

    Ages that drifted from the birthdate are corrected and saved.
    """
    return ResidentService(db).list_residents()


@router.get("/{resident_id}", response_model=ResidentOut)
def get_resident(resident_id: int, db: Session = Depends(get_db)):
    return ResidentService(db).get_resident(resident_id)


@router.post("", response_model=ResidentOut, status_code=status.HTTP_201_CREATED)
def create_resident(
    body: ResidentCreate,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    return ResidentService(db).create_resident(body.model_dump(), actor=current_user)


@router.put("/{resident_id}", response_model=ResidentOut)
def update_resident(
    resident_id: int,
    body: ResidentUpdate,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    return ResidentService(db).update_resident(resident_id, body.model_dump(), actor=current_user)


@router.get("/{resident_id}/certificates", response_model=List[CertificateOut])
def list_resident_certificates(resident_id: int, db: Session = Depends(get_db)):
    """Certificates issued to one resident, newest first."""
    return CertificateService(db).list_for_resident(resident_id)
