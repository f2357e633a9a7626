"""
Certificate issuance API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user
from app.schemas.auth import Identity
from app.schemas.certificate import CertificateCreate, CertificateOut, CertificateWithResidentOut
from app.services.certificate_service import CertificateService

router = APIRouter()


@router.get("", response_model=List[CertificateWithResidentOut])
def list_certificates(db: Session = Depends(get_db)):
    return CertificateService(db).list_certificates()


@router.post("", response_model=CertificateOut, status_code=status.HTTP_201_CREATED)
def create_certificate(
    body: CertificateCreate,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    """Record a released certificate."""
    return CertificateService(db).create_certificate(body.model_dump(), actor=current_user)
