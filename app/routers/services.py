"""
Social service program and beneficiary API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user
from app.schemas.auth import Identity
from app.schemas.common import MessageResponse
from app.schemas.service import (
    BeneficiaryCreate,
    BeneficiaryOut,
    ServiceCreate,
    ServiceOut,
    ServiceUpdate,
)
from app.services.service_program import ServiceProgramService

router = APIRouter()


@router.get("", response_model=List[ServiceOut])
def list_services(db: Session = Depends(get_db)):
    return ServiceProgramService(db).list_services()


@router.get("/{service_id}", response_model=ServiceOut)
def get_service(service_id: int, db: Session = Depends(get_db)):
    return ServiceProgramService(db).get_service(service_id)


@router.post("", response_model=ServiceOut, status_code=status.HTTP_201_CREATED)
def create_service(
    body: ServiceCreate,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    return ServiceProgramService(db).create_service(body.model_dump(), actor=current_user)


@router.put("/{service_id}", response_model=ServiceOut)
def update_service(
    service_id: int,
    body: ServiceUpdate,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    return ServiceProgramService(db).update_service(service_id, body.model_dump(), actor=current_user)


@router.delete("/{service_id}", response_model=MessageResponse)
def delete_service(
    service_id: int,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    """Delete a service; rejected while it still has beneficiaries."""
    ServiceProgramService(db).delete_service(service_id, actor=current_user)
    return {"message": "Service deleted successfully."}


@router.get("/{service_id}/beneficiaries", response_model=List[BeneficiaryOut])
def list_beneficiaries(service_id: int, db: Session = Depends(get_db)):
    return ServiceProgramService(db).list_beneficiaries(service_id)


@router.post("/{service_id}/beneficiaries", response_model=BeneficiaryOut, status_code=status.HTTP_201_CREATED)
def add_beneficiary(
    service_id: int,
    body: BeneficiaryCreate,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    return ServiceProgramService(db).add_beneficiary(service_id, body.model_dump(), actor=current_user)


@router.delete("/{service_id}/beneficiaries/{beneficiary_id}", response_model=MessageResponse)
def remove_beneficiary(
    service_id: int,
    beneficiary_id: int,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    ServiceProgramService(db).remove_beneficiary(service_id, beneficiary_id, actor=current_user)
    return {"message": "Beneficiary removed from service."}
