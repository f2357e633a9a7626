"""
Incident (blotter) API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user
from app.schemas.auth import Identity
from app.schemas.common import MessageResponse
from app.schemas.incident import IncidentCreate, IncidentOut, IncidentUpdate
from app.services.incident_service import IncidentService

router = APIRouter()


@router.get("", response_model=List[IncidentOut])
def list_incidents(db: Session = Depends(get_db)):
    """Incidents newest first, with complainant and respondent names."""
    return IncidentService(db).list_incidents()


@router.get("/{incident_id}", response_model=IncidentOut)
def get_incident(incident_id: int, db: Session = Depends(get_db)):
    return IncidentService(db).get_incident(incident_id)


@router.post("", response_model=IncidentOut, status_code=status.HTTP_201_CREATED)
def create_incident(
    body: IncidentCreate,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    return IncidentService(db).create_incident(body.model_dump(), actor=current_user)


@router.put("/{incident_id}", response_model=IncidentOut)
def update_incident(
    incident_id: int,
    body: IncidentUpdate,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    return IncidentService(db).update_incident(incident_id, body.model_dump(), actor=current_user)


@router.delete("/{incident_id}", response_model=MessageResponse)
def delete_incident(
    incident_id: int,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    IncidentService(db).delete_incident(incident_id, actor=current_user)
    return {"message": "Incident deleted successfully."}
