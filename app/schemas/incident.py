"""
Incident Pydantic schemas for request/response validation.
"""
from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime

from app.schemas.common import RequestBody, OptionalDate, OptionalInt


class IncidentCreate(RequestBody):
    incident_date: OptionalDate = None
    incident_type: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    complainant_id: OptionalInt = None
    complainant_name: Optional[str] = None
    respondent_id: OptionalInt = None
    status: Optional[str] = None


class IncidentUpdate(IncidentCreate):
    pass


class IncidentOut(BaseModel):
    id: int
    incident_date: date
    incident_type: str
    location: Optional[str] = None
    description: Optional[str] = None
    complainant_id: Optional[int] = None
    complainant_name: Optional[str] = None
    respondent_id: Optional[int] = None
    status: str
    created_at: Optional[datetime] = None
    complainant_first_name: Optional[str] = None
    complainant_last_name: Optional[str] = None
    respondent_first_name: Optional[str] = None
    respondent_last_name: Optional[str] = None
