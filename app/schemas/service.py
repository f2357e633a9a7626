"""
Social service Pydantic schemas for request/response validation.
"""
from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime

from app.schemas.common import RequestBody, OptionalDate, OptionalInt


class ServiceCreate(RequestBody):
    service_name: Optional[str] = None
    description: Optional[str] = None
    service_date: OptionalDate = None
    location: Optional[str] = None


class ServiceUpdate(ServiceCreate):
    pass


class ServiceOut(BaseModel):
    id: int
    service_name: str
    description: Optional[str] = None
    service_date: Optional[date] = None
    location: Optional[str] = None
    beneficiary_count: int = 0
    created_at: Optional[datetime] = None


class BeneficiaryCreate(RequestBody):
    resident_id: OptionalInt = None
    notes: Optional[str] = None


class BeneficiaryOut(BaseModel):
    id: int
    resident_id: int
    first_name: str
    last_name: str
    notes: Optional[str] = None
