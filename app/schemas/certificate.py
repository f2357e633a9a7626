"""
Certificate Pydantic schemas for request/response validation.
"""
from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime
from decimal import Decimal

from app.schemas.common import RequestBody, OptionalDate, OptionalInt


class CertificateCreate(RequestBody):
    resident_id: OptionalInt = None
    certificate_type: Optional[str] = None
    purpose: Optional[str] = None
    issue_date: OptionalDate = None
    place_issued: Optional[str] = None
    or_number: Optional[str] = None
    amount: Optional[Decimal] = None


class CertificateOut(BaseModel):
    id: int
    resident_id: int
    certificate_type: str
    purpose: Optional[str] = None
    issue_date: date
    place_issued: Optional[str] = None
    or_number: Optional[str] = None
    amount: Optional[Decimal] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CertificateWithResidentOut(CertificateOut):
    """Certificate joined with the resident's name."""
    first_name: str
    last_name: str
    middle_name: Optional[str] = None
