"""
Resident Pydantic schemas for request/response validation.
"""
from pydantic import BaseModel, Field
from typing import Any, Optional
from datetime import date, datetime

from app.schemas.common import RequestBody, OptionalDate


class ResidentBase(RequestBody):
    """Fields accepted when creating or updating a resident."""
    last_name: Optional[str] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    suffix: Optional[str] = None
    nickname: Optional[str] = None
    sex: Optional[str] = None
    birthdate: OptionalDate = None
    civil_status: Optional[str] = None
    employment_status: Optional[str] = None
    registered_voter: Optional[str] = None
    resident_status: Optional[str] = None
    is_senior_citizen: bool = False
    is_pwd: bool = False
    contact_no: Optional[str] = None
    address: Optional[str] = None
    age: Optional[int] = Field(None, description="Ignored; derived from birthdate")


class ResidentCreate(ResidentBase):
    pass


class ResidentUpdate(ResidentBase):
    """
    Edit forms post back the record they loaded, either a resident or a
    household member row; the read-only keys of those shapes are dropped.
    """
    id: Any = Field(None, exclude=True)
    resident_id: Any = Field(None, exclude=True)
    relation_to_head: Any = Field(None, exclude=True)
    created_at: Any = Field(None, exclude=True)


class ResidentOut(BaseModel):
    """Single resident record."""
    id: int
    last_name: str
    first_name: str
    middle_name: Optional[str] = None
    suffix: Optional[str] = None
    nickname: Optional[str] = None
    sex: str
    birthdate: Optional[date] = None
    age: Optional[int] = None
    civil_status: Optional[str] = None
    employment_status: Optional[str] = None
    registered_voter: Optional[str] = None
    resident_status: Optional[str] = None
    is_senior_citizen: bool
    is_pwd: bool
    contact_no: Optional[str] = None
    address: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
