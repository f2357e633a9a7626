"""
Household Pydantic schemas for request/response validation.
"""
from pydantic import BaseModel, Field
from typing import Any, List, Optional
from datetime import date, datetime

from app.schemas.common import RequestBody, OptionalInt
from app.schemas.resident import ResidentBase, ResidentOut


class HouseholdCreate(RequestBody):
    household_name: Optional[str] = None
    address: Optional[str] = None
    purok: Optional[str] = None
    num_members: OptionalInt = None


class HouseholdUpdate(HouseholdCreate):
    """Accepts a household as returned by GET; read-only keys are dropped."""
    id: Any = Field(None, exclude=True)
    member_count: Any = Field(None, exclude=True)
    created_at: Any = Field(None, exclude=True)


class HouseholdResidentIn(ResidentBase):
    """A resident created together with its household."""
    relation_to_head: Optional[str] = None


class HouseholdWithResidentsCreate(HouseholdCreate):
    residents: List[HouseholdResidentIn] = Field(default_factory=list)


class HouseholdOut(BaseModel):
    """Household with its live member count."""
    id: int
    household_name: str
    address: str
    purok: Optional[str] = None
    num_members: int
    member_count: int = 0
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class HouseholdWithResidentsOut(BaseModel):
    household: HouseholdOut
    residents: List[ResidentOut]


class MemberCreate(RequestBody):
    resident_id: OptionalInt = None
    relation_to_head: Optional[str] = None


class MemberOut(BaseModel):
    """Household member joined with the resident's details."""
    id: int
    resident_id: int
    first_name: str
    last_name: str
    middle_name: Optional[str] = None
    suffix: Optional[str] = None
    nickname: Optional[str] = None
    sex: Optional[str] = None
    birthdate: Optional[date] = None
    age: Optional[int] = None
    civil_status: Optional[str] = None
    employment_status: Optional[str] = None
    registered_voter: Optional[str] = None
    resident_status: Optional[str] = None
    is_senior_citizen: Optional[bool] = None
    is_pwd: Optional[bool] = None
    contact_no: Optional[str] = None
    address: Optional[str] = None
    relation_to_head: Optional[str] = None
