"""
Barangay profile Pydantic schemas.
"""
from pydantic import BaseModel
from typing import Optional

from app.schemas.common import RequestBody


class BarangayProfileUpdate(RequestBody):
    barangay_name: Optional[str] = None
    municipality: Optional[str] = None
    province: Optional[str] = None
    place_issued: Optional[str] = None
    id: Optional[int] = None


class BarangayProfileOut(BaseModel):
    id: int
    barangay_name: str
    municipality: str
    province: str
    place_issued: Optional[str] = None

    class Config:
        from_attributes = True
