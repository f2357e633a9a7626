"""
History log Pydantic schemas.
"""
from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from app.schemas.common import RequestBody


class HistoryLogCreate(RequestBody):
    action: Optional[str] = None


class HistoryLogOut(BaseModel):
    id: int
    user_id: Optional[int] = None
    user_name: str
    user_role: Optional[str] = None
    action: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class HistoryLogTableStatus(BaseModel):
    message: str
    tableExists: bool
    status: str
