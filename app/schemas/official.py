"""
Official Pydantic schemas.

Officials are submitted as multipart forms, so only the response is modelled.
"""
from pydantic import BaseModel
from typing import Optional


class OfficialOut(BaseModel):
    id: int
    full_name: str
    position: str
    order_no: int
    is_captain: bool
    is_secretary: bool
    signature_path: Optional[str] = None
    picture_path: Optional[str] = None
    user_id: Optional[int] = None

    class Config:
        from_attributes = True
