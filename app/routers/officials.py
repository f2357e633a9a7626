"""
Barangay official API endpoints.

Create and update take multipart forms so signature and picture files can
be uploaded alongside the fields.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user
from app.schemas.auth import Identity
from app.schemas.common import MessageResponse
from app.schemas.official import OfficialOut
from app.services.official_service import OfficialService

router = APIRouter()


def official_form(
    full_name: Optional[str] = Form(None),
    position: Optional[str] = Form(None),
    order_no: Optional[str] = Form(None),
    is_captain: Optional[str] = Form(None),
    is_secretary: Optional[str] = Form(None),
    user_id: Optional[str] = Form(None),
) -> dict:
    return {
        "full_name": full_name,
        "position": position,
        "order_no": order_no,
        "is_captain": is_captain,
        "is_secretary": is_secretary,
        "user_id": user_id,
    }


@router.get("", response_model=List[OfficialOut])
def list_officials(db: Session = Depends(get_db)):
    """Officials in display order."""
    return OfficialService(db).list_officials()


@router.get("/{official_id}", response_model=OfficialOut)
def get_official(official_id: int, db: Session = Depends(get_db)):
    return OfficialService(db).get_official(official_id)


@router.post("", response_model=OfficialOut, status_code=status.HTTP_201_CREATED)
def create_official(
    form: dict = Depends(official_form),
    signature: Optional[UploadFile] = File(None),
    picture: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    return OfficialService(db).create_official(form, signature, picture, actor=current_user)


@router.put("/{official_id}", response_model=OfficialOut)
def update_official(
    official_id: int,
    form: dict = Depends(official_form),
    signature: Optional[UploadFile] = File(None),
    picture: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    """
    Update an official.

    - **signature** / **picture**: omit to keep the stored file
    """
    return OfficialService(db).update_official(official_id, form, signature, picture, actor=current_user)


@router.delete("/{official_id}", response_model=MessageResponse)
def delete_official(
    official_id: int,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    OfficialService(db).delete_official(official_id, actor=current_user)
    return {"message": "Official deleted successfully."}
