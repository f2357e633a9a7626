"""
Official service - barangay officials with signature and picture uploads.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import UploadFile
from sqlalchemy.orm import Session

from app.exceptions import ValidationError
from app.models.official import Official
from app.models.user import User
from app.schemas.auth import Identity
from app.services.base import RecordService
from app.utils.uploads import delete_upload, save_upload
from app.utils.validators import clean_fields, clean_text, parse_flag, require

logger = logging.getLogger(__name__)

OFFICIAL_TEXT_FIELDS = ("full_name", "position")


def _parse_int(field: str, value, default: Optional[int]) -> Optional[int]:
    value = clean_text(value)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{field} must be a whole number.")


class OfficialService(RecordService):
    """Business logic for officials."""

    def __init__(self, db: Session, events=None):
        super().__init__(db, events)

    def _validate(self, form: Dict[str, Any]) -> Dict[str, Any]:
        values = clean_fields(form, OFFICIAL_TEXT_FIELDS)
        require(values, ("full_name", "position"))
        values["order_no"] = _parse_int("order_no", form.get("order_no"), 0)
        values["is_captain"] = parse_flag(form.get("is_captain"))
        values["is_secretary"] = parse_flag(form.get("is_secretary"))

        user_id = _parse_int("user_id", form.get("user_id"), None)
        if user_id is not None:
            self.get_or_404(User, user_id, "User not found.")
        values["user_id"] = user_id
        return values

    def list_officials(self) -> List[Official]:
        return self.db.query(Official).order_by(
            Official.order_no, Official.position, Official.full_name
        ).all()

    def get_official(self, official_id: int) -> Official:
        return self.get_or_404(Official, official_id, "Official not found")

    def _save_files(
        self,
        signature: Optional[UploadFile],
        picture: Optional[UploadFile],
    ) -> Dict[str, Optional[str]]:
        return {
            "signature_path": save_upload(signature, "signatures"),
            "picture_path": save_upload(picture, "pictures"),
        }

    def _commit_with_files(self, saved: Dict[str, Optional[str]]) -> None:
        """Commit; newly stored files are removed again if the commit fails."""
        try:
            self.commit()
        except Exception:
            for path in saved.values():
                delete_upload(path)
            raise

    def create_official(
        self,
        form: Dict[str, Any],
        signature: Optional[UploadFile] = None,
        picture: Optional[UploadFile] = None,
        actor: Optional[Identity] = None,
    ) -> Official:
        values = self._validate(form)
        saved = self._save_files(signature, picture)

        official = Official(**values, **saved)
        self.db.add(official)
        self._commit_with_files(saved)
        self.db.refresh(official)

        self.audit(actor, f"added a new official: {official.full_name} ({official.position})")
        return official

    def update_official(
        self,
        official_id: int,
        form: Dict[str, Any],
        signature: Optional[UploadFile] = None,
        picture: Optional[UploadFile] = None,
        actor: Optional[Identity] = None,
    ) -> Official:
        """
        Update an official; omitted uploads keep the stored paths.

        Files replaced by a new upload are deleted once the change is saved.
        """
        official = self.get_official(official_id)
        values = self._validate(form)
        saved = self._save_files(signature, picture)

        replaced = []
        for key, path in saved.items():
            if path:
                replaced.append(getattr(official, key))
                values[key] = path

        for key, value in values.items():
            setattr(official, key, value)
        self._commit_with_files(saved)
        self.db.refresh(official)

        for path in replaced:
            delete_upload(path)

        self.audit(actor, f"updated official: {official.full_name} ({official.position})")
        return official

    def delete_official(self, official_id: int, actor: Optional[Identity] = None) -> None:
        official = self.get_official(official_id)
        description = f"{official.full_name} ({official.position})"
        files = (official.signature_path, official.picture_path)
        self.db.delete(official)
        self.commit()

        for path in files:
            delete_upload(path)

        self.audit(actor, f"deleted official: {description}")
