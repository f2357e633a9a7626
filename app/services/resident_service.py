"""
Resident service - validation and persistence of resident records.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from app.models.resident import Resident
from app.schemas.auth import Identity
from app.services.base import RecordService
from app.utils.constants import SEX_CHOICES, DEFAULT_RESIDENT_STATUS
from app.utils.date_utils import calculate_age
from app.utils.validators import clean_fields, clean_text, require, check_choice

logger = logging.getLogger(__name__)

RESIDENT_TEXT_FIELDS = (
    "last_name",
    "first_name",
    "middle_name",
    "suffix",
    "nickname",
    "civil_status",
    "employment_status",
    "registered_voter",
    "resident_status",
    "contact_no",
    "address",
)


def validate_resident_fields(data: Dict[str, Any], default_address: Optional[str] = None) -> Dict[str, Any]:
    """
    Sanitize and validate resident input.

    Args:
        data: Raw resident fields (any client-supplied ``age`` is ignored)
        default_address: Used when the resident's own address is blank

    Returns:
        Column values ready for a ``Resident`` row, including the derived age

    Raises:
        ValidationError: missing name/sex, length violation or invalid sex
    """
    values = clean_fields(data, RESIDENT_TEXT_FIELDS)
    values["sex"] = clean_text(data.get("sex"))

    require(values, ("last_name", "first_name", "sex"))
    check_choice("sex", values["sex"], SEX_CHOICES)

    if values["address"] is None and default_address:
        values["address"] = default_address
    values["resident_status"] = values["resident_status"] or DEFAULT_RESIDENT_STATUS

    birthdate = data.get("birthdate")
    values["birthdate"] = birthdate
    values["age"] = calculate_age(birthdate)
    values["is_senior_citizen"] = bool(data.get("is_senior_citizen"))
    values["is_pwd"] = bool(data.get("is_pwd"))
    return values


class ResidentService(RecordService):
    """Business logic for residents."""

    def __init__(self, db: Session, events=None):
        super().__init__(db, events)

    def refresh_ages(self, residents: Iterable[Resident]) -> None:
        """
        Read-with-repair: bring cached ages in line with today's date.

        Any stale value is corrected and persisted.
        """
        changed = 0
        for resident in residents:
            age = calculate_age(resident.birthdate)
            if resident.age != age:
                resident.age = age
                changed += 1
        if changed:
            self.commit()
            logger.info(f"Refreshed cached age of {changed} resident(s)")

    def list_residents(self) -> List[Resident]:
        residents = self.db.query(Resident).order_by(
            Resident.last_name, Resident.first_name
        ).all()
        self.refresh_ages(residents)
        return residents

    def get_resident(self, resident_id: int) -> Resident:
        resident = self.get_or_404(Resident, resident_id, "Resident not found.")
        self.refresh_ages([resident])
        return resident

    def create_resident(self, data: Dict[str, Any], actor: Optional[Identity] = None) -> Resident:
        values = validate_resident_fields(data)
        resident = Resident(**values)
        self.db.add(resident)
        self.commit()
        self.db.refresh(resident)

        self.audit(actor, f"created a new resident: {resident.display_name}")
        return resident

    def update_resident(self, resident_id: int, data: Dict[str, Any], actor: Optional[Identity] = None) -> Resident:
        resident = self.get_or_404(Resident, resident_id, "Resident not found.")
        values = validate_resident_fields(data)
        for key, value in values.items():
            setattr(resident, key, value)
        self.commit()
        self.db.refresh(resident)

        self.audit(actor, f"updated resident information: {resident.display_name}")
        return resident
