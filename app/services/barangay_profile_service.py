"""
Barangay profile service - single-row upsert.
"""
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from app.models.barangay_profile import BarangayProfile
from app.schemas.auth import Identity
from app.services.base import RecordService
from app.utils.validators import clean_fields, require

PROFILE_TEXT_FIELDS = ("barangay_name", "municipality", "province", "place_issued")


class BarangayProfileService(RecordService):

    def __init__(self, db: Session, events=None):
        super().__init__(db, events)

    def get_profile(self) -> Optional[BarangayProfile]:
        return self.db.query(BarangayProfile).order_by(BarangayProfile.id).first()

    def save_profile(self, data: Dict[str, Any], actor: Optional[Identity] = None) -> BarangayProfile:
        """Create the profile if absent, else update the existing row."""
        values = clean_fields(data, PROFILE_TEXT_FIELDS)
        require(values, ("barangay_name", "municipality", "province"))

        profile = self.get_profile()
        if profile is None:
            profile = BarangayProfile(**values)
            self.db.add(profile)
        else:
            for key, value in values.items():
                setattr(profile, key, value)
        self.commit()
        self.db.refresh(profile)

        self.audit(
            actor,
            f"updated barangay profile: {profile.barangay_name}, {profile.municipality}, {profile.province}",
        )
        return profile
