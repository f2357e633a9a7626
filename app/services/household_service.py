"""
Household service - households, their members and the atomic
household-with-residents creation.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import Conflict, NotFound, ValidationError
from app.models.household import Household, HouseholdMember
from app.models.resident import Resident
from app.schemas.auth import Identity
from app.services.base import RecordService
from app.services.resident_service import ResidentService, validate_resident_fields
from app.utils.constants import RELATION_CHOICES
from app.utils.validators import check_choice, clean_fields, require

logger = logging.getLogger(__name__)

HOUSEHOLD_TEXT_FIELDS = ("household_name", "address", "purok")

MEMBER_RESIDENT_FIELDS = (
    "first_name",
    "last_name",
    "middle_name",
    "suffix",
    "nickname",
    "sex",
    "birthdate",
    "age",
    "civil_status",
    "employment_status",
    "registered_voter",
    "resident_status",
    "is_senior_citizen",
    "is_pwd",
    "contact_no",
    "address",
)

INVALID_RELATION_MESSAGE = (
    f"Invalid relation_to_head. Must be one of: {', '.join(RELATION_CHOICES)}"
)


def validate_household_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    values = clean_fields(data, HOUSEHOLD_TEXT_FIELDS)
    require(values, ("household_name", "address"))
    return values


class HouseholdService(RecordService):
    """Business logic for households and household membership."""

    def __init__(self, db: Session, events=None):
        super().__init__(db, events)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def count_members(self, household_id: int) -> int:
        """Fresh count of membership rows for a household."""
        return self.db.query(func.count(HouseholdMember.id)).filter(
            HouseholdMember.household_id == household_id
        ).scalar() or 0

    def _with_member_counts(self):
        return self.db.query(
            Household,
            func.count(HouseholdMember.id).label("member_count"),
        ).outerjoin(
            HouseholdMember, HouseholdMember.household_id == Household.id
        ).group_by(Household.id)

    @staticmethod
    def to_dict(household: Household, member_count: int) -> Dict[str, Any]:
        return {
            "id": household.id,
            "household_name": household.household_name,
            "address": household.address,
            "purok": household.purok,
            "num_members": household.num_members,
            "member_count": member_count,
            "created_at": household.created_at,
        }

    def list_households(self) -> List[Dict[str, Any]]:
        rows = self._with_member_counts().order_by(Household.household_name).all()
        return [self.to_dict(household, count) for household, count in rows]

    def get_household(self, household_id: int) -> Dict[str, Any]:
        row = self._with_member_counts().filter(Household.id == household_id).first()
        if row is None:
            raise NotFound("Household not found.")
        return self.to_dict(*row)

    def list_members(self, household_id: int) -> List[Dict[str, Any]]:
        """Members joined with resident details; stale ages are repaired."""
        self.get_or_404(Household, household_id, "Household not found.")

        rows: List[Tuple[HouseholdMember, Resident]] = self.db.query(
            HouseholdMember, Resident
        ).join(
            Resident, Resident.id == HouseholdMember.resident_id
        ).filter(
            HouseholdMember.household_id == household_id
        ).order_by(Resident.last_name, Resident.first_name).all()

        ResidentService(self.db, self.events).refresh_ages(resident for _, resident in rows)
        return [self._member_dict(member, resident) for member, resident in rows]

    @staticmethod
    def _member_dict(member: HouseholdMember, resident: Resident) -> Dict[str, Any]:
        data = {field: getattr(resident, field) for field in MEMBER_RESIDENT_FIELDS}
        data.update(
            id=member.id,
            resident_id=resident.id,
            relation_to_head=member.relation_to_head,
        )
        return data

    # ------------------------------------------------------------------
    # Households
    # ------------------------------------------------------------------

    def create_household(self, data: Dict[str, Any], actor: Optional[Identity] = None) -> Dict[str, Any]:
        values = validate_household_fields(data)
        household = Household(
            **values,
            num_members=max(1, data.get("num_members") or 1),
        )
        self.db.add(household)
        self.commit()

        self.audit(actor, f"created a new household: {household.household_name}")
        return self.get_household(household.id)

    def update_household(self, household_id: int, data: Dict[str, Any], actor: Optional[Identity] = None) -> Dict[str, Any]:
        """
        Update a household.

        ``num_members`` is clamped to at least the actual number of linked
        members, whatever the client sent.
        """
        values = validate_household_fields(data)
        household = self.get_or_404(Household, household_id, "Household not found.")

        actual = self.count_members(household_id)
        requested = data.get("num_members")
        values["num_members"] = max(requested, actual) if requested else actual

        for key, value in values.items():
            setattr(household, key, value)
        self.commit()

        self.audit(actor, f"updated household: {household.household_name}")
        return self.get_household(household_id)

    def delete_household(self, household_id: int, actor: Optional[Identity] = None) -> None:
        """Delete a household and its membership rows; residents are kept."""
        household = self.get_or_404(Household, household_id, "Household not found.")
        name = household.household_name
        self.db.delete(household)
        self.commit()

        self.audit(actor, f"deleted household: {name}")

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    def add_member(self, household_id: int, data: Dict[str, Any], actor: Optional[Identity] = None) -> Dict[str, Any]:
        resident_id = data.get("resident_id")
        if not resident_id:
            raise ValidationError("resident_id is required to add member.")

        household = self.get_or_404(Household, household_id, "Household not found.")
        resident = self.get_or_404(Resident, resident_id, "Resident not found.")

        duplicate = self.db.query(HouseholdMember.id).filter(
            HouseholdMember.household_id == household_id,
            HouseholdMember.resident_id == resident_id,
        ).first()
        if duplicate:
            raise Conflict("This resident is already a member of this household.")

        relation = check_choice(
            "relation_to_head",
            data.get("relation_to_head") or None,
            RELATION_CHOICES,
            message=INVALID_RELATION_MESSAGE,
        )

        member = HouseholdMember(
            household_id=household_id,
            resident_id=resident_id,
            relation_to_head=relation,
        )
        self.db.add(member)
        try:
            self.db.flush()
        except IntegrityError:
            # Lost a race against a concurrent insert of the same pair
            self.db.rollback()
            raise Conflict("This resident is already a member of this household.")

        household.num_members = max(household.num_members or 0, self.count_members(household_id))
        self.commit()

        self.audit(actor, f"added {resident.first_name} {resident.last_name} to household")
        return {
            "id": member.id,
            "resident_id": resident.id,
            "first_name": resident.first_name,
            "last_name": resident.last_name,
            "relation_to_head": member.relation_to_head,
        }

    def remove_member(self, household_id: int, member_id: int, actor: Optional[Identity] = None) -> None:
        """
        Remove a member from a household.

        The last remaining member cannot be removed; the household has to be
        deleted instead.
        """
        member = self.db.query(HouseholdMember).filter(
            HouseholdMember.id == member_id,
            HouseholdMember.household_id == household_id,
        ).first()
        if member is None:
            raise NotFound("Household member not found or does not belong to this household.")

        if self.count_members(household_id) <= 1:
            raise Conflict(
                "Cannot remove the last member from a household. Delete the household instead.",
                status_code=400,
            )

        resident = member.resident
        household = member.household
        self.db.delete(member)
        self.db.flush()

        household.num_members = self.count_members(household_id)
        self.commit()

        self.audit(actor, f"removed {resident.first_name} {resident.last_name} from household")

    # ------------------------------------------------------------------
    # Composite creation
    # ------------------------------------------------------------------

    def create_with_residents(self, data: Dict[str, Any], actor: Optional[Identity] = None) -> Dict[str, Any]:
        """
        Create a household together with its initial residents atomically.

        All input is validated first; the inserts then run in a single
        transaction that is rolled back entirely if any statement fails.
        """
        household_values = validate_household_fields(data)
        residents_in: List[Dict[str, Any]] = data.get("residents") or []
        if not residents_in:
            raise ValidationError("At least one resident is required.")

        prepared = []
        for index, resident_data in enumerate(residents_in, start=1):
            try:
                values = validate_resident_fields(
                    resident_data, default_address=household_values["address"]
                )
            except ValidationError as e:
                raise ValidationError(f"Resident #{index}: {e.message}")
            relation = resident_data.get("relation_to_head")
            prepared.append((values, relation if relation in RELATION_CHOICES else None))

        requested = data.get("num_members")
        num_members = max(requested, len(prepared)) if requested else len(prepared)

        created: List[Resident] = []
        index = 0
        try:
            household = Household(**household_values, num_members=num_members)
            self.db.add(household)
            self.db.flush()

            for index, (values, relation) in enumerate(prepared, start=1):
                resident = Resident(**values)
                self.db.add(resident)
                self.db.flush()
                self.db.add(HouseholdMember(
                    household_id=household.id,
                    resident_id=resident.id,
                    relation_to_head=relation,
                ))
                self.db.flush()
                created.append(resident)

            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Household creation rolled back at resident #{index}: {e}")
            raise Conflict(f"Resident #{index} could not be saved; no records were created.", status_code=400)
        except Exception:
            self.db.rollback()
            logger.error("Household creation rolled back", exc_info=True)
            raise

        for resident in created:
            self.db.refresh(resident)

        self.audit(
            actor,
            f'created household "{household.household_name}" with {len(created)} resident(s)',
        )
        return {
            "household": self.get_household(household.id),
            "residents": created,
        }
