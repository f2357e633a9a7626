"""
Incident service - barangay blotter records.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session, aliased

from app.models.incident import Incident
from app.models.resident import Resident
from app.schemas.auth import Identity
from app.exceptions import NotFound
from app.services.base import RecordService
from app.utils.constants import DEFAULT_INCIDENT_STATUS
from app.utils.validators import clean_fields, clean_text, require

logger = logging.getLogger(__name__)

INCIDENT_TEXT_FIELDS = ("incident_type", "location", "complainant_name", "status")

INCIDENT_COLUMNS = (
    "id",
    "incident_date",
    "incident_type",
    "location",
    "description",
    "complainant_id",
    "complainant_name",
    "respondent_id",
    "status",
    "created_at",
)


class IncidentService(RecordService):
    """Business logic for incidents."""

    def __init__(self, db: Session, events=None):
        super().__init__(db, events)

    def _validate(self, data: Dict[str, Any]) -> Dict[str, Any]:
        values = clean_fields(data, INCIDENT_TEXT_FIELDS)
        values["incident_date"] = data.get("incident_date")
        values["description"] = clean_text(data.get("description"))
        require(values, ("incident_date", "incident_type"))
        values["status"] = values["status"] or DEFAULT_INCIDENT_STATUS

        for field, label in (("complainant_id", "Complainant"), ("respondent_id", "Respondent")):
            resident_id = data.get(field) or None
            if resident_id is not None:
                self.get_or_404(Resident, resident_id, f"{label} resident not found.")
            values[field] = resident_id
        return values

    def _query(self):
        complainant = aliased(Resident)
        respondent = aliased(Resident)
        return self.db.query(
            Incident,
            complainant.first_name.label("complainant_first_name"),
            complainant.last_name.label("complainant_last_name"),
            respondent.first_name.label("respondent_first_name"),
            respondent.last_name.label("respondent_last_name"),
        ).outerjoin(
            complainant, complainant.id == Incident.complainant_id
        ).outerjoin(
            respondent, respondent.id == Incident.respondent_id
        )

    @staticmethod
    def _row_dict(row) -> Dict[str, Any]:
        incident = row[0]
        data = {column: getattr(incident, column) for column in INCIDENT_COLUMNS}
        data.update(
            complainant_first_name=row.complainant_first_name,
            complainant_last_name=row.complainant_last_name,
            respondent_first_name=row.respondent_first_name,
            respondent_last_name=row.respondent_last_name,
        )
        return data

    def list_incidents(self) -> List[Dict[str, Any]]:
        rows = self._query().order_by(Incident.incident_date.desc(), Incident.id.desc()).all()
        return [self._row_dict(row) for row in rows]

    def get_incident(self, incident_id: int) -> Dict[str, Any]:
        row = self._query().filter(Incident.id == incident_id).first()
        if row is None:
            raise NotFound("Incident not found")
        return self._row_dict(row)

    def create_incident(self, data: Dict[str, Any], actor: Optional[Identity] = None) -> Dict[str, Any]:
        values = self._validate(data)
        incident = Incident(**values)
        self.db.add(incident)
        self.commit()

        party = incident.complainant_name or ("a resident" if incident.complainant_id else "unknown")
        self.audit(actor, f"recorded a new {incident.incident_type} incident involving {party}")
        return self.get_incident(incident.id)

    def update_incident(self, incident_id: int, data: Dict[str, Any], actor: Optional[Identity] = None) -> Dict[str, Any]:
        incident = self.get_or_404(Incident, incident_id, "Incident not found")
        values = self._validate(data)
        for key, value in values.items():
            setattr(incident, key, value)
        self.commit()

        self.audit(actor, f"updated incident #{incident_id} - Status: {incident.status}")
        return self.get_incident(incident_id)

    def delete_incident(self, incident_id: int, actor: Optional[Identity] = None) -> None:
        incident = self.get_or_404(Incident, incident_id, "Incident not found")
        incident_type = incident.incident_type or "incident"
        self.db.delete(incident)
        self.commit()

        self.audit(actor, f"deleted {incident_type} incident #{incident_id}")
