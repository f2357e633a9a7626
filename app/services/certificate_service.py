"""
Certificate service - issuance log of residency, clearance and
indigency certificates.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from app.models.certificate import Certificate
from app.models.resident import Resident
from app.schemas.auth import Identity
from app.services.base import RecordService
from app.utils.validators import clean_fields, require

logger = logging.getLogger(__name__)

CERTIFICATE_TEXT_FIELDS = ("certificate_type", "purpose", "place_issued", "or_number")

CERTIFICATE_COLUMNS = (
    "id",
    "resident_id",
    "certificate_type",
    "purpose",
    "issue_date",
    "place_issued",
    "or_number",
    "amount",
    "created_at",
)


class CertificateService(RecordService):
    """Business logic for certificates. Certificates are append-only."""

    def __init__(self, db: Session, events=None):
        super().__init__(db, events)

    def create_certificate(self, data: Dict[str, Any], actor: Optional[Identity] = None) -> Certificate:
        values = clean_fields(data, CERTIFICATE_TEXT_FIELDS)
        values["resident_id"] = data.get("resident_id")
        values["issue_date"] = data.get("issue_date")
        require(values, ("resident_id", "certificate_type", "issue_date"))
        values["amount"] = data.get("amount")

        resident = self.get_or_404(Resident, values["resident_id"], "Resident not found.")

        certificate = Certificate(**values)
        self.db.add(certificate)
        self.commit()
        self.db.refresh(certificate)

        self.audit(actor, f"released a {certificate.certificate_type} for {resident.display_name}")
        return certificate

    def list_certificates(self) -> List[Dict[str, Any]]:
        rows = self.db.query(
            Certificate, Resident.first_name, Resident.last_name, Resident.middle_name
        ).join(
            Resident, Resident.id == Certificate.resident_id
        ).order_by(
            Certificate.issue_date.desc(), Certificate.created_at.desc(), Certificate.id.desc()
        ).all()

        results = []
        for certificate, first_name, last_name, middle_name in rows:
            data = {column: getattr(certificate, column) for column in CERTIFICATE_COLUMNS}
            data.update(first_name=first_name, last_name=last_name, middle_name=middle_name)
            results.append(data)
        return results

    def list_for_resident(self, resident_id: int) -> List[Certificate]:
        self.get_or_404(Resident, resident_id, "Resident not found.")
        return self.db.query(Certificate).filter(
            Certificate.resident_id == resident_id
        ).order_by(
            Certificate.issue_date.desc(), Certificate.created_at.desc(), Certificate.id.desc()
        ).all()
