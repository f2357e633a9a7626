"""
Social service program service - services and their beneficiaries.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.exceptions import Conflict, NotFound, ValidationError
from app.models.resident import Resident
from app.models.service import Service, ServiceBeneficiary
from app.schemas.auth import Identity
from app.services.base import RecordService
from app.utils.validators import clean_fields, clean_text, require

logger = logging.getLogger(__name__)

SERVICE_TEXT_FIELDS = ("service_name", "location")


class ServiceProgramService(RecordService):
    """Business logic for social services and beneficiaries."""

    def __init__(self, db: Session, events=None):
        super().__init__(db, events)

    def _validate(self, data: Dict[str, Any]) -> Dict[str, Any]:
        values = clean_fields(data, SERVICE_TEXT_FIELDS)
        require(values, ("service_name",))
        values["description"] = clean_text(data.get("description"))
        values["service_date"] = data.get("service_date")
        return values

    def _with_beneficiary_counts(self):
        return self.db.query(
            Service,
            func.count(ServiceBeneficiary.id).label("beneficiary_count"),
        ).outerjoin(
            ServiceBeneficiary, ServiceBeneficiary.service_id == Service.id
        ).group_by(Service.id)

    @staticmethod
    def to_dict(service: Service, beneficiary_count: int) -> Dict[str, Any]:
        return {
            "id": service.id,
            "service_name": service.service_name,
            "description": service.description,
            "service_date": service.service_date,
            "location": service.location,
            "beneficiary_count": beneficiary_count,
            "created_at": service.created_at,
        }

    def count_beneficiaries(self, service_id: int) -> int:
        return self.db.query(func.count(ServiceBeneficiary.id)).filter(
            ServiceBeneficiary.service_id == service_id
        ).scalar() or 0

    def list_services(self) -> List[Dict[str, Any]]:
        rows = self._with_beneficiary_counts().order_by(
            Service.service_date.desc(), Service.service_name
        ).all()
        return [self.to_dict(service, count) for service, count in rows]

    def get_service(self, service_id: int) -> Dict[str, Any]:
        row = self._with_beneficiary_counts().filter(Service.id == service_id).first()
        if row is None:
            raise NotFound("Service not found")
        return self.to_dict(*row)

    def create_service(self, data: Dict[str, Any], actor: Optional[Identity] = None) -> Dict[str, Any]:
        service = Service(**self._validate(data))
        self.db.add(service)
        self.commit()

        self.audit(actor, f"created a new service: {service.service_name}")
        return self.get_service(service.id)

    def update_service(self, service_id: int, data: Dict[str, Any], actor: Optional[Identity] = None) -> Dict[str, Any]:
        service = self.get_or_404(Service, service_id, "Service not found")
        for key, value in self._validate(data).items():
            setattr(service, key, value)
        self.commit()

        self.audit(actor, f"updated service: {service.service_name}")
        return self.get_service(service_id)

    def delete_service(self, service_id: int, actor: Optional[Identity] = None) -> None:
        """Delete a service; refused while it still has beneficiaries."""
        service = self.get_or_404(Service, service_id, "Service not found")
        if self.count_beneficiaries(service_id) > 0:
            raise Conflict(
                "Cannot delete service. It has beneficiaries. Please remove them first.",
                status_code=400,
            )
        name = service.service_name
        self.db.delete(service)
        self.commit()

        self.audit(actor, f"deleted service: {name}")

    # ------------------------------------------------------------------
    # Beneficiaries
    # ------------------------------------------------------------------

    @staticmethod
    def _beneficiary_dict(beneficiary: ServiceBeneficiary, resident: Resident) -> Dict[str, Any]:
        return {
            "id": beneficiary.id,
            "resident_id": resident.id,
            "first_name": resident.first_name,
            "last_name": resident.last_name,
            "notes": beneficiary.notes,
        }

    def list_beneficiaries(self, service_id: int) -> List[Dict[str, Any]]:
        self.get_or_404(Service, service_id, "Service not found")
        rows = self.db.query(ServiceBeneficiary, Resident).join(
            Resident, Resident.id == ServiceBeneficiary.resident_id
        ).filter(
            ServiceBeneficiary.service_id == service_id
        ).order_by(Resident.last_name, Resident.first_name).all()
        return [self._beneficiary_dict(b, r) for b, r in rows]

    def add_beneficiary(self, service_id: int, data: Dict[str, Any], actor: Optional[Identity] = None) -> Dict[str, Any]:
        resident_id = data.get("resident_id")
        if not resident_id:
            raise ValidationError("resident_id is required for beneficiary.")
        self.get_or_404(Service, service_id, "Service not found")
        resident = self.get_or_404(Resident, resident_id, "Resident not found.")

        beneficiary = ServiceBeneficiary(
            service_id=service_id,
            resident_id=resident_id,
            notes=clean_text(data.get("notes")),
        )
        self.db.add(beneficiary)
        self.commit()

        self.audit(actor, f"added {resident.first_name} {resident.last_name} as beneficiary to service")
        return self._beneficiary_dict(beneficiary, resident)

    def remove_beneficiary(self, service_id: int, beneficiary_id: int, actor: Optional[Identity] = None) -> None:
        beneficiary = self.db.query(ServiceBeneficiary).filter(
            ServiceBeneficiary.id == beneficiary_id,
            ServiceBeneficiary.service_id == service_id,
        ).first()
        if beneficiary is None:
            raise NotFound("Beneficiary not found or does not belong to this service.")

        resident = beneficiary.resident
        self.db.delete(beneficiary)
        self.commit()

        self.audit(actor, f"removed {resident.first_name} {resident.last_name} as beneficiary from service")
