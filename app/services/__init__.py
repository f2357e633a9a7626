"""
Services package initialization.
"""
from app.services.audit_log import AuditLogWriter
from app.services.auth_service import AuthService
from app.services.barangay_profile_service import BarangayProfileService
from app.services.certificate_service import CertificateService
from app.services.history_log_service import HistoryLogService
from app.services.household_service import HouseholdService
from app.services.incident_service import IncidentService
from app.services.official_service import OfficialService
from app.services.resident_service import ResidentService
from app.services.service_program import ServiceProgramService

__all__ = [
    "AuditLogWriter",
    "AuthService",
    "BarangayProfileService",
    "CertificateService",
    "HistoryLogService",
    "HouseholdService",
    "IncidentService",
    "OfficialService",
    "ResidentService",
    "ServiceProgramService",
]
