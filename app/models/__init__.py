"""
Models package initialization.
"""
from app.models.user import User
from app.models.resident import Resident
from app.models.household import Household, HouseholdMember
from app.models.incident import Incident
from app.models.service import Service, ServiceBeneficiary
from app.models.certificate import Certificate
from app.models.official import Official
from app.models.barangay_profile import BarangayProfile
from app.models.history_log import HistoryLog

__all__ = [
    "User",
    "Resident",
    "Household",
    "HouseholdMember",
    "Incident",
    "Service",
    "ServiceBeneficiary",
    "Certificate",
    "Official",
    "BarangayProfile",
    "HistoryLog",
]
