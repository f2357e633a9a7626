"""
Schemas package initialization.
"""
from app.schemas.common import (
    RequestBody,
    MessageResponse,
    HealthResponse,
)
from app.schemas.auth import (
    Identity,
    RegisterRequest,
    LoginRequest,
    LoginResponse,
    UserOut,
)
from app.schemas.resident import (
    ResidentCreate,
    ResidentUpdate,
    ResidentOut,
)
from app.schemas.household import (
    HouseholdCreate,
    HouseholdUpdate,
    HouseholdOut,
    HouseholdResidentIn,
    HouseholdWithResidentsCreate,
    HouseholdWithResidentsOut,
    MemberCreate,
    MemberOut,
)
from app.schemas.incident import (
    IncidentCreate,
    IncidentUpdate,
    IncidentOut,
)
from app.schemas.service import (
    ServiceCreate,
    ServiceUpdate,
    ServiceOut,
    BeneficiaryCreate,
    BeneficiaryOut,
)
from app.schemas.certificate import (
    CertificateCreate,
    CertificateOut,
    CertificateWithResidentOut,
)
from app.schemas.official import OfficialOut
from app.schemas.barangay_profile import (
    BarangayProfileUpdate,
    BarangayProfileOut,
)
from app.schemas.history_log import (
    HistoryLogCreate,
    HistoryLogOut,
    HistoryLogTableStatus,
)

__all__ = [
    # Common
    "RequestBody",
    "MessageResponse",
    "HealthResponse",
    # Auth
    "Identity",
    "RegisterRequest",
    "LoginRequest",
    "LoginResponse",
    "UserOut",
    # Residents
    "ResidentCreate",
    "ResidentUpdate",
    "ResidentOut",
    # Households
    "HouseholdCreate",
    "HouseholdUpdate",
    "HouseholdOut",
    "HouseholdResidentIn",
    "HouseholdWithResidentsCreate",
    "HouseholdWithResidentsOut",
    "MemberCreate",
    "MemberOut",
    # Incidents
    "IncidentCreate",
    "IncidentUpdate",
    "IncidentOut",
    # Services
    "ServiceCreate",
    "ServiceUpdate",
    "ServiceOut",
    "BeneficiaryCreate",
    "BeneficiaryOut",
    # Certificates
    "CertificateCreate",
    "CertificateOut",
    "CertificateWithResidentOut",
    # Officials
    "OfficialOut",
    # Barangay profile
    "BarangayProfileUpdate",
    "BarangayProfileOut",
    # History logs
    "HistoryLogCreate",
    "HistoryLogOut",
    "HistoryLogTableStatus",
]
