"""
Routers package initialization.
"""
from app.routers import auth
from app.routers import residents
from app.routers import households
from app.routers import incidents
from app.routers import services
from app.routers import certificates
from app.routers import barangay_profile
from app.routers import officials
from app.routers import history_logs

__all__ = [
    "auth",
    "residents",
    "households",
    "incidents",
    "services",
    "certificates",
    "barangay_profile",
    "officials",
    "history_logs",
]
