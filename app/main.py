"""
FastAPI application entry point.

Barangay Records System - residents, households, incidents, social
services, certificates and officials of a barangay, with an audit trail
of every change.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from app.config import settings, ensure_directories
from app.database import SessionLocal, check_connection, init_db
from app.events import AuditEvent, event_bus
from app.exceptions import register_exception_handlers
from app.schemas.common import HealthResponse
from app.routers import (
    auth,
    residents,
    households,
    incidents,
    services,
    certificates,
    barangay_profile,
    officials,
    history_logs,
)
from app.services.audit_log import AuditLogWriter
from app.utils.uploads import UPLOAD_URL_PREFIX

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
    **Barangay Records System API**

    Civil records for a barangay office.

    ## Key Features

    * **Residents**: Resident registry with automatically maintained ages
    * **Households**: Households, membership and atomic household+residents creation
    * **Incidents**: Blotter of incidents between residents
    * **Services**: Social service programs and their beneficiaries
    * **Certificates**: Log of released residency, clearance and indigency certificates
    * **Officials**: Barangay officials with signature and picture uploads
    * **History Logs**: Who did what, and when

    Every mutating endpoint requires a bearer token from `/api/auth/login`.
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Audit trail is written after each committed change
event_bus.subscribe(AuditEvent, AuditLogWriter(SessionLocal).handle)


# Startup event
@app.on_event("startup")
async def startup_event():
    """Initialize application on startup."""
    ensure_directories()

    # Initialize database (create tables if not exist)
    try:
        init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.warning(f"Database initialization warning: {e}")


# Uploaded signatures and pictures
app.mount(
    UPLOAD_URL_PREFIX,
    StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
    name="uploads",
)

# Include routers with prefixes
app.include_router(
    auth.router,
    prefix=f"{settings.API_PREFIX}/auth",
    tags=["Auth"]
)
app.include_router(
    residents.router,
    prefix=f"{settings.API_PREFIX}/residents",
    tags=["Residents"]
)
app.include_router(
    households.router,
    prefix=f"{settings.API_PREFIX}/households",
    tags=["Households"]
)
app.include_router(
    households.composite_router,
    prefix=f"{settings.API_PREFIX}/households-with-residents",
    tags=["Households"]
)
app.include_router(
    incidents.router,
    prefix=f"{settings.API_PREFIX}/incidents",
    tags=["Incidents"]
)
app.include_router(
    services.router,
    prefix=f"{settings.API_PREFIX}/services",
    tags=["Services"]
)
app.include_router(
    certificates.router,
    prefix=f"{settings.API_PREFIX}/certificates",
    tags=["Certificates"]
)
app.include_router(
    barangay_profile.router,
    prefix=f"{settings.API_PREFIX}/barangay-profile",
    tags=["Barangay Profile"]
)
app.include_router(
    officials.router,
    prefix=f"{settings.API_PREFIX}/officials",
    tags=["Officials"]
)
app.include_router(
    history_logs.router,
    prefix=f"{settings.API_PREFIX}/history-logs",
    tags=["History Logs"]
)


# Root endpoint
@app.get("/", tags=["Root"], response_class=PlainTextResponse)
def root():
    return "Barangay System API running..."


# Health check
@app.get(f"{settings.API_PREFIX}/health", tags=["Health"], response_model=HealthResponse)
def health_check():
    """Health check endpoint."""
    db_status = check_connection()
    if db_status != "healthy":
        logger.error(f"Health check failed: {db_status}")

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "version": settings.VERSION,
        "database": db_status
    }
