"""
Database connection and session management.
"""
from sqlalchemy import create_engine, event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from app.config import settings
from typing import Generator

# Database URL (MySQL or SQLite)
SQLALCHEMY_DATABASE_URL = settings.database_url

# Create engine with appropriate settings
if settings.is_mysql:
    # MySQL settings; the pool is the only shared resource between requests
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        echo=False,
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_recycle=3600,
    )
else:
    # SQLite settings
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        echo=False,
        pool_pre_ping=True,
    )

    # Enable foreign key support for SQLite
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()


# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for ORM models
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database session.
    Use with FastAPI's Depends().

    The connection goes back to the pool on every exit path; anything
    left uncommitted by a failing request is rolled back.
    """
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db():
    """Initialize database by creating all tables."""
    from app.models import (  # noqa: F401
        user, resident, household, incident, service,
        certificate, official, barangay_profile, history_log,
    )
    Base.metadata.create_all(bind=engine)


def check_connection() -> str:
    """Round-trip a trivial query; returns "healthy" or the failure text."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return "healthy"
    except SQLAlchemyError as e:
        return f"unhealthy: {str(e)}"
