"""
Resident SQLAlchemy model.
"""
from sqlalchemy import Column, Integer, String, Date, Boolean, DateTime, Index, func
from app.database import Base


class Resident(Base):
    """
    Residents table model.

    ``age`` is a cached derivative of ``birthdate``; it is recomputed on
    every write and repaired on every read that returns the row.
    """
    __tablename__ = "residents"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # Name
    last_name = Column(String(100), nullable=False)
    first_name = Column(String(100), nullable=False)
    middle_name = Column(String(100))
    suffix = Column(String(50))
    nickname = Column(String(50))

    # Demographics
    sex = Column(String(10), nullable=False)
    birthdate = Column(Date)
    age = Column(Integer)
    civil_status = Column(String(50))
    employment_status = Column(String(50))
    registered_voter = Column(String(10))
    resident_status = Column(String(50), nullable=False, default="Resident")
    is_senior_citizen = Column(Boolean, nullable=False, default=False)
    is_pwd = Column(Boolean, nullable=False, default=False)

    # Contact
    contact_no = Column(String(50))
    address = Column(String(255))

    created_at = Column(DateTime, server_default=func.now())

    __table_args__ = (
        Index('idx_resident_name', 'last_name', 'first_name'),
    )

    def __repr__(self):
        return f"<Resident(id={self.id}, name={self.first_name} {self.last_name})>"

    @property
    def display_name(self) -> str:
        """First name, middle initial and last name, e.g. ``Juan D. Cruz``."""
        middle = f"{self.middle_name[0]}." if self.middle_name else ""
        return " ".join(part for part in (self.first_name, middle, self.last_name) if part)
