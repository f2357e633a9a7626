"""
Incident (blotter) SQLAlchemy model.
"""
from sqlalchemy import Column, Integer, String, Date, Text, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship
from app.database import Base


class Incident(Base):
    """
    Incidents table model.

    The complainant is either a registered resident or only a free-text name.
    """
    __tablename__ = "incidents"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    incident_date = Column(Date, nullable=False, index=True)
    incident_type = Column(String(100), nullable=False)
    location = Column(String(255))
    description = Column(Text)
    complainant_id = Column(Integer, ForeignKey("residents.id", ondelete="SET NULL"))
    complainant_name = Column(String(150))
    respondent_id = Column(Integer, ForeignKey("residents.id", ondelete="SET NULL"))
    status = Column(String(50), nullable=False, default="Open")
    created_at = Column(DateTime, server_default=func.now())

    complainant = relationship("Resident", foreign_keys=[complainant_id])
    respondent = relationship("Resident", foreign_keys=[respondent_id])

    def __repr__(self):
        return f"<Incident(id={self.id}, type={self.incident_type}, status={self.status})>"
