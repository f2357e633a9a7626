"""
Social service and beneficiary SQLAlchemy models.
"""
from sqlalchemy import Column, Integer, String, Date, Text, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship
from app.database import Base


class Service(Base):
    """
    Services table model (relief distributions, medical missions, ...).

    Cannot be deleted while it still has beneficiaries.
    """
    __tablename__ = "services"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    service_name = Column(String(150), nullable=False)
    description = Column(Text)
    service_date = Column(Date, index=True)
    location = Column(String(255))
    created_at = Column(DateTime, server_default=func.now())

    beneficiaries = relationship("ServiceBeneficiary", back_populates="service")

    def __repr__(self):
        return f"<Service(id={self.id}, name={self.service_name})>"


class ServiceBeneficiary(Base):
    """A resident who received a service."""
    __tablename__ = "service_beneficiaries"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    service_id = Column(Integer, ForeignKey("services.id"), nullable=False, index=True)
    resident_id = Column(Integer, ForeignKey("residents.id"), nullable=False, index=True)
    notes = Column(Text)

    service = relationship("Service", back_populates="beneficiaries")
    resident = relationship("Resident")

    def __repr__(self):
        return f"<ServiceBeneficiary(id={self.id}, service_id={self.service_id}, resident_id={self.resident_id})>"
