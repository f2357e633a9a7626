"""
Certificate issuance SQLAlchemy model.
"""
from sqlalchemy import Column, Integer, String, Date, Numeric, ForeignKey, DateTime, Index, func
from sqlalchemy.orm import relationship
from app.database import Base


class Certificate(Base):
    """
    Certificates table model.

    Append-only log of certificates released to residents.
    """
    __tablename__ = "certificates"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    resident_id = Column(Integer, ForeignKey("residents.id"), nullable=False, index=True)
    certificate_type = Column(String(100), nullable=False)
    purpose = Column(String(255))
    issue_date = Column(Date, nullable=False)
    place_issued = Column(String(150))
    or_number = Column(String(50))
    amount = Column(Numeric(10, 2))
    created_at = Column(DateTime, server_default=func.now())

    resident = relationship("Resident")

    __table_args__ = (
        Index('idx_cert_issue_date', 'issue_date', 'created_at'),
    )

    def __repr__(self):
        return f"<Certificate(id={self.id}, type={self.certificate_type}, resident_id={self.resident_id})>"
