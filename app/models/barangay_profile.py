"""
Barangay profile SQLAlchemy model (single row).
"""
from sqlalchemy import Column, Integer, String
from app.database import Base


class BarangayProfile(Base):
    __tablename__ = "barangay_profile"

    id = Column(Integer, primary_key=True, autoincrement=True)
    barangay_name = Column(String(100), nullable=False)
    municipality = Column(String(100), nullable=False)
    province = Column(String(100), nullable=False)
    place_issued = Column(String(150))

    def __repr__(self):
        return f"<BarangayProfile(id={self.id}, name={self.barangay_name})>"
