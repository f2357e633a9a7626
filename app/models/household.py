"""
Household and household membership SQLAlchemy models.
"""
from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint, DateTime, func
from sqlalchemy.orm import relationship
from app.database import Base


class Household(Base):
    """
    Households table model.

    ``num_members`` is a denormalized counter that may exceed the number of
    registered members but is never left below it.
    """
    __tablename__ = "households"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    household_name = Column(String(100), nullable=False, index=True)
    address = Column(String(255), nullable=False)
    purok = Column(String(100))
    num_members = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime, server_default=func.now())

    members = relationship(
        "HouseholdMember",
        back_populates="household",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<Household(id={self.id}, name={self.household_name}, num_members={self.num_members})>"


class HouseholdMember(Base):
    """Links a resident to a household with their relation to the head."""
    __tablename__ = "household_members"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    household_id = Column(Integer, ForeignKey("households.id", ondelete="CASCADE"), nullable=False, index=True)
    resident_id = Column(Integer, ForeignKey("residents.id"), nullable=False, index=True)
    relation_to_head = Column(String(20))

    household = relationship("Household", back_populates="members")
    resident = relationship("Resident")

    __table_args__ = (
        UniqueConstraint('household_id', 'resident_id', name='uq_household_resident'),
    )

    def __repr__(self):
        return f"<HouseholdMember(id={self.id}, household_id={self.household_id}, resident_id={self.resident_id})>"
