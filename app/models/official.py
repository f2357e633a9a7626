"""
Barangay official SQLAlchemy model.
"""
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey
from app.database import Base


class Official(Base):
    """
    Officials table model.

    ``signature_path`` and ``picture_path`` point at uploaded files kept
    outside the database. ``user_id`` optionally links the official to the
    account they sign in with.
    """
    __tablename__ = "officials"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    full_name = Column(String(100), nullable=False, index=True)
    position = Column(String(100), nullable=False)
    order_no = Column(Integer, nullable=False, default=0)
    is_captain = Column(Boolean, nullable=False, default=False)
    is_secretary = Column(Boolean, nullable=False, default=False)
    signature_path = Column(String(255))
    picture_path = Column(String(255))
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), index=True)

    def __repr__(self):
        return f"<Official(id={self.id}, name={self.full_name}, position={self.position})>"
