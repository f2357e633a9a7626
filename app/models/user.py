"""
User SQLAlchemy model.
Accounts that can sign in and perform mutating operations.
"""
from sqlalchemy import Column, Integer, String, DateTime, func
from app.database import Base


class User(Base):
    """
    Users table model.

    Only the bcrypt hash of the password is stored.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(100), nullable=False)
    role = Column(String(50), nullable=False, default="Staff")
    created_at = Column(DateTime, server_default=func.now())

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username}, role={self.role})>"
