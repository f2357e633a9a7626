"""
History log (audit trail) SQLAlchemy model.
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, Index, func
from app.database import Base


class HistoryLog(Base):
    """
    History logs table model.

    Append-only; ``action`` holds the formatted sentence shown to users.
    ``user_id`` is kept without a foreign key so log rows outlive accounts.
    """
    __tablename__ = "history_logs"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer)
    user_name = Column(String(100), nullable=False)
    user_role = Column(String(100))
    action = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())

    __table_args__ = (
        Index('idx_history_created_at', 'created_at'),
    )

    def __repr__(self):
        return f"<HistoryLog(id={self.id}, user_name={self.user_name})>"
