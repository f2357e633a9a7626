"""
Shared plumbing for the record services.
"""
import logging
from typing import Optional, Type, TypeVar

from sqlalchemy.orm import Session

from app.database import Base
from app.events import AuditEvent, EventBus, event_bus
from app.exceptions import NotFound
from app.schemas.auth import Identity

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class RecordService:
    """
    Base class for services that own a set of tables.

    Subclasses commit their own unit of work and call ``audit`` only after
    the commit succeeded.
    """

    def __init__(self, db: Session, events: Optional[EventBus] = None):
        self.db = db
        self.events = events or event_bus

    def get_or_404(self, model: Type[ModelT], record_id: int, message: str) -> ModelT:
        record = self.db.get(model, record_id)
        if record is None:
            raise NotFound(message)
        return record

    def commit(self) -> None:
        """Commit the session, rolling back if the commit fails."""
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def audit(self, actor: Optional[Identity], action: str) -> None:
        """Emit an audit event for an operation that has already committed."""
        self.events.publish(AuditEvent(actor=actor, action=action))
