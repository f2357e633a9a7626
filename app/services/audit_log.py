"""
Audit log writer.

Subscribed to ``AuditEvent`` on the event bus. Each event becomes one
``history_logs`` row whose action reads as a sentence, e.g.
"The Punong Barangay created a new resident: Juan Dela Cruz".
"""
import logging
from datetime import datetime
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.events import AuditEvent
from app.exceptions import HISTORY_LOGS_MIGRATION_FILE
from app.models.history_log import HistoryLog
from app.models.official import Official
from app.schemas.auth import Identity
from app.utils.constants import ADMIN_DISPLAY_TITLE, ADMIN_ROLE, TITLED_ROLE_KEYWORDS
from app.utils.date_utils import utc_now
from app.utils.db_errors import is_missing_table_error

logger = logging.getLogger(__name__)


def resolve_role(db: Session, actor: Optional[Identity]) -> Optional[str]:
    """
    Official position of the acting user, falling back to the session role.

    An official linked by ``user_id`` wins; otherwise an official whose name
    matches the user's full name (lowest ``order_no`` first).
    """
    if actor is None:
        return None
    try:
        official = db.query(Official).filter(Official.user_id == actor.id).order_by(
            Official.order_no, Official.id
        ).first()
        if official is None and actor.full_name:
            official = db.query(Official).filter(
                Official.full_name == actor.full_name
            ).order_by(Official.order_no, Official.id).first()
        if official is not None and official.position:
            return official.position
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning(f"Could not look up official position for {actor.username}: {e}")
    return actor.role


def format_action(actor: Optional[Identity], role: Optional[str], action: str) -> str:
    if actor is None:
        return f"Unknown {action}"
    if role and any(keyword in role for keyword in TITLED_ROLE_KEYWORDS):
        return f"The {role} {action}"
    if actor.role == ADMIN_ROLE:
        return f"The {ADMIN_DISPLAY_TITLE} {action}"
    return f"{actor.full_name} {action}"


class AuditLogWriter:
    """Writes audit events in their own session; never raises."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def record(
        self,
        actor: Optional[Identity],
        action: str,
        occurred_at: Optional[datetime] = None,
    ) -> Optional[HistoryLog]:
        db = self.session_factory()
        try:
            role = resolve_role(db, actor)
            log = HistoryLog(
                user_id=actor.id if actor else None,
                user_name=actor.full_name if actor else "Unknown",
                user_role=role,
                action=format_action(actor, role, action),
                created_at=occurred_at or utc_now(),
            )
            db.add(log)
            db.commit()
            return log
        except Exception as e:
            db.rollback()
            if is_missing_table_error(e):
                logger.warning(
                    f"History logs table does not exist. Please run {HISTORY_LOGS_MIGRATION_FILE}"
                )
            else:
                logger.error(f"Error logging history: {e}")
            return None
        finally:
            db.close()

    def handle(self, event: AuditEvent) -> None:
        self.record(event.actor, event.action, event.occurred_at)
