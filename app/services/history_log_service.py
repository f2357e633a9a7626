"""
History log service - reading and manually appending audit entries.
"""
import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import MissingTableError
from app.models.history_log import HistoryLog
from app.schemas.auth import Identity
from app.utils.date_utils import utc_now
from app.utils.db_errors import is_missing_table_error
from app.utils.validators import require, clean_text

logger = logging.getLogger(__name__)

MISSING_TABLE_MESSAGE = "History logs table does not exist. Please run the database migration."


class HistoryLogService:

    def __init__(self, db: Session):
        self.db = db

    def _raise_if_missing_table(self, error: SQLAlchemyError) -> None:
        if is_missing_table_error(error):
            self.db.rollback()
            logger.error("History logs table does not exist. Please run migration_add_history_logs_table.sql")
            raise MissingTableError(MISSING_TABLE_MESSAGE)

    def list_logs(self, limit: int = 100, offset: int = 0) -> List[HistoryLog]:
        """Newest entries first."""
        try:
            return self.db.query(HistoryLog).order_by(
                HistoryLog.created_at.desc(), HistoryLog.id.desc()
            ).limit(limit).offset(offset).all()
        except SQLAlchemyError as e:
            self._raise_if_missing_table(e)
            raise

    def create_log(self, data: dict, actor: Optional[Identity]) -> HistoryLog:
        """Store an action verbatim under the caller's session identity."""
        action = clean_text(data.get("action"))
        require({"action": action}, ("action",))

        log = HistoryLog(
            user_id=actor.id if actor else None,
            user_name=actor.full_name if actor else "Unknown",
            user_role=actor.role if actor else None,
            action=action,
            created_at=utc_now(),
        )
        try:
            self.db.add(log)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            self._raise_if_missing_table(e)
            raise
        self.db.refresh(log)
        return log

    def check_table(self) -> dict:
        """Health check for the audit table."""
        try:
            self.db.query(func.count(HistoryLog.id)).scalar()
        except SQLAlchemyError as e:
            if is_missing_table_error(e):
                self.db.rollback()
                raise MissingTableError(
                    "History logs table does not exist",
                    error="Please run migration_add_history_logs_table.sql",
                    report_table_state=True,
                )
            raise
        return {
            "message": "History logs endpoint is accessible",
            "tableExists": True,
            "status": "OK",
        }
