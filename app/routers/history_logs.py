"""
History log (audit trail) API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.dependencies import get_current_user
from app.schemas.auth import Identity
from app.schemas.history_log import HistoryLogCreate, HistoryLogOut, HistoryLogTableStatus
from app.services.history_log_service import HistoryLogService

router = APIRouter()


@router.get("/test", response_model=HistoryLogTableStatus)
def check_history_logs_table(
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    """Report whether the history_logs table has been migrated."""
    return HistoryLogService(db).check_table()


@router.get("", response_model=List[HistoryLogOut])
def list_history_logs(
    limit: int = Query(settings.DEFAULT_LOG_LIMIT, ge=1, le=settings.MAX_LOG_LIMIT),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    """
    Audit entries, newest first.

    - **limit**: maximum rows to return
    - **offset**: rows to skip
    """
    return HistoryLogService(db).list_logs(limit=limit, offset=offset)


@router.post("", response_model=HistoryLogOut, status_code=status.HTTP_201_CREATED)
def create_history_log(
    body: HistoryLogCreate,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    """Append an entry exactly as given, attributed to the caller."""
    return HistoryLogService(db).create_log(body.model_dump(), current_user)
