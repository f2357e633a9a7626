"""
In-process event bus.

Services publish events after their transaction has committed; subscribers
(the audit log writer) run afterwards and can never fail the operation that
emitted the event.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List, Optional, Type

from app.schemas.auth import Identity
from app.utils.date_utils import utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuditEvent:
    """A mutating operation that should appear in the history log."""
    actor: Optional[Identity]
    action: str
    occurred_at: datetime = field(default_factory=utc_now)


class EventBus:
    """
    Simple synchronous publish/subscribe bus.

    Handler errors are logged and swallowed.
    """

    def __init__(self):
        self._handlers: Dict[type, List[Callable]] = {}

    def subscribe(self, event_type: Type, handler: Callable) -> None:
        self._handlers.setdefault(event_type, []).append(handler)
        logger.debug("Subscribed %s to %s", getattr(handler, "__name__", handler), event_type.__name__)

    def unsubscribe(self, event_type: Type, handler: Callable) -> bool:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def publish(self, event) -> None:
        for handler in list(self._handlers.get(type(event), [])):
            try:
                handler(event)
            except Exception as e:
                logger.error("Error in event handler for %s: %s", type(event).__name__, e, exc_info=True)

    def clear(self) -> None:
        self._handlers.clear()


# Process-wide bus
event_bus = EventBus()
