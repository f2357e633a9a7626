"""
Helpers for recognising storage errors.
"""
from sqlalchemy.exc import DBAPIError

# MySQL ER_NO_SUCH_TABLE / ER_BAD_TABLE_ERROR
MISSING_TABLE_CODES = {1146, 1051}
MISSING_TABLE_MARKERS = ("doesn't exist", "Unknown table", "no such table")


def is_missing_table_error(exc: BaseException) -> bool:
    """Return True when ``exc`` reports that a table does not exist."""
    original = getattr(exc, "orig", None) if isinstance(exc, DBAPIError) else None
    if original is not None:
        args = getattr(original, "args", ())
        if args and args[0] in MISSING_TABLE_CODES:
            return True
    message = str(original or exc)
    return any(marker in message for marker in MISSING_TABLE_MARKERS)
