"""
Input sanitizing and validation helpers shared by the services.

Every helper raises ``ValidationError`` with a message that names the rule
that was violated.
"""
from typing import Iterable, Optional, Sequence

from app.exceptions import ValidationError
from app.utils.constants import MAX_LENGTHS, FIELD_LABELS


def clean_text(value) -> Optional[str]:
    """Trim a free-text value; empty-after-trim becomes None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def field_label(field: str) -> str:
    return FIELD_LABELS.get(field, field.replace("_", " ").capitalize())


def _join_names(fields: Sequence[str]) -> str:
    if len(fields) == 1:
        return fields[0]
    if len(fields) == 2:
        return f"{fields[0]} and {fields[1]}"
    return f"{', '.join(fields[:-1])}, and {fields[-1]}"


def require(values: dict, fields: Sequence[str], suffix: str = ".") -> None:
    """
    Ensure every field in ``fields`` has a non-empty value.

    The message lists all required fields, e.g.
    ``"last_name, first_name, and sex are required."``
    """
    if any(values.get(f) in (None, "") for f in fields):
        verb = "is" if len(fields) == 1 else "are"
        raise ValidationError(f"{_join_names(fields)} {verb} required{suffix}")


def check_length(field: str, value: Optional[str], limit: Optional[int] = None) -> Optional[str]:
    """Enforce the server-side length ceiling for ``field``."""
    limit = limit or MAX_LENGTHS.get(field)
    if value is not None and limit is not None and len(value) > limit:
        raise ValidationError(f"{field_label(field)} must be {limit} characters or less.")
    return value


def check_choice(field: str, value: Optional[str], choices: Iterable[str], message: Optional[str] = None) -> Optional[str]:
    """Validate ``value`` against a fixed allowed set (None passes)."""
    choices = list(choices)
    if value is not None and value not in choices:
        raise ValidationError(message or f"{field} must be one of: {', '.join(choices)}")
    return value


def clean_fields(values: dict, fields: Iterable[str]) -> dict:
    """Trim and length-check each named field, returning the cleaned values."""
    cleaned = {}
    for field in fields:
        cleaned[field] = check_length(field, clean_text(values.get(field)))
    return cleaned


def parse_flag(value) -> bool:
    """Interpret checkbox-style values (``"1"``, ``"true"``, ``"on"``, ``True``)."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    return str(value).strip().lower() in ("1", "true", "yes", "on")
