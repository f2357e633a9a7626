"""
Date utility functions.
"""
from datetime import date, datetime, timezone
from typing import Optional, Union


def calculate_age(birthdate: Optional[date], today: Optional[date] = None) -> Optional[int]:
    """
    Calculate age in whole years from a birthdate.

    The year difference is decremented when the birthday has not yet
    occurred in the current year.

    Args:
        birthdate: Date of birth (None yields None)
        today: Reference date, defaults to the current date

    Returns:
        Age in years or None
    """
    if birthdate is None:
        return None
    if isinstance(birthdate, datetime):
        birthdate = birthdate.date()
    today = today or date.today()

    age = today.year - birthdate.year
    if (today.month, today.day) < (birthdate.month, birthdate.day):
        age -= 1
    return age


def parse_date_string(value: Union[str, date, None]) -> Optional[date]:
    """
    Parse a date string to a date object.
    Handles multiple formats.

    Args:
        value: Date string (or an already parsed date)

    Returns:
        Parsed date or None if empty or invalid
    """
    if value is None or isinstance(value, date):
        return value

    value = value.strip()
    if not value:
        return None

    # Browsers send ISO dates, sometimes with a time component
    formats = [
        "%Y-%m-%d",
        "%Y-%m-%dT%H:%M:%S",
        "%Y-%m-%dT%H:%M:%S.%fZ",
        "%m/%d/%Y",
        "%d-%m-%Y",
    ]

    for fmt in formats:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue

    return None


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, the form DateTime columns store."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
