"""
Common Pydantic schemas shared across endpoints.
"""
from pydantic import BaseModel, BeforeValidator
from typing import Annotated, Optional
from datetime import date

from app.utils.date_utils import parse_date_string


def _blank_to_none(value):
    """Forms submit empty inputs as ``""``; treat them as absent."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _to_date(value):
    """Accept ISO timestamps as well as plain dates; unparseable text is left for pydantic to reject."""
    value = _blank_to_none(value)
    if isinstance(value, str):
        return parse_date_string(value) or value
    return value


OptionalDate = Annotated[Optional[date], BeforeValidator(_to_date)]
OptionalInt = Annotated[Optional[int], BeforeValidator(_blank_to_none)]


class RequestBody(BaseModel):
    """Base for JSON request bodies; unknown fields are rejected."""

    class Config:
        extra = "forbid"


class MessageResponse(BaseModel):
    """Plain confirmation message."""
    message: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    database: str
