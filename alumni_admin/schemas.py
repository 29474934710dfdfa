"""Pydantic request bodies for the admin endpoints."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from .utils.timezone import ensure_utc

EVENT_FIELDS = {'title', 'description', 'event_type', 'mode_of_event', 'location', 'event_date_time'}


class NetworkingCreate(BaseModel):
    """Event fields plus the alumni attending it."""
    alumni_id: int
    position: str = ''
    title: str = Field(..., min_length=1, max_length=300)
    description: str = ''
    event_type: str = ''
    mode_of_event: str = ''
    location: str = ''
    event_date_time: datetime

    @field_validator('event_date_time')
    @classmethod
    def _to_utc(cls, value):
        return ensure_utc(value)

    def event_fields(self) -> Dict[str, Any]:
        return self.model_dump(include=EVENT_FIELDS)


class NetworkingUpdate(BaseModel):
    """
    Partial update of an event and its attendance row.

    Fields left out, sent as null, or sent as an empty string are treated as
    not supplied and keep their stored value.
    """
    alumni_id: int
    position: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    event_type: Optional[str] = None
    mode_of_event: Optional[str] = None
    location: Optional[str] = None
    event_date_time: Optional[datetime] = None

    @field_validator('position', 'title', 'description', 'event_type', 'mode_of_event', 'location', mode='before')
    @classmethod
    def _empty_is_missing(cls, value):
        if value == '':
            return None
        return value

    @field_validator('event_date_time')
    @classmethod
    def _to_utc(cls, value):
        return ensure_utc(value)

    def supplied_event_fields(self) -> Dict[str, Any]:
        return self.model_dump(include=EVENT_FIELDS, exclude_none=True)
