"""Event model definition."""

from typing import Dict, Any
from sqlalchemy import Column, Integer, String, Text, BigInteger

from .base import Base
from .types import UtcDateTime
from ..utils.timezone import now_utc

class Event(Base):
    """
    Event registered by an administrator.

    Fields:
        event_id: Unique identifier (auto-generated)
        title: Event title
        description: Free-form description
        event_type: Kind of event (e.g. 'networking', 'webinar')
        mode_of_event: 'online' or 'offline'
        location: Where the event takes place
        event_date_time: When the event is scheduled
        created_at: When the event was registered; drives news feed ordering
        updated_at: When the event was last modified
    """
    __tablename__ = 'events'

    event_id = Column(BigInteger().with_variant(Integer, 'sqlite'), primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default='')
    event_type = Column(String, nullable=False, default='')
    mode_of_event = Column(String, nullable=False, default='')
    location = Column(String, nullable=False, default='')
    event_date_time = Column(UtcDateTime(), nullable=False)
    created_at = Column(UtcDateTime(), nullable=False, default=now_utc)
    updated_at = Column(UtcDateTime(), default=now_utc, onupdate=now_utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'event_id': self.event_id,
            'title': self.title,
            'description': self.description,
            'event_type': self.event_type,
            'mode_of_event': self.mode_of_event,
            'location': self.location,
            'event_date_time': self.event_date_time,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }

    def __str__(self) -> str:
        """String representation."""
        return f"Event(event_id={self.event_id}, title={self.title}, event_date_time={self.event_date_time})"
