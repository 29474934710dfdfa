"""Association between an alumni profile and an event."""

from typing import Dict, Any
from sqlalchemy import Column, Integer, String, BigInteger, ForeignKey, UniqueConstraint

from .base import Base
from .types import UtcDateTime
from ..utils.timezone import now_utc

class AlumniAttending(Base):
    """
    An alumni attending an event in a given role.

    (event_id, alumni_id) is unique: an alumni attends an event at most once.
    """
    __tablename__ = 'alumni_attendings'
    __table_args__ = (
        UniqueConstraint('event_id', 'alumni_id', name='uq_alumni_attendings_event_alumni'),
    )

    attend_id = Column(BigInteger().with_variant(Integer, 'sqlite'), primary_key=True, autoincrement=True)
    event_id = Column(BigInteger, ForeignKey('events.event_id'), nullable=False, index=True)
    alumni_id = Column(BigInteger, ForeignKey('alumni_profiles.alumni_id'), nullable=False, index=True)
    position = Column(String, nullable=False, default='')
    created_at = Column(UtcDateTime(), nullable=False, default=now_utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'attend_id': self.attend_id,
            'event_id': self.event_id,
            'alumni_id': self.alumni_id,
            'position': self.position,
            'created_at': self.created_at,
        }

    def __str__(self) -> str:
        return f"AlumniAttending(event_id={self.event_id}, alumni_id={self.alumni_id}, position={self.position})"
