"""Achievement model."""

from typing import Dict, Any
from sqlalchemy import Column, Integer, String, Text, BigInteger, ForeignKey

from .base import Base
from .types import UtcDateTime
from ..utils.timezone import now_utc

class Achievement(Base):
    """An accomplishment recorded for an alumni."""
    __tablename__ = 'achievements'

    achievement_id = Column(BigInteger().with_variant(Integer, 'sqlite'), primary_key=True, autoincrement=True)
    alumni_id = Column(BigInteger, ForeignKey('alumni_profiles.alumni_id'), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default='')
    date_achieved = Column(UtcDateTime(), nullable=False)
    created_at = Column(UtcDateTime(), nullable=False, default=now_utc)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'achievement_id': self.achievement_id,
            'alumni_id': self.alumni_id,
            'title': self.title,
            'description': self.description,
            'date_achieved': self.date_achieved,
            'created_at': self.created_at,
        }
