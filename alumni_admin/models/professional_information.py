"""Professional history model."""

from typing import Dict, Any
from sqlalchemy import Column, Integer, String, BigInteger, ForeignKey
from sqlalchemy.orm import relationship

from .base import Base
from .types import UtcDateTime
from ..utils.timezone import now_utc

class ProfessionalInformation(Base):
    """
    One job held by an alumni.

    end_date is empty while the position is ongoing.
    """
    __tablename__ = 'professional_information'

    info_id = Column(BigInteger().with_variant(Integer, 'sqlite'), primary_key=True, autoincrement=True)
    alumni_id = Column(BigInteger, ForeignKey('alumni_profiles.alumni_id'), nullable=False, index=True)
    company_name = Column(String, nullable=False)
    position = Column(String, nullable=False, default='')
    start_date = Column(UtcDateTime(), nullable=False)
    end_date = Column(UtcDateTime(), nullable=True)
    created_at = Column(UtcDateTime(), nullable=False, default=now_utc)

    alumni = relationship('AlumniProfile', back_populates='professional_information')

    def to_dict(self) -> Dict[str, Any]:
        return {
            'info_id': self.info_id,
            'alumni_id': self.alumni_id,
            'company_name': self.company_name,
            'position': self.position,
            'start_date': self.start_date,
            'end_date': self.end_date,
            'created_at': self.created_at,
        }
