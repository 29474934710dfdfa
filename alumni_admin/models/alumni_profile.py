"""Alumni profile model."""

from typing import Dict, Any
from sqlalchemy import Column, Integer, String, BigInteger
from sqlalchemy.orm import relationship

from .base import Base
from .types import UtcDateTime
from ..utils.timezone import now_utc

ALUMNI_STATUS = 'alumni'

class AlumniProfile(Base):
    """
    A graduate registered on the platform.

    Fields:
        alumni_id: Unique identifier
        first_name, last_name: Name parts
        branch: Department the alumni graduated from
        batch_year: Graduation year
        email, mobile_no: Contact fields
        status: 'alumni' for graduates, anything else for other members
        professional_information: Owned professional history
    """
    __tablename__ = 'alumni_profiles'

    alumni_id = Column(BigInteger().with_variant(Integer, 'sqlite'), primary_key=True, autoincrement=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False, default='')
    branch = Column(String, nullable=False, default='')
    batch_year = Column(Integer)
    email = Column(String, nullable=False, default='')
    mobile_no = Column(String, nullable=False, default='')
    status = Column(String, nullable=False, default=ALUMNI_STATUS, index=True)
    created_at = Column(UtcDateTime(), nullable=False, default=now_utc)

    professional_information = relationship(
        'ProfessionalInformation',
        back_populates='alumni',
        cascade='all, delete-orphan',
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self, include_history: bool = False) -> Dict[str, Any]:
        """Convert to dictionary, optionally with the professional history attached."""
        data = {
            'alumni_id': self.alumni_id,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'branch': self.branch,
            'batch_year': self.batch_year,
            'email': self.email,
            'mobile_no': self.mobile_no,
            'status': self.status,
            'created_at': self.created_at,
        }
        if include_history:
            data['professional_information'] = [
                info.to_dict() for info in self.professional_information
            ]
        return data

    def __str__(self) -> str:
        return f"AlumniProfile(alumni_id={self.alumni_id}, name={self.full_name}, status={self.status})"
