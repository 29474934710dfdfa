"""Models package initialization."""

from .base import Base
from .event import Event
from .alumni_attending import AlumniAttending
from .alumni_profile import AlumniProfile, ALUMNI_STATUS
from .achievement import Achievement
from .professional_information import ProfessionalInformation

__all__ = [
    'Base',
    'Event',
    'AlumniAttending',
    'AlumniProfile',
    'ALUMNI_STATUS',
    'Achievement',
    'ProfessionalInformation',
]
