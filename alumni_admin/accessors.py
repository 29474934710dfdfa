"""Per-entity reads and writes.

Each function takes an open session from `Database.session()` and does one
thing against one table. Missing rows raise `NotFoundError`; anything the
database rejects is turned into `SessionError` by the session scope.
"""

from typing import List, Optional

from sqlalchemy import select, delete
from sqlalchemy.orm import Session, selectinload

from .errors import NotFoundError
from .models import (
    Event,
    AlumniAttending,
    AlumniProfile,
    Achievement,
    ProfessionalInformation,
)

# Events

def list_events(session: Session) -> List[Event]:
    return list(session.scalars(select(Event).order_by(Event.event_date_time)))

def get_event(session: Session, event_id: int) -> Event:
    event = session.get(Event, event_id)
    if event is None:
        raise NotFoundError("Event not found")
    return event

def create_event(session: Session, **fields) -> Event:
    event = Event(**fields)
    session.add(event)
    session.flush()
    return event

def recent_events(session: Session, limit: int) -> List[Event]:
    return list(session.scalars(
        select(Event).order_by(Event.created_at.desc()).limit(limit)
    ))

# Attendance

def find_attendance(session: Session, event_id: int, alumni_id: int) -> Optional[AlumniAttending]:
    return session.scalars(
        select(AlumniAttending).where(
            AlumniAttending.event_id == event_id,
            AlumniAttending.alumni_id == alumni_id,
        )
    ).first()

def get_attendance(session: Session, event_id: int, alumni_id: int) -> AlumniAttending:
    attendance = find_attendance(session, event_id, alumni_id)
    if attendance is None:
        raise NotFoundError("Alumni attending record not found")
    return attendance

def create_attendance(session: Session, event_id: int, alumni_id: int, position: str = '') -> AlumniAttending:
    attendance = AlumniAttending(event_id=event_id, alumni_id=alumni_id, position=position)
    session.add(attendance)
    session.flush()
    return attendance

def delete_attendance(session: Session, event_id: int, alumni_id: int) -> int:
    """Delete the attendance row for the pair and return how many rows went."""
    result = session.execute(
        delete(AlumniAttending).where(
            AlumniAttending.event_id == event_id,
            AlumniAttending.alumni_id == alumni_id,
        )
    )
    return result.rowcount

# Profiles

def find_profile(session: Session, alumni_id: int) -> Optional[AlumniProfile]:
    """Look up a profile, returning None when it does not resolve."""
    return session.get(AlumniProfile, alumni_id)

def get_profile(session: Session, alumni_id: int, with_history: bool = False) -> AlumniProfile:
    query = select(AlumniProfile).where(AlumniProfile.alumni_id == alumni_id)
    if with_history:
        query = query.options(selectinload(AlumniProfile.professional_information))
    profile = session.scalars(query).first()
    if profile is None:
        raise NotFoundError("Alumni not found")
    return profile

# Achievements and professional history

def recent_achievements(session: Session, limit: int) -> List[Achievement]:
    return list(session.scalars(
        select(Achievement).order_by(Achievement.created_at.desc()).limit(limit)
    ))

def recent_professional_information(session: Session, limit: int) -> List[ProfessionalInformation]:
    return list(session.scalars(
        select(ProfessionalInformation)
        .order_by(ProfessionalInformation.created_at.desc())
        .limit(limit)
    ))
