"""Read-only composite queries over profiles, attendance and history."""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from . import accessors
from .errors import NotFoundError
from .models import (
    ALUMNI_STATUS,
    Event,
    AlumniAttending,
    AlumniProfile,
    Achievement,
    ProfessionalInformation,
)
from .utils.timezone import ensure_utc

_ONGOING = datetime.max.replace(tzinfo=timezone.utc)

_ROSTER_COLUMNS = (
    AlumniProfile.first_name,
    AlumniProfile.last_name,
    AlumniProfile.alumni_id,
    AlumniAttending.position,
    AlumniAttending.attend_id,
    Event.event_id,
    Event.title,
    Event.event_date_time,
    Event.location,
)

def roster(session: Session, alumni_id: Optional[int] = None) -> List[Dict[str, Any]]:
    """
    Alumni joined with the events they attend.

    Without a filter only profiles with status 'alumni' are listed. With an
    alumni_id the rows for that profile are returned whatever its status.

    Raises:
        NotFoundError: If alumni_id is given and has no attendance rows
    """
    query = (
        select(*_ROSTER_COLUMNS)
        .select_from(AlumniProfile)
        .join(AlumniAttending, AlumniProfile.alumni_id == AlumniAttending.alumni_id)
        .join(Event, AlumniAttending.event_id == Event.event_id)
    )
    if alumni_id is None:
        query = query.where(AlumniProfile.status == ALUMNI_STATUS)
    else:
        query = query.where(AlumniProfile.alumni_id == alumni_id)

    rows = [dict(row._mapping) for row in session.execute(query)]
    if alumni_id is not None and not rows:
        raise NotFoundError("No attending records found for the given alumni ID")
    return rows

def _end_key(info: ProfessionalInformation) -> datetime:
    if info.end_date is None:
        return _ONGOING
    return ensure_utc(info.end_date)

def current_company(history: Iterable[ProfessionalInformation]) -> Optional[ProfessionalInformation]:
    """
    The record with the latest end date, or None for an empty history.

    An open-ended record (no end date) is still ongoing and counts as the
    latest. On equal end dates the first record wins.
    """
    current = None
    for info in history:
        if current is None or _end_key(info) > _end_key(current):
            current = info
    return current

def directory(session: Session) -> List[Dict[str, Any]]:
    """Alumni with contact details and their current company."""
    profiles = session.scalars(
        select(AlumniProfile)
        .where(AlumniProfile.status == ALUMNI_STATUS)
        .options(selectinload(AlumniProfile.professional_information))
    )

    response = []
    for profile in profiles:
        company = current_company(profile.professional_information)
        response.append({
            'alumni_id': profile.alumni_id,
            'full_name': profile.full_name,
            'batch_year': profile.batch_year,
            'branch': profile.branch,
            'email': profile.email,
            'mobile_no': profile.mobile_no,
            'current_company': company.to_dict() if company else None,
        })
    return response

def profile_with_history(session: Session, alumni_id: int) -> Dict[str, Any]:
    profile = accessors.get_profile(session, alumni_id, with_history=True)
    return profile.to_dict(include_history=True)

def achievements(session: Session) -> List[Dict[str, Any]]:
    """Every achievement with its owner's name, branch and batch."""
    query = (
        select(
            Achievement.achievement_id,
            Achievement.alumni_id,
            AlumniProfile.first_name,
            AlumniProfile.last_name,
            AlumniProfile.branch,
            AlumniProfile.batch_year,
            Achievement.title,
            Achievement.description,
            Achievement.date_achieved,
            Achievement.created_at,
        )
        .join(AlumniProfile, AlumniProfile.alumni_id == Achievement.alumni_id)
    )
    return [dict(row._mapping) for row in session.execute(query)]
