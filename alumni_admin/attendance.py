"""Creating, updating and removing alumni attendance for events."""

import logging
from typing import Tuple

from sqlalchemy.orm import Session

from . import accessors
from .errors import NotFoundError
from .models import Event, AlumniAttending
from .schemas import NetworkingCreate, NetworkingUpdate

logger = logging.getLogger(__name__)

def register(session: Session, payload: NetworkingCreate) -> Tuple[Event, AlumniAttending]:
    """
    Create an event together with the alumni attending it.

    Both rows are written in the caller's session, so they commit or roll
    back as one unit when the session scope exits.
    """
    event = accessors.create_event(session, **payload.event_fields())
    attendance = accessors.create_attendance(
        session,
        event_id=event.event_id,
        alumni_id=payload.alumni_id,
        position=payload.position,
    )
    logger.info(f"Registered event {event.event_id} with alumni {payload.alumni_id} attending")
    return event, attendance

def upsert_by_event(session: Session, event_id: int, payload: NetworkingUpdate) -> Tuple[Event, AlumniAttending]:
    """
    Apply a partial update to an event and create or update its attendance row.

    Raises:
        NotFoundError: If the event does not exist
    """
    event = accessors.get_event(session, event_id)

    for field, value in payload.supplied_event_fields().items():
        setattr(event, field, value)

    attendance = accessors.find_attendance(session, event.event_id, payload.alumni_id)
    if attendance is None:
        attendance = accessors.create_attendance(
            session,
            event_id=event.event_id,
            alumni_id=payload.alumni_id,
            position=payload.position or '',
        )
        logger.info(f"Added alumni {payload.alumni_id} to event {event.event_id}")
    elif payload.position is not None:
        attendance.position = payload.position

    session.flush()
    return event, attendance

def delete(session: Session, alumni_id: int, event_id: int) -> None:
    """
    Remove one attendance row; the event itself stays.

    Raises:
        NotFoundError: If there is no attendance row for the pair
    """
    removed = accessors.delete_attendance(session, event_id=event_id, alumni_id=alumni_id)
    if removed == 0:
        raise NotFoundError("Alumni attending record not found")
    logger.info(f"Removed alumni {alumni_id} from event {event_id}")
