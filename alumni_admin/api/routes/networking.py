"""Routes for registering events with the alumni attending them."""

import logging
from fastapi import APIRouter, HTTPException, Depends

from ...db import Database, DatabaseError
from ...errors import NotFoundError
from ...schemas import NetworkingCreate, NetworkingUpdate
from ... import attendance
from ..dependencies import get_database

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/networking", tags=["networking"])

@router.post("", status_code=201)
async def create_networking(payload: NetworkingCreate, database: Database = Depends(get_database)):
    """
    Create an event and the alumni attending it.
    Either both records are stored or neither is.
    """
    try:
        with database.session() as session:
            event, attending = attendance.register(session, payload)
            result = {
                "message": "Event and AlumniAttending created successfully",
                "event": event.to_dict(),
                "alumni_attending": attending.to_dict(),
            }
    except DatabaseError as e:
        logger.error(f"Failed to create event and alumni attending: {e}")
        raise HTTPException(status_code=500, detail="Failed to create event and alumni attending")

    return result

@router.put("/{event_id}")
async def update_networking(event_id: int, payload: NetworkingUpdate, database: Database = Depends(get_database)):
    """
    Update an event and add or update one alumni attending it.
    Only supplied fields are changed.
    """
    try:
        with database.session() as session:
            event, attending = attendance.upsert_by_event(session, event_id, payload)
            result = {
                "message": "Event and AlumniAttending updated successfully",
                "event": event.to_dict(),
                "alumni_attending": attending.to_dict(),
            }
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except DatabaseError as e:
        logger.error(f"Failed to update event {event_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update event and alumni attending")

    return result
