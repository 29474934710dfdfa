"""Events router module."""

import logging
from fastapi import APIRouter, HTTPException, Depends
from typing import Any, List, Dict

from ...db import Database, DatabaseError
from ...errors import NotFoundError
from ... import accessors
from ..dependencies import get_database

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["events"])

@router.get("/events", response_model=List[Dict[str, Any]])
async def get_events(database: Database = Depends(get_database)):
    """Get all events ordered by their scheduled time."""
    try:
        with database.session() as session:
            return [event.to_dict() for event in accessors.list_events(session)]
    except DatabaseError as e:
        logger.error(f"Failed to list events: {e}")
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")

@router.get("/events/{event_id}", response_model=Dict[str, Any])
async def get_event(event_id: int, database: Database = Depends(get_database)):
    """Get a single event by ID."""
    try:
        with database.session() as session:
            return accessors.get_event(session, event_id).to_dict()
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except DatabaseError as e:
        logger.error(f"Failed to load event {event_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")
