"""Routes for reading and removing alumni attendance records."""

import logging
from fastapi import APIRouter, HTTPException, Depends
from typing import Any, List, Dict

from ...db import Database, DatabaseError
from ...errors import NotFoundError
from ... import accessors, attendance, views
from ..dependencies import get_database

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/alumni-attending", tags=["alumni-attending"])

@router.get("", response_model=List[Dict[str, Any]])
async def get_alumni_attending(database: Database = Depends(get_database)):
    """Alumni together with the events they attend."""
    try:
        with database.session() as session:
            return views.roster(session)
    except DatabaseError as e:
        logger.error(f"Failed to load alumni roster: {e}")
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")

@router.get("/{alumni_id}", response_model=List[Dict[str, Any]])
async def get_alumni_attending_by_alumni(alumni_id: int, database: Database = Depends(get_database)):
    """Events attended by one alumni; 404 when there are none."""
    try:
        with database.session() as session:
            return views.roster(session, alumni_id=alumni_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except DatabaseError as e:
        logger.error(f"Failed to load roster for alumni {alumni_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")

@router.get("/{alumni_id}/{event_id}", response_model=Dict[str, Any])
async def get_alumni_attending_record(alumni_id: int, event_id: int, database: Database = Depends(get_database)):
    """A single attendance record."""
    try:
        with database.session() as session:
            return accessors.get_attendance(session, event_id=event_id, alumni_id=alumni_id).to_dict()
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except DatabaseError as e:
        logger.error(f"Failed to load attendance ({alumni_id}, {event_id}): {e}")
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")

@router.delete("/{alumni_id}/{event_id}")
async def delete_alumni_attending(alumni_id: int, event_id: int, database: Database = Depends(get_database)):
    """Remove an alumni from an event. The event is kept."""
    try:
        with database.session() as session:
            attendance.delete(session, alumni_id=alumni_id, event_id=event_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except DatabaseError as e:
        logger.error(f"Failed to delete attendance ({alumni_id}, {event_id}): {e}")
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")

    return {"message": "Alumni attending record deleted successfully"}
