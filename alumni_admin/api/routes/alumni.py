"""Routes for alumni achievements and professional history."""

import logging
from fastapi import APIRouter, HTTPException, Depends
from typing import Any, List, Dict

from ...db import Database, DatabaseError
from ...errors import NotFoundError
from ... import views
from ..dependencies import get_database

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["alumni"])

@router.get("/achievements", response_model=List[Dict[str, Any]])
async def get_achievements(database: Database = Depends(get_database)):
    """Achievements with the name, branch and batch of their alumni."""
    try:
        with database.session() as session:
            return views.achievements(session)
    except DatabaseError as e:
        logger.error(f"Failed to load achievements: {e}")
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")

@router.get("/alumni/professional-information", response_model=List[Dict[str, Any]])
async def get_alumni_directory(database: Database = Depends(get_database)):
    """Alumni directory with each alumni's current company."""
    try:
        with database.session() as session:
            return views.directory(session)
    except DatabaseError as e:
        logger.error(f"Failed to load alumni directory: {e}")
        raise HTTPException(status_code=500, detail="Error fetching alumni profiles")

@router.get("/alumni/{alumni_id}/professional-information", response_model=Dict[str, Any])
async def get_alumni_professional_information(alumni_id: int, database: Database = Depends(get_database)):
    """One alumni profile with its full professional history."""
    try:
        with database.session() as session:
            return views.profile_with_history(session, alumni_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except DatabaseError as e:
        logger.error(f"Failed to load alumni {alumni_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")
