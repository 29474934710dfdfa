"""News feed route."""

from fastapi import APIRouter, Depends
from typing import Any, List, Dict

from ...db import Database
from ...news import NewsAggregator
from ..dependencies import get_database

router = APIRouter(prefix="/admin", tags=["news"])

@router.get("/news", response_model=List[Dict[str, Any]])
async def get_news(database: Database = Depends(get_database)):
    """
    Latest events, achievements and professional updates, newest first.
    Sources that fail to load are left out rather than failing the request.
    """
    return [item.to_dict() for item in NewsAggregator(database).build_feed()]
