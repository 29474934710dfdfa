"""FastAPI dependencies shared by the routers."""

from fastapi import Request

from ..db import Database

def get_database(request: Request) -> Database:
    """The process-wide database built in the application lifespan."""
    return request.app.state.database
