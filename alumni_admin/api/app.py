"""FastAPI application configuration module."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Internal imports
from alumni_admin.config.environment import IS_PRODUCTION_ENVIRONMENT # Environment must be imported first
from alumni_admin import __version__
from alumni_admin.config.cors import CORS_CONFIG
from alumni_admin.utils.logging_config import setup_logging
from alumni_admin.db import Database, DatabaseConfig
from .routes import (
    alumni_attending,
    networking,
    events,
    alumni,
    news,
    health
)

setup_logging()
logger = logging.getLogger(__name__)

def _lifespan(database: Optional[Database]):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the database on startup and release it on shutdown."""
        db = database or Database(DatabaseConfig())
        try:
            db.ensure_tables_exist()
            logger.info("Database initialized successfully")
        except Exception as e:
            logger.error(f"Startup failed: {e}")
            raise
        app.state.database = db
        try:
            yield
        finally:
            db.close()
    return lifespan

async def _bad_request_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and path parameters are a plain 400."""
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())},
    )

def create_application(database: Optional[Database] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database: Database to serve from. When omitted one is built from
                  DatabaseConfig() at startup.
    """
    app = FastAPI(
        title="Alumni Admin API",
        description="Administrative API for alumni events, attendance and news",
        version=__version__,
        docs_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/docs',
        redoc_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/redoc',
        lifespan=_lifespan(database)
    )

    app.add_middleware(CORSMiddleware, **CORS_CONFIG)
    app.add_exception_handler(RequestValidationError, _bad_request_handler)

    app.include_router(health.router)
    app.include_router(events.router)
    app.include_router(alumni_attending.router)
    app.include_router(networking.router)
    app.include_router(alumni.router)
    app.include_router(news.router)

    return app

# Create the application instance
app = create_application()
