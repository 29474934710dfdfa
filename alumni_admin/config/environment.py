"""Deployment environment for the alumni admin backend.

Reads `.env` (if present) and decides between the development setup, SQLite
under data/ with API docs enabled, and the production one, PostgreSQL from
DATABASE_URL with docs switched off and CORS restricted. Import this before
anything that reads the database or CORS settings:

    from alumni_admin.config.environment import IS_PRODUCTION_ENVIRONMENT

Set ENVIRONMENT=production on the host; anything else falls back to
development with a warning.
"""

import os
import logging
from dotenv import load_dotenv

# Must run before the database and CORS modules read os.environ
load_dotenv()

env_setting = os.environ.get('ENVIRONMENT', '').lower()
IS_PRODUCTION_ENVIRONMENT = env_setting == 'production'

if env_setting not in ['development', 'production']:
    logging.warning(
        f"Environment setting '{env_setting}' is invalid or not specified. "
        "Expected 'development' or 'production'. Defaulting to development environment."
    )

__all__ = ['IS_PRODUCTION_ENVIRONMENT']
