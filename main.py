"""Main application entry point."""

from alumni_admin.config.environment import IS_PRODUCTION_ENVIRONMENT
from alumni_admin.api.app import app

if __name__ == "__main__":
    import uvicorn
    if not IS_PRODUCTION_ENVIRONMENT:
        # Development mode - direct app instance for debugging
        uvicorn.run(
            app,
            host="0.0.0.0",
            port=8000,
            log_level="debug"
        )
    else:
        # Production mode - string reference required for multiple workers
        uvicorn.run(
            "alumni_admin.api.app:app",
            host="0.0.0.0",
            port=8000,
            reload=False,
            workers=4,
            log_level="info",
            proxy_headers=True,
            forwarded_allow_ips="*"
        )
