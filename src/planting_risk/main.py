"""FastAPI application entry point for the Rainy Day planting service.

Mounts the v1 API router under ``/api/v1``. Run directly to serve with
uvicorn.
"""

from fastapi import FastAPI
from planting_risk.api.v1.routes import api_router
from planting_risk.auth.config import settings
from planting_risk.logging_utils import setup_logging
import argparse
import uvicorn


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns
    -------
    FastAPI
        Application with the v1 router mounted at /api/v1.
    """
    setup_logging(settings.LOG_LEVEL)
    app = FastAPI(title=settings.APP_NAME)
    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()

if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Rainy Day planting flood-risk service")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8008)
    args = parser.parse_args()

    uvicorn.run(app, host=args.host, port=args.port)
