"""
Health check router.

Provides a liveness/readiness endpoint. Readiness includes a trivial
round trip to the database.
"""

import logging

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from todoapp.core.config import settings
from todoapp.interfaces.tasks.dependencies import get_engine
from todoapp.interfaces.tasks.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    try:
        with get_engine().connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.warning("Database unreachable during health check", exc_info=True)
        return HealthResponse(status="degraded", version=settings.version)
    return HealthResponse(status="ok", version=settings.version)
