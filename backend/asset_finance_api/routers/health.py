"""
Liveness and readiness probes.

/api/health answers as long as the process is up; /api/health/detailed also
round-trips to the database and answers 503 when it cannot.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.config.logging import get_logger
from shared.config.settings import settings
from shared.infrastructure.db import get_db

logger = get_logger(__name__)

router = APIRouter(prefix="/api/health", tags=["health"])


def _service_info() -> dict:
    return {"service": settings.service_name, "environment": settings.environment}


def database_status(db: Session) -> dict:
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Database probe failed", error=str(e))
        return {"status": "unhealthy", "error": str(e)}
    return {"status": "healthy"}


@router.get("")
def health_check():
    return {"status": "healthy", **_service_info()}


@router.get("/detailed")
def detailed_health_check(db: Session = Depends(get_db)):
    database = database_status(db)
    healthy = database["status"] == "healthy"
    body = {
        "status": "healthy" if healthy else "degraded",
        **_service_info(),
        "dependencies": {"database": database},
    }
    return body if healthy else JSONResponse(content=body, status_code=503)
