"""
Health API endpoints
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.core.config import config
from app.core.errors import ErrorResponse
from app.core.logger import logger
from app.db.mongodb import MongoConnectionManager
from app.dependencies.services import get_connection_manager

router = APIRouter()

# Track service start time
start_time = time.time()


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health")
def health_check():
    """Liveness probe; never touches the database"""
    return {
        "status": "healthy",
        "service": config.service_name,
        "version": config.service_version,
        "timestamp": _timestamp(),
        "uptime": round(time.time() - start_time, 2),
    }


@router.get("/health/ready")
async def readiness_check(manager: MongoConnectionManager = Depends(get_connection_manager)):
    """Readiness probe - connects if needed and pings MongoDB"""
    check_start = time.time()
    try:
        await manager.ensure_connected()
        healthy = await manager.ping()
        error = None if healthy else "MongoDB did not answer ping"
    except ErrorResponse as e:
        healthy = False
        error = e.message

    check = {
        "name": "database",
        "status": "healthy" if healthy else "unhealthy",
        "response_time_ms": round((time.time() - check_start) * 1000, 2),
    }
    if error:
        check["error"] = error

    if healthy:
        return {"status": "ready", "service": config.service_name, "timestamp": _timestamp(), "checks": [check]}

    logger.warning(
        "Readiness check failed",
        metadata={"event": "readiness_check_failed", "error": error}
    )
    return JSONResponse(
        status_code=503,
        content={"status": "not ready", "service": config.service_name, "timestamp": _timestamp(), "checks": [check]},
    )
