"""Health Probes — liveness and readiness for the container orchestrator.

Invariants:
    - GET /api/v1/health/ is 200 whenever the process serves requests
    - GET /api/v1/health/ready is 503 until the database answers
    - Neither check needs a session or touches application tables

Design Decisions:
    - db_manager is looked up through the module on each call: the lifespan
      assigns it after this module is imported
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from wordbank import __version__
from wordbank.infrastructure import database

router = APIRouter(prefix="/api/v1/health", tags=["health"])


async def _database_ready() -> bool:
    manager = database.db_manager
    return manager is not None and await manager.health_check()


@router.get("/")
async def liveness():
    return {"status": "healthy", "service": "wordbank-api", "version": __version__}


@router.get("/ready")
async def readiness():
    if await _database_ready():
        return {"status": "ready", "checks": {"database": "healthy"}}
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": "database_unavailable"},
    )
