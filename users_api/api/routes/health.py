"""Health & Readiness Probes — liveness and storage readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 if the users file cannot be loaded (readiness)
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from users_api.core.errors import StorageError
from users_api.core.repository_protocols import UserStore
from users_api.infrastructure.json_store import get_user_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "users-api"}


@router.get("/ready")
async def readiness_check(store: UserStore = Depends(get_user_store)):
    """Readiness probe: the users file must load."""
    try:
        users = await store.load()
    except StorageError as e:
        logger.warning(f"Readiness check failed: {e.message}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "storage_unavailable"},
        )
    return {"status": "ready", "checks": {"storage": "healthy", "users": len(users)}}
