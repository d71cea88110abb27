"""Users Routes — the five CRUD endpoints over the user collection.

Invariants:
    - Response envelopes: {usersData}, {user}, {id}
    - Path ids arrive as raw strings; a non-numeric id is a 404, never a 400
    - POST accepts any JSON object unvalidated; PUT validates before loading

Design Decisions:
    - PUT body typed as Any and validated in the service: validation lives in
      one place and the service stays usable outside HTTP
    - Errors raised by the service are rendered by api/error_handlers.py
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from users_api.services.user_service import UserService, get_user_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.get("")
async def list_users(service: UserService = Depends(get_user_service)):
    """Return the whole collection."""
    return {"usersData": await service.list_users()}


@router.get("/{user_id}")
async def get_user(
    user_id: str, service: UserService = Depends(get_user_service),
):
    return {"user": await service.get_user(user_id)}


@router.post("")
async def create_user(
    payload: dict[str, Any] | None = Body(None),
    service: UserService = Depends(get_user_service),
):
    """Create a user from an arbitrary object. Returns only the assigned id."""
    user_id = await service.create_user(payload or {})
    return {"id": user_id}


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    payload: Any = Body(None),
    service: UserService = Depends(get_user_service),
):
    return {"user": await service.update_user(user_id, payload)}


@router.delete("/{user_id}")
async def delete_user(
    user_id: str, service: UserService = Depends(get_user_service),
):
    return {"user": await service.delete_user(user_id)}
