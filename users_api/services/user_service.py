"""User Service — load/mutate/save orchestration for each user operation.

Invariants:
    - The collection is loaded fresh for every call; nothing is cached
    - Reads never save; mutations save exactly once, after the in-memory change
    - Update payloads are validated BEFORE the store is touched
    - Lookup misses raise NotFoundError; storage failures propagate as StorageError

Design Decisions:
    - Optional asyncio.Lock wraps load→mutate→save for writers only. Without it
      (the default) overlapping writers each save their own stale snapshot and
      the last save wins
    - No retry on StorageError: the caller gets a generic 500 and the file is
      left as the failed write left it
"""

import logging
from contextlib import nullcontext
from typing import Any

from fastapi import Depends
from pydantic import ValidationError as PydanticValidationError

from users_api.core import users as collection
from users_api.core.domain_types import UserCollection, UserId, UserRecord
from users_api.core.errors import NotFoundError, ValidationError
from users_api.core.repository_protocols import UserStore
from users_api.infrastructure.json_store import get_user_store, get_write_lock
from users_api.schemas.user import UserUpdate, format_validation_details

logger = logging.getLogger(__name__)


class UserService:
    """CRUD over the whole-collection store."""

    def __init__(self, store: UserStore, write_lock=None):
        self._store = store
        self._write_lock = write_lock

    def _writer(self):
        return self._write_lock if self._write_lock is not None else nullcontext()

    async def list_users(self) -> UserCollection:
        return await self._store.load()

    async def get_user(self, raw_id: str) -> UserRecord:
        users = await self._store.load()
        user = collection.find_user(users, collection.parse_user_id(raw_id))
        if user is None:
            raise NotFoundError(raw_id)
        return user

    async def create_user(self, payload: dict[str, Any]) -> UserId:
        async with self._writer():
            users = await self._store.load()
            user_id, _ = collection.create_user(users, payload)
            await self._store.save(users)
        logger.info(f"Created user {user_id}", extra={"user_id": user_id})
        return user_id

    async def update_user(self, raw_id: str, payload: Any) -> UserRecord:
        fields = validate_update(payload)
        async with self._writer():
            users = await self._store.load()
            index = collection.find_user_index(
                users, collection.parse_user_id(raw_id),
            )
            if index is None:
                raise NotFoundError(raw_id)
            updated = collection.apply_update(users, index, fields.model_dump())
            await self._store.save(users)
        logger.info(f"Updated user {raw_id}", extra={"user_id": updated.get("id")})
        return updated

    async def delete_user(self, raw_id: str) -> UserRecord:
        async with self._writer():
            users = await self._store.load()
            index = collection.find_user_index(
                users, collection.parse_user_id(raw_id),
            )
            if index is None:
                raise NotFoundError(raw_id)
            removed = collection.remove_user(users, index)
            await self._store.save(users)
        logger.info(f"Deleted user {raw_id}", extra={"user_id": removed.get("id")})
        return removed


def validate_update(payload: Any) -> UserUpdate:
    """Validate a raw update body, mapping pydantic errors to ValidationError."""
    try:
        return UserUpdate.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(format_validation_details(e.errors())) from e


def get_user_service(
    store: UserStore = Depends(get_user_store),
    write_lock=Depends(get_write_lock),
) -> UserService:
    """FastAPI dependency building a per-request service."""
    return UserService(store, write_lock)
