"""Boundary Protocols — contract between the service layer and storage.

Invariants:
    - load() returns the whole collection; save() replaces the whole collection
    - Both raise StorageError on any failure, never a raw OSError/ValueError
    - No caching: every load() reflects what was last saved

Design Decisions:
    - Protocol over ABC: the JSON file store and the in-memory test fake
      satisfy it structurally, no inheritance required
    - Async methods: implementations do IO; the collection logic in core/users.py
      stays sync and pure
"""

from typing import Protocol

from users_api.core.domain_types import UserCollection


class UserStore(Protocol):
    """Contract for user collection persistence."""
    async def load(self) -> UserCollection: ...
    async def save(self, users: UserCollection) -> None: ...
