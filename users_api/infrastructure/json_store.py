"""JSON File Store — whole-file read-modify-write persistence for the user collection.

Invariants:
    - load() reads the entire file; save() rewrites the entire file
    - Missing, unreadable, non-UTF-8, malformed, or non-array content → StorageError
    - File written pretty-printed (indent=2), no version header
    - No temp-file/rename, no fsync, no locking: a crash mid-write can corrupt
      the store, and concurrent writers lose updates (last writer wins)

Design Decisions:
    - Blocking IO pushed to a worker thread so the event loop keeps serving
    - Module-level singleton initialized on startup by the lifespan, like a
      connection manager; get_user_store() is the FastAPI dependency
"""

import asyncio
import json
import logging
from pathlib import Path

from users_api.core.domain_types import UserCollection
from users_api.core.errors import StorageError
from users_api.core.repository_protocols import UserStore

logger = logging.getLogger(__name__)


class JsonFileUserStore:
    """UserStore backed by a single JSON array on disk."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    async def load(self) -> UserCollection:
        return await asyncio.to_thread(self._read)

    async def save(self, users: UserCollection) -> None:
        await asyncio.to_thread(self._write, users)

    def ensure_exists(self) -> bool:
        """Create an empty collection file if none exists. Returns True if created."""
        if self.path.exists():
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("[]", encoding="utf-8")
        except OSError as e:
            logger.error(
                f"Cannot create users file {self.path}: {e}",
                extra={"operation": "create"},
            )
            raise StorageError(str(e), "create") from e
        logger.info(f"Created empty users file at {self.path}")
        return True

    def _read(self) -> UserCollection:
        # Failures are logged once, by the API error handler that renders them
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(str(e), "load") from e
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"malformed JSON in {self.path}: {e}", "load") from e
        if not isinstance(data, list) or not all(isinstance(u, dict) for u in data):
            raise StorageError(f"{self.path} is not an array of objects", "load")
        return data

    def _write(self, users: UserCollection) -> None:
        try:
            payload = json.dumps(users, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageError(f"unserializable collection: {e}", "save") from e
        try:
            self.path.write_text(payload, encoding="utf-8")
        except OSError as e:
            raise StorageError(str(e), "save") from e


# Singletons (initialized on startup)
user_store: JsonFileUserStore | None = None
write_lock: asyncio.Lock | None = None


def init_store(
    path: Path | str, *, autocreate: bool = True, serialize_writes: bool = False,
) -> JsonFileUserStore:
    global user_store, write_lock
    store = JsonFileUserStore(path)
    if autocreate:
        store.ensure_exists()
    user_store = store
    write_lock = asyncio.Lock() if serialize_writes else None
    return store


def get_user_store() -> UserStore:
    """FastAPI dependency for the user store."""
    if user_store is None:
        raise RuntimeError("User store not initialized")
    return user_store


def get_write_lock() -> asyncio.Lock | None:
    """FastAPI dependency: the single-writer lock, or None when writes are unserialized."""
    return write_lock
