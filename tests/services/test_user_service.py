"""User Service — load/mutate/save orchestration against the in-memory fake.

Invariants:
    - Reads never save; each mutation saves once
    - Invalid updates fail before the store is loaded
    - Without the write lock, overlapping writers lose updates (last writer wins)
    - With the write lock, overlapping writers see each other's changes
"""

import asyncio

import pytest

from users_api.core.errors import NotFoundError, StorageError, ValidationError
from users_api.services.user_service import UserService, validate_update
from tests.fake_store import InMemoryUserStore


def _seed():
    return [{"id": 1, "firstName": "Ann", "secondName": "Lee", "age": 40}]


async def test_list_users_returns_collection_without_saving():
    store = InMemoryUserStore(_seed())
    assert await UserService(store).list_users() == _seed()
    assert store.saves == 0


async def test_get_user_unknown_id_raises_not_found():
    with pytest.raises(NotFoundError):
        await UserService(InMemoryUserStore(_seed())).get_user("2")


async def test_get_user_non_numeric_id_raises_not_found():
    with pytest.raises(NotFoundError):
        await UserService(InMemoryUserStore(_seed())).get_user("abc")


async def test_create_user_returns_size_plus_one_and_persists():
    store = InMemoryUserStore(_seed())
    service = UserService(store)
    user_id = await service.create_user({"firstName": "Jo", "secondName": "Doe", "age": 25})
    assert user_id == 2
    assert await service.get_user("2") == {
        "id": 2, "firstName": "Jo", "secondName": "Doe", "age": 25,
    }
    assert store.saves == 1


async def test_update_user_validates_before_loading():
    store = InMemoryUserStore(_seed())
    store.fail_on = "load"
    with pytest.raises(ValidationError) as info:
        await UserService(store).update_user("1", {"firstName": "A"})
    fields = {d["field"] for d in info.value.details}
    assert fields == {"secondName", "age"}


async def test_update_user_unknown_id_raises_not_found_without_saving():
    store = InMemoryUserStore(_seed())
    with pytest.raises(NotFoundError):
        await UserService(store).update_user(
            "9", {"firstName": "A", "secondName": "B", "age": 1},
        )
    assert store.saves == 0


async def test_delete_user_returns_removed_record():
    store = InMemoryUserStore(_seed())
    removed = await UserService(store).delete_user("1")
    assert removed["firstName"] == "Ann"
    assert store.users == []


async def test_save_failure_propagates_storage_error():
    store = InMemoryUserStore(_seed())
    store.fail_on = "save"
    with pytest.raises(StorageError):
        await UserService(store).delete_user("1")
    assert store.users == _seed()


def test_validate_update_rejects_non_object_payload():
    with pytest.raises(ValidationError):
        validate_update(None)
    with pytest.raises(ValidationError):
        validate_update(["firstName"])


# --- concurrency --------------------------------------------------------------

async def test_concurrent_creates_without_lock_lose_an_update():
    store = InMemoryUserStore(yield_points=True)
    service = UserService(store)

    ids = await asyncio.gather(
        service.create_user({"firstName": "A"}),
        service.create_user({"firstName": "B"}),
    )

    assert ids == [1, 1]
    assert len(store.users) == 1


async def test_concurrent_creates_with_lock_keep_both():
    store = InMemoryUserStore(yield_points=True)
    service = UserService(store, asyncio.Lock())

    ids = await asyncio.gather(
        service.create_user({"firstName": "A"}),
        service.create_user({"firstName": "B"}),
    )

    assert sorted(ids) == [1, 2]
    assert [u["firstName"] for u in store.users] == ["A", "B"]
